# mips_tracer/loader/loader.py
"""
コードローダーモジュール。
アセンブリソースファイルを1行ずつ読み込み、命令列に変換してCPUにロードします。
"""
from typing import List, Optional

from mips_tracer.arch.mips.cpu import MipsCpu
from mips_tracer.arch.mips.instruction import Instruction
from mips_tracer.loader.assembler import BaseAssembler, LogSink, MipsAssembler

class AssemblyLoader:
    """
    アセンブリソースコードを解析し、デコード済み命令列としてCPUにロードする簡易ローダー。
    不正な行やファイルの読み込みエラーは例外にせず、ログ出力先へ報告します。
    """
    def __init__(self, assembler: Optional[BaseAssembler] = None, log: LogSink = print):
        self._assembler = assembler or MipsAssembler()
        self._log = log

    # @intent:responsibility ファイルを読み込んで命令列を返します。読めない場合は空のリストを返します。
    def read_program(self, file_path: str) -> List[Instruction]:
        try:
            with open(file_path, 'r', encoding="utf-8") as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError) as e:
            self._log(f"File reading error: {e}")
            return []
        return self._assembler.assemble(lines, self._log)

    # @intent:responsibility ファイルを読み込み、CPUのプログラムを差し替えます。
    # @intent:post-condition CPUはリセットされる。読み込みに失敗した場合は空プログラムで終了状態になる。
    def load_assembly(self, file_path: str, cpu: MipsCpu) -> List[Instruction]:
        program = self.read_program(file_path)
        cpu.set_instruction_set(program)
        return program

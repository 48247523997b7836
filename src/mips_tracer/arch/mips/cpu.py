# src/mips_tracer/arch/mips/cpu.py
"""
MIPS CPUエミュレーションの中心モジュール。
"""
from typing import Dict, List, Optional, Sequence, Tuple

from mips_tracer.common.types import Listing
from mips_tracer.core.cpu import AbstractCpu
from mips_tracer.arch.mips.instruction import Instruction
from mips_tracer.arch.mips.registers import REGISTER_NAMES
from mips_tracer.arch.mips.state import MipsCpuState
from mips_tracer.arch.mips.instructions import execute_instruction
from mips_tracer.arch.mips import disassembler
from mips_tracer.transport.memory import DataMemory

# @intent:responsibility MIPSの命令列を1命令ずつ実行し、レジスタとメモリの変更を追跡します。
class MipsCpu(AbstractCpu):
    """
    MIPS32のサブセットをエミュレートするクラス。
    プログラムはバイナリではなくデコード済み命令のリストとして保持し、
    命令 i はアドレス 4*i に置かれているものとして扱います。
    """
    # @intent:responsibility MipsCpuを初期化します。プログラムは空です。
    def __init__(self, memory: DataMemory):
        self._program: List[Instruction] = []
        super().__init__(memory)

    # @intent:responsibility MIPSの初期状態を生成します。
    def _create_initial_state(self) -> MipsCpuState:
        return MipsCpuState()

    # @intent:responsibility プログラムを差し替え、状態をリセットします。
    # @intent:post-condition 空のプログラムの場合は即座に終了状態になります。
    def set_instruction_set(self, program: Sequence[Instruction]) -> None:
        with self._lock:
            self._program = list(program)
            self.reset()
            if not self._program:
                self._state.done = True

    def get_program(self) -> List[Instruction]:
        with self._lock:
            return list(self._program)

    # @intent:responsibility PC/4 の位置にある命令を返します。範囲外ならNone。
    def _fetch(self) -> Optional[Instruction]:
        index = self._state.pc // 4
        if 0 <= index < len(self._program):
            return self._program[index]
        return None

    # @intent:responsibility 命令を実行し、状態を更新します。
    def _execute(self, instruction: Instruction) -> None:
        execute_instruction(instruction, self._state, self._memory)

    # --- Observers ---

    def get_registers(self) -> List[int]:
        with self._lock:
            return list(self._state.registers)

    # @intent:responsibility リセット以降に書き込まれたレジスタ番号を書き込み順で返します。
    def get_changed_registers(self) -> List[int]:
        with self._lock:
            return list(self._state.changed_registers)

    # @intent:responsibility リセット以降にストアされたメモリワードのインデックスを書き込み順で返します。
    def get_changed_memory(self) -> List[int]:
        with self._lock:
            return list(self._state.changed_memory)

    # @intent:responsibility 変更されたレジスタの (番号, 値) を1回のロックで取得します。
    def get_changed_register_values(self) -> List[Tuple[int, int]]:
        with self._lock:
            return [(index, self._state.registers[index]) for index in self._state.changed_registers]

    # @intent:responsibility 変更されたメモリワードの (インデックス, 値) を1回のロックで取得します。
    def get_changed_memory_values(self) -> List[Tuple[int, int]]:
        with self._lock:
            return [(index, self._memory.peek(index)) for index in self._state.changed_memory]

    # @intent:responsibility UI表示用に、正規のレジスタ名と値の辞書を提供します。
    def get_register_map(self) -> Dict[str, int]:
        with self._lock:
            return dict(zip(REGISTER_NAMES, self._state.registers))

    # @intent:responsibility 指定範囲の命令を逆アセンブルします。
    def disassemble(self, start_addr: int, length: int) -> Listing:
        with self._lock:
            return disassembler.disassemble(self._program, start_addr, length)

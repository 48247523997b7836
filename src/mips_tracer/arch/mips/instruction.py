# src/mips_tracer/arch/mips/instruction.py
"""
デコード済みMIPS命令のデータ構造。
"""
from dataclasses import dataclass
from enum import Enum

# @intent:responsibility 命令の分類を定義します。実行時のディスパッチキーとして使用されます。
class InstructionCategory(Enum):
    R = "R"
    I = "I"
    LOAD_STORE = "LOAD_STORE"
    JUMP = "JUMP"
    BRANCH = "BRANCH"
    NOP = "NOP"
    EXIT = "EXIT"

# @intent:responsibility アセンブラが1行から生成する不変の命令レコード。
@dataclass(frozen=True) # 不変データ構造
class Instruction:
    """
    1行のソースから生成されたデコード済み命令。
    使用しないオペランドスロットは0のままです。
    """
    source: str # 表示用の元のソーステキスト
    category: InstructionCategory
    mnemonic: str # 小文字のニーモニック 例: "addi"
    code: int = 0 # ファンクション/オペコード番号 (nop, exitは0)
    rd: int = 0
    rs: int = 0
    rt: int = 0
    imm: int = 0 # 符号付き16ビット

    # @intent:responsibility 命令リスト表示用の文字列を返します。
    def representation(self) -> str:
        if self.category == InstructionCategory.R:
            return f"{self.source:<25}"
        return f"{self.source:<25} (imm: {self.imm})"

    def __str__(self) -> str:
        return self.source

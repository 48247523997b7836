# src/mips_tracer/arch/mips/instructions/maps.py
"""
ニーモニックと命令実装のマッピング定義。
"""
from mips_tracer.arch.mips.instruction import InstructionCategory
from . import alu
from . import load
from . import control
from .base import OpcodeInfo

# @intent:map ニーモニック（小文字）から分類とファンクション/オペコード番号へのマッピングテーブル。
MNEMONIC_MAP = {
    # R-type
    "add": OpcodeInfo(InstructionCategory.R, 32),
    "sub": OpcodeInfo(InstructionCategory.R, 34),
    "mult": OpcodeInfo(InstructionCategory.R, 24),
    "div": OpcodeInfo(InstructionCategory.R, 26),
    "and": OpcodeInfo(InstructionCategory.R, 36),
    "or": OpcodeInfo(InstructionCategory.R, 37),
    "nor": OpcodeInfo(InstructionCategory.R, 39),
    "slt": OpcodeInfo(InstructionCategory.R, 42),

    # I-type
    "addi": OpcodeInfo(InstructionCategory.I, 32),
    "subi": OpcodeInfo(InstructionCategory.I, 34),
    "andi": OpcodeInfo(InstructionCategory.I, 36),
    "xori": OpcodeInfo(InstructionCategory.I, 38),

    # Load/Store
    "lw": OpcodeInfo(InstructionCategory.LOAD_STORE, load.LW_OPCODE),
    "sw": OpcodeInfo(InstructionCategory.LOAD_STORE, load.SW_OPCODE),

    # Control
    "j": OpcodeInfo(InstructionCategory.JUMP, 2),
    "beq": OpcodeInfo(InstructionCategory.BRANCH, 4),
    "nop": OpcodeInfo(InstructionCategory.NOP),
    "exit": OpcodeInfo(InstructionCategory.EXIT),
}

# @intent:map 命令分類から実行関数へのマッピングテーブル。
EXECUTE_MAP = {
    InstructionCategory.R: alu.execute_r_type,
    InstructionCategory.I: alu.execute_i_type,
    InstructionCategory.LOAD_STORE: load.execute_load_store,
    InstructionCategory.JUMP: control.execute_j,
    InstructionCategory.BRANCH: control.execute_beq,
    InstructionCategory.NOP: control.execute_nop,
    InstructionCategory.EXIT: control.execute_exit,
}

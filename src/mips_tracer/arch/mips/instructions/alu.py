# src/mips_tracer/arch/mips/instructions/alu.py
"""
算術論理演算命令（R形式、I形式）の実装。
"""
from mips_tracer.arch.mips.instruction import Instruction
from mips_tracer.arch.mips.state import MipsCpuState
from mips_tracer.transport.memory import DataMemory
from .base import sign_extend16, to_signed32, truncating_div

DIV_FUNCT = 26

# @intent:map R形式のファンクション番号から演算へのマッピング。
R_FUNCTION_MAP = {
    32: lambda a, b: a + b,           # add
    34: lambda a, b: a - b,           # sub
    24: lambda a, b: a * b,           # mult (下位32ビットのみ)
    26: truncating_div,               # div
    36: lambda a, b: a & b,           # and
    37: lambda a, b: a | b,           # or
    39: lambda a, b: ~(a | b),        # nor
    42: lambda a, b: 1 if a < b else 0,  # slt
}

# @intent:map I形式のオペコードから演算へのマッピング。
I_FUNCTION_MAP = {
    32: lambda a, b: a + b,  # addi
    34: lambda a, b: a - b,  # subi
    36: lambda a, b: a & b,  # andi
    38: lambda a, b: a ^ b,  # xori
}

# @intent:responsibility R形式命令を実行し、R[rd] <- f(R[rs], R[rt]) を行います。
# @intent:post-condition ゼロ除算の場合はdoneを立て、rdは書き換えません。
def execute_r_type(state: MipsCpuState, memory: DataMemory, inst: Instruction) -> None:
    lhs = state.registers[inst.rs]
    rhs = state.registers[inst.rt]
    if inst.code == DIV_FUNCT and rhs == 0:
        state.done = True
        return
    result = R_FUNCTION_MAP[inst.code](lhs, rhs)
    state.write_register(inst.rd, to_signed32(result))

# @intent:responsibility I形式命令を実行します。ソース順の第1オペランド(rs)が書き込み先です。
def execute_i_type(state: MipsCpuState, memory: DataMemory, inst: Instruction) -> None:
    source = state.registers[inst.rt]
    result = I_FUNCTION_MAP[inst.code](source, sign_extend16(inst.imm))
    state.write_register(inst.rs, to_signed32(result))

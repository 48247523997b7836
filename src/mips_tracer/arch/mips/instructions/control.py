# src/mips_tracer/arch/mips/instructions/control.py
"""
制御命令（ジャンプ、分岐、NOP、EXIT）の実装。
PCはフェッチ時に既に+4されています。
"""
from mips_tracer.arch.mips.instruction import Instruction
from mips_tracer.arch.mips.state import MipsCpuState
from mips_tracer.transport.memory import DataMemory

# --- J ---
# @intent:responsibility 命令インデックスimmへジャンプします (PC <- 4 * imm)。
def execute_j(state: MipsCpuState, memory: DataMemory, inst: Instruction) -> None:
    state.pc = 4 * inst.imm

# --- BEQ ---
# @intent:responsibility R[rs] == R[rt] なら命令インデックスimmへ分岐します。遅延スロットはありません。
def execute_beq(state: MipsCpuState, memory: DataMemory, inst: Instruction) -> None:
    if state.registers[inst.rs] == state.registers[inst.rt]:
        state.pc = 4 * inst.imm

# --- NOP ---
def execute_nop(state: MipsCpuState, memory: DataMemory, inst: Instruction) -> None:
    pass

# --- EXIT ---
def execute_exit(state: MipsCpuState, memory: DataMemory, inst: Instruction) -> None:
    state.done = True

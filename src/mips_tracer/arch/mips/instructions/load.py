# src/mips_tracer/arch/mips/instructions/load.py
"""
ロード/ストア命令の実装。
"""
from mips_tracer.arch.mips.instruction import Instruction
from mips_tracer.arch.mips.state import MipsCpuState
from mips_tracer.transport.memory import DataMemory
from .base import word_index

LW_OPCODE = 35
SW_OPCODE = 43

# --- LW ---
# @intent:responsibility R[rt] <- memory[(R[rs] + imm) / 4]。読み込みは変更集合に記録しません。
def execute_lw(state: MipsCpuState, memory: DataMemory, inst: Instruction) -> None:
    index = word_index(state, inst.rs, inst.imm)
    try:
        value = memory.read(index)
    except IndexError:
        state.done = True
        return
    state.write_register(inst.rt, value)

# --- SW ---
# @intent:responsibility memory[(R[rs] + imm) / 4] <- R[rt]。書き込んだワードを変更集合に記録します。
def execute_sw(state: MipsCpuState, memory: DataMemory, inst: Instruction) -> None:
    index = word_index(state, inst.rs, inst.imm)
    try:
        memory.write(index, state.registers[inst.rt])
    except IndexError:
        state.done = True
        return
    state.mark_memory_changed(index)

# @intent:map オペコードからロード/ストア実装へのマッピング。
LOAD_STORE_MAP = {
    LW_OPCODE: execute_lw,
    SW_OPCODE: execute_sw,
}

def execute_load_store(state: MipsCpuState, memory: DataMemory, inst: Instruction) -> None:
    LOAD_STORE_MAP[inst.code](state, memory, inst)

# src/mips_tracer/arch/mips/instructions/__init__.py
"""
MIPS命令セット実装パッケージ。
"""
from typing import Optional

from mips_tracer.transport.memory import DataMemory
from mips_tracer.arch.mips.instruction import Instruction
from mips_tracer.arch.mips.state import MipsCpuState
from .base import OpcodeInfo
from .maps import MNEMONIC_MAP, EXECUTE_MAP

# @intent:responsibility ニーモニックを分類とコードに解決します。未知のニーモニックはNone。
def lookup_mnemonic(mnemonic: str) -> Optional[OpcodeInfo]:
    return MNEMONIC_MAP.get(mnemonic.lower())

# @intent:responsibility デコードされたMIPS命令を実行します。
def execute_instruction(instruction: Instruction, state: MipsCpuState, memory: DataMemory) -> None:
    """
    デコードされたMIPS命令を実行し、CPUの状態を変更します。
    """
    executor = EXECUTE_MAP.get(instruction.category)
    if executor:
        executor(state, memory, instruction)

# src/mips_tracer/arch/mips/state.py
"""
MIPS CPU固有の状態定義。
"""
from dataclasses import dataclass, field
from typing import Dict, List

from mips_tracer.core.state import CpuState

REGISTER_COUNT = 32

# @intent:responsibility MIPSの汎用レジスタ32本と、リセット以降の変更集合を保持します。
@dataclass
class MipsCpuState(CpuState):
    """
    MIPS CPUのレジスタ状態を保持するデータクラス。
    変更集合は挿入順を保つためdictのキーとして保持します（値は常にNone）。
    """
    registers: List[int] = field(default_factory=lambda: [0] * REGISTER_COUNT)
    changed_registers: Dict[int, None] = field(default_factory=dict)
    changed_memory: Dict[int, None] = field(default_factory=dict)

    # @intent:responsibility レジスタへ書き込み、変更集合に記録します。$zeroも例外なく書き込まれます。
    def write_register(self, index: int, value: int) -> None:
        self.registers[index] = value
        self.changed_registers[index] = None

    def mark_memory_changed(self, index: int) -> None:
        self.changed_memory[index] = None

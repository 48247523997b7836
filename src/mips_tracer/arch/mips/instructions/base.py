# src/mips_tracer/arch/mips/instructions/base.py
"""
MIPS命令実装用の共通ユーティリティ。
"""
from typing import NamedTuple

from mips_tracer.arch.mips.instruction import InstructionCategory
from mips_tracer.arch.mips.state import MipsCpuState
from mips_tracer.transport.memory import to_signed32

__all__ = ["OpcodeInfo", "to_signed32", "sign_extend16", "truncating_div", "word_index"]

# @intent:data_structure ニーモニック表の1エントリ（分類と、ファンクション/オペコード番号）。
class OpcodeInfo(NamedTuple):
    category: InstructionCategory
    code: int = 0

# @intent:utility_function 16ビット値を符号拡張します。
def sign_extend16(value: int) -> int:
    return ((value & 0xFFFF) ^ 0x8000) - 0x8000

# @intent:utility_function ゼロ方向へ丸める整数除算（Pythonの//は負の無限大方向へ丸めるため）。
# @intent:pre-condition divisorは0でないこと。
def truncating_div(dividend: int, divisor: int) -> int:
    quotient = abs(dividend) // abs(divisor)
    return quotient if (dividend < 0) == (divisor < 0) else -quotient

# @intent:utility_function ベースレジスタ+オフセットのバイトアドレスをワードインデックスに変換します。
def word_index(state: MipsCpuState, base_register: int, offset: int) -> int:
    address = state.registers[base_register] + sign_extend16(offset)
    return truncating_div(address, 4)

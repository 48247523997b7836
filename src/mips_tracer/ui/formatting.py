# src/mips_tracer/ui/formatting.py
"""
表示用の整形ロジック。

コアは生のインデックスと値だけを公開し、符号なし10進表記やレジスタ名への変換はこの層で行います。
Qtに依存しないため、ウィジェットなしで単体テストできます。
"""
from typing import List, Optional

from mips_tracer.arch.mips.cpu import MipsCpu
from mips_tracer.arch.mips.registers import name_of
from mips_tracer.common.types import MemoryEntry, RegisterEntry

# @intent:utility_function 値を符号なし32ビットの10進文字列にします。
def format_value(value: int) -> str:
    return str(value & 0xFFFFFFFF)

# @intent:utility_function ワードインデックスを16ビット符号付きに切り詰めます（表示用アドレス）。
def to_signed16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000

# @intent:responsibility PCから命令リストのハイライト行を求めます。プログラム外ならNone。
def highlight_index(pc: int, program_length: int) -> Optional[int]:
    index = pc // 4
    if 0 <= index < program_length:
        return index
    return None

def changed_register_entries(cpu: MipsCpu) -> List[RegisterEntry]:
    return [RegisterEntry(name_of(index), value) for index, value in cpu.get_changed_register_values()]

def changed_memory_entries(cpu: MipsCpu) -> List[MemoryEntry]:
    return [MemoryEntry(to_signed16(index), value) for index, value in cpu.get_changed_memory_values()]

def format_register_entry(entry: RegisterEntry) -> str:
    return f"{entry.name}: {format_value(entry.value)}"

def format_memory_entry(entry: MemoryEntry) -> str:
    return f"{entry.address}: {format_value(entry.value)}"

# @intent:utility_function PCラベル用の表示文字列。
def format_pc(pc: int) -> str:
    return f"PC: {pc} ({pc:#010x})"

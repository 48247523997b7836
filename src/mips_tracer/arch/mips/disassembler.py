# src/mips_tracer/arch/mips/disassembler.py
"""
MIPS Disassembler

ロード済みのプログラム（デコード済み命令列）から、表示用のリストを生成します。
命令はソーステキストを保持しているため、バイナリの解析は不要です。
"""
from typing import Sequence

from mips_tracer.common.types import Listing, ListingLine
from mips_tracer.arch.mips.instruction import Instruction, InstructionCategory

# @intent:responsibility 指定されたアドレス範囲の命令を逆アセンブルし、表示用データを生成します。
def disassemble(program: Sequence[Instruction], start_addr: int, length: int) -> Listing:
    """
    [start_addr, start_addr + length) の範囲にある命令を列挙します。
    アドレスは4バイト境界に切り下げて扱います。

    Returns:
        List of (address, immediate, text) tuples.
    """
    result = []
    first = max(start_addr, 0) // 4
    end_addr = start_addr + length

    for index in range(first, len(program)):
        address = index * 4
        if address >= end_addr:
            break
        instruction = program[index]
        immediate = ""
        if instruction.category != InstructionCategory.R:
            immediate = str(instruction.imm)
        result.append(ListingLine(address, immediate, instruction.source))

    return result

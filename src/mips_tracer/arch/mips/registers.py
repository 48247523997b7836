# src/mips_tracer/arch/mips/registers.py
"""
MIPSレジスタ名カタログ。

レジスタ名（`$zero`, `$r3` など）とレジスタ番号（0〜31）の双方向の対応を提供します。
状態を持たない純粋なモジュールです。
"""
import re
from typing import Dict, Tuple

# @intent:constant 固定名レジスタ。
_FIXED_NAMES: Dict[str, int] = {
    "$zero": 0,
    "$one": 1,
    "$gp": 28,
    "$sp": 29,
    "$fp": 30,
    "$ra": 31,
}

# @intent:constant 番号付きレジスタ族: プレフィックス -> (先頭スロット, 受理するサフィックス数)
# @intent:rationale `$r` は8以上で更に+8される（`$r8` -> 24）。`$r8`〜`$r11` が 24〜27 を埋めるため、
#                  全スロットがちょうど1つの正規名を持つ。16〜23 は `$s` 族が占める。
_FAMILIES: Dict[str, Tuple[int, int]] = {
    "v": (2, 2),
    "a": (4, 4),
    "r": (8, 12),
    "s": (16, 8),
}

_NUMBERED = re.compile(r"^\$([a-z])([0-9]+)$")


def _family_slot(prefix: str, number: int) -> int:
    base, _ = _FAMILIES[prefix]
    slot = base + number
    if prefix == "r" and number >= 8:
        slot += 8
    return slot


# @intent:responsibility レジスタ名文字列をレジスタ番号に変換します。
def index_of(name: str) -> int:
    """
    レジスタ名を解析してレジスタ番号（0〜31）を返します。
    大文字小文字は区別しません。

    Raises:
        ValueError: `$`で始まらない、未知のプレフィックス、数字でないサフィックス、範囲外の番号。
    """
    token = name.strip().lower()
    if not token.startswith("$"):
        raise ValueError(f"Invalid register {name}: must start with '$'")
    if token in _FIXED_NAMES:
        return _FIXED_NAMES[token]
    if len(token) < 2 or token[1] not in _FAMILIES:
        raise ValueError(f"Invalid register {name}: unknown prefix")
    match = _NUMBERED.match(token)
    if not match:
        raise ValueError(f"Invalid register {name}: suffix is not a number")
    prefix, digits = match.group(1), match.group(2)
    number = int(digits)
    if number >= _FAMILIES[prefix][1]:
        raise ValueError(f"Invalid register {name}: out of range")
    return _family_slot(prefix, number)


def _build_names() -> Tuple[str, ...]:
    names = [""] * 32
    for fixed, slot in _FIXED_NAMES.items():
        names[slot] = fixed
    for prefix, (_, count) in _FAMILIES.items():
        for number in range(count):
            names[_family_slot(prefix, number)] = f"${prefix}{number}"
    return tuple(names)


# @intent:constant レジスタ番号順の正規名一覧。
REGISTER_NAMES: Tuple[str, ...] = _build_names()


# @intent:responsibility レジスタ番号から、index_ofが同じ番号を返す正規名を返します。
def name_of(index: int) -> str:
    if not 0 <= index < len(REGISTER_NAMES):
        raise ValueError(f"Register index {index} out of range")
    return REGISTER_NAMES[index]

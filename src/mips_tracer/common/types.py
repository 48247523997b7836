"""
共通の型定義を提供するモジュール。
CPU、ローダー、UIなど複数のレイヤーで使用される表示用のレコード型を定義します。
"""
from typing import List, NamedTuple

# @intent:data_structure 変更されたレジスタ1件分の表示データ。値は生の符号付き32ビット整数。
class RegisterEntry(NamedTuple):
    name: str
    value: int

# @intent:data_structure 変更されたメモリワード1件分の表示データ。
class MemoryEntry(NamedTuple):
    address: int  # 16ビット符号付きに切り詰めたワードインデックス
    value: int

# @intent:data_structure 逆アセンブル結果の1行 (アドレス, imm表記, ソーステキスト)。
class ListingLine(NamedTuple):
    address: int
    immediate: str
    text: str

Listing = List[ListingLine]

# mips_tracer/core/state.py
"""
Core Layer (CPU状態)

このモジュールは、CPUの基本的な状態（PCと終了フラグ）を保持するデータ構造を定義します。
"""
from dataclasses import dataclass

# @intent:responsibility CPUの基本状態を保持します。アーキテクチャ固有のレジスタはこれを拡張します。
@dataclass
class CpuState:
    """
    CPUの状態を保持するデータクラス。
    これは抽象的な基底状態であり、具体的なアーキテクチャ（mips/state.py）で拡張されます。
    """
    pc: int = 0  # Program Counter (バイト単位)
    done: bool = False  # 終了フラグ。Trueの間はstepが何もしない。

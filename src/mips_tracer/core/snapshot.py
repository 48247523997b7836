# mips_tracer/core/snapshot.py
"""
実行状態の不変スナップショット

このモジュールは、1ステップ実行後のCPUとメモリアクセスの状態を記録した不変のデータ構造を定義します。
UIへの情報提供と、デバッガでのブレークポイント判定に用いる責務を負います。
"""
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

from mips_tracer.core.state import CpuState
from mips_tracer.transport.memory import MemoryAccess

if TYPE_CHECKING:
    from mips_tracer.arch.mips.instruction import Instruction

# @intent:responsibility 実行に関するメタデータを記録します。
@dataclass(frozen=True) # 不変データ構造
class Metadata:
    """
    実行に関するメタデータ（累計ステップ数、表示用の命令情報）を記録するデータクラス。
    """
    step_count: int
    symbol_info: Optional[str] = None # 例: "0x0004: addi $r1 $zero 4"

# @intent:responsibility ある一時点におけるCPUの完全な状態を不変に記録します。
@dataclass(frozen=True) # 不変データ構造
class Snapshot:
    """
    1ステップ実行後のCPU状態と、そのステップで発生したメモリアクセスを記録します。
    stateは実行後の状態のコピーであり、以後のstepで変化しません。
    """
    state: CpuState
    instruction: Optional["Instruction"] # 何も実行されなかった場合はNone
    metadata: Metadata
    memory_activity: List[MemoryAccess] = field(default_factory=list)

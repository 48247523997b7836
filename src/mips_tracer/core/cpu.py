# mips_tracer/core/cpu.py
"""
Core Layer (抽象CPU)

このモジュールは、CPUの基本的な状態管理と命令サイクルの駆動に関する抽象化を提供します。
具体的な命令の振る舞いはInstruction Layerに移譲されます。
"""
import copy
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from mips_tracer.common.types import Listing
from mips_tracer.core.snapshot import Snapshot, Metadata
from mips_tracer.core.state import CpuState
from mips_tracer.transport.memory import DataMemory

# @intent:responsibility 抽象CPUの基本機能とインターフェースを定義します。
class AbstractCpu(ABC):
    """
    全てのCPUエミュレーションの基底となる抽象クラス。
    データメモリとのインターフェース、基本的な状態管理、命令サイクルの抽象化を提供します。
    """
    # @intent:responsibility CPUの状態とメモリへの参照を初期化します。
    # @intent:pre-condition `memory`は有効なDataMemoryオブジェクトである必要があります。
    def __init__(self, memory: DataMemory):
        self._memory = memory
        self._state: CpuState = self._create_initial_state()
        self._step_count: int = 0
        # @intent:rationale stepと観測メソッドを直列化し、UIスレッドが命令の途中状態を見ないようにする。
        self._lock = threading.RLock()

    # @intent:responsibility 初期状態のCpuStateオブジェクトを生成します。
    @abstractmethod
    def _create_initial_state(self) -> CpuState:
        """
        CPUの初期状態を生成して返します。
        """
        pass

    # @intent:responsibility CPUとメモリをリセットし、初期状態に戻します。
    def reset(self) -> None:
        """
        PC、レジスタ、メモリ、変更集合、終了フラグを初期値に戻します。
        """
        with self._lock:
            self._state = self._create_initial_state()
            self._memory.clear()
            self._step_count = 0

    # @intent:responsibility 現在のCPUの状態のコピーを返します。
    def get_state(self) -> CpuState:
        with self._lock:
            return copy.deepcopy(self._state)

    def get_pc(self) -> int:
        with self._lock:
            return self._state.pc

    def is_done(self) -> bool:
        with self._lock:
            return self._state.done

    def get_memory(self) -> List[int]:
        with self._lock:
            return self._memory.dump()

    # @intent:responsibility 現在のPCが指す命令をフェッチします。範囲外ならNoneを返します。
    @abstractmethod
    def _fetch(self) -> Optional[Any]:
        pass

    # @intent:responsibility フェッチした命令を実行し、CPUの状態を更新します。
    @abstractmethod
    def _execute(self, instruction: Any) -> None:
        pass

    # @intent:responsibility CPUを1命令サイクル進め、その結果のスナップショットを返します。
    # @intent:rationale Template Methodパターンを採用し、共通の実行フロー（ログクリア→終了判定→フェッチ→PC更新→実行→Snapshot生成）を定義します。
    def step(self) -> Snapshot:
        """
        CPUを1命令サイクル進め、その時点でのCPUとメモリアクセスを含むSnapshotを返します。
        終了状態ではなにも実行せず、現在の状態のSnapshotを返します。
        """
        with self._lock:
            # 1. 前処理: 前サイクルまでの残存ログを破棄
            self._memory.get_and_clear_activity_log()
            initial_pc = self._state.pc

            # 2. 終了判定
            if self._state.done:
                return self._create_snapshot(initial_pc, None)

            # 3. フェッチ (範囲外なら終了)
            instruction = self._fetch()
            if instruction is None:
                self._state.done = True
                return self._create_snapshot(initial_pc, None)

            # 4. PC更新 (Hook)
            self._update_pc(instruction)

            # 5. 実行
            self._execute(instruction)
            self._step_count += 1

            # 6. 後処理 & Snapshot生成
            return self._create_snapshot(initial_pc, instruction)

    # @intent:responsibility 命令実行前にPCを更新します。
    def _update_pc(self, instruction: Any) -> None:
        """
        命令実行前のPC更新。デフォルトは1ワード(4バイト)進める。
        分岐命令は実行時にPCを上書きします。
        """
        self._state.pc += 4

    # @intent:responsibility スナップショットを生成します。
    def _create_snapshot(self, initial_pc: int, instruction: Optional[Any]) -> Snapshot:
        memory_activity = self._memory.get_and_clear_activity_log()

        symbol_info = None
        if instruction is not None:
            symbol_info = f"{initial_pc:#06x}: {instruction}"

        # 実行後の状態はコピーして固定する（以後のstepでSnapshotが変化しないように）
        return Snapshot(
            state=copy.deepcopy(self._state),
            instruction=instruction,
            metadata=Metadata(step_count=self._step_count, symbol_info=symbol_info),
            memory_activity=memory_activity
        )

    @abstractmethod
    def get_register_map(self) -> Dict[str, int]:
        """
        現在のレジスタ値を辞書形式で返す。
        UIがCPUの内部構造を知らなくても値を表示できるようにするために使用される。
        """
        pass

    @abstractmethod
    def disassemble(self, start_addr: int, length: int) -> Listing:
        """
        指定されたアドレス範囲の命令を (address, immediate, text) のリストで返す。
        """
        pass

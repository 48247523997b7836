# mips_tracer/debugger/debugger.py
"""
デバッガモジュール。

コアエンジンの実行を制御し、終了・停止要求・ユーザーが指定した条件（ブレークポイント）で
連続実行を中断させる責務を負います。スレッドはUI層が所有し、本モジュールは協調的な停止フラグのみを持ちます。
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
import time

from mips_tracer.arch.mips.cpu import MipsCpu
from mips_tracer.arch.mips.registers import index_of
from mips_tracer.core.snapshot import Snapshot
from mips_tracer.transport.memory import MemoryAccessType

# @intent:responsibility ブレークポイントの条件タイプを定義します。
class BreakpointConditionType(Enum):
    PC_MATCH = "PC_MATCH"               # プログラムカウンタが特定のアドレスに一致
    MEMORY_READ = "MEMORY_READ"         # 特定のワードが読み込まれた
    MEMORY_WRITE = "MEMORY_WRITE"       # 特定のワードに書き込まれた
    REGISTER_VALUE = "REGISTER_VALUE"   # 特定のレジスタが特定の値になった
    REGISTER_CHANGE = "REGISTER_CHANGE" # 特定のレジスタの値が変化した

_REGISTER_CONDITIONS = (BreakpointConditionType.REGISTER_VALUE, BreakpointConditionType.REGISTER_CHANGE)

# @intent:responsibility ブレークポイントをトリガーする条件を定義します。
@dataclass(frozen=True)
class BreakpointCondition:
    """
    ブレークポイントがヒットするための条件を定義するデータクラス。
    """
    condition_type: BreakpointConditionType
    value: Optional[int] = None           # PC_MATCH(バイトアドレス), REGISTER_VALUEで使用
    address: Optional[int] = None         # MEMORY_READ, MEMORY_WRITEで使用（ワードインデックス）
    register_name: Optional[str] = None   # REGISTER_VALUE, REGISTER_CHANGEで使用
    enabled: bool = True                  # 有効/無効状態

# @intent:responsibility コアエンジンの実行制御とブレークポイント管理を行います。
class Debugger:
    """
    CPUの実行を制御し、ブレークポイントの管理を行うクラス。
    """
    def __init__(self, cpu: MipsCpu):
        self._cpu = cpu
        self._breakpoints: List[BreakpointCondition] = []
        self._running: bool = False
        self._previous_registers: List[int] = cpu.get_registers()
        self._last_snapshot: Optional[Snapshot] = None

    def get_cpu(self) -> MipsCpu:
        return self._cpu

    def add_breakpoint(self, condition: BreakpointCondition) -> None:
        """
        ブレークポイント条件を追加します。レジスタ条件の名前が不正な場合はValueErrorになります。
        """
        self._validate(condition)
        if condition not in self._breakpoints:
            self._breakpoints.append(condition)

    def update_breakpoint(self, old_condition: BreakpointCondition, new_condition: BreakpointCondition) -> None:
        """
        既存のブレークポイントを更新します。
        """
        self._validate(new_condition)
        if old_condition in self._breakpoints:
            idx = self._breakpoints.index(old_condition)
            self._breakpoints[idx] = new_condition

    def remove_breakpoint(self, condition: BreakpointCondition) -> None:
        if condition in self._breakpoints:
            self._breakpoints.remove(condition)

    def get_breakpoints(self) -> List[BreakpointCondition]:
        return list(self._breakpoints)

    def _validate(self, condition: BreakpointCondition) -> None:
        if condition.condition_type in _REGISTER_CONDITIONS:
            index_of(condition.register_name or "")

    # @intent:responsibility 指定PCで有効なPC_MATCHブレークポイントがあるか判定します。
    def _pc_breakpoint_hit(self, pc: int) -> bool:
        for bp in self._breakpoints:
            if bp.enabled and bp.condition_type == BreakpointConditionType.PC_MATCH and bp.value == pc:
                return True
        return False

    def _check_other_breakpoints(self, snapshot: Snapshot) -> bool:
        """
        Snapshotに基づいてPC_MATCH以外のブレークポイントをチェックします。
        """
        registers = snapshot.state.registers

        for bp in self._breakpoints:
            if not bp.enabled:
                continue

            if bp.condition_type == BreakpointConditionType.MEMORY_READ:
                for access in snapshot.memory_activity:
                    if access.access_type == MemoryAccessType.READ and access.index == bp.address:
                        return True
            elif bp.condition_type == BreakpointConditionType.MEMORY_WRITE:
                for access in snapshot.memory_activity:
                    if access.access_type == MemoryAccessType.WRITE and access.index == bp.address:
                        return True
            elif bp.condition_type == BreakpointConditionType.REGISTER_VALUE:
                if registers[index_of(bp.register_name)] == bp.value:
                    return True
            elif bp.condition_type == BreakpointConditionType.REGISTER_CHANGE:
                index = index_of(bp.register_name)
                if registers[index] != self._previous_registers[index]:
                    return True
        return False

    def step_instruction(self) -> Snapshot:
        """
        CPUを1命令分実行し、その結果のSnapshotを返します。
        """
        self._previous_registers = self._cpu.get_registers()
        snapshot = self._cpu.step()
        self._last_snapshot = snapshot
        return snapshot

    def get_last_snapshot(self) -> Optional[Snapshot]:
        return self._last_snapshot

    def is_running(self) -> bool:
        return self._running

    def run(self) -> None:
        """
        CPUが終了するか、stop()が呼ばれるか、ブレークポイントにヒットするまで実行を継続します。
        呼び出し元スレッドをブロックします（UIはQThreadから呼び出します）。
        """
        self._running = True
        # 現在のPCにあるブレークポイントでは止まらない（ブレークポイントからの再開を可能にする）
        resuming = True

        while self._running and not self._cpu.is_done():
            time.sleep(0)

            current_pc = self._cpu.get_pc()
            if not resuming and self._pc_breakpoint_hit(current_pc):
                self._running = False
                print(f"Breakpoint hit at PC: {current_pc:#06x}")
                return
            resuming = False

            snapshot = self.step_instruction()

            if self._check_other_breakpoints(snapshot):
                self._running = False
                print(f"Breakpoint hit at PC: {snapshot.state.pc:#06x}")
                return

        self._running = False

    def stop(self) -> None:
        """
        連続実行の停止を要求します。実行中の命令の完了後、次の命令境界で停止します。
        """
        self._running = False

    # @intent:responsibility 連続実行を停止したうえでCPUをリセットします。
    # @intent:pre-condition run()を実行しているスレッドは終了している必要があります（UIはwait()してから呼び出す）。
    def reset(self) -> None:
        self.stop()
        self._cpu.reset()
        self._previous_registers = self._cpu.get_registers()
        self._last_snapshot = None

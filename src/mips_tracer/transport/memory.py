# mips_tracer/transport/memory.py
"""
Transport Layer (データメモリ)

このモジュールは、32ビットワード単位のデータメモリを抽象化し、
読み書きアクセスを記録する責務を負います。
"""
from dataclasses import dataclass
from enum import Enum
from typing import List

DEFAULT_MEMORY_WORDS = 4096

# @intent:responsibility メモリアクセスを記録するためのタイプを定義します。
class MemoryAccessType(Enum):
    READ = "READ"
    WRITE = "WRITE"

# @intent:responsibility 個々のメモリアクセス操作を記録します。
@dataclass(frozen=True) # 不変データ構造
class MemoryAccess:
    """
    データメモリ上で行われた単一のアクセス（読み込みまたは書き込み）を記録するデータクラス。
    """
    index: int # ワードインデックス
    data: int # 32bit signed value
    access_type: MemoryAccessType

# @intent:utility_function 任意の整数を符号付き32ビットの範囲に折り返します。
def to_signed32(value: int) -> int:
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000

# @intent:responsibility ワードアドレスのデータメモリを管理し、全てのアクセスを記録します。
# @intent:rationale アクセスログをSnapshotに含めることで、変更追跡とブレークポイント判定を同じ情報源で行います。
class DataMemory:
    """
    固定サイズの32ビットワード配列。
    範囲外アクセスはIndexErrorとなり、呼び出し側（命令実装）がフォールトとして扱います。
    """
    # @intent:responsibility 指定されたワード数のメモリ領域をゼロで初期化します。
    # @intent:pre-condition sizeは正の整数である必要があります。
    def __init__(self, size: int = DEFAULT_MEMORY_WORDS):
        if not isinstance(size, int) or size <= 0:
            raise ValueError("Memory size must be a positive integer.")
        self._size = size
        self._words: List[int] = [0] * size
        self._activity_log: List[MemoryAccess] = []

    def get_size(self) -> int:
        return self._size

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"Word index {index} out of bounds for memory of {self._size} words.")

    def _log_access(self, index: int, data: int, access_type: MemoryAccessType) -> None:
        self._activity_log.append(MemoryAccess(index=index, data=data, access_type=access_type))

    # @intent:responsibility 記録されたアクセスログを取得し、クリアします。
    def get_and_clear_activity_log(self) -> List[MemoryAccess]:
        log = self._activity_log
        self._activity_log = []
        return log

    # @intent:responsibility 指定されたワードを読み出し、アクセスを記録します。
    def read(self, index: int) -> int:
        self._check_index(index)
        data = self._words[index]
        self._log_access(index, data, MemoryAccessType.READ)
        return data

    # @intent:responsibility ログを記録せずにワードを読み出します。UIなどのインスペクタ用。
    def peek(self, index: int) -> int:
        self._check_index(index)
        return self._words[index]

    # @intent:responsibility 指定されたワードに値を書き込み、アクセスを記録します。
    def write(self, index: int, data: int) -> None:
        self._check_index(index)
        data = to_signed32(data)
        self._words[index] = data
        self._log_access(index, data, MemoryAccessType.WRITE)

    # @intent:responsibility メモリ全体のコピーを返します。
    def dump(self) -> List[int]:
        return list(self._words)

    # @intent:responsibility 全ワードをゼロに戻し、アクセスログを破棄します。
    def clear(self) -> None:
        self._words = [0] * self._size
        self._activity_log = []

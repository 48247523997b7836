from dataclasses import dataclass
from typing import Optional

from mips_tracer.transport.memory import DEFAULT_MEMORY_WORDS

SUPPORTED_ARCHITECTURES = ("MIPS32",)

@dataclass
class SystemConfig:
    architecture: str = "MIPS32"
    memory_words: int = DEFAULT_MEMORY_WORDS  # データメモリのワード数
    program: Optional[str] = None  # 起動時にロードするアセンブリファイル

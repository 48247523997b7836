import os
import yaml
from typing import Dict, Any
from .models import SystemConfig, SUPPORTED_ARCHITECTURES
from mips_tracer.transport.memory import DEFAULT_MEMORY_WORDS

class ConfigLoader:
    def load_from_file(self, path: str) -> SystemConfig:
        with open(path, 'r', encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        config = self._parse_config(data)
        # programは設定ファイルからの相対パスとして解決する
        if config.program and not os.path.isabs(config.program):
            config.program = os.path.join(os.path.dirname(os.path.abspath(path)), config.program)
        return config

    def _parse_config(self, data: Dict[str, Any]) -> SystemConfig:
        if not isinstance(data, dict):
            raise ValueError("Config root must be a mapping")

        arch = str(data.get("architecture", "MIPS32")).upper()
        if arch not in SUPPORTED_ARCHITECTURES:
            raise ValueError(f"Unsupported architecture: {arch}")

        memory_words = self._parse_int(data.get("memory_words", DEFAULT_MEMORY_WORDS))
        if memory_words <= 0:
            raise ValueError(f"memory_words must be positive: {memory_words}")

        program = data.get("program")

        return SystemConfig(
            architecture=arch,
            memory_words=memory_words,
            program=str(program) if program else None
        )

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")

# tests/config/test_config.py
"""
mips_tracer.configパッケージ（YAML読み込みとシステム構築）の単体テスト。
"""
import os

import pytest

from mips_tracer.config.builder import SystemBuilder
from mips_tracer.config.loader import ConfigLoader
from mips_tracer.config.models import SystemConfig

# @intent:test_suite YAML構成ファイルの解析と検証。
class TestConfigLoader:
    def write(self, tmp_path, text):
        path = tmp_path / "system.yaml"
        path.write_text(text)
        return str(path)

    def test_load_full_config(self, tmp_path):
        path = self.write(tmp_path, "architecture: mips32\nmemory_words: 0x100\nprogram: prog.asm\n")
        config = ConfigLoader().load_from_file(path)
        assert config.architecture == "MIPS32"
        assert config.memory_words == 256
        assert config.program == os.path.join(str(tmp_path), "prog.asm")

    def test_defaults(self, tmp_path):
        config = ConfigLoader().load_from_file(self.write(tmp_path, ""))
        assert config == SystemConfig()

    def test_absolute_program_path_is_kept(self, tmp_path):
        program = str(tmp_path / "abs.asm")
        config = ConfigLoader().load_from_file(self.write(tmp_path, f"program: {program}\n"))
        assert config.program == program

    @pytest.mark.parametrize("text", [
        "architecture: Z80\n",
        "memory_words: 0\n",
        "memory_words: -4\n",
        "memory_words: true\n",
        "memory_words: lots\n",
        "- a list\n",
    ])
    def test_invalid_config(self, tmp_path, text):
        with pytest.raises(ValueError):
            ConfigLoader().load_from_file(self.write(tmp_path, text))

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            ConfigLoader().load_from_file(str(tmp_path / "missing.yaml"))

# @intent:test_suite 構成からCPUとメモリを組み立てる処理の検証。
class TestSystemBuilder:
    def test_build_without_program(self):
        cpu, memory = SystemBuilder().build_system(SystemConfig(memory_words=32))
        assert memory.get_size() == 32
        assert cpu.get_program() == []
        assert cpu.get_memory() == [0] * 32

    def test_build_with_program(self, tmp_path):
        source = tmp_path / "prog.asm"
        source.write_text("addi $r0 $zero 1\nexit\n")
        cpu, _ = SystemBuilder().build_system(SystemConfig(program=str(source)))
        assert len(cpu.get_program()) == 2
        assert not cpu.is_done()

    def test_build_reports_load_errors(self, tmp_path):
        messages = []
        cpu, _ = SystemBuilder(log=messages.append).build_system(SystemConfig(program=str(tmp_path / "none.asm")))
        assert cpu.is_done()
        assert messages[0].startswith("File reading error:")

    def test_unsupported_architecture(self):
        with pytest.raises(ValueError):
            SystemBuilder().build_system(SystemConfig(architecture="6502"))

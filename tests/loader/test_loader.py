# tests/loader/test_loader.py
"""
mips_tracer.loader.loaderモジュールの単体テスト。
"""
from mips_tracer.arch.mips.cpu import MipsCpu
from mips_tracer.loader.loader import AssemblyLoader
from mips_tracer.transport.memory import DataMemory

# @intent:test_suite ファイルからのプログラム読み込みとCPUへのロードの検証。
class TestAssemblyLoader:
    def test_load_assembly(self, tmp_path):
        source = tmp_path / "prog.asm"
        source.write_text("addi $r0 $zero 5\n\nexit\n")
        cpu = MipsCpu(DataMemory())
        messages = []

        program = AssemblyLoader(log=messages.append).load_assembly(str(source), cpu)

        assert [inst.mnemonic for inst in program] == ["addi", "exit"]
        assert cpu.get_program() == program
        assert not cpu.is_done()
        assert messages == []

    def test_invalid_lines_are_reported(self, tmp_path):
        source = tmp_path / "prog.asm"
        source.write_text("nop\nadd $r0\nexit\n")
        messages = []

        program = AssemblyLoader(log=messages.append).read_program(str(source))

        assert len(program) == 2
        assert messages == ["Invalid instruction 'add $r0' on line 2"]

    def test_missing_file(self, tmp_path):
        cpu = MipsCpu(DataMemory())
        messages = []

        program = AssemblyLoader(log=messages.append).load_assembly(str(tmp_path / "missing.asm"), cpu)

        assert program == []
        assert cpu.is_done()
        assert len(messages) == 1
        assert messages[0].startswith("File reading error:")

    def test_default_log_is_print(self, tmp_path, capsys):
        source = tmp_path / "prog.asm"
        source.write_text("bogus\n")
        AssemblyLoader().read_program(str(source))
        assert "Invalid instruction 'bogus' on line 1" in capsys.readouterr().out

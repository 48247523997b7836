# tests/arch/mips/test_instructions_load.py
"""
MIPS lw/sw命令の単体テスト。
"""
import pytest

from mips_tracer.arch.mips.instructions import execute_instruction
from mips_tracer.arch.mips.state import MipsCpuState
from mips_tracer.loader.assembler import MipsAssembler
from mips_tracer.transport.memory import DataMemory, MemoryAccessType

# @intent:test_suite ワードインデックス計算、範囲外アクセス、変更追跡の検証。

class TestLoadStore:
    @pytest.fixture
    def state(self):
        return MipsCpuState()

    @pytest.fixture
    def memory(self):
        return DataMemory(16)

    @pytest.fixture
    def run(self, state, memory):
        assembler = MipsAssembler()
        def _run(line: str) -> None:
            execute_instruction(assembler.assemble_line(line), state, memory)
        return _run

    def test_sw_zero_offset(self, state, memory, run):
        state.registers[8] = 10
        run("sw $r0 0($zero)")
        assert memory.peek(0) == 10
        assert list(state.changed_memory) == [0]
        assert list(state.changed_registers) == []

    def test_sw_with_base_and_offset(self, state, memory, run):
        state.registers[8] = 7
        state.registers[9] = 8
        run("sw $r0 4($r1)")
        assert memory.peek(3) == 7
        assert list(state.changed_memory) == [3]

    def test_lw(self, state, memory, run):
        memory.write(2, 99)
        run("lw $r1 8($zero)")
        assert state.registers[9] == 99
        assert list(state.changed_registers) == [9]
        # ロードはメモリ変更として記録されない
        assert list(state.changed_memory) == []

    def test_bare_register_operand(self, state, memory, run):
        memory.write(1, 5)
        state.registers[8] = 4
        run("lw $r1 $r0")
        assert state.registers[9] == 5

    def test_hex_offset(self, state, memory, run):
        memory.write(4, 3)
        run("lw $r1 0x10($zero)")
        assert state.registers[9] == 3

    # @intent:test_case_truncation 負のアドレスはゼロ方向に切り捨てられたインデックスになります。
    def test_negative_address_truncates_toward_zero(self, state, memory, run):
        memory.write(0, 42)
        state.registers[8] = -2
        run("lw $r1 0($r0)")
        assert state.done is False
        assert state.registers[9] == 42

    def test_unaligned_address(self, state, memory, run):
        memory.write(1, 11)
        state.registers[8] = 7
        run("lw $r1 0($r0)")
        assert state.registers[9] == 11

    @pytest.mark.parametrize("line", ["sw $r0 -4($zero)", "sw $r0 64($zero)"])
    def test_sw_out_of_range(self, state, memory, run, line):
        state.registers[8] = 1
        run(line)
        assert state.done is True
        assert memory.dump() == [0] * 16
        assert list(state.changed_memory) == []

    def test_lw_out_of_range(self, state, memory, run):
        state.registers[9] = 77
        run("lw $r1 64($zero)")
        assert state.done is True
        assert state.registers[9] == 77
        assert list(state.changed_registers) == []

    def test_activity_log(self, state, memory, run):
        state.registers[8] = 6
        run("sw $r0 4($zero)")
        run("lw $r1 4($zero)")
        log = memory.get_and_clear_activity_log()
        assert [(a.index, a.access_type) for a in log] == [
            (1, MemoryAccessType.WRITE),
            (1, MemoryAccessType.READ),
        ]

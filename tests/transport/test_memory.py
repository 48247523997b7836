# tests/transport/test_memory.py
"""
mips_tracer.transport.memoryモジュールの単体テスト。
"""
import pytest

from mips_tracer.transport.memory import DataMemory, MemoryAccess, MemoryAccessType, to_signed32

# @intent:test_suite ワード単位データメモリの読み書き、範囲チェック、アクセスログの検証。

class TestDataMemory:
    @pytest.fixture
    def memory(self):
        return DataMemory(16)

    def test_default_size(self):
        assert DataMemory().get_size() == 4096

    @pytest.mark.parametrize("size", [0, -1, 1.5])
    def test_invalid_size(self, size):
        with pytest.raises(ValueError):
            DataMemory(size)

    def test_zero_initialized(self, memory):
        assert memory.dump() == [0] * 16

    def test_write_read(self, memory):
        memory.write(3, 42)
        assert memory.read(3) == 42
        assert memory.peek(3) == 42

    # @intent:test_case_wrap 書き込み値が符号付き32ビットに折り返されることを検証します。
    def test_write_wraps_to_signed32(self, memory):
        memory.write(0, 0xFFFFFFFF)
        assert memory.peek(0) == -1

    @pytest.mark.parametrize("index", [-1, 16, 1000])
    def test_out_of_bounds(self, memory, index):
        with pytest.raises(IndexError):
            memory.read(index)
        with pytest.raises(IndexError):
            memory.write(index, 1)
        with pytest.raises(IndexError):
            memory.peek(index)

    # @intent:test_case_activity_log read/writeは記録され、peekは記録されないことを検証します。
    def test_activity_log(self, memory):
        memory.write(1, 7)
        memory.read(1)
        memory.peek(1)
        log = memory.get_and_clear_activity_log()
        assert log == [
            MemoryAccess(index=1, data=7, access_type=MemoryAccessType.WRITE),
            MemoryAccess(index=1, data=7, access_type=MemoryAccessType.READ),
        ]
        assert memory.get_and_clear_activity_log() == []

    def test_failed_access_is_not_logged(self, memory):
        with pytest.raises(IndexError):
            memory.write(99, 1)
        assert memory.get_and_clear_activity_log() == []

    def test_clear(self, memory):
        memory.write(2, 5)
        memory.clear()
        assert memory.dump() == [0] * 16
        assert memory.get_and_clear_activity_log() == []

    def test_dump_is_a_copy(self, memory):
        dump = memory.dump()
        dump[0] = 99
        assert memory.peek(0) == 0

def test_to_signed32():
    assert to_signed32(0x7FFFFFFF) == 0x7FFFFFFF
    assert to_signed32(0x80000000) == -0x80000000
    assert to_signed32(-1) == -1
    assert to_signed32(1 << 32) == 0

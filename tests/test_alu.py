"""Tests for ALU operations (8xxx)."""

import pytest
from conftest import registers_with

PAIRS = [(0, 0), (1, 2), (0x10, 0x20), (0x80, 0x7F), (0xFF, 0x01), (0x80, 0x80), (0xFF, 0xFF), (0x30, 0x30)]


class TestBasicALU:
    """Test basic ALU operations."""

    @pytest.mark.parametrize("program, expected", [
        ("8120", 0x0F),   # LD V1, V2
        ("8121", 0xFF),   # OR
        ("8122", 0x00),   # AND
        ("8123", 0xFF),   # XOR
    ])
    def test_logic(self, make_processor, program, expected):
        processor = make_processor(program, registers=registers_with({1: 0xF0, 2: 0x0F, 0xF: 0x42}))

        processor.execute_instruction()

        assert processor.registers[1] == expected
        assert processor.registers[2] == 0x0F
        assert processor.registers[0xF] == 0x42  # VF untouched
        assert processor.program_counter == 0x202

    def test_xor_same(self, make_processor):
        """8XY3 - XOR with itself clears the register."""
        processor = make_processor("8553", registers=registers_with({5: 0xAA}))

        processor.execute_instruction()

        assert processor.registers[5] == 0


class TestALUArithmetic:
    """Test arithmetic ALU operations."""

    @pytest.mark.parametrize("vx, vy", PAIRS)
    def test_add(self, make_processor, vx, vy):
        """8XY4 - VF = 1 iff VX + VY > 255."""
        processor = make_processor("8124", registers=registers_with({1: vx, 2: vy}))

        processor.execute_instruction()

        assert processor.registers[1] == (vx + vy) % 256
        assert processor.registers[0xF] == (1 if vx + vy > 255 else 0)
        assert processor.program_counter == 0x202

    @pytest.mark.parametrize("vx, vy", PAIRS + [(0x20, 0x10)])
    def test_sub(self, make_processor, vx, vy):
        """8XY5 - VF = 1 iff VX > VY (strictly)."""
        processor = make_processor("8125", registers=registers_with({1: vx, 2: vy}))

        processor.execute_instruction()

        assert processor.registers[1] == (vx - vy) % 256
        assert processor.registers[0xF] == (1 if vx > vy else 0)

    def test_sub_equal_values_clear_flag(self, make_processor):
        processor = make_processor("8125", registers=registers_with({1: 0x30, 2: 0x30, 0xF: 1}))

        processor.execute_instruction()

        assert processor.registers[1] == 0
        assert processor.registers[0xF] == 0

    @pytest.mark.parametrize("vx, vy", PAIRS + [(0x20, 0x10)])
    def test_subn(self, make_processor, vx, vy):
        """8XY7 - VX = VY - VX, VF = 1 iff VY > VX."""
        processor = make_processor("8127", registers=registers_with({1: vx, 2: vy}))

        processor.execute_instruction()

        assert processor.registers[1] == (vy - vx) % 256
        assert processor.registers[0xF] == (1 if vy > vx else 0)

    def test_result_in_flag_register(self, make_processor):
        """When VX is VF the result overwrites the flag."""
        processor = make_processor("8F14", registers=registers_with({0xF: 0x10, 1: 0x20}))

        processor.execute_instruction()

        assert processor.registers[0xF] == 0x30


class TestALUShifts:
    """VF captures the bit shifted out, not the result."""

    @pytest.mark.parametrize("value", [0x00, 0x01, 0x04, 0x05, 0x80, 0xFF])
    def test_shift_right(self, make_processor, value):
        processor = make_processor("8346", registers=registers_with({3: value, 4: 0xFF}))

        processor.execute_instruction()

        assert processor.registers[3] == value >> 1
        assert processor.registers[0xF] == value & 1
        assert processor.registers[4] == 0xFF

    @pytest.mark.parametrize("value", [0x00, 0x01, 0x40, 0x81, 0x80, 0xFF])
    def test_shift_left(self, make_processor, value):
        processor = make_processor("834E", registers=registers_with({3: value, 4: 0xFF}))

        processor.execute_instruction()

        assert processor.registers[3] == (value << 1) % 256
        assert processor.registers[0xF] == (value >> 7) & 1
        assert processor.registers[4] == 0xFF

    def test_shift_right_into_flag_register(self, make_processor):
        """8F06 - VF takes the shifted-out bit, then VF itself is shifted."""
        processor = make_processor("8F06", registers=registers_with({0xF: 0x03}))

        processor.execute_instruction()

        assert processor.registers[0xF] == 0

    def test_shift_left_into_flag_register(self, make_processor):
        """8F0E - VF takes the shifted-out bit, then VF itself is shifted."""
        processor = make_processor("8F0E", registers=registers_with({0xF: 0xC0}))

        processor.execute_instruction()

        assert processor.registers[0xF] == 2

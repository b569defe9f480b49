"""Tests for control flow instructions."""

import pytest
from conftest import registers_with


class TestJumps:
    """Test jump and call instructions."""

    def test_jump(self, make_processor):
        """1NNN - Jump sets PC with no +2 offset."""
        processor = make_processor("1222")

        processor.execute_instruction()

        assert processor.program_counter == 0x222

    def test_call(self, make_processor):
        """2NNN - Call pushes the following address."""
        processor = make_processor("2095")

        processor.execute_instruction()

        assert processor.program_counter == 0x095
        assert processor.stack == (0x202,)

    def test_recursive_calls_grow_the_stack(self, make_processor):
        """CALL 200 at 0x200 recurses; the stack has no fixed depth."""
        processor = make_processor("2200")

        for _ in range(17):
            processor.execute_instruction()

        assert processor.program_counter == 0x200
        assert processor.stack == (0x202,) * 17

    def test_call_past_sixteen_addresses(self, make_processor):
        processor = make_processor("2095", stack=[0x300] * 16)

        processor.execute_instruction()

        assert len(processor.stack) == 17
        assert processor.stack[-1] == 0x202
        assert processor.program_counter == 0x095

    def test_jump_with_offset(self, make_processor):
        """BNNN - Jump to NNN + V0."""
        processor = make_processor("B300", registers=registers_with({0: 0x10, 1: 0x99}))

        processor.execute_instruction()

        assert processor.program_counter == 0x310


class TestSkips:
    """Skips advance PC by exactly 4, otherwise by exactly 2."""

    @pytest.mark.parametrize("program, value, expected_pc", [
        ("3A07", 7, 0x204),   # SE Vx, byte - equal
        ("3A06", 7, 0x202),   # SE Vx, byte - not equal
        ("4A06", 7, 0x204),   # SNE Vx, byte - not equal
        ("4A07", 7, 0x202),   # SNE Vx, byte - equal
    ])
    def test_skip_immediate(self, make_processor, program, value, expected_pc):
        processor = make_processor(program, registers=registers_with({0xA: value}))

        processor.execute_instruction()

        assert processor.program_counter == expected_pc

    @pytest.mark.parametrize("program, vx, vy, expected_pc", [
        ("5AB0", 7, 7, 0x204),   # SE Vx, Vy - equal
        ("5AB0", 7, 8, 0x202),   # SE Vx, Vy - not equal
        ("9AB0", 7, 8, 0x204),   # SNE Vx, Vy - not equal
        ("9AB0", 7, 7, 0x202),   # SNE Vx, Vy - equal
    ])
    def test_skip_register(self, make_processor, program, vx, vy, expected_pc):
        processor = make_processor(program, registers=registers_with({0xA: vx, 0xB: vy}))

        processor.execute_instruction()

        assert processor.program_counter == expected_pc


class TestKeySkips:
    """Test EX9E / EXA1."""

    def test_skip_if_key_pressed(self, make_processor):
        processor = make_processor("E59E", registers=registers_with({5: 0xB}))
        processor.key_pressed(0xB)

        processor.execute_instruction()

        assert processor.program_counter == 0x204

    def test_skip_if_key_pressed_without_key(self, make_processor):
        processor = make_processor("E59E", registers=registers_with({5: 0xB}))
        processor.key_pressed(0xC)

        processor.execute_instruction()

        assert processor.program_counter == 0x202

    def test_skip_if_key_not_pressed(self, make_processor):
        processor = make_processor("E5A1", registers=registers_with({5: 0xB}))

        processor.execute_instruction()

        assert processor.program_counter == 0x204

    def test_skip_if_key_not_pressed_with_key(self, make_processor):
        processor = make_processor("E5A1", registers=registers_with({5: 0xB}), pressed_keys={0xB})

        processor.execute_instruction()

        assert processor.program_counter == 0x202

    def test_register_beyond_keypad_is_never_pressed(self, make_processor):
        """A register value above 0xF does not alias a real key."""
        processor = make_processor("E59EE5A1", registers=registers_with({5: 0x1F}), pressed_keys={0xF})

        processor.execute_instruction()
        assert processor.program_counter == 0x202

        processor.execute_instruction()
        assert processor.program_counter == 0x206

"""Tests for register load, add, index and random instructions."""

from conftest import registers_with


def test_set_register(make_processor):
    """6XNN - Set VX = NN."""
    processor = make_processor("6A42")

    processor.execute_instruction()

    assert processor.registers[0xA] == 0x42
    assert processor.program_counter == 0x202


def test_add_immediate_wraps(make_processor):
    """7XNN - Add wraps modulo 256."""
    processor = make_processor("7AFF", registers=registers_with({0xA: 3}))

    processor.execute_instruction()

    assert processor.registers[0xA] == 2
    assert processor.program_counter == 0x202


def test_add_immediate_leaves_flag(make_processor):
    """7XNN - The carry is discarded, VF keeps its value."""
    processor = make_processor("7AFF", registers=registers_with({0xA: 0xFF, 0xF: 7}))

    processor.execute_instruction()

    assert processor.registers[0xA] == 0xFE
    assert processor.registers[0xF] == 7


def test_set_index(make_processor):
    """ANNN - Set I = NNN."""
    processor = make_processor("A123")

    processor.execute_instruction()

    assert processor.index_register == 0x123
    assert processor.program_counter == 0x202


class TestRandom:
    """Test CXNN."""

    def test_random_zero_mask(self, make_processor):
        processor = make_processor("C300", registers=registers_with({3: 0x55}))

        processor.execute_instruction()

        assert processor.registers[3] == 0
        assert processor.program_counter == 0x202

    def test_random_respects_mask(self, make_processor):
        processor = make_processor("C30F" * 8)

        for _ in range(8):
            processor.execute_instruction()
            assert processor.registers[3] <= 0x0F

    def test_random_consumes_key(self, make_processor):
        processor = make_processor("C3FF")
        key_before = processor.state.rng

        processor.execute_instruction()

        assert not (processor.state.rng == key_before).all()

    def test_random_is_seeded(self, make_processor):
        first = make_processor("C3FFC4FF", seed=42)
        second = make_processor("C3FFC4FF", seed=42)

        for _ in range(2):
            first.execute_instruction()
            second.execute_instruction()

        assert (first.registers == second.registers).all()

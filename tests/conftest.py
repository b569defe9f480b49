"""Test configuration and fixtures for CHIP-8 processor tests."""

import pytest
from chip8 import Processor, ProcessorConfig


@pytest.fixture
def make_processor():
    """Build a processor from a hex program string and state overrides."""
    def _make(program: str = "", **overrides) -> Processor:
        processor = Processor(ProcessorConfig(**overrides))
        if program:
            processor.load(bytes.fromhex(program))
        return processor
    return _make


def registers_with(values: dict) -> list:
    """Helper to build a 16-register list with some registers set."""
    registers = [0] * 16
    for index, value in values.items():
        registers[index] = value
    return registers


def pixel(processor: Processor, x: int, y: int) -> int:
    """Helper to read one frame buffer pixel."""
    return int(processor.frame_buffer[y * 64 + x])

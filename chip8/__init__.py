"""CHIP-8 processor package."""

from chip8.config import ProcessorConfig
from chip8.state import EmulatorState, create_state
from chip8.emulator import execute, fetch, step, load_rom, tick_timers
from chip8.decode import Instruction, Op, decode
from chip8.errors import Chip8Error, UnrecognizedOpcode, StackUnderflow
from chip8.processor import Processor
from chip8.constants import *

__all__ = [
    "Processor",
    "ProcessorConfig",
    "EmulatorState",
    "create_state",
    "fetch",
    "execute",
    "step",
    "load_rom",
    "tick_timers",
    "Instruction",
    "Op",
    "decode",
    "Chip8Error",
    "UnrecognizedOpcode",
    "StackUnderflow",
    "PROGRAM_START",
    "FONT_START",
    "SCREEN_WIDTH",
    "SCREEN_HEIGHT",
]

"""Processor: the stateful CHIP-8 CPU a host loop drives.

The processor owns one immutable ``EmulatorState`` and swaps in a new one on
every operation. Callers only see read-only views of that state: JAX arrays
cannot be mutated in place, and the stack and keypad are returned as a tuple
and a frozenset.

Typical host usage::

    processor = Processor()
    processor.load(rom_bytes)
    while running:
        processor.execute_instruction()   # at the emulated clock rate
        processor.timer_interrupt()       # at 60 Hz, independently
"""

from typing import Optional

import jax.numpy as jnp

from chip8.config import ProcessorConfig
from chip8.constants import PROGRAM_START
from chip8.decode import Instruction, decode
from chip8.emulator import (
    execute, fetch, load_bytes, load_rom, press_key, release_key, tick_timers,
)
from chip8.errors import Chip8Error
from chip8.logging import ConsoleLogger
from chip8.state import EmulatorState, create_state


class Processor:
    """CHIP-8 processor with fetch-decode-execute, timers and keypad.

    Attributes:
        state: Current emulator state
        logger: Console logger for execution traces
    """

    def __init__(
        self,
        config: Optional[ProcessorConfig] = None,
        logger: Optional[ConsoleLogger] = None,
    ):
        """Initialize the processor.

        Args:
            config: State overrides, mostly used by tests to seed registers,
                memory or the stack
            logger: Logger for instruction traces (a quiet default if None)
        """
        self.logger = logger or ConsoleLogger(name="cpu", log_level="WARNING")
        self.state: EmulatorState = create_state(config)

    def reset(self, config: Optional[ProcessorConfig] = None) -> None:
        """Reinitialise every field to defaults or the overrides in ``config``."""
        self.state = create_state(config)
        self.logger.info("Processor reset")

    def load(self, data: bytes, start_addr: int = PROGRAM_START) -> None:
        """Copy ``data`` into memory from ``start_addr``, without bounds checks."""
        self.state = load_bytes(self.state, data, start_addr)

    def load_rom(self, path: str) -> None:
        """Load a ROM file at 0x200."""
        self.state = load_rom(self.state, path)
        self.logger.info(f"Loaded ROM {path}")

    def fetch_opcode(self) -> int:
        """Return the 16-bit opcode at PC."""
        return fetch(self.state)

    @staticmethod
    def decode_opcode(opcode: int) -> Instruction:
        """Decode ``opcode``; raises ``UnrecognizedOpcode`` on unknown encodings."""
        return decode(opcode)

    def execute_instruction(self) -> Instruction:
        """Run one fetch-decode-execute step and return the executed instruction."""
        pc = int(self.state.pc)
        opcode = self.fetch_opcode()
        try:
            instruction = self.decode_opcode(opcode)
            self.state = execute(self.state, instruction)
        except Chip8Error as e:
            self.logger.error(f"0x{pc:03X}: {e}")
            raise
        if self.logger.is_enabled_for("DEBUG"):
            self.logger.debug(f"0x{pc:03X}: {opcode:04X} {instruction.mnemonic}")
        return instruction

    def timer_interrupt(self) -> None:
        """One 60 Hz tick of the delay and sound timers."""
        self.state = tick_timers(self.state)

    def key_pressed(self, key: int) -> None:
        self.state = press_key(self.state, key)

    def key_released(self, key: int) -> None:
        self.state = release_key(self.state, key)

    @property
    def memory(self) -> jnp.ndarray:
        return self.state.memory

    @property
    def registers(self) -> jnp.ndarray:
        return self.state.V

    @property
    def frame_buffer(self) -> jnp.ndarray:
        return self.state.frame_buffer

    @property
    def stack(self) -> tuple[int, ...]:
        return self.state.stack.addresses()

    @property
    def pressed_keys(self) -> frozenset:
        return frozenset(int(key) for key in jnp.flatnonzero(self.state.keypad))

    @property
    def program_counter(self) -> int:
        return int(self.state.pc)

    @property
    def index_register(self) -> int:
        return int(self.state.I)

    @property
    def delay_timer(self) -> int:
        return int(self.state.delay_timer)

    @property
    def sound_timer(self) -> int:
        return int(self.state.sound_timer)

    @property
    def waiting_for_key(self) -> bool:
        """True while parked on ``LD Vx, K`` with no key held."""
        opcode = self.fetch_opcode()
        return (opcode & 0xF0FF) == 0xF00A and not self.pressed_keys

    def __str__(self) -> str:
        """Human-readable state representation."""
        regs = " ".join(f"V{i:X}={int(v):02X}" for i, v in enumerate(self.registers))
        return (
            f"PC={self.program_counter:03X} I={self.index_register:03X} "
            f"DT={self.delay_timer} ST={self.sound_timer} {regs}"
        )

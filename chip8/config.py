"""Processor configuration."""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence


@dataclass(frozen=True)
class ProcessorConfig:
    """Initial processor state overrides.

    Every field defaults to ``None``, meaning "use the power-on value". The
    font is always written to 0x000-0x04F after overrides are applied, so a
    memory override cannot replace it.

    Attributes:
        memory: 4096 bytes of initial memory
        registers: 16 initial values for V0-VF
        program_counter: Initial PC (power-on value 0x200)
        index_register: Initial I
        stack: Return addresses, bottom of the stack first
        delay_timer: Initial delay timer value
        sound_timer: Initial sound timer value
        frame_buffer: 2048 pixel values, row-major
        pressed_keys: Keys held at power-on
        beep: Callback invoked by ``LD ST, Vx``
        seed: Seed for the ``RND`` PRNG key
    """
    memory: Optional[Sequence[int]] = None
    registers: Optional[Sequence[int]] = None
    program_counter: Optional[int] = None
    index_register: Optional[int] = None
    stack: Optional[Sequence[int]] = None
    delay_timer: Optional[int] = None
    sound_timer: Optional[int] = None
    frame_buffer: Optional[Sequence[int]] = None
    pressed_keys: Optional[Iterable[int]] = None
    beep: Optional[Callable[[], None]] = None
    seed: int = 0

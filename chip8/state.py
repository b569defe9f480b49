"""CHIP-8 emulator state structures."""

from typing import Callable, Optional

import jax
import jax.numpy as jnp
from flax.struct import dataclass, PyTreeNode, field

from chip8.config import ProcessorConfig
from chip8.constants import (
    PROGRAM_START, FONT_START, FONT_DATA, MEMORY_SIZE, NUM_KEYS, NUM_REGISTERS,
    SCREEN_WIDTH, SCREEN_HEIGHT, STACK_SIZE,
)


def _silent() -> None:
    pass


@dataclass(frozen=True)
class StackState:
    """Stack state for subroutine calls."""
    data: jnp.ndarray = field(default_factory=lambda: jnp.zeros(STACK_SIZE, dtype=jnp.uint16))
    pointer: int = field(pytree_node=False, default=0)

    def addresses(self) -> tuple[int, ...]:
        """Return stacked addresses, bottom first."""
        return tuple(int(address) for address in self.data[:self.pointer])


class EmulatorState(PyTreeNode):
    """Main CHIP-8 emulator state."""
    rng: jax.Array = field(default_factory=lambda: jax.random.PRNGKey(0))
    memory: jnp.ndarray = field(default_factory=lambda: jnp.zeros(MEMORY_SIZE, dtype=jnp.uint8))
    pc: jnp.ndarray = field(default_factory=lambda: jnp.asarray(PROGRAM_START, dtype=jnp.uint16))
    frame_buffer: jnp.ndarray = field(default_factory=lambda: jnp.zeros(SCREEN_WIDTH * SCREEN_HEIGHT, dtype=jnp.uint8))
    stack: StackState = field(default_factory=StackState)
    delay_timer: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint8))
    sound_timer: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint8))
    keypad: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_KEYS, dtype=jnp.bool_))
    V: jnp.ndarray = field(default_factory=lambda: jnp.zeros(NUM_REGISTERS, dtype=jnp.uint8))
    I: jnp.ndarray = field(default_factory=lambda: jnp.zeros((), dtype=jnp.uint16))
    beep: Callable[[], None] = field(pytree_node=False, default=_silent)


def _sized_array(values, size: int, dtype, name: str) -> jnp.ndarray:
    array = jnp.asarray(list(values), dtype=dtype)
    if array.shape != (size,):
        raise ValueError(f"{name} must hold {size} values, got {array.shape[0]}")
    return array


def create_stack(addresses=()) -> StackState:
    """Create a stack holding ``addresses``, bottom first."""
    addresses = list(addresses)
    capacity = STACK_SIZE
    while capacity < len(addresses):
        capacity *= 2
    data = jnp.zeros(capacity, dtype=jnp.uint16)
    if addresses:
        data = data.at[:len(addresses)].set(jnp.asarray(addresses, dtype=jnp.uint16))
    return StackState(data=data, pointer=len(addresses))


def create_keypad(pressed_keys=()) -> jnp.ndarray:
    """Create a keypad array with ``pressed_keys`` held."""
    keypad = jnp.zeros(NUM_KEYS, dtype=jnp.bool_)
    for key in pressed_keys:
        if not 0 <= key < NUM_KEYS:
            raise ValueError(f"Invalid key: {key}")
        keypad = keypad.at[key].set(True)
    return keypad


def write_bytes(state: EmulatorState, data, start_addr: int) -> EmulatorState:
    """Copy ``data`` into memory from ``start_addr`` upwards."""
    data = bytes(data)
    if not data:
        return state
    values = jnp.asarray(list(data), dtype=jnp.uint8)
    return state.replace(memory=state.memory.at[start_addr:start_addr + len(data)].set(values))


def create_state(config: Optional[ProcessorConfig] = None) -> EmulatorState:
    """Create emulator state from ``config`` with font data loaded."""
    config = config or ProcessorConfig()
    state = EmulatorState(rng=jax.random.PRNGKey(config.seed))

    if config.memory is not None:
        state = state.replace(memory=_sized_array(config.memory, MEMORY_SIZE, jnp.uint8, "memory"))
    if config.registers is not None:
        state = state.replace(V=_sized_array(config.registers, NUM_REGISTERS, jnp.uint8, "registers"))
    if config.frame_buffer is not None:
        state = state.replace(frame_buffer=_sized_array(
            config.frame_buffer, SCREEN_WIDTH * SCREEN_HEIGHT, jnp.uint8, "frame_buffer"))
    if config.program_counter is not None:
        state = state.replace(pc=jnp.asarray(config.program_counter, dtype=jnp.uint16))
    if config.index_register is not None:
        state = state.replace(I=jnp.asarray(config.index_register, dtype=jnp.uint16))
    if config.stack is not None:
        state = state.replace(stack=create_stack(config.stack))
    if config.delay_timer is not None:
        state = state.replace(delay_timer=jnp.asarray(config.delay_timer, dtype=jnp.uint8))
    if config.sound_timer is not None:
        state = state.replace(sound_timer=jnp.asarray(config.sound_timer, dtype=jnp.uint8))
    if config.pressed_keys is not None:
        state = state.replace(keypad=create_keypad(config.pressed_keys))
    if config.beep is not None:
        state = state.replace(beep=config.beep)

    return write_bytes(state, FONT_DATA, FONT_START)

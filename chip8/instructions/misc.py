"""CHIP-8 miscellaneous instructions (Fxxx)."""

import jax.numpy as jnp
from chip8.state import EmulatorState
from chip8.constants import FONT_START, FONT_GLYPH_SIZE
from chip8.instructions.control_flow import next_instruction


def execute_get_delay_timer(state: EmulatorState, vx: int) -> EmulatorState:
    """FX07 - Set VX to delay timer value."""
    return next_instruction(state.replace(V=state.V.at[vx].set(state.delay_timer)))


def execute_set_delay_timer(state: EmulatorState, vx: int) -> EmulatorState:
    """FX15 - Set delay timer to VX."""
    return next_instruction(state.replace(delay_timer=state.V[vx]))


def execute_set_sound_timer(state: EmulatorState, vx: int) -> EmulatorState:
    """FX18 - Sound the beep.

    The store is modelled as a one-shot trigger of the beep callback; the
    sound timer itself is not written.
    """
    state.beep()
    return next_instruction(state)


def execute_add_to_index(state: EmulatorState, vx: int) -> EmulatorState:
    """FX1E - Add VX to I register."""
    new_i = state.I + jnp.astype(state.V[vx], jnp.uint16)
    return next_instruction(state.replace(I=new_i))


def execute_wait_for_key(state: EmulatorState, vx: int) -> EmulatorState:
    """FX0A - Wait for key press (blocking).

    With no key held the state is returned untouched, so the same
    instruction is fetched again on the next step.
    """
    if not jnp.any(state.keypad):
        return state
    pressed_key = jnp.argmax(state.keypad)
    return next_instruction(state.replace(V=state.V.at[vx].set(jnp.astype(pressed_key, jnp.uint8))))


def execute_font_character(state: EmulatorState, vx: int) -> EmulatorState:
    """FX29 - Set I to location of sprite for digit VX."""
    font_address = FONT_START + jnp.astype(state.V[vx], jnp.uint16) * FONT_GLYPH_SIZE
    return next_instruction(state.replace(I=jnp.astype(font_address, jnp.uint16)))


def execute_bcd_conversion(state: EmulatorState, vx: int) -> EmulatorState:
    """FX33 - Store BCD representation of VX at I, I+1, I+2."""
    value = state.V[vx]

    digits = jnp.array([
        value // 100,
        (value // 10) % 10,
        value % 10
    ], dtype=jnp.uint8)

    indices = jnp.arange(3) + jnp.astype(state.I, jnp.int32)
    return next_instruction(state.replace(memory=state.memory.at[indices].set(digits)))


def execute_store_registers(state: EmulatorState, vx: int) -> EmulatorState:
    """FX55 - Store V0 through VX in memory starting at I."""
    indices = jnp.astype(state.I, jnp.int32) + jnp.arange(vx + 1)
    new_memory = state.memory.at[indices].set(state.V[:vx + 1])
    return next_instruction(state.replace(memory=new_memory))


def execute_load_registers(state: EmulatorState, vx: int) -> EmulatorState:
    """FX65 - Load V0 through VX from memory starting at I."""
    indices = jnp.astype(state.I, jnp.int32) + jnp.arange(vx + 1)
    new_V = state.V.at[:vx + 1].set(state.memory[indices])
    return next_instruction(state.replace(V=new_V))

"""CHIP-8 control flow instructions."""

import jax
import jax.lax
import jax.numpy as jnp
from chip8.state import EmulatorState
from chip8.constants import NUM_KEYS
from chip8.stack import push


def next_instruction(state: EmulatorState) -> EmulatorState:
    """Advance PC past the current instruction."""
    return state.replace(pc=state.pc + 2)


def skip_instruction(state: EmulatorState) -> EmulatorState:
    """Advance PC past the current and the following instruction."""
    return state.replace(pc=state.pc + 4)


def execute_jump(state: EmulatorState, addr: int) -> EmulatorState:
    """1NNN - Jump to address NNN."""
    return state.replace(pc=jnp.asarray(addr, dtype=jnp.uint16))


def execute_call(state: EmulatorState, addr: int) -> EmulatorState:
    """2NNN - Call subroutine at NNN."""
    state = state.replace(stack=push(state.stack, state.pc + 2))
    return execute_jump(state, addr)


def make_skip_instruction(condition_fn):
    """Factory for skip instructions."""
    def skip(state: EmulatorState, *operands: int) -> EmulatorState:
        condition = condition_fn(state, *operands)
        return jax.lax.cond(
            condition,
            skip_instruction,
            next_instruction,
            state
        )
    return skip


execute_skip_if_equal_immediate = make_skip_instruction(
    lambda state, vx, byte: state.V[vx] == byte
)

execute_skip_if_not_equal_immediate = make_skip_instruction(
    lambda state, vx, byte: state.V[vx] != byte
)

execute_skip_if_equal_register = make_skip_instruction(
    lambda state, vx, vy: state.V[vx] == state.V[vy]
)

execute_skip_if_not_equal_register = make_skip_instruction(
    lambda state, vx, vy: state.V[vx] != state.V[vy]
)


def _key_pressed(state: EmulatorState, vx: int) -> jnp.ndarray:
    # Register values above 0xF name no key, so they never count as pressed
    key = state.V[vx]
    return (key < NUM_KEYS) & state.keypad[key & 0xF]


execute_skip_if_key = make_skip_instruction(_key_pressed)

execute_skip_if_not_key = make_skip_instruction(
    lambda state, vx: ~_key_pressed(state, vx)
)


def execute_jump_with_offset(state: EmulatorState, addr: int) -> EmulatorState:
    """BNNN - Jump to address NNN + V0."""
    jump_address = jnp.astype(state.V[0], jnp.uint16) + addr
    return state.replace(pc=jnp.astype(jump_address, jnp.uint16))

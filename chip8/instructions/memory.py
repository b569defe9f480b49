"""CHIP-8 memory and register operations."""

import jax
import jax.numpy as jnp
from chip8.state import EmulatorState
from chip8.instructions.control_flow import next_instruction


def execute_set(state: EmulatorState, vx: int, byte: int) -> EmulatorState:
    """6XNN - Set VX = NN."""
    return next_instruction(state.replace(V=state.V.at[vx].set(byte)))


def execute_add(state: EmulatorState, vx: int, byte: int) -> EmulatorState:
    """7XNN - Add NN to VX, carry discarded and VF untouched."""
    total = (jnp.astype(state.V[vx], jnp.int32) + byte) & 0xFF
    return next_instruction(state.replace(V=state.V.at[vx].set(jnp.astype(total, jnp.uint8))))


def execute_set_index(state: EmulatorState, addr: int) -> EmulatorState:
    """ANNN - Set I = NNN."""
    return next_instruction(state.replace(I=jnp.asarray(addr, dtype=jnp.uint16)))


def execute_random(state: EmulatorState, vx: int, byte: int) -> EmulatorState:
    """CXNN - Set VX = random & NN."""
    key, subkey = jax.random.split(state.rng)
    random_value = jax.random.randint(subkey, shape=(), minval=0, maxval=256)
    new_V = state.V.at[vx].set(jnp.astype(random_value & byte, jnp.uint8))
    return next_instruction(state.replace(V=new_V, rng=key))

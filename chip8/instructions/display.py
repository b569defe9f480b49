"""CHIP-8 display operations."""

import jax.numpy as jnp
from chip8.state import EmulatorState
from chip8.constants import FLAG_REGISTER, SCREEN_WIDTH, SCREEN_HEIGHT
from chip8.instructions.control_flow import next_instruction

SPRITE_WIDTH = 8
columns = jnp.arange(SPRITE_WIDTH)


def execute_display(state: EmulatorState, vx: int, vy: int, n: int) -> EmulatorState:
    """DXYN - Draw N-row sprite from I at (VX, VY), wrapping at screen edges."""
    rows = jnp.arange(n)
    sprite_x = jnp.astype(state.V[vx], jnp.int32)
    sprite_y = jnp.astype(state.V[vy], jnp.int32)

    sprite_bytes = state.memory[jnp.astype(state.I, jnp.int32) + rows]
    sprite = (sprite_bytes[:, None] >> (SPRITE_WIDTH - 1 - columns)[None, :]) & 1

    target_x = (sprite_x + columns) % SCREEN_WIDTH
    target_y = (sprite_y + rows) % SCREEN_HEIGHT
    pixel_index = target_y[:, None] * SCREEN_WIDTH + target_x[None, :]

    current = state.frame_buffer[pixel_index]
    collision = jnp.any((current & sprite) == 1)

    return next_instruction(state.replace(
        frame_buffer=state.frame_buffer.at[pixel_index].set(jnp.astype(current ^ sprite, jnp.uint8)),
        V=state.V.at[FLAG_REGISTER].set(jnp.astype(collision, jnp.uint8))
    ))

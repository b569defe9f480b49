"""CHIP-8 system instructions (0x0xxx)."""

import jax.numpy as jnp
from chip8.state import EmulatorState
from chip8.stack import pop
from chip8.instructions.control_flow import next_instruction


def execute_clear_screen(state: EmulatorState) -> EmulatorState:
    """00E0 - Clear display."""
    return next_instruction(state.replace(frame_buffer=jnp.zeros_like(state.frame_buffer)))


def execute_return(state: EmulatorState) -> EmulatorState:
    """00EE - Return from subroutine."""
    stack, address = pop(state.stack, int(state.pc))
    return state.replace(stack=stack, pc=address)

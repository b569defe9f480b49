"""CHIP-8 ALU operations (8xxx)."""

import jax.numpy as jnp
from chip8.state import EmulatorState
from chip8.constants import FLAG_REGISTER
from chip8.instructions.control_flow import next_instruction


def alu_set(vx: int, vy: int) -> int:
    """8XY0 - Set: VX = VY."""
    return vy


def alu_or(vx: int, vy: int) -> int:
    """8XY1 - Binary OR: VX |= VY."""
    return vx | vy


def alu_and(vx: int, vy: int) -> int:
    """8XY2 - Binary AND: VX &= VY."""
    return vx & vy


def alu_xor(vx: int, vy: int) -> int:
    """8XY3 - Logical XOR: VX ^= VY."""
    return vx ^ vy


def alu_add(vx: int, vy: int) -> tuple[int, int]:
    """8XY4 - Add: VX += VY, set carry flag."""
    result = jnp.astype(vx, jnp.int32) + vy
    carry = jnp.astype(result > 255, jnp.uint8)
    return jnp.astype(result & 0xFF, jnp.uint8), carry


def alu_sub_xy(vx: int, vy: int) -> tuple[int, int]:
    """8XY5 - Subtract: VX -= VY, VF = 1 when VX > VY."""
    not_borrow = jnp.astype(vx > vy, jnp.uint8)
    result = (jnp.astype(vx, jnp.int32) - vy) & 0xFF
    return jnp.astype(result, jnp.uint8), not_borrow


def alu_shift_right(vx: int) -> tuple[int, int]:
    """8XY6 - Shift right: VX >>= 1, VF = shifted-out bit."""
    shifted_bit = vx & 1
    result = vx >> 1
    return result, shifted_bit


def alu_sub_yx(vx: int, vy: int) -> tuple[int, int]:
    """8XY7 - Subtract: VX = VY - VX, VF = 1 when VY > VX."""
    not_borrow = jnp.astype(vy > vx, jnp.uint8)
    result = (jnp.astype(vy, jnp.int32) - vx) & 0xFF
    return jnp.astype(result, jnp.uint8), not_borrow


def alu_shift_left(vx: int) -> tuple[int, int]:
    """8XYE - Shift left: VX <<= 1, VF = shifted-out bit."""
    shifted_bit = (vx >> 7) & 1
    result = (jnp.astype(vx, jnp.int32) << 1) & 0xFF
    return jnp.astype(result, jnp.uint8), shifted_bit


def make_logic_instruction(operation):
    """Factory for 8XYN handlers that leave VF alone."""
    def logic(state: EmulatorState, vx: int, vy: int) -> EmulatorState:
        result = operation(state.V[vx], state.V[vy])
        return next_instruction(state.replace(V=state.V.at[vx].set(result)))
    return logic


def _store_with_flag(state: EmulatorState, vx: int, result, flag) -> EmulatorState:
    # VF is written first, so a result targeting VF overwrites the flag
    new_V = state.V.at[FLAG_REGISTER].set(jnp.astype(flag, jnp.uint8))
    new_V = new_V.at[vx].set(jnp.astype(result, jnp.uint8))
    return next_instruction(state.replace(V=new_V))


def make_arithmetic_instruction(operation):
    """Factory for 8XYN handlers that report carry or borrow in VF."""
    def arithmetic(state: EmulatorState, vx: int, vy: int) -> EmulatorState:
        result, flag = operation(state.V[vx], state.V[vy])
        return _store_with_flag(state, vx, result, flag)
    return arithmetic


def make_shift_instruction(operation):
    """Factory for the single-register shift handlers.

    VF takes the shifted-out bit first and VX is shifted afterwards, so
    shifting VF itself shifts the flag value.
    """
    def shift(state: EmulatorState, vx: int) -> EmulatorState:
        _, flag = operation(state.V[vx])
        new_V = state.V.at[FLAG_REGISTER].set(jnp.astype(flag, jnp.uint8))
        result, _ = operation(new_V[vx])
        return next_instruction(state.replace(V=new_V.at[vx].set(jnp.astype(result, jnp.uint8))))
    return shift


execute_alu_set = make_logic_instruction(alu_set)
execute_alu_or = make_logic_instruction(alu_or)
execute_alu_and = make_logic_instruction(alu_and)
execute_alu_xor = make_logic_instruction(alu_xor)
execute_alu_add = make_arithmetic_instruction(alu_add)
execute_alu_sub_xy = make_arithmetic_instruction(alu_sub_xy)
execute_alu_sub_yx = make_arithmetic_instruction(alu_sub_yx)
execute_alu_shift_right = make_shift_instruction(alu_shift_right)
execute_alu_shift_left = make_shift_instruction(alu_shift_left)

"""Main CHIP-8 emulator execution engine."""

import jax.numpy as jnp
from chip8.state import EmulatorState, write_bytes
from chip8.decode import Instruction, Op, decode
from chip8.constants import NUM_KEYS, PROGRAM_START
from chip8.instructions.system import execute_clear_screen, execute_return
from chip8.instructions.control_flow import (
    execute_jump, execute_call, execute_skip_if_equal_immediate,
    execute_skip_if_not_equal_immediate, execute_skip_if_equal_register,
    execute_skip_if_not_equal_register, execute_jump_with_offset,
    execute_skip_if_key, execute_skip_if_not_key,
)
from chip8.instructions.alu import (
    execute_alu_set, execute_alu_or, execute_alu_and, execute_alu_xor,
    execute_alu_add, execute_alu_sub_xy, execute_alu_sub_yx,
    execute_alu_shift_right, execute_alu_shift_left,
)
from chip8.instructions.memory import execute_set, execute_add, execute_set_index, execute_random
from chip8.instructions.display import execute_display
from chip8.instructions.misc import (
    execute_get_delay_timer, execute_wait_for_key, execute_set_delay_timer,
    execute_set_sound_timer, execute_add_to_index, execute_font_character,
    execute_bcd_conversion, execute_store_registers, execute_load_registers,
)

HANDLERS = {
    Op.CLS: execute_clear_screen,
    Op.RET: execute_return,
    Op.JP_ADDR: execute_jump,
    Op.CALL_ADDR: execute_call,
    Op.SE_VX_BYTE: execute_skip_if_equal_immediate,
    Op.SNE_VX_BYTE: execute_skip_if_not_equal_immediate,
    Op.SE_VX_VY: execute_skip_if_equal_register,
    Op.LD_VX_BYTE: execute_set,
    Op.ADD_VX_BYTE: execute_add,
    Op.LD_VX_VY: execute_alu_set,
    Op.OR_VX_VY: execute_alu_or,
    Op.AND_VX_VY: execute_alu_and,
    Op.XOR_VX_VY: execute_alu_xor,
    Op.ADD_VX_VY: execute_alu_add,
    Op.SUB_VX_VY: execute_alu_sub_xy,
    Op.SHR_VX: execute_alu_shift_right,
    Op.SUBN_VX_VY: execute_alu_sub_yx,
    Op.SHL_VX: execute_alu_shift_left,
    Op.SNE_VX_VY: execute_skip_if_not_equal_register,
    Op.LD_I_ADDR: execute_set_index,
    Op.JP_V0_ADDR: execute_jump_with_offset,
    Op.RND_VX_BYTE: execute_random,
    Op.DRW_VX_VY_NIBBLE: execute_display,
    Op.SKP_VX: execute_skip_if_key,
    Op.SKNP_VX: execute_skip_if_not_key,
    Op.LD_VX_DT: execute_get_delay_timer,
    Op.LD_VX_K: execute_wait_for_key,
    Op.LD_DT_VX: execute_set_delay_timer,
    Op.LD_ST_VX: execute_set_sound_timer,
    Op.ADD_I_VX: execute_add_to_index,
    Op.LD_F_VX: execute_font_character,
    Op.LD_B_VX: execute_bcd_conversion,
    Op.LD_I_VX: execute_store_registers,
    Op.LD_VX_I: execute_load_registers,
}


def execute(state: EmulatorState, instruction: Instruction) -> EmulatorState:
    """Execute single decoded CHIP-8 instruction."""
    return HANDLERS[instruction.op](state, *instruction.operands)


def fetch(state: EmulatorState) -> int:
    """Fetch the big-endian opcode at PC."""
    pc = int(state.pc)
    return int(state.memory[pc]) << 8 | int(state.memory[pc + 1])


def step(state: EmulatorState) -> tuple[EmulatorState, Instruction]:
    """Run one fetch-decode-execute cycle."""
    instruction = decode(fetch(state))
    return execute(state, instruction), instruction


def load_bytes(state: EmulatorState, data: bytes, start_addr: int = PROGRAM_START) -> EmulatorState:
    """Copy raw bytes into memory starting at ``start_addr``."""
    return write_bytes(state, data, start_addr)


def load_rom(state: EmulatorState, filename: str) -> EmulatorState:
    """Load ROM data into CHIP-8 memory starting at 0x200."""
    with open(filename, 'rb') as f:
        rom_data = f.read()
    return load_bytes(state, rom_data)


def _count_down(timer: jnp.ndarray) -> jnp.ndarray:
    return jnp.where(timer > 0, timer - 1, timer).astype(jnp.uint8)


def tick_timers(state: EmulatorState) -> EmulatorState:
    """Decrement delay and sound timers once, stopping at zero."""
    return state.replace(
        delay_timer=_count_down(state.delay_timer),
        sound_timer=_count_down(state.sound_timer),
    )


def _check_key(key: int) -> None:
    if not 0 <= key < NUM_KEYS:
        raise ValueError(f"Invalid key: {key}")


def press_key(state: EmulatorState, key: int) -> EmulatorState:
    """Mark ``key`` as held."""
    _check_key(key)
    return state.replace(keypad=state.keypad.at[key].set(True))


def release_key(state: EmulatorState, key: int) -> EmulatorState:
    """Mark ``key`` as released."""
    _check_key(key)
    return state.replace(keypad=state.keypad.at[key].set(False))

"""CHIP-8 instruction decoding."""

from enum import Enum

from chex import dataclass

from chip8.errors import UnrecognizedOpcode


class Op(Enum):
    """The 34 base CHIP-8 instructions (0NNN SYS is not decoded), named after their operand forms."""
    CLS = "cls"
    RET = "ret"
    JP_ADDR = "jp_addr"
    CALL_ADDR = "call_addr"
    SE_VX_BYTE = "se_vx_byte"
    SNE_VX_BYTE = "sne_vx_byte"
    SE_VX_VY = "se_vx_vy"
    LD_VX_BYTE = "ld_vx_byte"
    ADD_VX_BYTE = "add_vx_byte"
    LD_VX_VY = "ld_vx_vy"
    OR_VX_VY = "or_vx_vy"
    AND_VX_VY = "and_vx_vy"
    XOR_VX_VY = "xor_vx_vy"
    ADD_VX_VY = "add_vx_vy"
    SUB_VX_VY = "sub_vx_vy"
    SHR_VX = "shr_vx"
    SUBN_VX_VY = "subn_vx_vy"
    SHL_VX = "shl_vx"
    SNE_VX_VY = "sne_vx_vy"
    LD_I_ADDR = "ld_i_addr"
    JP_V0_ADDR = "jp_v0_addr"
    RND_VX_BYTE = "rnd_vx_byte"
    DRW_VX_VY_NIBBLE = "drw_vx_vy_nibble"
    SKP_VX = "skp_vx"
    SKNP_VX = "sknp_vx"
    LD_VX_DT = "ld_vx_dt"
    LD_VX_K = "ld_vx_k"
    LD_DT_VX = "ld_dt_vx"
    LD_ST_VX = "ld_st_vx"
    ADD_I_VX = "add_i_vx"
    LD_F_VX = "ld_f_vx"
    LD_B_VX = "ld_b_vx"
    LD_I_VX = "ld_i_vx"
    LD_VX_I = "ld_vx_i"


# Cowgod-style operand templates for disassembly
_MNEMONICS = {
    Op.CLS: "CLS",
    Op.RET: "RET",
    Op.JP_ADDR: "JP {0:03X}",
    Op.CALL_ADDR: "CALL {0:03X}",
    Op.SE_VX_BYTE: "SE V{0:X}, {1:02X}",
    Op.SNE_VX_BYTE: "SNE V{0:X}, {1:02X}",
    Op.SE_VX_VY: "SE V{0:X}, V{1:X}",
    Op.LD_VX_BYTE: "LD V{0:X}, {1:02X}",
    Op.ADD_VX_BYTE: "ADD V{0:X}, {1:02X}",
    Op.LD_VX_VY: "LD V{0:X}, V{1:X}",
    Op.OR_VX_VY: "OR V{0:X}, V{1:X}",
    Op.AND_VX_VY: "AND V{0:X}, V{1:X}",
    Op.XOR_VX_VY: "XOR V{0:X}, V{1:X}",
    Op.ADD_VX_VY: "ADD V{0:X}, V{1:X}",
    Op.SUB_VX_VY: "SUB V{0:X}, V{1:X}",
    Op.SHR_VX: "SHR V{0:X}",
    Op.SUBN_VX_VY: "SUBN V{0:X}, V{1:X}",
    Op.SHL_VX: "SHL V{0:X}",
    Op.SNE_VX_VY: "SNE V{0:X}, V{1:X}",
    Op.LD_I_ADDR: "LD I, {0:03X}",
    Op.JP_V0_ADDR: "JP V0, {0:03X}",
    Op.RND_VX_BYTE: "RND V{0:X}, {1:02X}",
    Op.DRW_VX_VY_NIBBLE: "DRW V{0:X}, V{1:X}, {2:X}",
    Op.SKP_VX: "SKP V{0:X}",
    Op.SKNP_VX: "SKNP V{0:X}",
    Op.LD_VX_DT: "LD V{0:X}, DT",
    Op.LD_VX_K: "LD V{0:X}, K",
    Op.LD_DT_VX: "LD DT, V{0:X}",
    Op.LD_ST_VX: "LD ST, V{0:X}",
    Op.ADD_I_VX: "ADD I, V{0:X}",
    Op.LD_F_VX: "LD F, V{0:X}",
    Op.LD_B_VX: "LD B, V{0:X}",
    Op.LD_I_VX: "LD [I], V{0:X}",
    Op.LD_VX_I: "LD V{0:X}, [I]",
}

_ALU_OPS = {
    0x0: Op.LD_VX_VY,
    0x1: Op.OR_VX_VY,
    0x2: Op.AND_VX_VY,
    0x3: Op.XOR_VX_VY,
    0x4: Op.ADD_VX_VY,
    0x5: Op.SUB_VX_VY,
    0x7: Op.SUBN_VX_VY,
}

_MISC_OPS = {
    0x07: Op.LD_VX_DT,
    0x0A: Op.LD_VX_K,
    0x15: Op.LD_DT_VX,
    0x18: Op.LD_ST_VX,
    0x1E: Op.ADD_I_VX,
    0x29: Op.LD_F_VX,
    0x33: Op.LD_B_VX,
    0x55: Op.LD_I_VX,
    0x65: Op.LD_VX_I,
}


@dataclass(frozen=True)
class Instruction:
    """Decoded CHIP-8 instruction with extracted operands."""
    op: Op
    operands: tuple
    raw: int

    @property
    def mnemonic(self) -> str:
        """Assembly form of the instruction, e.g. ``ADD V1, V2``."""
        return _MNEMONICS[self.op].format(*self.operands)


def decode(opcode: int) -> Instruction:
    """Decode 16-bit opcode into an instruction tag and its operands.

    Raises:
        UnrecognizedOpcode: If the opcode is none of the 34 base instructions
    """
    group = (opcode & 0xF000) >> 12
    vx = (opcode & 0x0F00) >> 8
    vy = (opcode & 0x00F0) >> 4
    nibble = opcode & 0x000F
    byte = opcode & 0x00FF
    addr = opcode & 0x0FFF

    def instruction(op: Op, *operands: int) -> Instruction:
        return Instruction(op=op, operands=operands, raw=opcode)

    if group == 0x0:
        if byte == 0xE0:
            return instruction(Op.CLS)
        if byte == 0xEE:
            return instruction(Op.RET)
    elif group == 0x1:
        return instruction(Op.JP_ADDR, addr)
    elif group == 0x2:
        return instruction(Op.CALL_ADDR, addr)
    elif group == 0x3:
        return instruction(Op.SE_VX_BYTE, vx, byte)
    elif group == 0x4:
        return instruction(Op.SNE_VX_BYTE, vx, byte)
    elif group == 0x5:
        return instruction(Op.SE_VX_VY, vx, vy)
    elif group == 0x6:
        return instruction(Op.LD_VX_BYTE, vx, byte)
    elif group == 0x7:
        return instruction(Op.ADD_VX_BYTE, vx, byte)
    elif group == 0x8:
        if nibble in _ALU_OPS:
            return instruction(_ALU_OPS[nibble], vx, vy)
        if nibble == 0x6:
            return instruction(Op.SHR_VX, vx)
        if nibble == 0xE:
            return instruction(Op.SHL_VX, vx)
    elif group == 0x9:
        return instruction(Op.SNE_VX_VY, vx, vy)
    elif group == 0xA:
        return instruction(Op.LD_I_ADDR, addr)
    elif group == 0xB:
        return instruction(Op.JP_V0_ADDR, addr)
    elif group == 0xC:
        return instruction(Op.RND_VX_BYTE, vx, byte)
    elif group == 0xD:
        return instruction(Op.DRW_VX_VY_NIBBLE, vx, vy, nibble)
    elif group == 0xE:
        if byte == 0x9E:
            return instruction(Op.SKP_VX, vx)
        if byte == 0xA1:
            return instruction(Op.SKNP_VX, vx)
    elif group == 0xF:
        if byte in _MISC_OPS:
            return instruction(_MISC_OPS[byte], vx)

    raise UnrecognizedOpcode(opcode)

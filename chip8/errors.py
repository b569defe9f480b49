"""CHIP-8 processor errors."""


class Chip8Error(Exception):
    """Base class for errors raised by the processor."""


class UnrecognizedOpcode(Chip8Error):
    """Raised when an opcode matches none of the 34 base instructions."""

    def __init__(self, opcode: int):
        self.opcode = opcode
        super().__init__(f"Unrecognized opcode: 0x{opcode:04X}")


class StackUnderflow(Chip8Error):
    """Raised by RET when no return address is stacked."""

    def __init__(self, pc: int):
        self.pc = pc
        super().__init__(f"Return with empty stack at 0x{pc:03X}")


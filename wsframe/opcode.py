"""
Websocket opcodes.
https://tools.ietf.org/html/rfc6455#section-5.2

"""

from enum import IntEnum


class Opcode(IntEnum):
    """Enum of websocket opcodes."""
    CONTINUATION = 0
    TEXT = 1
    BINARY = 2
    RESERVED1 = 3
    RESERVED2 = 4
    RESERVED3 = 5
    RESERVED4 = 6
    RESERVED5 = 7
    CLOSE = 8
    PING = 9
    PONG = 0xA
    RESERVED6 = 0xB
    RESERVED7 = 0xC
    RESERVED8 = 0xD
    RESERVED9 = 0xE
    RESERVED10 = 0xF

    @classmethod
    def to_str(cls, opcode):
        """Get a string for an opcode value (for debugging)."""
        try:
            return cls(opcode).name
        except ValueError:
            return "opcode {!r}".format(opcode)


def is_control(opcode):
    """Check if an opcode is a control code."""
    return opcode >= 8


reserved_opcodes = {
    Opcode.RESERVED1,
    Opcode.RESERVED2,
    Opcode.RESERVED3,
    Opcode.RESERVED4,
    Opcode.RESERVED5,
    Opcode.RESERVED6,
    Opcode.RESERVED7,
    Opcode.RESERVED8,
    Opcode.RESERVED9,
    Opcode.RESERVED10,
}


def is_reserved(opcode):
    """Check if an opcode is reserved."""
    return opcode in reserved_opcodes

class WebSocketError(Exception):
    """Base exception."""
    def __init__(self, msg, *args, **kwargs):
        error_msg = msg.format(*args, **kwargs)
        super(WebSocketError, self).__init__(error_msg)


class ParseError(WebSocketError):
    """Stream failed to parse in to a frame."""
    # A framing error desynchronizes the stream, so is fatal to the
    # connection.


class Underflow(ParseError):
    """End of input before a required header byte."""

    def __init__(self, field, expected, received):
        self.field = field
        self.expected = expected
        self.received = received
        super(Underflow, self).__init__(
            'end of input reading {}; expected {} byte(s), received {}',
            field,
            expected,
            received
        )


class InvalidOpcode(ParseError):
    """The opcode nibble doesn't map to an accepted opcode."""

    def __init__(self, opcode):
        self.opcode = opcode
        super(InvalidOpcode, self).__init__(
            'invalid opcode {:#x}', opcode
        )


class LengthMismatch(ParseError):
    """Fewer payload bytes were available than the header declared."""

    def __init__(self, expected, received):
        self.expected = expected
        self.received = received
        super(LengthMismatch, self).__init__(
            'payload length is {} byte(s), received {}',
            expected,
            received
        )


class PayloadTooLarge(ParseError):
    """The payload length field is too large."""

    def __init__(self, payload_length, limit):
        self.payload_length = payload_length
        self.limit = limit
        super(PayloadTooLarge, self).__init__(
            'payload is too large ({} > {} bytes)',
            payload_length,
            limit
        )


class SourceError(WebSocketError):
    """The byte source failed when reading."""
    # Likely indicates the socket failed

    def __init__(self, error):
        self.error = error
        super(SourceError, self).__init__('source fail; {}', error)

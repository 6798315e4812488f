"""
A decoded Websocket frame.

A websocket 'message' may consist of several of these frames, which
is left to the caller to reassemble.

"""

from collections import namedtuple

from . import errors
from .opcode import is_control, Opcode


_Header = namedtuple(
    '_Header',
    [
        'fin',
        'rsv1',
        'rsv2',
        'rsv3',
        'opcode',
        'is_masked',
        'payload_length',
        'masking_key',
    ]
)


class Header(_Header):
    """The fields of a frame header."""
    # https://tools.ietf.org/html/rfc6455#section-5.2

    __slots__ = ()

    def __new__(cls, fin, rsv1, rsv2, rsv3, opcode,
                is_masked, payload_length, masking_key):
        if bool(is_masked) == masking_key.is_none:
            raise ValueError(
                "masking key must be given if and only if the frame is masked"
            )
        if not 0 <= payload_length < (1 << 64):
            raise ValueError(
                "payload length {} out of range".format(payload_length)
            )
        return super(Header, cls).__new__(
            cls,
            bool(fin),
            bool(rsv1),
            bool(rsv2),
            bool(rsv3),
            Opcode(opcode),
            bool(is_masked),
            payload_length,
            masking_key
        )


class Frame(object):
    """A websocket frame; a header and the unmasked payload."""

    __slots__ = ['_header', '_payload']

    def __init__(self, header, payload=b''):
        payload = bytes(payload)
        if len(payload) != header.payload_length:
            raise errors.LengthMismatch(header.payload_length, len(payload))
        object.__setattr__(self, '_header', header)
        object.__setattr__(self, '_payload', payload)

    def __setattr__(self, name, value):
        raise AttributeError("frames are immutable")

    def __eq__(self, other):
        if not isinstance(other, Frame):
            return NotImplemented
        return (self._header, self._payload) == (other._header, other._payload)

    def __hash__(self):
        return hash((self._header, self._payload))

    def __repr__(self):
        frame_type = "frame" if self.fin else "frame-fragment"
        return "<{} {} ({} bytes)>".format(
            frame_type,
            Opcode.to_str(self.opcode),
            len(self)
        )

    def __len__(self):
        return len(self.payload)

    @property
    def header(self):
        return self._header

    @property
    def payload(self):
        return self._payload

    @property
    def opcode(self):
        return self.header.opcode

    @property
    def fin(self):
        return self.header.fin

    @property
    def is_control(self):
        """Check if this frame has a control opcode."""
        return is_control(self.opcode)

    @property
    def is_text(self):
        """Check if this is a text frame."""
        return self.opcode == Opcode.TEXT

    @property
    def is_binary(self):
        """Check if this is a binary frame."""
        return self.opcode == Opcode.BINARY

    @property
    def is_continuation(self):
        """Check if this is a continuation."""
        return self.opcode == Opcode.CONTINUATION

    @property
    def is_ping(self):
        """Check if this is a ping frame."""
        return self.opcode == Opcode.PING

    @property
    def is_pong(self):
        """Check if this is a pong frame."""
        return self.opcode == Opcode.PONG

    @property
    def is_close(self):
        """Check if this is a close frame."""
        return self.opcode == Opcode.CLOSE

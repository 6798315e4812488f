"""
Decode Websocket frames from a byte source.

Each call to `FrameDeserializer.accept_frame` pulls exactly the bytes
of one frame from the source, a byte at a time, and nothing more. No
state is kept between frames.

"""

import logging
import struct

from . import errors
from .frame import Frame, Header
from .mask import MaskingKey
from .opcode import is_reserved, Opcode
from .source import byte_source, BytesSource


log = logging.getLogger('wsframe')


class FrameDeserializer(object):
    """
    Decodes RFC 6455 frames from a byte source.

    :param source: A byte source (see :mod:`wsframe.source`), or an
        object that `byte_source` can adapt; bytes, a socket, a
        file-like object or an iterable.
    :param bool allow_reserved_opcodes: Accept frames with reserved
        opcodes (for use with extensions that define them). The default
        is to reject them with `InvalidOpcode`.
    :param int max_payload_length: Maximum payload length to accept,
        or ``None`` for no limit.

    """

    unpack16 = struct.Struct(b"!H").unpack
    unpack64 = struct.Struct(b"!Q").unpack

    # Largest length a 64 bit length field may hold (MSB must be 0)
    max_length = 0x7fffffffffffffff

    def __init__(self, source, allow_reserved_opcodes=False,
                 max_payload_length=None):
        self.source = byte_source(source)
        self.allow_reserved_opcodes = allow_reserved_opcodes
        self.max_payload_length = max_payload_length

    def __repr__(self):
        return "<frame-deserializer {!r}>".format(self.source)

    def __iter__(self):
        return self.iter_frames()

    def _read_byte(self, field, expected=1, received=0):
        """Read a single byte, raise Underflow at end of input."""
        byte = self.source.next_byte()
        if byte is None:
            raise errors.Underflow(field, expected, received)
        return byte

    def _read(self, field, count):
        """Read a fixed number of bytes."""
        return bytes(
            self._read_byte(field, count, received)
            for received in range(count)
        )

    def _read_payload(self, payload_length):
        """Read up to payload_length bytes, stopping at end of input."""
        payload = bytearray()
        next_byte = self.source.next_byte
        while len(payload) < payload_length:
            byte = next_byte()
            if byte is None:
                break
            payload.append(byte)
        return payload

    def accept_frame(self):
        """
        Read and decode one frame.

        :raises ParseError: if the frame is truncated or malformed.
        :returns: A `Frame` with an unmasked payload.

        """
        try:
            frame = self._accept_frame()
        except errors.ParseError as error:
            log.debug('failed to parse frame; %s', error)
            raise
        log.debug('frame <- %r', frame)
        return frame

    def _accept_frame(self):
        byte0 = self._read_byte('header', 2, 0)
        fin = byte0 >> 7
        rsv1 = (byte0 >> 6) & 1
        rsv2 = (byte0 >> 5) & 1
        rsv3 = (byte0 >> 4) & 1
        opcode = byte0 & 0b00001111
        if is_reserved(opcode) and not self.allow_reserved_opcodes:
            raise errors.InvalidOpcode(opcode)
        opcode = Opcode(opcode)

        byte1 = self._read_byte('header', 2, 1)
        mask_bit = byte1 >> 7
        payload_length = byte1 & 0b01111111

        if payload_length == 126:
            (payload_length,) = self.unpack16(
                self._read('extended payload length', 2)
            )
        elif payload_length == 127:
            (payload_length,) = self.unpack64(
                self._read('extended payload length', 8)
            )
            if payload_length > self.max_length:
                raise errors.PayloadTooLarge(payload_length, self.max_length)
        if (
            self.max_payload_length is not None
            and payload_length > self.max_payload_length
        ):
            raise errors.PayloadTooLarge(
                payload_length,
                self.max_payload_length
            )

        if mask_bit:
            masking_key = MaskingKey(self._read('masking key', 4))
        else:
            masking_key = MaskingKey.NONE

        payload = self._read_payload(payload_length)
        if len(payload) != payload_length:
            raise errors.LengthMismatch(payload_length, len(payload))

        header = Header(
            fin=fin,
            rsv1=rsv1,
            rsv2=rsv2,
            rsv3=rsv3,
            opcode=opcode,
            is_masked=mask_bit,
            payload_length=payload_length,
            masking_key=masking_key
        )
        return Frame(header, masking_key.cypher(payload))

    def iter_frames(self):
        """
        Yield frames until the source is exhausted.

        Stops cleanly if the input ends on a frame boundary, end of
        input anywhere else raises a `ParseError`.

        """
        while True:
            try:
                yield self.accept_frame()
            except errors.Underflow as error:
                if error.field == 'header' and error.received == 0:
                    return
                raise


def decode_frame(data, **options):
    """Decode a single frame from bytes."""
    return FrameDeserializer(BytesSource(data), **options).accept_frame()


def decode_frames(data, **options):
    """Decode all the frames in bytes."""
    return list(FrameDeserializer(BytesSource(data), **options))

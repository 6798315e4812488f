"""
Functions related to masking Websocket frames.
https://tools.ietf.org/html/rfc6455#section-5.3

"""

# One translation table per possible key byte. Row n maps every byte b
# to b ^ n, so bytearray.translate can XOR a whole slice at once.
_XOR_TABLE = [bytes(a ^ b for a in range(256)) for b in range(256)]


def mask(masking_key, data):
    """XOR mask bytes."""
    a, b, c, d = (_XOR_TABLE[n] for n in bytearray(masking_key))
    data_bytes = bytearray(data)
    # Byte i of the payload is XORed with byte i % 4 of the key
    data_bytes[::4] = data_bytes[::4].translate(a)
    data_bytes[1::4] = data_bytes[1::4].translate(b)
    data_bytes[2::4] = data_bytes[2::4].translate(c)
    data_bytes[3::4] = data_bytes[3::4].translate(d)
    return bytes(data_bytes)


class MaskingKey(object):
    """
    The masking key of a frame, or the absence of one.

    Use ``MaskingKey.NONE`` for an unmasked frame. Unmasking with
    ``NONE`` is the identity, so masked and unmasked payloads share
    the same path.

    :param bytes key: 4 key bytes, or ``None``.

    """

    __slots__ = ['_key']

    NONE = None  # Set below

    def __init__(self, key=None):
        if key is not None:
            key = bytes(bytearray(key))
            if len(key) != 4:
                raise ValueError(
                    "masking key must be 4 bytes, not {}".format(len(key))
                )
        self._key = key

    def __repr__(self):
        if self._key is None:
            return "MaskingKey.NONE"
        return "MaskingKey({!r})".format(self._key)

    def __eq__(self, other):
        if not isinstance(other, MaskingKey):
            return NotImplemented
        return self._key == other._key

    def __hash__(self):
        return hash(self._key)

    def __bool__(self):
        return self._key is not None

    @property
    def key(self):
        """The 4 key bytes, or ``None``."""
        return self._key

    @property
    def is_none(self):
        return self._key is None

    def cypher(self, data):
        """Mask or unmask ``data`` (XOR is its own inverse)."""
        if self._key is None:
            return bytes(data)
        return mask(self._key, data)


MaskingKey.NONE = MaskingKey()

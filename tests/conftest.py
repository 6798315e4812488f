import struct

import pytest

from wsframe.mask import mask


def encode_frame(opcode, payload=b'', fin=1, rsv1=0, rsv2=0, rsv3=0,
                 masking_key=None):
    """Encode a frame, using the shortest length field."""
    byte0 = fin << 7 | rsv1 << 6 | rsv2 << 5 | rsv3 << 4 | opcode
    mask_bit = 1 << 7 if masking_key is not None else 0
    length = len(payload)
    if length < 126:
        header_bytes = struct.pack('!BB', byte0, mask_bit | length)
    elif length < (1 << 16):
        header_bytes = struct.pack('!BBH', byte0, mask_bit | 126, length)
    else:
        header_bytes = struct.pack('!BBQ', byte0, mask_bit | 127, length)
    if masking_key is not None:
        return header_bytes + masking_key + mask(masking_key, payload)
    return header_bytes + payload


@pytest.fixture
def frame_bytes():
    return encode_frame

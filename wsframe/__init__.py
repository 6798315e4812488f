from ._version import __version__
from .frame import Frame, Header
from .frame_deserializer import decode_frame, decode_frames, FrameDeserializer
from .mask import MaskingKey
from .opcode import Opcode
from .source import byte_source

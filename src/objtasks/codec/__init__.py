"""JSON helpers: canonical encoding and decoding onto a target type."""

from objtasks.codec.config import CodecConfig
from objtasks.codec.json_codec import decode, encode

__all__ = ["encode", "decode", "CodecConfig"]

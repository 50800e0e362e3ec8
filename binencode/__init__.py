"""binencode - Strict binary-to-text encoding and decoding."""

__version__ = "0.1.0"

from .errors import EncodeError, FormatError, UnsupportedEncodeTypeError
from .codec import Codec
from .base64_codec import Base64Codec
from .encode import (
    EncodeType,
    get_codec,
    encode_to_str,
    encode_to_str_into,
    encode_to_str_size,
    decode_to_bin,
    decode_to_bin_into,
    decode_to_bin_size,
    decode_to_bin_validate,
    decode_to_bin_valid,
)

__all__ = [
    "EncodeError",
    "FormatError",
    "UnsupportedEncodeTypeError",
    "Codec",
    "Base64Codec",
    "EncodeType",
    "get_codec",
    "encode_to_str",
    "encode_to_str_into",
    "encode_to_str_size",
    "decode_to_bin",
    "decode_to_bin_into",
    "decode_to_bin_size",
    "decode_to_bin_validate",
    "decode_to_bin_valid",
]

"""Encode type selection and generic encoding/decoding entry points.

Every function takes an EncodeType first and routes the call to the codec
registered for it. Anything that is not a registered EncodeType raises
UnsupportedEncodeTypeError before the input is looked at.

Functions:
    encode_to_str: Encode bytes to text
    encode_to_str_into: Encode bytes into a caller-supplied buffer
    encode_to_str_size: Size of the text produced by encoding N bytes
    decode_to_bin: Decode text to bytes
    decode_to_bin_into: Decode text into a caller-supplied buffer
    decode_to_bin_size: Number of bytes a text decodes to
    decode_to_bin_validate: Raise FormatError if text cannot be decoded
    decode_to_bin_valid: Return whether text can be decoded
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .base64_codec import Base64Codec
from .codec import BytesLike, Codec, EncodedText
from .errors import UnsupportedEncodeTypeError

logger = logging.getLogger(__name__)


class EncodeType(Enum):
    """Supported binary-to-text encodings."""

    BASE64 = "base64"


_CODECS: Mapping[EncodeType, Codec] = MappingProxyType({
    EncodeType.BASE64: Base64Codec(),
})


def get_codec(encode_type: Any) -> Codec:
    """Return the codec registered for encode_type.

    Raises:
        UnsupportedEncodeTypeError: If encode_type is not a registered EncodeType.
    """
    codec = _CODECS.get(encode_type) if isinstance(encode_type, EncodeType) else None
    if codec is None:
        logger.debug("Rejecting encode type %r", encode_type)
        raise UnsupportedEncodeTypeError(encode_type)
    return codec


def encode_to_str(encode_type: EncodeType, source: BytesLike, source_size: Optional[int] = None) -> str:
    """Encode source to text.

    Args:
        encode_type: Encoding to apply
        source: Bytes to encode
        source_size: Encode only the first source_size bytes. Defaults to all
                     of source.

    Returns:
        The encoded text
    """
    codec = get_codec(encode_type)
    return codec.encode(_limit(source, source_size))


def encode_to_str_into(encode_type: EncodeType, source: BytesLike, destination: bytearray) -> int:
    """Encode source into destination as ASCII symbols.

    destination must hold at least encode_to_str_size(encode_type, len(source))
    bytes.

    Returns:
        Number of bytes written
    """
    return get_codec(encode_type).encode_into(source, destination)


def encode_to_str_size(encode_type: EncodeType, source_size: int) -> int:
    """Return the length of the text produced by encoding source_size bytes."""
    return get_codec(encode_type).encode_size(source_size)


def decode_to_bin(encode_type: EncodeType, source: EncodedText) -> bytes:
    """Validate and decode source.

    Raises:
        FormatError: If source cannot be decoded.
    """
    return get_codec(encode_type).decode(source)


def decode_to_bin_into(encode_type: EncodeType, source: EncodedText, destination: bytearray) -> int:
    """Validate source and decode it into destination.

    destination must hold at least decode_to_bin_size(encode_type, source) bytes.

    Returns:
        Number of bytes written

    Raises:
        FormatError: If source cannot be decoded.
    """
    return get_codec(encode_type).decode_into(source, destination)


def decode_to_bin_size(encode_type: EncodeType, source: EncodedText) -> int:
    """Return the number of bytes source decodes to.

    Raises:
        FormatError: If source cannot be decoded.
    """
    return get_codec(encode_type).decode_size(source)


def decode_to_bin_validate(encode_type: EncodeType, source: EncodedText) -> None:
    """Raise FormatError describing why source cannot be decoded, if it cannot."""
    get_codec(encode_type).validate(source)


def decode_to_bin_valid(encode_type: EncodeType, source: EncodedText) -> bool:
    """Return True if source can be decoded.

    Only format problems produce False; an unsupported encode type still raises.
    """
    return get_codec(encode_type).is_valid(source)


def _limit(source: BytesLike, source_size: Optional[int]) -> BytesLike:
    if source_size is None:
        return source

    data = memoryview(source).cast("B")
    if not 0 <= source_size <= len(data):
        raise ValueError(f"source size {source_size} is outside 0..{len(data)}")
    return data[:source_size]

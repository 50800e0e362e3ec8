"""Base64 codec using the standard RFC 4648 alphabet.

Encoding packs each group of three bytes into four 6-bit symbols. A final
group of one or two bytes is completed with one or two '=' pad symbols, so
encoded text is always a multiple of four symbols long.

Decoding is strict: text is validated before any byte is produced, and the
pad symbols decide how many bytes the final group yields.

Example:
    >>> codec = Base64Codec()
    >>> codec.encode(b"Ma")
    'TWE='
    >>> codec.decode("TWFu")
    b'Man'
"""

from typing import Tuple

from .codec import BytesLike, Codec, EncodedText
from .errors import FormatError

ENCODE_LOOKUP = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PAD_CHAR = "="

DECODED_GROUP_SIZE = 3
ENCODED_GROUP_SIZE = 4

INVALID = -1

# Symbol code point (0-255) -> 6-bit value, INVALID for anything outside the alphabet
DECODE_LOOKUP: Tuple[int, ...] = tuple(ENCODE_LOOKUP.find(chr(code)) for code in range(256))

_ENCODE_SYMBOLS = ENCODE_LOOKUP.encode("ascii")
_PAD = ord(PAD_CHAR)


def _as_text(source: EncodedText) -> str:
    """Normalize encoded input to str, reading bytes-like input one symbol per byte."""
    if isinstance(source, str):
        return source
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source).decode("latin-1")
    raise TypeError(f"expected str or bytes-like encoded text, got {type(source).__name__}")


def _symbol_value(symbol: str) -> int:
    code = ord(symbol)
    return DECODE_LOOKUP[code] if code < 256 else INVALID


class Base64Codec(Codec):
    """Strict standard-alphabet Base64 codec."""

    name = "base64"

    # -- size calculators --

    def encode_size(self, source_size: int) -> int:
        """Return ceil(source_size / 3) * 4.

        Args:
            source_size: Number of bytes to encode, must not be negative

        Returns:
            Number of symbols in the encoded text
        """
        if source_size < 0:
            raise ValueError(f"source size {source_size} must not be negative")

        group_total = source_size // DECODED_GROUP_SIZE
        if source_size % DECODED_GROUP_SIZE != 0:
            group_total += 1

        return group_total * ENCODED_GROUP_SIZE

    def decode_size(self, source: EncodedText) -> int:
        """Return the number of bytes that source decodes to.

        The text is validated first, so invalid input fails exactly as
        validate() does.
        """
        text = _as_text(source)
        self.validate(text)
        return self._decoded_size(text)

    @staticmethod
    def _decoded_size(text: str) -> int:
        size = len(text) // ENCODED_GROUP_SIZE * DECODED_GROUP_SIZE

        if text.endswith(PAD_CHAR):
            size -= 1
            if text[-2] == PAD_CHAR:
                size -= 1

        return size

    # -- validator --

    def validate(self, source: EncodedText) -> None:
        """Check that source is well-formed Base64.

        Rules are checked in order: the length must be a multiple of four,
        '=' may only appear in the last two positions, a '=' in the second to
        last position must be followed by another '=', and every other symbol
        must belong to the alphabet.

        Raises:
            FormatError: For the first rule violated. position is set for
                         character-level problems.
        """
        text = _as_text(source)
        size = len(text)

        if size % ENCODED_GROUP_SIZE != 0:
            raise FormatError(f"base64 size {size} is not evenly divisible by {ENCODED_GROUP_SIZE}")

        for idx, symbol in enumerate(text):
            if symbol == PAD_CHAR:
                if idx < size - 2:
                    raise FormatError(
                        f"base64 '=' character may only appear in last two positions, found at position {idx}",
                        idx,
                    )
                if idx == size - 2 and text[size - 1] != PAD_CHAR:
                    raise FormatError(
                        f"base64 last character must be '=' if second to last is, found at position {size - 1}",
                        size - 1,
                    )
            elif _symbol_value(symbol) == INVALID:
                raise FormatError(f"base64 invalid character found at position {idx}", idx)

    # -- encoder --

    def encode(self, source: BytesLike) -> str:
        destination = bytearray(self.encode_size(memoryview(source).nbytes))
        self.encode_into(source, destination)
        return destination.decode("ascii")

    def encode_into(self, source: BytesLike, destination: bytearray) -> int:
        data = memoryview(source).cast("B")
        size = len(data)
        required = self.encode_size(size)
        if len(destination) < required:
            raise ValueError(f"destination holds {len(destination)} bytes, {required} required")

        out = 0
        for idx in range(0, size, DECODED_GROUP_SIZE):
            remaining = size - idx
            b0 = data[idx]

            # First symbol always uses six full bits
            destination[out] = _ENCODE_SYMBOLS[b0 >> 2]

            if remaining == 1:
                destination[out + 1] = _ENCODE_SYMBOLS[(b0 & 0x03) << 4]
                destination[out + 2] = _PAD
                destination[out + 3] = _PAD
            else:
                b1 = data[idx + 1]
                destination[out + 1] = _ENCODE_SYMBOLS[((b0 & 0x03) << 4) | (b1 >> 4)]

                if remaining == 2:
                    destination[out + 2] = _ENCODE_SYMBOLS[(b1 & 0x0F) << 2]
                    destination[out + 3] = _PAD
                else:
                    b2 = data[idx + 2]
                    destination[out + 2] = _ENCODE_SYMBOLS[((b1 & 0x0F) << 2) | (b2 >> 6)]
                    destination[out + 3] = _ENCODE_SYMBOLS[b2 & 0x3F]

            out += ENCODED_GROUP_SIZE

        return out

    # -- decoder --

    def decode(self, source: EncodedText) -> bytes:
        text = _as_text(source)
        self.validate(text)

        destination = bytearray(self._decoded_size(text))
        self._decode_validated(text, destination)
        return bytes(destination)

    def decode_into(self, source: EncodedText, destination: bytearray) -> int:
        text = _as_text(source)
        self.validate(text)

        required = self._decoded_size(text)
        if len(destination) < required:
            raise ValueError(f"destination holds {len(destination)} bytes, {required} required")

        return self._decode_validated(text, destination)

    @staticmethod
    def _decode_validated(text: str, destination: bytearray) -> int:
        out = 0
        for idx in range(0, len(text), ENCODED_GROUP_SIZE):
            c0, c1, c2, c3 = text[idx:idx + ENCODED_GROUP_SIZE]
            v0 = DECODE_LOOKUP[ord(c0)]
            v1 = DECODE_LOOKUP[ord(c1)]

            destination[out] = ((v0 << 2) | (v1 >> 4)) & 0xFF
            out += 1

            if c2 != PAD_CHAR:
                v2 = DECODE_LOOKUP[ord(c2)]
                destination[out] = ((v1 << 4) | (v2 >> 2)) & 0xFF
                out += 1

                if c3 != PAD_CHAR:
                    destination[out] = ((v2 << 6) & 0xC0) | DECODE_LOOKUP[ord(c3)]
                    out += 1

        return out

"""Abstract base class for binary-to-text codecs."""

import logging
from abc import ABC, abstractmethod
from typing import Union

from .errors import FormatError

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]
EncodedText = Union[str, bytes, bytearray, memoryview]


class Codec(ABC):
    """Base codec interface for encoding bytes to text and decoding text to bytes."""

    name: str = ""

    @abstractmethod
    def encode(self, source: BytesLike) -> str:
        """Encode a byte buffer.

        Args:
            source: The bytes to encode

        Returns:
            The encoded text
        """
        pass

    @abstractmethod
    def encode_into(self, source: BytesLike, destination: bytearray) -> int:
        """Encode a byte buffer into a caller-supplied buffer as ASCII symbols.

        Args:
            source: The bytes to encode
            destination: Writable buffer of at least encode_size(len(source)) bytes

        Returns:
            Number of bytes written to destination
        """
        pass

    @abstractmethod
    def encode_size(self, source_size: int) -> int:
        """Return the length of the text produced by encoding source_size bytes."""
        pass

    @abstractmethod
    def decode(self, source: EncodedText) -> bytes:
        """Decode encoded text.

        Args:
            source: The text to decode

        Returns:
            The decoded bytes

        Raises:
            FormatError: If source is not valid encoded text.
        """
        pass

    @abstractmethod
    def decode_into(self, source: EncodedText, destination: bytearray) -> int:
        """Decode encoded text into a caller-supplied buffer.

        Args:
            source: The text to decode
            destination: Writable buffer of at least decode_size(source) bytes

        Returns:
            Number of bytes written to destination

        Raises:
            FormatError: If source is not valid encoded text.
        """
        pass

    @abstractmethod
    def decode_size(self, source: EncodedText) -> int:
        """Return the number of bytes source decodes to.

        Raises:
            FormatError: If source is not valid encoded text.
        """
        pass

    @abstractmethod
    def validate(self, source: EncodedText) -> None:
        """Check that source can be decoded.

        Raises:
            FormatError: Describing the first problem found.
        """
        pass

    def is_valid(self, source: EncodedText) -> bool:
        """Return True if source can be decoded, False otherwise."""
        try:
            self.validate(source)
        except FormatError as e:
            logger.debug("%s text rejected: %s", self.name or type(self).__name__, e)
            return False
        return True

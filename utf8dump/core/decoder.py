"""Byte-stream decoder turning UTF-8-style sequences into code point values."""

from dataclasses import dataclass
from typing import List

# Bytes before this offset are never decoded. The source files are expected
# to carry a 3-byte header; this is not byte-order-mark detection.
SKIP_OFFSET = 3

LEAD_BYTE_MASK = 0b00011111
CONTINUATION_MASK = 0b00111111


class DecodeError(ValueError):
    """Base class for failures raised while decoding a byte buffer."""


class TruncatedSequenceError(DecodeError):
    """A lead byte declares more continuation bytes than the buffer holds."""

    def __init__(self, offset: int) -> None:
        super().__init__(
            "File structure suggests more characters, but reached end of "
            f"file on byte: {offset}"
        )
        self.offset = offset


class InvalidSequenceLengthError(DecodeError):
    """Assembly was asked for a continuation count it cannot handle."""

    def __init__(self, count: int) -> None:
        super().__init__(f"Incorrect number of bytes to parse: {count}")
        self.count = count


def nth_bit(byte: int, bit: int) -> int:
    """Return bit ``bit`` of ``byte`` (7 is the most significant)."""
    return (byte >> bit) & 1


def is_ascii(byte: int) -> bool:
    return nth_bit(byte, 7) == 0


def continuation_count(lead: int) -> int:
    """Number of continuation bytes announced by ``lead``.

    The count is the sum of bits 6, 5 and 4, so it always falls in 0..3.
    """
    return nth_bit(lead, 6) + nth_bit(lead, 5) + nth_bit(lead, 4)


def assemble(buffer: bytes, index: int, lead: int, count: int) -> int:
    """Combine the lead byte at ``index`` with its ``count`` continuation bytes.

    Continuation bytes contribute their low 6 bits whatever their top two
    bits are; a malformed ``10xxxxxx`` tag is accepted as-is.
    """
    first = lead & LEAD_BYTE_MASK
    if count == 1:
        second = buffer[index + 1] & CONTINUATION_MASK
        return (first << 6) | second
    if count == 2:
        second = buffer[index + 1] & CONTINUATION_MASK
        third = buffer[index + 2] & CONTINUATION_MASK
        return (first << 16) | (second << 12) | third
    if count == 3:
        second = buffer[index + 1] & CONTINUATION_MASK
        third = buffer[index + 2] & CONTINUATION_MASK
        fourth = buffer[index + 3] & CONTINUATION_MASK
        return (first << 22) | (second << 18) | (third << 12) | fourth
    raise InvalidSequenceLengthError(count)


@dataclass
class Utf8Decoder:
    """Decode a whole byte buffer into a list of code point values.

    Scanning starts at ``skip``. ASCII bytes (bit 7 clear) are emitted
    unchanged; any other byte is treated as a lead byte whose bits 6..4
    count the continuation bytes that follow it.
    """

    skip: int = SKIP_OFFSET

    def decode(self, buffer: bytes) -> List[int]:
        values: List[int] = []
        size = len(buffer)
        cursor = self.skip

        while cursor < size:
            byte = buffer[cursor]

            # ASCII fast path
            if is_ascii(byte):
                values.append(byte)
                cursor += 1
                continue

            count = continuation_count(byte)
            if cursor + count >= size:
                raise TruncatedSequenceError(cursor)
            values.append(assemble(buffer, cursor, byte, count))
            cursor += count + 1

        return values


def decode(buffer: bytes) -> List[int]:
    """Decode ``buffer`` with the default skip offset."""
    return Utf8Decoder().decode(buffer)

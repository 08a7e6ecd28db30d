"""Core modules for the utf8dump decoder."""

from .decoder import (  # noqa: F401
    SKIP_OFFSET,
    DecodeError,
    InvalidSequenceLengthError,
    TruncatedSequenceError,
    Utf8Decoder,
    decode,
)
from .display import ListingFormat, format_value, render_listing  # noqa: F401
from .reader import FileAccessError, read_file  # noqa: F401
from .trace import DecodeTrace  # noqa: F401

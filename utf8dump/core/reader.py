"""Load file contents for decoding."""

from pathlib import Path
from typing import Union


class FileAccessError(OSError):
    """The input file could not be opened or read."""


def read_file(path: Union[str, Path]) -> bytes:
    source = Path(path)
    try:
        with source.open("rb") as handle:
            return handle.read()
    except OSError as exc:
        raise FileAccessError(f"File not found: {source}") from exc

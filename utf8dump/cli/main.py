"""utf8dump CLI entrypoint."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from utf8dump.core import (
    DecodeError,
    DecodeTrace,
    FileAccessError,
    decode,
    read_file,
    render_listing,
)


def dump(path: Path, out: TextIO, trace: DecodeTrace) -> None:
    """Read ``path``, decode it and write the value listing to ``out``."""
    trace.log(f"start {path}")
    content = read_file(path)
    trace.log(f"read {len(content)} bytes")

    values = decode(content)
    trace.log(f"decoded {len(values)} code points")

    out.write(render_listing(values))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="List the code point values of a UTF-8 encoded file"
    )
    # Optional at the argparse level so a missing path keeps exit status 1.
    parser.add_argument("path", nargs="?", help="File to decode")
    parser.add_argument(
        "--trace-log", default=None, help="Append timestamped run events to this file"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.path is None:
        print("Expected a file path", file=sys.stderr)
        return 1

    trace = DecodeTrace(Path(args.trace_log) if args.trace_log else None)
    try:
        dump(Path(args.path), sys.stdout, trace)
    except (FileAccessError, DecodeError) as exc:
        trace.log(f"failed: {exc}")
        print(exc, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())

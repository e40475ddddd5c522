"""Count lines, bytes and words in a file."""

from __future__ import annotations

import os
import sys

# Lines are read through a fixed buffer; a line longer than this many bytes
# is counted once per chunk.
LINE_CHUNK = 49


def count_lines(path: str | os.PathLike[str]) -> int:
    """Count lines, splitting lines longer than LINE_CHUNK bytes into chunks."""
    with open(path, "rb") as handle:
        return sum(-(-len(line) // LINE_CHUNK) for line in handle)


def count_bytes(path: str | os.PathLike[str]) -> int:
    """Return the size of the file in bytes."""
    return os.path.getsize(path)


def count_words(path: str | os.PathLike[str]) -> int:
    """Count whitespace-separated words."""
    with open(path, "rb") as handle:
        return sum(len(line.split()) for line in handle)


_REPORTS = {
    "lines": (count_lines, "lines"),
    "bytes": (count_bytes, "bytes"),
    "words": (count_words, "words"),
}

_OPTIONS = {
    "-l": ("lines",),
    "--lines": ("lines",),
    "-c": ("bytes",),
    "--bytes": ("bytes",),
    "-w": ("words",),
    "--words": ("words",),
    "-a": ("lines", "bytes", "words"),
    "--all": ("lines", "bytes", "words"),
}


def main(argv: list[str] | None = None) -> int:
    """Run the counter: OPTION FILE, where OPTION is -l, -c, -w or -a."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2 or args[0] not in _OPTIONS:
        print("invalid arguments")
        return 1

    path = args[1]
    try:
        for key in _OPTIONS[args[0]]:
            func, label = _REPORTS[key]
            print(f"{func(path)} {label}")
    except OSError as exc:
        print(f"can't read {path}: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
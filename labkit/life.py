"""Conway-style life on a torus, read from and written to 1-bit BMP files.

A pixel whose bit is 0 is a live cell; a set bit is a dead one. Each pixel
row is padded to a multiple of 32 bits and rows are stored bottom-up.

The rule is the one this tool has always used: a dead cell with exactly three
live neighbours is born, a live cell with exactly two survives, and every
other cell is dead in the next generation (so a live cell with three
neighbours dies).
"""

from __future__ import annotations

import os
import re
import struct
import sys
from dataclasses import dataclass
from itertools import count
from pathlib import Path
from typing import Sequence, Tuple

Grid = Tuple[Tuple[bool, ...], ...]

FILE_HEADER_SIZE = 14
CORE_HEADER_SIZE = 12
USAGE = (
    "invalid arguments\n"
    "correct arguments: --input input_file.bmp --output dir_name "
    "--max_iter N --dump_freq N"
)

_NEIGHBOUR_OFFSETS = tuple(
    (di, dj) for di in (-1, 0, 1) for dj in (-1, 0, 1) if (di, dj) != (0, 0)
)


class BitmapError(Exception):
    """Raised when a bitmap cannot be read or written."""


def _row_bits(width: int) -> int:
    return -(-width // 32) * 32


def _needed_bytes(width: int, height: int) -> int:
    if width == 0 or height == 0:
        return 0
    return ((height - 1) * _row_bits(width) + width + 7) // 8


@dataclass(frozen=True)
class LifeBitmap:
    """A loaded bitmap: its headers kept verbatim and its decoded cells."""

    file_header: bytes
    info_header: bytes
    width: int
    height: int
    data_size: int
    cells: Grid

    def _bit_index(self, row: int, column: int) -> int:
        return (self.height - 1 - row) * _row_bits(self.width) + column

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> LifeBitmap:
        """Read a 1-bit BMP file and decode its cells."""
        try:
            raw = Path(path).read_bytes()
        except OSError:
            raise BitmapError(f"can't open {os.fspath(path)}") from None

        if len(raw) < FILE_HEADER_SIZE:
            raise BitmapError("can't read bitmapheader")
        file_header = raw[:FILE_HEADER_SIZE]
        if file_header[:2] != b"BM":
            raise BitmapError("not a bmp file")
        (file_size,) = struct.unpack_from("<I", file_header, 2)
        (offset,) = struct.unpack_from("<I", file_header, 10)

        info_size = offset - FILE_HEADER_SIZE
        if info_size < 4 or len(raw) < offset:
            raise BitmapError("can't read bitinfoheader")
        info_header = raw[FILE_HEADER_SIZE:offset]
        (header_size,) = struct.unpack_from("<I", info_header, 0)
        if header_size == CORE_HEADER_SIZE:
            if info_size < 8:
                raise BitmapError("can't read bitinfoheader")
            width, height = struct.unpack_from("<HH", info_header, 4)
        else:
            if info_size < 12:
                raise BitmapError("can't read bitinfoheader")
            width, height = struct.unpack_from("<II", info_header, 4)

        data_size = file_size - offset
        if data_size <= 0 or len(raw) < offset + data_size:
            raise BitmapError("can't read info")
        if _needed_bytes(width, height) > data_size:
            raise BitmapError("pixel data too short for the image size")
        data = raw[offset : offset + data_size]

        bitmap = cls(file_header, info_header, width, height, data_size, ())
        cells = tuple(
            tuple(
                (data[k >> 3] >> (7 - (k & 7))) & 1 == 0
                for k in (bitmap._bit_index(i, j) for j in range(width))
            )
            for i in range(height)
        )
        return cls(file_header, info_header, width, height, data_size, cells)

    def _check_shape(self, cells: Sequence[Sequence[bool]]) -> None:
        if len(cells) != self.height or any(len(row) != self.width for row in cells):
            raise ValueError(
                f"cells must be {self.height} rows of {self.width} columns"
            )

    def encode(self, cells: Sequence[Sequence[bool]]) -> bytes:
        """Return the whole file for these cells, headers unchanged."""
        self._check_shape(cells)
        data = bytearray(self.data_size)
        for i, row in enumerate(cells):
            for j, cell in enumerate(row):
                if not cell:
                    k = self._bit_index(i, j)
                    data[k >> 3] |= 0x01 << (7 - (k & 7))
        return self.file_header + self.info_header + bytes(data)

    def save(self, path: str | os.PathLike[str], cells: Sequence[Sequence[bool]]) -> None:
        """Write these cells to a file with this bitmap's headers."""
        content = self.encode(cells)
        try:
            Path(path).write_bytes(content)
        except OSError:
            raise BitmapError(f"can't write {os.fspath(path)}") from None

    def render(self, cells: Sequence[Sequence[bool]]) -> str:
        """Draw the cells as text: '8' for live, '.' for dead, one line per row."""
        self._check_shape(cells)
        return "".join(
            "".join("8" if cell else "." for cell in row) + "\n" for row in cells
        )


def next_generation(cells: Sequence[Sequence[bool]]) -> Grid:
    """Return the next generation on a torus (edges wrap around)."""
    grid = [tuple(bool(cell) for cell in row) for row in cells]
    height = len(grid)
    width = len(grid[0]) if grid else 0
    if any(len(row) != width for row in grid):
        raise ValueError("all rows must have the same length")

    def neighbours(i: int, j: int) -> int:
        return sum(
            grid[(i + di) % height][(j + dj) % width] for di, dj in _NEIGHBOUR_OFFSETS
        )

    def lives(cell: bool, n: int) -> bool:
        return (n == 3 and not cell) or (n == 2 and cell)

    return tuple(
        tuple(lives(cell, neighbours(i, j)) for j, cell in enumerate(row))
        for i, row in enumerate(grid)
    )


def run(
    input_path: str | os.PathLike[str],
    output_dir: str | os.PathLike[str],
    max_iter: int = 0,
    dump_freq: int = 1,
) -> list[str]:
    """Evolve the bitmap, saving every dump_freq-th generation as N.bmp.

    max_iter of 0 means no limit. Stops early, printing "life is freezed",
    once a generation equals the one before. Returns the paths written.
    """
    if dump_freq <= 0:
        raise ValueError("dump_freq must be positive")
    bitmap = LifeBitmap.load(input_path)
    cells = bitmap.cells
    written: list[str] = []
    for generation in count(1):
        if max_iter and generation > max_iter:
            break
        following = next_generation(cells)
        if following == cells:
            print("life is freezed")
            break
        if generation % dump_freq == 0:
            target = os.path.join(os.fspath(output_dir), f"{generation}.bmp")
            bitmap.save(target, following)
            written.append(target)
        cells = following
    return written


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Run: --input FILE.bmp --output DIR [--max_iter N] [--dump_freq N]."""
    args = sys.argv[1:] if argv is None else list(argv)
    input_path: str | None = None
    output_dir: str | None = None
    max_iter = 0
    dump_freq = 1

    for key, value in zip(args[0::2], args[1::2]):
        if key == "--input":
            input_path = value
        elif key == "--output":
            output_dir = value
        elif key == "--max_iter":
            max_iter = _atoi(value)
        elif key == "--dump_freq":
            dump_freq = _atoi(value)
        else:
            print(USAGE)
            return 1

    if input_path is None or output_dir is None:
        print(USAGE)
        return 1

    try:
        run(input_path, output_dir, max_iter, dump_freq)
    except (BitmapError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
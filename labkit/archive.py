"""A minimal archive format that stores whole files one after another.

Layout, little-endian:

* archive header: 8-byte signature ``b"arcfile\\0"`` and a 32-bit signed
  entry count (12 bytes);
* for each entry: a 32-bit signed name size (including the terminating NUL),
  4 bytes of padding and a 64-bit signed data size (16 bytes), then the
  NUL-terminated name, then the file data.
"""

from __future__ import annotations

import os
import struct
import sys
from contextlib import suppress
from typing import BinaryIO, Iterable, Iterator

SIGNATURE = b"arcfile\0"
ARCHIVE_HEADER = struct.Struct("<8si")
ENTRY_HEADER = struct.Struct("<i4xq")

StrPath = "str | os.PathLike[str]"


class ArchiveError(Exception):
    """Raised when an archive cannot be created, read or extracted."""


def _read_input(name: str | bytes) -> bytes:
    try:
        with open(name, "rb") as handle:
            return handle.read()
    except OSError:
        raise ArchiveError(f"can't open file {os.fsdecode(name)}") from None


def create_archive(
    archive_path: str | os.PathLike[str],
    file_names: Iterable[str | os.PathLike[str]],
) -> None:
    """Write the named files into a new archive.

    Names are stored as given. On any failure the partly written archive is
    removed and ArchiveError is raised.
    """
    archive = os.fspath(archive_path)
    names = [os.fspath(name) for name in file_names]
    if archive in names:
        raise ArchiveError("error - file name is equal to arc name..")

    try:
        out = open(archive, "wb")
    except OSError:
        raise ArchiveError("can't create archive file") from None

    try:
        with out:
            try:
                out.write(ARCHIVE_HEADER.pack(SIGNATURE, len(names)))
            except OSError:
                raise ArchiveError("can't write into arc") from None
            for name in names:
                data = _read_input(name)
                encoded = os.fsencode(name) + b"\0"
                try:
                    out.write(ENTRY_HEADER.pack(len(encoded), len(data)))
                    out.write(encoded)
                    out.write(data)
                except OSError:
                    raise ArchiveError("write error") from None
    except BaseException:
        with suppress(OSError):
            os.remove(archive)
        raise


def _read_exact(handle: BinaryIO, size: int) -> bytes:
    chunk = handle.read(size)
    if len(chunk) != size:
        raise ArchiveError("read error")
    return chunk


def _iter_entries(
    archive_path: str | os.PathLike[str], with_data: bool
) -> Iterator[tuple[str, bytes | None]]:
    try:
        handle = open(archive_path, "rb")
    except OSError:
        raise ArchiveError("can't open archive file") from None

    with handle:
        signature, count = ARCHIVE_HEADER.unpack(
            _read_exact(handle, ARCHIVE_HEADER.size)
        )
        if signature != SIGNATURE:
            raise ArchiveError("not arc file")
        for _ in range(count):
            name_size, data_size = ENTRY_HEADER.unpack(
                _read_exact(handle, ENTRY_HEADER.size)
            )
            if name_size <= 0 or data_size < 0:
                raise ArchiveError("read error")
            raw_name = _read_exact(handle, name_size)
            name = os.fsdecode(raw_name.split(b"\0", 1)[0])
            if with_data:
                yield name, _read_exact(handle, data_size)
            else:
                try:
                    handle.seek(data_size, os.SEEK_CUR)
                except (OSError, OverflowError):
                    raise ArchiveError("read error") from None
                yield name, None


def _iter_extract(archive_path: str | os.PathLike[str]) -> Iterator[str]:
    for name, data in _iter_entries(archive_path, with_data=True):
        try:
            with open(name, "wb") as out:
                out.write(data or b"")
        except OSError:
            raise ArchiveError(f"can't create file {name}") from None
        yield name


def extract_archive(archive_path: str | os.PathLike[str]) -> list[str]:
    """Recreate every stored file under its stored name; return the names.

    Files written before an error are left in place.
    """
    return list(_iter_extract(archive_path))


def list_archive(archive_path: str | os.PathLike[str]) -> list[str]:
    """Return the names stored in the archive, in order."""
    return [name for name, _ in _iter_entries(archive_path, with_data=False)]


def main(argv: list[str] | None = None) -> int:
    """Run the archiver.

    Usage: --file ARC --create FILE...  |  --file ARC --extract
    |  --file ARC --list
    """
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) > 3 and args[0] == "--file" and args[2] == "--create":
            create_archive(args[1], args[3:])
        elif len(args) == 3 and args[0] == "--file" and args[2] == "--extract":
            for name in _iter_extract(args[1]):
                print(f"creating file {name}")
        elif len(args) == 3 and args[0] == "--file" and args[2] == "--list":
            for name, _ in _iter_entries(args[1], with_data=False):
                print(name)
        else:
            print("Invalid args")
            return 1
    except ArchiveError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
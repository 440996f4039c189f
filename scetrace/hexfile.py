"""Saving traces as text and loading hexadecimal byte dumps."""

from __future__ import annotations

import os

__all__ = ["save_file", "open_file"]


def save_file(path: str | os.PathLike[str], contents: str) -> None:
    """Write text to a file, replacing what was there.

    Raises OSError when the file cannot be written.
    """
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(contents)


def _nibble(char: str) -> int:
    char = char.lower()
    if char.isdecimal():
        return int(char)
    return ord(char) - ord("a") + 10


def open_file(path: str | os.PathLike[str]) -> bytes:
    """Read pairs of hex digits from each line of a file.

    Empty lines are skipped and a trailing unpaired digit on a line is ignored.
    Raises OSError when the file cannot be read.
    """
    data = bytearray()
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            line = line.rstrip("\n")
            for first, second in zip(line[0::2], line[1::2]):
                data.append((_nibble(first) * 16 + _nibble(second)) & 0xFF)
    return bytes(data)
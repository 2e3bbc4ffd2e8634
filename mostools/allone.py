"""Write a test disk image whose every 32-bit word holds its own byte offset."""

from __future__ import annotations

import sys
from array import array
from pathlib import Path

DEFAULT_SIZE = 16 * 1024 * 1024
DEFAULT_NAME = "all_one.img"


def pattern_bytes(size: int = DEFAULT_SIZE) -> bytes:
    """Return words 0, 4, 8, ... in native byte order, covering ``size`` bytes.

    A size that is not a multiple of four is rounded up to a whole word.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    words = array("I", range(0, size, 4))
    if words.itemsize != 4:
        words = array("L", range(0, size, 4))
    return words.tobytes()


def write_image(path, size: int = DEFAULT_SIZE) -> None:
    """Write the offset pattern of ``size`` bytes to ``path``."""
    Path(path).write_bytes(pattern_bytes(size))


def main(argv=None) -> int:
    """Command entry point: write the image to all_one.img in the current directory."""
    write_image(DEFAULT_NAME)
    return 0


if __name__ == "__main__":
    sys.exit(main())
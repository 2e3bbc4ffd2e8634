"""List the address of every section in an ELF32 file."""

from __future__ import annotations

import sys
from pathlib import Path

from mostools.elf import NotElfError, section_headers


def readelf(data) -> list[str]:
    """Return one ``index:0xaddr`` line per section header of the ELF image in ``data``.

    Raises NotElfError if ``data`` is not an ELF image.
    """
    return [f"{index}:0x{shdr.addr:x}" for index, shdr in enumerate(section_headers(data))]


def main(argv=None) -> int:
    """Command entry point: print section addresses of the named ELF file."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print("Usage: readelf <elf-file>", file=sys.stderr)
        return 1

    path = argv[0]
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        print(f"{path}: {exc.strerror or exc}", file=sys.stderr)
        return 1

    try:
        lines = readelf(data)
    except NotElfError as exc:
        print(exc, file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"{path}: {exc}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
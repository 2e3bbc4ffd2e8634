"""Convert a binary file into a C source file holding it as a byte array."""

from __future__ import annotations

import sys
from pathlib import Path

BMAX = 4 << 25

HELP = (
    "convert ELF binary file to C file.\n"
    " -h            print this message\n"
    " -f <file>     tell the binary file  (input)\n"
    " -o <file>     tell the c file       (output)\n"
    " -p <prefix>   add prefix to the array name\n"
)


class UsageError(ValueError):
    """Raised when the command line is malformed."""


def symbol_stem(path: str) -> str:
    """Return ``path`` cut at its first '.', the name used in the generated symbols."""
    return path.split(".", 1)[0]


def render_c(data: bytes, stem: str, prefix: str = "") -> str:
    """Return C source declaring the size and contents of ``data``."""
    size = len(data)
    if size >= BMAX:
        raise ValueError(f"binary too large: {size} bytes")
    head = (
        f"unsigned int binary_{prefix}_{stem}_size = {size};\n"
        f"unsigned char binary_{prefix}_{stem}_start[] = {{"
    )
    body = ",".join(f"0x{byte:x}" for byte in data)
    closing = "}" if size else ""
    return f"{head}{body}{closing};\n"


def convert(bin_file: str, out_file: str, prefix: str = "") -> None:
    """Read ``bin_file`` and write its C rendering to ``out_file``."""
    data = Path(bin_file).read_bytes()
    text = render_c(data, symbol_stem(bin_file), prefix)
    Path(out_file).write_text(text)


def _parse(argv: list[str]) -> dict[str, str] | None:
    options: dict[str, str] = {}
    names = {"-f": "bin_file", "-o": "out_file", "-p": "prefix"}
    args = iter(argv)
    for arg in args:
        if not arg.startswith("-"):
            continue
        key = names.get(arg)
        if key is None:
            return None
        value = next(args, None)
        if value is None:
            raise UsageError(f"option {arg} needs a value")
        if key in options:
            raise UsageError(f"option {arg} given twice")
        options[key] = value
    for flag, key in (("-f", "bin_file"), ("-o", "out_file")):
        if key not in options:
            raise UsageError(f"missing option {flag}")
    return options


def main(argv=None) -> int:
    """Command entry point."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = _parse(list(argv))
    except UsageError as exc:
        print(f"bintoc: {exc}", file=sys.stderr)
        return 1
    if options is None:
        print(HELP, end="")
        return 0
    try:
        convert(options["bin_file"], options["out_file"], options.get("prefix", ""))
    except (OSError, ValueError) as exc:
        print(f"bintoc: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
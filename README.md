# mostools

Host-side helpers for building and inspecting a small 32-bit teaching kernel.
Everything is pure Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### `mos-readelf`

Lists the sections of a 32-bit little-endian ELF file, one line per section
header, giving its index and its address in hexadecimal:

```
$ mos-readelf target/mos
0:0x0
1:0x80020000
...
```

Without a file argument it prints `Usage: readelf <elf-file>` to standard
error. If the file cannot be read, or is not an ELF file (`not an elf file`),
or its section table is truncated, a message goes to standard error and the
command exits with status 1.

### `mos-bintoc`

Turns a binary file into a C source file that holds its bytes in an array,
so that the binary can be linked into a kernel image:

```
$ mos-bintoc -f hello.b -o hello.b.c -p user
```

This writes two symbols, `binary_user_hello_size` and
`binary_user_hello_start`. The name stem is the input path up to its first
dot. Without `-p` the prefix is empty, giving `binary__hello_size`.

Options:

- `-f <file>`: the binary file to read (required)
- `-o <file>`: the C file to write (required)
- `-p <prefix>`: prefix added to the array names
- `-h`: print a short help message; any other option starting with `-` does
  the same

Arguments that do not start with `-` are ignored. A missing or repeated
option, an unreadable input, or an input of 128 MiB or more is reported on
standard error with exit status 1.

### `mos-allone`

Writes a 16 MiB test disk image, `all_one.img`, in the current directory.
Each 32-bit word of the image, in the host's byte order, holds its own byte
offset, which makes it easy to see where a block read came from.

## Library

```python
from mostools.elf import ElfHeader, is_elf_format, section_headers, program_headers
from mostools.readelf import readelf
from mostools.bintoc import render_c
from mostools.memlayout import pdx, ptx, round_up, genmask

with open("target/mos", "rb") as f:
    data = f.read()

if is_elf_format(data):
    header = ElfHeader.parse(data)
    for section in section_headers(data):
        print(hex(section.addr))
    for segment in program_headers(data):
        print(hex(segment.vaddr), segment.readable, segment.executable)

print("\n".join(readelf(data)))
print(render_c(b"\x01\x02", "hello", "user"))
print(pdx(0x7F3FE000), ptx(0x7F3FE000))
print(round_up(5000, 4096), hex(genmask(31, 12)))
```

Modules:

- `mostools.elf`: `ElfHeader`, `SectionHeader` and `ProgramHeader`
  dataclasses, each with a `parse` class method; `is_elf_format`,
  `section_headers` and `program_headers`. Non-ELF input raises
  `NotElfError`; truncated tables raise `ValueError`.
- `mostools.readelf`: `readelf(data)` returns the `index:0xaddr` lines the
  command prints.
- `mostools.bintoc`: `symbol_stem`, `render_c` and `convert`.
- `mostools.allone`: `pattern_bytes(size)` and `write_image(path, size)`.
- `mostools.errors`: the kernel's error codes as `ErrorCode`, each with a
  `description`, and `MosError`, which takes a code (negative values are
  accepted) and exposes `code` and `errno`.
- `mostools.memlayout`: address-space constants (`ULIM`, `UTOP`,
  `USTACKTOP`, `KSEG0`, ...), page-table entry bits (`PTE_V`, `PTE_D`, ...)
  and helpers `pdx`, `ptx`, `pte_addr`, `pte_flags`, `ppn`, `vpn`, `paddr`,
  `kaddr`, `round_up`, `round_down`, `genmask`, `genmask_ull` and `log2`.
- `mostools.trapframe`: the `Trapframe` register layout with `pack`,
  `unpack` and `reg` (lookup by ABI name such as `a0` or `sp`), the
  `Syscall` numbers, CSR and ESTAT constants, and `exception_code` /
  `exception_subcode` for decoding an ESTAT value.
- `mostools.args`: `ArgScanner`, a scanner for single-letter command-line
  flags in the `-abc value` style, with `arg`, `earg` (raises
  `MissingArgumentError`), `rest` and the `option` property.

## What it does not do

The package only reads and writes files on the host. It does not build the
kernel, create file-system images, load ELF segments into memory, or run or
emulate the kernel; the layout helpers compute addresses but manage no page
tables or processes.
"""ELF32 structures and helpers for reading section and program headers."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

EI_NIDENT = 16

EI_MAG0 = 0
EI_MAG1 = 1
EI_MAG2 = 2
EI_MAG3 = 3
ELFMAG = b"\x7fELF"

PT_NULL = 0
PT_LOAD = 1
PT_DYNAMIC = 2
PT_INTERP = 3
PT_NOTE = 4
PT_SHLIB = 5
PT_PHDR = 6
PT_NUM = 7
PT_LOOS = 0x60000000
PT_HIOS = 0x6FFFFFFF
PT_LOPROC = 0x70000000
PT_HIPROC = 0x7FFFFFFF

PF_X = 1 << 0
PF_W = 1 << 1
PF_R = 1 << 2
PF_MASKPROC = 0xF0000000


class NotElfError(ValueError):
    """Raised when a buffer does not hold an ELF image."""

    def __init__(self, message: str = "not an elf file") -> None:
        super().__init__(message)


def _unpack(layout: struct.Struct, data, offset: int, what: str) -> tuple:
    if offset < 0:
        raise ValueError(f"negative offset {offset} for {what}")
    try:
        return layout.unpack_from(data, offset)
    except struct.error as exc:
        raise ValueError(f"truncated {what} at offset {offset}") from exc


@dataclass(frozen=True)
class ElfHeader:
    """The ELF32 file header found at the start of every ELF file."""

    ident: bytes
    type: int
    machine: int
    version: int
    entry: int
    phoff: int
    shoff: int
    flags: int
    ehsize: int
    phentsize: int
    phnum: int
    shentsize: int
    shnum: int
    shstrndx: int

    LAYOUT: ClassVar[struct.Struct] = struct.Struct(f"<{EI_NIDENT}sHHIIIIIHHHHHH")
    SIZE: ClassVar[int] = LAYOUT.size

    @classmethod
    def parse(cls, data) -> "ElfHeader":
        """Parse the header at the start of ``data``; raise NotElfError if it is not ELF."""
        if not is_elf_format(data):
            raise NotElfError()
        return cls(*_unpack(cls.LAYOUT, data, 0, "ELF header"))


@dataclass(frozen=True)
class SectionHeader:
    """An ELF32 section header."""

    name: int
    type: int
    flags: int
    addr: int
    offset: int
    size: int
    link: int
    info: int
    addralign: int
    entsize: int

    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<10I")
    SIZE: ClassVar[int] = LAYOUT.size

    @classmethod
    def parse(cls, data, offset: int) -> "SectionHeader":
        """Parse a section header located at ``offset`` in ``data``."""
        return cls(*_unpack(cls.LAYOUT, data, offset, "section header"))


@dataclass(frozen=True)
class ProgramHeader:
    """An ELF32 program segment header."""

    type: int
    offset: int
    vaddr: int
    paddr: int
    filesz: int
    memsz: int
    flags: int
    align: int

    LAYOUT: ClassVar[struct.Struct] = struct.Struct("<8I")
    SIZE: ClassVar[int] = LAYOUT.size

    @classmethod
    def parse(cls, data, offset: int) -> "ProgramHeader":
        """Parse a program header located at ``offset`` in ``data``."""
        return cls(*_unpack(cls.LAYOUT, data, offset, "program header"))

    @property
    def readable(self) -> bool:
        return bool(self.flags & PF_R)

    @property
    def writable(self) -> bool:
        return bool(self.flags & PF_W)

    @property
    def executable(self) -> bool:
        return bool(self.flags & PF_X)


def is_elf_format(data) -> bool:
    """Return True if ``data`` is large enough for a header and starts with the ELF magic."""
    return len(data) >= ElfHeader.SIZE and bytes(data[:4]) == ELFMAG


def section_headers(data) -> list[SectionHeader]:
    """Return every section header of the ELF image in ``data``, in table order."""
    header = ElfHeader.parse(data)
    return [
        SectionHeader.parse(data, header.shoff + index * SectionHeader.SIZE)
        for index in range(header.shnum)
    ]


def program_headers(data) -> list[ProgramHeader]:
    """Return every program header of the ELF image in ``data``, in table order."""
    header = ElfHeader.parse(data)
    return [
        ProgramHeader.parse(data, header.phoff + index * header.phentsize)
        for index in range(header.phnum)
    ]
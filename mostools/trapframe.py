"""Saved register context, system call numbers and CPU register definitions."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar

_MASK32 = 0xFFFFFFFF

NREGS = 32

TF_REG0 = 0
TF_REG = tuple(TF_REG0 + 4 * index for index in range(NREGS))
TF_CRMD = TF_REG[-1] + 4
TF_BADV = TF_CRMD + 4
TF_ESTAT = TF_BADV + 4
TF_ERA = TF_ESTAT + 4
TF_SIZE = TF_ERA + 4


class Syscall(IntEnum):
    """System call numbers."""

    PUTCHAR = 0
    PRINT_CONS = 1
    GETENVID = 2
    YIELD = 3
    ENV_DESTROY = 4
    SET_TLB_MOD_ENTRY = 5
    MEM_ALLOC = 6
    MEM_MAP = 7
    MEM_UNMAP = 8
    EXOFORK = 9
    SET_ENV_STATUS = 10
    SET_TRAPFRAME = 11
    PANIC = 12
    IPC_TRY_SEND = 13
    IPC_RECV = 14
    CGETC = 15
    WRITE_DEV = 16
    READ_DEV = 17
    READ_BLOCK = 18
    WRITE_BLOCK = 19


MAX_SYSNO = len(Syscall)

REGISTER_ALIASES = {
    "zero": 0, "ra": 1, "tp": 2, "sp": 3,
    "a0": 4, "a1": 5, "a2": 6, "a3": 7, "a4": 8, "a5": 9, "a6": 10, "a7": 11,
    "v0": 10, "v1": 11,
    "t0": 12, "t1": 13, "t2": 14, "t3": 15, "t4": 16, "t5": 17, "t6": 18,
    "t7": 19, "t8": 20,
    "x": 21, "fp": 22,
    "s0": 23, "s1": 24, "s2": 25, "s3": 26, "s4": 27, "s5": 28, "s6": 29,
    "s7": 30, "s8": 31,
}

CSR_CRMD = 0x0
CSR_PRMD = 0x1
CSR_EUEN = 0x2
CSR_ECTL = 0x4
CSR_ESTAT = 0x5
CSR_ERA = 0x6
CSR_BADV = 0x7
CSR_EENTRY = 0xC
CSR_TLBIDX = 0x10
CSR_TLBEHI = 0x11
CSR_TLBELO0 = 0x12
CSR_TLBELO1 = 0x13
CSR_ASID = 0x18
CSR_PGDL = 0x19
CSR_PGDH = 0x1A
CSR_PGD = 0x1B
CSR_CPUID = 0x20
CSR_SAVE0 = 0x30
CSR_SAVE1 = 0x31
CSR_SAVE2 = 0x32
CSR_SAVE3 = 0x33
CSR_TID = 0x40
CSR_TCFG = 0x41
CSR_TVAL = 0x42
CSR_TICLR = 0x44
CSR_LLBCTL = 0x60
CSR_TLBRENTRY = 0x88
CSR_DMW0 = 0x180
CSR_DMW1 = 0x181

ESTAT_SWI0 = 0x0001
ESTAT_SWI1 = 0x0002
ESTAT_HWI0 = 0x0004
ESTAT_HWI1 = 0x0008
ESTAT_HWI2 = 0x0010
ESTAT_HWI3 = 0x0020
ESTAT_HWI4 = 0x0040
ESTAT_HWI5 = 0x0080
ESTAT_HWI6 = 0x0100
ESTAT_HWI7 = 0x0200
ESTAT_TI = 0x0800
ESTAT_IPI = 0x1000

ESTAT_ECODE = 0x003F0000
ESTAT_ESUBCODE = 0x7FC00000

CRMD_PLV = 0x0003
CRMD_IE = 0x0004
CRMD_DA = 0x0008
CRMD_PG = 0x0010
CRMD_DATF = 0x0020
CRMD_DATM = 0x0080

PRMD_PPLV = 0x0003
PRMD_PIE = 0x0004


def _shift_of(mask: int) -> int:
    return (mask & -mask).bit_length() - 1


def exception_code(estat: int) -> int:
    """The exception code field of an ESTAT value."""
    return (estat & ESTAT_ECODE) >> _shift_of(ESTAT_ECODE)


def exception_subcode(estat: int) -> int:
    """The exception subcode field of an ESTAT value."""
    return (estat & ESTAT_ESUBCODE) >> _shift_of(ESTAT_ESUBCODE)


def _check_word(name: str, value: int) -> None:
    if not 0 <= value <= _MASK32:
        raise ValueError(f"{name} must fit in 32 bits, got {value}")


@dataclass
class Trapframe:
    """Registers saved on entry to an exception, in their stack layout order."""

    regs: list[int] = field(default_factory=lambda: [0] * NREGS)
    crmd: int = 0
    badv: int = 0
    estat: int = 0
    era: int = 0

    LAYOUT: ClassVar[struct.Struct] = struct.Struct(f"<{NREGS + 4}I")

    def __post_init__(self) -> None:
        self.regs = list(self.regs)
        if len(self.regs) != NREGS:
            raise ValueError(f"a trapframe holds {NREGS} registers, got {len(self.regs)}")
        for index, value in enumerate(self.regs):
            _check_word(f"register {index}", value)
        for name in ("crmd", "badv", "estat", "era"):
            _check_word(name, getattr(self, name))

    def pack(self) -> bytes:
        """Return the frame as it is laid out on the kernel stack."""
        self.__post_init__()
        return self.LAYOUT.pack(*self.regs, self.crmd, self.badv, self.estat, self.era)

    @classmethod
    def unpack(cls, data) -> "Trapframe":
        """Read a frame from the start of ``data``."""
        if len(data) < TF_SIZE:
            raise ValueError(f"trapframe needs {TF_SIZE} bytes, got {len(data)}")
        values = cls.LAYOUT.unpack_from(data, 0)
        crmd, badv, estat, era = values[NREGS:]
        return cls(list(values[:NREGS]), crmd, badv, estat, era)

    def reg(self, name: str) -> int:
        """Value of a register given by its ABI name, such as 'a0' or 'sp'."""
        return self.regs[REGISTER_ALIASES[name]]
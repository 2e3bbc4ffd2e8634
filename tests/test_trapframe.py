import struct

import pytest

from mostools.trapframe import (
    ESTAT_ECODE,
    ESTAT_ESUBCODE,
    MAX_SYSNO,
    REGISTER_ALIASES,
    TF_BADV,
    TF_CRMD,
    TF_ERA,
    TF_ESTAT,
    TF_REG,
    TF_SIZE,
    Syscall,
    Trapframe,
    exception_code,
    exception_subcode,
)


def _sample():
    return Trapframe(
        regs=list(range(100, 132)),
        crmd=0x7,
        badv=0xDEADBEEF,
        estat=0x000B0000,
        era=0x00400010,
    )


def test_frame_size_matches_layout():
    assert TF_SIZE == 144
    assert len(Trapframe().pack()) == TF_SIZE


def test_roundtrip():
    frame = _sample()
    assert Trapframe.unpack(frame.pack()) == frame


def test_fields_sit_at_their_offsets():
    frame = _sample()
    data = frame.pack()
    word = lambda off: struct.unpack_from("<I", data, off)[0]
    assert word(TF_CRMD) == frame.crmd
    assert word(TF_BADV) == frame.badv
    assert word(TF_ESTAT) == frame.estat
    assert word(TF_ERA) == frame.era
    assert [word(off) for off in TF_REG] == frame.regs


def test_packing_is_little_endian():
    frame = Trapframe(era=0x01020304)
    assert frame.pack()[TF_ERA:TF_ERA + 4] == b"\x04\x03\x02\x01"


def test_unpack_rejects_short_buffer():
    with pytest.raises(ValueError):
        Trapframe.unpack(bytes(TF_SIZE - 1))


def test_wrong_register_count_rejected():
    with pytest.raises(ValueError):
        Trapframe(regs=[0] * 31)


def test_out_of_range_value_rejected():
    with pytest.raises(ValueError):
        Trapframe(era=1 << 32)


def test_register_alias_lookup():
    frame = _sample()
    assert frame.reg("a0") == frame.regs[4]
    assert frame.reg("sp") == frame.regs[3]
    assert REGISTER_ALIASES["v0"] == REGISTER_ALIASES["a6"]


def test_syscall_numbers_are_contiguous():
    assert MAX_SYSNO == 20
    assert [Syscall(n) for n in range(MAX_SYSNO)] == list(Syscall)
    assert Syscall(0) is Syscall.PUTCHAR
    assert Syscall(MAX_SYSNO - 1) is Syscall.WRITE_BLOCK
    with pytest.raises(ValueError):
        Syscall(MAX_SYSNO)


def test_exception_code_extracts_field():
    assert exception_code(0x000B0000) == 0xB
    assert exception_code(ESTAT_ECODE | ESTAT_ESUBCODE | 0xFFFF) == exception_code(ESTAT_ECODE)
    assert exception_code(0xFFFF) == 0


def test_exception_subcode_roundtrip():
    for sub in (0, 1, 5, 511):
        assert exception_subcode(sub << 22) == sub
    assert exception_subcode(ESTAT_ECODE) == 0
"""Virtual memory layout, page table entry bits and address arithmetic."""

from __future__ import annotations

BITS_PER_LONG = 32
BITS_PER_LONG_LONG = 64

_MASK32 = (1 << BITS_PER_LONG) - 1
_MASK64 = (1 << BITS_PER_LONG_LONG) - 1

PMEMSIZE = 56 * 1024 * 1024

NASID = 1024
PAGE_SIZE = 4096
PTMAP = PAGE_SIZE
PDMAP = 4 * 1024 * 1024
PGSHIFT = 12
PDSHIFT = 22

PTE_G = 0x0001 << (6 + 4)
PTE_V = 0x0001 << (0 + 4)
PTE_D = 0x0001 << (1 + 4)
PTE_PLV = 0x0003 << (2 + 4)
PTE_C = 0x0001 << (4 + 4)
PTE_COW = 0x0001
PTE_LIBRARY = 0x0002

KUSEG = 0x00000000
KSEG0 = 0x80000000
KSEG1 = 0xA0000000
KSEG2 = 0xC0000000

KERNBASE = 0x80020000
ULIM = 0x80000000
KSTACKTOP = ULIM + PDMAP

UVPT = ULIM - PDMAP
UPAGES = UVPT - PDMAP
UENVS = UPAGES - PDMAP
UTOP = UENVS
UXSTACKTOP = UTOP
USTACKTOP = UTOP - 2 * PTMAP
UTEXT = PDMAP
UCOW = UTEXT - PTMAP
UTEMP = UCOW - PTMAP


def pdx(va: int) -> int:
    """Page directory index of a virtual address."""
    return ((va & _MASK32) >> PDSHIFT) & 0x03FF


def ptx(va: int) -> int:
    """Page table index of a virtual address."""
    return ((va & _MASK32) >> PGSHIFT) & 0x03FF


def pte_addr(pte: int) -> int:
    """Physical address held in a page table entry."""
    return pte & _MASK32 & ~0xFFF


def pte_flags(pte: int) -> int:
    """Flag bits of a page table entry."""
    return pte & 0xFFF


def ppn(pa: int) -> int:
    """Physical page number of a physical address."""
    return (pa & _MASK32) >> PGSHIFT


def vpn(va: int) -> int:
    """Virtual page number of a virtual address."""
    return (va & _MASK32) >> PGSHIFT


def paddr(kva: int) -> int:
    """Translate a kernel virtual address to a physical address."""
    kva &= _MASK32
    if kva < ULIM:
        raise ValueError(f"PADDR called with invalid kva {kva:08x}")
    return kva - ULIM


def kaddr(pa: int, npage: int) -> int:
    """Translate a physical address to a kernel virtual address.

    ``npage`` is the number of physical pages; addresses beyond them are rejected.
    """
    if ppn(pa) >= npage:
        raise ValueError(f"KADDR called with invalid pa {pa & _MASK32:08x}")
    return pa + ULIM


def _check_power_of_two(n: int) -> None:
    if n <= 0 or n & (n - 1):
        raise ValueError(f"{n} is not a power of two")


def round_up(a: int, n: int) -> int:
    """Round ``a`` up to a multiple of ``n``, which must be a power of two."""
    _check_power_of_two(n)
    return ((a & _MASK32) + n - 1) & ~(n - 1) & _MASK32


def round_down(a: int, n: int) -> int:
    """Round ``a`` down to a multiple of ``n``, which must be a power of two."""
    _check_power_of_two(n)
    return (a & _MASK32) & ~(n - 1)


def _genmask(h: int, l: int, bits: int) -> int:
    if not (0 <= l < bits and 0 <= h < bits):
        raise ValueError(f"bit positions must lie in [0, {bits - 1}]")
    full = (1 << bits) - 1
    return ((full << l) & full) & (full >> (bits - 1 - h))


def genmask(h: int, l: int) -> int:
    """32-bit mask with bits ``l`` through ``h`` set."""
    return _genmask(h, l, BITS_PER_LONG)


def genmask_ull(h: int, l: int) -> int:
    """64-bit mask with bits ``l`` through ``h`` set."""
    return _genmask(h, l, BITS_PER_LONG_LONG)


def log2(n: int) -> int:
    """Floor of the base-2 logarithm of ``n``; 0 for values below 2, at most 31."""
    if n < 2:
        return 0
    return min(n.bit_length() - 1, BITS_PER_LONG - 1)
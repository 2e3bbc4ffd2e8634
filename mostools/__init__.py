"""Host-side tools and layout helpers for a small 32-bit teaching kernel."""

__version__ = "0.1.0"

__all__ = [
    "allone",
    "args",
    "bintoc",
    "elf",
    "errors",
    "memlayout",
    "readelf",
    "trapframe",
]
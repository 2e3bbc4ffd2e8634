"""Kernel and file-system error codes, and the exception that carries them."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes reported by the kernel and the user-level file system."""

    UNSPECIFIED = 1
    BAD_ENV = 2
    INVAL = 3
    NO_MEM = 4
    NO_SYS = 5
    NO_FREE_ENV = 6
    IPC_NOT_RECV = 7
    NO_DISK = 8
    MAX_OPEN = 9
    NOT_FOUND = 10
    BAD_PATH = 11
    FILE_EXISTS = 12
    NOT_EXEC = 13

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ErrorCode.UNSPECIFIED: "unspecified or unknown problem",
    ErrorCode.BAD_ENV: "environment doesn't exist or cannot be used in requested action",
    ErrorCode.INVAL: "invalid parameter",
    ErrorCode.NO_MEM: "request failed due to memory shortage",
    ErrorCode.NO_SYS: "invalid syscall number",
    ErrorCode.NO_FREE_ENV: "no free environment left",
    ErrorCode.IPC_NOT_RECV: "target environment is not receiving",
    ErrorCode.NO_DISK: "no free space left on disk",
    ErrorCode.MAX_OPEN: "too many files are open",
    ErrorCode.NOT_FOUND: "file or block not found",
    ErrorCode.BAD_PATH: "bad path",
    ErrorCode.FILE_EXISTS: "file already exists",
    ErrorCode.NOT_EXEC: "file not a valid executable",
}


class MosError(Exception):
    """An error carrying one of the codes in ErrorCode.

    The code may be given as an ErrorCode or as an integer; negative integers,
    as returned by kernel calls, are accepted and stand for the same code.
    """

    def __init__(self, code) -> None:
        value = int(code)
        try:
            self.code = ErrorCode(abs(value))
        except ValueError:
            raise ValueError(f"unknown error code {value}") from None
        super().__init__(f"{self.code.name}: {self.code.description}")

    @property
    def errno(self) -> int:
        """The negative value a kernel call returns for this error."""
        return -int(self.code)
"""Scanner for single-letter command line options with optional values.

Options are introduced by '-', may be grouped ("-ab"), and take their value
either from the rest of the same argument ("-ofile") or from the next one
("-o file"). Scanning stops at the first argument that is not an option, at
a lone "-", or after "--", which is consumed.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence


class MissingArgumentError(ValueError):
    """Raised when an option requires a value and none is left."""

    def __init__(self, option: str | None) -> None:
        self.option = option
        if option is None:
            super().__init__("option requires an argument")
        else:
            super().__init__(f"option -{option} requires an argument")


class ArgScanner:
    """Iterate over option letters in ``argv`` (given without the program name)."""

    def __init__(self, argv: Sequence[str]) -> None:
        self._args = list(argv)
        self._pos = 0
        self._pending = ""
        self._option: str | None = None

    def __iter__(self) -> Iterator[str]:
        """Yield each option letter in turn."""
        while self._pos < len(self._args):
            current = self._args[self._pos]
            if len(current) < 2 or not current.startswith("-"):
                break
            if current == "--":
                self._pos += 1
                break
            self._pending = current[1:]
            while self._pending:
                self._option, self._pending = self._pending[0], self._pending[1:]
                yield self._option
            self._pos += 1
        self._pending = ""

    @property
    def option(self) -> str | None:
        """The option letter most recently yielded."""
        return self._option

    def arg(self) -> str | None:
        """Return the value of the current option, or None if there is none.

        The value is the remainder of the current argument if it is not empty,
        otherwise the next argument, which is then consumed.
        """
        value, self._pending = self._pending, ""
        if value:
            return value
        if self._pos + 1 < len(self._args):
            self._pos += 1
            return self._args[self._pos]
        return None

    def earg(self) -> str:
        """Like arg(), but raise MissingArgumentError when no value is left."""
        value = self.arg()
        if value is None:
            raise MissingArgumentError(self._option)
        return value

    def rest(self) -> list[str]:
        """Return the arguments that follow the options scanned so far."""
        return self._args[self._pos:]
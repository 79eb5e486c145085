from __future__ import annotations

from typing import Optional

TERMINATOR = 0


class Cursor:
    """
    Forward-only position into a mangled symbol with one byte of lookahead.
    `peek` is None once the end of input, or an embedded NUL, is reached.
    """

    def __init__(self, data: bytes) -> None:
        self._data: bytes = data
        self._position: int = 0
        self._peek: Optional[int] = self._read(0)

    @property
    def data(self) -> bytes:
        return self._data

    @property
    def position(self) -> int:
        return self._position

    @property
    def peek(self) -> Optional[int]:
        return self._peek

    @property
    def at_end(self) -> bool:
        return self._peek is None

    def advance(self) -> Optional[int]:
        if self._peek is None:
            raise IndexError("Cursor is already at the end of input.")
        self._position += 1
        self._peek = self._read(self._position)
        return self._peek

    def _read(self, position: int) -> Optional[int]:
        if position >= len(self._data):
            return None
        byte = self._data[position]
        if byte == TERMINATOR:
            return None
        return byte

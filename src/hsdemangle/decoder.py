from __future__ import annotations

from typing import Optional

from hsdemangle.buffer import Allocator, BufferPolicy, OutputBuffer
from hsdemangle.codepoint import MAX_CODE_POINT, MAX_ENCODED_LENGTH, encode_code_point
from hsdemangle.cursor import Cursor
from hsdemangle.error import (
    CodePointRangeError,
    DemangleError,
    InvalidTupleArityError,
    InvalidUtf8Error,
    UnknownTupleKindError,
    UnmappedEscapeError,
    UnterminatedCodePointError,
)
from hsdemangle.types import (
    LOWER_ESCAPES,
    UPPER_ESCAPES,
    EscapeTable,
    State,
    TupleKind,
    lookup_escape,
)

LOWER_INTRODUCER = ord("z")
UPPER_INTRODUCER = ord("Z")
CODE_POINT_END = ord("U")
DECIMAL_ZERO = ord("0")
DECIMAL_DIGITS = frozenset(b"0123456789")
# uppercase hex digits end the run
HEX_DIGITS = frozenset(b"0123456789abcdef")

OPEN_PAREN = ord("(")
CLOSE_PAREN = ord(")")
COMMA = b","


def as_symbol_bytes(mangled: str | bytes) -> bytes:
    if isinstance(mangled, str):
        return mangled.encode("utf-8", "surrogatepass")
    return bytes(mangled)


class ZDecoder:
    r"""
    Decoder for GHC Z-encoded symbol names.

    Scans the symbol once with a single byte of lookahead:
    - `z` introduces a lowercase escape (`zi` -> `.`) or, when followed by a
      digit, a hex code point terminated by `U` (`z3bbU` -> `λ`).
    - `Z` introduces an uppercase escape (`ZC` -> `:`) or, when followed by a
      digit, a tuple arity terminated by `T` (`Z3T` -> `(,,)`) or `H` for
      unboxed tuples (`Z3H` -> `(#,,#)`).
    - any other byte is copied as is.

    A decoder runs once. On failure its buffer is released and the error
    propagates, nothing partial is returned.
    """

    def __init__(
        self,
        mangled: str | bytes,
        policy: Optional[BufferPolicy] = None,
        allocator: Allocator = bytearray,
    ) -> None:
        self._cursor = Cursor(as_symbol_bytes(mangled))
        self._buffer = OutputBuffer(policy, allocator)
        self._state: State = State.SCANNING

    @property
    def state(self) -> State:
        return self._state

    @property
    def buffer(self) -> OutputBuffer:
        return self._buffer

    def decode(self) -> bytes:
        if self._state is not State.SCANNING:
            raise RuntimeError(f"Decoder already ran and is in state '{self._state.value}'.")
        try:
            return self._run()
        except DemangleError:
            self._state = State.ERROR
            self._buffer.release()
            raise

    def _run(self) -> bytes:
        cursor = self._cursor
        while True:
            peek = cursor.peek
            if peek is None:
                self._state = State.DONE
                return self._buffer.finalize()

            if peek == LOWER_INTRODUCER:
                self._state = State.ESCAPE_LOWER
                cursor.advance()
                if cursor.peek in DECIMAL_DIGITS:
                    self._state = State.CODE_POINT
                    self._decode_code_point()
                else:
                    self._decode_escape(LOWER_ESCAPES, "z")
            elif peek == UPPER_INTRODUCER:
                self._state = State.ESCAPE_UPPER
                cursor.advance()
                if cursor.peek in DECIMAL_DIGITS:
                    self._state = State.TUPLE_ARITY
                    self._decode_tuple()
                else:
                    self._decode_escape(UPPER_ESCAPES, "Z")
            else:
                self._buffer.append(peek)
                cursor.advance()

            self._state = State.SCANNING

    def _decode_escape(self, table: EscapeTable, introducer: str) -> None:
        peek = self._cursor.peek
        mapped = None if peek is None else lookup_escape(table, chr(peek))
        if mapped is None:
            raise UnmappedEscapeError(
                self._cursor.data, self._cursor.position, introducer
            )
        self._buffer.append(ord(mapped))
        self._cursor.advance()

    def _decode_code_point(self) -> None:
        cursor = self._cursor
        start = cursor.position
        code_point = 0
        while cursor.peek in HEX_DIGITS:
            code_point = code_point * 16 + int(chr(cursor.peek), 16)
            cursor.advance()
        if cursor.peek != CODE_POINT_END:
            raise UnterminatedCodePointError(cursor.data, cursor.position)
        if code_point > MAX_CODE_POINT:
            raise CodePointRangeError(code_point, cursor.data, start)

        self._buffer.reserve(MAX_ENCODED_LENGTH)
        self._buffer.append_sequence(encode_code_point(code_point))
        cursor.advance()

    def _decode_tuple(self) -> None:
        cursor = self._cursor
        arity = 0
        while cursor.peek in DECIMAL_DIGITS:
            arity = arity * 10 + cursor.peek - DECIMAL_ZERO
            cursor.advance()

        if cursor.peek == ord(TupleKind.BOXED.value):
            kind = TupleKind.BOXED
        elif cursor.peek == ord(TupleKind.UNBOXED.value):
            kind = TupleKind.UNBOXED
        else:
            raise UnknownTupleKindError(cursor.data, cursor.position)

        if kind is TupleKind.BOXED and arity == 1:
            raise InvalidTupleArityError(cursor.data, cursor.position, arity, "boxed")
        if kind is TupleKind.UNBOXED and arity == 0:
            raise InvalidTupleArityError(cursor.data, cursor.position, arity, "unboxed")
        cursor.advance()

        if kind is TupleKind.BOXED:
            if arity == 0:
                self._buffer.append_sequence(b"()")
                return
            # "(" and ")" plus one comma between each pair of elements
            self._buffer.reserve(arity + 1)
            self._buffer.append(OPEN_PAREN)
            self._buffer.append_sequence(COMMA * (arity - 1))
            self._buffer.append(CLOSE_PAREN)
            return

        if arity == 1:
            self._buffer.append_sequence(b"(# #)")
            return
        self._buffer.reserve(arity + 3)
        self._buffer.append_sequence(b"(#")
        self._buffer.append_sequence(COMMA * (arity - 1))
        self._buffer.append_sequence(b"#)")


def demangle_bytes(
    mangled: str | bytes,
    policy: Optional[BufferPolicy] = None,
    allocator: Allocator = bytearray,
) -> bytes:
    """Decodes a Z-encoded symbol into the raw UTF-8 bytes of the identifier."""
    return ZDecoder(mangled, policy, allocator).decode()


def demangle(
    mangled: str | bytes,
    policy: Optional[BufferPolicy] = None,
) -> str:
    """
    Decodes a Z-encoded symbol name.

    >>> demangle("base_GHCziBase_zpzp_info")
    'base_GHC.Base_++_info'

    Raises DemangleError (or a subclass) when the symbol is malformed.
    """
    decoded = demangle_bytes(mangled, policy)
    try:
        return decoded.decode("utf-8", "surrogatepass")
    except UnicodeDecodeError as e:
        raise InvalidUtf8Error(as_symbol_bytes(mangled), e.start) from e

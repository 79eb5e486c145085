class DemangleError(Exception):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            "Failed to demangle symbol" + (f": {message}" if message else "")
        )
        self.message = message


class BufferAllocationError(DemangleError):
    def __init__(self, requested: int) -> None:
        super().__init__(f"could not allocate {requested} bytes of output storage")
        self.requested = requested


class MalformedSymbolError(DemangleError):
    def __init__(
        self,
        symbol: bytes,
        position: int,
        message: str | None = None,
    ) -> None:
        super().__init__(
            f"malformed symbol {symbol!r} at position {position}"
            + (f": {message}" if message else "")
        )
        self.symbol = symbol
        self.position = position


class UnmappedEscapeError(MalformedSymbolError):
    def __init__(self, symbol: bytes, position: int, introducer: str) -> None:
        found = symbol[position : position + 1] or b"end of input"
        super().__init__(
            symbol,
            position,
            f"no '{introducer}' escape for {found!r}",
        )
        self.introducer = introducer


class UnterminatedCodePointError(MalformedSymbolError):
    def __init__(self, symbol: bytes, position: int) -> None:
        super().__init__(
            symbol, position, "numeric escape must be terminated by 'U'"
        )


class CodePointRangeError(MalformedSymbolError):
    def __init__(
        self, code_point: int, symbol: bytes = b"", position: int = -1
    ) -> None:
        super().__init__(
            symbol,
            position,
            f"code point {code_point:#x} is outside the range 0x0-0x10ffff",
        )
        self.code_point = code_point


class InvalidTupleArityError(MalformedSymbolError):
    def __init__(self, symbol: bytes, position: int, arity: int, kind: str) -> None:
        super().__init__(
            symbol, position, f"{kind} tuple cannot have arity {arity}"
        )
        self.arity = arity
        self.kind = kind


class UnknownTupleKindError(MalformedSymbolError):
    def __init__(self, symbol: bytes, position: int) -> None:
        super().__init__(
            symbol, position, "tuple arity must be followed by 'T' or 'H'"
        )


class BufferReleasedError(Exception):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            "Output buffer storage has been released"
            + (f": {message}" if message else "")
        )


class InvalidUtf8Error(MalformedSymbolError):
    def __init__(self, symbol: bytes, offset: int) -> None:
        super().__init__(
            symbol, offset, f"decoded name is not valid UTF-8 at output offset {offset}"
        )
        self.offset = offset

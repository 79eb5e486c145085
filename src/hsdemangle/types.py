from enum import Enum
from string import ascii_lowercase, ascii_uppercase
from typing import Dict, Mapping, Optional


class State(Enum):
    SCANNING = "scanning"
    ESCAPE_LOWER = "escape_lower"
    ESCAPE_UPPER = "escape_upper"
    CODE_POINT = "code_point"
    TUPLE_ARITY = "tuple_arity"
    DONE = "done"
    ERROR = "error"


class TupleKind(Enum):
    BOXED = "T"
    UNBOXED = "H"


EscapeTable = Mapping[str, Optional[str]]


def _build_table(letters: str, mapped: Dict[str, str]) -> EscapeTable:
    # every letter of the restricted set has an entry, None means unmapped
    return {letter: mapped.get(letter) for letter in letters}


LOWER_ESCAPES: EscapeTable = _build_table(
    ascii_lowercase,
    {
        "a": "&",
        "b": "|",
        "c": "^",
        "d": "$",
        "e": "=",
        "g": ">",
        "h": "#",
        "i": ".",
        "l": "<",
        "m": "-",
        "n": "!",
        "p": "+",
        "q": "'",
        "r": "\\",
        "s": "/",
        "t": "*",
        "u": "_",
        "v": "%",
        "z": "z",
    },
)

UPPER_ESCAPES: EscapeTable = _build_table(
    ascii_uppercase[ascii_uppercase.index("C") :],
    {
        "C": ":",
        "L": "(",
        "M": "[",
        "N": "]",
        "R": ")",
        "Z": "Z",
    },
)


def lookup_escape(table: EscapeTable, letter: str) -> Optional[str]:
    """Returns the character an escape letter stands for, or None when unmapped."""
    return table.get(letter)

from typing import Dict, Optional

from hsdemangle.types import LOWER_ESCAPES, UPPER_ESCAPES

# inverse of the escape tables, e.g. "." -> "zi", ":" -> "ZC"
ESCAPES: Dict[str, str] = {
    **{ch: "z" + letter for letter, ch in LOWER_ESCAPES.items() if ch is not None},
    **{ch: "Z" + letter for letter, ch in UPPER_ESCAPES.items() if ch is not None},
}


def is_unencoded(ch: str) -> bool:
    if ch in "zZ":
        return False
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ("0" <= ch <= "9")


def encode_code_point_escape(ch: str) -> str:
    hex_digits = format(ord(ch), "x")
    # a leading letter would read as a plain escape, so numeric escapes start with a digit
    if not hex_digits[0].isdigit():
        hex_digits = "0" + hex_digits
    return f"z{hex_digits}U"


def encode_char(ch: str) -> str:
    if is_unencoded(ch):
        return ch
    if ch in ESCAPES:
        return ESCAPES[ch]
    return encode_code_point_escape(ch)


def encode_tuple(name: str) -> Optional[str]:
    """
    Encodes a whole tuple type constructor name, or returns None if `name` is
    not one: "()" -> "Z0T", "(,,)" -> "Z3T", "(# #)" -> "Z1H", "(#,#)" -> "Z2H".
    """
    if name == "(# #)":
        return "Z1H"
    if name.startswith("(#") and name.endswith("#)") and len(name) >= 4:
        commas = name[2:-2]
        if commas and set(commas) == {","}:
            return f"Z{len(commas) + 1}H"
        return None
    if name.startswith("(") and name.endswith(")") and len(name) >= 2:
        commas = name[1:-1]
        if not commas:
            return "Z0T"
        if set(commas) == {","}:
            return f"Z{len(commas) + 1}T"
    return None


def zencode(name: str) -> str:
    """
    Z-encodes an identifier the way GHC names its symbols.
    A leading decimal digit is always written as a numeric escape so the
    encoded name starts with a letter.
    """
    tuple_name = encode_tuple(name)
    if tuple_name is not None:
        return tuple_name
    if not name:
        return ""

    head, tail = name[0], name[1:]
    if "0" <= head <= "9":
        encoded = [encode_code_point_escape(head)]
    else:
        encoded = [encode_char(head)]
    encoded.extend(encode_char(ch) for ch in tail)
    return "".join(encoded)

from hsdemangle.error import CodePointRangeError

MAX_CODE_POINT = 0x10FFFF
MAX_ENCODED_LENGTH = 4


def encode_code_point(code_point: int) -> bytes:
    """
    Packs a code point into its 1 to 4 byte UTF-8 form.
    Surrogates are packed like any other three byte value.
    """
    if code_point < 0 or code_point > MAX_CODE_POINT:
        raise CodePointRangeError(code_point)
    if code_point <= 0x7F:
        return bytes((code_point,))
    if code_point <= 0x7FF:
        return bytes(
            (
                ((code_point >> 6) & 0x1F) | 0xC0,
                (code_point & 0x3F) | 0x80,
            )
        )
    if code_point <= 0xFFFF:
        return bytes(
            (
                ((code_point >> 12) & 0x0F) | 0xE0,
                ((code_point >> 6) & 0x3F) | 0x80,
                (code_point & 0x3F) | 0x80,
            )
        )
    return bytes(
        (
            ((code_point >> 18) & 0x07) | 0xF0,
            ((code_point >> 12) & 0x3F) | 0x80,
            ((code_point >> 6) & 0x3F) | 0x80,
            (code_point & 0x3F) | 0x80,
        )
    )

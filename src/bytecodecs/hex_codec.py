from typing import Optional

from .errors import InvalidCharacterError, OddLengthError

HEX_SYMBOLS = "0123456789abcdef"


def _nibble(char: str) -> Optional[int]:
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "a" <= char <= "f":
        return ord(char) - ord("a") + 10
    if "A" <= char <= "F":
        return ord(char) - ord("A") + 10
    return None


def hex_encode(data: bytes) -> str:
    """Encode bytes as lower-case hex, two characters per byte."""
    out = []
    for byte in data:
        out.append(HEX_SYMBOLS[byte >> 4])
        out.append(HEX_SYMBOLS[byte & 0x0F])
    return "".join(out)


def hex_decode(text: str) -> bytes:
    """
    Decode hex text into bytes.

    Surrounding whitespace is ignored and both letter cases are accepted.
    Empty input decodes to empty bytes.
    """
    stripped = text.strip()
    if not stripped:
        return b""
    if len(stripped) % 2:
        raise OddLengthError(len(stripped))

    out = bytearray()
    for i in range(0, len(stripped), 2):
        high = _nibble(stripped[i])
        low = _nibble(stripped[i + 1])
        if high is None:
            raise InvalidCharacterError("hex", stripped[i])
        if low is None:
            raise InvalidCharacterError("hex", stripped[i + 1])
        out.append((high << 4) | low)
    return bytes(out)

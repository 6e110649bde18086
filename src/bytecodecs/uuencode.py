"""
Traditional uuencode line format without the begin/end header lines.

Every line carries up to 45 bytes: a length character, then four printable
characters per three bytes, then a newline. A line holding only a backtick
ends the data.
"""
from typing import Iterator, Optional, Tuple

from .errors import InvalidCharacterError, MissingFramingCharacterError, TruncatedInputError

UU_LINE_BYTES = 45
UU_TERMINATOR = "`\n"


def enc6(value: int) -> str:
    """Map a 6-bit value to its printable character; zero becomes a backtick."""
    value &= 0x3F
    return "`" if value == 0 else chr(value + 0x20)


def dec6(char: str) -> Optional[int]:
    """Inverse of enc6; space and backtick both mean zero. None if invalid."""
    if char in "` ":
        return 0
    code = ord(char)
    if 0x20 <= code <= 0x5F:
        return (code - 0x20) & 0x3F
    return None


def _triples(chunk: bytes) -> Iterator[Tuple[int, int, int]]:
    for i in range(0, len(chunk), 3):
        triple = chunk[i : i + 3]
        b0 = triple[0]
        b1 = triple[1] if len(triple) > 1 else 0
        b2 = triple[2] if len(triple) > 2 else 0
        yield b0, b1, b2


def uu_encode(data: bytes) -> str:
    """
    Uuencode bytes, 45 bytes per line, followed by the backtick terminator line.
    """
    data = bytes(data)
    lines = []
    for start in range(0, len(data), UU_LINE_BYTES):
        chunk = data[start : start + UU_LINE_BYTES]
        out = [enc6(len(chunk))]
        for b0, b1, b2 in _triples(chunk):
            out.append(enc6(b0 >> 2))
            out.append(enc6((b0 << 4) | (b1 >> 4)))
            out.append(enc6((b1 << 2) | (b2 >> 6)))
            out.append(enc6(b2))
        out.append("\n")
        lines.append("".join(out))
    lines.append(UU_TERMINATOR)
    return "".join(lines)


def _decode_line(line: str, lineno: int, out: bytearray) -> bool:
    """
    Append the bytes of one encoded line to `out`.

    Returns False when the line is the zero-length terminator.
    """
    if not line:
        raise MissingFramingCharacterError(lineno)
    length = dec6(line[0])
    if length is None:
        raise InvalidCharacterError("uuencode", line[0], "invalid uuencode length character")
    if length == 0:
        return False

    produced = 0
    pos = 1
    while produced < length:
        group = line[pos : pos + 4]
        if len(group) < 4:
            raise TruncatedInputError(lineno)
        pos += 4
        values = []
        for char in group:
            value = dec6(char)
            if value is None:
                raise InvalidCharacterError("uuencode", char)
            values.append(value)
        a, b, c, d = values
        for byte in ((a << 2) | (b >> 4), (b << 4) | (c >> 2), (c << 6) | d):
            if produced < length:
                out.append(byte & 0xFF)
                produced += 1
    return True


def uu_decode(text: str) -> bytes:
    """
    Decode uuencoded lines back into bytes.

    Blank lines are skipped and decoding stops at the first zero-length line.
    Characters after the declared length on a line are ignored.
    """
    out = bytearray()
    for lineno, line in enumerate(text.split("\n"), start=1):
        if line.endswith("\r"):
            line = line[:-1]
        if not line:
            continue
        if not _decode_line(line, lineno, out):
            break
    return bytes(out)

from dataclasses import dataclass, field
from typing import Dict

from .errors import InvalidCharacterError, SizeMismatchError

ZERO_TEXT = "0"

BASE36_SYMBOLS = "0123456789abcdefghijklmnopqrstuvwxyz"
BASE58_SYMBOLS = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE64_SYMBOLS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"


@dataclass(frozen=True)
class Alphabet:
    """
    Ordered digit symbols for one radix.

    The position of a symbol is its digit value. Case-insensitive alphabets
    fold input to lower case before lookup, so their symbols must be lower case.
    """

    name: str
    symbols: str
    case_sensitive: bool = True
    _index: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not 2 <= len(self.symbols) <= 256:
            raise ValueError(f"Alphabet size must be between 2 and 256, got {len(self.symbols)}.")
        if len(set(self.symbols)) != len(self.symbols):
            raise ValueError(f"Alphabet {self.name} contains duplicate symbols.")
        if not self.case_sensitive and self.symbols != self.symbols.lower():
            raise ValueError(f"Case-insensitive alphabet {self.name} must use lower-case symbols.")
        object.__setattr__(self, "_index", {ch: pos for pos, ch in enumerate(self.symbols)})

    @property
    def radix(self) -> int:
        return len(self.symbols)

    def digit(self, char: str) -> int:
        key = char if self.case_sensitive else char.lower()
        try:
            return self._index[key]
        except KeyError:
            raise InvalidCharacterError(self.name, char) from None

    def __contains__(self, char: object) -> bool:
        if not isinstance(char, str):
            return False
        key = char if self.case_sensitive else char.lower()
        return key in self._index


BASE36_ALPHABET = Alphabet("base36", BASE36_SYMBOLS, case_sensitive=False)
BASE58_ALPHABET = Alphabet("base58", BASE58_SYMBOLS)
BASE64_ALPHABET = Alphabet("base64", BASE64_SYMBOLS)


def _strip_leading_zeros(number: bytearray, keep: int = 0) -> None:
    """Drop leading zero bytes in place, leaving at least `keep` bytes."""
    start = 0
    limit = len(number) - keep
    while start < limit and number[start] == 0:
        start += 1
    del number[:start]


def radix_encode(data: bytes, alphabet: Alphabet) -> str:
    """
    Encode bytes as one big-endian number written in `alphabet`'s radix.

    The number is divided by the radix with schoolbook long division over the
    byte array until it reaches zero; each remainder is one output digit,
    least significant first. Empty or all-zero input encodes to "0".
    """
    number = bytearray(data)
    _strip_leading_zeros(number)
    if not number:
        return ZERO_TEXT

    radix = alphabet.radix
    digits = []
    while number:
        remainder = 0
        for i, byte in enumerate(number):
            value = (remainder << 8) | byte
            number[i], remainder = divmod(value, radix)
        digits.append(alphabet.symbols[remainder])
        _strip_leading_zeros(number)

    digits.reverse()
    return "".join(digits)


def _accumulate(text: str, alphabet: Alphabet) -> bytearray:
    # Horner's method: acc = acc * radix + digit, carried byte by byte.
    radix = alphabet.radix
    acc = bytearray(1)
    for char in text:
        carry = alphabet.digit(char)
        for i in range(len(acc) - 1, -1, -1):
            value = acc[i] * radix + carry
            acc[i] = value & 0xFF
            carry = value >> 8
        while carry:
            acc.insert(0, carry & 0xFF)
            carry >>= 8
    _strip_leading_zeros(acc, keep=1)
    return acc


def radix_decode(text: str, alphabet: Alphabet, size: int = 0) -> bytes:
    """
    Decode text written in `alphabet` back into bytes.

    Surrounding whitespace is ignored. The result is the minimal big-endian
    form (at least one byte) unless `size` is positive, in which case it is
    left-padded with zero bytes to exactly `size` bytes; a value that needs
    more than `size` bytes raises SizeMismatchError.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    stripped = text.strip()
    # "0" always means zero, even for Base64 where it is also the digit 52
    if not stripped or stripped == ZERO_TEXT:
        number = bytearray(1)
    else:
        number = _accumulate(stripped, alphabet)

    if size:
        if len(number) > size:
            raise SizeMismatchError(alphabet.name, size, len(number))
        if len(number) < size:
            number[0:0] = bytes(size - len(number))
    return bytes(number)


def base36_encode(data: bytes) -> str:
    return radix_encode(data, BASE36_ALPHABET)


def base36_decode(text: str, size: int = 0) -> bytes:
    """Decode Base36 text (case-insensitive), optionally to a fixed size."""
    return radix_decode(text, BASE36_ALPHABET, size)


def base58_encode(data: bytes) -> str:
    return radix_encode(data, BASE58_ALPHABET)


def base58_decode(text: str, size: int = 0) -> bytes:
    return radix_decode(text, BASE58_ALPHABET, size)


def base64_encode(data: bytes) -> str:
    """
    Encode bytes as a base-64 number.

    This is big-number arithmetic over the RFC 4648 symbol set, not block
    packing: there is no "=" padding and leading zero bytes are not kept.
    """
    return radix_encode(data, BASE64_ALPHABET)


def base64_decode(text: str, size: int = 0) -> bytes:
    return radix_decode(text, BASE64_ALPHABET, size)

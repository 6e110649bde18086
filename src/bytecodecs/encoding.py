from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, FrozenSet, Tuple, Type, TypeVar, Union

from .hex_codec import hex_decode, hex_encode
from .radix import (
    base36_decode,
    base36_encode,
    base58_decode,
    base58_encode,
    base64_decode,
    base64_encode,
)
from .uuencode import uu_decode, uu_encode


class Encoding(str, Enum):
    BASE36 = "base36"
    BASE58 = "base58"
    BASE64 = "base64"
    HEX = "hex"
    UUENCODE = "uuencode"

    @classmethod
    def parse(cls, value: Union[str, "Encoding"]) -> "Encoding":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(member.value for member in cls)
            raise ValueError(f"Unsupported encoding: {value} (expected one of {names})") from None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EncodedString:
    """Encoded text together with the encoding that produced it."""

    encoding: Encoding
    string: str

    def __str__(self) -> str:
        return self.string


Encoder = Callable[[bytes], str]
Decoder = Callable[..., bytes]
Codec = Tuple[Encoder, Decoder]

FIXED_SIZE_ENCODINGS: FrozenSet[Encoding] = frozenset({Encoding.BASE36, Encoding.BASE58, Encoding.BASE64})


def registry() -> Dict[Encoding, Codec]:
    return {
        Encoding.BASE36: (base36_encode, base36_decode),
        Encoding.BASE58: (base58_encode, base58_decode),
        Encoding.BASE64: (base64_encode, base64_decode),
        Encoding.HEX: (hex_encode, hex_decode),
        Encoding.UUENCODE: (uu_encode, uu_decode),
    }


def encode(data: bytes, encoding: Union[str, Encoding]) -> EncodedString:
    tag = Encoding.parse(encoding)
    enc, _ = registry()[tag]
    return EncodedString(tag, enc(bytes(data)))


def decode_text(text: str, encoding: Union[str, Encoding], size: int = 0) -> bytes:
    """
    Decode `text` with the named encoding.

    `size` pads or bounds the result for the radix encodings (base36, base58,
    base64); hex and uuencode are length-preserving and reject a size.
    """
    tag = Encoding.parse(encoding)
    _, dec = registry()[tag]
    if tag in FIXED_SIZE_ENCODINGS:
        return dec(text, size)
    if size:
        raise ValueError(f"{tag.value} does not support fixed-size decoding")
    return dec(text)


def decode(encoded: EncodedString, size: int = 0) -> bytes:
    return decode_text(encoded.string, encoded.encoding, size)


class Encodable:
    """
    Mixin for values that can be written in any of the encodings.

    Subclasses only need to implement ``__bytes__``.
    """

    def __bytes__(self) -> bytes:  # pragma: no cover - interface only
        raise NotImplementedError

    def encode(self, encoding: Union[str, Encoding]) -> EncodedString:
        return encode(bytes(self), encoding)


T = TypeVar("T", bound="Decodable")


class Decodable:
    """
    Mixin for values that can be rebuilt from encoded text.

    Subclasses implement the ``from_bytes`` classmethod; any error it raises
    reaches the caller unchanged.
    """

    @classmethod
    def from_bytes(cls: Type[T], data: bytes) -> T:  # pragma: no cover - interface only
        raise NotImplementedError

    @classmethod
    def decode(cls: Type[T], encoded: EncodedString, size: int = 0) -> T:
        return cls.from_bytes(decode(encoded, size))

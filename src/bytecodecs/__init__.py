from .auto_decoder import auto_decode
from .encoding import (
    FIXED_SIZE_ENCODINGS,
    Decodable,
    Encodable,
    EncodedString,
    Encoding,
    decode,
    decode_text,
    encode,
    registry,
)
from .errors import (
    CodecError,
    InvalidCharacterError,
    MissingFramingCharacterError,
    OddLengthError,
    SizeMismatchError,
    TruncatedInputError,
)
from .hex_codec import hex_decode, hex_encode
from .radix import (
    BASE36_ALPHABET,
    BASE58_ALPHABET,
    BASE64_ALPHABET,
    Alphabet,
    base36_decode,
    base36_encode,
    base58_decode,
    base58_encode,
    base64_decode,
    base64_encode,
    radix_decode,
    radix_encode,
)
from .uuencode import uu_decode, uu_encode

__version__ = "0.1.0"

__all__ = [
    "Alphabet",
    "BASE36_ALPHABET",
    "BASE58_ALPHABET",
    "BASE64_ALPHABET",
    "CodecError",
    "Decodable",
    "Encodable",
    "EncodedString",
    "Encoding",
    "FIXED_SIZE_ENCODINGS",
    "InvalidCharacterError",
    "MissingFramingCharacterError",
    "OddLengthError",
    "SizeMismatchError",
    "TruncatedInputError",
    "auto_decode",
    "base36_decode",
    "base36_encode",
    "base58_decode",
    "base58_encode",
    "base64_decode",
    "base64_encode",
    "decode",
    "decode_text",
    "encode",
    "hex_decode",
    "hex_encode",
    "radix_decode",
    "radix_encode",
    "registry",
    "uu_decode",
    "uu_encode",
]

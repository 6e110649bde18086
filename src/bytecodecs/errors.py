from typing import Optional


class CodecError(ValueError):
    """Raised when text cannot be decoded back into bytes."""


class InvalidCharacterError(CodecError):
    """A character outside the alphabet (or allowed range) was found."""

    def __init__(self, alphabet: str, character: Optional[str] = None, message: Optional[str] = None) -> None:
        self.alphabet = alphabet
        self.character = character
        super().__init__(message or f"invalid {alphabet} character")


class OddLengthError(CodecError):
    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__("hex string must have an even length")


class SizeMismatchError(CodecError):
    """The decoded value needs more bytes than the caller asked for."""

    def __init__(self, alphabet: str, requested: int, actual: int) -> None:
        self.alphabet = alphabet
        self.requested = requested
        self.actual = actual
        super().__init__(f"{alphabet} value does not fit in {requested} bytes")


class TruncatedInputError(CodecError):
    def __init__(self, line: int) -> None:
        self.line = line
        super().__init__("truncated uuencode data")


class MissingFramingCharacterError(CodecError):
    def __init__(self, line: int) -> None:
        self.line = line
        super().__init__("uuencode line must have a length character")

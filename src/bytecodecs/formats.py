import base64
import binascii
from typing import Iterable, List, Literal, Optional

from .hex_codec import hex_decode, hex_encode

DataFormat = Literal["utf8", "hex", "base64"]
DATA_FORMATS: List[str] = ["utf8", "hex", "base64"]

PREFERRED_ENCODINGS: List[str] = [
    "utf-8",
    "gb18030",
    "big5",
    "shift_jis",
    "cp1252",
    "latin-1",
]


def load_bytes(data: str, fmt: DataFormat = "utf8") -> bytes:
    """Turn user-supplied text into the bytes to encode."""
    if fmt == "utf8":
        return data.encode("utf-8")
    if fmt == "hex":
        return hex_decode(data)
    if fmt == "base64":
        try:
            return base64.b64decode(data.strip(), validate=True)
        except binascii.Error as exc:
            raise ValueError(f"Invalid base64 input: {exc}") from exc
    raise ValueError(f"Unsupported data format: {fmt}")


def dump_bytes(data: bytes, fmt: DataFormat = "utf8", text_encoding: Optional[str] = None) -> str:
    """Render decoded bytes for display."""
    if fmt == "utf8":
        return decode_bytes_best_effort(data, preferred_encoding=text_encoding)
    if fmt == "hex":
        return hex_encode(data)
    if fmt == "base64":
        return base64.b64encode(data).decode("ascii")
    raise ValueError(f"Unsupported data format: {fmt}")


def decode_bytes_best_effort(data: bytes, preferred_encoding: Optional[str] = None, encodings: Optional[Iterable[str]] = None) -> str:
    """
    Decode bytes as text, trying common character encodings in order.

    `preferred_encoding` is tried first, then `encodings` (PREFERRED_ENCODINGS
    when omitted). Unknown codec names are skipped; if nothing decodes cleanly
    the bytes are shown as UTF-8 with replacement characters.
    """
    candidates: List[str] = []
    if preferred_encoding:
        candidates.append(preferred_encoding)
    candidates.extend(list(encodings) if encodings else PREFERRED_ENCODINGS)

    seen = set()
    ordered = []
    for enc in candidates:
        if enc and enc.lower() not in seen:
            ordered.append(enc)
            seen.add(enc.lower())

    for enc in ordered:
        try:
            return data.decode(enc)
        except (UnicodeDecodeError, LookupError):
            continue
    return data.decode("utf-8", errors="replace")

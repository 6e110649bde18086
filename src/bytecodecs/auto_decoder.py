from typing import List, Tuple

from .encoding import Encoding, registry
from .errors import CodecError
from .radix import BASE36_ALPHABET, BASE58_ALPHABET, BASE64_ALPHABET, ZERO_TEXT

AutoDecodeResult = Tuple[str, bytes]

_RADIX_ALPHABETS = {
    Encoding.BASE36: BASE36_ALPHABET,
    Encoding.BASE58: BASE58_ALPHABET,
    Encoding.BASE64: BASE64_ALPHABET,
}


def _plausible(encoding: Encoding, text: str) -> bool:
    stripped = text.strip()
    if not stripped:
        return False
    alphabet = _RADIX_ALPHABETS.get(encoding)
    if alphabet is not None:
        return stripped != ZERO_TEXT and all(ch in alphabet for ch in stripped)
    if encoding is Encoding.UUENCODE:
        # a uuencode body always ends with the terminator line
        return stripped.endswith("`")
    return True


def auto_decode(text: str) -> List[AutoDecodeResult]:
    """
    Try every codec on `text` and return the ones that decode cleanly.

    Results keep registry order as (encoding name, decoded bytes) pairs.
    """
    candidates: List[AutoDecodeResult] = []
    for encoding, (_, dec) in registry().items():
        if not _plausible(encoding, text):
            continue
        try:
            candidates.append((encoding.value, dec(text)))
        except CodecError:
            continue
    return candidates

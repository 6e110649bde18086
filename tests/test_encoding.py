import unittest

from bytecodecs import (
    FIXED_SIZE_ENCODINGS,
    CodecError,
    Decodable,
    Encodable,
    EncodedString,
    Encoding,
    auto_decode,
    decode,
    decode_text,
    encode,
    registry,
)

SAMPLE = b"0123456789abcdefghijklmnopqrstuvwxyz"
VECTORS = {
    Encoding.BASE36: "2dbg0rhouyms2hsh4jiluolq0rx1et8yty277nr9mwq20b47cwxc2id6",
    Encoding.BASE58: "NE1FfXYqCHge2p4MZ56o8gdrDWMiHXPJLXk9ixxKgUebU7VqB",
    Encoding.BASE64: "MDEyMzQ1Njc4OWFiY2RlZmdoaWprbG1ub3BxcnN0dXZ3eHl6",
    Encoding.HEX: "303132333435363738396162636465666768696a6b6c6d6e6f707172737475767778797a",
    Encoding.UUENCODE: "D,#$R,S0U-C<X.6%B8V1E9F=H:6IK;&UN;W!Q<G-T=79W>'EZ\n`\n",
}


class Token(Encodable, Decodable):
    def __init__(self, value: bytes) -> None:
        self.value = value

    def __bytes__(self) -> bytes:
        return self.value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Token) and other.value == self.value

    @classmethod
    def from_bytes(cls, data: bytes) -> "Token":
        return cls(data)


class Nonce(Decodable):
    @classmethod
    def from_bytes(cls, data: bytes) -> "Nonce":
        if len(data) != 4:
            raise ValueError("nonce must be 4 bytes")
        return cls()


class TestEncodingTag(unittest.TestCase):
    def test_parse(self) -> None:
        self.assertIs(Encoding.parse("HEX"), Encoding.HEX)
        self.assertIs(Encoding.parse(" base58 "), Encoding.BASE58)
        self.assertIs(Encoding.parse(Encoding.UUENCODE), Encoding.UUENCODE)
        with self.assertRaises(ValueError):
            Encoding.parse("base32")

    def test_str(self) -> None:
        self.assertEqual(str(Encoding.BASE64), "base64")

    def test_registry_covers_every_tag(self) -> None:
        self.assertEqual(set(registry()), set(Encoding))
        self.assertEqual(FIXED_SIZE_ENCODINGS, {Encoding.BASE36, Encoding.BASE58, Encoding.BASE64})


class TestDispatch(unittest.TestCase):
    def test_encode_every_encoding(self) -> None:
        for tag, expected in VECTORS.items():
            encoded = encode(SAMPLE, tag)
            self.assertEqual(encoded, EncodedString(tag, expected))
            self.assertEqual(str(encoded), expected)

    def test_encode_accepts_names(self) -> None:
        self.assertEqual(encode(SAMPLE, "base58").string, VECTORS[Encoding.BASE58])

    def test_decode_every_encoding(self) -> None:
        for tag, text in VECTORS.items():
            self.assertEqual(decode(EncodedString(tag, text)), SAMPLE)

    def test_decode_with_size(self) -> None:
        self.assertEqual(decode(EncodedString(Encoding.BASE36, "74"), size=4), b"\x00\x00\x01\x00")
        self.assertEqual(decode_text("0", "base58", size=2), b"\x00\x00")

    def test_size_rejected_for_length_preserving_encodings(self) -> None:
        with self.assertRaises(ValueError):
            decode_text("00", "hex", size=2)
        with self.assertRaises(ValueError):
            decode_text("`\n", Encoding.UUENCODE, size=1)
        self.assertEqual(decode_text("00", "hex"), b"\x00")

    def test_errors_propagate(self) -> None:
        with self.assertRaises(CodecError):
            decode(EncodedString(Encoding.HEX, "abc"))


class TestMixins(unittest.TestCase):
    def test_encodable(self) -> None:
        token = Token(SAMPLE)
        self.assertEqual(token.encode("uuencode").string, VECTORS[Encoding.UUENCODE])
        self.assertEqual(token.encode(Encoding.BASE36).encoding, Encoding.BASE36)

    def test_decodable(self) -> None:
        encoded = EncodedString(Encoding.BASE36, VECTORS[Encoding.BASE36])
        self.assertEqual(Token.decode(encoded), Token(SAMPLE))
        self.assertEqual(Token.decode(EncodedString(Encoding.BASE58, "21"), size=3), Token(b"\x00\x00\x3a"))

    def test_decodable_errors_reach_caller(self) -> None:
        with self.assertRaisesRegex(ValueError, "nonce must be 4 bytes"):
            Nonce.decode(EncodedString(Encoding.HEX, "0102"))
        self.assertIsInstance(Nonce.decode(EncodedString(Encoding.BASE64, "BA"), size=4), Nonce)


class TestAutoDecode(unittest.TestCase):
    def test_hex_like_text_matches_several(self) -> None:
        results = auto_decode("303132")
        self.assertEqual([name for name, _ in results], ["base36", "base64", "hex"])
        self.assertEqual(dict(results)["hex"], b"012")

    def test_uuencode_text(self) -> None:
        self.assertEqual(auto_decode(VECTORS[Encoding.UUENCODE]), [("uuencode", SAMPLE)])

    def test_nothing_matches(self) -> None:
        self.assertEqual(auto_decode("!!!"), [])
        self.assertEqual(auto_decode(""), [])
        self.assertEqual(auto_decode("0"), [])

    def test_base58_only(self) -> None:
        results = dict(auto_decode(VECTORS[Encoding.BASE58]))
        self.assertEqual(results["base58"], SAMPLE)
        self.assertNotIn("hex", results)


if __name__ == "__main__":
    unittest.main()

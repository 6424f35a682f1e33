"""Tests for the at-rest content cipher."""
import base64

import pytest

from wordlog.core.crypto import (
    ENCRYPTED_MARKER, ContentCipher, DecryptionError, build_cipher, is_encrypted
)


class TestContentCipher:
    """Tests for ContentCipher encrypt/decrypt."""

    @pytest.mark.parametrize("text", ["", "hello", "Привет, мир", "line one\nline two", "x" * 10000])
    def test__decrypt__recovers_plaintext(self, cipher: ContentCipher, text: str) -> None:
        assert cipher.decrypt(cipher.encrypt(text)) == text

    def test__encrypt__uses_three_part_format(self, cipher: ContentCipher) -> None:
        token = cipher.encrypt("secret words")
        marker, iv_b64, payload_b64 = token.split(":")

        assert token.startswith(ENCRYPTED_MARKER)
        assert marker == "enc2"
        assert len(base64.b64decode(iv_b64)) == 12
        # ciphertext того же размера, что и текст, плюс 16 байт тега
        assert len(base64.b64decode(payload_b64)) == len("secret words") + 16

    def test__encrypt__uses_fresh_nonce(self, cipher: ContentCipher) -> None:
        assert cipher.encrypt("same") != cipher.encrypt("same")

    def test__decrypt__same_secret_different_instances(self) -> None:
        token = ContentCipher("shared").encrypt("portable")
        assert ContentCipher("shared").decrypt(token) == "portable"

    def test__decrypt__wrong_secret_fails(self, cipher: ContentCipher, other_cipher: ContentCipher) -> None:
        with pytest.raises(DecryptionError):
            other_cipher.decrypt(cipher.encrypt("private"))

    def test__decrypt__tampered_payload_fails(self, cipher: ContentCipher) -> None:
        marker, iv_b64, payload_b64 = cipher.encrypt("private").split(":")
        payload = bytearray(base64.b64decode(payload_b64))
        payload[0] ^= 0xFF
        tampered = ":".join([marker, iv_b64, base64.b64encode(bytes(payload)).decode()])

        with pytest.raises(DecryptionError):
            cipher.decrypt(tampered)

    @pytest.mark.parametrize(
        "token",
        [
            "plain text",
            "enc2:",
            "enc2:only-two-parts",
            "enc2:!!!:???",
            "enc2:AAAA:AAAA",
            "enc2:a:b:c",
        ],
    )
    def test__decrypt__malformed_token_fails(self, cipher: ContentCipher, token: str) -> None:
        with pytest.raises(DecryptionError):
            cipher.decrypt(token)

    def test__init__empty_secret_rejected(self) -> None:
        with pytest.raises(ValueError):
            ContentCipher("")


class TestPackedWords:
    """Tests for pack_words/unpack_words."""

    def test__unpack_words__recovers_both_lists(self, cipher: ContentCipher) -> None:
        token = cipher.pack_words(["brown", "lazy"], ["quick"])

        assert is_encrypted(token)
        assert cipher.unpack_words(token) == (["brown", "lazy"], ["quick"])

    def test__unpack_words__non_json_payload_fails(self, cipher: ContentCipher) -> None:
        with pytest.raises(DecryptionError):
            cipher.unpack_words(cipher.encrypt("not json"))

    def test__unpack_words__non_object_payload_fails(self, cipher: ContentCipher) -> None:
        with pytest.raises(DecryptionError):
            cipher.unpack_words(cipher.encrypt("[1, 2]"))

    @pytest.mark.parametrize("payload", [
        '{"addedWords": "abc", "removedWords": []}',
        '{"addedWords": [1, "ok"], "removedWords": []}',
        '{"addedWords": [], "removedWords": {"a": 1}}',
    ])
    def test__unpack_words__non_string_lists_fail(self, cipher: ContentCipher, payload: str) -> None:
        with pytest.raises(DecryptionError):
            cipher.unpack_words(cipher.encrypt(payload))

    def test__unpack_words__missing_keys_give_empty_lists(self, cipher: ContentCipher) -> None:
        assert cipher.unpack_words(cipher.encrypt("{}")) == ([], [])


class TestHelpers:
    """Tests for module-level helpers."""

    @pytest.mark.parametrize("value,expected", [
        ("enc2:abc:def", True),
        ("enc2", False),
        ("plain", False),
        ("", False),
        (None, False),
        (["enc2:abc:def"], False),
    ])
    def test__is_encrypted(self, value, expected: bool) -> None:
        assert is_encrypted(value) is expected

    @pytest.mark.parametrize("secret", [None, ""])
    def test__build_cipher__no_secret_means_plaintext(self, secret) -> None:
        assert build_cipher(secret) is None

    def test__build_cipher__with_secret(self) -> None:
        assert isinstance(build_cipher("key"), ContentCipher)

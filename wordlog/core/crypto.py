"""
Шифрование содержимого в хранилище (AES-256-GCM).

Формат сохраненного значения: ``enc2:<iv-base64>:<payload-base64>``, где
payload - это ciphertext с приклеенным в конце 16-байтовым тегом
аутентификации. Ключ - SHA-256 от общего секрета.
"""
import base64
import binascii
import hashlib
import json
import os
from typing import List, Optional, Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

ENCRYPTED_MARKER = "enc2:"
NONCE_SIZE = 12
TAG_SIZE = 16


class DecryptionError(Exception):
    """Значение не удалось расшифровать (поврежденные данные или чужой ключ)"""


def is_encrypted(value) -> bool:
    """Проверка наличия маркера шифрования"""
    return isinstance(value, str) and value.startswith(ENCRYPTED_MARKER)


class ContentCipher:
    """Симметричный шифр для содержимого и упакованных списков слов"""

    def __init__(self, secret: str):
        if not secret:
            raise ValueError("Encryption secret cannot be empty")
        self._aead = AESGCM(hashlib.sha256(secret.encode("utf-8")).digest())

    def encrypt(self, plaintext: str) -> str:
        iv = os.urandom(NONCE_SIZE)
        # AESGCM возвращает ciphertext || tag
        sealed = self._aead.encrypt(iv, plaintext.encode("utf-8"), None)
        return "{marker}{iv}:{payload}".format(
            marker=ENCRYPTED_MARKER,
            iv=base64.b64encode(iv).decode("ascii"),
            payload=base64.b64encode(sealed).decode("ascii"),
        )

    def decrypt(self, token: str) -> str:
        if not is_encrypted(token):
            raise DecryptionError("Value is not marked as encrypted")

        parts = token.split(":")
        if len(parts) != 3:
            raise DecryptionError("Encrypted value must have three parts")

        try:
            iv = base64.b64decode(parts[1], validate=True)
            sealed = base64.b64decode(parts[2], validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecryptionError("Invalid base64 in encrypted value") from e

        if len(iv) != NONCE_SIZE or len(sealed) < TAG_SIZE:
            raise DecryptionError("Encrypted value is truncated")

        try:
            plain = self._aead.decrypt(iv, sealed, None)
            return plain.decode("utf-8")
        except (InvalidTag, UnicodeDecodeError) as e:
            raise DecryptionError("Authentication failed") from e

    def pack_words(self, added_words: List[str], removed_words: List[str]) -> str:
        """Упаковка обоих списков слов в один зашифрованный токен"""
        pack = json.dumps({"addedWords": list(added_words), "removedWords": list(removed_words)})
        return self.encrypt(pack)

    def unpack_words(self, token: str) -> Tuple[List[str], List[str]]:
        """Распаковка токена, созданного pack_words"""
        try:
            parsed = json.loads(self.decrypt(token))
        except ValueError as e:
            raise DecryptionError("Packed word lists are not valid JSON") from e

        if not isinstance(parsed, dict):
            raise DecryptionError("Packed word lists must be an object")

        return _word_list(parsed.get("addedWords")), _word_list(parsed.get("removedWords"))


def _word_list(value) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(word, str) for word in value):
        raise DecryptionError("Packed word lists must be lists of strings")
    return value


def build_cipher(secret: Optional[str]) -> Optional[ContentCipher]:
    """Шифр для заданного секрета; None означает хранение открытым текстом"""
    if not secret:
        return None
    return ContentCipher(secret)

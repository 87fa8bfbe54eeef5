"""AES-256-GCM cipher whose key can be split into Shamir shares.

Ciphertext layout: ``nonce (12 bytes) || AES-GCM ciphertext || tag (16 bytes)``.
A fresh random nonce is drawn for every message.
"""

from __future__ import annotations

import hashlib
import os
from typing import Iterable, Set

import structlog
from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from shared_secrets.config import KEY_LENGTH, NONCE_LENGTH
from shared_secrets.crypto.shamir import Share, recover_secret, split_secret

_TAG_LENGTH = 16

log = structlog.get_logger(__name__)


class CipherError(Exception):
    """Raised when a ciphertext cannot be decrypted."""


class Cipher:
    """Authenticated encryption with a 256-bit key."""

    def __init__(self, key: bytes) -> None:
        if len(key) != KEY_LENGTH:
            raise ValueError(f"Key must be {KEY_LENGTH} bytes, got {len(key)}")
        self._key = bytes(key)
        self._aead = AESGCM(self._key)

    @classmethod
    def from_password(cls, password: str) -> "Cipher":
        """Derive the key as SHA-256 of the UTF-8 encoded *password*."""
        return cls(hashlib.sha256(password.encode("utf-8")).digest())

    @classmethod
    def from_shares(cls, shares: Iterable[Share]) -> "Cipher":
        """Rebuild the cipher from shares produced by :meth:`split_key`.

        Raises ``ValueError`` (or a subclass) for malformed or duplicate
        shares.  Too few shares interpolate an unrelated value: either it does
        not fit in a key (``ValueError``) or it is a wrong key, which only
        shows up as a :class:`CipherError` on :meth:`decrypt`.
        """
        return cls(recover_secret(shares, length=KEY_LENGTH))

    @property
    def key(self) -> bytes:
        return self._key

    def split_key(self, n: int, k: int) -> Set[Share]:
        """Split the key into *n* shares, any *k* of which recover it."""
        shares = split_secret(self._key, n, k)
        log.info("key split", n=n, k=k)
        return shares

    def encrypt(self, plaintext: bytes) -> bytes:
        nonce = os.urandom(NONCE_LENGTH)
        return nonce + self._aead.encrypt(nonce, plaintext, None)

    def decrypt(self, ciphertext: bytes) -> bytes:
        if len(ciphertext) < NONCE_LENGTH + _TAG_LENGTH:
            raise CipherError("Ciphertext is truncated")
        nonce, body = ciphertext[:NONCE_LENGTH], ciphertext[NONCE_LENGTH:]
        try:
            return self._aead.decrypt(nonce, body, None)
        except InvalidTag:
            raise CipherError("Decryption failed: wrong key or corrupted ciphertext") from None

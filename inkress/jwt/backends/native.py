"""
Native Crypto Backend

Uses the interpreter's built-in hashing and byte-buffer primitives
(hmac, hashlib, base64).
"""

import base64
import hashlib
import hmac
from typing import Union

from .base import BytesLike, CryptoBackend


class NativeBackend(CryptoBackend):
    """HMAC backend built on hmac/hashlib"""

    @property
    def name(self) -> str:
        return "native"

    async def hmac_sign(self, algorithm: str, key: Union[str, bytes], data: str) -> bytes:
        digestmod = getattr(hashlib, self.hash_name(algorithm))
        mac = hmac.new(self.text_to_bytes(key), self.text_to_bytes(data), digestmod)
        return mac.digest()

    def timing_safe_equal(self, a: BytesLike, b: BytesLike) -> bool:
        a, b = bytes(a), bytes(b)
        if len(a) != len(b):
            return False
        return hmac.compare_digest(a, b)

    def _b64decode(self, padded: str) -> bytes:
        # binascii.Error is a ValueError
        return base64.b64decode(padded, validate=True)

    def _b64encode(self, data: bytes) -> str:
        return base64.b64encode(data).decode("ascii")


__all__ = ["NativeBackend"]

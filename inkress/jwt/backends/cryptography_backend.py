"""
Cryptography Crypto Backend

Uses the `cryptography` package's HMAC primitives and operates on raw byte
arrays for the base64url codecs.
"""

import binascii
from typing import Union

from cryptography.hazmat.primitives import constant_time, hashes
from cryptography.hazmat.primitives import hmac as crypto_hmac

from .base import BytesLike, CryptoBackend

_HASHES = {
    "sha256": hashes.SHA256,
    "sha512": hashes.SHA512,
}


class CryptographyBackend(CryptoBackend):
    """HMAC backend built on cryptography.hazmat"""

    @property
    def name(self) -> str:
        return "cryptography"

    async def hmac_sign(self, algorithm: str, key: Union[str, bytes], data: str) -> bytes:
        hash_cls = _HASHES[self.hash_name(algorithm)]
        mac = crypto_hmac.HMAC(self.text_to_bytes(key), hash_cls())
        mac.update(self.text_to_bytes(data))
        return mac.finalize()

    def timing_safe_equal(self, a: BytesLike, b: BytesLike) -> bool:
        a8, b8 = bytearray(a), bytearray(b)
        if len(a8) != len(b8):
            return False
        return constant_time.bytes_eq(bytes(a8), bytes(b8))

    def _b64decode(self, padded: str) -> bytes:
        return binascii.a2b_base64(padded.encode("ascii"))

    def _b64encode(self, data: bytes) -> str:
        return binascii.b2a_base64(data, newline=False).decode("ascii")


__all__ = ["CryptographyBackend"]

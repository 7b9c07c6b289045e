"""
Crypto Backend Base Class

Abstract capability interface used by the JWT verifier. A backend provides
HMAC signing, constant-time comparison and base64url codecs. Implement this
interface to add a new backend, then register it in the backend factory.

Example:
    class MyBackend(CryptoBackend):
        @property
        def name(self) -> str:
            return "my_backend"

        async def hmac_sign(self, algorithm: str, key: Union[str, bytes], data: str) -> bytes:
            ...
"""

import re
from abc import ABC, abstractmethod
from typing import Dict, Union

from ..errors import JWTError, MalformedToken, UnsupportedAlgorithm

BytesLike = Union[bytes, bytearray, memoryview]

# JWS algorithm name -> hash name
HASH_ALGORITHMS: Dict[str, str] = {
    "HS256": "sha256",
    "HS512": "sha512",
}

_BASE64URL_RE = re.compile(r"^[A-Za-z0-9_-]*$")


class CryptoBackend(ABC):
    """
    Abstract base class for JWT crypto backends.

    All backends must produce byte-identical output for identical inputs.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the backend identifier"""
        pass

    @abstractmethod
    async def hmac_sign(self, algorithm: str, key: Union[str, bytes], data: str) -> bytes:
        """
        Sign data with HMAC.

        Args:
            algorithm: JWS algorithm name (HS256 or HS512)
            key: Shared secret
            data: Signing input, usually "header.payload"

        Returns:
            Raw signature bytes
        """
        pass

    @abstractmethod
    def timing_safe_equal(self, a: BytesLike, b: BytesLike) -> bool:
        """
        Compare two byte strings in constant time.

        Returns False immediately when lengths differ; equal-length inputs are
        compared over every byte.
        """
        pass

    @abstractmethod
    def _b64decode(self, padded: str) -> bytes:
        """Decode a padded standard-alphabet base64 string"""
        pass

    @abstractmethod
    def _b64encode(self, data: bytes) -> str:
        """Encode bytes as padded standard-alphabet base64"""
        pass

    # ========================================
    # Shared helpers
    # ========================================

    @staticmethod
    def hash_name(algorithm: str) -> str:
        """Map a JWS algorithm name to its hash name"""
        try:
            return HASH_ALGORITHMS[algorithm]
        except (KeyError, TypeError):
            raise UnsupportedAlgorithm(algorithm) from None

    def text_to_bytes(self, text: Union[str, BytesLike]) -> bytes:
        if isinstance(text, (bytes, bytearray, memoryview)):
            return bytes(text)
        if not isinstance(text, str):
            raise JWTError(f"Expected str or bytes, got {type(text).__name__}")
        return text.encode("utf-8")

    def bytes_to_text(self, data: BytesLike) -> str:
        try:
            return bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedToken("Token segment is not valid UTF-8") from e

    def base64url_to_bytes(self, segment: str) -> bytes:
        """
        Decode an unpadded base64url segment.

        Raises:
            MalformedToken: If the segment is not valid base64url
        """
        if not isinstance(segment, str) or not _BASE64URL_RE.match(segment):
            raise MalformedToken("Token segment is not valid base64url")
        if len(segment) % 4 == 1:
            raise MalformedToken("Token segment has invalid base64url length")

        base64 = segment.replace("-", "+").replace("_", "/")
        padded = base64 + "=" * ((4 - len(base64) % 4) % 4)
        try:
            return self._b64decode(padded)
        except ValueError as e:
            raise MalformedToken("Token segment is not valid base64url") from e

    def base64url_decode(self, segment: str) -> str:
        """Decode a base64url segment to text"""
        return self.bytes_to_text(self.base64url_to_bytes(segment))

    def bytes_to_base64url(self, data: BytesLike) -> str:
        """Encode bytes as unpadded base64url"""
        return (
            self._b64encode(bytes(data))
            .replace("+", "-")
            .replace("/", "_")
            .rstrip("=")
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"


__all__ = ["CryptoBackend", "HASH_ALGORITHMS", "BytesLike"]

"""
JWT Verifier

Verifies HMAC-signed compact JWTs (HS256/HS512) for webhook notifications.

Verification order:
1. Split into exactly three base64url segments
2. Check the header algorithm against the caller's allow-list
3. Recompute the HMAC over "header.payload" and compare in constant time
4. Check exp / nbf against the current time
"""

import json
import logging
import math
import time
from typing import Any, Callable, Dict, Optional, Tuple, Union

from .backends import CryptoBackend, HASH_ALGORITHMS, NativeBackend, get_backend
from .errors import (
    Expired,
    InvalidSignature,
    MalformedToken,
    NotYetValid,
    UnsupportedAlgorithm,
)
from .models import DecodedJWT, JWTVerifyOptions

logger = logging.getLogger(__name__)

OptionsLike = Union[JWTVerifyOptions, Dict[str, Any], None]


class JWTVerifier:
    """
    HMAC JWT verifier bound to a single crypto backend.

    The backend is chosen once, at construction time.

    Usage:
        verifier = JWTVerifier()
        payload = await verifier.verify(token, secret)
    """

    def __init__(
        self,
        backend: Optional[CryptoBackend] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Initialize the verifier

        Args:
            backend: Crypto backend (defaults to the configured backend)
            clock: Returns the current Unix time in seconds (default: time.time)
        """
        self.backend = backend if backend is not None else get_backend()
        self._clock = clock or time.time

    # ========================================
    # Verification
    # ========================================

    async def verify(
        self,
        token: str,
        secret: Union[str, bytes],
        options: OptionsLike = None,
    ) -> Dict[str, Any]:
        """
        Verify a JWT and return its payload.

        Args:
            token: Compact JWT
            secret: Shared secret used to sign the token (str or bytes)
            options: Allowed algorithms and leeway

        Returns:
            Decoded claim set

        Raises:
            MalformedToken: Bad segment count, base64url or JSON
            UnsupportedAlgorithm: Header alg not in the allow-list
            InvalidSignature: Signature mismatch
            Expired: now >= exp
            NotYetValid: now < nbf
        """
        opts = JWTVerifyOptions.from_value(options)
        header_b64, payload_b64, signature_b64 = self._split(token)

        header = self._decode_segment(header_b64, "header")
        alg = header.get("alg")
        if not isinstance(alg, str):
            raise MalformedToken("Token header is missing alg")
        if alg not in opts.algorithms:
            raise UnsupportedAlgorithm(alg)

        data = f"{header_b64}.{payload_b64}"
        if not await self.verify_signature(data, signature_b64, secret, alg):
            raise InvalidSignature()

        payload = self._decode_segment(payload_b64, "payload")
        self._check_time_claims(payload, opts.leeway)

        logger.debug(f"Verified {alg} token")
        return payload

    async def verify_signature(
        self,
        data: str,
        signature_b64: str,
        secret: Union[str, bytes],
        algorithm: str,
    ) -> bool:
        """
        Verify the signature of a JWT.

        Args:
            data: The signed data ("header.payload")
            signature_b64: base64url encoded signature
            secret: Shared secret
            algorithm: HS256 or HS512

        Returns:
            True if the signature is valid
        """
        expected = await self.backend.hmac_sign(algorithm, secret, data)
        actual = self.backend.base64url_to_bytes(signature_b64)
        return self.backend.timing_safe_equal(actual, expected)

    def decode(self, token: str) -> DecodedJWT:
        """
        Decode a JWT WITHOUT verifying its signature (for inspection/debugging).

        Raises:
            MalformedToken: If the token format is invalid
        """
        header_b64, payload_b64, _ = self._split(token)
        return DecodedJWT(
            header=self._decode_segment(header_b64, "header"),
            payload=self._decode_segment(payload_b64, "payload"),
        )

    # ========================================
    # Signing
    # ========================================

    async def sign(
        self,
        payload: Dict[str, Any],
        secret: Union[str, bytes],
        algorithm: str = "HS256",
        headers: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Create a compact JWT signed with HS256 or HS512.

        Used to build fixtures and simulate webhook deliveries locally.
        """
        if algorithm not in HASH_ALGORITHMS:
            raise UnsupportedAlgorithm(algorithm)

        header = {"alg": algorithm, "typ": "JWT"}
        if headers:
            header.update(headers)
            header["alg"] = algorithm

        segments = [
            self._encode_segment(header),
            self._encode_segment(payload),
        ]
        data = ".".join(segments)
        signature = await self.backend.hmac_sign(algorithm, secret, data)
        return f"{data}.{self.backend.bytes_to_base64url(signature)}"

    # ========================================
    # Helpers
    # ========================================

    @staticmethod
    def _split(token: str) -> Tuple[str, str, str]:
        if not isinstance(token, str):
            raise MalformedToken("Token must be a string")
        parts = token.split(".")
        if len(parts) != 3:
            raise MalformedToken()
        return parts[0], parts[1], parts[2]

    def _decode_segment(self, segment: str, label: str) -> Dict[str, Any]:
        text = self.backend.base64url_decode(segment)
        try:
            value = json.loads(text, parse_constant=self._reject_constant)
        except json.JSONDecodeError as e:
            raise MalformedToken(f"Token {label} is not valid JSON") from e
        if not isinstance(value, dict):
            raise MalformedToken(f"Token {label} must be a JSON object")
        return value

    @staticmethod
    def _reject_constant(name: str):
        # NaN, Infinity and -Infinity are not JSON
        raise MalformedToken(f"Token contains non-standard JSON constant {name}")

    def _encode_segment(self, value: Dict[str, Any]) -> str:
        raw = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
        return self.backend.bytes_to_base64url(self.backend.text_to_bytes(raw))

    def _check_time_claims(self, payload: Dict[str, Any], leeway: float) -> None:
        now = self._clock()

        exp = self._numeric_claim(payload, "exp")
        if exp is not None and now >= exp + leeway:
            raise Expired(exp)

        nbf = self._numeric_claim(payload, "nbf")
        if nbf is not None and now < nbf - leeway:
            raise NotYetValid(nbf)

        # iat is informational; only its type is checked
        self._numeric_claim(payload, "iat")

    @staticmethod
    def _numeric_claim(payload: Dict[str, Any], name: str) -> Optional[float]:
        value = payload.get(name)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise MalformedToken(f"Claim {name} must be a number")
        try:
            finite = math.isfinite(value)
        except OverflowError:
            finite = False
        if not finite:
            raise MalformedToken(f"Claim {name} must be finite")
        return value


# Module-level verifier for the convenience functions below
default_verifier = JWTVerifier(NativeBackend())


async def jwt_verify(token: str, secret: Union[str, bytes], options: OptionsLike = None) -> Dict[str, Any]:
    """Verify a JWT with the default native backend"""
    return await default_verifier.verify(token, secret, options)


async def verify_signature(data: str, signature_b64: str, secret: Union[str, bytes], algorithm: str) -> bool:
    """Verify a JWT signature with the default native backend"""
    return await default_verifier.verify_signature(data, signature_b64, secret, algorithm)


def decode_jwt(token: str) -> DecodedJWT:
    """Decode a JWT without verification"""
    return default_verifier.decode(token)


__all__ = [
    "JWTVerifier",
    "default_verifier",
    "jwt_verify",
    "verify_signature",
    "decode_jwt",
]

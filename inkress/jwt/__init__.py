"""
Webhook JWT Verification

Self-contained HS256/HS512 verification with pluggable crypto backends.

Usage:
    from inkress.jwt import JWTVerifier, get_backend

    verifier = JWTVerifier(get_backend("cryptography"))
    payload = await verifier.verify(token, secret)
"""

from .backends import (
    CryptoBackend,
    NativeBackend,
    CryptographyBackend,
    available_backends,
    get_backend,
)
from .errors import (
    JWTError,
    MalformedToken,
    UnsupportedAlgorithm,
    InvalidSignature,
    Expired,
    NotYetValid,
)
from .models import DEFAULT_ALGORITHMS, JWTVerifyOptions, DecodedJWT
from .verifier import (
    JWTVerifier,
    default_verifier,
    jwt_verify,
    verify_signature,
    decode_jwt,
)

__all__ = [
    # Backends
    "CryptoBackend",
    "NativeBackend",
    "CryptographyBackend",
    "available_backends",
    "get_backend",
    # Errors
    "JWTError",
    "MalformedToken",
    "UnsupportedAlgorithm",
    "InvalidSignature",
    "Expired",
    "NotYetValid",
    # Models
    "DEFAULT_ALGORITHMS",
    "JWTVerifyOptions",
    "DecodedJWT",
    # Verifier
    "JWTVerifier",
    "default_verifier",
    "jwt_verify",
    "verify_signature",
    "decode_jwt",
]

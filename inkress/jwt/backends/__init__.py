"""
JWT Crypto Backends

Interchangeable implementations of the crypto capability interface.

Supported Backends:
- native: hmac/hashlib/base64 from the standard library
- cryptography: HMAC from the `cryptography` package

Usage:
    from inkress.jwt.backends import get_backend

    backend = get_backend("cryptography")
    signature = await backend.hmac_sign("HS256", "secret", "header.payload")
"""

import logging
from typing import Dict, List, Optional, Type

from .base import CryptoBackend, HASH_ALGORITHMS
from .native import NativeBackend
from .cryptography_backend import CryptographyBackend

logger = logging.getLogger(__name__)

BACKENDS: Dict[str, Type[CryptoBackend]] = {
    "native": NativeBackend,
    "cryptography": CryptographyBackend,
}


def available_backends() -> List[str]:
    """Names of the registered backends"""
    return list(BACKENDS)


def get_backend(name: Optional[str] = None) -> CryptoBackend:
    """
    Factory function to get a crypto backend.

    Args:
        name: Backend name; falls back to the configured backend

    Returns:
        Backend instance

    Example:
        backend = get_backend("native")
    """
    if name is None:
        from inkress.config import get_settings
        name = get_settings().crypto_backend

    backend_class = BACKENDS.get(name)
    if not backend_class:
        raise ValueError(f"Unknown crypto backend: {name}")

    logger.debug(f"Using {name} crypto backend")
    return backend_class()


__all__ = [
    "CryptoBackend",
    "NativeBackend",
    "CryptographyBackend",
    "HASH_ALGORITHMS",
    "BACKENDS",
    "available_backends",
    "get_backend",
]

"""
Inkress Python SDK

Client for the Inkress payment platform.

COMPONENTS:
    - client.py: Inkress facade (orders, payment URLs, webhook verification)
    - jwt/: HS256/HS512 webhook JWT verifier with pluggable crypto backends
    - models.py: Order, payment URL and webhook data models
    - config/: Environment based configuration and logging setup

USAGE:
    from inkress import Inkress

    inkress = Inkress(token="tok", client_key="ck", mode="test")
    url = inkress.create_payment_url({"username": "acme", "total": 150.5})
    payload = await inkress.verify_jwt(webhook_token, secret)
"""

import logging

from .client import Inkress, DEFAULT_CUSTOMER
from .config import InkressConfig, LoggingConfig, get_settings, reload_settings, setup_logging
from .encoding import canonical_json, decode_b64_json, encode_json_to_b64, generate_random_id
from .exceptions import InkressError, PaymentOptionsError
from .jwt import (
    JWTVerifier,
    JWTVerifyOptions,
    DecodedJWT,
    JWTError,
    MalformedToken,
    UnsupportedAlgorithm,
    InvalidSignature,
    Expired,
    NotYetValid,
    decode_jwt,
    jwt_verify,
    get_backend,
)
from .models import (
    Customer,
    Mode,
    OrderErrorKind,
    OrderPlacementRequest,
    OrderPlacementResponse,
    OrderPlacementResult,
    OrderResult,
    PaymentURLOptions,
    WebhookPayload,
    WebhookStatus,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Export public API
__all__ = [
    "Inkress",
    "DEFAULT_CUSTOMER",
    # Config
    "InkressConfig",
    "LoggingConfig",
    "get_settings",
    "reload_settings",
    "setup_logging",
    # Encoding
    "canonical_json",
    "decode_b64_json",
    "encode_json_to_b64",
    "generate_random_id",
    # Errors
    "InkressError",
    "PaymentOptionsError",
    "JWTError",
    "MalformedToken",
    "UnsupportedAlgorithm",
    "InvalidSignature",
    "Expired",
    "NotYetValid",
    # JWT
    "JWTVerifier",
    "JWTVerifyOptions",
    "DecodedJWT",
    "decode_jwt",
    "jwt_verify",
    "get_backend",
    # Models
    "Customer",
    "Mode",
    "OrderErrorKind",
    "OrderPlacementRequest",
    "OrderPlacementResponse",
    "OrderPlacementResult",
    "OrderResult",
    "PaymentURLOptions",
    "WebhookPayload",
    "WebhookStatus",
]

__version__ = "0.2.0"

"""
Inkress Client

Credential-holding facade for the Inkress payment platform: order submission,
local payment URL construction and webhook JWT verification.
"""

import logging
import math
from typing import Any, Dict, Optional, Union
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from .config import BASE_URLS, InkressConfig, get_settings, parse_mode
from .encoding import (
    canonical_json,
    decode_b64_json as _decode_b64_json,
    encode_json_to_b64,
    generate_random_id as _generate_random_id,
)
from .exceptions import PaymentOptionsError
from .jwt import CryptoBackend, JWTError, JWTVerifier, JWTVerifyOptions, get_backend
from .models import (
    Customer,
    Mode,
    OrderErrorKind,
    OrderPlacementRequest,
    OrderPlacementResponse,
    OrderResult,
    PaymentURLOptions,
    WebhookPayload,
)

logger = logging.getLogger(__name__)

API_PATH = "/api/v1"

DEFAULT_CUSTOMER = {
    "first_name": "",
    "last_name": "",
    "email": "",
    "phone": "",
}

# Characters encodeURIComponent leaves untouched
_URI_COMPONENT_SAFE = "-_.!~*'()"


class Inkress:
    """
    Inkress payment platform client

    Usage:
        async with Inkress(token="tok", client_key="ck", mode="test") as inkress:
            result = await inkress.create_order(order)
            if result:
                print(result.response.result.urls.short_link)

        url = inkress.create_payment_url({"username": "acme", "total": 150.5})
    """

    def __init__(
        self,
        token: str = "",
        client_key: str = "",
        mode: Union[Mode, str] = Mode.LIVE,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        backend: Union[str, CryptoBackend, None] = None,
        webhook_secret: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize Inkress client

        Args:
            token: API token (sent as Bearer)
            client_key: Client key (sent as Client-Key)
            mode: Mode.LIVE or Mode.TEST (or their names), selects the API host
            base_url: Explicit API base URL, overrides mode
            timeout: HTTP timeout in seconds
            backend: Crypto backend instance or name for webhook verification
            webhook_secret: Default secret for verify_jwt
            http_client: Pre-built httpx client (owned by the caller)
        """
        self.mode = parse_mode(mode)
        if base_url:
            self.base_url = base_url.rstrip('/')
        else:
            self.base_url = BASE_URLS[self.mode]

        self.token = token
        self.client_key = client_key
        self.webhook_secret = webhook_secret

        if not isinstance(backend, CryptoBackend):
            backend = get_backend(backend)
        self.verifier = JWTVerifier(backend)

        self._owns_client = http_client is None
        self.client = http_client or httpx.AsyncClient(timeout=timeout)

        logger.debug(f"Initialized Inkress client: {self.base_url} (backend={backend.name})")

    @classmethod
    def from_config(cls, config: InkressConfig, **kwargs) -> 'Inkress':
        """Create a client from an InkressConfig"""
        return cls(
            token=config.token,
            client_key=config.client_key,
            mode=config.mode,
            timeout=config.timeout,
            backend=kwargs.pop("backend", config.crypto_backend),
            webhook_secret=config.webhook_secret,
            **kwargs
        )

    @classmethod
    def from_env(cls, **kwargs) -> 'Inkress':
        """Create a client from INKRESS_* environment variables"""
        return cls.from_config(get_settings(), **kwargs)

    async def close(self):
        """Close HTTP client"""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # =============================================================================
    # Credentials
    # =============================================================================

    def set_client(self, client_key: str):
        """Set the client key for API requests"""
        self.client_key = client_key

    def set_token(self, token: str):
        """Set the API token for API requests"""
        self.token = token

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Client-Key": self.client_key,
            "Authorization": f"Bearer {self.token}",
        }

    # =============================================================================
    # Orders
    # =============================================================================

    async def create_order(
        self,
        order: Union[OrderPlacementRequest, Dict[str, Any]]
    ) -> OrderResult:
        """
        Create an order via the Inkress API

        Never raises: every failure is logged and reported through
        OrderResult.error.

        Args:
            order: Order details

        Returns:
            OrderResult with the parsed response, or the failure kind

        Example:
            >>> result = await inkress.create_order({
            ...     "total": 150.5,
            ...     "title": "Order #1",
            ...     "kind": "online",
            ...     "customer": {"phone": "8765550100"},
            ...     "reference_id": "ref-1",
            ...     "currency_code": "JMD",
            ... })
            >>> if not result:
            ...     print(result.error, result.message)
        """
        try:
            if not isinstance(order, OrderPlacementRequest):
                order = OrderPlacementRequest.model_validate(order)
        except ValidationError as e:
            logger.error(f"Invalid order request: {e.error_count()} validation error(s)")
            return OrderResult(error=OrderErrorKind.INVALID_REQUEST, message=str(e))

        body = canonical_json(order.model_dump(mode="json", exclude_none=True))

        response = None
        try:
            response = await self.client.post(
                f"{self.base_url}/orders",
                content=body,
                headers=self._headers()
            )
            response.raise_for_status()
            data = OrderPlacementResponse.model_validate(response.json())
            return OrderResult(response=data, status_code=response.status_code)

        except httpx.HTTPStatusError as e:
            logger.error(f"Failed to create order: {e.response.status_code}")
            return OrderResult(
                error=OrderErrorKind.HTTP_STATUS,
                status_code=e.response.status_code,
                message=f"API error: {e.response.status_code} {e.response.reason_phrase}",
            )
        except httpx.HTTPError as e:
            logger.error(f"Error creating order: {e}")
            return OrderResult(error=OrderErrorKind.TRANSPORT, message=str(e))
        except ValueError as e:
            # JSON decode errors and pydantic ValidationError
            logger.error(f"Invalid order response: {e}")
            return OrderResult(
                error=OrderErrorKind.INVALID_RESPONSE,
                status_code=response.status_code if response is not None else None,
                message=str(e),
            )
        except Exception as e:
            logger.error(f"Error creating order: {e}", exc_info=True)
            return OrderResult(error=OrderErrorKind.TRANSPORT, message=str(e))

    # =============================================================================
    # Webhooks
    # =============================================================================

    async def verify_jwt(
        self,
        token: str,
        secret: Union[str, bytes, None] = None,
        options: Union[JWTVerifyOptions, Dict[str, Any], None] = None,
    ) -> Union[WebhookPayload, Dict[str, Any], None]:
        """
        Verify and decode a webhook JWT

        Args:
            token: JWT token to verify
            secret: Secret key for verification (defaults to webhook_secret)
            options: Allowed algorithms and leeway

        Returns:
            WebhookPayload when the claims match the webhook shape, the raw
            claims otherwise, or None if verification fails
        """
        secret = secret if secret is not None else self.webhook_secret
        if secret is None:
            logger.error("No webhook secret configured for JWT verification")
            return None

        try:
            claims = await self.verifier.verify(token, secret, options)
        except JWTError as e:
            logger.warning(f"Error while decoding and verifying JWT: {e}")
            return None

        try:
            return WebhookPayload.model_validate(claims)
        except ValidationError:
            logger.debug("Verified claims are not a webhook payload, returning raw claims")
            return claims

    # =============================================================================
    # Payment URLs
    # =============================================================================

    def decode_b64_json(self, encoded: str) -> Any:
        """
        Decode a base64-encoded JSON string

        Returns:
            Decoded JSON value or None if decoding fails
        """
        try:
            return _decode_b64_json(encoded)
        except ValueError as e:
            logger.error(f"Error decoding base64 JSON: {e}")
            return None

    def generate_random_id(self) -> str:
        """Generate a random id for order references"""
        return _generate_random_id()

    @staticmethod
    def _validate_payment_options(options: PaymentURLOptions) -> Union[int, float]:
        if not options.username:
            raise PaymentOptionsError("Merchant username is required")

        total = options.total
        if total is None or isinstance(total, bool):
            raise PaymentOptionsError("Valid total amount is required")
        try:
            total = float(total)
        except (TypeError, ValueError):
            raise PaymentOptionsError("Valid total amount is required") from None
        if not math.isfinite(total):
            raise PaymentOptionsError("Valid total amount is required")
        if total < 0:
            raise PaymentOptionsError("Total amount must not be negative")

        return int(total) if total.is_integer() else total

    def create_payment_url(
        self,
        options: Union[PaymentURLOptions, Dict[str, Any]]
    ) -> str:
        """
        Create a payment URL for the Inkress platform

        Pure: no network I/O.

        Args:
            options: Payment URL options (username and total are required)

        Returns:
            Merchant order URL carrying a base64 order token

        Raises:
            PaymentOptionsError: Missing username or invalid total
        """
        if not isinstance(options, PaymentURLOptions):
            try:
                options = PaymentURLOptions.model_validate(options)
            except ValidationError as e:
                raise PaymentOptionsError(str(e)) from e

        total = self._validate_payment_options(options)
        username = options.username

        supplied = options.customer or {}
        if isinstance(supplied, Customer):
            supplied = supplied.model_dump(exclude_none=True)

        customer = dict(DEFAULT_CUSTOMER)
        for key, value in supplied.items():
            if value is not None:
                customer[key] = value

        order_data = {
            "total": total,
            "currency_code": options.currency_code if options.currency_code is not None else "JMD",
            "title": options.title if options.title is not None else f"Payment to {username}",
            "reference_id": options.reference_id if options.reference_id is not None else self.generate_random_id(),
            "customer": customer,
        }
        order_token = encode_json_to_b64(order_data)

        host_base = self.base_url
        if host_base.endswith(API_PATH):
            host_base = host_base[:-len(API_PATH)]

        return (
            f"{host_base}/merchants/{quote(username, safe=_URI_COMPONENT_SAFE)}/order"
            f"?link_token={options.payment_link_id or ''}&order_token={order_token}"
        )


__all__ = ["Inkress", "DEFAULT_CUSTOMER"]

"""
Inkress Data Models

Order placement, payment URL and webhook payload shapes.
"""

from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field


# ====================
# Enums
# ====================

class WebhookStatus(str, Enum):
    """Order status carried by webhook notifications"""
    PENDING = "pending"
    ERROR = "error"
    PAID = "paid"
    PARTIAL = "partial"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    PREPARED = "prepared"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    COMPLETED = "completed"
    RETURNED = "returned"
    REFUNDED = "refunded"


class Mode(str, Enum):
    """API environment"""
    LIVE = "live"
    TEST = "test"


class OrderErrorKind(str, Enum):
    """Why an order submission produced no response"""
    INVALID_REQUEST = "invalid_request"    # Order failed local validation
    TRANSPORT = "transport"                # Network error, timeout, DNS...
    HTTP_STATUS = "http_status"            # Non-2xx status
    INVALID_RESPONSE = "invalid_response"  # Body was not the expected JSON


# ====================
# Orders
# ====================

class Customer(BaseModel):
    """Customer attached to an order"""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: str = Field(..., description="Customer phone number")

    class Config:
        extra = "allow"


class OrderPlacementRequest(BaseModel):
    """Order creation request body"""
    total: float = Field(..., ge=0, allow_inf_nan=False, description="Order total")
    title: str
    kind: str
    customer: Customer
    reference_id: str
    currency_code: str


class OrderUrls(BaseModel):
    """Payment links returned for a new order"""
    qr_url: Optional[str] = None
    short_link: Optional[str] = None

    class Config:
        extra = "allow"


class OrderPlacementResult(BaseModel):
    """Order returned by the API"""
    id: Optional[Union[int, str]] = None
    status: Optional[str] = None
    total: Optional[float] = None
    currency: Optional[str] = None
    reference_id: Optional[str] = None
    created_at: Optional[str] = None
    customer: Optional[Dict[str, Any]] = None
    provider: Optional[str] = None
    title: Optional[str] = None
    urls: Optional[OrderUrls] = None

    class Config:
        extra = "allow"


class OrderPlacementResponse(BaseModel):
    """Order creation API response"""
    state: str = Field(..., description="ok | error")
    result: Optional[OrderPlacementResult] = None

    class Config:
        extra = "allow"


class OrderResult(BaseModel):
    """
    Outcome of an order submission.

    Exactly one of response / error is set. Evaluates falsy on failure so
    callers can check presence only.
    """
    response: Optional[OrderPlacementResponse] = None
    error: Optional[OrderErrorKind] = None
    status_code: Optional[int] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.response is not None

    def __bool__(self) -> bool:
        return self.ok


# ====================
# Payment URLs
# ====================

class PaymentURLOptions(BaseModel):
    """Options for building a merchant payment URL"""
    username: Optional[str] = None
    total: Any = None
    currency_code: Optional[str] = "JMD"
    title: Optional[str] = None
    reference_id: Optional[str] = None
    # Mappings stay mappings; Customer instances stay models
    customer: Union[Dict[str, Any], Customer, None] = Field(default_factory=dict)
    payment_link_id: Optional[str] = None


# ====================
# Webhooks
# ====================

class WebhookPayload(BaseModel):
    """Verified webhook notification claims"""
    facilitator: Optional[str] = None
    provider: str
    provider_id: Optional[str] = None
    reference: str
    currency: str
    amount: float
    client: Dict[str, Any] = Field(default_factory=dict)
    status: WebhookStatus

    class Config:
        extra = "allow"


__all__ = [
    "WebhookStatus",
    "Mode",
    "OrderErrorKind",
    "Customer",
    "OrderPlacementRequest",
    "OrderUrls",
    "OrderPlacementResult",
    "OrderPlacementResponse",
    "OrderResult",
    "PaymentURLOptions",
    "WebhookPayload",
]

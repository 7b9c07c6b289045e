"""
Inkress SDK Exceptions

Root exception types shared by the facade and the JWT verifier.
"""


class InkressError(Exception):
    """Base exception for all SDK errors"""
    pass


class PaymentOptionsError(InkressError, ValueError):
    """Raised when payment URL options fail local validation"""
    pass


__all__ = ["InkressError", "PaymentOptionsError"]

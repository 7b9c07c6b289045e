"""
JWT Verification Errors

Every failure raised by the verifier is a subclass of JWTError, so callers can
catch the whole family or handle one kind precisely.
"""

from inkress.exceptions import InkressError


class JWTError(InkressError):
    """Base exception for JWT verification failures"""
    pass


class MalformedToken(JWTError):
    """Token is not a well-formed compact JWT"""

    def __init__(self, message: str = "Invalid token format"):
        super().__init__(message)


class UnsupportedAlgorithm(JWTError):
    """Header algorithm is not in the allow-list"""

    def __init__(self, algorithm=None):
        self.algorithm = algorithm
        super().__init__(f"Algorithm not supported: {algorithm}")


class InvalidSignature(JWTError):
    """Recomputed signature does not match the supplied one"""

    def __init__(self, message: str = "Invalid signature"):
        super().__init__(message)


class Expired(JWTError):
    """Token exp claim is in the past"""

    def __init__(self, exp=None):
        self.exp = exp
        super().__init__("Token has expired")


class NotYetValid(JWTError):
    """Token nbf claim is in the future"""

    def __init__(self, nbf=None):
        self.nbf = nbf
        super().__init__("Token not yet valid")


__all__ = [
    "JWTError",
    "MalformedToken",
    "UnsupportedAlgorithm",
    "InvalidSignature",
    "Expired",
    "NotYetValid",
]

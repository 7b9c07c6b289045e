"""
JWT Data Structures

Options and decoded token shapes used by the verifier.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

DEFAULT_ALGORITHMS = ["HS256", "HS512"]


@dataclass
class JWTVerifyOptions:
    """Verification options"""
    # Allow-list; the token header never widens it
    algorithms: List[str] = field(default_factory=lambda: list(DEFAULT_ALGORITHMS))
    # Seconds of clock skew tolerated on exp/nbf
    leeway: float = 0

    @classmethod
    def from_value(cls, value) -> 'JWTVerifyOptions':
        """Build options from None, a mapping or an existing instance"""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, dict):
            opts = cls()
            if value.get("algorithms") is not None:
                opts.algorithms = list(value["algorithms"])
            if value.get("leeway") is not None:
                opts.leeway = value["leeway"]
            return opts
        raise TypeError(f"Unsupported options type: {type(value).__name__}")


@dataclass
class DecodedJWT:
    """Header and payload of a token, NOT verified"""
    header: Dict[str, Any]
    payload: Dict[str, Any]


__all__ = ["DEFAULT_ALGORITHMS", "JWTVerifyOptions", "DecodedJWT"]

"""
Order Token Encoding

Canonical JSON, the base64 JSON envelope used for order tokens, and random
reference ids.
"""

import base64
import binascii
import json
import math
import secrets
import string
from decimal import Decimal
from typing import Any

ID_ALPHABET = string.ascii_lowercase + string.digits
ID_MIN_LENGTH = 20
ID_MAX_LENGTH = 24


def _format_number(value: float) -> str:
    """
    Render a finite float the way JavaScript's Number#toString does.

    Python's repr already yields the shortest round-trip digits; only the
    switch to exponent notation differs (JS keeps positional form for
    1e-6 <= |x| < 1e21 and writes exponents as "1e-7" / "1e+21").
    """
    if not math.isfinite(value):
        raise ValueError(f"Cannot encode non-finite number: {value}")
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))

    sign, digits, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digits)
    k = len(digits)
    # Position of the decimal point relative to the first digit
    n = exponent + k

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"

    return f"-{text}" if sign else text


def _render(value: Any) -> str:
    if value is None or isinstance(value, (bool, str)):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, Decimal):
        value = float(value)
    if isinstance(value, float):
        return _format_number(value)
    if isinstance(value, int):
        return int.__repr__(value)
    if isinstance(value, dict):
        items = (
            f"{_render_key(key)}:{_render(item)}"
            for key, item in value.items()
        )
        return "{" + ",".join(items) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_render(item) for item in value) + "]"
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def _render_key(key: Any) -> str:
    if not isinstance(key, str):
        key = _render(key)
    return json.dumps(key, ensure_ascii=False)


def canonical_json(data: Any) -> str:
    """
    Serialize data to compact JSON.

    Keys keep insertion order, so the same input always yields the same bytes.
    Numbers are written as JavaScript would write them: integral floats
    without a fraction (150.0 -> 150), exponent form only below 1e-6 or from
    1e21 upward (1e-7, 1e+21).

    Raises:
        ValueError: If data contains NaN or an infinity
        TypeError: If data contains a value JSON cannot represent
    """
    return _render(data)


def encode_json_to_b64(data: Any) -> str:
    """Encode an object as base64 of its canonical JSON"""
    return base64.b64encode(canonical_json(data).encode("utf-8")).decode("ascii")


def decode_b64_json(encoded: str) -> Any:
    """
    Decode a base64-encoded JSON string.

    Raises:
        ValueError: If the input is not base64 or not JSON
    """
    try:
        raw = base64.b64decode(encoded, validate=True)
        return json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, TypeError) as e:
        raise ValueError(f"Invalid base64 JSON: {e}") from e


def generate_random_id() -> str:
    """
    Generate a random lowercase alphanumeric reference id (20-24 chars).

    Not guaranteed to be globally unique.
    """
    length = ID_MIN_LENGTH + secrets.randbelow(ID_MAX_LENGTH - ID_MIN_LENGTH + 1)
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(length))


__all__ = [
    "canonical_json",
    "encode_json_to_b64",
    "decode_b64_json",
    "generate_random_id",
]

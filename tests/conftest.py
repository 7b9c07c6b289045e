"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - unit/       : Unit tests (pure functions, no I/O)
    - component/  : Component tests (Inkress facade with mocked HTTP transport)
"""
import json
import os
import sys
from typing import Any, Dict

import pytest

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

from inkress.jwt import JWTVerifier, available_backends, get_backend
from inkress.jwt.backends import NativeBackend


# =============================================================================
# Test Configuration
# =============================================================================

# Fixed "now" for time-bound claim tests (2023-11-14T22:13:20Z)
FIXED_NOW = 1_700_000_000

# PyJWT warns on short HMAC keys; keep test secrets long enough for HS512
WEBHOOK_SECRET = "whsec_" + "k" * 64
OTHER_SECRET = "whsec_" + "x" * 64


def b64url(data: bytes) -> str:
    return NativeBackend().bytes_to_base64url(data)


def b64url_json(value: Any) -> str:
    return b64url(json.dumps(value, separators=(",", ":")).encode("utf-8"))


async def sign_raw(header_b64: str, payload_b64: str, secret: str, algorithm: str = "HS256") -> str:
    """Sign arbitrary (possibly invalid) segments with a valid HMAC"""
    backend = NativeBackend()
    data = f"{header_b64}.{payload_b64}"
    signature = await backend.hmac_sign(algorithm, secret, data)
    return f"{data}.{backend.bytes_to_base64url(signature)}"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(params=available_backends())
def backend(request):
    """Every registered crypto backend"""
    return get_backend(request.param)


@pytest.fixture
def verifier(backend):
    """Verifier with a frozen clock"""
    return JWTVerifier(backend, clock=lambda: FIXED_NOW)


@pytest.fixture
def webhook_claims() -> Dict[str, Any]:
    return {
        "facilitator": "inkress",
        "provider": "card",
        "provider_id": "prv_123",
        "reference": "ref-1",
        "currency": "JMD",
        "amount": 150.5,
        "client": {"first_name": "Jane", "phone": "8765550100"},
        "status": "paid",
    }


@pytest.fixture(autouse=True)
def clean_inkress_env(monkeypatch):
    """Keep host INKRESS_* variables out of tests"""
    for key in list(os.environ):
        if key.startswith("INKRESS_"):
            monkeypatch.delenv(key, raising=False)
    import inkress.config as config
    monkeypatch.setattr(config, "_settings", None)

#!/usr/bin/env python3
"""SDK configuration for the Inkress client"""
import os
from dataclasses import dataclass
from typing import Optional, Union

from ..models import Mode

LIVE_BASE_URL = "https://inkress.com/api/v1"
TEST_BASE_URL = "https://dev.inkress.com/api/v1"

BASE_URLS = {
    Mode.LIVE: LIVE_BASE_URL,
    Mode.TEST: TEST_BASE_URL,
}


def parse_mode(mode: Union[Mode, str]) -> Mode:
    """Normalize a mode name to Mode, raising ValueError for anything else"""
    try:
        return Mode(mode)
    except ValueError:
        raise ValueError(
            f"Unknown mode: {mode!r} (expected one of {[m.value for m in Mode]})"
        ) from None


def _float(val: str, default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


@dataclass
class InkressConfig:
    """Inkress API credentials and client settings"""

    # ===========================================
    # Credentials
    # ===========================================
    token: str = ""
    client_key: str = ""

    # ===========================================
    # Environment
    # ===========================================
    mode: Union[Mode, str] = Mode.LIVE
    timeout: float = 30.0

    # ===========================================
    # Webhooks
    # ===========================================
    webhook_secret: Optional[str] = None
    # native | cryptography
    crypto_backend: str = "native"

    @property
    def base_url(self) -> str:
        """API base URL for the configured mode"""
        return BASE_URLS[parse_mode(self.mode)]

    @classmethod
    def from_env(cls) -> 'InkressConfig':
        """Load SDK configuration from environment variables"""
        return cls(
            token=os.getenv("INKRESS_TOKEN", ""),
            client_key=os.getenv("INKRESS_CLIENT_KEY", ""),
            mode=os.getenv("INKRESS_MODE", "live").strip().lower() or "live",
            timeout=_float(os.getenv("INKRESS_TIMEOUT", "30"), 30.0),
            webhook_secret=os.getenv("INKRESS_WEBHOOK_SECRET") or None,
            crypto_backend=os.getenv("INKRESS_CRYPTO_BACKEND", "native").strip().lower() or "native",
        )

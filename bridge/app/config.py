"""Environment-driven settings.

Values come from the process environment, optionally seeded from a ``.env``
file. The default port depends on the quote provider: 3000 for the remote
deployment, 4000 for the synthetic one.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from dotenv import load_dotenv

from ..core.errors import ConfigError
from ..market.remote import DEFAULT_BASE_URL

PROVIDERS = ("remote", "synthetic")
DEFAULT_PORTS = {"remote": 3000, "synthetic": 4000}


@dataclass
class Settings:
    quote_provider: str = "synthetic"
    port: int = 4000
    host: str = "0.0.0.0"
    td_api_key: Optional[str] = None
    quote_base_url: str = DEFAULT_BASE_URL
    quote_timeout: float = 5.0
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"


def _as_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def _as_float(name: str, raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from ``env`` (defaults to ``os.environ`` after loading .env)."""
    if env is None:
        load_dotenv()
        env = os.environ

    provider = (env.get("QUOTE_PROVIDER") or "synthetic").strip().lower()
    if provider not in PROVIDERS:
        raise ConfigError(
            f"QUOTE_PROVIDER must be one of {', '.join(PROVIDERS)}, got {provider!r}"
        )

    port_raw = env.get("PORT")
    port = _as_int("PORT", port_raw) if port_raw else DEFAULT_PORTS[provider]

    timeout_raw = env.get("QUOTE_TIMEOUT")
    timeout = _as_float("QUOTE_TIMEOUT", timeout_raw) if timeout_raw else 5.0

    origins_raw = env.get("CORS_ORIGINS") or "*"
    origins = [o.strip() for o in origins_raw.split(",") if o.strip()] or ["*"]

    return Settings(
        quote_provider=provider,
        port=port,
        host=env.get("HOST") or "0.0.0.0",
        td_api_key=env.get("TD_API_KEY") or None,
        quote_base_url=env.get("QUOTE_BASE_URL") or DEFAULT_BASE_URL,
        quote_timeout=timeout,
        cors_origins=origins,
        log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
    )

"""Configuration for the portfolio API.

Values come from environment variables; a local .env file is loaded on
import so development settings need not be exported by hand.
"""

import os

from dotenv import load_dotenv

from portfolio_api.domain.constants import (
    DEFAULT_RISK_TOLERANCE,
    MAX_RISK_TOLERANCE,
    MIN_RISK_TOLERANCE,
)

load_dotenv()

# Environment variable names
ENV_HOST = "HOST"
ENV_PORT = "PORT"
ENV_LOG_LEVEL = "LOG_LEVEL"
ENV_CORS_ORIGINS = "CORS_ORIGINS"
ENV_DEFAULT_RISK_TOLERANCE = "PORTFOLIO_DEFAULT_RISK_TOLERANCE"
ENV_LABEL_MISSING_SYMBOLS = "PORTFOLIO_LABEL_MISSING_SYMBOLS"

# Defaults
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 4000
DEFAULT_LOG_LEVEL = "INFO"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def resolve_host() -> str:
    """Bind address for the server (HOST, default 0.0.0.0)."""
    return os.environ.get(ENV_HOST, "") or DEFAULT_HOST


def resolve_port() -> int:
    """Port for the server (PORT, default 4000).

    Raises:
        ValueError: if PORT is set but not an integer
    """
    port_str = os.environ.get(ENV_PORT, "")
    return int(port_str) if port_str else DEFAULT_PORT


def resolve_log_level() -> str:
    """Root log level name (LOG_LEVEL, default INFO)."""
    return (os.environ.get(ENV_LOG_LEVEL, "") or DEFAULT_LOG_LEVEL).upper()


def resolve_cors_origins() -> list[str]:
    """Allowed CORS origins from a comma-separated CORS_ORIGINS (default: any)."""
    raw = os.environ.get(ENV_CORS_ORIGINS, "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def clamp_risk_tolerance(value: float) -> float:
    """Clamp a risk tolerance into [0, 1]."""
    return min(MAX_RISK_TOLERANCE, max(MIN_RISK_TOLERANCE, value))


def resolve_default_risk_tolerance() -> float:
    """Risk tolerance used when a request omits it (default 0.5, clamped).

    Raises:
        ValueError: if the env value is not a number
    """
    raw = os.environ.get(ENV_DEFAULT_RISK_TOLERANCE, "")
    value = float(raw) if raw else DEFAULT_RISK_TOLERANCE
    return clamp_risk_tolerance(value)


def resolve_label_missing_symbols() -> bool:
    """Whether assets without a symbol get an "Asset N" label (default true).

    Raises:
        ValueError: if the env value is not a recognizable boolean
    """
    raw = os.environ.get(ENV_LABEL_MISSING_SYMBOLS, "").strip().lower()
    if not raw:
        return True
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    raise ValueError(f"{ENV_LABEL_MISSING_SYMBOLS} must be a boolean, got {raw!r}")

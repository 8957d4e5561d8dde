"""
Single place to:
- Load env vars from .env if present
- Read the remote API base URL, request timeout and log level
- Hand the CLI a Settings object it can override with flags

Why: the remote client and the CLI both need these values and should agree.
"""

import logging
import math
import os
from dataclasses import dataclass, replace
from typing import Optional

from dotenv import load_dotenv

DEFAULT_API_BASE = "https://mastermind.darkube.app"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    api_base: str = DEFAULT_API_BASE
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = DEFAULT_LOG_LEVEL

    def with_overrides(self, api_base: Optional[str] = None, timeout_seconds: Optional[float] = None) -> "Settings":
        changes = {}
        if api_base:
            changes["api_base"] = api_base.rstrip("/")
        if timeout_seconds is not None:
            changes["timeout_seconds"] = _positive(timeout_seconds, "--timeout")
        return replace(self, **changes)


def _positive(value: float, name: str) -> float:
    if not math.isfinite(value) or value <= 0:
        raise RuntimeError(f"{name} must be a positive number of seconds, got {value}.")
    return value


def load_settings() -> Settings:
    # dev convenience; a real shell can just export the variables
    load_dotenv()

    api_base = os.getenv("MASTERMIND_API_BASE", DEFAULT_API_BASE).rstrip("/")

    raw_timeout = os.getenv("MASTERMIND_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))
    try:
        timeout_seconds = float(raw_timeout)
    except ValueError:
        raise RuntimeError(f"MASTERMIND_TIMEOUT must be a number of seconds, got {raw_timeout!r}.")
    timeout_seconds = _positive(timeout_seconds, "MASTERMIND_TIMEOUT")

    log_level = os.getenv("MASTERMIND_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    # getLevelName maps known names to their number and anything else to a string
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"MASTERMIND_LOG_LEVEL must be a logging level such as DEBUG or WARNING, got {log_level!r}.")

    return Settings(api_base=api_base, timeout_seconds=timeout_seconds, log_level=log_level)

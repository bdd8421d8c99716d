from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

DEFAULT_BASE_URL = "https://api.paystack.co"
SUPPORTED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _env(name: str) -> str | None:
    raw_value = os.getenv(name)
    if raw_value is None:
        return None
    normalized = raw_value.strip()
    return normalized or None


def collect_missing_required_env_vars() -> list[str]:
    missing: list[str] = []
    for var_name in ("PAYSTACK_SECRET_KEY",):
        if _env(var_name) is None:
            missing.append(var_name)
    return sorted(set(missing))


def collect_invalid_env_values() -> list[str]:
    invalid_values: list[str] = []

    base_url = _env("PAYSTACK_BASE_URL")
    if base_url is not None and not base_url.lower().startswith("https://"):
        invalid_values.append("PAYSTACK_BASE_URL must be an https:// URL")

    log_level = _env("LOG_LEVEL")
    if log_level is not None and log_level.upper() not in SUPPORTED_LOG_LEVELS:
        invalid_values.append(
            "LOG_LEVEL must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
        )

    return invalid_values


def validate_required_environment() -> None:
    missing_vars = collect_missing_required_env_vars()
    invalid_values = collect_invalid_env_values()
    if not missing_vars and not invalid_values:
        return

    message_lines = ["Paystack client blocked by invalid environment configuration."]
    if missing_vars:
        message_lines.append("")
        message_lines.append("Missing required environment variables:")
        message_lines.extend(f"- {name}" for name in missing_vars)
    if invalid_values:
        message_lines.append("")
        message_lines.append("Invalid environment values:")
        message_lines.extend(f"- {message}" for message in invalid_values)
    raise RuntimeError("\n".join(message_lines))


@dataclass(frozen=True)
class Settings:
    paystack_secret_key: str
    paystack_base_url: str
    log_level: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    validate_required_environment()

    return Settings(
        paystack_secret_key=os.getenv("PAYSTACK_SECRET_KEY", "").strip(),
        paystack_base_url=(_env("PAYSTACK_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
        log_level=(_env("LOG_LEVEL") or "INFO").upper(),
    )

"""
config.py – Load and validate runtime settings from the environment.

Settings are read from environment variables (or a .env file at the project
root).  None of them is required; every variable has a default.  Call
`get_config()` once at startup to obtain a validated Config object.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from carbonix.constants import DEFAULT_CREDIT_UNIT_PRICE, DEFAULT_CURRENCY

# Package root: carbonix/
_PACKAGE_ROOT = Path(__file__).resolve().parent
# Project root, where .env is expected
_PROJECT_ROOT = _PACKAGE_ROOT.parent

_env_project = _PROJECT_ROOT / ".env"
if _env_project.exists():
    load_dotenv(_env_project)

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class Config:
    """Validated runtime configuration."""

    credit_unit_price: float = DEFAULT_CREDIT_UNIT_PRICE
    currency: str = DEFAULT_CURRENCY
    log_level: str = "INFO"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    def configure_logging(self) -> None:
        logging.basicConfig(
            level=getattr(logging, self.log_level),
            format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
            datefmt="%H:%M:%S",
        )


def get_config(log_level: str | None = None) -> Config:
    """
    Read environment variables, validate them, and return a Config.

    Parameters
    ----------
    log_level:
        Override the log level (e.g. from a CLI flag).

    Raises
    ------
    EnvironmentError
        If a variable is set to a value that cannot be used.
    """
    errors: list[str] = []

    raw_price = os.environ.get("CARBONIX_CREDIT_UNIT_PRICE")
    price: float = DEFAULT_CREDIT_UNIT_PRICE
    if raw_price:
        try:
            price = float(raw_price)
        except ValueError:
            errors.append(f"CARBONIX_CREDIT_UNIT_PRICE={raw_price!r} is not a number")
        else:
            if price < 0:
                errors.append(f"CARBONIX_CREDIT_UNIT_PRICE={raw_price!r} must not be negative")
            elif price.is_integer():
                price = int(price)

    level = (log_level or os.environ.get("CARBONIX_LOG_LEVEL") or "INFO").upper()
    if level not in _LOG_LEVELS:
        errors.append(f"CARBONIX_LOG_LEVEL={level!r} is not one of {', '.join(sorted(_LOG_LEVELS))}")

    if errors:
        raise EnvironmentError(
            "Invalid environment variable(s):\n  " + "\n  ".join(errors)
        )

    origins = [
        o.strip()
        for o in os.environ.get("CARBONIX_CORS_ORIGINS", "*").split(",")
        if o.strip()
    ]

    return Config(
        credit_unit_price=price,
        currency=(os.environ.get("CARBONIX_CURRENCY") or DEFAULT_CURRENCY).upper(),
        log_level=level,
        cors_origins=origins or ["*"],
    )

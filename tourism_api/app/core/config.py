"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts with no configuration at all.  In a deployment you should
override these via environment variables (for example through the
process manager that launches ``run.py``).
"""

import os
from dataclasses import dataclass, field
from typing import List


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


def _split_csv(value: str) -> List[str]:
    """Parse a comma‑separated string into a list of non‑empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Tourism API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_bool("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only console logging is
    # configured.
    log_file: str = os.getenv("LOG_FILE", "")

    # All routes are mounted under this prefix.  The web client expects
    # ``/api``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")

    # Seed destinations, experiences, hidden gems and events with the
    # demonstration records on startup.
    seed_demo_data: bool = _env_bool("SEED_DEMO_DATA", "true")

    # Comma‑separated list of origins allowed by the CORS middleware.
    allowed_origins: List[str] = field(
        default_factory=lambda: _split_csv(
            os.getenv("ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:5000")
        )
    )

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()

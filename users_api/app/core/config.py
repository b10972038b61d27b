"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and
reproduce the fixed behaviour of the service: port 3000, seed data
only, ids assigned from the current list length.  Override them via
environment variables when running several instances side by side.
"""

import os
from dataclasses import dataclass


ID_STRATEGIES = ("length", "counter")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Users API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Listener address.  The service is reachable at
    # http://localhost:3000 unless PORT is overridden.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # How the store assigns ids to new users.  ``length`` uses the
    # current number of records plus one, which may hand out an id that
    # is already taken once a user has been deleted.  ``counter`` keeps
    # a monotonically increasing counter instead.
    id_strategy: str = os.getenv("ID_STRATEGY", "length").lower()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()

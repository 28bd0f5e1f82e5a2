"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Default cache settings
DEFAULT_TTL_SECONDS = 300.0

# Default source settings
DEFAULT_RESOURCES_DIR: str | None = None  # None = builtin resources
DEFAULT_ENCODING = "utf-8"

# Default catalog settings
DEFAULT_CATALOG: str | None = None  # None = builtin catalog only

# Default server settings
DEFAULT_SERVER_NAME = "refdocs"

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "ttl_seconds": DEFAULT_TTL_SECONDS,
        "resources_dir": DEFAULT_RESOURCES_DIR,
        "encoding": DEFAULT_ENCODING,
        "catalog": DEFAULT_CATALOG,
        "server_name": DEFAULT_SERVER_NAME,
        "log_level": DEFAULT_LOG_LEVEL,
    }

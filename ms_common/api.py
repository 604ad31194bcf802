"""Public API surface for ms_common."""

from ms_common.errors import (
    ConfigurationError,
    MSError,
    TerminalReadError,
    UsageError,
    error_to_payload,
)
from ms_common.logging import configure_logging

__all__ = [
    "configure_logging",
    "ConfigurationError",
    "MSError",
    "TerminalReadError",
    "UsageError",
    "error_to_payload",
]

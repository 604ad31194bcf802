"""Configuration helpers shared across packages."""

from ms_common.config.env import parse_bool_env

__all__ = ["parse_bool_env"]

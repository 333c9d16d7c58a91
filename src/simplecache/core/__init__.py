"""simplecache core — configuration."""

from simplecache.core.config import Config, config_properties

__all__ = ["Config", "config_properties"]

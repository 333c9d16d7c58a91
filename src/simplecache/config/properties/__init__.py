"""Typed configuration property classes."""

from simplecache.config.properties.cache import CacheProperties
from simplecache.config.properties.logging import LoggingProperties

__all__ = ["CacheProperties", "LoggingProperties"]

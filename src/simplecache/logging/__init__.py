"""simplecache logging — hexagonal logging port and adapters."""

from simplecache.logging.port import LoggingPort
from simplecache.logging.structlog_adapter import StructlogAdapter, configure_logging

__all__ = ["LoggingPort", "StructlogAdapter", "configure_logging"]

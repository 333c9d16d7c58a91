"""Tests for StructlogAdapter — default LoggingPort implementation."""

import logging

from simplecache.core.config import Config
from simplecache.logging import configure_logging
from simplecache.logging.port import LoggingPort
from simplecache.logging.structlog_adapter import StructlogAdapter


class TestStructlogAdapterConformance:
    def test_implements_logging_port(self):
        assert isinstance(StructlogAdapter(), LoggingPort)


class TestStructlogAdapterConfigure:
    def test_configure_with_defaults(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({}))
        assert adapter._root_level == "INFO"
        assert adapter._format == "console"

    def test_configure_reads_root_level(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"simplecache": {"logging": {"level": {"root": "debug"}}}}))
        assert adapter._root_level == "DEBUG"

    def test_configure_reads_format(self):
        adapter = StructlogAdapter()
        adapter.configure(Config({"simplecache": {"logging": {"format": "JSON"}}}))
        assert adapter._format == "json"

    def test_configure_applies_per_module_levels(self):
        adapter = StructlogAdapter()
        config = Config({"simplecache": {"logging": {"level": {"root": "INFO", "simplecache.cache": "DEBUG"}}}})
        adapter.configure(config)
        assert adapter._module_levels == {"simplecache.cache": "DEBUG"}
        assert logging.getLogger("simplecache.cache").level == logging.DEBUG


class TestStructlogAdapterLogging:
    def test_get_logger_returns_bound_logger(self):
        adapter = configure_logging()
        logger = adapter.get_logger("simplecache.test")
        assert callable(getattr(logger, "info", None))
        assert callable(getattr(logger, "debug", None))

    def test_stdlib_records_are_rendered_as_json(self, capsys):
        configure_logging(Config({"simplecache": {"logging": {"format": "json"}}}))
        logging.getLogger("simplecache.cache.adapter").warning("clear() not supported")
        out = capsys.readouterr().out
        assert '"event": "clear() not supported"' in out
        assert '"logger": "simplecache.cache.adapter"' in out

    def test_set_level(self):
        adapter = configure_logging()
        adapter.set_level("simplecache.cache.ttl", "WARNING")
        assert logging.getLogger("simplecache.cache.ttl").level == logging.WARNING

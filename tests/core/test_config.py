"""Tests for configuration loading, env overrides and property binding."""

from dataclasses import dataclass
from pathlib import Path

import pytest

from simplecache.config.properties import CacheProperties, LoggingProperties
from simplecache.core.config import Config, config_properties


class TestConfig:
    def test_load_from_dict(self):
        config = Config({"app": {"name": "test-service", "port": 8080}})
        assert config.get("app.name") == "test-service"
        assert config.get("app.port") == 8080

    def test_get_with_default(self):
        config = Config({})
        assert config.get("missing.key", "default") == "default"

    def test_get_through_scalar_returns_default(self):
        config = Config({"app": "flat"})
        assert config.get("app.name", "d") == "d"

    def test_get_section(self):
        config = Config({"simplecache": {"cache": {"ttl": 60}}})
        assert config.get_section("simplecache.cache") == {"ttl": 60}
        assert config.get_section("simplecache.missing") == {}

    def test_load_from_yaml_file(self, tmp_path: Path):
        config_file = tmp_path / "simplecache.yaml"
        config_file.write_text("simplecache:\n  cache:\n    ttl: 90\n")
        config = Config.from_file(config_file)
        assert config.get("simplecache.cache.ttl") == 90
        assert config.loaded_sources == [str(config_file)]

    def test_load_from_toml_file(self, tmp_path: Path):
        config_file = tmp_path / "simplecache.toml"
        config_file.write_text('[simplecache.cache]\nkey_pattern = "^[a-z]+$"\n')
        config = Config.from_file(config_file)
        assert config.get("simplecache.cache.key_pattern") == "^[a-z]+$"

    def test_missing_file_gives_empty_config(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.to_dict() == {}
        assert config.loaded_sources == []

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("SIMPLECACHE_APP_NAME", "env-service")
        config = Config({"app": {"name": "file-service"}})
        assert config.get("app.name") == "env-service"

    def test_env_var_override_strips_prefix(self, monkeypatch):
        monkeypatch.setenv("SIMPLECACHE_CACHE_KEY_PATTERN", "^x$")
        assert Config({}).get("simplecache.cache.key-pattern") == "^x$"


class TestProfileConfigMerging:
    def test_merge_profile_config(self, tmp_path):
        base = tmp_path / "simplecache.yaml"
        base.write_text("server:\n  port: 8080\n  host: localhost\n")

        profile = tmp_path / "simplecache-dev.yaml"
        profile.write_text("server:\n  port: 9090\n  debug: true\n")

        config = Config.from_file(base, active_profiles=["dev"])
        assert config.get("server.port") == 9090
        assert config.get("server.host") == "localhost"
        assert config.get("server.debug") is True

    def test_later_profile_wins(self, tmp_path):
        base = tmp_path / "simplecache.yaml"
        base.write_text("db:\n  url: base\n")
        (tmp_path / "simplecache-dev.yaml").write_text("db:\n  url: dev-url\n")
        (tmp_path / "simplecache-local.yaml").write_text("db:\n  url: local-url\n")

        config = Config.from_file(base, active_profiles=["dev", "local"])
        assert config.get("db.url") == "local-url"

    def test_missing_profile_file_is_skipped(self, tmp_path):
        base = tmp_path / "simplecache.yaml"
        base.write_text("app:\n  name: test\n")

        config = Config.from_file(base, active_profiles=["nonexistent"])
        assert config.get("app.name") == "test"


class TestConfigProperties:
    def test_bind_to_dataclass(self):
        @config_properties(prefix="database")
        @dataclass
        class DatabaseConfig:
            url: str = "sqlite:///test.db"
            pool_size: int = 5

        config = Config({"database": {"url": "postgresql://localhost/mydb", "pool_size": 20}})
        db_config = config.bind(DatabaseConfig)
        assert db_config.url == "postgresql://localhost/mydb"
        assert db_config.pool_size == 20

    def test_bind_requires_decorator(self):
        @dataclass
        class Plain:
            x: int = 1

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)

    def test_cache_properties_defaults(self):
        props = Config({}).bind(CacheProperties)
        assert props.provider == "auto"
        assert props.ttl is None
        assert props.key_pattern == ""
        assert props.redis == {"url": "redis://localhost:6379/0"}

    def test_cache_properties_from_env(self, monkeypatch):
        monkeypatch.setenv("SIMPLECACHE_CACHE_TTL", "45.5")
        props = Config({}).bind(CacheProperties)
        assert props.ttl == 45.5

    def test_logging_properties(self):
        config = Config({"simplecache": {"logging": {"format": "json", "level": {"root": "DEBUG"}}}})
        props = config.bind(LoggingProperties)
        assert props.format == "json"
        assert props.level == {"root": "DEBUG"}

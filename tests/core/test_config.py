"""Tests for configuration loading and binding."""

from dataclasses import dataclass
from pathlib import Path

import pytest
from pydantic import BaseModel, Field

from amqpbridge.core.config import Config, config_properties


class TestConfig:
    def test_load_from_dict(self):
        config = Config({"amqpbridge": {"options": {"containerId": "c1", "heartbeat": 30}}})
        assert config.get("amqpbridge.options.containerId") == "c1"
        assert config.get("amqpbridge.options.heartbeat") == 30

    def test_get_with_default(self):
        config = Config({})
        assert config.get("missing.key", "default") == "default"

    def test_load_from_yaml_file(self, tmp_path: Path):
        config_file = tmp_path / "bridge.yaml"
        config_file.write_text("amqpbridge:\n  options:\n    containerId: from-yaml\n")
        config = Config.from_file(config_file)
        assert config.get("amqpbridge.options.containerId") == "from-yaml"
        assert config.loaded_sources == [str(config_file)]

    def test_load_from_toml_file(self, tmp_path: Path):
        config_file = tmp_path / "bridge.toml"
        config_file.write_text('[amqpbridge.options]\ncontainerId = "from-toml"\nssl = true\n')
        config = Config.from_file(config_file)
        assert config.get("amqpbridge.options.containerId") == "from-toml"
        assert config.get("amqpbridge.options.ssl") is True

    def test_missing_file_is_empty(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "absent.yaml")
        assert config.to_dict() == {}
        assert config.loaded_sources == []

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("AMQPBRIDGE_OPTIONS_CONTAINER_ID", "env-container")
        config = Config({"amqpbridge": {"options": {"container-id": "file-container"}}})
        assert config.get("amqpbridge.options.container-id") == "env-container"

    def test_env_var_without_prefix(self, monkeypatch):
        monkeypatch.setenv("AMQPBRIDGE_BROKER_HOST", "broker.internal")
        config = Config({})
        assert config.get("broker.host") == "broker.internal"


class TestProfileConfigMerging:
    def test_merge_profile_config(self, tmp_path: Path):
        base = tmp_path / "bridge.yaml"
        base.write_text("amqpbridge:\n  options:\n    heartbeat: 10\n    containerId: base\n")
        profile = tmp_path / "bridge-dev.yaml"
        profile.write_text("amqpbridge:\n  options:\n    heartbeat: 99\n    ssl: true\n")

        config = Config.from_file(base, active_profiles=["dev"])
        assert config.get("amqpbridge.options.heartbeat") == 99
        assert config.get("amqpbridge.options.containerId") == "base"
        assert config.get("amqpbridge.options.ssl") is True
        assert len(config.loaded_sources) == 2

    def test_missing_profile_is_skipped(self, tmp_path: Path):
        base = tmp_path / "bridge.yaml"
        base.write_text("amqpbridge:\n  options:\n    heartbeat: 10\n")
        config = Config.from_file(base, active_profiles=["prod"])
        assert config.get("amqpbridge.options.heartbeat") == 10


class TestGetSection:
    def test_returns_nested_dict(self):
        config = Config({"amqpbridge": {"options": {"ssl": True}}})
        assert config.get_section("amqpbridge.options") == {"ssl": True}

    def test_missing_prefix_is_empty(self):
        assert Config({}).get_section("amqpbridge.options") == {}

    def test_resolves_placeholders(self, monkeypatch):
        monkeypatch.setenv("BRIDGE_CONTAINER", "from-env")
        config = Config({"amqpbridge": {"options": {"containerId": "${BRIDGE_CONTAINER}"}}})
        assert config.get_section("amqpbridge.options") == {"containerId": "from-env"}

    def test_resolves_placeholders_in_nested_values(self, monkeypatch):
        monkeypatch.setenv("TRUSTSTORE_PASSWORD", "s3cret")
        config = Config(
            {
                "amqpbridge": {
                    "options": {
                        "trustStoreOptions": {"path": "t.jks", "password": "${TRUSTSTORE_PASSWORD}"},
                        "crlPaths": ["${CRL_DIR:/etc/crl}/a.crl"],
                    }
                }
            }
        )
        assert config.get_section("amqpbridge.options") == {
            "trustStoreOptions": {"path": "t.jks", "password": "s3cret"},
            "crlPaths": ["/etc/crl/a.crl"],
        }


class TestConfigProperties:
    def test_bind_to_dataclass(self):
        @config_properties(prefix="broker")
        @dataclass
        class BrokerConfig:
            host: str = "localhost"
            port: int = 5672

        config = Config({"broker": {"host": "amqp.example.com", "port": "5671"}})
        broker = config.bind(BrokerConfig)
        assert broker.host == "amqp.example.com"
        assert broker.port == 5671

    def test_bind_uses_defaults(self):
        @config_properties(prefix="broker")
        @dataclass
        class BrokerConfig:
            host: str = "localhost"
            port: int = 5672

        broker = Config({}).bind(BrokerConfig)
        assert broker.host == "localhost"
        assert broker.port == 5672

    def test_bind_to_pydantic_model(self):
        @config_properties(prefix="broker")
        class BrokerProperties(BaseModel):
            port: int = Field(default=5672, ge=1, le=65535)

        assert Config({"broker": {"port": "5671"}}).bind(BrokerProperties).port == 5671

    def test_pydantic_validation_failure(self):
        @config_properties(prefix="broker")
        class BrokerProperties(BaseModel):
            port: int = Field(default=5672, ge=1, le=65535)

        with pytest.raises(ValueError, match="Configuration validation failed"):
            Config({"broker": {"port": 70000}}).bind(BrokerProperties)

    def test_bind_undecorated_raises(self):
        @dataclass
        class Plain:
            value: str = "x"

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)

    def test_bind_uses_from_json(self):
        @config_properties(prefix="custom")
        class JsonBacked:
            def __init__(self, document):
                self.document = document

            @classmethod
            def from_json(cls, document):
                return cls(document)

        bound = Config({"custom": {"someKey": 1}}).bind(JsonBacked)
        assert bound.document == {"someKey": 1}

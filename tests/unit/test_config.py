"""
Unit tests for Signataire configuration.

Tests config loading, validation, and environment variable overrides.

Usage:
    pytest tests/unit/test_config.py
"""

import pytest
from pydantic import ValidationError

from signataire.config.settings import (
    EXAMPLE_HASH,
    SignataireConfig,
    WalletConfig,
    get_settings,
    load_config,
)
from signataire.domain.value_objects import ChainType


class TestSignataireConfig:
    """Unit tests for configuration schema."""

    def test_default_config(self, monkeypatch):
        """Test default configuration values."""
        monkeypatch.delenv("SIGNATAIRE_PROVIDER__APP_ID", raising=False)
        config = SignataireConfig()

        assert config.provider.api_url == "https://api.privy.io"
        assert config.provider.request_timeout is None
        assert config.wallet.chains == ["stellar"]
        assert config.wallet.create_on_login == "all-users"
        assert config.wallet.example_hash == EXAMPLE_HASH
        assert config.chain_type is ChainType.STELLAR
        assert config.log_level == "info"
        assert config.log_dir is None

    def test_single_chain_allow_list(self):
        """Test other chains are rejected."""
        with pytest.raises(ValidationError):
            WalletConfig(chains=["stellar", "ethereum"])

        with pytest.raises(ValidationError):
            WalletConfig(chains=["solana"])

    def test_create_on_login_validation(self):
        assert WalletConfig(create_on_login="OFF").create_on_login == "off"

        with pytest.raises(ValidationError):
            WalletConfig(create_on_login="sometimes")

    def test_example_hash_validation(self):
        with pytest.raises(ValidationError):
            WalletConfig(example_hash="6503b0")

        with pytest.raises(ValidationError):
            WalletConfig(example_hash="0xabc")

    def test_log_level_validation(self):
        assert SignataireConfig(log_level="DEBUG").log_level == "debug"

        with pytest.raises(ValidationError):
            SignataireConfig(log_level="verbose")

    def test_timeout_bounds(self):
        with pytest.raises(ValidationError):
            SignataireConfig(provider={"request_timeout": 0.1})


class TestLoadConfig:
    """YAML + ENV loading."""

    def test_load_test_yaml(self):
        """Test environment YAML is merged over default.yaml."""
        config = load_config("test.yaml")

        assert config.provider.app_id == "test-app"
        assert config.provider.api_url == "https://api.privy.io"
        assert config.wallet.create_on_login == "off"
        assert config.wallet.chains == ["stellar"]
        assert config.log_level == "warning"

    def test_env_overrides_yaml(self, monkeypatch):
        """Test environment variables win over YAML values."""
        monkeypatch.setenv("SIGNATAIRE_PROVIDER__APP_ID", "env-app")
        monkeypatch.setenv("SIGNATAIRE_LOG_LEVEL", "error")

        config = load_config("test.yaml")

        assert config.provider.app_id == "env-app"
        assert config.provider.app_secret == "test-secret"
        assert config.log_level == "error"

    def test_env_selects_yaml(self, monkeypatch):
        monkeypatch.setenv("ENV", "production")
        monkeypatch.delenv("SIGNATAIRE_CONFIG", raising=False)

        config = load_config()

        assert config.json_logs is True
        assert config.provider.request_timeout == 60.0
        assert config.log_dir == "logs"

    def test_log_dir_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SIGNATAIRE_LOG_DIR", str(tmp_path))

        config = load_config("test.yaml")

        assert config.log_dir == str(tmp_path)

    def test_custom_config_dir(self, monkeypatch, tmp_path):
        (tmp_path / "default.yaml").write_text("wallet:\n  create_on_login: 'off'\n")
        (tmp_path / "custom.yaml").write_text("log_level: critical\n")
        monkeypatch.setenv("SIGNATAIRE_CONFIG_DIR", str(tmp_path))

        config = load_config("custom.yaml")

        assert config.wallet.create_on_login == "off"
        assert config.log_level == "critical"

    def test_get_settings_singleton(self, monkeypatch):
        monkeypatch.setenv("ENV", "test")

        assert get_settings() is get_settings()

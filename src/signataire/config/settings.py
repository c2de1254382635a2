"""
Signataire configuration with hybrid YAML + ENV support.

Priority: Environment variables > environment-specific YAML >
default YAML > Pydantic defaults
"""

import os
import re
from pathlib import Path
from typing import List, Optional, Tuple, Type

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from signataire.domain.value_objects.chain_type import ChainType

EXAMPLE_HASH = "0x6503b027a625549f7be691646404f275f149d17a119a6804b855bac3030037aa"

_HEX_RE = re.compile(r"^0x(?:[0-9a-fA-F]{2})+$")


class ProviderConfig(BaseModel):
    """Wallet provider (Privy) connection settings."""

    api_url: str = Field(default="https://api.privy.io")
    app_id: Optional[str] = Field(default=None, description="Privy app id")
    app_secret: Optional[str] = Field(
        default=None, description="Privy app secret (ENV only)"
    )
    user_id: Optional[str] = Field(default=None, description="Wallet owner DID")
    request_timeout: Optional[float] = Field(
        default=None,
        ge=1.0,
        le=600.0,
        description="Total provider request timeout; None waits indefinitely",
    )
    connect_timeout: float = Field(default=10.0, ge=1.0, le=120.0)


class WalletConfig(BaseModel):
    """Embedded wallet behavior."""

    chains: List[str] = Field(default_factory=lambda: [ChainType.STELLAR.value])
    create_on_login: str = Field(default="all-users")
    example_hash: str = Field(default=EXAMPLE_HASH)

    @field_validator("chains")
    @classmethod
    def validate_chains(cls, v: List[str]) -> List[str]:
        """Only the Stellar chain may be enabled."""
        chains = [c.lower() for c in v]
        if chains != [ChainType.STELLAR.value]:
            raise ValueError(
                f"Invalid chains {v!r}. Exactly ['{ChainType.STELLAR.value}'] "
                "is supported"
            )
        return chains

    @field_validator("create_on_login")
    @classmethod
    def validate_create_on_login(cls, v: str) -> str:
        allowed = ["off", "users-without-wallets", "all-users"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid create_on_login. Must be one of: {allowed}")
        return v_lower

    @field_validator("example_hash")
    @classmethod
    def validate_example_hash(cls, v: str) -> str:
        if not _HEX_RE.match(v):
            raise ValueError("example_hash must be a 0x-prefixed hex string")
        return v

    @property
    def chain_type(self) -> ChainType:
        return ChainType.from_tag(self.chains[0])


class SignataireConfig(BaseSettings):
    """
    Signataire configuration schema.

    Secrets (app_secret) should come from environment variables, e.g.
    SIGNATAIRE_PROVIDER__APP_SECRET, not from YAML files.
    """

    model_config = SettingsConfigDict(
        env_prefix="SIGNATAIRE_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="Signataire")

    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    wallet: WalletConfig = Field(default_factory=WalletConfig)

    # Logging
    log_level: str = Field(default="info")
    log_dir: Optional[str] = Field(default=None)
    json_logs: bool = Field(default=False)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        # YAML values arrive as init kwargs; environment wins over them
        return env_settings, dotenv_settings, init_settings, file_secret_settings

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = ["debug", "info", "warning", "error", "critical"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"Invalid log_level. Must be one of: {allowed}")
        return v_lower

    @property
    def chain_type(self) -> ChainType:
        return self.wallet.chain_type


def _config_dir() -> Path:
    override = os.getenv("SIGNATAIRE_CONFIG_DIR")
    if override:
        return Path(override)
    # src/signataire/config/settings.py -> project root
    return Path(__file__).resolve().parents[3] / "config"


def _load_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path, "r") as f:
        loaded = yaml.safe_load(f)
    return loaded or {}


def _merge(base: dict, override: dict) -> dict:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_file: Optional[str] = None) -> SignataireConfig:
    """
    Load configuration from YAML files.

    Priority: Environment variables > environment-specific YAML > default YAML

    Args:
        config_file: Optional YAML filename (or path) override

    Returns:
        SignataireConfig instance
    """
    env = os.getenv("ENV", "development")

    config_map = {
        "production": "production.yaml",
        "development": "development.yaml",
        "test": "test.yaml",
    }

    config_dir = _config_dir()
    merged_config = _load_yaml(config_dir / "default.yaml")

    if config_file is None:
        config_file = os.getenv("SIGNATAIRE_CONFIG") or config_map.get(
            env, "development.yaml"
        )

    env_config_path = Path(config_file)
    if not env_config_path.is_absolute():
        env_config_path = config_dir / config_file

    merged_config = _merge(merged_config, _load_yaml(env_config_path))

    return SignataireConfig(**merged_config)


# Global settings instance
_settings: Optional[SignataireConfig] = None


def get_settings() -> SignataireConfig:
    """
    Get singleton settings instance.

    Returns:
        SignataireConfig instance
    """
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings (used by tests and the CLI --config flag)."""
    global _settings
    _settings = None

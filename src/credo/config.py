"""Configuration loading and merging for Credo."""

import logging
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from .registry import ProviderRegistry


@dataclass
class RegistryConfig:
    # Principal allowed to deactivate any provider
    admin: str = ""

    # Level applied to the "credo" logger by configure_logging()
    log_level: str | int = "WARNING"


def load_config(path: str | Path) -> RegistryConfig:
    """Load a RegistryConfig from a YAML file."""
    path = Path(path)
    with open(path) as f:
        data = yaml.safe_load(f) or {}

    valid_fields = {f.name for f in fields(RegistryConfig)}
    filtered = {k: v for k, v in data.items() if k in valid_fields}
    return RegistryConfig(**filtered)


def merge_overrides(config: RegistryConfig, **overrides) -> RegistryConfig:
    """Overlay explicit values onto an existing config. Non-None values take precedence."""
    for f in fields(RegistryConfig):
        value = overrides.get(f.name)
        if value is not None:
            setattr(config, f.name, value)
    return config


def config_to_yaml(config: RegistryConfig) -> str:
    """Serialize a RegistryConfig to YAML."""
    data: dict = {"admin": config.admin, "log_level": config.log_level}
    return yaml.dump(data, default_flow_style=False, sort_keys=False)


def configure_logging(config: RegistryConfig) -> None:
    """Apply the configured level to the package logger. Installs no handlers."""
    level = config.log_level
    if not isinstance(level, int):
        level = logging.getLevelName(str(level).upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log_level: {config.log_level!r}")
    logging.getLogger("credo").setLevel(level)


def create_registry(config: RegistryConfig) -> ProviderRegistry:
    """Build an empty ProviderRegistry administered by ``config.admin``."""
    if not config.admin:
        raise ValueError("admin is required to create a registry")
    configure_logging(config)
    return ProviderRegistry(admin=config.admin)

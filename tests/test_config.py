from __future__ import annotations

import logging

import pytest
import yaml

from credo.config import (
    RegistryConfig,
    config_to_yaml,
    configure_logging,
    create_registry,
    load_config,
    merge_overrides,
)


def test_load_config_reads_known_keys(tmp_path) -> None:
    path = tmp_path / "registry.yaml"
    path.write_text("admin: ST1ADMIN\nlog_level: info\nunused: 3\n")

    config = load_config(path)

    assert config == RegistryConfig(admin="ST1ADMIN", log_level="info")


def test_load_empty_config_uses_defaults(tmp_path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_config(str(path)) == RegistryConfig()


def test_merge_overrides_skips_none() -> None:
    config = RegistryConfig(admin="a", log_level="INFO")

    merged = merge_overrides(config, admin="b", log_level=None, other="ignored")

    assert merged.admin == "b"
    assert merged.log_level == "INFO"


def test_config_to_yaml_round_trips_through_loader(tmp_path) -> None:
    config = RegistryConfig(admin="ST1ADMIN", log_level="DEBUG")
    text = config_to_yaml(config)

    assert yaml.safe_load(text) == {"admin": "ST1ADMIN", "log_level": "DEBUG"}
    path = tmp_path / "out.yaml"
    path.write_text(text)
    assert load_config(path) == config


def test_create_registry_uses_admin() -> None:
    reg = create_registry(RegistryConfig(admin="ADMIN"))

    assert reg.admin == "ADMIN"
    assert reg.register("p1", "Dr. A", "Cardio", "L1", "P1")
    assert reg.deactivate("p1", "ADMIN")


def test_create_registry_requires_admin() -> None:
    with pytest.raises(ValueError):
        create_registry(RegistryConfig())


def test_configure_logging_sets_package_level() -> None:
    logger = logging.getLogger("credo")
    previous = logger.level
    try:
        configure_logging(RegistryConfig(admin="a", log_level="debug"))
        assert logger.level == logging.DEBUG
        with pytest.raises(ValueError):
            configure_logging(RegistryConfig(admin="a", log_level="loud"))
    finally:
        logger.setLevel(previous)


def test_numeric_log_level_from_yaml(tmp_path) -> None:
    path = tmp_path / "registry.yaml"
    path.write_text("admin: ST1ADMIN\nlog_level: 10\n")
    logger = logging.getLogger("credo")
    previous = logger.level
    try:
        config = load_config(path)
        assert config.log_level == 10
        configure_logging(config)
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(previous)

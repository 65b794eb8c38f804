"""Unit tests for the configuration-registry strategy."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock, patch

import pytest

from enumeratio.foundation.application.config_registry import (
    ConfigRegistry,
    get_config_registry,
)
from enumeratio.foundation.application.settings import EnumSettings
from enumeratio.foundation.application.strategies.config import ConfigStrategy
from enumeratio.foundation.domain.exceptions import ConfigurationError, UnknownLabelError
from enumeratio.foundation.domain.provider_config import ProviderConfig


def _strategy(alias: str = "status", **extra: Any) -> ConfigStrategy:
    strategy = ConfigStrategy(alias, None)
    strategy.initialize(ProviderConfig(alias=alias, strategy="config", extra=extra))
    return strategy


@pytest.mark.unit
class TestConfigStrategyInitialize:
    def test_defaults_to_process_registry_and_settings_namespace(self) -> None:
        config = _strategy().config
        assert config.option("registry") is get_config_registry()
        assert config.option("namespace") == "Enum"

    def test_namespace_from_environment_settings(self) -> None:
        with patch(
            "enumeratio.foundation.application.strategy.get_enum_settings",
            return_value=EnumSettings(config_namespace="Shop"),
        ):
            assert _strategy().key() == "Shop.STATUS"

    def test_rejects_registry_without_read(self) -> None:
        with pytest.raises(ConfigurationError, match="must provide read"):
            _strategy(registry=object())


@pytest.mark.unit
class TestConfigStrategyEnum:
    def test_missing_entry_is_empty_mapping(self, registry: ConfigRegistry) -> None:
        assert _strategy(registry=registry).enum() == {}

    def test_list_entry_maps_items_to_themselves(self, registry: ConfigRegistry) -> None:
        registry.write("Enum.STATUS", ["draft", "published"])
        assert _strategy(registry=registry).enum() == {"draft": "draft", "published": "published"}

    def test_mapping_entry_copied(self, registry: ConfigRegistry) -> None:
        entries = {"Draft": 0, "Published": 1}
        registry.write("Enum.STATUS", entries)
        result = _strategy(registry=registry).enum()
        assert result == entries
        assert result is not entries

    def test_prefix_selects_entry(self, registry: ConfigRegistry) -> None:
        registry.write("Enum.PRIO", {"Low": 1})
        strategy = ConfigStrategy("priority", None)
        strategy.initialize(
            ProviderConfig(alias="priority", prefix="PRIO", extra={"registry": registry})
        )
        assert strategy.key() == "Enum.PRIO"
        assert strategy.enum() == {"Low": 1}

    def test_custom_namespace(self, registry: ConfigRegistry) -> None:
        registry.write("Shop.STATUS", ["open"])
        assert _strategy(registry=registry, namespace="Shop").enum() == {"open": "open"}

    def test_reads_registry_on_every_call(self, registry: ConfigRegistry) -> None:
        strategy = _strategy(registry=registry)
        assert strategy.enum() == {}
        registry.write("Enum.STATUS", ["new"])
        assert strategy.enum() == {"new": "new"}

    def test_any_port_implementation(self) -> None:
        port = MagicMock()
        port.read.return_value = {"A": 1}
        assert _strategy(registry=port).enum() == {"A": 1}
        port.read.assert_called_with("Enum.STATUS")

    def test_unsupported_entry_type(self, registry: ConfigRegistry) -> None:
        registry.write("Enum.STATUS", 42)
        with pytest.raises(ConfigurationError, match="must be a mapping or a list"):
            _strategy(registry=registry).enum()


@pytest.mark.unit
class TestConfigStrategyGet:
    def test_get_label(self, registry: ConfigRegistry) -> None:
        registry.write("Enum.STATUS", {"Draft": 0})
        assert _strategy(registry=registry).get("Draft") == 0

    def test_get_from_absent_entry(self, registry: ConfigRegistry) -> None:
        with pytest.raises(UnknownLabelError):
            _strategy(registry=registry).get("Draft")

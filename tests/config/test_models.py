"""Tests for config section models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tzctl.config.models import BoardConfig, DisplayConfig, ZonesConfig
from tzctl.domain.catalog import DEFAULT_ZONES


class TestZonesConfig:
    def test_defaults(self) -> None:
        cfg = ZonesConfig()
        assert cfg.catalog == DEFAULT_ZONES
        assert cfg.source == "UTC"
        assert cfg.tracked == ("Europe/London",)

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            ZonesConfig().source = "Asia/Tokyo"  # type: ignore[misc]

    def test_catalog_deduplicated(self) -> None:
        cfg = ZonesConfig(catalog=("UTC", "Europe/London", "UTC"))
        assert cfg.catalog == ("UTC", "Europe/London")

    def test_empty_catalog(self) -> None:
        with pytest.raises(ValidationError, match="at least one zone"):
            ZonesConfig(catalog=(), tracked=())

    def test_malformed_catalog_entry(self) -> None:
        with pytest.raises(ValidationError, match="malformed zone ids"):
            ZonesConfig(catalog=("UTC", "europe london"), tracked=())

    def test_source_outside_catalog(self) -> None:
        with pytest.raises(ValidationError, match="not in catalog: Mars/Phobos"):
            ZonesConfig(source="Mars/Phobos")

    def test_tracked_outside_catalog(self) -> None:
        with pytest.raises(ValidationError, match="Asia/Kathmandu"):
            ZonesConfig(tracked=("Asia/Tokyo", "Asia/Kathmandu"))

    def test_custom_catalog(self) -> None:
        cfg = ZonesConfig(
            catalog=("UTC", "Asia/Kathmandu"), source="Asia/Kathmandu", tracked=("UTC",)
        )
        assert cfg.source == "Asia/Kathmandu"


class TestDisplayAndBoard:
    def test_display_defaults(self) -> None:
        cfg = DisplayConfig()
        assert cfg.show_date is True
        assert cfg.show_delta is True

    def test_board_defaults(self) -> None:
        cfg = BoardConfig()
        assert cfg.prompt == "tz"
        assert cfg.show_on_change is True

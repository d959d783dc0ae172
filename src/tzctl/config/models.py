"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tzctl.toml only contains overrides.
With no file at all, the source zone is UTC and Europe/London is tracked.
"""

from __future__ import annotations

from pydantic import BaseModel, field_validator, model_validator

from tzctl.domain.catalog import DEFAULT_ZONES, is_well_formed


class ZonesConfig(BaseModel):
    """[zones] section."""

    model_config = {"frozen": True}

    catalog: tuple[str, ...] = DEFAULT_ZONES
    source: str = "UTC"
    tracked: tuple[str, ...] = ("Europe/London",)

    @field_validator("catalog")
    @classmethod
    def _catalog_well_formed(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("catalog must list at least one zone")
        bad = [zone for zone in value if not is_well_formed(zone)]
        if bad:
            raise ValueError(f"malformed zone ids in catalog: {', '.join(bad)}")
        return tuple(dict.fromkeys(value))

    @model_validator(mode="after")
    def _defaults_in_catalog(self) -> ZonesConfig:
        missing = [z for z in (self.source, *self.tracked) if z not in self.catalog]
        if missing:
            raise ValueError(f"zones not in catalog: {', '.join(missing)}")
        return self


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    show_date: bool = True
    show_delta: bool = True


class BoardConfig(BaseModel):
    """[board] section."""

    model_config = {"frozen": True}

    prompt: str = "tz"
    show_on_change: bool = True

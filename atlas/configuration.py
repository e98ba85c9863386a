"""Mini README: Centralised configuration models and helpers for Atlas.

Structure:
    * AtlasSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read environment variables (prefixed with
    ``ATLAS_``), pick the initial map view, and specify service ports. The
    configuration is cached so validation happens only once per process.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from pydantic import Field, validator
from pydantic_settings import BaseSettings

_KNOWN_LAYERS = ("satellite", "streets", "hybrid")


class AtlasSettings(BaseSettings):
    """Runtime configuration for the Atlas planner."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: str = Field("INFO", description="Root logging level name.")
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the planner service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the planner service exposes.",
        ge=1,
        le=65535,
    )
    map_center_lat: float = Field(51.505, ge=-90.0, le=90.0)
    map_center_lon: float = Field(-0.09, ge=-180.0, le=180.0)
    map_zoom: int = Field(13, ge=0, le=22)
    default_map_layer: str = Field(
        "satellite",
        description="Basemap shown on first load: satellite, streets or hybrid.",
    )
    fit_bounds_padding: int = Field(
        50,
        description="Screen-space padding in pixels applied when fitting a route.",
        ge=0,
    )

    class Config:
        env_prefix = "ATLAS_"
        env_file = ".env"
        case_sensitive = False

    @validator("default_map_layer", pre=True)
    def _normalise_layer(cls, value: str) -> str:
        """Accept any casing but only the three supported basemaps."""

        normalised = str(value).strip().lower()
        if normalised not in _KNOWN_LAYERS:
            raise ValueError(f"default_map_layer must be one of {', '.join(_KNOWN_LAYERS)}")
        return normalised

    @property
    def map_center(self) -> Tuple[float, float]:
        return (self.map_center_lat, self.map_center_lon)

    @property
    def padding(self) -> Tuple[int, int]:
        return (self.fit_bounds_padding, self.fit_bounds_padding)


@lru_cache()
def get_settings() -> AtlasSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return AtlasSettings()

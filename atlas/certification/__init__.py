"""Mini README: Certification helpers (SAIL categories, density suppression)."""

from .density import (
    DENSITY_WITH_PARACHUTE,
    DENSITY_WITHOUT_PARACHUTE,
    SailCategory,
    available_sail_categories,
    density_suppression,
    is_selectable,
)

__all__ = [
    "DENSITY_WITH_PARACHUTE",
    "DENSITY_WITHOUT_PARACHUTE",
    "SailCategory",
    "available_sail_categories",
    "density_suppression",
    "is_selectable",
]

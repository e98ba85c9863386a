"""Mini README: Density suppression lookup keyed by SAIL and parachute fit.

Structure:
    * SailCategory - the four certification categories offered in the UI.
    * DENSITY_WITHOUT_PARACHUTE / DENSITY_WITH_PARACHUTE - static tables.
    * density_suppression - O(1) lookup, unknown categories map to zero.
    * available_sail_categories - options the selector may render.

Values are population densities in people per square kilometre.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Union


class SailCategory(str, Enum):
    """Specific Assurance and Integrity Level offered by the selector."""

    SAIL_2 = "SAIL 2"
    SAIL_3 = "SAIL 3"
    SAIL_4 = "SAIL 4"
    SAIL_6 = "SAIL 6"


DENSITY_WITHOUT_PARACHUTE: Dict[SailCategory, int] = {
    SailCategory.SAIL_2: 0,
    SailCategory.SAIL_3: 5,
    SailCategory.SAIL_4: 50,
    SailCategory.SAIL_6: 5000,
}

# SAIL 6 is not certifiable with a parachute fitted.
DENSITY_WITH_PARACHUTE: Dict[SailCategory, int] = {
    SailCategory.SAIL_2: 5,
    SailCategory.SAIL_3: 50,
    SailCategory.SAIL_4: 500,
}


def _coerce(sail: Union[SailCategory, str]) -> Union[SailCategory, None]:
    try:
        return SailCategory(sail)
    except ValueError:
        return None


def density_suppression(sail: Union[SailCategory, str], has_parachute: bool) -> int:
    """Return the suppression value for ``sail``; unknown categories give 0."""

    category = _coerce(sail)
    if category is None:
        return 0
    table = DENSITY_WITH_PARACHUTE if has_parachute else DENSITY_WITHOUT_PARACHUTE
    return table.get(category, 0)


def available_sail_categories(has_parachute: bool) -> List[SailCategory]:
    """Categories the selector renders for the given parachute setting."""

    table = DENSITY_WITH_PARACHUTE if has_parachute else DENSITY_WITHOUT_PARACHUTE
    return [category for category in SailCategory if category in table]


def is_selectable(sail: Union[SailCategory, str], has_parachute: bool) -> bool:
    category = _coerce(sail)
    return category is not None and category in available_sail_categories(has_parachute)

"""Mini README: Tests for the density suppression lookup tables."""

from __future__ import annotations

import pytest

from atlas.certification import SailCategory, available_sail_categories, density_suppression


@pytest.mark.parametrize(
    "sail, has_parachute, expected",
    [
        ("SAIL 2", False, 0),
        ("SAIL 3", False, 5),
        ("SAIL 4", False, 50),
        ("SAIL 6", False, 5000),
        ("SAIL 2", True, 5),
        ("SAIL 3", True, 50),
        ("SAIL 4", True, 500),
    ],
)
def test_density_tables(sail, has_parachute, expected) -> None:
    assert density_suppression(sail, has_parachute) == expected


def test_unknown_category_is_zero() -> None:
    assert density_suppression("SAIL 9", False) == 0
    assert density_suppression("SAIL 9", True) == 0
    assert density_suppression(SailCategory.SAIL_6, True) == 0


def test_sail_six_only_offered_without_parachute() -> None:
    assert SailCategory.SAIL_6 in available_sail_categories(False)
    assert available_sail_categories(True) == [
        SailCategory.SAIL_2,
        SailCategory.SAIL_3,
        SailCategory.SAIL_4,
    ]

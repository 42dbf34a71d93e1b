"""
Triathlon race distance standards.

Two independently authored tables, one in kilometers and one in miles.
The imperial figures are the real-world race distances (rounded), NOT
conversions of the metric table: 70.3 swim is 1.2 mi, not 1.9 * 0.621371.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Union

from app.shared.constants import Tier, UnitSystem, Discipline, TIER_ORDER
from app.shared.errors import UnknownStandardError


@dataclass(frozen=True)
class Standard:
    """A named race distance combination in one unit system."""
    tier: Tier
    name: str
    unit_system: UnitSystem
    swim: float
    bike: float
    run: float

    def distance(self, discipline: Discipline) -> float:
        """Distance for a discipline (swim/bike/run)."""
        return getattr(self, Discipline(discipline).value)

    def to_dict(self) -> dict:
        """Convert to dict for API response."""
        return {
            "tier": self.tier.value,
            "name": self.name,
            "unit_system": self.unit_system.value,
            "swim": self.swim,
            "bike": self.bike,
            "run": self.run,
        }


def _table(unit_system: UnitSystem, rows: dict) -> Mapping[Tier, Standard]:
    return MappingProxyType({
        tier: Standard(tier, name, unit_system, swim, bike, run)
        for tier, (name, swim, bike, run) in rows.items()
    })


# =============================================================================
# Standards tables
# =============================================================================
# Key: tier, Value: (display name, swim, bike, run)

STANDARDS_KM: Mapping[Tier, Standard] = _table(UnitSystem.METRIC, {
    Tier.OLYMPIC: ("Olympic", 1.5, 40.0, 10.0),
    Tier.HALF:    ("IRONMAN 70.3", 1.9, 90.0, 21.1),
    Tier.FULL:    ("Full IRONMAN", 3.8, 180.0, 42.2),
})

STANDARDS_MI: Mapping[Tier, Standard] = _table(UnitSystem.IMPERIAL, {
    Tier.OLYMPIC: ("Olympic", 0.93, 24.8, 6.2),
    Tier.HALF:    ("IRONMAN 70.3", 1.2, 56.0, 13.1),
    Tier.FULL:    ("Full IRONMAN", 2.4, 112.0, 26.2),
})

STANDARDS: Mapping[UnitSystem, Mapping[Tier, Standard]] = MappingProxyType({
    UnitSystem.METRIC: STANDARDS_KM,
    UnitSystem.IMPERIAL: STANDARDS_MI,
})


def coerce_tier(tier: Union[Tier, str]) -> Tier:
    """Accept a Tier or its string value ("olympic", "70.3", "full")."""
    try:
        return Tier(tier)
    except ValueError:
        valid = ", ".join(t.value for t in TIER_ORDER)
        raise UnknownStandardError(
            f"Unknown tier: {tier!r} (expected one of {valid})", "tier"
        ) from None


def coerce_unit_system(unit_system: Union[UnitSystem, str]) -> UnitSystem:
    """Accept a UnitSystem or its string value ("metric", "imperial")."""
    try:
        return UnitSystem(unit_system)
    except ValueError:
        valid = ", ".join(u.value for u in UnitSystem)
        raise UnknownStandardError(
            f"Unknown unit system: {unit_system!r} (expected one of {valid})",
            "unit_system",
        ) from None


def get_standard(
    tier: Union[Tier, str],
    unit_system: Union[UnitSystem, str] = UnitSystem.METRIC,
) -> Standard:
    """
    Look up a standard by tier and unit system.

    Raises:
        UnknownStandardError: If either key is not in the table.
    """
    return STANDARDS[coerce_unit_system(unit_system)][coerce_tier(tier)]


def list_standards(unit_system: Union[UnitSystem, str] = UnitSystem.METRIC) -> list[Standard]:
    """All standards for a unit system, shortest tier first."""
    table = STANDARDS[coerce_unit_system(unit_system)]
    return [table[tier] for tier in TIER_ORDER]

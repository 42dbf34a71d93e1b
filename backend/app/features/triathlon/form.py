"""
Race form state.

Holds the fields a user is editing and the last computed result.
Edits never recompute anything; the result is replaced only when
recompute() is called explicitly.

Example usage:
    form = RaceForm(tier="70.3", unit_system="metric")
    form.update(swim_time="33:00", bike_time="2:33:00", run_time="1:28:00")
    if form.is_ready():
        result = form.recompute()
        print(result.total)  # 4:38:00
"""

import logging
from typing import Any, Optional, Union

from app.config import settings
from app.shared.constants import Discipline, Tier, UnitSystem
from app.shared.errors import UnknownFieldError

from .models import NormalizedResult, RaceInput
from .normalizer import normalize
from .standards import Standard, coerce_tier, coerce_unit_system, get_standard


logger = logging.getLogger(__name__)


REQUIRED_TIME_FIELDS = ("swim_time", "bike_time", "run_time")


class RaceForm:
    """
    Mutable snapshot of race fields plus the last NormalizedResult.

    Changing the tier or unit system resets the three distances to the
    selected standard, so a fresh form always matches the target course.
    """

    def __init__(
        self,
        tier: Union[Tier, str, None] = None,
        unit_system: Union[UnitSystem, str, None] = None,
    ):
        self.tier = coerce_tier(tier or settings.default_tier)
        self.unit_system = coerce_unit_system(unit_system or settings.default_unit_system)
        self._fields: dict[str, Any] = {
            name: None for name in RaceInput.field_names()
        }
        for name in REQUIRED_TIME_FIELDS + ("t1_time", "t2_time"):
            self._fields[name] = ""
        self._result: Optional[NormalizedResult] = None
        self._reset_distances()

    @property
    def standard(self) -> Standard:
        return get_standard(self.tier, self.unit_system)

    @property
    def fields(self) -> dict[str, Any]:
        """Copy of the current field values."""
        return dict(self._fields)

    @property
    def result(self) -> Optional[NormalizedResult]:
        """Last computed result, or None before the first recompute()."""
        return self._result

    def _reset_distances(self) -> None:
        standard = self.standard
        for discipline in Discipline:
            self._fields[f"{discipline.value}_distance"] = standard.distance(discipline)

    def update(self, **values: Any) -> None:
        """
        Overwrite fields one by one.

        Raises:
            UnknownFieldError: If a name is not a race field.
        """
        for name in values:
            if name not in self._fields:
                raise UnknownFieldError(name)
        self._fields.update(values)

    def set_tier(self, tier: Union[Tier, str]) -> None:
        self.tier = coerce_tier(tier)
        self._reset_distances()

    def set_unit_system(self, unit_system: Union[UnitSystem, str]) -> None:
        self.unit_system = coerce_unit_system(unit_system)
        self._reset_distances()

    def toggle_units(self) -> None:
        """Switch metric <-> imperial."""
        if self.unit_system == UnitSystem.METRIC:
            self.set_unit_system(UnitSystem.IMPERIAL)
        else:
            self.set_unit_system(UnitSystem.METRIC)

    def placeholders(self) -> dict[str, str]:
        """Standard distances as display strings (e.g. {'swim': '1.9', ...})."""
        standard = self.standard
        return {d.value: f"{standard.distance(d):g}" for d in Discipline}

    def is_ready(self) -> bool:
        """True when swim, bike and run times are all filled in."""
        return all(
            isinstance(self._fields[name], str) and self._fields[name].strip()
            for name in REQUIRED_TIME_FIELDS
        )

    def snapshot(self) -> RaceInput:
        """Build a validated RaceInput from the current fields."""
        return RaceInput.from_dict(self._fields)

    def recompute(self) -> NormalizedResult:
        """
        Normalize the current fields and replace the stored result.

        On failure the previous result is kept and the error propagates.
        """
        result = normalize(self.snapshot(), self.tier, self.unit_system)
        self._result = result
        logger.debug(f"Form recomputed: {result.total} ({result.standard.name})")
        return result

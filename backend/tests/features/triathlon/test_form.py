"""
Tests for RaceForm state holder.
"""

import pytest

from app.shared.constants import Tier, UnitSystem
from app.shared.errors import (
    DurationParseError,
    InvalidDistanceError,
    UnknownFieldError,
    UnknownStandardError,
)
from app.features.triathlon import RaceForm, RaceInput


@pytest.fixture
def form():
    return RaceForm(tier="70.3", unit_system="metric")


@pytest.fixture
def filled_form(form):
    form.update(swim_time="33:00", bike_time="2:33:00", run_time="1:28:00")
    return form


class TestInitialState:
    """Fresh form."""

    def test_distances_prefilled_from_standard(self, form):
        fields = form.fields
        assert (fields["swim_distance"], fields["bike_distance"], fields["run_distance"]) == (1.9, 90, 21.1)

    def test_times_blank(self, form):
        assert form.fields["swim_time"] == ""
        assert form.fields["t1_time"] == ""

    def test_no_result_yet(self, form):
        assert form.result is None

    def test_defaults_from_settings(self):
        form = RaceForm()
        assert form.tier == Tier.HALF
        assert form.unit_system == UnitSystem.METRIC

    def test_unknown_tier_rejected(self):
        with pytest.raises(UnknownStandardError):
            RaceForm(tier="sprint")

    def test_fields_is_a_copy(self, form):
        form.fields["swim_time"] = "10:00"
        assert form.fields["swim_time"] == ""


class TestTierAndUnits:
    """Distance reset on tier/unit change."""

    def test_set_tier_resets_distances(self, form):
        form.update(bike_distance=87.3)
        form.set_tier("olympic")

        fields = form.fields
        assert form.tier == Tier.OLYMPIC
        assert (fields["swim_distance"], fields["bike_distance"], fields["run_distance"]) == (1.5, 40, 10)

    def test_toggle_units_uses_imperial_table(self, form):
        form.toggle_units()

        fields = form.fields
        assert form.unit_system == UnitSystem.IMPERIAL
        assert fields["swim_distance"] == 1.2
        assert fields["bike_distance"] == 56
        assert fields["run_distance"] == 13.1

    def test_toggle_twice_returns_to_metric(self, form):
        form.toggle_units()
        form.toggle_units()
        assert form.unit_system == UnitSystem.METRIC
        assert form.fields["swim_distance"] == 1.9

    def test_set_unit_system(self, form):
        form.set_unit_system("imperial")
        assert form.standard.name == "IRONMAN 70.3"
        assert form.standard.unit_system == UnitSystem.IMPERIAL

    def test_set_unknown_unit_system(self, form):
        with pytest.raises(UnknownStandardError):
            form.set_unit_system("parsecs")
        assert form.unit_system == UnitSystem.METRIC

    def test_times_kept_on_tier_change(self, filled_form):
        filled_form.set_tier("full")
        assert filled_form.fields["bike_time"] == "2:33:00"

    def test_placeholders(self, form):
        assert form.placeholders() == {"swim": "1.9", "bike": "90", "run": "21.1"}
        form.set_unit_system("imperial")
        assert form.placeholders() == {"swim": "1.2", "bike": "56", "run": "13.1"}


class TestEditing:
    """Field updates and readiness."""

    def test_update_unknown_field(self, form):
        with pytest.raises(UnknownFieldError) as exc_info:
            form.update(swim_pace="1:40")
        assert exc_info.value.field == "swim_pace"

    def test_not_ready_until_all_times(self, form):
        assert not form.is_ready()
        form.update(swim_time="33:00", bike_time="2:33:00")
        assert not form.is_ready()
        form.update(run_time="1:28:00")
        assert form.is_ready()

    def test_whitespace_time_not_ready(self, filled_form):
        filled_form.update(run_time="   ")
        assert not filled_form.is_ready()

    def test_transitions_not_required(self, filled_form):
        assert filled_form.fields["t1_time"] == ""
        assert filled_form.is_ready()

    def test_snapshot(self, filled_form):
        filled_form.update(athlete_name="Jane")
        race = filled_form.snapshot()

        assert isinstance(race, RaceInput)
        assert race.bike_time == "2:33:00"
        assert race.athlete_name == "Jane"

    def test_snapshot_rejects_zero_distance(self, filled_form):
        filled_form.update(swim_distance=0)
        with pytest.raises(InvalidDistanceError):
            filled_form.snapshot()


class TestRecompute:
    """Explicit recompute semantics."""

    def test_recompute_stores_result(self, filled_form):
        result = filled_form.recompute()

        assert filled_form.result is result
        assert result.total == "4:38:00"

    def test_edit_does_not_recompute(self, filled_form):
        first = filled_form.recompute()
        filled_form.update(bike_distance=45, bike_time="1:16:30")

        assert filled_form.result is first

    def test_recompute_replaces_result(self, filled_form):
        first = filled_form.recompute()
        filled_form.update(bike_distance=45, bike_time="1:30:00")
        second = filled_form.recompute()

        assert second is not first
        assert filled_form.result is second
        assert second.bike.time == "3:00:00"

    def test_failed_recompute_keeps_previous(self, filled_form):
        first = filled_form.recompute()
        filled_form.update(run_time="soon")

        with pytest.raises(DurationParseError):
            filled_form.recompute()
        assert filled_form.result is first

    def test_recompute_uses_selected_standard(self, filled_form):
        filled_form.set_tier("olympic")
        filled_form.update(swim_distance=1.9, bike_distance=90, run_distance=21.1)
        result = filled_form.recompute()

        assert result.standard.tier == Tier.OLYMPIC
        assert result.bike.minutes == pytest.approx(153 * 40 / 90)

"""
Tests for the click CLI.
"""

import json
import textwrap

import pytest
from click.testing import CliRunner

from app.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


HALF_ARGS = ["normalize", "--swim", "33:00", "--bike", "2:33:00", "--run", "1:28:00"]


class TestStandardsCommand:

    def test_metric(self, runner):
        result = runner.invoke(cli, ["standards"])

        assert result.exit_code == 0
        assert "IRONMAN 70.3" in result.output
        assert "1.9 km" in result.output
        assert "180 km" in result.output

    def test_imperial(self, runner):
        result = runner.invoke(cli, ["standards", "--units", "imperial"])

        assert result.exit_code == 0
        assert "1.2 mi" in result.output
        assert "112 mi" in result.output


class TestNormalizeCommand:

    def test_distances_default_to_standard(self, runner):
        result = runner.invoke(cli, HALF_ARGS)

        assert result.exit_code == 0, result.output
        assert "IRONMAN 70.3 (metric)" in result.output
        assert "4:38:00" in result.output
        assert "35.3 km/h" in result.output

    def test_json_output(self, runner):
        result = runner.invoke(cli, HALF_ARGS + ["--bike", "1:16:30", "--bike-distance", "45", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["bike"]["time"] == "2:33:00"
        assert data["total"] == "4:38:00"
        assert data["actual_total"] == "3:21:30"

    def test_tier_and_units(self, runner):
        result = runner.invoke(cli, HALF_ARGS + ["--tier", "olympic", "--units", "imperial", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["standard"]["name"] == "Olympic"
        assert data["standard"]["swim"] == 0.93

    def test_metadata_in_header(self, runner):
        result = runner.invoke(cli, HALF_ARGS + ["--name", "Jane Doe", "--race-name", "Miami"])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines()[0] == "Jane Doe: Miami - IRONMAN 70.3 (metric)"

    def test_missing_time(self, runner):
        result = runner.invoke(cli, ["normalize", "--swim", "33:00", "--bike", "2:33:00"])

        assert result.exit_code == 2
        assert "Missing time for: run" in result.output

    def test_bad_time(self, runner):
        result = runner.invoke(cli, HALF_ARGS + ["--t1", "quick"])

        assert result.exit_code == 2
        assert "t1_time" in result.output

    def test_zero_distance(self, runner):
        result = runner.invoke(cli, HALF_ARGS + ["--swim-distance", "0"])

        assert result.exit_code == 2
        assert "swim_distance" in result.output

    def test_race_file(self, runner, tmp_path):
        path = tmp_path / "race.yaml"
        path.write_text(textwrap.dedent("""\
            tier: 70.3
            athlete_name: Jane Doe
            swim:
              distance: 1.9
              time: 33:00
            bike:
              distance: 45
              time: 1:16:30
            run:
              distance: 21.1
              time: 1:28:00
        """), encoding="utf-8")

        result = runner.invoke(cli, ["normalize", "--file", str(path), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["bike"]["time"] == "2:33:00"
        assert data["metadata"]["athlete_name"] == "Jane Doe"

    def test_options_override_file(self, runner, tmp_path):
        path = tmp_path / "race.yaml"
        path.write_text("tier: full\nswim:\n  time: 1:10:00\n", encoding="utf-8")

        result = runner.invoke(cli, [
            "normalize", "--file", str(path), "--tier", "70.3",
            "--bike", "2:33:00", "--run", "1:28:00", "--json",
        ])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["standard"]["tier"] == "70.3"
        assert data["swim"]["time"] == "1:10:00"

    def test_unknown_key_in_file(self, runner, tmp_path):
        path = tmp_path / "race.yaml"
        path.write_text("kayak: 5\n", encoding="utf-8")

        result = runner.invoke(cli, ["normalize", "--file", str(path)])

        assert result.exit_code == 2
        assert "kayak" in result.output

    def test_tiny_distance(self, runner):
        result = runner.invoke(cli, HALF_ARGS + ["--swim-distance", "1e-320"])

        assert result.exit_code == 2
        assert "swim_distance" in result.output

"""Race file loader: reads a recorded race from YAML.

Example race.yaml:

    tier: "70.3"
    unit_system: metric
    athlete_name: Jane Doe
    race_name: IRONMAN 70.3 Miami
    swim: {distance: 1.9, time: "33:00"}
    t1: "2:15"
    bike: {distance: 90, time: 2:33:00, power: 210, elevation: 800}
    t2: "1:40"
    run: {distance: 21.1, time: 1:28:00}
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from app.shared.errors import NormalizerError, UnknownFieldError


INT_TAG = "tag:yaml.org,2002:int"
FLOAT_TAG = "tag:yaml.org,2002:float"


class RaceFileLoader(yaml.SafeLoader):
    """SafeLoader that keeps unquoted times like 1:28:00 as strings.

    Plain YAML 1.1 reads 1:28:00 as the base-60 integer 5280.
    """


RaceFileLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in (INT_TAG, FLOAT_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
RaceFileLoader.add_implicit_resolver(
    INT_TAG,
    re.compile(r"^[-+]?(?:0|[1-9][0-9_]*)$"),
    list("-+0123456789"),
)
RaceFileLoader.add_implicit_resolver(
    FLOAT_TAG,
    re.compile(r"^[-+]?(?:[0-9][0-9_]*)?\.[0-9_]+(?:[eE][-+]?[0-9]+)?$"),
    list("-+0123456789."),
)


# Top-level keys that map straight onto race fields
META_KEYS = {"athlete_name", "age", "race_name"}
SEGMENT_KEYS = {"swim", "bike", "run"}
TRANSITION_KEYS = {"t1", "t2"}
SETTINGS_KEYS = {"tier", "unit_system"}

# Extra keys allowed inside the bike block
BIKE_EXTRA_KEYS = {"power": "bike_power", "elevation": "bike_elevation"}


@dataclass
class RaceFile:
    """Parsed race file: target settings plus RaceInput field values."""

    tier: str | None = None
    unit_system: str | None = None
    fields: dict[str, Any] = field(default_factory=dict)


def _time_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def parse_race_data(data: Any) -> RaceFile:
    """Convert a loaded YAML document into a RaceFile."""
    if data is None:
        return RaceFile()
    if not isinstance(data, dict):
        raise NormalizerError("Race file must contain a mapping at the top level")

    race = RaceFile(
        tier=str(data["tier"]) if data.get("tier") is not None else None,
        unit_system=data.get("unit_system"),
    )

    for key, value in data.items():
        if key in SETTINGS_KEYS:
            continue
        if key in META_KEYS:
            race.fields[key] = value
        elif key in TRANSITION_KEYS:
            race.fields[f"{key}_time"] = _time_text(value)
        elif key in SEGMENT_KEYS:
            if not isinstance(value, dict):
                raise NormalizerError(f"{key} must be a mapping with distance and time", key)
            for sub_key, sub_value in value.items():
                if sub_key == "distance":
                    race.fields[f"{key}_distance"] = sub_value
                elif sub_key == "time":
                    race.fields[f"{key}_time"] = _time_text(sub_value)
                elif key == "bike" and sub_key in BIKE_EXTRA_KEYS:
                    race.fields[BIKE_EXTRA_KEYS[sub_key]] = sub_value
                else:
                    raise UnknownFieldError(f"{key}.{sub_key}")
        else:
            raise UnknownFieldError(key)

    return race


def load_race_file(path: Path) -> RaceFile:
    """Load a race from a YAML file."""
    with open(path, encoding="utf-8") as f:
        data = yaml.load(f, Loader=RaceFileLoader)
    return parse_race_data(data)

"""Serialization for schedules and built timelines."""

from __future__ import annotations

import csv
import io
import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from timemap.config.schema import ScheduleConfig
from timemap.core.dates import format_instant
from timemap.core.timemap import TimeMap
from timemap.io.yaml_loader import load_yaml
from timemap.utils.exceptions import ConfigError


def _validate_schedule(data: Any) -> ScheduleConfig:
    try:
        return ScheduleConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid schedule: {exc}") from exc


def dump_schedule(schedule: ScheduleConfig) -> str:
    """Serialize a schedule to a JSON string."""
    return json.dumps(schedule.model_dump(exclude_none=True), indent=2)


def load_schedule(json_str: str) -> ScheduleConfig:
    """Deserialize a schedule from a JSON string.

    Raises:
        ConfigError: If the JSON is malformed or does not match the schema.
    """
    try:
        data: dict[str, Any] = json.loads(json_str)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid schedule JSON: {exc}") from exc
    return _validate_schedule(data)


def load_schedule_file(path: Path) -> ScheduleConfig:
    """Load a schedule from a ``.yaml``/``.yml`` or JSON file."""
    if path.suffix.lower() in (".yaml", ".yml"):
        return _validate_schedule(load_yaml(path))
    return load_schedule(path.read_text())


def dump_steps_csv(time_map: TimeMap) -> str:
    """Export every instant of a timeline as CSV.

    Returns:
        CSV string with Step, Date, Elapsed_Days, Month_Boundary and
        Year_Boundary columns, one row per instant (step 0 is the start).
    """
    months = set(time_map.first_timestep_months)
    years = set(time_map.first_timestep_years)
    elapsed = time_map.elapsed_days()

    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(["Step", "Date", "Elapsed_Days", "Month_Boundary", "Year_Boundary"])
    for step, instant in enumerate(time_map.instants()):
        writer.writerow(
            [
                step,
                format_instant(int(instant)),
                f"{elapsed[step]:.4f}",
                int(step in months),
                int(step in years),
            ]
        )
    return output.getvalue()


def dump_time_map_summary(time_map: TimeMap) -> str:
    """Serialize a timeline summary to JSON."""
    data = {
        "start": format_instant(time_map.instant_at(0)),
        "end": format_instant(time_map.end_time()),
        "num_steps": time_map.num_steps(),
        "total_seconds": time_map.total_duration(),
        "month_boundaries": list(time_map.first_timestep_months),
        "year_boundaries": list(time_map.first_timestep_years),
    }
    return json.dumps(data, indent=2)

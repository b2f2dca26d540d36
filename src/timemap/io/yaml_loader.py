"""YAML reader for schedule files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from timemap.utils.exceptions import ConfigError


def load_yaml(path: Path) -> Any:
    """Read a YAML schedule document into plain Python data.

    An empty file reads as an empty mapping, i.e. a schedule with no
    start date and no keywords.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the file is not valid YAML.
    """
    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid schedule YAML in {path}: {exc}") from exc
    return {} if data is None else data

"""Per-workspace configuration from .gradlegraph.toml or pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILE = ".gradlegraph.toml"


@dataclass
class Config:
    """Analysis options; CLI flags override values read from disk."""

    exclude: list[str] = field(default_factory=list)  # directory names to skip
    strict: bool = False  # fail when a project reference does not resolve


def load_config(workspace_dir: Path) -> Config:
    """Read ``[gradlegraph]`` from .gradlegraph.toml, else ``[tool.gradlegraph]``.

    Missing or unreadable files yield the defaults.
    """
    table = _read_table(workspace_dir / CONFIG_FILE, ("gradlegraph",))
    if table is None:
        table = _read_table(workspace_dir / "pyproject.toml", ("tool", "gradlegraph"))
    if table is None:
        return Config()

    config = Config()
    exclude = table.get("exclude", [])
    if isinstance(exclude, list) and all(isinstance(e, str) for e in exclude):
        config.exclude = list(exclude)
    else:
        logger.warning("Ignoring invalid 'exclude' setting: %r", exclude)

    strict = table.get("strict", False)
    if isinstance(strict, bool):
        config.strict = strict
    else:
        logger.warning("Ignoring invalid 'strict' setting: %r", strict)

    return config


def _read_table(path: Path, keys: tuple[str, ...]) -> dict | None:
    if not path.exists():
        return None
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return None

    for key in keys:
        data = data.get(key)
        if not isinstance(data, dict):
            return None
    logger.debug("Using configuration from %s", path)
    return data

"""Read the sub-project list out of settings.gradle(.kts)."""

from __future__ import annotations

import logging
import re

from gradlegraph.model import DIALECTS, GROOVY, KOTLIN
from gradlegraph.parsing._text import strip_comments

logger = logging.getLogger(__name__)

_STRING_RE = re.compile(r"""["']([^"']+)["']""")

# One or more comma-separated string literals: 'a', "b", 'c'
_ARGS = r"""((?:["'][^"']+["']\s*,\s*)*["'][^"']+["'])"""

# include 'core', 'api' / include('core') in Groovy; include("core", "api") in Kotlin.
_INCLUDE_PATTERNS = {
    GROOVY: re.compile(r"(?<![\w.])include\s*\(?\s*" + _ARGS),
    KOTLIN: re.compile(r"(?<![\w.])include\s*\(\s*" + _ARGS + r"\s*\)"),
}

# rootProject.name = "..."
_ROOT_NAME_RE = re.compile(r"""rootProject\.name\s*=\s*["']([^"']+)["']""")


def parse_settings(text: str, dialect: str) -> list[str]:
    """Return every ``include`` token in order of appearance.

    Duplicates are kept and tokens are returned as written (``":api"`` stays
    ``":api"``).
    """
    if dialect not in DIALECTS:
        raise ValueError(f"Unknown settings file dialect: {dialect!r}")

    content = strip_comments(text or "")
    includes: list[str] = []
    for m in _INCLUDE_PATTERNS[dialect].finditer(content):
        includes.extend(_STRING_RE.findall(m.group(1)))

    logger.debug("Settings: %d included projects", len(includes))
    return includes


def parse_root_project_name(text: str) -> str | None:
    """Return ``rootProject.name`` from a settings file, if assigned."""
    m = _ROOT_NAME_RE.search(strip_comments(text or ""))
    return m.group(1) if m else None

"""Extract plugins, dependencies, repositories and properties from build files."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import TypeVar

from gradlegraph.model import (
    DIALECTS,
    GROOVY,
    KOTLIN,
    PROPERTY_NAMES,
    BuildFacts,
    Dependency,
    ExternalDependency,
    ProjectDependency,
)
from gradlegraph.parsing._text import (
    block_body,
    find_block,
    strip_comments,
    top_level,
    unique,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Plugin declarations.  Groovy allows both ``id 'java'`` and ``id('java')``.
_PLUGIN_PATTERNS = {
    GROOVY: (
        re.compile(r"""(?<![\w.])id\s*\(?\s*["']([^"']+)["']"""),
        re.compile(r"""(?<![\w.])apply\s+plugin\s*:\s*["']([^"']+)["']"""),
    ),
    KOTLIN: (
        re.compile(r"""(?<![\w.])id\s*\(\s*["']([^"']+)["']\s*\)"""),
        # Shorthand for org.jetbrains.kotlin.* plugins: kotlin("jvm")
        re.compile(r"""(?<![\w.])kotlin\s*\(\s*["']([^"']+)["']\s*\)"""),
    ),
}

# configuration "group:artifact:version" -- exactly three segments.
_COORDINATE_PATTERNS = {
    GROOVY: re.compile(
        r"""(?<![\w.])(?!project\b)(\w+)\s*\(?\s*["']([^"':\s]+):([^"':\s]+):([^"':\s]+)["']"""
    ),
    KOTLIN: re.compile(
        r"""(?<![\w.])(\w+)\s*\(\s*["']([^"':\s]+):([^"':\s]+):([^"':\s]+)["']\s*\)"""
    ),
}

# configuration project(":path")
_PROJECT_PATTERNS = {
    GROOVY: re.compile(
        r"""(?<![\w.])(\w+)\s*\(?\s*project\s*\(\s*(?:path\s*:\s*)?["']([^"']+)["']\s*\)"""
    ),
    KOTLIN: re.compile(
        r"""(?<![\w.])(\w+)\s*\(\s*project\s*\(\s*(?:path\s*=\s*)?["']([^"']+)["']\s*\)\s*\)"""
    ),
}

# Well-known repository shorthands, reported in this order when present.
# Matched as mavenCentral() or mavenCentral { content { ... } }.
_COMMON_REPOSITORIES = ("mavenCentral", "mavenLocal", "google", "gradlePluginPortal")

# maven { url "..." } / maven { url = uri("...") }
_MAVEN_BLOCK_URL_RE = re.compile(
    r"""(?<![\w.])maven\s*\{[^}]*?\burl\s*[=:]?\s*(?:uri\s*\(\s*)?["']([^"']+)["']""",
    re.DOTALL,
)

# maven("...") / maven(url = "...")
_MAVEN_CALL_URL_RE = re.compile(
    r"""(?<![\w.])maven\s*\(\s*(?:url\s*=\s*)?(?:uri\s*\(\s*)?["']([^"']+)["']"""
)


def parse_build_file(text: str, dialect: str) -> BuildFacts:
    """Extract :class:`BuildFacts` from the text of a build file.

    Never raises for odd input: every section is extracted independently and
    a section that cannot be extracted is left empty.
    """
    if dialect not in DIALECTS:
        raise ValueError(f"Unknown build file dialect: {dialect!r}")

    content = strip_comments(text or "")

    # Text outside the dependencies block: kotlin("stdlib") there is not a
    # plugin, and exclude(group = "...") there is not the project group.
    dep_span = _safely(
        lambda: find_block(content, "dependencies"), None, "dependency block"
    )
    outside_deps = content
    if dep_span is not None:
        outside_deps = content[: dep_span[0]] + content[dep_span[1] :]

    facts = BuildFacts(
        plugins=_safely(lambda: extract_plugins(outside_deps, dialect), [], "plugins"),
        dependencies=_safely(
            lambda: extract_dependencies(content, dialect), [], "dependencies"
        ),
        repositories=_safely(lambda: extract_repositories(content), [], "repositories"),
    )
    for name in PROPERTY_NAMES:
        value = _safely(lambda: extract_property(outside_deps, name), None, name)
        if value is not None:
            facts.properties[name] = value

    logger.debug(
        "Parsed %s build file: %d plugins, %d dependencies, %d repositories",
        dialect,
        len(facts.plugins),
        len(facts.dependencies),
        len(facts.repositories),
    )
    return facts


def _safely(extract: Callable[[], T], default: T, section: str) -> T:
    try:
        return extract()
    except Exception as e:  # noqa: BLE001
        logger.debug("Could not extract %s: %s", section, e)
        return default


def extract_plugins(content: str, dialect: str) -> list[str]:
    plugins: list[str] = []
    for pattern in _PLUGIN_PATTERNS[dialect]:
        plugins.extend(m.group(1) for m in pattern.finditer(content))
    return unique(plugins)


def extract_dependencies(content: str, dialect: str) -> list[Dependency]:
    """Extract the entries of the first ``dependencies { }`` block.

    Coordinate dependencies come first, then project dependencies, each in
    source order.
    """
    body = block_body(content, "dependencies")
    if body is None:
        return []

    dependencies: list[Dependency] = []
    for m in _COORDINATE_PATTERNS[dialect].finditer(body):
        dependencies.append(
            ExternalDependency(
                configuration=m.group(1),
                group=m.group(2),
                artifact=m.group(3),
                version=m.group(4),
            )
        )
    for m in _PROJECT_PATTERNS[dialect].finditer(body):
        dependencies.append(
            ProjectDependency(configuration=m.group(1), project_path=m.group(2))
        )
    return dependencies


def extract_repositories(content: str) -> list[str]:
    body = block_body(content, "repositories")
    if body is None:
        return []

    repositories = [
        repo
        for repo in _COMMON_REPOSITORIES
        if re.search(r"(?<![\w.])" + repo + r"\s*[({]", body)
    ]
    urls = [m.group(1) for m in _MAVEN_BLOCK_URL_RE.finditer(body)]
    urls.extend(m.group(1) for m in _MAVEN_CALL_URL_RE.finditer(body))
    return unique(repositories + urls)


def extract_property(content: str, name: str) -> str | None:
    """Value of a ``name = ...`` assignment; first match wins.

    Assignments at brace depth zero are preferred; otherwise the first one
    inside a block (e.g. ``java { sourceCompatibility = ... }``) is used.
    """
    for scope in (top_level(content), content):
        value = _match_property(scope, name)
        if value is not None:
            return value
    return None


def _match_property(content: str, name: str) -> str | None:
    prefix = r"(?<!\w)" + re.escape(name) + r"\s*=\s*"

    m = re.search(prefix + r"""["']([^"']+)["']""", content)
    if m:
        return m.group(1)

    # sourceCompatibility = JavaVersion.VERSION_17 / VERSION_1_8
    m = re.search(prefix + r"JavaVersion\.VERSION_(\d+(?:_\d+)?)\b", content)
    if m:
        return m.group(1).replace("_", ".")

    # sourceCompatibility = 1.8 (Groovy)
    m = re.search(prefix + r"(\d+(?:\.\d+)?)(?![\w.])", content)
    if m:
        return m.group(1)

    return None

"""Find Gradle modules on disk and snapshot them into a Workspace."""

from __future__ import annotations

import logging
import os
from dataclasses import replace
from pathlib import Path

from gradlegraph.model import BuildFacts, Module, Workspace, dialect_for_file
from gradlegraph.parsing import (
    parse_build_file,
    parse_root_project_name,
    parse_settings,
)

logger = logging.getLogger(__name__)

# Groovy wins when a directory has both.
BUILD_FILE_NAMES = ("build.gradle", "build.gradle.kts")
SETTINGS_FILE_NAMES = ("settings.gradle", "settings.gradle.kts")

_SKIP = {"node_modules", "dist", "build", "out", "__pycache__"}


def find_build_file(directory: Path) -> Path | None:
    for name in BUILD_FILE_NAMES:
        p = directory / name
        if p.is_file():
            return p
    return None


def find_settings_file(directory: Path) -> Path | None:
    for name in SETTINGS_FILE_NAMES:
        p = directory / name
        if p.is_file():
            return p
    return None


def find_gradle_wrapper(directory: Path) -> Path | None:
    """Return the ``gradlew`` launcher if the wrapper jar is present."""
    if not (directory / "gradle" / "wrapper" / "gradle-wrapper.jar").exists():
        return None
    launcher = directory / ("gradlew.bat" if os.name == "nt" else "gradlew")
    return launcher if launcher.exists() else None


def _read(path: Path) -> str | None:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return None


def _candidate_dirs(root: Path, exclude: set[str]) -> list[Path]:
    """Every directory under *root* (root first, then depth-first, sorted)."""
    dirs = [root]
    try:
        children = sorted(p for p in root.iterdir() if p.is_dir())
    except OSError as e:
        logger.warning("Could not list %s: %s", root, e)
        return dirs
    for child in children:
        if child.name.startswith(".") or child.name in _SKIP or child.name in exclude:
            continue
        if child.is_symlink():
            continue
        dirs.extend(_candidate_dirs(child, exclude))
    return dirs


def _load_module(directory: Path, root: Path, root_name: str) -> Module | None:
    build_file = find_build_file(directory)
    if build_file is None:
        return None

    rel = directory.relative_to(root).as_posix()
    path = "" if rel == "." else rel
    name = path.rsplit("/", 1)[-1] if path else root_name
    dialect = dialect_for_file(build_file.name)

    text = _read(build_file)
    facts = parse_build_file(text, dialect) if text is not None else BuildFacts()

    settings_file = find_settings_file(directory)
    return Module(
        name=name,
        path=path,
        dialect=dialect,
        facts=facts,
        build_file=build_file.relative_to(root).as_posix(),
        settings_file=(
            settings_file.relative_to(root).as_posix() if settings_file else None
        ),
    )


def discover_workspace(root: Path, *, exclude: list[str] | None = None) -> Workspace:
    """Scan *root* for Gradle modules and parse their build files.

    Every directory holding a build file becomes a module named after its
    last path segment.  A later module whose name is already taken is named
    after its whole path instead (``libs/api`` => ``libs-api``), with a
    warning; if that is taken too, it is skipped.
    """
    root = root.resolve()

    root_name = root.name
    includes: tuple[str, ...] = ()
    settings_file = find_settings_file(root)
    if settings_file is not None:
        text = _read(settings_file)
        if text is not None:
            includes = tuple(parse_settings(text, dialect_for_file(settings_file.name)))
            root_name = parse_root_project_name(text) or root_name

    modules: list[Module] = []
    seen: dict[str, str] = {}
    for directory in _candidate_dirs(root, set(exclude or ())):
        module = _load_module(directory, root, root_name)
        if module is None:
            continue
        if module.name in seen:
            fallback = module.path.replace("/", "-")
            if not module.path or fallback in seen:
                logger.warning(
                    "Skipping %s: module name %r already used by %s",
                    module.path or ".",
                    module.name,
                    seen[module.name] or ".",
                )
                continue
            logger.warning(
                "Naming %s %r: module name %r already used by %s",
                module.path,
                fallback,
                module.name,
                seen[module.name] or ".",
            )
            module = replace(module, name=fallback)
        seen[module.name] = module.path
        modules.append(module)

    logger.debug("Discovered %d modules under %s", len(modules), root)
    return Workspace(root=str(root), modules=tuple(modules), includes=includes)

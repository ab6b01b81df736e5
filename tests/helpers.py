"""Builders shared across test modules."""

from __future__ import annotations

from gradlegraph.model import BuildFacts, Module, ProjectDependency


def make_module(name: str, path: str | None = None, *project_paths: str) -> Module:
    """Module whose build file declares ``implementation project(...)`` for each path."""
    deps = [ProjectDependency("implementation", p) for p in project_paths]
    return Module(
        name=name,
        path=name if path is None else path,
        facts=BuildFacts(dependencies=list(deps)),
    )

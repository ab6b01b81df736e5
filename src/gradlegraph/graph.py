"""Assemble the inter-module dependency graph of a workspace."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from gradlegraph.model import (
    DependencyGraph,
    GraphNode,
    Module,
    UnresolvedReference,
    Workspace,
)

logger = logging.getLogger(__name__)


def _segments(path: str, sep: str) -> list[str]:
    return [part for part in path.split(sep) if part]


def resolve_project_path(project_path: str, modules: Iterable[Module]) -> list[str]:
    """Return the names of all modules a Gradle project path can refer to.

    ``:parent:child`` matches a module whose workspace path has exactly two
    segments ending in ``parent/child``.
    """
    wanted = _segments(project_path, ":")
    if not wanted:
        return []

    matches: list[str] = []
    for module in modules:
        parts = _segments(module.path.replace("\\", "/"), "/")
        if len(parts) == len(wanted) and parts[-len(wanted) :] == wanted:
            matches.append(module.name)
    return matches


def build_dependency_graph(workspace: Workspace | Iterable[Module]) -> DependencyGraph:
    """Create one node per module and one edge per resolvable project dependency.

    A project reference resolves only when exactly one module matches it;
    unresolved and ambiguous references produce no edge and are recorded in
    ``DependencyGraph.unresolved`` instead.
    """
    modules = tuple(
        workspace.modules if isinstance(workspace, Workspace) else workspace
    )

    nodes: dict[str, GraphNode] = {}
    edges: dict[str, tuple[str, ...]] = {}
    unresolved: list[UnresolvedReference] = []

    for module in modules:
        targets: list[str] = []
        for dep in module.facts.project_dependencies:
            candidates = resolve_project_path(dep.project_path, modules)
            if len(candidates) == 1:
                targets.append(candidates[0])
                continue
            logger.debug(
                "%s: project(%r) matched %d modules, no edge added",
                module.name,
                dep.project_path,
                len(candidates),
            )
            unresolved.append(
                UnresolvedReference(
                    module=module.name,
                    project_path=dep.project_path,
                    candidates=tuple(candidates),
                )
            )

        nodes[module.name] = GraphNode(
            module_name=module.name,
            module_path=module.path,
            dependencies=tuple(targets),
        )
        edges[module.name] = tuple(targets)

    logger.debug(
        "Dependency graph: %d nodes, %d edges, %d unresolved references",
        len(nodes),
        sum(len(v) for v in edges.values()),
        len(unresolved),
    )
    return DependencyGraph(nodes=nodes, edges=edges, unresolved=tuple(unresolved))

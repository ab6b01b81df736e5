"""Serialize an analysed workspace to JSON or YAML."""

from __future__ import annotations

import json

import yaml

from gradlegraph.analysis import (
    detect_cycles,
    topological_sort,
    transitive_dependencies,
)
from gradlegraph.errors import CyclicDependencyError
from gradlegraph.model import DependencyGraph, ExternalDependency, Module, Workspace

FORMATS = ("json", "yaml")


def _module_to_dict(module: Module, graph: DependencyGraph) -> dict:
    facts = module.facts
    d: dict = {
        "path": module.path,
        "dialect": module.dialect,
        "dependsOn": list(graph.edges.get(module.name, ())),
    }
    if module.build_file is not None:
        d["buildFile"] = module.build_file
    if facts.plugins:
        d["plugins"] = facts.plugins
    if facts.repositories:
        d["repositories"] = facts.repositories
    if facts.properties:
        d["properties"] = dict(facts.properties)

    external = []
    projects = []
    for dep in facts.dependencies:
        if isinstance(dep, ExternalDependency):
            external.append(
                {"configuration": dep.configuration, "coordinate": dep.coordinate}
            )
        else:
            projects.append(
                {"configuration": dep.configuration, "path": dep.project_path}
            )
    if external:
        d["externalDependencies"] = external
    if projects:
        d["projectDependencies"] = projects
    return d


def build_report(
    workspace: Workspace, graph: DependencyGraph, module: str | None = None
) -> dict:
    """Collect modules, edges, cycles and build order into a plain dict."""
    report: dict = {
        "root": workspace.root,
        "includes": list(workspace.includes),
        "modules": {m.name: _module_to_dict(m, graph) for m in workspace.modules},
        "unresolved": [
            {
                "module": ref.module,
                "path": ref.project_path,
                "candidates": list(ref.candidates),
            }
            for ref in graph.unresolved
        ],
        "cycles": detect_cycles(graph),
    }

    try:
        report["buildOrder"] = topological_sort(graph)
    except CyclicDependencyError as e:
        report["buildOrder"] = None
        report["error"] = str(e)

    if module is not None:
        report["transitiveDependencies"] = {
            module: sorted(transitive_dependencies(module, graph))
        }
    return report


def render_report(report: dict, fmt: str = "json") -> str:
    if fmt == "json":
        return json.dumps(report, indent=2) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(report, sort_keys=False, default_flow_style=False)
    raise ValueError(f"Unknown report format: {fmt!r}")

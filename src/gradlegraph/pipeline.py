"""Orchestrator: discover → parse → build graph → report."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from gradlegraph.config import Config, load_config
from gradlegraph.discovery import discover_workspace
from gradlegraph.errors import UnknownModuleError
from gradlegraph.graph import build_dependency_graph
from gradlegraph.model import DependencyGraph, Workspace
from gradlegraph.report import build_report, render_report

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_WORKSPACE = 1
EXIT_USAGE = 2


def analyze(
    workspace_dir: Path, config: Config | None = None
) -> tuple[Workspace, DependencyGraph]:
    """Snapshot *workspace_dir* and build its dependency graph."""
    config = config or load_config(workspace_dir)
    workspace = discover_workspace(workspace_dir, exclude=config.exclude)
    graph = build_dependency_graph(workspace)
    return workspace, graph


def run(
    workspace_dir: Path,
    *,
    output: Path | None = None,
    fmt: str = "json",
    module: str | None = None,
    strict: bool | None = None,
) -> int:
    """Run the full analysis, write the report, and return an exit status."""
    workspace_dir = workspace_dir.resolve()
    config = load_config(workspace_dir)
    if strict is not None:
        config.strict = strict

    workspace, graph = analyze(workspace_dir, config)
    if not workspace.modules:
        logger.error("No Gradle build files found under %s", workspace_dir)
        return EXIT_USAGE

    logger.debug("Modules: %s", [m.name for m in workspace.modules])

    try:
        report = build_report(workspace, graph, module=module)
    except UnknownModuleError as e:
        logger.error("%s", e)
        return EXIT_USAGE

    text = render_report(report, fmt)
    if output is None:
        sys.stdout.write(text)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
        logger.info("Generated %s", output)

    status = EXIT_OK

    cycles = report["cycles"]
    for cycle in cycles:
        logger.error("Circular dependency: %s", " -> ".join(cycle + cycle[:1]))
    if cycles:
        status = EXIT_INVALID_WORKSPACE

    for ref in graph.unresolved:
        level = logging.ERROR if config.strict else logging.WARNING
        reason = "is ambiguous" if ref.is_ambiguous else "does not match any module"
        logger.log(level, "%s: project(%r) %s", ref.module, ref.project_path, reason)
    if config.strict and graph.unresolved:
        status = EXIT_INVALID_WORKSPACE

    return status

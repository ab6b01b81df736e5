"""Static dependency analysis for multi-module Gradle workspaces."""

from gradlegraph.analysis import (
    detect_cycles,
    topological_sort,
    transitive_dependencies,
)
from gradlegraph.errors import (
    CyclicDependencyError,
    GradleGraphError,
    UnknownModuleError,
    WorkspaceError,
)
from gradlegraph.graph import build_dependency_graph
from gradlegraph.model import (
    GROOVY,
    KOTLIN,
    BuildFacts,
    DependencyGraph,
    ExternalDependency,
    GraphNode,
    Module,
    ProjectDependency,
    UnresolvedReference,
    Workspace,
)
from gradlegraph.parsing import parse_build_file, parse_settings

__all__ = [
    "GROOVY",
    "KOTLIN",
    "BuildFacts",
    "CyclicDependencyError",
    "DependencyGraph",
    "ExternalDependency",
    "GradleGraphError",
    "GraphNode",
    "Module",
    "ProjectDependency",
    "UnknownModuleError",
    "UnresolvedReference",
    "Workspace",
    "WorkspaceError",
    "build_dependency_graph",
    "detect_cycles",
    "parse_build_file",
    "parse_settings",
    "topological_sort",
    "transitive_dependencies",
]

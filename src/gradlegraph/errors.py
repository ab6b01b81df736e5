"""Exceptions raised by gradlegraph."""

from __future__ import annotations


class GradleGraphError(Exception):
    """Base class for all gradlegraph errors."""


class WorkspaceError(GradleGraphError):
    """The workspace snapshot is inconsistent (duplicate names or paths)."""


class CyclicDependencyError(GradleGraphError):
    """A build order was requested for a graph that contains a cycle."""

    def __init__(self, node: str) -> None:
        super().__init__(f"Circular dependency detected involving {node}")
        self.node = node


class UnknownModuleError(GradleGraphError, KeyError):
    """A module name was looked up that is not part of the graph."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown module: {self.name}"

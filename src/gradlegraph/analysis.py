"""Graph analysis: cycle detection, build order, and transitive closure."""

from __future__ import annotations

from gradlegraph.errors import CyclicDependencyError, UnknownModuleError
from gradlegraph.model import DependencyGraph


def detect_cycles(graph: DependencyGraph) -> list[list[str]]:
    """Return the dependency cycles found by a depth-first walk.

    Each cycle is listed in traversal order, starting at the module the walk
    re-entered.  The same cycle may be reported more than once when it is
    reachable along different paths.
    """
    cycles: list[list[str]] = []
    visited: set[str] = set()
    on_stack: set[str] = set()

    def _visit(node: str, path: list[str]) -> None:
        visited.add(node)
        on_stack.add(node)
        path.append(node)

        for neighbor in graph.edges.get(node, ()):
            if neighbor not in visited:
                _visit(neighbor, list(path))
            elif neighbor in on_stack:
                cycles.append(path[path.index(neighbor) :])

        on_stack.discard(node)

    for node in graph.nodes:
        if node not in visited:
            _visit(node, [])

    return cycles


def topological_sort(graph: DependencyGraph) -> list[str]:
    """Return module names ordered so that dependencies precede dependents.

    Independent modules keep the relative order of ``graph.nodes``.

    Raises:
        CyclicDependencyError: if the graph contains a cycle.
    """
    order: list[str] = []
    done: set[str] = set()
    in_progress: set[str] = set()

    def _visit(node: str) -> None:
        if node in in_progress:
            raise CyclicDependencyError(node)
        if node in done:
            return

        in_progress.add(node)
        for neighbor in graph.edges.get(node, ()):
            _visit(neighbor)
        in_progress.discard(node)

        done.add(node)
        # Post-order over "depends on" edges puts dependencies first.
        order.append(node)

    for node in graph.nodes:
        if node not in done:
            _visit(node)

    return order


def transitive_dependencies(module_name: str, graph: DependencyGraph) -> set[str]:
    """Return every module reachable from *module_name*, excluding itself.

    Raises:
        UnknownModuleError: if *module_name* is not a node of *graph*.
    """
    if module_name not in graph.nodes:
        raise UnknownModuleError(module_name)

    reachable: set[str] = set()
    stack = list(graph.edges.get(module_name, ()))
    while stack:
        node = stack.pop()
        if node in reachable:
            continue
        reachable.add(node)
        stack.extend(graph.edges.get(node, ()))

    reachable.discard(module_name)
    return reachable

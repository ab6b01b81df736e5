"""Data model for Gradle workspaces and their inter-module dependency graphs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from gradlegraph.errors import WorkspaceError

# Build-file dialects.
GROOVY = "groovy"
KOTLIN = "kotlin"
DIALECTS = (GROOVY, KOTLIN)

# Scalar properties recognised in build files.
PROPERTY_NAMES = ("group", "version", "sourceCompatibility", "targetCompatibility")


def dialect_for_file(filename: str) -> str:
    """Return the dialect of a build or settings file name (``.kts`` => Kotlin)."""
    return KOTLIN if filename.endswith(".kts") else GROOVY


@dataclass(frozen=True)
class ExternalDependency:
    """A published artifact referenced by ``group:artifact:version``."""

    configuration: str  # "implementation", "testImplementation", ...
    group: str
    artifact: str
    version: str

    @property
    def coordinate(self) -> str:
        return f"{self.group}:{self.artifact}:{self.version}"


@dataclass(frozen=True)
class ProjectDependency:
    """A reference to another module of the same workspace."""

    configuration: str
    project_path: str  # raw Gradle path token, e.g. ":shared" or ":libs:core"


Dependency = Union[ExternalDependency, ProjectDependency]


@dataclass
class BuildFacts:
    """Facts extracted from one build file.

    ``plugins`` and ``repositories`` hold no duplicates; their order is
    first-seen but carries no meaning.
    """

    plugins: list[str] = field(default_factory=list)
    dependencies: list[Dependency] = field(default_factory=list)
    repositories: list[str] = field(default_factory=list)
    properties: dict[str, str] = field(default_factory=dict)

    @property
    def external_dependencies(self) -> list[ExternalDependency]:
        return [d for d in self.dependencies if isinstance(d, ExternalDependency)]

    @property
    def project_dependencies(self) -> list[ProjectDependency]:
        return [d for d in self.dependencies if isinstance(d, ProjectDependency)]


@dataclass(frozen=True)
class Module:
    """A buildable unit of the workspace."""

    name: str
    path: str  # workspace-relative, "/"-separated; "" for the root module
    dialect: str = GROOVY
    facts: BuildFacts = field(default_factory=BuildFacts, compare=False)
    build_file: str | None = None
    settings_file: str | None = None


@dataclass(frozen=True)
class Workspace:
    """Immutable snapshot of all modules found in one analysis pass."""

    root: str
    modules: tuple[Module, ...] = ()
    includes: tuple[str, ...] = ()  # raw ``include`` tokens from the root settings file

    def __post_init__(self) -> None:
        names: set[str] = set()
        paths: set[str] = set()
        for module in self.modules:
            if module.name in names:
                raise WorkspaceError(f"Duplicate module name: {module.name!r}")
            if module.path in paths:
                raise WorkspaceError(f"Duplicate module path: {module.path!r}")
            names.add(module.name)
            paths.add(module.path)

    def get(self, name: str) -> Module | None:
        for module in self.modules:
            if module.name == name:
                return module
        return None


@dataclass(frozen=True)
class GraphNode:
    """One module in the dependency graph."""

    module_name: str
    module_path: str
    dependencies: tuple[str, ...] = ()


@dataclass(frozen=True)
class UnresolvedReference:
    """A project dependency that matched zero or several workspace modules."""

    module: str
    project_path: str
    candidates: tuple[str, ...] = ()

    @property
    def is_ambiguous(self) -> bool:
        return len(self.candidates) > 1


@dataclass(frozen=True)
class DependencyGraph:
    """Workspace-wide module graph; read-only once built."""

    nodes: dict[str, GraphNode] = field(default_factory=dict)
    edges: dict[str, tuple[str, ...]] = field(default_factory=dict)
    unresolved: tuple[UnresolvedReference, ...] = ()

    @classmethod
    def from_edges(cls, edges: dict[str, list[str]]) -> DependencyGraph:
        """Build a graph straight from an adjacency mapping (paths = names)."""
        nodes = {
            name: GraphNode(
                module_name=name, module_path=name, dependencies=tuple(deps)
            )
            for name, deps in edges.items()
        }
        return cls(nodes=nodes, edges={n: tuple(d) for n, d in edges.items()})

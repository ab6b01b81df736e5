"""Tests for report assembly and rendering."""

from __future__ import annotations

import json

import pytest
import yaml

from gradlegraph.errors import UnknownModuleError
from gradlegraph.graph import build_dependency_graph
from gradlegraph.model import BuildFacts, ExternalDependency, Module, Workspace
from gradlegraph.report import build_report, render_report
from tests.helpers import make_module


def _workspace(*modules: Module) -> Workspace:
    return Workspace(root="/ws", modules=modules, includes=("core", "api"))


class TestBuildReport:
    def test_acyclic(self) -> None:
        core = Module(
            name="core",
            path="core",
            facts=BuildFacts(
                plugins=["java-library"],
                dependencies=[ExternalDependency("api", "org.x", "y", "1.0")],
                properties={"group": "com.example"},
            ),
        )
        workspace = _workspace(core, make_module("api", None, ":core", ":nope"))
        report = build_report(workspace, build_dependency_graph(workspace), module="api")

        assert report["includes"] == ["core", "api"]
        assert report["buildOrder"] == ["core", "api"]
        assert report["cycles"] == []
        assert "error" not in report
        assert report["modules"]["core"]["plugins"] == ["java-library"]
        assert report["modules"]["core"]["externalDependencies"] == [
            {"configuration": "api", "coordinate": "org.x:y:1.0"}
        ]
        assert report["modules"]["api"]["dependsOn"] == ["core"]
        assert report["unresolved"] == [{"module": "api", "path": ":nope", "candidates": []}]
        assert report["transitiveDependencies"] == {"api": ["core"]}

    def test_cyclic(self) -> None:
        workspace = _workspace(make_module("a", None, ":b"), make_module("b", None, ":a"))
        report = build_report(workspace, build_dependency_graph(workspace))

        assert report["buildOrder"] is None
        assert "Circular dependency" in report["error"]
        assert report["cycles"] == [["a", "b"]]

    def test_unknown_module(self) -> None:
        workspace = _workspace(make_module("a"))
        with pytest.raises(UnknownModuleError):
            build_report(workspace, build_dependency_graph(workspace), module="zzz")


class TestRenderReport:
    REPORT = {"root": "/ws", "buildOrder": ["core", "api"], "cycles": []}

    def test_json(self) -> None:
        assert json.loads(render_report(self.REPORT, "json")) == self.REPORT

    def test_yaml(self) -> None:
        assert yaml.safe_load(render_report(self.REPORT, "yaml")) == self.REPORT

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError, match="format"):
            render_report(self.REPORT, "xml")

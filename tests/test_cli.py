"""End-to-end tests for the gradlegraph command."""

from __future__ import annotations

import json

import pytest
import yaml

from gradlegraph.cli import main

ACYCLIC = {
    "settings.gradle.kts": 'include("core")\ninclude("api")\n',
    "core/build.gradle.kts": "plugins { id(\"java-library\") }\n",
    "api/build.gradle.kts": 'dependencies {\n    implementation(project(":core"))\n}\n',
}

CYCLIC = {
    "a/build.gradle": "dependencies {\n  implementation project(':b')\n}\n",
    "b/build.gradle": "dependencies {\n  implementation project(':a')\n}\n",
}


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestCli:
    def test_json_to_stdout(self, write_tree, capsys) -> None:
        root = write_tree(ACYCLIC)

        assert _run([str(root)]) == 0
        report = json.loads(capsys.readouterr().out)
        assert report["buildOrder"] == ["core", "api"]
        assert report["includes"] == ["core", "api"]

    def test_yaml_to_file(self, write_tree, tmp_path) -> None:
        root = write_tree(ACYCLIC)
        out = tmp_path / "out" / "graph.yaml"

        assert _run([str(root), "--format", "yaml", "-o", str(out), "--module", "api"]) == 0
        report = yaml.safe_load(out.read_text())
        assert report["transitiveDependencies"] == {"api": ["core"]}

    def test_cycle_fails(self, write_tree, capsys, caplog) -> None:
        root = write_tree(CYCLIC)

        assert _run([str(root)]) == 1
        assert json.loads(capsys.readouterr().out)["buildOrder"] is None
        assert "a -> b -> a" in caplog.text

    def test_unresolved_reference_only_fails_in_strict_mode(self, write_tree) -> None:
        root = write_tree({"app/build.gradle": "dependencies { api project(':gone') }\n"})

        assert _run([str(root)]) == 0
        assert _run([str(root), "--strict"]) == 1

    def test_strict_from_config_file(self, write_tree) -> None:
        root = write_tree(
            {
                ".gradlegraph.toml": "[gradlegraph]\nstrict = true\n",
                "app/build.gradle": "dependencies { api project(':gone') }\n",
            }
        )
        assert _run([str(root)]) == 1

    def test_unknown_module(self, write_tree) -> None:
        assert _run([str(write_tree(ACYCLIC)), "--module", "zzz"]) == 2

    def test_no_modules(self, tmp_path) -> None:
        assert _run([str(tmp_path)]) == 2

    def test_not_a_directory(self, tmp_path) -> None:
        assert _run([str(tmp_path / "missing")]) == 2

"""Tolerant, regex-based parsers for Gradle build and settings scripts."""

from gradlegraph.parsing.build_file import parse_build_file
from gradlegraph.parsing.settings import parse_root_project_name, parse_settings

__all__ = [
    "parse_build_file",
    "parse_root_project_name",
    "parse_settings",
]

"""Composition root for wiring CLI dependencies."""

from __future__ import annotations

from .cli import CliDependencies, create_app
from .config import AnalysisConfig
from .infrastructure import LocalFileSystem


def build_cli_dependencies(*, config: AnalysisConfig) -> CliDependencies:
    """Build concrete dependencies for CLI commands."""
    _ = config
    return CliDependencies(fs=LocalFileSystem())


app = create_app(build_cli_dependencies)

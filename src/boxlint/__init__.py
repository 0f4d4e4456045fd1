"""boxlint: responsive-layout linter for stylesheets with ASCII diagrams."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from boxlint.config import AnalysisConfig, Mode
from boxlint.detection import analyze
from boxlint.errors import BoxlintError, GenerationError, InvalidIssueError, UnsupportedLanguageError
from boxlint.model import Issue, Severity, Visualization, VisualizerIssue
from boxlint.visualizer import Visualizer

__version__ = "0.1.0"

__all__ = [
    "AnalysisConfig",
    "BoxlintError",
    "GenerationError",
    "InvalidIssueError",
    "Issue",
    "Mode",
    "Severity",
    "UnsupportedLanguageError",
    "Visualization",
    "Visualizer",
    "VisualizerIssue",
    "analyze",
    "generate_diagram",
    "list_supported_issue_types",
]


def generate_diagram(
    issue: VisualizerIssue | Mapping[str, Any], visualizer: Visualizer | None = None
) -> Visualization:
    """Render one diagram for *issue*.

    Without *visualizer* each call builds a new Visualizer, so nothing is
    cached between calls. Pass one shared Visualizer when rendering many
    diagrams to reuse its cached drawings.
    """
    return (visualizer or Visualizer()).generate(issue)


def list_supported_issue_types(visualizer: Visualizer | None = None) -> list[str]:
    return (visualizer or Visualizer()).supported_types()

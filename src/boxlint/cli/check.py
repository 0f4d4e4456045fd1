"""CLI command: boxlint check -- analyze a stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from boxlint.config import AnalysisConfig, Mode
from boxlint.detection import SUPPORTED_LANGUAGES, analyze
from boxlint.errors import UnsupportedLanguageError
from boxlint.model.issue import Issue, Severity
from boxlint.report import to_visualizer_issue
from boxlint.visualizer import Visualizer


def infer_language(path: Path) -> str:
    """Language variant from the file suffix; unknown suffixes are read as CSS."""
    suffix = path.suffix.lstrip(".").lower()
    return suffix if suffix in SUPPORTED_LANGUAGES else "css"


def format_location(path: Path, issue: Issue) -> str:
    line = issue.line_number or 0
    col = issue.range.start_col if issue.range else 0
    return f"{path}:{line}:{col}"


@click.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--language",
    type=click.Choice(sorted(SUPPORTED_LANGUAGES), case_sensitive=False),
    help="Stylesheet dialect (default: inferred from the file suffix).",
)
@click.option(
    "--mode",
    type=click.Choice([m.value for m in Mode], case_sensitive=False),
    default=Mode.STRICT.value,
    show_default=True,
)
@click.option("--width-threshold", type=float, default=320, show_default=True)
@click.option("--height-threshold", type=float, default=320, show_default=True)
@click.option("--spacing-threshold", type=float, default=24, show_default=True)
@click.option("--ignore", "ignore", multiple=True, help="Skip selectors containing this text.")
@click.option("--max-problems", type=click.IntRange(min=0), default=100, show_default=True)
@click.option("--diagrams", is_flag=True, help="Print a before/after diagram per issue.")
def check(
    path: str,
    language: str | None,
    mode: str,
    width_threshold: float,
    height_threshold: float,
    spacing_threshold: float,
    ignore: tuple[str, ...],
    max_problems: int,
    diagrams: bool,
) -> None:
    """Check a stylesheet for responsive-layout risks.

    Prints one line per issue, by line and then severity, and exits with code 1 if any critical issue
    is found, 0 otherwise.
    """
    css_path = Path(path)
    config = AnalysisConfig(
        mode=Mode.parse(mode),
        fixed_width_threshold_px=width_threshold,
        fixed_height_threshold_px=height_threshold,
        fixed_spacing_threshold_px=spacing_threshold,
        ignore_selectors=ignore,
        max_problems=max_problems,
    )

    try:
        source = css_path.read_text(encoding="utf-8")
        issues = analyze(source, language or infer_language(css_path), config)
    except (OSError, UnicodeDecodeError, UnsupportedLanguageError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(2)

    if not issues:
        click.echo(f"OK: {css_path.name} (0 issues)")
        sys.exit(0)

    visualizer = Visualizer() if diagrams else None
    ordered = sorted(issues, key=lambda i: (i.line_number or 0, i.severity.rank))
    for issue in ordered:
        click.echo(
            f"{format_location(css_path, issue)}: "
            f"{issue.severity.value.upper()} {issue.kind} [{issue.selector}]"
        )
        if visualizer is not None:
            projected = to_visualizer_issue(issue)
            if projected is not None:
                click.echo(visualizer.generate(projected).ascii)

    counts = {s: sum(1 for i in issues if i.severity is s) for s in Severity}
    click.echo()
    click.echo(
        f"Summary: {counts[Severity.CRITICAL]} critical, "
        f"{counts[Severity.MEDIUM]} medium, {counts[Severity.LOW]} low"
    )

    sys.exit(1 if counts[Severity.CRITICAL] else 0)

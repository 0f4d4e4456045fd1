"""CLI commands: boxlint diagram / boxlint types."""

from __future__ import annotations

import click

from boxlint.model.issue import Severity
from boxlint.visualizer import Visualizer


@click.command()
def types() -> None:
    """List the issue types that have diagrams."""
    for issue_type in Visualizer().supported_types():
        click.echo(issue_type)


@click.command()
@click.option("--type", "issue_type", required=True, help="Diagram type, e.g. fixed-dimensions.")
@click.option("--value", required=True, help="Offending value, e.g. 600px.")
@click.option("--suggestion", default="", help="Suggested fix shown on the AFTER side.")
@click.option(
    "--severity",
    type=click.Choice([s.value for s in Severity], case_sensitive=False),
    default=Severity.MEDIUM.value,
    show_default=True,
)
@click.option("--line", type=int, default=1, show_default=True)
@click.option("--selector", default=".element", show_default=True)
@click.option("--property", "prop", default="width", show_default=True)
def diagram(
    issue_type: str,
    value: str,
    suggestion: str,
    severity: str,
    line: int,
    selector: str,
    prop: str,
) -> None:
    """Render a single before/after diagram."""
    result = Visualizer().generate(
        {
            "type": issue_type,
            "severity": severity,
            "line": line,
            "selector": selector,
            "property": prop,
            "value": value,
            "suggestion": suggestion,
        }
    )
    click.echo(result.ascii)

"""Generator registry and the Visualizer entry point.

The registry maps issue-type tags to generator factories and builds each
generator on first use. The Visualizer wraps it with input validation,
timing, and failure containment: ``Visualizer.generate`` always returns a
Visualization, never raises.
"""

from __future__ import annotations

import logging
import math
import textwrap
import time
from collections.abc import Mapping
from typing import Any, Callable

from boxlint.errors import GenerationError, InvalidIssueError
from boxlint.model.issue import Severity
from boxlint.model.visual import Category, Visualization, VisualizerIssue
from boxlint.visualizer.cache import TemplateCache
from boxlint.visualizer.generators import DEFAULT_GENERATORS, BaseGenerator
from boxlint.visualizer.generators.base import INNER_WIDTH, MAX_WIDTH, box_bottom, box_row, box_top
from boxlint.visualizer.palette import Chars, Glyphs
from boxlint.visualizer.text import truncate, visual_length

log = logging.getLogger("boxlint.visualizer")

BUDGET_MS = 50.0
ERROR_MESSAGE_ROWS = 4

GeneratorFactory = Callable[[], BaseGenerator]

REQUIRED_FIELDS = ("type", "severity", "line", "selector", "property", "value")


class GeneratorRegistry:
    """Maps issue types to lazily constructed generators."""

    def __init__(self) -> None:
        self._factories: dict[str, GeneratorFactory] = {}
        self._instances: dict[str, BaseGenerator] = {}

    def register(self, issue_type: str, factory: GeneratorFactory) -> None:
        """Register a factory; replaces any existing generator for the type."""
        self._factories[issue_type] = factory
        self._instances.pop(issue_type, None)

    def get(self, issue_type: str) -> BaseGenerator | None:
        """The generator for *issue_type*, constructing it on first request."""
        instance = self._instances.get(issue_type)
        if instance is not None:
            return instance
        factory = self._factories.get(issue_type)
        if factory is None:
            return None
        instance = factory()
        self._instances[issue_type] = instance
        log.debug("instantiated generator for %s", issue_type)
        return instance

    def supports(self, issue_type: str) -> bool:
        return issue_type in self._factories

    def supported_types(self) -> list[str]:
        return sorted(self._factories)

    @property
    def instantiated(self) -> list[str]:
        """Types whose generator has been built so far."""
        return sorted(self._instances)


def create_default_registry(cache: TemplateCache | None = None) -> GeneratorRegistry:
    """Create a GeneratorRegistry with all twelve generators registered.

    Args:
        cache: Shared body cache handed to every generator. A fresh
            100-entry cache is created if None.
    """
    cache = cache if cache is not None else TemplateCache(max_size=100)
    registry = GeneratorRegistry()
    for issue_type, generator_cls in DEFAULT_GENERATORS.items():
        registry.register(issue_type.value, lambda cls=generator_cls: cls(cache))
    return registry


# ---------------------------------------------------------------------------
# Input coercion
# ---------------------------------------------------------------------------


def coerce_issue(data: VisualizerIssue | Mapping[str, Any]) -> VisualizerIssue:
    """Build a VisualizerIssue from *data*, raising InvalidIssueError on bad input."""
    if isinstance(data, VisualizerIssue):
        fields = {name: getattr(data, name) for name in REQUIRED_FIELDS}
        extra = {"suggestion": data.suggestion, "category": data.category}
    elif isinstance(data, Mapping):
        fields = {name: data.get(name) for name in REQUIRED_FIELDS}
        extra = {
            "suggestion": data.get("suggestion") or "",
            "category": data.get("category") or Category.OTHER,
        }
    else:
        raise InvalidIssueError(f"Expected an issue mapping, got {type(data).__name__}")

    # Empty strings count as missing.
    missing = [name for name, value in fields.items() if value is None or value == ""]
    if missing:
        raise InvalidIssueError(f"Missing required field(s): {', '.join(missing)}")

    line = fields["line"]
    if isinstance(line, bool) or not isinstance(line, (int, float)) or not math.isfinite(line):
        raise InvalidIssueError(f"Field 'line' must be a number, got {line!r}")
    for name in ("type", "selector", "property", "value"):
        if not isinstance(fields[name], str):
            raise InvalidIssueError(f"Field {name!r} must be a string")
    try:
        severity = Severity.parse(fields["severity"])
        category = Category(extra["category"])
    except ValueError as exc:
        raise InvalidIssueError(str(exc)) from exc

    return VisualizerIssue(
        type=fields["type"],
        severity=severity,
        line=int(line),
        selector=fields["selector"],
        property=fields["property"],
        value=fields["value"],
        suggestion=str(extra["suggestion"]),
        category=category,
    )


# ---------------------------------------------------------------------------
# Fallback diagrams
# ---------------------------------------------------------------------------


def error_diagram(message: str) -> Visualization:
    """A framed diagram carrying *message*, drawn from the shared palette."""
    rows = textwrap.wrap(message, INNER_WIDTH - 2) or [""]
    if len(rows) > ERROR_MESSAGE_ROWS:
        rows = rows[: ERROR_MESSAGE_ROWS - 1] + [truncate(" ".join(rows[ERROR_MESSAGE_ROWS - 1 :]), INNER_WIDTH - 2)]
    lines = [
        box_top(INNER_WIDTH),
        box_row(f" {Glyphs.MEDIUM} Visualization Error", INNER_WIDTH),
        Chars.V_LINE + Chars.H_LINE * INNER_WIDTH + Chars.V_LINE,
        *(box_row(" " + row, INNER_WIDTH) for row in rows),
        box_bottom(INNER_WIDTH),
    ]
    return Visualization(ascii="\n".join(lines), width=MAX_WIDTH, height=len(lines))


def unavailable_diagram(issue_type: str) -> Visualization:
    text = truncate(f"[{issue_type}] visualization not available", MAX_WIDTH)
    return Visualization(ascii=text, width=visual_length(text), height=1)


# ---------------------------------------------------------------------------
# Visualizer
# ---------------------------------------------------------------------------


class Visualizer:
    """Generates diagrams for issues, containing every failure."""

    def __init__(self, registry: GeneratorRegistry | None = None) -> None:
        self.registry = registry if registry is not None else create_default_registry()

    def generate(self, data: VisualizerIssue | Mapping[str, Any]) -> Visualization:
        start = time.perf_counter()
        try:
            issue = coerce_issue(data)
        except InvalidIssueError as exc:
            log.warning("invalid diagram input: %s", exc)
            return self._timed(error_diagram(exc.message), start)

        generator = self.registry.get(issue.type)
        if generator is None:
            return self._timed(unavailable_diagram(issue.type), start)

        try:
            result = generator.generate(issue)
        except Exception as exc:
            error = GenerationError(issue.type, str(exc) or type(exc).__name__, cause=exc)
            log.warning("%s", error, exc_info=True)
            return self._timed(error_diagram(error.message), start)

        result = self._timed(result, start)
        if result.generation_time_ms > BUDGET_MS:
            log.warning(
                "diagram for %s took %.1fms (budget %.0fms)",
                issue.type,
                result.generation_time_ms,
                BUDGET_MS,
            )
        return result

    def generate_all(self, issues: list[VisualizerIssue | Mapping[str, Any]]) -> list[Visualization]:
        return [self.generate(issue) for issue in issues]

    def supported_types(self) -> list[str]:
        return self.registry.supported_types()

    @staticmethod
    def _timed(result: Visualization, start: float) -> Visualization:
        elapsed = (time.perf_counter() - start) * 1000
        return Visualization(
            ascii=result.ascii,
            width=result.width,
            height=result.height,
            generation_time_ms=elapsed,
        )

"""Diagram generators, one per issue type."""

from boxlint.model.visual import IssueType
from boxlint.visualizer.generators.absolute_rigidity import AbsoluteRigidityGenerator
from boxlint.visualizer.generators.base import BaseGenerator
from boxlint.visualizer.generators.box_inconsistency import BoxInconsistencyGenerator
from boxlint.visualizer.generators.breakpoint_exceeded import BreakpointExceededGenerator
from boxlint.visualizer.generators.fixed_dimensions import FixedDimensionsGenerator
from boxlint.visualizer.generators.fixed_spacing import FixedSpacingGenerator
from boxlint.visualizer.generators.flex_fragility import FlexFragilityGenerator
from boxlint.visualizer.generators.grid_rigidity import GridRigidityGenerator
from boxlint.visualizer.generators.media_instability import MediaInstabilityGenerator
from boxlint.visualizer.generators.nowrap_fixed import NowrapFixedGenerator
from boxlint.visualizer.generators.overflow_horizontal import OverflowHorizontalGenerator
from boxlint.visualizer.generators.overflow_masking import OverflowMaskingGenerator
from boxlint.visualizer.generators.viewport_overflow import ViewportOverflowGenerator

__all__ = [
    "BaseGenerator",
    "FixedDimensionsGenerator",
    "ViewportOverflowGenerator",
    "FlexFragilityGenerator",
    "GridRigidityGenerator",
    "FixedSpacingGenerator",
    "MediaInstabilityGenerator",
    "OverflowMaskingGenerator",
    "BreakpointExceededGenerator",
    "AbsoluteRigidityGenerator",
    "BoxInconsistencyGenerator",
    "OverflowHorizontalGenerator",
    "NowrapFixedGenerator",
    "DEFAULT_GENERATORS",
]

DEFAULT_GENERATORS: dict[IssueType, type[BaseGenerator]] = {
    IssueType.FIXED_DIMENSIONS: FixedDimensionsGenerator,
    IssueType.VIEWPORT_OVERFLOW: ViewportOverflowGenerator,
    IssueType.FLEX_FRAGILITY: FlexFragilityGenerator,
    IssueType.GRID_RIGIDITY: GridRigidityGenerator,
    IssueType.FIXED_SPACING: FixedSpacingGenerator,
    IssueType.MEDIA_INSTABILITY: MediaInstabilityGenerator,
    IssueType.OVERFLOW_MASKING: OverflowMaskingGenerator,
    IssueType.BREAKPOINT_EXCEEDED: BreakpointExceededGenerator,
    IssueType.ABSOLUTE_RIGIDITY: AbsoluteRigidityGenerator,
    IssueType.BOX_INCONSISTENCY: BoxInconsistencyGenerator,
    IssueType.OVERFLOW_HORIZONTAL: OverflowHorizontalGenerator,
    IssueType.NOWRAP_FIXED: NowrapFixedGenerator,
}

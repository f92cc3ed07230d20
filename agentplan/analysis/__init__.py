"""Validation, graph queries and layout for plans."""

from agentplan.analysis.layout import (
    Bounds,
    LayoutConfig,
    LayoutResult,
    PositionedEdge,
    PositionedNode,
    calculate_bounds,
    compute_levels,
    plan_to_positions,
)
from agentplan.analysis.topology import (
    build_adjacency,
    in_degrees,
    root_agents,
    terminal_agents,
)
from agentplan.analysis.validator import (
    CYCLE_ERROR,
    ValidationResult,
    find_cycle_node,
    validate_plan,
)

__all__ = [
    # layout exports
    "Bounds",
    "LayoutConfig",
    "LayoutResult",
    "PositionedEdge",
    "PositionedNode",
    "calculate_bounds",
    "compute_levels",
    "plan_to_positions",
    # topology exports
    "build_adjacency",
    "in_degrees",
    "root_agents",
    "terminal_agents",
    # validator exports
    "CYCLE_ERROR",
    "ValidationResult",
    "find_cycle_node",
    "validate_plan",
]

"""Agent workflow planner: plain-English descriptions to validated agent DAGs."""

from agentplan.models.agent_plan import (
    Agent,
    AgentInput,
    AgentOutput,
    AgentType,
    DataSchema,
    Edge,
    Plan,
)
from agentplan.planning.planner import (
    Planner,
    PlannerConfig,
    get_template,
    plan_from_description,
)
from agentplan.analysis.validator import ValidationResult, validate_plan
from agentplan.analysis.layout import LayoutResult, plan_to_positions
from agentplan.export.mermaid import to_flow_diagram, to_sequence_diagram
from agentplan.export.json_export import export_filename, plan_to_json

__all__ = [
    # Plan model
    "Agent",
    "AgentInput",
    "AgentOutput",
    "AgentType",
    "DataSchema",
    "Edge",
    "Plan",
    # Planner
    "Planner",
    "PlannerConfig",
    "get_template",
    "plan_from_description",
    # Validation and layout
    "ValidationResult",
    "validate_plan",
    "LayoutResult",
    "plan_to_positions",
    # Exports
    "to_flow_diagram",
    "to_sequence_diagram",
    "export_filename",
    "plan_to_json",
]

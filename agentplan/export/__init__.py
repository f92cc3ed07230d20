"""Text exports for plans: Mermaid diagrams and JSON documents."""

from agentplan.export.json_export import (
    export_filename,
    plan_from_json,
    plan_to_dict,
    plan_to_json,
)
from agentplan.export.mermaid import (
    edge_label,
    escape_label,
    to_flow_diagram,
    to_sequence_diagram,
)

__all__ = [
    "export_filename",
    "plan_from_json",
    "plan_to_dict",
    "plan_to_json",
    "edge_label",
    "escape_label",
    "to_flow_diagram",
    "to_sequence_diagram",
]

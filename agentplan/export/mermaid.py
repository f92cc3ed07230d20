"""Mermaid diagram generation.

Renders a plan as a left-to-right flowchart or as a sequence diagram. Output
is a pure function of the plan so it can be snapshot-tested.
"""

import re

from agentplan.analysis.topology import root_agents, terminal_agents
from agentplan.models.agent_plan import Plan
from agentplan.models.archetypes import archetype_color
from agentplan.utils.identifiers import sanitize_id, slot_label, truncate

SUMMARY_LABEL_LENGTH = 35
USER_PARTICIPANT = "User"

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def escape_label(text: str) -> str:
    """Substitute characters that would end a Mermaid label early.

    Line breaks become spaces so a declaration stays on one line.
    """
    text = _LINE_BREAK.sub(" ", text)
    return text.replace('"', "'").replace("[", "(").replace("]", ")")


def edge_label(slot_name: str) -> str:
    """Escaped label for a `-->|...|` handoff; a pipe would close it."""
    return escape_label(slot_label(slot_name)).replace("|", "/")


def to_flow_diagram(plan: Plan) -> str:
    """Generate a `flowchart LR` diagram with labeled handoffs and archetype colors."""
    lines = ["flowchart LR", ""]

    lines.append("  %% Agent Nodes")
    for agent in plan.agents:
        label = escape_label(f"{agent.name}\\n{truncate(agent.summary, SUMMARY_LABEL_LENGTH)}")
        lines.append(f'  {sanitize_id(agent.id)}["{label}"]')
    lines.append("")

    lines.append("  %% Data Handoffs")
    for edge in plan.edges:
        lines.append(f"  {sanitize_id(edge.source)} -->|{edge_label(edge.data)}| {sanitize_id(edge.target)}")
    lines.append("")

    lines.append("  %% Agent Type Styling")
    for agent in plan.agents:
        color = archetype_color(agent.type)
        lines.append(f"  style {sanitize_id(agent.id)} fill:{color},color:#fff,stroke:{color}")

    return "\n".join(lines)


def to_sequence_diagram(plan: Plan) -> str:
    """Generate a `sequenceDiagram` from the user through roots to terminals."""
    lines = ["sequenceDiagram", f"  participant {USER_PARTICIPANT}"]

    for agent in plan.agents:
        lines.append(f"  participant {sanitize_id(agent.id)} as {escape_label(agent.name)}")
    lines.append("")

    for root_id in root_agents(plan):
        lines.append(f"  {USER_PARTICIPANT}->>+{sanitize_id(root_id)}: Start")

    for edge in plan.edges:
        label = escape_label(slot_label(edge.data))
        lines.append(f"  {sanitize_id(edge.source)}->>+{sanitize_id(edge.target)}: {label}")

    for terminal_id in terminal_agents(plan):
        lines.append(f"  {sanitize_id(terminal_id)}-->>-{USER_PARTICIPANT}: Complete")

    return "\n".join(lines)

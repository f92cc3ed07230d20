"""Semantic validation of a plan beyond its schema.

Checks:
1. agent ids are unique
2. edges reference existing agents
3. non-root inputs reference existing agents
4. output slots of non-terminal agents are carried by an outgoing edge (warning)
5. the agent graph has no cycle

The validator only reports; it never edits or rejects the plan itself.
Message wording is stable so callers and tests can match on it.
"""

import logging
from dataclasses import dataclass, field

from agentplan.analysis.topology import build_adjacency
from agentplan.models.agent_plan import Plan

logger = logging.getLogger(__name__)

CYCLE_ERROR = "The workflow contains a cycle, which is not allowed"


@dataclass
class ValidationResult:
    """Outcome of validate_plan. ok is True iff errors is empty."""

    ok: bool
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def find_cycle_node(adjacency: dict[str, list[str]], order: list[str]) -> str | None:
    """Return the node closing the first cycle found, or None for a DAG.

    Depth-first search with an explicit stack, started from each unvisited
    node in `order`. A neighbor that is still on the current path is a back
    edge; the search stops there. Neighbors without an adjacency entry are
    treated as leaves.
    """
    visited: set[str] = set()
    on_path: set[str] = set()

    for root in order:
        if root in visited:
            continue
        visited.add(root)
        on_path.add(root)
        stack = [(root, iter(adjacency.get(root, ())))]

        while stack:
            node, neighbors = stack[-1]
            for neighbor in neighbors:
                if neighbor not in visited:
                    visited.add(neighbor)
                    on_path.add(neighbor)
                    stack.append((neighbor, iter(adjacency.get(neighbor, ()))))
                    break
                if neighbor in on_path:
                    return neighbor
            else:
                on_path.discard(node)
                stack.pop()

    return None


def validate_plan(plan: Plan) -> ValidationResult:
    """Validate referential integrity and acyclicity of a plan.

    Every check runs regardless of earlier findings, so one bad reference
    never hides others.
    """
    errors: list[str] = []
    warnings: list[str] = []

    agent_ids: set[str] = set()
    for agent in plan.agents:
        if agent.id in agent_ids:
            errors.append(f"Duplicate agent id: '{agent.id}'")
        agent_ids.add(agent.id)

    for edge in plan.edges:
        if edge.source not in agent_ids:
            errors.append(f"Edge references unknown source agent: '{edge.source}'")
        if edge.target not in agent_ids:
            errors.append(f"Edge references unknown target agent: '{edge.target}'")

    for agent in plan.agents:
        for agent_input in agent.inputs:
            if agent_input.source is not None and agent_input.source not in agent_ids:
                errors.append(
                    f"Agent '{agent.name}' input '{agent_input.name}' "
                    f"references unknown agent: '{agent_input.source}'"
                )

    # terminal agents are exempt; their outputs are final results
    carried = {(edge.source, edge.data) for edge in plan.edges}
    has_outgoing = {edge.source for edge in plan.edges}
    for agent in plan.agents:
        if agent.id not in has_outgoing:
            continue
        for output in agent.outputs:
            if (agent.id, output.name) not in carried:
                warnings.append(
                    f"Agent '{agent.name}' output '{output.name}' is not consumed by any edge"
                )

    if find_cycle_node(build_adjacency(plan), plan.agent_ids()) is not None:
        errors.append(CYCLE_ERROR)

    logger.debug(
        "validated plan %r: %d errors, %d warnings",
        plan.title,
        len(errors),
        len(warnings),
    )
    return ValidationResult(ok=not errors, errors=errors, warnings=warnings)

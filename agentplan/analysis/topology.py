"""Graph queries over a plan's agents and edges."""

from agentplan.models.agent_plan import Plan


def build_adjacency(plan: Plan) -> dict[str, list[str]]:
    """Map each source id to its target ids, in edge order.

    Edges whose source is not a declared agent are skipped; targets are
    kept as written, even when unknown.
    """
    adjacency: dict[str, list[str]] = {agent.id: [] for agent in plan.agents}
    for edge in plan.edges:
        if edge.source in adjacency:
            adjacency[edge.source].append(edge.target)
    return adjacency


def in_degrees(plan: Plan) -> dict[str, int]:
    """Number of incoming edges per declared agent."""
    degrees = {agent.id: 0 for agent in plan.agents}
    for edge in plan.edges:
        if edge.source in degrees and edge.target in degrees:
            degrees[edge.target] += 1
    return degrees


def root_agents(plan: Plan) -> list[str]:
    """Agents with no incoming edge, in declaration order."""
    has_incoming = {edge.target for edge in plan.edges}
    return [agent.id for agent in plan.agents if agent.id not in has_incoming]


def terminal_agents(plan: Plan) -> list[str]:
    """Agents with no outgoing edge, in declaration order."""
    has_outgoing = {edge.source for edge in plan.edges}
    return [agent.id for agent in plan.agents if agent.id not in has_outgoing]

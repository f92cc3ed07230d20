"""Left-to-right layout for plan graphs.

Agents are assigned topological levels with Kahn's algorithm; each level is
a column and agents within a column are stacked in declaration order,
centered on y = 0. The layout assumes a validated (acyclic) plan: agents
that never reach in-degree zero get no level and are reported in
LayoutResult.unplaced instead of being positioned.
"""

import logging
from collections import deque
from dataclasses import dataclass, field

from agentplan.analysis.topology import build_adjacency, in_degrees
from agentplan.models.agent_plan import Plan
from agentplan.models.archetypes import archetype_color, archetype_icon

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutConfig:
    node_width: int = 280
    node_height: int = 100
    horizontal_gap: int = 100
    vertical_gap: int = 40


@dataclass
class PositionedNode:
    """An agent placed on the canvas."""

    id: str
    level: int
    x: float
    y: float
    label: str
    agent_type: str
    color: str
    icon: str


@dataclass
class PositionedEdge:
    """A handoff between two placed agents; routing is left to the renderer."""

    id: str
    source: str
    target: str
    label: str
    source_position: tuple[float, float]
    target_position: tuple[float, float]


@dataclass
class Bounds:
    min_x: float
    max_x: float
    min_y: float
    max_y: float


@dataclass
class LayoutResult:
    nodes: list[PositionedNode]
    edges: list[PositionedEdge]
    unplaced: list[str] = field(default_factory=list)

    @property
    def positions(self) -> dict[str, tuple[float, float]]:
        """Map of agent id to (x, y)."""
        return {node.id: (node.x, node.y) for node in self.nodes}


def compute_levels(plan: Plan) -> dict[str, int]:
    """Topological level per agent, for agents that reach in-degree zero.

    A neighbor reached from several predecessors takes the maximum level,
    so every predecessor sits strictly to its left.
    """
    adjacency = build_adjacency(plan)
    remaining = in_degrees(plan)

    levels: dict[str, int] = {}
    queue: deque[str] = deque()
    for agent in plan.agents:
        if remaining[agent.id] == 0 and agent.id not in levels:
            levels[agent.id] = 0
            queue.append(agent.id)

    tentative: dict[str, int] = {}
    while queue:
        current = queue.popleft()
        current_level = levels[current]
        for neighbor in adjacency[current]:
            if neighbor not in remaining:
                continue
            tentative[neighbor] = max(tentative.get(neighbor, 0), current_level + 1)
            remaining[neighbor] -= 1
            if remaining[neighbor] == 0:
                levels[neighbor] = tentative[neighbor]
                queue.append(neighbor)

    return levels


def plan_to_positions(plan: Plan, config: LayoutConfig | None = None) -> LayoutResult:
    """Assign deterministic (x, y) positions to every agent of a plan."""
    config = config or LayoutConfig()
    levels = compute_levels(plan)

    columns: dict[int, list] = {}
    unplaced: list[str] = []
    for agent in plan.agents:
        level = levels.get(agent.id)
        if level is None:
            unplaced.append(agent.id)
            continue
        column = columns.setdefault(level, [])
        if all(placed.id != agent.id for placed in column):
            column.append(agent)

    nodes: list[PositionedNode] = []
    for level in sorted(columns):
        agents = columns[level]
        x = float(level * (config.node_width + config.horizontal_gap))
        total_height = len(agents) * config.node_height + (len(agents) - 1) * config.vertical_gap
        start_y = -total_height / 2
        for index, agent in enumerate(agents):
            nodes.append(PositionedNode(
                id=agent.id,
                level=level,
                x=x,
                y=start_y + index * (config.node_height + config.vertical_gap),
                label=agent.name,
                agent_type=agent.type.value,
                color=archetype_color(agent.type),
                icon=archetype_icon(agent.type),
            ))

    if unplaced:
        logger.warning("layout left %d agents unplaced: %s", len(unplaced), ", ".join(unplaced))

    positions = {node.id: (node.x, node.y) for node in nodes}
    edges = [
        PositionedEdge(
            id=f"edge-{index}",
            source=edge.source,
            target=edge.target,
            label=edge.data.replace("_", " "),
            source_position=positions[edge.source],
            target_position=positions[edge.target],
        )
        for index, edge in enumerate(plan.edges)
        if edge.source in positions and edge.target in positions
    ]

    return LayoutResult(nodes=nodes, edges=edges, unplaced=unplaced)


def calculate_bounds(layout: LayoutResult, config: LayoutConfig | None = None) -> Bounds:
    """Bounding box of all placed nodes, including node extents."""
    config = config or LayoutConfig()
    if not layout.nodes:
        return Bounds(min_x=0, max_x=400, min_y=0, max_y=300)

    return Bounds(
        min_x=min(node.x for node in layout.nodes),
        max_x=max(node.x + config.node_width for node in layout.nodes),
        min_y=min(node.y for node in layout.nodes),
        max_y=max(node.y + config.node_height for node in layout.nodes),
    )

"""Tests for level assignment and canvas positions."""

import logging

from agentplan.analysis.layout import (
    Bounds,
    LayoutConfig,
    LayoutResult,
    calculate_bounds,
    compute_levels,
    plan_to_positions,
)
from agentplan.models.agent_plan import Agent, AgentOutput, AgentType, Edge, Plan
from agentplan.models.archetypes import archetype_icon
from agentplan.planning.planner import get_template


def _plan(ids: list[str], edges: list[tuple[str, str]]) -> Plan:
    agents = [
        Agent(
            id=agent_id,
            name=f"Agent {agent_id}",
            type=AgentType.generator,
            summary="s",
            inputs=[],
            outputs=[AgentOutput(name="raw_data")],
        )
        for agent_id in ids
    ]
    return Plan(
        title="Layout",
        description="d",
        agents=agents,
        edges=[Edge(source=s, target=t, data="raw_data") for s, t in edges],
    )


class TestLevels:
    """Kahn levels with the maximum-predecessor rule."""

    def test_chain(self):
        plan = _plan(["a", "b", "c"], [("a", "b"), ("b", "c")])
        assert compute_levels(plan) == {"a": 0, "b": 1, "c": 2}

    def test_diamond(self):
        plan = _plan(["a", "b", "c", "d"], [("a", "b"), ("a", "c"), ("b", "d"), ("c", "d")])
        assert compute_levels(plan) == {"a": 0, "b": 1, "c": 1, "d": 2}

    def test_longest_path_wins(self):
        """A shortcut edge does not pull a node left of its deepest predecessor."""
        plan = _plan(["a", "b", "c"], [("a", "c"), ("a", "b"), ("b", "c")])
        assert compute_levels(plan)["c"] == 2

    def test_independent_roots(self):
        plan = _plan(["a", "b"], [])
        assert compute_levels(plan) == {"a": 0, "b": 0}

    def test_unknown_endpoints_ignored(self):
        plan = _plan(["a", "b"], [("a", "b"), ("a", "ghost"), ("ghost", "b")])
        assert compute_levels(plan) == {"a": 0, "b": 1}


class TestPositions:
    """x from level, y stacked and centered within a column."""

    def test_chain_columns(self):
        layout = plan_to_positions(_plan(["a", "b", "c"], [("a", "b"), ("b", "c")]))
        assert layout.positions == {
            "a": (0.0, -50.0),
            "b": (380.0, -50.0),
            "c": (760.0, -50.0),
        }
        assert layout.unplaced == []

    def test_shared_level_is_centered(self):
        layout = plan_to_positions(_plan(["a", "b", "c"], [("a", "b"), ("a", "c")]))
        assert layout.positions["b"] == (380.0, -120.0)
        assert layout.positions["c"] == (380.0, 20.0)

    def test_column_order_follows_declaration(self):
        plan = _plan(["a", "z", "m"], [("a", "m"), ("a", "z")])
        layout = plan_to_positions(plan)
        assert [node.id for node in layout.nodes] == ["a", "z", "m"]

    def test_node_metadata(self):
        layout = plan_to_positions(_plan(["a"], []))
        node = layout.nodes[0]
        assert node.level == 0
        assert node.label == "Agent a"
        assert node.agent_type == "Generator"
        assert node.color == "#D53F8C"
        assert node.icon == archetype_icon(AgentType.generator)

    def test_custom_config(self):
        config = LayoutConfig(node_width=100, node_height=50, horizontal_gap=20, vertical_gap=10)
        layout = plan_to_positions(_plan(["a", "b"], [("a", "b")]), config)
        assert layout.positions["b"] == (120.0, -25.0)

    def test_deterministic(self):
        plan = get_template("support-triage")
        assert plan_to_positions(plan) == plan_to_positions(plan)


class TestEdges:
    def test_labels_and_endpoints(self):
        layout = plan_to_positions(_plan(["a", "b"], [("a", "b")]))
        edge = layout.edges[0]
        assert edge.id == "edge-0"
        assert edge.label == "raw data"
        assert edge.source_position == (0.0, -50.0)
        assert edge.target_position == (380.0, -50.0)

    def test_edges_to_unknown_agents_dropped(self):
        layout = plan_to_positions(_plan(["a", "b"], [("a", "ghost"), ("a", "b")]))
        assert [(edge.id, edge.target) for edge in layout.edges] == [("edge-1", "b")]


class TestCycles:
    """Agents that never reach in-degree zero are reported, not placed."""

    def test_cycle_members_unplaced(self, caplog):
        plan = _plan(["a", "b", "c"], [("a", "b"), ("b", "c"), ("c", "b")])
        with caplog.at_level(logging.WARNING, logger="agentplan.analysis.layout"):
            layout = plan_to_positions(plan)

        assert layout.unplaced == ["b", "c"]
        assert list(layout.positions) == ["a"]
        assert layout.edges == []
        assert "unplaced" in caplog.text


class TestBounds:
    def test_bounds_include_node_extent(self):
        layout = plan_to_positions(_plan(["a", "b", "c"], [("a", "b"), ("a", "c")]))
        assert calculate_bounds(layout) == Bounds(min_x=0.0, max_x=660.0, min_y=-120.0, max_y=120.0)

    def test_empty_layout_default(self):
        assert calculate_bounds(LayoutResult(nodes=[], edges=[])) == Bounds(
            min_x=0, max_x=400, min_y=0, max_y=300
        )

"""Tests for semantic plan validation."""

from agentplan.analysis.validator import CYCLE_ERROR, find_cycle_node, validate_plan
from agentplan.models.agent_plan import (
    Agent,
    AgentInput,
    AgentOutput,
    AgentType,
    Edge,
    Plan,
)


def _agent(agent_id: str, outputs: tuple[str, ...] = ("out",), source: str | None = None) -> Agent:
    return Agent(
        id=agent_id,
        name=agent_id.upper(),
        type=AgentType.extractor,
        summary=f"Step {agent_id}",
        inputs=[AgentInput(source=source, name="in")],
        outputs=[AgentOutput(name=name) for name in outputs],
    )


def _plan(agents: list[Agent], edges: list[tuple[str, str, str]]) -> Plan:
    return Plan(
        title="Test Plan",
        description="test",
        agents=agents,
        edges=[Edge(source=s, target=t, data=d) for s, t, d in edges],
    )


class TestCycleDetection:
    """Back edges make a plan invalid; forward chains do not."""

    def test_three_node_cycle(self):
        plan = _plan(
            [_agent("a"), _agent("b"), _agent("c")],
            [("a", "b", "out"), ("b", "c", "out"), ("c", "a", "out")],
        )
        result = validate_plan(plan)
        assert not result.ok
        assert result.errors == [CYCLE_ERROR]

    def test_same_nodes_without_back_edge(self):
        plan = _plan(
            [_agent("a"), _agent("b"), _agent("c")],
            [("a", "b", "out"), ("b", "c", "out")],
        )
        result = validate_plan(plan)
        assert result.ok
        assert result.errors == []

    def test_self_loop(self):
        plan = _plan([_agent("a")], [("a", "a", "out")])
        assert validate_plan(plan).errors == [CYCLE_ERROR]

    def test_cycle_in_disconnected_component(self):
        """Every agent is a DFS root, so isolated components are covered."""
        plan = _plan(
            [_agent("x"), _agent("a"), _agent("b")],
            [("a", "b", "out"), ("b", "a", "out")],
        )
        assert CYCLE_ERROR in validate_plan(plan).errors

    def test_reported_once(self):
        """Two independent cycles still yield a single cycle error."""
        plan = _plan(
            [_agent("a"), _agent("b"), _agent("c"), _agent("d")],
            [("a", "b", "out"), ("b", "a", "out"), ("c", "d", "out"), ("d", "c", "out")],
        )
        assert validate_plan(plan).errors.count(CYCLE_ERROR) == 1

    def test_diamond_is_not_a_cycle(self):
        """Reaching a finished node twice is a cross edge, not a back edge."""
        adjacency = {"a": ["b", "c"], "b": ["d"], "c": ["d"], "d": []}
        assert find_cycle_node(adjacency, ["a", "b", "c", "d"]) is None

    def test_deep_chain_does_not_recurse(self):
        """Long chains are walked iteratively."""
        size = 5000
        adjacency = {str(i): [str(i + 1)] for i in range(size)}
        adjacency[str(size)] = []
        assert find_cycle_node(adjacency, list(adjacency)) is None
        adjacency[str(size)] = ["0"]
        assert find_cycle_node(adjacency, list(adjacency)) == "0"


class TestDanglingReferences:
    """Unknown ids are errors, reported alongside every other finding."""

    def test_unknown_edge_target(self):
        plan = _plan([_agent("a"), _agent("b")], [("a", "b", "out"), ("b", "ghost", "out")])
        result = validate_plan(plan)
        assert not result.ok
        assert result.errors == ["Edge references unknown target agent: 'ghost'"]

    def test_unknown_edge_source(self):
        plan = _plan([_agent("a")], [("ghost", "a", "out")])
        assert validate_plan(plan).errors == ["Edge references unknown source agent: 'ghost'"]

    def test_errors_are_additive(self):
        """A bad edge does not stop the other checks."""
        plan = _plan(
            [_agent("a"), _agent("b", source="missing"), _agent("c")],
            [("a", "b", "out"), ("b", "c", "out"), ("c", "b", "out"), ("nobody", "a", "out")],
        )
        result = validate_plan(plan)
        assert result.errors == [
            "Edge references unknown source agent: 'nobody'",
            "Agent 'B' input 'in' references unknown agent: 'missing'",
            CYCLE_ERROR,
        ]

    def test_root_inputs_always_valid(self):
        plan = _plan([_agent("a")], [])
        assert validate_plan(plan).ok

    def test_duplicate_agent_ids(self):
        plan = _plan([_agent("a"), _agent("a")], [])
        assert validate_plan(plan).errors == ["Duplicate agent id: 'a'"]


class TestOrphanedOutputs:
    """Unconsumed outputs of non-terminal agents are warnings."""

    def test_partially_consumed_outputs_warn_per_slot(self):
        plan = _plan(
            [_agent("a", outputs=("summary", "details", "extra")), _agent("b")],
            [("a", "b", "summary")],
        )
        result = validate_plan(plan)
        assert result.ok
        assert result.warnings == [
            "Agent 'A' output 'details' is not consumed by any edge",
            "Agent 'A' output 'extra' is not consumed by any edge",
        ]

    def test_terminal_agents_exempt(self):
        plan = _plan([_agent("a"), _agent("b", outputs=("final", "log"))], [("a", "b", "out")])
        assert validate_plan(plan).warnings == []

    def test_slot_must_travel_on_own_edge(self):
        """An edge from another agent carrying the same name does not count."""
        plan = _plan(
            [_agent("a", outputs=("shared",)), _agent("b", outputs=("shared",)), _agent("c")],
            [("a", "c", "other"), ("b", "c", "shared")],
        )
        assert validate_plan(plan).warnings == [
            "Agent 'A' output 'shared' is not consumed by any edge",
        ]


class TestDeterminism:
    def test_repeated_calls_match(self):
        plan = _plan(
            [_agent("a", outputs=("x", "y")), _agent("b")],
            [("a", "b", "x"), ("a", "ghost", "x")],
        )
        assert validate_plan(plan) == validate_plan(plan)

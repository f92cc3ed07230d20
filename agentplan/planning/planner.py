"""Deterministic text-to-plan planner.

Maps common verbs to agent archetypes and chains the resulting agents
linearly, one per step of the description. This is a stand-in for a semantic
planner: it never infers branching or joins from free text.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Mapping

from agentplan.models.agent_plan import (
    Agent,
    AgentInput,
    AgentOutput,
    AgentType,
    DataSchema,
    Edge,
    Plan,
)
from agentplan.models.archetypes import ARCHETYPE_PROFILES, ArchetypeProfile, output_fields_for
from agentplan.planning.rules import (
    DEFAULT_RULES,
    FALLBACK_AGENT_TYPE,
    FALLBACK_TOOLS,
    OUTPUT_NOUNS,
    VERB_OUTPUTS,
    ArchetypeRule,
    classify_step,
)
from agentplan.planning.templates import DEFAULT_TEMPLATES, TemplateRegistry

logger = logging.getLogger(__name__)

MAX_AGENT_NAME_LENGTH = 30
MAX_TITLE_LENGTH = 50
TITLE_WORDS = 5
ROOT_INPUT_NAME = "input_data"

# delimiter normalization, applied in order
_STEP_DELIMITERS: tuple[re.Pattern, ...] = (
    re.compile(r",\s*and\s+then\s*", re.IGNORECASE),
    re.compile(r"\s+and\s+then\s+", re.IGNORECASE),
    re.compile(r"\s+then\s+", re.IGNORECASE),
    re.compile(r"\.\s+"),
    re.compile(r",\s*and\s+", re.IGNORECASE),
)
_COMMA_SPLIT = re.compile(r",\s*")


@dataclass(frozen=True)
class PlannerConfig:
    """Immutable lookup tables the planner works from."""

    rules: tuple[ArchetypeRule, ...] = DEFAULT_RULES
    fallback_type: AgentType = FALLBACK_AGENT_TYPE
    fallback_tools: tuple[str, ...] = FALLBACK_TOOLS
    output_nouns: tuple[str, ...] = OUTPUT_NOUNS
    verb_outputs: Mapping[str, str] = field(default_factory=lambda: VERB_OUTPUTS)
    profiles: Mapping[AgentType, ArchetypeProfile] = field(default_factory=lambda: ARCHETYPE_PROFILES)
    templates: TemplateRegistry = DEFAULT_TEMPLATES


def parse_steps(description: str) -> list[str]:
    """Split a description into ordered step fragments.

    "then", "and then", sentence breaks and ", and" all become commas;
    fragments of three characters or fewer are dropped and one trailing
    period is removed.
    """
    normalized = description
    for delimiter in _STEP_DELIMITERS:
        normalized = delimiter.sub(", ", normalized)

    steps = []
    for part in _COMMA_SPLIT.split(normalized):
        part = part.strip()
        if len(part) <= 3:
            continue
        if part.endswith("."):
            part = part[:-1]
        steps.append(part)
    return steps


def _capitalize(text: str) -> str:
    return text[:1].upper() + text[1:]


def generate_title(description: str) -> str:
    words = description.split()[:TITLE_WORDS]
    return _capitalize(" ".join(words))[:MAX_TITLE_LENGTH] + " Workflow"


def generate_agent_name(step: str, agent_type: AgentType) -> str:
    """Display name: verb, next one or two words, archetype; cut to the display length."""
    words = step.split()
    verb = words[0] if words else ""
    obj = " ".join(words[1:3]) or "Data"
    return f"{_capitalize(verb)} {_capitalize(obj)} {agent_type.value}"[:MAX_AGENT_NAME_LENGTH]


class Planner:
    """Builds plans from descriptions or template ids."""

    def __init__(self, config: PlannerConfig | None = None) -> None:
        self.config = config or PlannerConfig()

    def get_template(self, template_id: str) -> Plan | None:
        """Return the canned plan for template_id, or None if unknown."""
        return self.config.templates.get(template_id)

    def output_name(self, step: str, index: int) -> str:
        """Name of the output slot produced by the step at index."""
        words = step.lower().split()
        for noun in self.config.output_nouns:
            if any(noun in word for word in words):
                return f"{noun}_output"

        verb = words[0] if words else "process"
        return self.config.verb_outputs.get(verb, f"step_{index + 1}_output")

    def fallback_plan(self, description: str) -> Plan:
        """Single orchestrator plan for descriptions with no usable steps."""
        return Plan(
            title="Custom Workflow",
            description=description,
            agents=[
                Agent(
                    id="orchestrator",
                    name="Workflow Orchestrator",
                    type=AgentType.orchestrator,
                    summary="Coordinates the workflow execution",
                    inputs=[AgentInput(name=ROOT_INPUT_NAME)],
                    outputs=[AgentOutput(name="output_data")],
                    suggested_tools=["Workflow Engine"],
                ),
            ],
            edges=[],
        )

    def plan_from_description(self, description: str) -> Plan:
        """Build a plan from a plain-English description.

        Total over strings: descriptions matching a template's keywords
        return that template, anything without usable steps returns the
        single-agent fallback plan.
        """
        template = self.config.templates.match(description)
        if template is not None:
            logger.debug("description matched template %r", template.title)
            return template

        steps = parse_steps(description)
        if not steps:
            logger.debug("no steps parsed, returning fallback plan")
            return self.fallback_plan(description)

        agents: list[Agent] = []
        edges: list[Edge] = []
        data_schemas: dict[str, DataSchema] = {}
        previous_output: str | None = None

        for index, step in enumerate(steps):
            agent_id = f"agent-{index + 1}"
            agent_type, tools = classify_step(
                step,
                self.config.rules,
                self.config.fallback_type,
                self.config.fallback_tools,
            )
            output_name = self.output_name(step, index)

            if previous_output is None:
                inputs = [AgentInput(name=ROOT_INPUT_NAME)]
            else:
                previous_id = f"agent-{index}"
                inputs = [AgentInput(source=previous_id, name=previous_output)]
                edges.append(Edge(source=previous_id, target=agent_id, data=previous_output))

            agents.append(Agent(
                id=agent_id,
                name=generate_agent_name(step, agent_type),
                type=agent_type,
                summary=_capitalize(step.strip()),
                inputs=inputs,
                outputs=[AgentOutput(name=output_name)],
                suggested_tools=tools,
            ))
            data_schemas[output_name] = DataSchema(
                fields=output_fields_for(agent_type, self.config.profiles),
            )
            previous_output = output_name

        logger.debug("planned %d agents from %d steps", len(agents), len(steps))
        return Plan(
            title=generate_title(description),
            description=description,
            agents=agents,
            edges=edges,
            data_schemas=data_schemas,
        )


_default_planner = Planner()


def get_template(template_id: str) -> Plan | None:
    """Look up a canned plan in the default registry."""
    return _default_planner.get_template(template_id)


def plan_from_description(description: str) -> Plan:
    """Plan a description with the default rule set."""
    return _default_planner.plan_from_description(description)

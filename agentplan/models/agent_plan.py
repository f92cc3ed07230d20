"""Data model for agent workflow plans.

A plan is a DAG of agents connected by named data handoffs. The wire format
keeps the camelCase / keyword names used by the web client ("from", "to",
"suggestedTools", "dataSchemas"); python code uses the snake_case attributes.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

PLAN_VERSION = "0.1"


class AgentType(str, Enum):
    """Closed set of agent archetypes."""

    orchestrator = "Orchestrator"
    retriever = "Retriever"
    extractor = "Extractor"
    classifier = "Classifier"
    generator = "Generator"
    tool_executor = "ToolExecutor"
    human_gate = "HumanGate"
    notifier = "Notifier"


class _PlanModel(BaseModel):
    model_config = {
        "frozen": True,
        "extra": "forbid",
        "populate_by_name": True,
    }


class AgentInput(_PlanModel):
    """A named input slot. source is None for root/external inputs."""

    source: str | None = Field(default=None, alias="from")
    name: str = Field(min_length=1)


class AgentOutput(_PlanModel):
    """A named output slot."""

    name: str = Field(min_length=1)


class Agent(_PlanModel):
    """One workflow step."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    type: AgentType
    summary: str = Field(min_length=1)
    inputs: list[AgentInput]
    outputs: list[AgentOutput]
    suggested_tools: list[str] | None = Field(default=None, alias="suggestedTools")
    notes: list[str] | None = None


class Edge(_PlanModel):
    """A directed data handoff between two agents."""

    source: str = Field(min_length=1, alias="from")
    target: str = Field(min_length=1, alias="to")
    data: str = Field(min_length=1)  # should name one of source's outputs


class DataSchema(_PlanModel):
    fields: list[str]


class Plan(_PlanModel):
    """A complete workflow plan.

    Only the shape is enforced here. Referential integrity and acyclicity
    are reported by analysis.validator.validate_plan, which never edits
    the plan.
    """

    version: Literal["0.1"] = PLAN_VERSION
    title: str = Field(min_length=1)
    description: str  # raw natural-language input, may be empty
    agents: list[Agent] = Field(min_length=1)
    edges: list[Edge]
    data_schemas: dict[str, DataSchema] | None = Field(default=None, alias="dataSchemas")
    notes: list[str] | None = None

    def agent_by_id(self, agent_id: str) -> Agent | None:
        for agent in self.agents:
            if agent.id == agent_id:
                return agent
        return None

    def agent_ids(self) -> list[str]:
        """Agent ids in declaration order."""
        return [agent.id for agent in self.agents]

"""Core data models for agent workflow plans."""

from agentplan.models.agent_plan import (
    PLAN_VERSION,
    Agent,
    AgentInput,
    AgentOutput,
    AgentType,
    DataSchema,
    Edge,
    Plan,
)
from agentplan.models.archetypes import (
    ARCHETYPE_PROFILES,
    ArchetypeProfile,
    archetype_color,
    archetype_icon,
    output_fields_for,
)

__all__ = [
    # Plan model
    "PLAN_VERSION",
    "Agent",
    "AgentInput",
    "AgentOutput",
    "AgentType",
    "DataSchema",
    "Edge",
    "Plan",
    # Archetype defaults
    "ARCHETYPE_PROFILES",
    "ArchetypeProfile",
    "archetype_color",
    "archetype_icon",
    "output_fields_for",
]

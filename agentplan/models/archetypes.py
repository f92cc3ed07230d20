"""Per-archetype presentation and schema defaults."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from agentplan.models.agent_plan import AgentType

# schema fields for archetypes missing from a profile table
DEFAULT_OUTPUT_FIELDS: tuple[str, ...] = ("data", "status")


@dataclass(frozen=True)
class ArchetypeProfile:
    """Fixed defaults attached to an archetype."""

    color: str
    icon: str
    output_fields: tuple[str, ...]


ARCHETYPE_PROFILES: Mapping[AgentType, ArchetypeProfile] = MappingProxyType({
    AgentType.orchestrator: ArchetypeProfile(
        color="#805AD5",  # purple
        icon="🎯",
        output_fields=("status", "timestamp", "metadata"),
    ),
    AgentType.retriever: ArchetypeProfile(
        color="#3182CE",  # blue
        icon="📥",
        output_fields=("raw_content", "source", "timestamp"),
    ),
    AgentType.extractor: ArchetypeProfile(
        color="#38A169",  # green
        icon="🔍",
        output_fields=("extracted_fields", "confidence", "raw_text"),
    ),
    AgentType.classifier: ArchetypeProfile(
        color="#DD6B20",  # orange
        icon="🏷️",
        output_fields=("category", "score", "confidence"),
    ),
    AgentType.generator: ArchetypeProfile(
        color="#D53F8C",  # pink
        icon="✍️",
        output_fields=("generated_text", "model_used", "tokens"),
    ),
    AgentType.tool_executor: ArchetypeProfile(
        color="#319795",  # teal
        icon="⚙️",
        output_fields=("result", "status_code", "api_response"),
    ),
    AgentType.human_gate: ArchetypeProfile(
        color="#E53E3E",  # red
        icon="👤",
        output_fields=("decision", "approver", "comments"),
    ),
    AgentType.notifier: ArchetypeProfile(
        color="#718096",  # gray
        icon="📣",
        output_fields=("sent_at", "recipient", "channel"),
    ),
})


def archetype_color(agent_type: AgentType) -> str:
    return ARCHETYPE_PROFILES[agent_type].color


def archetype_icon(agent_type: AgentType) -> str:
    return ARCHETYPE_PROFILES[agent_type].icon


def output_fields_for(
    agent_type: AgentType,
    profiles: Mapping[AgentType, ArchetypeProfile] = ARCHETYPE_PROFILES,
) -> list[str]:
    """Schema field template for an archetype's output slot."""
    profile = profiles.get(agent_type)
    if profile is None:
        return list(DEFAULT_OUTPUT_FIELDS)
    return list(profile.output_fields)

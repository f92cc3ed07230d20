"""Verb to archetype rules used by the deterministic planner.

Rules are evaluated in order and the first match wins, so the order of
DEFAULT_RULES is part of the behavior ("write" classifies as ToolExecutor
before the Generator rule is reached).
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from agentplan.models.agent_plan import AgentType


@dataclass(frozen=True)
class ArchetypeRule:
    """A (pattern, archetype, tools) entry of the rule table."""

    pattern: re.Pattern
    agent_type: AgentType
    tools: tuple[str, ...]

    @classmethod
    def from_words(cls, words: str, agent_type: AgentType, tools: tuple[str, ...]) -> "ArchetypeRule":
        """Build a rule matching any of the `|`-separated words on word boundaries."""
        return cls(re.compile(rf"\b({words})\b", re.IGNORECASE), agent_type, tools)

    def matches(self, step: str) -> bool:
        return self.pattern.search(step) is not None


DEFAULT_RULES: tuple[ArchetypeRule, ...] = (
    ArchetypeRule.from_words(
        "ingest|fetch|collect|retrieve|get|load|pull",
        AgentType.retriever,
        ("API Client", "File Reader", "Database Connector"),
    ),
    ArchetypeRule.from_words(
        "parse|extract|scrape|read",
        AgentType.extractor,
        ("Text Parser", "JSON Extractor", "Regex Matcher"),
    ),
    ArchetypeRule.from_words(
        "decide|route|classify|categorize|score|rank|filter",
        AgentType.classifier,
        ("Rule Engine", "ML Classifier", "Scoring Model"),
    ),
    ArchetypeRule.from_words(
        "create|update|write|insert|post|put|delete|call",
        AgentType.tool_executor,
        ("REST Client", "Database Writer", "Webhook Caller"),
    ),
    ArchetypeRule.from_words(
        "summarize|draft|write|generate|compose|create.*report",
        AgentType.generator,
        ("LLM", "Template Engine", "Report Builder"),
    ),
    ArchetypeRule.from_words(
        "approv|review|confirm|human|manual|escalate",
        AgentType.human_gate,
        ("Approval Queue", "Email Notification", "Slack Bot"),
    ),
    ArchetypeRule.from_words(
        "notify|alert|email|slack|send|message",
        AgentType.notifier,
        ("Email Service", "Slack API", "SMS Gateway", "Webhook"),
    ),
    ArchetypeRule.from_words(
        "enrich|augment|lookup|clearbit|external",
        AgentType.retriever,
        ("Clearbit API", "LinkedIn API", "Company Database"),
    ),
)

FALLBACK_AGENT_TYPE = AgentType.generator
FALLBACK_TOOLS: tuple[str, ...] = ("LLM", "Custom Logic")

# checked in order against every word of a step
OUTPUT_NOUNS: tuple[str, ...] = (
    "email",
    "data",
    "ticket",
    "lead",
    "report",
    "record",
    "message",
    "result",
    "response",
    "notification",
)

VERB_OUTPUTS: Mapping[str, str] = MappingProxyType({
    "ingest": "raw_data",
    "fetch": "fetched_data",
    "collect": "collected_data",
    "extract": "extracted_info",
    "parse": "parsed_data",
    "classify": "classification",
    "route": "routed_data",
    "score": "scored_data",
    "create": "created_record",
    "update": "updated_record",
    "generate": "generated_content",
    "summarize": "summary",
    "notify": "notification",
    "email": "email_sent",
    "approve": "approved_data",
})


def classify_step(
    step: str,
    rules: tuple[ArchetypeRule, ...] = DEFAULT_RULES,
    fallback_type: AgentType = FALLBACK_AGENT_TYPE,
    fallback_tools: tuple[str, ...] = FALLBACK_TOOLS,
) -> tuple[AgentType, list[str]]:
    """Return the archetype and suggested tools of the first matching rule."""
    for rule in rules:
        if rule.matches(step):
            return rule.agent_type, list(rule.tools)
    return fallback_type, list(fallback_tools)

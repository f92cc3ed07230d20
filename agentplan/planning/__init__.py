"""Plan construction from descriptions and canned templates."""

from agentplan.planning.planner import (
    Planner,
    PlannerConfig,
    get_template,
    parse_steps,
    plan_from_description,
)
from agentplan.planning.rules import (
    DEFAULT_RULES,
    ArchetypeRule,
    classify_step,
)
from agentplan.planning.templates import (
    DEFAULT_TEMPLATES,
    CannedTemplate,
    TemplateRegistry,
)

__all__ = [
    "Planner",
    "PlannerConfig",
    "get_template",
    "parse_steps",
    "plan_from_description",
    "DEFAULT_RULES",
    "ArchetypeRule",
    "classify_step",
    "DEFAULT_TEMPLATES",
    "CannedTemplate",
    "TemplateRegistry",
]

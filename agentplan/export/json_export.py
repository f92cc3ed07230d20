"""JSON document export for plans."""

from agentplan.models.agent_plan import Plan
from agentplan.utils.identifiers import slugify_title


def plan_to_dict(plan: Plan) -> dict:
    """Wire-format dict of a plan (aliased field names, unset optionals dropped)."""
    return plan.model_dump(mode="json", by_alias=True, exclude_none=True)


def plan_to_json(plan: Plan) -> str:
    """Formatted JSON document for a plan download."""
    return plan.model_dump_json(indent=2, by_alias=True, exclude_none=True)


def plan_from_json(text: str) -> Plan:
    """Load a plan previously written by plan_to_json."""
    return Plan.model_validate_json(text)


def export_filename(plan: Plan) -> str:
    """File name for a plan download, e.g. "support-ticket-triage.json"."""
    return f"{slugify_title(plan.title)}.json"

"""API routes for canned workflow templates."""

from fastapi import APIRouter, Depends

from agentplan.export.json_export import plan_to_dict
from agentplan.planning.planner import Planner
from server.plan_routes import error_response, get_planner

router = APIRouter()


@router.get("/templates")
def list_templates(planner: Planner = Depends(get_planner)) -> list[dict]:
    """List example templates in matching priority order."""
    return planner.config.templates.examples()


@router.get("/templates/{template_id}")
def get_template(template_id: str, planner: Planner = Depends(get_planner)):
    """Get the plan of a canned template."""
    plan = planner.get_template(template_id)
    if plan is None:
        return error_response(404, [f"Unknown template: {template_id}"])
    return plan_to_dict(plan)

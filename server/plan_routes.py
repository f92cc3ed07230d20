"""API routes for plan generation, validation, layout and export."""

import logging
from dataclasses import asdict
from enum import Enum

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import BaseModel, Field, field_validator
from pydantic_core import PydanticCustomError

from agentplan.analysis.layout import calculate_bounds, plan_to_positions
from agentplan.analysis.validator import validate_plan
from agentplan.export.json_export import export_filename, plan_to_dict, plan_to_json
from agentplan.export.mermaid import to_flow_diagram, to_sequence_diagram
from agentplan.models.agent_plan import Plan
from agentplan.planning.planner import Planner
from server.settings import MIN_DESCRIPTION_LENGTH

logger = logging.getLogger(__name__)

router = APIRouter()

GENERIC_FAILURE = "Failed to generate plan. Please try again."

_planner = Planner()


def get_planner() -> Planner:
    """Planner dependency, overridable in tests."""
    return _planner


def error_response(status_code: int, errors: list[str], warnings: list[str] | None = None) -> JSONResponse:
    """`{errors, warnings?}` body used by every failing plan endpoint."""
    content: dict = {"errors": errors}
    if warnings is not None:
        content["warnings"] = warnings
    return JSONResponse(status_code=status_code, content=content)


# --- Request Models ---


class PlanRequest(BaseModel):
    """Request body for plan generation."""

    model_config = {"populate_by_name": True}

    description: str
    template_id: str | None = Field(default=None, alias="templateId")

    @field_validator("description")
    @classmethod
    def check_length(cls, value: str) -> str:
        if len(value) < MIN_DESCRIPTION_LENGTH:
            raise PydanticCustomError(
                "description_too_short",
                "Description must be at least {min_length} characters",
                {"min_length": MIN_DESCRIPTION_LENGTH},
            )
        return value


class ExportFormat(str, Enum):
    json = "json"
    mermaid = "mermaid"
    sequence = "sequence"


# --- Routes ---


@router.post("/plan")
def create_plan(request: PlanRequest, planner: Planner = Depends(get_planner)):
    """Generate a plan from a description, or return a canned template.

    Plans failing validation are answered with 400 and their diagnostics.
    """
    try:
        if request.template_id:
            plan = planner.get_template(request.template_id)
            if plan is None:
                return error_response(400, [f"Unknown template: {request.template_id}"])
        else:
            plan = planner.plan_from_description(request.description)
        validation = validate_plan(plan)
    except Exception:
        logger.exception("plan generation failed")
        return error_response(500, [GENERIC_FAILURE])

    if not validation.ok:
        logger.info("rejected plan %r: %s", plan.title, "; ".join(validation.errors))
        return error_response(400, validation.errors, validation.warnings)

    logger.info("generated plan %r with %d agents", plan.title, len(plan.agents))
    return {"plan": plan_to_dict(plan), "warnings": validation.warnings}


@router.post("/plan/validate")
def validate_plan_endpoint(plan: Plan) -> dict:
    """Run semantic validation on a client-supplied plan."""
    return asdict(validate_plan(plan))


@router.post("/plan/layout")
def layout_plan(plan: Plan) -> dict:
    """Compute canvas positions for a plan."""
    layout = plan_to_positions(plan)
    return {
        "nodes": [asdict(node) for node in layout.nodes],
        "edges": [asdict(edge) for edge in layout.edges],
        "unplaced": layout.unplaced,
        "bounds": asdict(calculate_bounds(layout)),
    }


@router.post("/plan/export/{export_format}")
def export_plan(export_format: ExportFormat, plan: Plan) -> Response:
    """Export a plan as a JSON download or Mermaid text."""
    if export_format == ExportFormat.json:
        return Response(
            content=plan_to_json(plan),
            media_type="application/json",
            headers={"Content-Disposition": f'attachment; filename="{export_filename(plan)}"'},
        )
    if export_format == ExportFormat.sequence:
        return PlainTextResponse(to_sequence_diagram(plan))
    return PlainTextResponse(to_flow_diagram(plan))

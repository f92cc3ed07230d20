"""SDK for calling the planner service from python code."""

from agentplan.sdk.plan_client import (
    PlanClient,
    PlanClientError,
    PlanErrorResponse,
    PlanResponse,
)

__all__ = [
    "PlanClient",
    "PlanClientError",
    "PlanErrorResponse",
    "PlanResponse",
]

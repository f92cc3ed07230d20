"""HTTP client for the planner service.

    from agentplan.sdk.plan_client import PlanClient
    client = PlanClient()
    response = client.create_plan("Fetch data, then extract fields, then notify team.")
    response.plan.agents
"""

from __future__ import annotations

import os

import httpx
from pydantic import BaseModel, ValidationError

from agentplan.models.agent_plan import Plan

DEFAULT_BACKEND_URL = os.getenv("AGENTPLAN_BACKEND_URL", "http://localhost:8000")


class PlanClientError(Exception):
    """Raised when the planner service rejects a request or cannot be reached."""

    def __init__(self, message: str, status: int, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.status = status  # 0 when the server could not be reached
        self.errors = errors or []


class PlanResponse(BaseModel):
    """Successful POST /api/plan body."""

    plan: Plan
    warnings: list[str] = []


class PlanErrorResponse(BaseModel):
    """Error body returned with 4xx/5xx statuses."""

    errors: list[str]
    warnings: list[str] | None = None


class PlanClient:
    """Call the planner service from python code."""

    def __init__(
        self,
        base_url: str = DEFAULT_BACKEND_URL,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Args:
            base_url: Base URL of the planner server
            timeout: HTTP request timeout in seconds
            transport: optional httpx transport, e.g. httpx.MockTransport in tests
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(base_url=self.base_url, timeout=self.timeout, transport=self._transport)

    def _request(self, method: str, path: str, **kwargs) -> httpx.Response:
        try:
            with self._client() as client:
                return client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            raise PlanClientError(
                f"Cannot connect to backend at {self.base_url}. Is it running?",
                0,
            ) from e

    @staticmethod
    def _raise_for_errors(response: httpx.Response) -> None:
        if response.is_success:
            return
        try:
            body = PlanErrorResponse.model_validate(response.json())
        except (ValueError, ValidationError):
            raise PlanClientError(
                f"Request failed with status {response.status_code}",
                response.status_code,
            ) from None
        raise PlanClientError(
            ", ".join(body.errors) or "Planning failed",
            response.status_code,
            body.errors,
        )

    def create_plan(self, description: str, template_id: str | None = None) -> PlanResponse:
        """Generate a plan for a description, or fetch a template by id.

        Raises:
            PlanClientError: on connection failures, error statuses and
                malformed success bodies
        """
        payload: dict = {"description": description}
        if template_id is not None:
            payload["templateId"] = template_id

        response = self._request("POST", "/api/plan", json=payload)
        self._raise_for_errors(response)

        try:
            return PlanResponse.model_validate(response.json())
        except ValidationError as e:
            raise PlanClientError(
                "Invalid response format",
                response.status_code,
                [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()],
            ) from e

    def list_templates(self) -> list[dict]:
        """Example templates offered by the server."""
        response = self._request("GET", "/api/templates")
        self._raise_for_errors(response)
        return response.json()

    def check_health(self) -> bool:
        """True when the server answers its health check."""
        try:
            response = self._request("GET", "/health")
        except PlanClientError:
            return False
        return response.is_success

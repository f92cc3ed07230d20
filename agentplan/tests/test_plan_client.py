"""Tests for the planner HTTP client, using httpx.MockTransport."""

import json

import httpx
import pytest

from agentplan.export.json_export import plan_to_dict
from agentplan.planning.planner import get_template
from agentplan.sdk.plan_client import PlanClient, PlanClientError


def _client(handler) -> PlanClient:
    return PlanClient(base_url="http://planner.test/", transport=httpx.MockTransport(handler))


class TestCreatePlan:
    def test_success(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            plan = plan_to_dict(get_template("weekly-report"))
            return httpx.Response(200, json={"plan": plan, "warnings": ["heads up"]})

        response = _client(handler).create_plan("Every Monday, pull metrics", template_id="weekly-report")

        assert seen["path"] == "/api/plan"
        assert seen["body"] == {"description": "Every Monday, pull metrics", "templateId": "weekly-report"}
        assert response.plan.title == get_template("weekly-report").title
        assert response.warnings == ["heads up"]

    def test_template_id_omitted_when_unset(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"plan": plan_to_dict(get_template("support-triage"))})

        response = _client(handler).create_plan("Triage support email")
        assert seen["body"] == {"description": "Triage support email"}
        assert response.warnings == []

    def test_error_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"errors": ["Description must be at least 10 characters"]})

        with pytest.raises(PlanClientError) as exc_info:
            _client(handler).create_plan("short")

        assert exc_info.value.status == 400
        assert exc_info.value.errors == ["Description must be at least 10 characters"]
        assert str(exc_info.value) == "Description must be at least 10 characters"

    def test_error_without_json(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="bad gateway")

        with pytest.raises(PlanClientError) as exc_info:
            _client(handler).create_plan("Fetch data, then notify team")
        assert exc_info.value.status == 502
        assert exc_info.value.errors == []

    def test_malformed_success_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"plan": {"title": "missing everything"}})

        with pytest.raises(PlanClientError) as exc_info:
            _client(handler).create_plan("Fetch data, then notify team")
        assert str(exc_info.value) == "Invalid response format"
        assert exc_info.value.errors

    def test_connection_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(PlanClientError) as exc_info:
            _client(handler).create_plan("Fetch data, then notify team")
        assert exc_info.value.status == 0
        assert "Cannot connect to backend at http://planner.test" in str(exc_info.value)


class TestOtherEndpoints:
    def test_list_templates(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/api/templates"
            return httpx.Response(200, json=[{"id": "support-triage"}])

        assert _client(handler).list_templates() == [{"id": "support-triage"}]

    def test_health(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"status": "ok"})

        assert _client(handler).check_health() is True

    def test_health_when_down(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        assert _client(handler).check_health() is False

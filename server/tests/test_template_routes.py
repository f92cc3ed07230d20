"""Tests for the template API routes."""

from fastapi.testclient import TestClient

from server.app import app

client = TestClient(app)


class TestTemplateRoutes:
    def test_list_in_priority_order(self):
        response = client.get("/api/templates")
        assert response.status_code == 200
        templates = response.json()
        assert [template["id"] for template in templates] == [
            "support-triage",
            "lead-qualification",
            "weekly-report",
        ]
        assert set(templates[0]) == {"id", "label", "shortDescription", "description"}

    def test_get_template(self):
        response = client.get("/api/templates/weekly-report")
        assert response.status_code == 200
        plan = response.json()
        assert plan["version"] == "0.1"
        assert len(plan["agents"]) == 5

    def test_unknown_template(self):
        response = client.get("/api/templates/nope")
        assert response.status_code == 404
        assert response.json() == {"errors": ["Unknown template: nope"]}

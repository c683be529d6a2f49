"""Tests for the project catalog and its endpoints."""

import pytest
from fastapi.testclient import TestClient

from portfolio_api.core.projects import PROJECTS, get_project, list_projects
from portfolio_api.domain.exceptions import DataNotFoundError
from portfolio_api.main import app

client = TestClient(app)


class TestCatalog:
    """Tests for the catalog functions."""

    def test_slugs_are_unique(self):
        slugs = [p["slug"] for p in PROJECTS]
        assert len(slugs) == len(set(slugs))

    def test_every_project_has_an_api_link(self):
        for project in PROJECTS:
            assert project["api"], project["slug"]
            for endpoint in project["api"].values():
                assert endpoint.startswith("/api/")

    def test_list_returns_copies(self):
        projects = list_projects()
        projects[0]["name"] = "changed"
        assert list_projects()[0]["name"] == "Fin-Viz Dashboard"

    def test_get_unknown_project_raises(self):
        with pytest.raises(DataNotFoundError) as exc_info:
            get_project("nope")
        assert exc_info.value.resource == "nope"


def test_list_projects_endpoint():
    response = client.get("/api/projects")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == len(PROJECTS)
    assert data[0]["slug"] == "fin-viz-dashboard"


def test_get_project_endpoint():
    response = client.get("/api/projects/ai-stock-prediction")

    assert response.status_code == 200
    assert response.json()["api"]["predictEndpoint"] == "/api/ai/stock-prediction"


def test_get_unknown_project_is_404():
    response = client.get("/api/projects/unknown-slug")

    assert response.status_code == 404
    assert response.json() == {"error": "Project not found"}


@pytest.mark.parametrize(
    "path",
    [
        "/api/finviz/summary",
        "/api/iot/devices",
        "/api/mlops/status",
        "/api/cicd/pipelines",
        "/api/fitness/workouts",
        "/api/cache/stats",
        "/api/ar/routes",
        "/api/trading/status",
        "/api/blockchain/status",
        "/api/chat/messages",
        "/api/payments",
    ],
)
def test_linked_get_endpoints_exist(path):
    """Every GET endpoint advertised by the catalog is served."""
    assert client.get(path).status_code == 200

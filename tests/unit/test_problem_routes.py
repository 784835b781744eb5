"""Tests for the HTTP API."""

import random

import pytest
from litestar.testing import TestClient
from unittest.mock import AsyncMock

from app import create_app
from domain.exceptions import ApiFailure, NetworkFailure
from domain.models import ProblemRecord, ProblemStatistic, ProblemsetData
from services.problem import ProblemService


@pytest.fixture
def api_client():
    client = AsyncMock()
    client.fetch_problems.return_value = ProblemsetData(
        problems=[
            ProblemRecord(contest_id=4, index="A", name="Watermelon", rating=800, tags=("math",)),
            ProblemRecord(contest_id=71, index="A", name="Way Too Long Words", rating=800,
                          tags=("strings",)),
        ],
        statistics=[ProblemStatistic(contest_id=4, index="A", solved_count=412345)],
    )
    return client


@pytest.fixture
def statement_fetcher():
    fetcher = AsyncMock()
    fetcher.fetch_statement.return_value = "=== 4A: Watermelon ===\nURL: x\n\nbody"
    return fetcher


@pytest.fixture
def client(api_client, statement_fetcher):
    service = ProblemService(
        api_client=api_client,
        statement_fetcher=statement_fetcher,
        statement_delay=0,
        rng=random.Random(3),
    )

    async def provide_service() -> ProblemService:
        return service

    with TestClient(app=create_app(service_provider=provide_service)) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_get_problems_returns_cards_and_ids(client, api_client):
    response = client.get(
        "/problems", params={"rating": "800", "tags": "Math, Strings", "exclude_tags": "STRINGS"}
    )

    assert response.status_code == 200
    body = response.json()
    api_client.fetch_problems.assert_awaited_once_with(("math", "strings"))
    assert body["count"] == 1
    assert body["results_label"] == "1 problem found"
    assert body["problem_ids"] == "4A"
    assert body["statements"] is None

    card = body["problems"][0]
    assert card["id"] == "4A"
    assert card["url"] == "https://codeforces.com/problemset/problem/4/A"
    assert card["rating_class"] == "rating-800"
    assert card["solved_count"] == 412345
    assert card["solved_label"] == "412.3K"
    assert card["tags"] == ["math"]


def test_get_problems_with_statements(client, statement_fetcher):
    response = client.get("/problems", params={"rating": 800, "fetch_statements": "true"})

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 2
    assert statement_fetcher.fetch_statement.await_count == 2
    assert body["statements"].count("=" * 60) == 1


def test_no_results_is_not_an_error(client):
    response = client.get("/problems", params={"rating": 900})

    assert response.status_code == 200
    body = response.json()
    assert body["problems"] == []
    assert body["message"].startswith("No problems found")


def test_invalid_rating_makes_no_request(client, api_client):
    response = client.get("/problems", params={"rating": 4000})

    assert response.status_code == 400
    assert response.json() == {"error": "Rating must be between 800 and 3500"}
    api_client.fetch_problems.assert_not_awaited()


def test_http_failure_is_reported(client, api_client):
    """Scenario E: no cards, error text carries the status."""
    api_client.fetch_problems.side_effect = NetworkFailure("API request failed: 503", status_code=503)

    response = client.get("/problems", params={"rating": 800})

    assert response.status_code == 502
    assert "503" in response.json()["error"]
    assert "problems" not in response.json()


def test_api_failure_is_reported(client, api_client):
    api_client.fetch_problems.side_effect = ApiFailure("problemset.problems: Tag not found")

    response = client.get("/problems", params={"rating": 800, "tags": "nope"})

    assert response.status_code == 502
    assert response.json() == {"error": "problemset.problems: Tag not found"}


def test_statement_by_url(client, statement_fetcher):
    response = client.post(
        "/statement",
        json={"url": "https://codeforces.com/problemset/problem/4/A", "name": "Watermelon"},
    )

    assert response.status_code == 200
    statement_fetcher.fetch_statement.assert_awaited_once_with(4, "A", "Watermelon")
    assert response.json()["problem_id"] == "4A"
    assert response.json()["url"] == "https://codeforces.com/problemset/problem/4/A"


def test_statement_name_defaults_to_id(client, statement_fetcher):
    client.post("/statement", json={"url": "https://codeforces.com/contest/1350/problem/B1"})

    statement_fetcher.fetch_statement.assert_awaited_once_with(1350, "B1", "1350B1")


def test_statement_with_bad_url(client):
    response = client.post("/statement", json={"url": "https://example.com/nothing"})

    assert response.status_code == 400
    assert "Unrecognized Codeforces URL" in response.json()["error"]

"""Tests for the leaderboard HTTP routes."""

import pytest
from fastapi.testclient import TestClient

from submission_validator.leaderboard import GameResultService
from submission_validator.leaderboard.app import create_app


@pytest.fixture
def service():
    return GameResultService()


@pytest.fixture
def client(service):
    return TestClient(create_app(service))


def post(client, name, score, seconds):
    response = client.post(
        "/game-results",
        json={"playerName": name, "score": score, "timeInSeconds": seconds},
    )
    assert response.status_code == 200
    return response


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"service": "leaderboard", "status": "ok"}


def test_post_and_list(client, service):
    post(client, "player1", 20, 20.0)

    response = client.get("/game-results")

    assert response.status_code == 200
    assert response.json() == [
        {"id": 1, "playerName": "player1", "score": 20, "timeInSeconds": 20.0}
    ]
    assert len(service.get_game_results()) == 1


def test_get_by_id(client):
    post(client, "player1", 20, 20.0)

    assert client.get("/game-results/1").json()["playerName"] == "player1"
    missing = client.get("/game-results/42")
    assert missing.status_code == 200
    assert missing.json() is None


def test_delete(client):
    post(client, "player1", 20, 20.0)

    response = client.delete("/game-results/1")

    assert response.status_code == 200
    assert client.get("/game-results").json() == []


def test_invalid_body_rejected(client):
    response = client.post("/game-results", json={"score": "many"})

    assert response.status_code == 422


def test_leaderboard_order(client):
    post(client, "player3", 10, 15.0)
    post(client, "player1", 20, 20.0)
    post(client, "player2", 15, 10.0)
    post(client, "player4", 20, 5.0)

    names = [r["playerName"] for r in client.get("/leaderboard").json()]

    assert names == ["player4", "player1", "player2", "player3"]


def test_route_docs_published(client):
    paths = client.get("/openapi.json").json()["paths"]

    assert paths["/leaderboard"]["get"]["description"] == (
        "Return results by score descending, then time ascending."
    )
    single = paths["/game-results/{game_result_id}"]["get"]
    assert "null" in single["description"]

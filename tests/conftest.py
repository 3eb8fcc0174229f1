"""Pytest fixtures: an app per test backed by a throwaway sqlite file."""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from workout_log.core.config import Settings
from workout_log.main import create_application


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "workouts.db"


@pytest.fixture
def settings(db_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        environment="test",
        database_url_override=f"sqlite+aiosqlite:///{db_path}",
        create_tables=True,
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_application(settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """TestClient inside the app lifespan (tables created on enter, engine disposed on exit)."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def create_workout(client: TestClient):
    """POST a workout from ``(exercise, weight, reps)`` tuples and return the response body."""

    def _create(*entries: tuple[str, float, int]) -> dict:
        resp = client.post(
            "/workouts",
            json={"workout": {"entries": [{"exercise": e, "weight": w, "reps": r} for e, w, r in entries]}},
        )
        assert resp.status_code == 200, resp.text
        return resp.json()

    return _create

"""Shared pytest fixtures for the Larder test suite."""

from __future__ import annotations

import logging
from typing import Dict, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from larder.config import get_settings
from larder.models.store import PlanSnapshot
from larder.server.app import create_app
from tests.factories import ingredient_row, line_row, recipe_row

LARDER_ENV_VARS = (
    "LARDER_API_TOKEN",
    "LARDER_LOG_LEVEL",
    "LARDER_LOG_FORMAT",
    "LARDER_LOG_REQUESTS",
    "LARDER_STRICT_HYDRATION",
    "LARDER_SECTION_ORDER",
    "LARDER_DEFAULT_SUPERMARKET",
    "LARDER_SERVER_HOST",
    "LARDER_SERVER_PORT",
)


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run every test with default settings, away from any local .env file."""

    for name in LARDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    get_settings.cache_clear()


@pytest.fixture()
def app() -> Generator[FastAPI, None, None]:
    """Create a new FastAPI app instance for each test and reset overrides."""

    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app) -> TestClient:
    """Return a test client bound to the FastAPI app."""

    return TestClient(app)


@pytest.fixture()
def sample_snapshot_payload() -> Dict[str, object]:
    """Plan of two recipes plus a catalog with two synergy candidates and one unrelated recipe."""

    tomato = ingredient_row(1, "tomato", default_unit="count", core=True, section="Fruit & Vegtables")
    flour = ingredient_row(2, "flour", default_unit="g", section="Cupboard")
    basil = ingredient_row(3, "basil", core=True, section="Fruit & Vegtables")
    salt = ingredient_row(4, "salt")
    cream = ingredient_row(5, "double cream", default_unit="ml", core=True, section="Fridge")
    sourdough = ingredient_row(6, "sourdough", section="Bakery")

    return {
        "plan": [1, 2],
        "recipes": [
            recipe_row(
                1,
                "Tomato Pasta",
                line_row(tomato, 2),
                line_row(flour, 200, "g"),
                line_row(basil, "a handful"),
                line_row(salt, "a pinch"),
                cook_minutes=25,
                servings=2,
            ),
            recipe_row(
                2,
                "Pizza Night",
                line_row(flour, "300"),
                line_row(tomato, 3),
                line_row(salt, None, notes="flaky"),
                cook_minutes=40,
                servings=4,
                heat=1,
            ),
            recipe_row(
                3,
                "Caprese Toast",
                line_row(tomato, 1),
                line_row(basil),
                line_row(sourdough, 1, "loaf"),
                cook_minutes=10,
                servings=2,
                heat=0,
            ),
            recipe_row(
                4,
                "Cream Tea",
                line_row(cream, 150),
                line_row(sourdough, 2, "slice"),
                servings=4,
            ),
            recipe_row(
                5,
                "Tomato Soup",
                line_row(tomato, 4),
                line_row(cream, 100),
                cook_minutes=35,
                servings=4,
                heat=2,
            ),
        ],
        "checked": [],
    }


@pytest.fixture()
def sample_snapshot(sample_snapshot_payload) -> PlanSnapshot:
    return PlanSnapshot.model_validate(sample_snapshot_payload)

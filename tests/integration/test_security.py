"""Security-related integration tests."""

from __future__ import annotations

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from larder.config import get_settings
from larder.server.app import create_app


@pytest.fixture()
def secure_client(monkeypatch) -> TestClient:
    monkeypatch.setenv("LARDER_API_TOKEN", "secret-token")
    get_settings.cache_clear()
    app = create_app()
    client = TestClient(app)
    yield client
    monkeypatch.delenv("LARDER_API_TOKEN", raising=False)
    get_settings.cache_clear()


def test_shopping_list_requires_api_token(secure_client, sample_snapshot_payload):
    response = secure_client.post("/shopping-list", json=sample_snapshot_payload)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED

    headers = {"Authorization": "Bearer secret-token"}
    response = secure_client.post("/shopping-list", json=sample_snapshot_payload, headers=headers)
    assert response.status_code == status.HTTP_200_OK


def test_synergy_accepts_api_key_header(secure_client, sample_snapshot_payload):
    response = secure_client.post(
        "/synergy",
        json=sample_snapshot_payload,
        headers={"X-API-Key": "wrong"},
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED

    response = secure_client.post(
        "/synergy",
        json=sample_snapshot_payload,
        headers={"X-API-Key": "secret-token"},
    )
    assert response.status_code == status.HTTP_200_OK


def test_addable_accepts_query_token(secure_client, sample_snapshot_payload):
    response = secure_client.post("/plan/addable?api_token=secret-token", json=sample_snapshot_payload)
    assert response.status_code == status.HTTP_200_OK


def test_metrics_stay_public(secure_client):
    response = secure_client.get("/metrics")
    assert response.status_code == status.HTTP_200_OK

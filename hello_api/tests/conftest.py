"""Shared fixtures for API tests."""
from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from ..api.routes.hello import local_now
from ..main import app

FIXED_NOW = datetime(2024, 5, 17, 9, 30, 15, 123456)


@pytest.fixture()
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def frozen_client() -> Iterator[TestClient]:
    app.dependency_overrides[local_now] = lambda: FIXED_NOW
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.pop(local_now, None)

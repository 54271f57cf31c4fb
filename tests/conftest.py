import pytest
from fastapi.testclient import TestClient

from status_service.main import create_app


@pytest.fixture
def client():
    with TestClient(create_app()) as c:
        yield c


@pytest.fixture
def client_v1():
    with TestClient(create_app(version=1)) as c:
        yield c

# tests/conftest.py

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


@pytest.fixture
def client():
    with TestClient(create_app(settings=Settings(msg="World"))) as c:
        yield c

import pytest
from fastapi.testclient import TestClient

from upload_server.config import Settings
from upload_server.main import create_app


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def make_client(upload_dir):
    def _make(**overrides):
        cfg = {"upload_dir": str(upload_dir), "field_name": "file",
               "upload_routes": ["/upload"], "cors_enabled": False, "naming": "unique"}
        cfg.update(overrides)
        return TestClient(create_app(Settings(**cfg)))
    return _make


@pytest.fixture
def client(make_client):
    return make_client()


def stored(directory):
    if not directory.exists():
        return []
    return sorted(p for p in directory.iterdir() if p.is_file())

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))


@pytest.fixture
def asset_root(tmp_path: Path) -> Path:
    root = tmp_path / "dist"
    root.mkdir()
    return root


@pytest.fixture
def make_client(monkeypatch):
    """Build a TestClient for an app serving the given asset root."""
    from api.main import create_app
    from settings import Settings

    def _make(root: Path) -> TestClient:
        monkeypatch.setenv("BOOKSHELF_ASSET_ROOT", str(root))
        return TestClient(create_app(Settings()))

    return _make


@pytest.fixture
def client(make_client, asset_root: Path) -> TestClient:
    return make_client(asset_root)

"""
Shared fixtures for the file server tests.

Applications are built inside fixtures rather than test bodies:
create_app() reconfigures logging, which would otherwise detach
pytest's log capture for the running test.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app


@pytest.fixture
def files_root(tmp_path: Path) -> Path:
    """Directory holding hello.txt ("hi") and a nested binary file."""
    (tmp_path / "hello.txt").write_bytes(b"hi")
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "data.bin").write_bytes(bytes(range(256)))
    return tmp_path


@pytest.fixture
def make_client(files_root: Path):
    """Factory building a TestClient for the given settings overrides."""

    def _make(**overrides) -> TestClient:
        values = {"root_dir": str(files_root)}
        values.update(overrides)
        app = create_app(Settings(**values))
        return TestClient(app, raise_server_exceptions=False)

    return _make


@pytest.fixture
def client_v1(make_client) -> TestClient:
    return make_client(iteration=1)


@pytest.fixture
def client_v2(make_client) -> TestClient:
    return make_client(iteration=2)


@pytest.fixture
def client_v3(make_client) -> TestClient:
    return make_client(iteration=3)


@pytest.fixture
def client_v3_legacy(make_client) -> TestClient:
    return make_client(iteration=3, legacy_status_defect=True)

from __future__ import annotations

import os
import tempfile

# Keep import-time side effects (the static mount creates PUBLIC_DIR) out of the repo
os.environ.setdefault("PUBLIC_DIR", tempfile.mkdtemp(prefix="media-public-"))
os.environ.setdefault("DATA_DIR", tempfile.mkdtemp(prefix="media-data-"))

import pytest
from fastapi.testclient import TestClient

from app.core.config import settings
from app.main import app


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "data_dir", str(tmp_path / "data"))
    monkeypatch.setattr(settings, "public_dir", str(tmp_path / "public"))
    return tmp_path


@pytest.fixture
def client(workspace):
    return TestClient(app)

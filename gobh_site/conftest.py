"""
Shared pytest fixtures.
"""
import os

# Keep test runs from writing a log file into the working directory
os.environ.setdefault("LOG_FILE", "")

import pytest
from fastapi.testclient import TestClient

from gobh_site.config import config
from gobh_site.database import DocumentStore


@pytest.fixture
def content_dir(tmp_path, monkeypatch):
    """Point the configured content directory at an empty temp directory."""
    path = tmp_path / "properties"
    path.mkdir()
    monkeypatch.setattr(config, "CONTENT_DIR", str(path))
    return path


@pytest.fixture
def write_property(content_dir):
    def _write(file_slug, body, **metadata):
        lines = ["---"]
        for key, value in metadata.items():
            lines.append(f"{key}: {value}")
        lines.append("---")
        lines.append(body)
        (content_dir / f"{file_slug}.md").write_text("\n".join(lines), encoding="utf-8")
    return _write


@pytest.fixture
def store(tmp_path):
    with DocumentStore(str(tmp_path / "test.db")) as s:
        yield s


@pytest.fixture
def client(store, content_dir):
    from gobh_site.main import create_app

    app = create_app(store=store)
    with TestClient(app) as c:
        yield c

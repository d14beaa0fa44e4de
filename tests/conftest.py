# Shared fixtures.
# Created: 2026-10-19

import os
import time

import pytest
from fastapi.testclient import TestClient

from dirbrowse.config import Settings, get_settings
from dirbrowse.server import create_app


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch):
    for name in ("DIRBROWSE_ADDR", "DIRBROWSE_PORT", "DIRBROWSE_DIR", "DIRBROWSE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def served_root(tmp_path):
    """A served directory with a nested folder holding media, text and a subfolder.

    root/
      readme.txt
      docs/
        movie.mkv
        notes.txt
        sub/
    secret.txt   (outside the served root)
    """
    root = tmp_path / "root"
    docs = root / "docs"
    (docs / "sub").mkdir(parents=True)
    (root / "readme.txt").write_text("hello")
    (docs / "movie.mkv").write_bytes(b"\x1a\x45\xdf\xa3" * 256)
    (docs / "notes.txt").write_text("some notes")
    (tmp_path / "secret.txt").write_text("top secret")

    # Fixed, old timestamps keep the relative "last modified" text stable between requests.
    ten_days_ago = time.time() - 10 * 24 * 3600
    for path in [root, *root.rglob("*")]:
        os.utime(path, (ten_days_ago, ten_days_ago))
    return root


@pytest.fixture
def client(served_root):
    app = create_app(Settings(dir=served_root))
    return TestClient(app, follow_redirects=False)

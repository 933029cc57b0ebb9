"""Root test configuration: isolate each test from ambient config files and env vars"""

import pytest

from docstore.config import Settings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test in an empty directory with no DOCSTORE_* variables set."""
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(f"DOCSTORE_{name.upper()}", raising=False)
    yield

"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Add repo root for imports - do this before other imports
repo_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(repo_root))

import pytest

from itemvault.services import config_service


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch):
    """Keep ITEMVAULT_* env vars and the cached config out of each test."""
    for env_var in config_service.ENV_OVERRIDES.values():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.setattr(config_service, "_config_service", None)
    yield
    monkeypatch.setattr(config_service, "_config_service", None)


@pytest.fixture
def students_file(tmp_path):
    """Well-formed grading input."""
    path = tmp_path / "students.txt"
    path.write_text(
        "1, Ama Mensah, 85\n"
        "2, Kofi Boateng, 72\n"
        "3, Esi Owusu, 45\n",
        encoding="utf-8",
    )
    return path

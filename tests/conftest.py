# tests/conftest.py
import os
import tempfile
from pathlib import Path

import pytest

# must run before roi_calculator.core.config is imported
_TMP = Path(tempfile.mkdtemp(prefix="roi-tests-"))
DB_PATH = _TMP / "roi_test.db"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{DB_PATH}"
os.environ["LOG_DIR"] = str(_TMP / "logs")
os.environ["LOG_LEVEL"] = "WARNING"


class ZeroVariance:
    """Random source whose uniform draws are always the midpoint (0 here)."""

    def uniform(self, low, high):
        return (low + high) / 2


class ScriptedVariance:
    """Returns the given draws in order, then repeats the last one."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = 0

    def uniform(self, low, high):
        value = self.draws[min(self.calls, len(self.draws) - 1)]
        self.calls += 1
        assert low <= value <= high
        return value


@pytest.fixture
def zero_rng():
    return ZeroVariance()


@pytest.fixture
def scripted_rng():
    return ScriptedVariance


@pytest.fixture
def db_path():
    return DB_PATH


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from roi_calculator.main import app

    with TestClient(app) as c:
        yield c

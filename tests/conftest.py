from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the books_api package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from books_api.core import config as core_config  # noqa: E402


@pytest.fixture()
def store_file(tmp_path) -> Path:
    return tmp_path / "books.json"


@pytest.fixture(autouse=True)
def fresh_settings():
    core_config.get_settings.cache_clear()
    yield
    core_config.get_settings.cache_clear()

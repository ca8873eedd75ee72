"""
Shared fixtures: every test gets its own SQLite file under tmp_path.
"""
from __future__ import annotations

from pathlib import Path
import sys
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from typing import Callable, Iterator, List

import pytest
from flask import Flask

from userhub import create_app
from userhub.config import Config


@pytest.fixture()
def make_app(tmp_path: Path) -> Iterator[Callable[..., Flask]]:
    """Build apps against tmp_path/db.db; overrides become config attributes."""

    created: List[Flask] = []

    def _make_app(**overrides) -> Flask:
        settings = {
            "TESTING": True,
            "DATABASE_PATH": str(tmp_path / "db.db"),
            "ENABLE_HTML_VIEWS": True,
        }
        settings.update(overrides)
        config_class = type("TestConfig", (Config,), settings)
        app = create_app(config_class)
        created.append(app)
        return app

    yield _make_app

    for app in created:
        app.extensions["userhub.database"].dispose()


@pytest.fixture()
def app(make_app) -> Flask:
    return make_app()


@pytest.fixture()
def client(app):
    return app.test_client()

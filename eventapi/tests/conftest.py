from __future__ import annotations

import os
import tempfile

# The engine is created at import time, so the test database has to be
# configured before anything from eventapi is imported.
_TMP_DIR = tempfile.mkdtemp(prefix="eventapi-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "app.log")
os.environ["APP_ENV"] = "test"
os.environ["EVENTS_DEFAULT_PER_PAGE"] = "2"
os.environ["EVENTS_MAX_PER_PAGE"] = "100"

from collections.abc import Iterator  # noqa: E402

import pytest  # noqa: E402

from eventapi.infrastructure.db import ENGINE, Base, init_db  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database() -> Iterator[None]:
    init_db()
    yield
    Base.metadata.drop_all(bind=ENGINE)

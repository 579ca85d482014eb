import os
import tempfile
import uuid

import pytest

# Point the app at a throwaway SQLite file before db.py is imported.
_TMP_DIR = tempfile.mkdtemp(prefix="trig-drill-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"

import models  # noqa: E402,F401
from db import Base, engine  # noqa: E402

Base.metadata.create_all(engine)


@pytest.fixture
def session_id() -> str:
    return f"test-{uuid.uuid4().hex[:12]}"

import os
import tempfile

import pytest

# app.py reads these at import time
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("SESSION_FILE_DIR", tempfile.mkdtemp(prefix="buildcheck-sessions-"))
os.environ.pop("OPENAI_API_KEY", None)

from buildcheck.intake import IntakeRecord


@pytest.fixture
def make_record():
    """Build an IntakeRecord with sensible contact details."""

    def _make(**fields):
        fields.setdefault("name", "Ada Obi")
        fields.setdefault("email", "ada@example.com")
        fields.setdefault("area", "Agric")
        fields.setdefault("timestamp", 1700000000000)
        return IntakeRecord(**fields)

    return _make


@pytest.fixture
def valid_form():
    return {
        "name": "Ada Obi",
        "email": "ada@example.com",
        "address": "15 Example Close",
        "area": "Agric, Ikorodu",
        "landmark": "Agric Bus Stop",
        "lcda": "Ikorodu",
        "intent": "start_building",
        "message": "Planning a small family home with three bedrooms",
    }

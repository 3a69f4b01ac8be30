# storage.py

import json
import logging
from typing import Optional, Protocol

from buildcheck.intake import IntakeRecord

log = logging.getLogger(__name__)

STORAGE_KEY = "civitas_m1_v1"


class ReportStore(Protocol):
    """Anything that can hold one string value per key."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryStore:
    """Key-value slot backed by a plain dict (CLI and tests)."""

    def __init__(self, data=None):
        self.data = {} if data is None else data

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value):
        self.data[key] = value


class SessionStore:
    """Key-value slot backed by the per-browser Flask session."""

    def __init__(self, session):
        self.session = session

    def get(self, key):
        return self.session.get(key)

    def set(self, key, value):
        self.session[key] = value


def save_intake(store: ReportStore, record, key=STORAGE_KEY):
    """Serializes the record into the slot, replacing any earlier submission."""
    store.set(key, json.dumps(record.to_dict()))


def load_intake(store: ReportStore, key=STORAGE_KEY):
    """
    Reads the stored record back.

    Returns None when nothing was saved or the saved value cannot be turned
    back into a record; callers treat that as "no report available".
    """
    raw = store.get(key)
    if not raw:
        return None

    try:
        return IntakeRecord.from_dict(json.loads(raw))
    except (ValueError, TypeError, KeyError, OverflowError) as e:
        log.warning("Discarding unreadable intake under %r: %s", key, e)
        return None

# logic/knowledge_base.py

import json
import logging
import os
from pathlib import Path

log = logging.getLogger(__name__)

# -----------------------
# Seed dataset
# -----------------------
BASE_DIR = Path(__file__).resolve().parent.parent
SEED_PATH = BASE_DIR / "data" / "lcda_briefs.json"

BRIEF_FIELDS = (
    "zoning_notes",
    "planning_signals",
    "approvals_path",
    "common_risks",
    "confidence_note",
)

DEFAULT_BRIEF = {
    "zoning_notes": [
        "Zoning and planning designations vary by corridor and neighbourhood. "
        "Confirm the parcel’s official designation before you commit.",
    ],
    "planning_signals": [
        "Check access hierarchy, setbacks, and drainage assumptions early. "
        "These often cause expensive surprises.",
    ],
    "approvals_path": [
        "Verify documents and title chain first, then map the approvals path "
        "for your intended use.",
    ],
    "common_risks": [
        "Documentation gaps",
        "Right-of-way/setback conflicts",
        "Drainage exposure",
    ],
    "confidence_note": (
        "This is an advisory brief. We need authoritative datasets and "
        "parcel-level verification to be precise."
    ),
}


def normalize_key(value) -> str:
    return (value or "").strip().lower()


def _copy_brief(brief: dict) -> dict:
    return {
        field: list(brief[field]) if isinstance(brief[field], list) else brief[field]
        for field in BRIEF_FIELDS
    }


class KnowledgeBase:
    """
    LCDA-level public-domain briefs keyed by normalized district name.

    Lookups never fail: an unknown or empty district resolves to the
    generic default brief. Returned briefs are copies.
    """

    def __init__(self, entries=None, default=None):
        self.default = default or DEFAULT_BRIEF
        self.entries = {}

        for name, brief in (entries or {}).items():
            missing = [f for f in BRIEF_FIELDS if f not in brief]
            if missing:
                raise ValueError(f"Brief for {name!r} is missing {', '.join(missing)}")
            self.entries[normalize_key(name)] = brief

    @classmethod
    def from_json(cls, path) -> "KnowledgeBase":
        with open(path, "r", encoding="utf-8") as f:
            entries = json.load(f)

        kb = cls(entries)
        log.info(
            "Loaded LCDA briefs for %s from %s",
            ", ".join(kb.districts()) or "no districts",
            path,
        )
        return kb

    def has_entry(self, lcda) -> bool:
        return normalize_key(lcda) in self.entries

    def lookup(self, lcda) -> dict:
        brief = self.entries.get(normalize_key(lcda))

        if brief is None:
            log.debug("No LCDA brief for %r, using default", lcda)
            brief = self.default

        return _copy_brief(brief)

    def districts(self) -> list:
        return sorted(self.entries)


_seed_kb = None


def default_knowledge_base() -> KnowledgeBase:
    """The bundled seed dataset, loaded once."""
    global _seed_kb
    if _seed_kb is None:
        _seed_kb = KnowledgeBase.from_json(SEED_PATH)
    return _seed_kb


def load_knowledge_base() -> KnowledgeBase:
    """The dataset named by BUILDCHECK_KB_PATH, or the bundled seed."""
    path = os.getenv("BUILDCHECK_KB_PATH")
    if path:
        return KnowledgeBase.from_json(path)
    return default_knowledge_base()

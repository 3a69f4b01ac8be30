# report.py

import logging

from buildcheck.intake import intent_label
from buildcheck.logic.clarifying_questions import find_clarifying_questions
from buildcheck.logic.guidance import build_checklist, build_highlights, build_tailored_focus
from buildcheck.logic.knowledge_base import default_knowledge_base
from buildcheck.logic.signals import build_signals
from buildcheck.logic.topics import infer_topics
from buildcheck.scoring.buildability_v1 import (
    deduction_label,
    risk_label,
    score_band,
    score_buildability_v1,
)

log = logging.getLogger(__name__)


def build_report(record, knowledge_base=None) -> dict:
    """
    Builds the full buildability report for one intake record.

    Pure apart from reading the knowledge base; the same record and
    dataset always give the same report.
    """
    kb = knowledge_base or default_knowledge_base()

    topics = infer_topics(record.message)
    result = score_buildability_v1(record, topics=topics)
    score = result["score"]

    report = {
        "score": score,
        "risk": result["risk"],
        "risk_label": risk_label(result["risk"]),
        "score_band": score_band(score),
        "deductions": [
            {"reason": reason, "label": deduction_label(reason), "points": points}
            for reason, points in result["deductions"]
        ],
        "topics": sorted(topics),
        "signals": build_signals(record, topics),
        "highlights": build_highlights(record.intent),
        "tailored_focus": build_tailored_focus(topics),
        "brief": kb.lookup(record.lcda),
        "brief_matched": kb.has_entry(record.lcda),
        "checklist": build_checklist(record.intent),
        "clarifying_questions": find_clarifying_questions(record),
        "intent_label": intent_label(record.intent),
        "intake": record.to_dict(),
    }

    log.debug(
        "Report for lcda=%r intent=%s: score=%s risk=%s topics=%s",
        record.lcda,
        record.intent,
        score,
        report["risk"],
        report["topics"],
    )

    return report

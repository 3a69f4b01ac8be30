# logic/guidance.py

from buildcheck.intake import ALREADY_BUILDING, BUY_LAND, RISK_CHECK, START_BUILDING
from buildcheck.logic.topics import (
    APPROVALS,
    COST_RISK,
    DRAINAGE,
    ROW_SETBACK,
    TITLE_DOCS,
    URGENCY,
    USE_CASE,
)

INTENT_HIGHLIGHTS = {
    BUY_LAND: [
        "Verify title chain and survey authenticity before payment.",
        "Confirm planning designation and right-of-way constraints early.",
    ],
    START_BUILDING: [
        "Validate approvals readiness before mobilization.",
        "Confirm setbacks, access, and drainage assumptions before design freeze.",
    ],
    ALREADY_BUILDING: [
        "Stop-loss check: confirm compliance risks before further spend.",
        "Resolve any right-of-way/setback conflicts immediately.",
    ],
    RISK_CHECK: [
        "Risk-first scan across approvals, constraints, and documentation.",
        "Identify unknowns to verify with evidence.",
    ],
}

# Order is the order shown on the report
TAILORED_FOCUS = [
    (TITLE_DOCS, "Title & documents"),
    (APPROVALS, "Approvals pathway"),
    (DRAINAGE, "Drainage / flood exposure"),
    (ROW_SETBACK, "Setbacks / right-of-way"),
    (USE_CASE, "Use-case fit"),
    (COST_RISK, "Cost & negotiation risk"),
    (URGENCY, "Fast-track sequencing"),
]

CHECKLIST = [
    "Anchor the exact location: address + area + landmark + closest major junction (or coordinates).",
    "Request and verify: survey plan, deed/title documents, seller identity/authority to sell.",
    "Screen for ROW/setback issues: road expansion history, canal/drainage corridors, powerline easements.",
    "Confirm planning designation for intended use; check if special permits apply.",
    "Only then: negotiate price, pay, and proceed to design/approvals in sequence.",
]

STOP_LOSS_STEP = (
    "Stop-loss step: pause new spend until ROW/setbacks/drainage constraints are cleared."
)


def build_highlights(intent: str) -> list:
    return list(INTENT_HIGHLIGHTS.get(intent, []))


def build_tailored_focus(topics) -> list:
    return [label for topic, label in TAILORED_FOCUS if topic in topics]


def build_checklist(intent: str) -> list:
    steps = list(CHECKLIST)
    if intent == ALREADY_BUILDING:
        steps.insert(0, STOP_LOSS_STEP)
    return steps

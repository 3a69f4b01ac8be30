# logic/signals.py

from buildcheck.intake import ALREADY_BUILDING, START_BUILDING
from buildcheck.logic.topics import APPROVALS, DRAINAGE, ROW_SETBACK, TITLE_DOCS, USE_CASE

GOOD = "good"
WATCH = "watch"
RISK = "risk"
UNKNOWN = "unknown"

STATUS_LABELS = {
    GOOD: "Good",
    WATCH: "Watch",
    RISK: "Risk",
    UNKNOWN: "Unknown",
}

LOCATION_CLARITY = "Location clarity"
TITLE_AND_DOCUMENTS = "Title & documents"
RIGHT_OF_WAY = "Right-of-way & setbacks"
DRAINAGE_EXPOSURE = "Drainage / flood exposure"
APPROVALS_READINESS = "Approvals readiness"
USE_CASE_FIT = "Use-case fit"

SIGNAL_TITLES = (
    LOCATION_CLARITY,
    TITLE_AND_DOCUMENTS,
    RIGHT_OF_WAY,
    DRAINAGE_EXPOSURE,
    APPROVALS_READINESS,
    USE_CASE_FIT,
)

# -----------------------
# (signal, status) -> rationale
# -----------------------
SIGNAL_WHY = {
    (LOCATION_CLARITY, GOOD): "Enough anchors to reduce “wrong place” risk.",
    (LOCATION_CLARITY, WATCH): "Some anchors exist, but location may still be ambiguous.",
    (LOCATION_CLARITY, UNKNOWN): (
        "Location is not anchored strongly enough to make confident checks."
    ),
    (TITLE_AND_DOCUMENTS, RISK): (
        "Your message suggests document/title uncertainty — a common failure point."
    ),
    (TITLE_AND_DOCUMENTS, WATCH): "Document verification is mandatory before major spend.",
    (RIGHT_OF_WAY, RISK): (
        "Setback/ROW issues can trigger demolition risk or approval failure."
    ),
    (RIGHT_OF_WAY, WATCH): (
        "ROW/setbacks are frequent hidden constraints, especially near major corridors."
    ),
    (DRAINAGE_EXPOSURE, RISK): (
        "Drainage/flood indicators mentioned — can raise foundation + infrastructure costs."
    ),
    (DRAINAGE_EXPOSURE, WATCH): (
        "Many areas have micro-flood pockets; treat as a required early check."
    ),
    (APPROVALS_READINESS, UNKNOWN): (
        "Approvals only become relevant once title + constraints are clearer."
    ),
    (APPROVALS_READINESS, RISK): (
        "You referenced approvals — but timing/order may still be wrong."
    ),
    (APPROVALS_READINESS, WATCH): (
        "Approvals are likely needed; readiness depends on use-case + designation."
    ),
    (USE_CASE_FIT, UNKNOWN): (
        "No clear use-case stated; constraints depend heavily on what you want to build."
    ),
    (USE_CASE_FIT, WATCH): (
        "Use-case affects zoning compatibility, parking needs, setbacks, and approvals."
    ),
}

# -----------------------
# (signal, status) -> next action; None matches any status
# -----------------------
SIGNAL_ACTIONS = {
    (LOCATION_CLARITY, GOOD): (
        "Proceed to verification checks using the same exact location details."
    ),
    (LOCATION_CLARITY, None): (
        "Add street/address + nearest major junction; optionally capture coordinates."
    ),
    (TITLE_AND_DOCUMENTS, None): (
        "Request: survey plan + root of title. Verify survey authenticity and seller "
        "authority before payment or approvals."
    ),
    (RIGHT_OF_WAY, None): (
        "Check road expansion history, drainage/powerline easements, and confirm "
        "required setbacks before design freeze."
    ),
    (DRAINAGE_EXPOSURE, None): (
        "Ask for local flood history, inspect during/after rain, check drainage "
        "corridors/canals, and get a basic site assessment."
    ),
    (APPROVALS_READINESS, None): (
        "Confirm planning designation for intended use, then map required permits "
        "and sequence them after document verification."
    ),
    (USE_CASE_FIT, None): (
        "State the intended use (flats, shops, warehouse, etc.) + approximate scale "
        "(floors/units) to sharpen the brief."
    ),
}


def status_label(status: str) -> str:
    return STATUS_LABELS.get(status, "Unknown")


# -----------------------
# Status rules
# -----------------------
def location_status(record) -> str:
    if record.has_coordinates or (record.has_address and record.has_landmark):
        return GOOD
    if record.has_address or record.has_landmark:
        return WATCH
    return UNKNOWN


def topic_status(topic: str, topics) -> str:
    """Title, right-of-way and drainage: a risk only when the message raised it."""
    return RISK if topic in topics else WATCH


def approvals_status(record, topics) -> str:
    if record.intent in (START_BUILDING, ALREADY_BUILDING):
        return RISK if APPROVALS in topics else WATCH
    return UNKNOWN


def use_case_status(record, topics) -> str:
    if USE_CASE in topics or record.has_message:
        return WATCH
    return UNKNOWN


def _signal(title: str, status: str) -> dict:
    action = SIGNAL_ACTIONS.get((title, status)) or SIGNAL_ACTIONS[(title, None)]
    return {
        "title": title,
        "status": status,
        "label": status_label(status),
        "why": SIGNAL_WHY[(title, status)],
        "action": action,
    }


def build_signals(record, topics) -> list:
    """
    Builds the six advisory signals, always in the same order.

    Each status is decided by the rule for its category; the rationale and
    next action are fixed texts keyed by (category, status).
    """

    statuses = [
        (LOCATION_CLARITY, location_status(record)),
        (TITLE_AND_DOCUMENTS, topic_status(TITLE_DOCS, topics)),
        (RIGHT_OF_WAY, topic_status(ROW_SETBACK, topics)),
        (DRAINAGE_EXPOSURE, topic_status(DRAINAGE, topics)),
        (APPROVALS_READINESS, approvals_status(record, topics)),
        (USE_CASE_FIT, use_case_status(record, topics)),
    ]

    return [_signal(title, status) for title, status in statuses]

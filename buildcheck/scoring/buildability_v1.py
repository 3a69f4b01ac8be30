from buildcheck.intake import ALREADY_BUILDING, BUY_LAND
from buildcheck.logic.topics import DRAINAGE, ROW_SETBACK, TITLE_DOCS, infer_topics

BASE_SCORE = 80
MIN_SCORE = 20
MAX_SCORE = 92

LOW_RISK_THRESHOLD = 78
HIGH_RISK_THRESHOLD = 55

MISSING_CONTEXT_PENALTY = 5
BUY_LAND_PENALTY = 4
ALREADY_BUILDING_PENALTY = 8
RISK_TOPIC_PENALTY = 4

RISK_TOPICS = (TITLE_DOCS, DRAINAGE, ROW_SETBACK)

DEDUCTION_LABELS = {
    "missing_address": "No street or estate address",
    "missing_landmark": "No nearby landmark",
    "missing_message": "No description of the plan",
    "intent_buy_land": "Buying land carries title and designation risk",
    "intent_already_building": "Building has started before checks were done",
    "topic_title_docs": "Title or document concerns raised",
    "topic_drainage": "Drainage or flood concerns raised",
    "topic_row_setback": "Right-of-way or setback concerns raised",
}

RISK_LABELS = {
    "low": "Low",
    "medium": "Medium",
    "high": "High",
}


def clamp(n, low, high):
    return max(low, min(high, n))


def risk_tier(score: int) -> str:
    if score >= LOW_RISK_THRESHOLD:
        return "low"
    if score < HIGH_RISK_THRESHOLD:
        return "high"
    return "medium"


def risk_label(risk: str) -> str:
    return RISK_LABELS.get(risk, "High")


def deduction_label(reason: str) -> str:
    return DEDUCTION_LABELS.get(reason, reason.replace("_", " "))


def score_band(score: int) -> str:
    if score >= LOW_RISK_THRESHOLD:
        return "Proceed with verification"
    if score >= HIGH_RISK_THRESHOLD:
        return "Proceed cautiously"
    return "High risk — verify before spending"


def score_buildability_v1(record, topics=None):
    """
    Heuristic buildability score for one intake record.

    Starts at 80 and subtracts fixed points for missing location or
    message context, for riskier intents, and for each risk topic found
    in the message. The total is clamped to 20..92.

    Returns {"score", "risk", "topics", "deductions"}.
    """
    if topics is None:
        topics = infer_topics(record.message)

    score = BASE_SCORE
    deductions = []

    # =====================================================
    # MISSING CONTEXT
    # =====================================================
    if not record.has_address:
        deductions.append(("missing_address", MISSING_CONTEXT_PENALTY))

    if not record.has_landmark:
        deductions.append(("missing_landmark", MISSING_CONTEXT_PENALTY))

    if not record.has_message:
        deductions.append(("missing_message", MISSING_CONTEXT_PENALTY))

    # =====================================================
    # INTENT
    # =====================================================
    if record.intent == BUY_LAND:
        deductions.append(("intent_buy_land", BUY_LAND_PENALTY))

    if record.intent == ALREADY_BUILDING:
        deductions.append(("intent_already_building", ALREADY_BUILDING_PENALTY))

    # =====================================================
    # KEYWORD RISK
    # =====================================================
    for topic in RISK_TOPICS:
        if topic in topics:
            deductions.append((f"topic_{topic}", RISK_TOPIC_PENALTY))

    for _, points in deductions:
        score -= points

    score = clamp(score, MIN_SCORE, MAX_SCORE)

    return {
        "score": score,
        "risk": risk_tier(score),
        "topics": topics,
        "deductions": deductions,
    }

# logic/topics.py

# -----------------------
# Topic tags
# -----------------------
ZONING = "zoning"
ROW_SETBACK = "row_setback"
DRAINAGE = "drainage"
APPROVALS = "approvals"
TITLE_DOCS = "title_docs"
COST_RISK = "cost_risk"
URGENCY = "urgency"
USE_CASE = "use_case"

# Trigger phrases per topic. Matching is plain substring on the
# lowercased message, so "row" also fires inside longer words.
TOPIC_RULES = {
    ZONING: [
        "zoning",
        "zone",
        "residential",
        "commercial",
        "mixed",
        "industrial",
        "land use",
    ],
    ROW_SETBACK: [
        "setback",
        "right of way",
        "row",
        "easement",
        "encroach",
    ],
    DRAINAGE: [
        "drainage",
        "flood",
        "flooding",
        "water",
        "canal",
        "swamp",
    ],
    APPROVALS: [
        "permit",
        "approval",
        "planning permit",
        "ministry",
        "authority",
    ],
    TITLE_DOCS: [
        "survey",
        "c of o",
        "coo",
        "excision",
        "gazette",
        "title",
        "deed",
        "registry",
    ],
    COST_RISK: [
        "budget",
        "cost",
        "money",
        "price",
        "agent",
        "seller",
    ],
    URGENCY: [
        "urgent",
        "asap",
        "quick",
        "today",
        "tomorrow",
    ],
    USE_CASE: [
        "school",
        "hospital",
        "church",
        "mosque",
        "shop",
        "market",
        "warehouse",
        "factory",
        "fuel",
    ],
}

TOPICS = tuple(TOPIC_RULES)


def infer_topics(message, rules=None) -> frozenset:
    """
    Extracts topic tags from the optional free-text message.

    A topic is present when any of its trigger phrases occurs in the
    lowercased text. Empty or missing messages yield no topics.
    """

    text = (message or "").lower()
    if not text:
        return frozenset()

    rules = TOPIC_RULES if rules is None else rules

    return frozenset(
        topic
        for topic, phrases in rules.items()
        if any(p in text for p in phrases)
    )

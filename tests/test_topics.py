"""Tests for keyword topic extraction."""

from buildcheck.logic.topics import (
    APPROVALS,
    COST_RISK,
    DRAINAGE,
    ROW_SETBACK,
    TITLE_DOCS,
    TOPICS,
    URGENCY,
    USE_CASE,
    ZONING,
    infer_topics,
)


def test_empty_message_has_no_topics():
    assert infer_topics("") == frozenset()
    assert infer_topics(None) == frozenset()


def test_vocabulary():
    assert set(TOPICS) == {
        ZONING, ROW_SETBACK, DRAINAGE, APPROVALS,
        TITLE_DOCS, COST_RISK, URGENCY, USE_CASE,
    }


def test_single_topic():
    assert infer_topics("Is the area prone to flooding?") == {DRAINAGE}
    assert infer_topics("Do I need a permit first?") == {APPROVALS}


def test_case_insensitive():
    assert infer_topics("THE C OF O IS PENDING") == {TITLE_DOCS}
    assert infer_topics("Commercial Zone") == {ZONING}


def test_many_topics():
    topics = infer_topics(
        "Agent says the price is fine but I worry about the canal setback "
        "and need to open a shop urgently"
    )
    assert topics == {COST_RISK, DRAINAGE, ROW_SETBACK, USE_CASE, URGENCY}


def test_substring_matching_inside_words():
    # "row" is a trigger, so it also fires inside "tomorrow"
    assert infer_topics("Can I start tomorrow") == {ROW_SETBACK, URGENCY}


def test_no_trigger_words():
    assert infer_topics("Planning a small family home with three bedrooms") == frozenset()


def test_custom_rules():
    rules = {"noise": ["generator", "noisy"]}
    assert infer_topics("Noisy generator next door", rules=rules) == {"noise"}
    assert infer_topics("flood", rules=rules) == frozenset()


def test_deterministic():
    text = "Survey and drainage near the market"
    assert infer_topics(text) == infer_topics(text)

"""Tests for the interactive CLI."""

import json

from buildcheck.run_report import ask_intent, run_cli


def scripted(answers):
    answers = iter(answers)
    return lambda prompt="": next(answers)


def test_ask_intent_default_and_retry(capsys):
    assert ask_intent(scripted([""])) == "buy_land"
    assert ask_intent(scripted(["9", "x", "3"])) == "already_building"
    assert "Please pick a number" in capsys.readouterr().out


def test_run_cli_prints_report(capsys):
    answers = [
        # first attempt: email is invalid, gate re-prompts
        "Ada Obi", "ada", "", "Agric", "", "Ikorodu", "1", "",
        # second attempt
        "Ada Obi", "ada@example.com", "", "Agric", "", "Ikorodu", "1", "",
    ]
    report = run_cli(ask=scripted(answers))

    out = capsys.readouterr().out
    assert "Please enter a valid email address." in out
    assert "=== BUILDABILITY REPORT ===" in out
    assert report["score"] == 61
    assert report["brief_matched"] is True

    printed = json.loads(out.split("=== BUILDABILITY REPORT ===", 1)[1])
    assert printed["score"] == 61

"""Tests for the Flask intake/report routes."""

from unittest.mock import patch

import pytest
from openai import OpenAIError

import app as webapp
from buildcheck.storage import STORAGE_KEY

AJAX = {"X-Requested-With": "XMLHttpRequest"}


@pytest.fixture
def client():
    webapp.app.config["TESTING"] = True
    with webapp.app.test_client() as test_client:
        yield test_client


class TestIntake:

    def test_form_renders(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert b"Can I Build Here?" in resp.data
        assert b"timeout: 8000" in resp.data

    def test_invalid_form_is_rejected(self, client, valid_form):
        valid_form["email"] = "nope"
        resp = client.post("/", data=valid_form)
        assert resp.status_code == 400
        assert b"valid email" in resp.data

    def test_invalid_form_ajax(self, client, valid_form):
        valid_form["name"] = ""
        resp = client.post("/", data=valid_form, headers=AJAX)
        assert resp.status_code == 400
        assert resp.get_json()["errors"] == ["Please enter your full name."]

    def test_valid_form_redirects_to_report(self, client, valid_form):
        resp = client.post("/", data=valid_form)
        assert resp.status_code == 302
        assert resp.headers["Location"].endswith("/report")

    def test_valid_form_ajax(self, client, valid_form):
        resp = client.post("/", data=valid_form, headers=AJAX)
        assert resp.get_json() == {"redirect": "/report"}


class TestReport:

    def test_no_report_yet(self, client):
        resp = client.get("/report")
        assert resp.status_code == 200
        assert b"No report data found" in resp.data

    def test_no_report_ajax(self, client):
        assert client.get("/report", headers=AJAX).get_json() == {"report": None}

    def test_unreadable_slot(self, client):
        with client.session_transaction() as sess:
            sess[STORAGE_KEY] = "{broken"
        resp = client.get("/report")
        assert b"No report data found" in resp.data

    def test_overflowing_timestamp_is_no_report(self, client):
        with client.session_transaction() as sess:
            sess[STORAGE_KEY] = '{"intent": "buy_land", "ts": 1e999}'
        resp = client.get("/report")
        assert resp.status_code == 200
        assert b"No report data found" in resp.data

    def test_report_after_submit(self, client, valid_form):
        client.post("/", data=valid_form)
        resp = client.get("/report")
        assert resp.status_code == 200
        assert b"80/100" in resp.data
        assert b"Risk: Low" in resp.data
        assert b"Land use can vary sharply by corridor" in resp.data

    def test_report_lists_deductions(self, client, valid_form):
        client.post("/", data=dict(valid_form, intent="buy_land", address="", message=""))
        resp = client.get("/report")
        assert b"Why points were taken off" in resp.data
        assert b"No street or estate address (-5)" in resp.data
        assert b"Buying land carries title and designation risk (-4)" in resp.data

    def test_report_json(self, client, valid_form):
        client.post("/", data=dict(valid_form, lat="6.6", lng="3.5"))
        report = client.get("/report", headers=AJAX).get_json()["report"]
        assert report["score"] == 80
        assert report["risk"] == "low"
        assert report["intake"]["coords"] == {"lat": 6.6, "lng": 3.5}
        assert report["signals"][0]["status"] == "good"

    def test_resubmission_replaces_report(self, client, valid_form):
        client.post("/", data=valid_form)
        client.post("/", data=dict(valid_form, intent="already_building"))
        report = client.get("/report", headers=AJAX).get_json()["report"]
        assert report["score"] == 72


class TestAsk:

    def test_empty_question(self, client):
        resp = client.post("/ask", json={"question": "  "})
        assert resp.status_code == 400

    @pytest.mark.parametrize("body", [[1, 2], "hello", {"question": 123}, {"question": None}])
    def test_malformed_json_body(self, client, body):
        resp = client.post("/ask", json=body)
        assert resp.status_code == 400
        assert resp.get_json() == {"error": "Please type a question."}

    def test_product_question(self, client):
        resp = client.post("/ask", json={"question": "How does this work exactly?"})
        assert "buildability score" in resp.get_json()["answer"]

    def test_not_configured(self, client):
        with patch("app.is_configured", return_value=False):
            resp = client.post("/ask", json={"question": "What is a C of O?"})
        assert resp.get_json()["answer"] == webapp.NOT_CONFIGURED_ANSWER

    def test_answer_uses_stored_lcda(self, client, valid_form):
        client.post("/", data=valid_form)
        with patch("app.is_configured", return_value=True), \
                patch("app.explain_concept", return_value="A C of O is ...") as explain:
            resp = client.post("/ask", data={"question": "What is a C of O?"})
        assert resp.get_json() == {"answer": "A C of O is ..."}
        explain.assert_called_once_with("What is a C of O?", lcda="Ikorodu")

    def test_api_failure(self, client):
        with patch("app.is_configured", return_value=True), \
                patch("app.explain_concept", side_effect=OpenAIError("boom")):
            resp = client.post("/ask", json={"question": "What is excision?"})
        assert resp.status_code == 502
        assert "error" in resp.get_json()

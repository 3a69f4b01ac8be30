from flask import Flask, render_template, request, session, jsonify, redirect, url_for
from buildcheck.intake import INTENT_LABELS, INTENTS, record_from_form, validate_intake
from buildcheck.logic.explain import explain_concept, is_configured
from buildcheck.logic.product_explain import ADVISORY, explain_product
from buildcheck.logic.product_questions import is_product_question
from buildcheck.report import build_report
from buildcheck.logic.knowledge_base import load_knowledge_base
from buildcheck.storage import SessionStore, load_intake, save_intake
from openai import OpenAIError
import json
import logging
from flask_session import Session
import os
from dotenv import load_dotenv
load_dotenv()


logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
log = logging.getLogger("buildcheck.app")


app = Flask(__name__)
app.secret_key = os.getenv("SECRET_KEY")
if not app.secret_key:
    raise RuntimeError("SECRET_KEY is not set in environment variables")


# -----------------------
# Server-side Session Config
# -----------------------
app.config["SESSION_TYPE"] = "filesystem"
app.config["SESSION_PERMANENT"] = False
app.config["SESSION_USE_SIGNER"] = True
app.config["SESSION_FILE_DIR"] = os.getenv("SESSION_FILE_DIR", "./flask_session")
app.config["SESSION_FILE_THRESHOLD"] = 100
app.config["SESSION_COOKIE_HTTPONLY"] = True
app.config["SESSION_COOKIE_SECURE"] = False  # Set to True when using HTTPS


os.makedirs(app.config["SESSION_FILE_DIR"], exist_ok=True)

Session(app)


# -----------------------
# Public-domain briefs
# -----------------------
knowledge_base = load_knowledge_base()

NOT_CONFIGURED_ANSWER = (
    "The planning assistant is not available right now. "
    "Your report's checklist lists the checks to make first."
)


def wants_json():
    return request.headers.get("X-Requested-With") == "XMLHttpRequest"


def render_intake(form=None, errors=None, status=200):
    return render_template(
        "intake.html",
        form=form or {},
        errors=errors or [],
        intents=[(i, INTENT_LABELS[i]) for i in INTENTS],
    ), status


@app.route("/", methods=["GET", "POST"])
def intake():

    # -----------------------
    # FIRST LOAD
    # -----------------------
    if request.method == "GET":
        return render_intake()

    # -----------------------
    # GENERATE GATE
    # -----------------------
    form = request.form
    errors = validate_intake(form)

    if errors:
        log.info("Intake rejected: %s", errors)
        if wants_json():
            return jsonify({"errors": errors}), 400
        return render_intake(form=form, errors=errors, status=400)

    # -----------------------
    # SAVE (overwrites any earlier submission)
    # -----------------------
    record = record_from_form(form)
    save_intake(SessionStore(session), record)

    log.debug("Stored intake: %s", json.dumps(record.to_dict()))

    if wants_json():
        return jsonify({"redirect": url_for("report")})

    return redirect(url_for("report"))


@app.route("/report")
def report():
    record = load_intake(SessionStore(session))

    if record is None:
        if wants_json():
            return jsonify({"report": None})
        return render_template("no_report.html")

    analysis = build_report(record, knowledge_base=knowledge_base)

    if wants_json():
        return jsonify({"report": analysis})

    return render_template(
        "report.html",
        report=analysis,
        intake=analysis["intake"],
        advisory=ADVISORY,
    )


@app.route("/ask", methods=["POST"])
def ask():
    payload = request.get_json(silent=True)
    if payload is None:
        payload = request.form

    question = payload.get("question") if isinstance(payload, dict) else None
    question = question.strip() if isinstance(question, str) else ""

    if not question:
        return jsonify({"error": "Please type a question."}), 400

    # -----------------------
    # PRODUCT / PROCESS QUESTIONS
    # -----------------------
    if is_product_question(question):
        return jsonify({"answer": explain_product()})

    if not is_configured():
        return jsonify({"answer": NOT_CONFIGURED_ANSWER})

    record = load_intake(SessionStore(session))
    lcda = record.lcda if record else ""

    try:
        answer = explain_concept(question, lcda=lcda)
    except OpenAIError as e:
        log.error("Planning assistant failed: %s", e)
        return jsonify({"error": "The planning assistant could not answer right now."}), 502

    return jsonify({"answer": answer})


if __name__ == "__main__":
    app.run(debug=True)

import json
import logging
import os

from dotenv import load_dotenv

from buildcheck.intake import INTENT_LABELS, INTENTS, record_from_form, validate_intake
from buildcheck.logic.knowledge_base import load_knowledge_base
from buildcheck.report import build_report
from buildcheck.storage import InMemoryStore, load_intake, save_intake

load_dotenv()

# -----------------------
# Prompts (UX)
# -----------------------
FIELD_PROMPTS = [
    ("name", "Full name: "),
    ("email", "Email: "),
    ("address", "Street / estate address (optional): "),
    ("area", "Area: "),
    ("landmark", "Nearest landmark or junction (optional): "),
    ("lcda", "LCDA / LGA: "),
]


def ask_intent(ask=input) -> str:
    print("\nWhat are you planning to do?")
    for i, intent in enumerate(INTENTS, start=1):
        print(f"  {i}. {INTENT_LABELS[intent]}")

    while True:
        choice = ask("Choose 1-4 [1]: ").strip()
        if not choice:
            return INTENTS[0]
        if choice.isdigit() and 1 <= int(choice) <= len(INTENTS):
            return INTENTS[int(choice) - 1]
        print("Please pick a number from the list.")


def collect_form(ask=input) -> dict:
    while True:
        form = {field: ask(prompt).strip() for field, prompt in FIELD_PROMPTS}
        form["intent"] = ask_intent(ask)
        form["message"] = ask("Any question (optional): ").strip()

        errors = validate_intake(form)
        if not errors:
            return form

        print("\nI need a few more details before generating the report:")
        for e in errors:
            print(f"- {e}")
        print()


def run_cli(ask=input, kb=None):
    # -----------------------
    # Welcome
    # -----------------------
    print("\nCan I Build Here?")
    print("Enter the location and your intent. We'll help you avoid common mistakes.\n")

    store = InMemoryStore()
    save_intake(store, record_from_form(collect_form(ask)))

    # Read back the same way the report page does
    record = load_intake(store)
    if record is None:
        print("\nNo report data found. Please run the check again.")
        return None

    report = build_report(record, knowledge_base=kb or load_knowledge_base())

    print("\n=== BUILDABILITY REPORT ===")
    print(json.dumps(report, indent=2, ensure_ascii=False))
    return report


if __name__ == "__main__":
    logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
    run_cli()

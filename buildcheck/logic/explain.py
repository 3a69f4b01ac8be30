# logic/explain.py

import logging
import os

from dotenv import load_dotenv
from openai import OpenAI

load_dotenv()

log = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-mini"

_client = None


def is_configured() -> bool:
    return bool(os.getenv("OPENAI_API_KEY"))


def get_client() -> OpenAI:
    global _client
    if _client is None:
        _client = OpenAI(api_key=os.getenv("OPENAI_API_KEY"))
    return _client


def explain_concept(user_text: str, lcda: str = "") -> str:
    """
    Answers land, planning and construction questions in simple terms.
    This is NOT a verdict on the user's site; the report does that.
    """

    location_hint = ""
    if lcda and lcda.strip():
        location_hint = f"\nThe user is asking about land in the {lcda.strip()} area."

    log.debug("Planning assistant question (%d chars)", len(user_text))

    response = get_client().chat.completions.create(
        model=os.getenv("OPENAI_MODEL", DEFAULT_MODEL),
        messages=[
            {
                "role": "system",
                "content": (
                    "You are a land-use planning and property due-diligence advisor.\n"
                    "Explain planning rules, land documents, setbacks, right-of-way, "
                    "drainage and approvals to people buying land or building.\n\n"
                    "Rules:\n"
                    "- Do NOT claim to know the status of any specific parcel\n"
                    "- Do NOT give a score or a go/no-go decision\n"
                    "- Point to the document or authority that would confirm the answer\n"
                    "- Keep explanations practical and easy to understand\n"
                    + location_hint
                )
            },
            {
                "role": "user",
                "content": user_text
            }
        ]
    )

    return response.choices[0].message.content.strip()

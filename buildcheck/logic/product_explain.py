# logic/product_explain.py

ADVISORY = (
    "Civitas does not replace official government processes or professional "
    "due diligence. Use this report to structure verification, request evidence, "
    "and confirm decisions with qualified professionals and relevant authorities."
)


def explain_product() -> str:
    """
    Explains what the buildability check does and how it works.
    This is for product / process questions only.
    """

    return (
        "The buildability check helps you avoid common, expensive mistakes before "
        "you buy land or build.\n\n"

        "You tell us where the site is (address, area, landmark, LCDA) and what you "
        "plan to do. From that we produce:\n"
        "1. A buildability score (20–92) and a risk tier (low / medium / high)\n"
        "2. Signals for location clarity, title & documents, right-of-way & setbacks, "
        "drainage, approvals readiness and use-case fit\n"
        "3. An LCDA-level public-domain brief and a step-by-step verification checklist\n\n"

        "The score drops when location details are thin, when your intent carries more "
        "exposure (buying land, or already building), and when your question mentions "
        "title, drainage or right-of-way concerns.\n\n"

        "Advisory:\n"
        + ADVISORY
    )

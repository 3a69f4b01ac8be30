# logic/product_questions.py


def is_product_question(text: str) -> bool:
    """
    Rule-based detection for questions about the check itself
    (how it works, how the score is built, whether to trust it).
    """

    # Guard: very short inputs are never product questions
    if len(text.strip().split()) <= 2:
        return False

    t = text.lower().strip()

    product_phrases = [
        # how it works
        "how does this work",
        "how does it work",
        "how is the score",
        "how do you score",
        "how is this calculated",
        "what is your basis",

        # what is checked
        "what do you check",
        "what are you checking",
        "what does the report",

        # accuracy / reliability
        "how accurate is this",
        "is this accurate",
        "can i trust this",
        "is this reliable",

        # meta / tool identity
        "what is this tool",
        "what is civitas",
        "what can you do",
    ]

    return any(phrase in t for phrase in product_phrases)

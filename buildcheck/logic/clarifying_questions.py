from buildcheck.intake import MIN_LANDMARK_LEN

ADDRESS_QUESTION = (
    "What is the street/estate/layout name (or closest known address) for this site?"
)
LANDMARK_QUESTION = (
    "What is the nearest major junction/landmark to anchor the exact location?"
)
USE_QUESTION = (
    "What do you plan to build or use the land for (e.g., flats, shop, warehouse)?"
)
DOCUMENTS_QUESTION = (
    "Do you have documents already (survey, deed, excision/gazette, C of O)?"
)


def find_clarifying_questions(record) -> list:
    """
    Returns the follow-up questions worth asking for this record.
    Checks run in a fixed order: address, landmark, then message.
    """

    questions = []

    if not (record.address or "").strip():
        questions.append(ADDRESS_QUESTION)

    if len((record.landmark or "").strip()) < MIN_LANDMARK_LEN:
        questions.append(LANDMARK_QUESTION)

    # No message at all: we know neither the use nor the documents
    if not (record.message or "").strip():
        questions.append(USE_QUESTION)
        questions.append(DOCUMENTS_QUESTION)

    return questions

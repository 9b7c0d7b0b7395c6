from __future__ import annotations

GENERIC_ERROR = "Something went wrong, please try again"

# Substrings of collaborator messages mapped to what the user is shown.
KNOWN_ERRORS = (
    ("already registered", "This email is already registered"),
    ("invalid login credentials", "Incorrect email or password"),
)


def friendly_message(error: Exception | str) -> str:
    text = str(error)
    lowered = text.lower()
    for needle, message in KNOWN_ERRORS:
        if needle in lowered:
            return message
    return text or GENERIC_ERROR

import string

# Typographic marks that show up in statute and rule text
LEGAL_SYMBOLS = "§¶“”‘’–—…"

ALLOWED_SYMBOLS = " " + string.punctuation + LEGAL_SYMBOLS


def is_allowed_char(ch: str, extra: str = "") -> bool:
    if len(ch) != 1:
        return False
    return ch.isalnum() or ch in ALLOWED_SYMBOLS or ch in extra


def has_answer(text: str) -> bool:
    """A comparison is only worth running when the learner typed something."""
    return bool(text and text.strip())

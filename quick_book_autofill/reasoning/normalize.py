"""Text normalization utilities"""

import string

# Codes the passenger form's gender <select> uses as option values
GENDER_CODES = {
    "male": "M",
    "female": "F",
    "transgender": "T",
}


def normalize_text(text):
    """Normalize text for keyword matching - lowercase, punctuation to spaces"""
    if not text:
        return ""
    text = text.lower()
    text = text.translate(str.maketrans(string.punctuation, " " * len(string.punctuation)))
    return " ".join(text.split())


def map_gender(gender):
    """male/female/transgender (any case) -> M/F/T; anything else unchanged"""
    if gender is None:
        return gender
    return GENDER_CODES.get(gender.strip().lower(), gender)

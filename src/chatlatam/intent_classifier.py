# intent_classifier.py
# ============================================================
# Rule-based intent detection over normalized tokens
#  - detect_field(tokens)   -> Field asked about (capital, poblacion...)
#  - detect_country(tokens) -> first token that is not a field keyword
#  - classify_intent(tokens) -> dict with both
# ============================================================

from enum import Enum
from typing import Any, Callable, Dict, List, Sequence, Tuple


class Field(Enum):
    """Category of fact requested. The value is the key used in BD.txt."""

    CAPITAL = "capital"
    POPULATION = "poblacion"
    TERRITORY = "territorio"
    TRIVIA = "dato"
    NONE = ""


# Evaluated in order for every token; first match wins.
FIELD_RULES: List[Tuple[Callable[[str], bool], Field]] = [
    (lambda tok: "territor" in tok, Field.TERRITORY),
    (lambda tok: "poblaci" in tok, Field.POPULATION),
    (lambda tok: "capital" in tok, Field.CAPITAL),
    (lambda tok: tok in {"dato", "curioso"}, Field.TRIVIA),
]

FIELD_KEYWORDS = {"territorio", "capital", "dato", "curioso"}


def detect_field(tokens: Sequence[str]) -> Field:
    for token in tokens:
        for matches, field in FIELD_RULES:
            if matches(token):
                return field
    return Field.NONE


def is_field_keyword(token: str) -> bool:
    return token in FIELD_KEYWORDS or "poblaci" in token


def detect_country(tokens: Sequence[str]) -> str:
    """
    Return the first token that does not describe the field.

    Only a single token is used, so "costa rica" yields "costa".
    """
    for token in tokens:
        if is_field_keyword(token):
            continue
        return token
    return ""


def classify_intent(tokens: Sequence[str]) -> Dict[str, Any]:
    """
    Classify a tokenized question.

    Returns:
        {
          "field": Field,
          "country": str   # "" when no country token remains
        }
    """
    return {
        "field": detect_field(tokens),
        "country": detect_country(tokens),
    }

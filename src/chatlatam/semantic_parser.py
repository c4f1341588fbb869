# semantic_parser.py
# ============================================================
# Text normalization, tokenization and per-turn semantic parse
#
# Strategy:
# 1. Normalize (lowercase, fold Spanish accents, punctuation -> space)
# 2. Split on whitespace and drop stopwords
# 3. Rule-based field/country detection (intent_classifier)
# ============================================================

import string
import unicodedata
from typing import Any, Dict, List

from .intent_classifier import Field, classify_intent

EXIT_KEYWORD = "salir"
AFFIRMATIVE = "si"

# Palabras sin significado para la consulta
STOPWORDS = frozenset({
    "el", "la", "los", "las", "un", "una", "unos", "unas",
    "y", "o", "de", "del", "en", "para", "por", "con", "cual", "es",
})

# Applied after lower(), so uppercase accents are covered too
ACCENT_FOLD = str.maketrans("áéíóúñ", "aeioun")


# ============================================================
# UTILITY FUNCTIONS
# ============================================================

def _is_punctuation(ch: str) -> bool:
    return ch in string.punctuation or unicodedata.category(ch).startswith("P")


def normalize_text(text: str) -> str:
    """Lowercase, fold accents and replace each punctuation char by a space."""
    text = unicodedata.normalize("NFC", text or "").lower()
    chars = [" " if _is_punctuation(ch) else ch for ch in text]
    return "".join(chars).translate(ACCENT_FOLD)


def tokenize(text: str) -> List[str]:
    return [w for w in normalize_text(text).split() if w not in STOPWORDS]


def is_exit_command(text: str) -> bool:
    return normalize_text(text).strip() == EXIT_KEYWORD


def is_affirmative(text: str) -> bool:
    return normalize_text(text).strip() == AFFIRMATIVE


# ============================================================
# SEMANTIC PARSE
# ============================================================

def build_semantic_parse(user_input: str) -> Dict[str, Any]:
    """
    Build the query for one turn.

    Returns:
        {
          "raw_text": str,        # untouched input, sent to the LLM tier
          "tokens": [str, ...],
          "field": Field,
          "country": str
        }
    """
    tokens = tokenize(user_input)
    intent = classify_intent(tokens)
    return {
        "raw_text": user_input,
        "tokens": tokens,
        "field": intent["field"],
        "country": intent["country"],
    }


def is_understood(semantic: Dict[str, Any]) -> bool:
    return semantic.get("field", Field.NONE) is not Field.NONE and bool(semantic.get("country"))

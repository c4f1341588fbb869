# llm_gateway.py
# ============================================================
# Third answer tier: ask ChatGPT and clean the reply for the console
# ============================================================

from __future__ import annotations
from typing import Any, Optional
import json
import re
import sys

from openai import OpenAI

from . import config

# First "content": "<json string>" pair in the raw reply
CONTENT_PATTERN = re.compile(r'"content"\s*:\s*"((?:[^"\\]|\\.)*)"', re.DOTALL)

VOWEL_TO_ASCII = str.maketrans({
    "á": "a", "é": "e", "í": "i", "ó": "o", "ú": "u",
    "\n": " ", "\r": " ", "\t": " ",
})

_client: Optional[OpenAI] = None


def get_client() -> Optional[OpenAI]:
    """Lazily build the OpenAI client. Returns None if it cannot be created."""
    global _client
    if _client is None:
        try:
            _client = OpenAI(api_key=config.API_KEY)
        except Exception as e:
            print(f"Warning: OpenAI client initialization failed: {e}", file=sys.stderr)
            _client = None
    return _client


def request_completion(question: str, client: Any = None, model: Optional[str] = None) -> str:
    """
    Send the persona and the untouched user question.

    Returns the raw JSON body, or an error message when the client is
    missing or the request fails.
    """
    if client is None:
        client = get_client()
    if client is None:
        return "Error inicializando el cliente de ChatGPT. Revisa OPENAI_API_KEY."

    try:
        response = client.chat.completions.with_raw_response.create(
            model=model or config.LLM_MODEL,
            messages=[
                {"role": "system", "content": config.SYSTEM_PERSONA},
                {"role": "user", "content": question},
            ],
        )
        return response.text
    except Exception as e:
        print(f"Error ChatGPT: {e}", file=sys.stderr)
        return f"Error consultando ChatGPT: {e}"


def extract_content(raw: str) -> Optional[str]:
    match = CONTENT_PATTERN.search(raw or "")
    if match is None:
        return None
    try:
        return json.loads(f'"{match.group(1)}"')
    except json.JSONDecodeError:
        return match.group(1)


def to_console_text(text: str) -> str:
    """Transliterate the five accented vowels, drop any other non-ASCII or non-printable char."""
    text = text.translate(VOWEL_TO_ASCII)
    return "".join(ch for ch in text if ch.isascii() and ch.isprintable())


def ask_llm(question: str, client: Any = None) -> str:
    raw = request_completion(question, client)
    content = extract_content(raw)
    if content is None:
        return raw
    return to_console_text(content)

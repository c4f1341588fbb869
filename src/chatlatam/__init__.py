"""
Chatlatam package: Latin American geography chatbot.

Public entry points:
- ChatBot: conversation loop over the three answer tiers
- LocalStore: facts loaded from the pipe-delimited data file
- build_semantic_parse(): tokens, field and country of one question
- main(): console entry point
"""

from .chatbot import ChatBot, main
from .intent_classifier import Field
from .local_store import LocalStore
from .semantic_parser import build_semantic_parse

__all__ = [
    "ChatBot",
    "Field",
    "LocalStore",
    "build_semantic_parse",
    "main",
]

# chatbot.py - THREE-TIER FALLBACK ARCHITECTURE
# Every question goes: local file -> database -> ChatGPT
# The user confirms each step past the local file

from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Optional, Union

from . import config
from .intent_classifier import Field
from .llm_gateway import ask_llm
from .local_store import LocalStore
from .run_query import lookup_country_field
from .semantic_parser import build_semantic_parse, is_affirmative, is_exit_command, is_understood

BANNER = (
    "Conexion BD local, archivo de texto y API ChatGPT lista.\n\n"
    "Chatbot sobre paises de Latinoamerica. Escribe 'salir' para terminar."
)
FAREWELL = "Bot: Hasta luego"
NOT_UNDERSTOOD = "Bot: No entendi tu pregunta."
ASK_DB = "Bot: No encontre la respuesta en el archivo. Deseas buscar en la base de datos? (si/no): "
DB_DECLINED = "Bot: Entendido, no consultare en la base de datos."
DB_MISS = "Bot: Tampoco encontre respuesta en la base de datos."
ASK_LLM = "Bot: Quieres que pregunte a ChatGPT? (si/no): "


def with_unit(value: str, field: Field) -> str:
    if field is Field.TERRITORY:
        return f"{value} km"
    return value


def ask_yes_no(prompt: str) -> bool:
    """Only "si" (any case or accent) counts as yes."""
    try:
        return is_affirmative(input(prompt))
    except (EOFError, KeyboardInterrupt):
        print()
        return False


class ChatBot:
    """Owns the local store and runs the conversation, one turn at a time."""

    def __init__(
        self,
        store: LocalStore,
        db_path: Optional[Union[str, Path]] = None,
        llm_client: Any = None,
    ):
        self.store = store
        self.db_path = db_path
        self.llm_client = llm_client

    # ------------------------------------------------------------
    # Tiers
    # ------------------------------------------------------------

    def answer_from_file(self, semantic: Dict[str, Any]) -> bool:
        print("(Archivo) Analizando pregunta...")
        field = semantic["field"]
        answer = self.store.get(semantic["country"], field)
        if not answer:
            return False
        print(f"Bot (Archivo): {field.value}: {with_unit(answer, field)}\n")
        return True

    def answer_from_db(self, semantic: Dict[str, Any]) -> bool:
        print("(BD) Analizando pregunta...")
        field = semantic["field"]
        country = semantic["country"]
        answer = lookup_country_field(country, field, self.db_path)
        if not answer:
            return False
        print(f"Bot (BD): {field.value} de {country}: {with_unit(answer, field)}\n")
        return True

    def answer_from_llm(self, semantic: Dict[str, Any]) -> None:
        print("(ChatGPT) Analizando pregunta...")
        reply = ask_llm(semantic["raw_text"], self.llm_client)
        print(f"Bot (ChatGPT): {reply}\n")

    # ------------------------------------------------------------
    # Turn handling
    # ------------------------------------------------------------

    def handle_turn(self, user_text: str) -> bool:
        """
        Answer one question.

        Returns False when the conversation must end, which happens when the
        user declines the database step.
        """
        semantic = build_semantic_parse(user_text)
        if not is_understood(semantic):
            print(NOT_UNDERSTOOD)
            return True

        if self.answer_from_file(semantic):
            return True

        if not ask_yes_no(ASK_DB):
            print(DB_DECLINED)
            print(FAREWELL)
            return False

        if self.answer_from_db(semantic):
            return True

        print(DB_MISS)
        if ask_yes_no(ASK_LLM):
            self.answer_from_llm(semantic)
        return True

    def run(self) -> None:
        print(BANNER)
        while True:
            try:
                user_text = input("\nTu: ")
            except (EOFError, KeyboardInterrupt):
                print()
                print(FAREWELL)
                break

            if is_exit_command(user_text):
                print(FAREWELL)
                break

            if not self.handle_turn(user_text):
                break


# ============================================================
# MAIN DRIVER
# ============================================================

def main() -> None:
    store = LocalStore.load(config.DATA_FILE, config.DATA_ENCODING)
    ChatBot(store, config.DB_PATH).run()


if __name__ == "__main__":
    main()

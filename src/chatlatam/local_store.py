# local_store.py
# ============================================================
# First answer tier: facts loaded once from a "pais|campo|valor" file
# ============================================================

from __future__ import annotations
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple, Union
import sys

from .intent_classifier import Field
from .semantic_parser import normalize_text

Key = Tuple[str, str]


def make_key(country: str, field: Union[Field, str]) -> Key:
    """Normalized (country, field) key. Stored and incoming keys both go through here."""
    if isinstance(field, Field):
        field = field.value
    return normalize_text(country).strip(), normalize_text(field).strip()


def parse_line(line: str) -> Optional[Tuple[Key, str]]:
    """Split one record on its first two pipes. Returns None for malformed lines."""
    parts = line.rstrip("\r\n").split("|", 2)
    if len(parts) < 3:
        return None
    country, field, value = parts
    return make_key(country, field), value


class LocalStore:
    """Read-only mapping (country, field) -> value."""

    def __init__(self, entries: Optional[Iterable[Tuple[Key, str]]] = None):
        self._entries: Dict[Key, str] = {}
        for key, value in entries or []:
            self._entries[key] = value

    @classmethod
    def load(cls, path: Union[str, Path], encoding: str = "utf-8-sig") -> "LocalStore":
        """
        Load every well-formed line of the data file.

        An unreadable file is reported on stderr and gives an empty store,
        so every lookup falls through to the next tier.
        """
        try:
            with open(path, encoding=encoding) as fh:
                records = [rec for rec in (parse_line(line) for line in fh) if rec is not None]
        except OSError as e:
            print(f"Error al abrir {path}: {e}", file=sys.stderr)
            return cls()
        return cls(records)

    def get(self, country: str, field: Union[Field, str]) -> str:
        return self._entries.get(make_key(country, field), "")

    def __contains__(self, key: Key) -> bool:
        country, field = key
        return make_key(country, field) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

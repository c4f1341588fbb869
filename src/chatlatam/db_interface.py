# db_interface.py
# ============================================================
# DB Interface Layer - Generates SQL queries without executing them
# run_query.py executes them against the database
# ============================================================

from __future__ import annotations
from typing import Any, List, Optional, Tuple

from . import config
from .intent_classifier import Field

# ------------------------------------------------------------
# CONFIG
# ------------------------------------------------------------

# Map detected field to the column of the Capitales table
FIELD_TO_COLUMN = {
    Field.CAPITAL:    "nombre_capital",
    Field.POPULATION: "poblacion",
    Field.TERRITORY:  "territorio_km2",
    Field.TRIVIA:     "dato_curioso",
}

COUNTRY_COLUMN = "pais"


# ------------------------------------------------------------
# QUERY BUILDER (NO DB CONNECTION)
# ------------------------------------------------------------

def build_sql_string(
    country: str,
    field: Field,
    table: str = config.TABLE_NAME,
) -> Tuple[Optional[str], List[Any]]:
    """
    Build the parameterized lookup for one (country, field) pair.

    The country is matched case-insensitively. Returns (None, []) when the
    field has no column.
    """
    column = FIELD_TO_COLUMN.get(field)
    if column is None:
        return None, []

    sql = f"SELECT {column} FROM {table} WHERE LOWER({COUNTRY_COLUMN}) = LOWER(?)"
    return sql, [country]

import sqlite3
import sys
from pathlib import Path
from typing import Optional, Tuple, Union

from . import config
from .db_interface import build_sql_string
from .intent_classifier import Field

PathLike = Union[str, Path]


# -------------------------------
# DB helpers
# -------------------------------

def connect_db(
    db_path: Optional[PathLike] = None,
    create: bool = True,
) -> Tuple[sqlite3.Connection, sqlite3.Cursor]:
    """
    Open a connection to the SQLite database and return (conn, cursor).

    With create=False a missing database file is an error instead of being
    created empty.
    """
    path = Path(db_path or config.DB_PATH)
    if create:
        conn = sqlite3.connect(str(path))
    else:
        conn = sqlite3.connect(f"{path.resolve().as_uri()}?mode=rw", uri=True)
    cursor = conn.cursor()
    return conn, cursor


def disconnect_db(conn: sqlite3.Connection) -> None:
    """Commit any pending changes and close the connection."""
    conn.commit()
    conn.close()


# -------------------------------
# Core execution logic
# -------------------------------

def lookup_country_field(country: str, field: Field, db_path: Optional[PathLike] = None) -> str:
    """
    Second answer tier. Returns the requested column for the country, or ""
    when there is no row, no value, or the database cannot be queried.
    """
    sql_string, sql_params = build_sql_string(country, field)
    if sql_string is None:
        return ""

    try:
        conn, cursor = connect_db(db_path, create=False)
        try:
            cursor.execute(sql_string, sql_params)
            row = cursor.fetchone()
        finally:
            disconnect_db(conn)
    except sqlite3.Error as e:
        print(f"Error SQL: {e}", file=sys.stderr)
        return ""

    if row is None or row[0] is None:
        return ""
    return str(row[0])


def init_db(script_path: Optional[PathLike] = None, db_path: Optional[PathLike] = None) -> None:
    """Create and seed the database from a SQL script."""
    script = Path(script_path or config.DB_SCRIPT).read_text(encoding="utf-8")
    conn, _ = connect_db(db_path)
    try:
        conn.executescript(script)
    finally:
        disconnect_db(conn)


# -------------------------------
# CLI usage
# -------------------------------
#
#   python -m chatlatam.run_query [script.sql] [database.sqlite]
#
# Both arguments default to the paths in config.py.
# -------------------------------

if __name__ == "__main__":
    script_arg = sys.argv[1] if len(sys.argv) > 1 else None
    db_arg = sys.argv[2] if len(sys.argv) > 2 else None
    init_db(script_arg, db_arg)
    print(f"Base de datos lista: {db_arg or config.DB_PATH}")

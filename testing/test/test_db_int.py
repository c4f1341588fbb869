import sqlite3

import pytest

from chatlatam import config, run_query
from chatlatam import db_interface as db
from chatlatam.intent_classifier import Field


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "capitales.sqlite"
    conn = sqlite3.connect(str(path))
    conn.executescript(
        """
        CREATE TABLE Capitales (
            pais TEXT, nombre_capital TEXT, poblacion INTEGER,
            territorio_km2 INTEGER, dato_curioso TEXT
        );
        INSERT INTO Capitales VALUES ('Chile', 'Santiago', 19629590, 756102, NULL);
        INSERT INTO Capitales VALUES ('Peru', 'Lima', 33396698, 1285216, 'Machu Picchu');
        """
    )
    conn.commit()
    conn.close()
    return path


# -------------------------------------------------------
# Test: build_sql_string
# -------------------------------------------------------

def test_build_sql_string_maps_field_to_column():
    sql, params = db.build_sql_string("mexico", Field.TERRITORY)

    assert sql == "SELECT territorio_km2 FROM Capitales WHERE LOWER(pais) = LOWER(?)"
    assert params == ["mexico"]


@pytest.mark.parametrize("field, column", [
    (Field.CAPITAL, "nombre_capital"),
    (Field.POPULATION, "poblacion"),
    (Field.TRIVIA, "dato_curioso"),
])
def test_build_sql_string_columns(field, column):
    sql, _ = db.build_sql_string("chile", field)
    assert sql.startswith(f"SELECT {column} FROM")


def test_build_sql_string_none_field():
    assert db.build_sql_string("chile", Field.NONE) == (None, [])


# -------------------------------------------------------
# Test: lookup_country_field
# -------------------------------------------------------

def test_lookup_found_case_insensitive(db_path):
    assert run_query.lookup_country_field("chile", Field.CAPITAL, db_path) == "Santiago"
    assert run_query.lookup_country_field("PERU", Field.TRIVIA, db_path) == "Machu Picchu"


def test_lookup_numeric_value_as_string(db_path):
    assert run_query.lookup_country_field("chile", Field.TERRITORY, db_path) == "756102"


def test_lookup_null_value_is_miss(db_path):
    assert run_query.lookup_country_field("chile", Field.TRIVIA, db_path) == ""


def test_lookup_unknown_country_is_miss(db_path):
    assert run_query.lookup_country_field("narnia", Field.CAPITAL, db_path) == ""


def test_lookup_none_field_skips_db(monkeypatch):
    def fail(*args, **kwargs):
        raise AssertionError("should not connect")

    monkeypatch.setattr(run_query, "connect_db", fail)
    assert run_query.lookup_country_field("chile", Field.NONE) == ""


def test_lookup_missing_db_file_is_not_created(tmp_path, capsys):
    missing = tmp_path / "vacia.sqlite"

    assert run_query.lookup_country_field("chile", Field.CAPITAL, missing) == ""
    assert "unable to open database file" in capsys.readouterr().err
    assert not missing.exists()


def test_lookup_db_without_table_is_logged_and_missed(tmp_path, capsys):
    empty_db = tmp_path / "sin_tabla.sqlite"
    sqlite3.connect(str(empty_db)).close()

    assert run_query.lookup_country_field("chile", Field.CAPITAL, empty_db) == ""
    assert "no such table" in capsys.readouterr().err


def test_lookup_unreachable_path_is_miss(tmp_path, capsys):
    missing = tmp_path / "no" / "existe" / "db.sqlite"

    assert run_query.lookup_country_field("chile", Field.CAPITAL, missing) == ""
    assert "Error SQL" in capsys.readouterr().err


# -------------------------------------------------------
# Test: init_db
# -------------------------------------------------------

def test_init_db_from_shipped_script(tmp_path):
    path = tmp_path / "seed.sqlite"
    run_query.init_db(config.DB_SCRIPT, path)

    assert run_query.lookup_country_field("mexico", Field.CAPITAL, path) == "Ciudad de Mexico"
    assert run_query.lookup_country_field("chile", Field.TERRITORY, path) == "756102"


def test_init_db_is_rerunnable(tmp_path):
    script = tmp_path / "mini.sql"
    script.write_text(
        "DROP TABLE IF EXISTS Capitales;"
        "CREATE TABLE Capitales (pais TEXT, nombre_capital TEXT, poblacion INTEGER,"
        " territorio_km2 INTEGER, dato_curioso TEXT);"
        "INSERT INTO Capitales VALUES ('Cuba', 'La Habana', 1, 2, 'isla');",
        encoding="utf-8",
    )
    path = tmp_path / "mini.sqlite"

    run_query.init_db(script, path)
    run_query.init_db(script, path)

    conn = sqlite3.connect(str(path))
    count = conn.execute("SELECT COUNT(*) FROM Capitales").fetchone()[0]
    conn.close()
    assert count == 1

import sqlite3

import pytest

from pinyintable.database import (
    DATABASE_VERSION,
    TableDatabase,
    TableDatabaseError,
    open_databases,
)


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "sub" / "table-user.db"
    TableDatabase.create_database(path)
    return path


@pytest.fixture
def db(db_path):
    with TableDatabase(db_path, writable=True) as database:
        yield database


def _import(db, tmp_path, content):
    source = tmp_path / "table.txt"
    source.write_text(content, encoding="utf-8")
    db.import_table(source)


def test_created_database_exists(db_path):
    assert db_path.is_file()
    assert TableDatabase.is_database_existed(db_path) is True


def test_missing_file_not_existed(tmp_path):
    assert TableDatabase.is_database_existed(tmp_path / "nope.db") is False


def test_wrong_version_not_existed(tmp_path):
    path = tmp_path / "old.db"
    conn = sqlite3.connect(path)
    conn.execute("CREATE TABLE desc (name TEXT PRIMARY KEY, value TEXT)")
    conn.execute("INSERT INTO desc VALUES ('version', '1.0')")
    conn.commit()
    conn.close()
    assert TableDatabase.is_database_existed(path) is False


def test_version_recorded(db_path):
    conn = sqlite3.connect(db_path)
    value = conn.execute("SELECT value FROM desc WHERE name='version'").fetchone()[0]
    conn.close()
    assert value == DATABASE_VERSION


def test_create_replaces_existing(db, db_path, tmp_path):
    _import(db, tmp_path, "a 啊 5\n")
    db.close()
    TableDatabase.create_database(db_path)
    with TableDatabase(db_path, writable=True) as fresh:
        assert fresh.list_phrases("") == []


def test_list_phrases_order(db, tmp_path):
    _import(db, tmp_path, "ab 长词 50\na 甲 5\naa 乙 20\nab 丙 20\nb 丁 99\n")
    assert db.list_phrases("a") == ["乙", "丙", "甲", "长词"]


def test_list_phrases_sums_frequency(db, tmp_path):
    _import(db, tmp_path, "a 甲 10\nab 乙 15\nac 甲 10\n")
    assert db.list_phrases("a") == ["甲", "乙"]


def test_default_frequency_when_missing(db, tmp_path):
    _import(db, tmp_path, "a 甲\nb 乙 3\n")
    assert db.get_phrase_info("甲") == 10
    assert db.get_phrase_info("乙") == 3


def test_update_and_get(db, tmp_path):
    _import(db, tmp_path, "a 甲 7\n")
    assert db.get_phrase_info("甲") == 7
    db.update_phrase("甲", 17)
    assert db.get_phrase_info("甲") == 17


def test_missing_phrase_raises_key_error(db):
    with pytest.raises(KeyError):
        db.get_phrase_info("无")


def test_delete_phrase(db, tmp_path):
    _import(db, tmp_path, "a 甲 7\nab 乙 8\n")
    db.delete_phrase("甲")
    assert db.list_phrases("a") == ["乙"]


def test_export_import_round_trip(db, tmp_path):
    _import(db, tmp_path, "a 甲 7\nab 乙 8\nb 丙\n")
    exported = tmp_path / "export.txt"
    db.export_table(exported)
    assert exported.read_text(encoding="utf-8") == "a\t甲\t7\nab\t乙\t8\nb\t丙\t10\n"

    other_path = tmp_path / "other.db"
    TableDatabase.create_database(other_path)
    with TableDatabase(other_path, writable=True) as other:
        other.import_table(exported)
        again = tmp_path / "again.txt"
        other.export_table(again)
    assert again.read_text(encoding="utf-8") == exported.read_text(encoding="utf-8")


def test_import_appends_after_max_id(db, tmp_path):
    _import(db, tmp_path, "a 甲 1\n")
    _import(db, tmp_path, "b 乙 2\n")
    out = tmp_path / "out.txt"
    db.export_table(out)
    assert out.read_text(encoding="utf-8").splitlines() == ["a\t甲\t1", "b\t乙\t2"]


def test_clear_table(db, tmp_path):
    _import(db, tmp_path, "a 甲 1\nb 乙 2\n")
    db.clear_table()
    assert db.list_phrases("") == []


def test_read_only_rejects_writes(db_path, tmp_path):
    with TableDatabase(db_path, writable=False) as ro:
        with pytest.raises(TableDatabaseError):
            ro.update_phrase("甲", 1)


def test_open_missing_read_only_raises(tmp_path):
    with pytest.raises(TableDatabaseError):
        TableDatabase(tmp_path / "missing.db", writable=False)


def test_unopened_database_raises():
    with pytest.raises(TableDatabaseError):
        TableDatabase().list_phrases("a")


def test_close_marks_closed(db_path):
    database = TableDatabase(db_path, writable=True)
    assert database.is_open is True
    database.close()
    assert database.is_open is False


def test_open_databases(tmp_path, db_path):
    user_path = tmp_path / "cache" / "user.db"
    system, user = open_databases([tmp_path / "absent.db", db_path], user_path)
    try:
        assert system is not None and system.is_open
        assert user is not None and user.is_open
        assert TableDatabase.is_database_existed(user_path) is True
    finally:
        system.close()
        user.close()


def test_open_databases_without_system(tmp_path):
    system, user = open_databases([tmp_path / "absent.db"], tmp_path / "u.db")
    try:
        assert system is None
        assert user.list_phrases("") == []
    finally:
        user.close()
"""SQLite-backed phrase table with user self-learning."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

DATABASE_VERSION = "1.12.0"
DEFAULT_FREQUENCY = 10

_SCHEMA = (
    "BEGIN TRANSACTION;\n"
    "CREATE TABLE IF NOT EXISTS desc (name TEXT PRIMARY KEY, value TEXT);\n"
    f"INSERT OR IGNORE INTO desc VALUES ('version', '{DATABASE_VERSION}');\n"
    "COMMIT;\n"
    "CREATE TABLE IF NOT EXISTS phrases ("
    "id INTEGER PRIMARY KEY NOT NULL,"
    "tabkeys TEXT NOT NULL,"
    "phrase TEXT NOT NULL,"
    "freq INTEGER NOT NULL DEFAULT (10)"
    ");"
)


class TableDatabaseError(Exception):
    """Raised when a table database operation fails."""


def _uri(filename: str | Path, mode: str) -> str:
    return f"{Path(filename).absolute().as_uri()}?mode={mode}"


def _parse_table(text: str) -> Iterable[tuple[str, str, int]]:
    """Yield (tabkeys, phrase, freq) from whitespace-separated tokens.

    The frequency is optional; when the token after the phrase is not an
    integer the default frequency is used and that token starts the next entry.
    """
    tokens = text.split()
    pos = 0
    while pos + 1 < len(tokens):
        tabkeys, phrase = tokens[pos], tokens[pos + 1]
        pos += 2
        freq = DEFAULT_FREQUENCY
        if pos < len(tokens):
            try:
                freq = int(tokens[pos])
            except ValueError:
                pass
            else:
                pos += 1
        yield tabkeys, phrase, freq


class TableDatabase:
    """A phrase table stored in an SQLite file."""

    def __init__(self, filename: str | Path | None = None, writable: bool = False) -> None:
        self._conn: sqlite3.Connection | None = None
        if filename is not None:
            self.open_database(filename, writable)

    @staticmethod
    def is_database_existed(filename: str | Path) -> bool:
        """True if ``filename`` is a table database of the expected version."""
        if not Path(filename).is_file():
            return False
        try:
            conn = sqlite3.connect(_uri(filename, "ro"), uri=True)
        except sqlite3.Error:
            return False
        try:
            row = conn.execute("SELECT value FROM desc WHERE name = 'version';").fetchone()
        except sqlite3.Error:
            return False
        finally:
            conn.close()
        return row is not None and isinstance(row[0], str) and row[0] == DATABASE_VERSION

    @staticmethod
    def create_database(filename: str | Path) -> None:
        """Create a fresh, empty table database, replacing any existing file."""
        path = Path(filename)
        try:
            if path.is_file():
                path.unlink()
            path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
        except OSError as exc:
            raise TableDatabaseError(f"cannot prepare {path}: {exc}") from exc
        try:
            conn = sqlite3.connect(_uri(path, "rwc"), uri=True, isolation_level=None)
        except sqlite3.Error as exc:
            raise TableDatabaseError(f"cannot create {path}: {exc}") from exc
        try:
            conn.executescript(_SCHEMA)
        except sqlite3.Error as exc:
            raise TableDatabaseError(f"cannot initialise {path}: {exc}") from exc
        finally:
            conn.close()

    def open_database(self, filename: str | Path, writable: bool) -> None:
        """Open ``filename``; read-only unless ``writable``."""
        self.close()
        mode = "rwc" if writable else "ro"
        try:
            self._conn = sqlite3.connect(_uri(filename, mode), uri=True, isolation_level=None)
        except sqlite3.Error as exc:
            raise TableDatabaseError(f"cannot open {filename}: {exc}") from exc

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> TableDatabase:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise TableDatabaseError("database is not open")
        return self._conn

    def _execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        try:
            return self._connection().execute(sql, params)
        except sqlite3.Error as exc:
            logger.warning("%s: %s", exc, sql)
            raise TableDatabaseError(str(exc)) from exc

    def list_phrases(self, prefix: str) -> list[str]:
        """Phrases whose table keys start with ``prefix``.

        Ordered by phrase length, then total frequency (descending), then id.
        """
        rows = self._execute(
            "SELECT phrase FROM phrases WHERE tabkeys LIKE ? GROUP BY phrase "
            "ORDER BY LENGTH(phrase) ASC, SUM(freq) DESC, MIN(id) ASC;",
            (prefix + "%",),
        ).fetchall()
        phrases = []
        for (phrase,) in rows:
            if not isinstance(phrase, str):
                raise TableDatabaseError("phrase column holds non-text data")
            phrases.append(phrase)
        return phrases

    def get_phrase_info(self, phrase: str) -> int:
        """Frequency of ``phrase``; raises KeyError if it is not in the table."""
        row = self._execute("SELECT freq FROM phrases WHERE phrase = ?;", (phrase,)).fetchone()
        if row is None:
            raise KeyError(phrase)
        if not isinstance(row[0], int):
            raise TableDatabaseError("freq column holds non-integer data")
        return row[0]

    def update_phrase(self, phrase: str, freq: int) -> None:
        self._execute("UPDATE phrases SET freq = ? WHERE phrase = ?;", (int(freq), phrase))

    def delete_phrase(self, phrase: str) -> None:
        self._execute("DELETE FROM phrases WHERE phrase = ?;", (phrase,))

    def import_table(self, filename: str | Path) -> None:
        """Add entries from a text file of ``tabkeys phrase [freq]`` records."""
        text = Path(filename).read_text(encoding="utf-8")
        row = self._execute("SELECT MAX(id) FROM phrases;").fetchone()
        last_id = row[0] if row is not None and isinstance(row[0], int) else 0
        if row is not None and row[0] is not None and not isinstance(row[0], int):
            logger.warning("Can't find id for user table database.")
        conn = self._connection()
        self._execute("BEGIN TRANSACTION;")
        try:
            for offset, (tabkeys, phrase, freq) in enumerate(_parse_table(text), start=1):
                conn.execute(
                    "INSERT OR REPLACE INTO phrases (id, tabkeys, phrase, freq) "
                    "VALUES (?, ?, ?, ?);",
                    (last_id + offset, tabkeys, phrase, freq),
                )
        except sqlite3.Error as exc:
            conn.execute("ROLLBACK;")
            raise TableDatabaseError(str(exc)) from exc
        self._execute("COMMIT;")

    def export_table(self, filename: str | Path) -> None:
        """Write every entry, in id order, as ``tabkeys<TAB>phrase<TAB>freq`` lines."""
        rows = self._execute(
            "SELECT tabkeys, phrase, freq FROM phrases ORDER BY id ASC;"
        ).fetchall()
        with open(filename, "w", encoding="utf-8", newline="\n") as output:
            for tabkeys, phrase, freq in rows:
                if not isinstance(tabkeys, str) or not isinstance(phrase, str):
                    raise TableDatabaseError("table holds non-text keys or phrases")
                if not isinstance(freq, int):
                    raise TableDatabaseError("table holds a non-integer frequency")
                output.write(f"{tabkeys}\t{phrase}\t{freq}\n")

    def clear_table(self) -> None:
        self._execute("DELETE FROM phrases;")


def open_databases(
    system_paths: Iterable[str | Path], user_path: str | Path
) -> tuple[TableDatabase | None, TableDatabase | None]:
    """Open the system table (first path that opens) and the user table.

    The user table is created when missing or outdated. A database that
    cannot be opened is logged and returned as None.
    """
    system: TableDatabase | None = None
    for path in system_paths:
        try:
            system = TableDatabase(path, writable=False)
        except TableDatabaseError:
            continue
        break
    if system is None:
        logger.warning("can't open system table database.")

    user: TableDatabase | None = None
    try:
        if not TableDatabase.is_database_existed(user_path):
            TableDatabase.create_database(user_path)
        user = TableDatabase(user_path, writable=True)
    except TableDatabaseError:
        logger.warning("can't open user table database.")
    return system, user
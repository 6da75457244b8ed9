"""Creation of the VM state database."""

from __future__ import annotations

import sqlite3
from contextlib import closing
from pathlib import Path

DB_PATH = "db/vm.db"

SCHEMA = (
    "CREATE TABLE IF NOT EXISTS vm_state("
    "id INTEGER PRIMARY KEY AUTOINCREMENT,"
    "user TEXT,"
    "poste TEXT,"
    "pub_key TEXT,"
    "date TEXT DEFAULT CURRENT_DATE );"
)

SQLITE_ERROR = 1


class DatabaseError(Exception):
    """The database could not be prepared; *code* says why."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(message)
        self.code = code

    def __str__(self) -> str:
        return f"code {self.code}: {self.args[0]}"


def init_database(path: str | Path = DB_PATH) -> Path:
    """Create the folder and the ``vm_state`` table if missing; return the path."""
    db_path = Path(path)
    folder = db_path.parent
    if str(folder) not in ("", "."):
        try:
            folder.mkdir(mode=0o755, exist_ok=True)
        except OSError as exc:
            raise DatabaseError(-1, f"mkdir error: {exc}") from exc
    try:
        with closing(sqlite3.connect(db_path)) as connection:
            connection.execute(SCHEMA)
            connection.commit()
    except sqlite3.Error as exc:
        code = getattr(exc, "sqlite_errorcode", SQLITE_ERROR)
        raise DatabaseError(code, str(exc)) from exc
    return db_path
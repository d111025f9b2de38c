from __future__ import annotations

import json
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True, readonly: bool = False):
    """Yield ``(conn, cursor)``; commits on success unless ``readonly``, rolls back on error."""
    conn = conn_factory.connect()
    cur = conn.cursor(dictionary=dictionary)
    try:
        yield conn, cur
        if not readonly:
            conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        cur.close()
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    return cur.fetchone() or None


def fetchall(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or [])


def load_json_column(value: Any, default: Any = None) -> Any:
    """Decode a JSON column.

    Depending on the server and connector version the value arrives as
    ``str``, ``bytes`` or already-decoded Python data; NULL and unparseable
    text both give ``default``.
    """
    if value is None:
        return default
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if not isinstance(value, str):
        return value
    if not value.strip():
        return default
    try:
        return json.loads(value)
    except ValueError:
        return default


def dump_json_column(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False, sort_keys=True)

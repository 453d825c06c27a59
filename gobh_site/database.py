"""
Document store backed by SQLite.

Each record is a JSON document in a named collection. The row id is the
store's internal identifier (``_id``); callers strip it before returning
documents to clients.
"""
import json
import logging
import sqlite3
import threading
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from .utils import now_iso

logger = logging.getLogger(__name__)

INTERNAL_ID = "_id"

DDL_DOCUMENTS = """
CREATE TABLE IF NOT EXISTS documents (
  _id INTEGER PRIMARY KEY AUTOINCREMENT,
  collection TEXT NOT NULL,
  body TEXT NOT NULL,
  created_at TEXT NOT NULL
);
"""

DDL_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_documents_collection ON documents(collection);",
]


class StoreError(Exception):
    """Raised when the document store is unavailable."""


def strip_internal(document: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of the document without its internal identifier."""
    return {key: value for key, value in document.items() if key != INTERNAL_ID}


class DocumentStore:
    """SQLite-backed collection of JSON documents.

    The store has an explicit lifecycle: ``open()`` at startup and
    ``close()`` at shutdown. Statements are serialized with a lock so a
    single connection can be shared by the server's worker threads.
    """

    def __init__(self, path: str):
        self.path = path
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()

    def __enter__(self) -> "DocumentStore":
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def open(self) -> "DocumentStore":
        """Connect and create the schema if needed."""
        if self._conn is not None:
            return self
        conn = sqlite3.connect(self.path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        if self.path != ":memory:":
            conn.execute("PRAGMA journal_mode=WAL;")
            conn.execute("PRAGMA synchronous=NORMAL;")
        conn.execute(DDL_DOCUMENTS)
        for ddl in DDL_INDEXES:
            conn.execute(ddl)
        conn.commit()
        self._conn = conn
        logger.info(f"Document store opened: {self.path}")
        return self

    def close(self) -> None:
        if self._conn is None:
            return
        with self._lock:
            self._conn.close()
            self._conn = None
        logger.info(f"Document store closed: {self.path}")

    @contextmanager
    def _cursor(self):
        """Yield a cursor while holding the connection lock."""
        if self._conn is None:
            raise StoreError("Document store is not open")
        with self._lock:
            try:
                yield self._conn.cursor()
                self._conn.commit()
            except sqlite3.Error as e:
                logger.error(f"Database error: {e}")
                self._conn.rollback()
                raise

    def insert_one(self, collection: str, document: Dict[str, Any]) -> int:
        """Insert a document and return its internal identifier."""
        body = json.dumps(strip_internal(document), ensure_ascii=False, default=str)
        with self._cursor() as cur:
            cur.execute(
                "INSERT INTO documents (collection, body, created_at) VALUES (?, ?, ?)",
                (collection, body, now_iso()),
            )
            return cur.lastrowid

    def find(
        self,
        collection: str,
        sort: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Return documents of a collection, optionally sorted by a top-level key."""
        direction = "DESC" if descending else "ASC"
        sql = "SELECT _id, body FROM documents WHERE collection = ?"
        parameters: List[Any] = [collection]
        if sort:
            sql += f" ORDER BY json_extract(body, ?) {direction}, _id {direction}"
            parameters.append(f"$.{sort}")
        else:
            sql += " ORDER BY _id ASC"
        if limit is not None:
            sql += " LIMIT ?"
            parameters.append(limit)

        with self._cursor() as cur:
            rows = cur.execute(sql, parameters).fetchall()

        documents = []
        for row in rows:
            document = json.loads(row["body"])
            document[INTERNAL_ID] = row["_id"]
            documents.append(document)
        return documents

    def ping(self) -> bool:
        """Run a trivial query to confirm the store is reachable."""
        with self._cursor() as cur:
            cur.execute("SELECT 1").fetchone()
        return True

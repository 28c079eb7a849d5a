import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

import pycouchdb

from blogapi.exceptions import StoreError

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class Clause:
    """A filter clause evaluated against a raw store record."""

    def __call__(self, record: Record) -> bool:
        raise NotImplementedError

    def __and__(self, other: "Clause") -> "And":
        return And(self, other)


@dataclass(frozen=True)
class Equals(Clause):
    attr: str
    value: Any

    def __call__(self, record: Record) -> bool:
        # a missing attribute never matches, not even a falsy value
        return self.attr in record and record[self.attr] == self.value


@dataclass(frozen=True)
class Contains(Clause):
    """Element of a list attribute, or substring of a string attribute."""

    attr: str
    value: Any

    def __call__(self, record: Record) -> bool:
        current = record.get(self.attr)
        if isinstance(current, (list, tuple, set)):
            return self.value in current
        if isinstance(current, str) and isinstance(self.value, str):
            return self.value in current
        return False


def record_id(record: Record) -> str:
    """The post id of a record, falling back to the document id."""
    return str(record.get("id") or record.get("_id") or "")


@dataclass(frozen=True)
class HasId(Clause):
    post_id: str

    def __call__(self, record: Record) -> bool:
        return record_id(record) == self.post_id


class And(Clause):
    def __init__(self, *clauses: Callable[[Record], bool]):
        self.clauses = clauses

    def __call__(self, record: Record) -> bool:
        return all(clause(record) for clause in self.clauses)

    def __repr__(self) -> str:
        return f"And{self.clauses!r}"


class CouchPostStore:
    """
    Scan/put access to the posts database.

    The store has no ORDER BY: scan results come back in whatever order
    CouchDB delivers them.
    """

    def __init__(self, couch_db):
        self.db = couch_db

    def scan(self, predicate: Callable[[Record], bool]) -> List[Record]:
        try:
            docs = [row.get("doc", row) for row in self.db.all(include_docs=True)]
        except Exception as e:
            raise StoreError(f"Error scanning posts with {predicate!r}: {e}") from e

        return [
            doc
            for doc in docs
            if not str(doc.get("_id", "")).startswith("_design/") and predicate(doc)
        ]

    def put(self, record: Record) -> Record:
        doc_id = record.get("id")
        if not doc_id:
            raise StoreError(
                f"Record is missing the 'id' key. Available keys: {sorted(record)}"
            )

        doc = {**record, "_id": doc_id}
        try:
            try:
                doc["_rev"] = self.db.get(doc_id)["_rev"]
            except pycouchdb.exceptions.NotFound:
                logger.debug(f"No stored document for {doc_id}, creating it")
            return self.db.save(doc)
        except Exception as e:
            raise StoreError(f"Error saving post {doc_id}: {e}") from e

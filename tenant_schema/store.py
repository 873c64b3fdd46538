# tenant_schema/store.py
from typing import Any, Dict, Optional, Sequence, Tuple

from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from .errors import UniqueConstraintViolation

TENANT_KEY = ("tenantId",)
EVENT_KEY = ("tenantId", "eventId")


def _violated_key(col: Collection, doc: Dict[str, Any], err: DuplicateKeyError,
                  natural_key: Optional[Sequence[str]]) -> Optional[Tuple[str, ...]]:
    pattern = (err.details or {}).get("keyPattern")
    if pattern:
        return tuple(pattern)
    # Servers before 4.2 (and in-memory doubles) do not report keyPattern:
    # the natural key is the culprit only if its value is already stored.
    if natural_key and col.find_one({f: doc.get(f) for f in natural_key}, {"_id": 1}):
        return tuple(natural_key)
    return None


def insert_unique(col: Collection, doc: Dict[str, Any], natural_key: Optional[Sequence[str]] = None):
    """
    insert_one, but a unique-index rejection comes back as
    UniqueConstraintViolation so callers never look at driver error codes.
    The violation's .key names the index fields that clashed, when known.
    Returns the inserted _id.
    """
    try:
        return col.insert_one(doc).inserted_id
    except DuplicateKeyError as e:
        raise UniqueConstraintViolation(col.name, doc, _violated_key(col, doc, e, natural_key)) from e


def insert_tenant(col: Collection, doc: Dict[str, Any]):
    return insert_unique(col, doc, TENANT_KEY)


def insert_event(col: Collection, doc: Dict[str, Any]):
    return insert_unique(col, doc, EVENT_KEY)

# tenant_schema/indexes.py
"""
Declared indexes for tenant_configurations and extracted_events.

Every index has a stable name. create_index with the same name and key spec is
a no-op on the server, so ensure_indexes() can be re-run safely without
checking what already exists. Changing a name or key here means the old index
must be dropped by hand; check_indexes() reports such drift.
"""
from __future__ import annotations

import json
from collections import namedtuple
from typing import Dict, Iterable, List

from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.database import Database

from . import config

IndexSpec = namedtuple("IndexSpec", ["name", "keys", "unique", "sparse"], defaults=(False, False))


TENANT_INDEXES = (
    IndexSpec("idx_tenant_id_unique", [("tenantId", ASCENDING)], unique=True),
    IndexSpec("idx_active", [("active", ASCENDING)]),
    # scheduler: active tenants due for extraction, stalest first
    IndexSpec("idx_active_last_attempted", [("active", ASCENDING), ("lastAttemptedExtraction", ASCENDING)]),
    # only tenants currently in error are indexed
    IndexSpec("idx_extraction_error", [("lastExtractionError", ASCENDING)], sparse=True),
)

EVENT_INDEXES = (
    IndexSpec("idx_tenant_id", [("tenantId", ASCENDING)]),
    IndexSpec("idx_event_id", [("eventId", ASCENDING)]),
    IndexSpec("idx_extracted_at", [("extractedAt", ASCENDING)]),
    IndexSpec("idx_status", [("status", ASCENDING)]),
    IndexSpec("idx_tenant_extracted_at", [("tenantId", ASCENDING), ("extractedAt", ASCENDING)]),
    # duplicate-extraction guard
    IndexSpec("idx_tenant_event_unique", [("tenantId", ASCENDING), ("eventId", ASCENDING)], unique=True),
    IndexSpec("idx_status_retry", [("status", ASCENDING), ("retryCount", ASCENDING)]),
)


def catalogue() -> Dict[str, tuple]:
    """collection name -> declared IndexSpecs"""
    return {
        config.TENANT_COLL: TENANT_INDEXES,
        config.EVENTS_COLL: EVENT_INDEXES,
    }


def ensure_collections(db: Database, names: Iterable[str]) -> List[str]:
    """Create the missing collections; returns the names that were created."""
    existing = set(db.list_collection_names())
    created = []
    for name in names:
        if name not in existing:
            db.create_collection(name)
            created.append(name)
    return created


def ensure_indexes(col: Collection, specs: Iterable[IndexSpec]) -> List[str]:
    names = []
    for spec in specs:
        opts = {"name": spec.name}
        if spec.unique:
            opts["unique"] = True
        if spec.sparse:
            opts["sparse"] = True
        names.append(col.create_index(spec.keys, **opts))
    return names


def _normalise_key(key) -> List[tuple]:
    # legacy shells stored directions as doubles (1.0); text/hashed stay strings
    return [
        (field, direction if isinstance(direction, str) else int(direction))
        for field, direction in (key.items() if hasattr(key, "items") else key)
    ]


def format_key(key) -> str:
    # {"active":1,"lastAttemptedExtraction":1} -- field order matters
    return json.dumps(dict(_normalise_key(key)), separators=(",", ":"))


def describe_indexes(col: Collection) -> List[str]:
    """One '  - <name>: <key json>' line per index present, _id_ included."""
    return [
        f"  - {name}: {format_key(info['key'])}"
        for name, info in col.index_information().items()
    ]


def check_indexes(col: Collection, specs: Iterable[IndexSpec]) -> List[str]:
    info = col.index_information()
    problems = []
    for spec in specs:
        where = f"{col.name}.{spec.name}"
        present = info.get(spec.name)
        if present is None:
            problems.append(f"{where}: missing")
            continue
        want_key = [(field, direction) for field, direction in spec.keys]
        have_key = _normalise_key(present["key"])
        if have_key != want_key:
            problems.append(f"{where}: key {format_key(have_key)} != {format_key(want_key)}")
        if bool(present.get("unique", False)) != spec.unique:
            problems.append(f"{where}: unique={bool(present.get('unique', False))}, expected {spec.unique}")
        if bool(present.get("sparse", False)) != spec.sparse:
            problems.append(f"{where}: sparse={bool(present.get('sparse', False))}, expected {spec.sparse}")
    return problems

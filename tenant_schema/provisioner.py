# tenant_schema/provisioner.py
"""
Bring a database to the known schema, then seed the demo tenant.

Steps (always in this order):
  1. ensure collections      tenant_configurations, extracted_events
  2. ensure tenant indexes
  3. ensure event indexes
  4. print every index present on both collections
  5. insert the inactive demo tenant (skipped if it already exists)
  6. print the completion banner

Steps 1-4 are idempotent; any error there propagates and aborts the run.
Seeding is best effort: a duplicate is expected on re-runs, anything else is
printed and the run still finishes.
"""
from __future__ import annotations

from collections import namedtuple
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from . import config
from .errors import SchemaDriftError, UniqueConstraintViolation
from .indexes import (
    EVENT_INDEXES,
    TENANT_INDEXES,
    catalogue,
    check_indexes,
    describe_indexes,
    ensure_collections,
    ensure_indexes,
)
from .models import demo_tenant_document, sample_tenant_documents
from .store import TENANT_KEY, insert_tenant

NEXT_STEPS = (
    "1. Update your application configuration with the MongoDB connection string",
    "2. Replace the demo API key with your real API key",
    "3. Start your application",
)


class SeedOutcome(Enum):
    CREATED = "created"
    ALREADY_EXISTS = "already_exists"
    FAILED = "failed"


DEMO_SEED_MESSAGES = {
    SeedOutcome.CREATED: "Sample tenant configuration created successfully.",
    SeedOutcome.ALREADY_EXISTS: "Sample tenant already exists, skipping.",
}

ProvisionReport = namedtuple("ProvisionReport", ["created_collections", "indexes", "demo_seed", "sample_seeds"])


def seed_tenant(col: Collection, doc: dict) -> Tuple[SeedOutcome, Optional[Exception]]:
    """
    Insert one tenant. Only a clash on tenantId counts as ALREADY_EXISTS;
    a clash on any other unique index is a failure like any driver error.
    The error is returned with FAILED, otherwise None.
    """
    try:
        insert_tenant(col, doc)
    except UniqueConstraintViolation as e:
        if e.key == TENANT_KEY:
            return SeedOutcome.ALREADY_EXISTS, None
        return SeedOutcome.FAILED, e
    except PyMongoError as e:
        return SeedOutcome.FAILED, e
    return SeedOutcome.CREATED, None


def seed_demo_tenant(col: Collection) -> SeedOutcome:
    print("\nInserting sample tenant configuration...")
    outcome, error = seed_tenant(col, demo_tenant_document())
    if error is not None:
        print(f"Error creating sample tenant: {error}")
    else:
        print(DEMO_SEED_MESSAGES[outcome])
    return outcome


def seed_sample_tenants(col: Collection, api_key: str, api_url: str) -> Dict[str, SeedOutcome]:
    print("\n🌱 Inserting sample tenants …")
    outcomes = {}
    for doc in sample_tenant_documents(api_key, api_url):
        outcome, error = seed_tenant(col, doc)
        outcomes[doc["tenantId"]] = outcome
        if error is not None:
            print(f"   {doc['tenantId']}: {outcome.value} ({error})")
        else:
            print(f"   {doc['tenantId']}: {outcome.value}")
    return outcomes


def print_banner() -> None:
    print("\nMongoDB setup completed successfully!")
    print("Next steps:")
    for line in NEXT_STEPS:
        print(line)


def provision(
    db: Database,
    seed_demo: bool = True,
    seed_samples: bool = False,
    api_key: Optional[str] = None,
    api_url: Optional[str] = None,
) -> ProvisionReport:
    tenants = db[config.TENANT_COLL]
    events = db[config.EVENTS_COLL]

    created = ensure_collections(db, [tenants.name, events.name])
    for name in created:
        print(f"📁 Created collection {name}")

    print(f"📚 Creating indexes for {tenants.name}...")
    ensure_indexes(tenants, TENANT_INDEXES)

    print(f"📚 Creating indexes for {events.name}...")
    ensure_indexes(events, EVENT_INDEXES)

    present: Dict[str, List[str]] = {}
    for col in (tenants, events):
        print(f"\nIndexes for {col.name}:")
        lines = describe_indexes(col)
        for line in lines:
            print(line)
        present[col.name] = list(col.index_information())

    demo = seed_demo_tenant(tenants) if seed_demo else None

    samples: Dict[str, SeedOutcome] = {}
    if seed_samples:
        samples = seed_sample_tenants(
            tenants,
            api_key or config.DEFAULT_API_KEY,
            api_url or config.DEFAULT_API_URL,
        )

    print_banner()
    return ProvisionReport(created, present, demo, samples)


def check_schema(db: Database) -> None:
    """Raise SchemaDriftError if any declared index is missing or differs."""
    existing = set(db.list_collection_names())
    problems = []
    for name, specs in catalogue().items():
        if name not in existing:
            problems.append(f"{name}: collection missing")
            continue
        problems.extend(check_indexes(db[name], specs))
    if problems:
        raise SchemaDriftError(problems)

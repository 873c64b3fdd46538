# tenant_schema/cli.py
import argparse
import sys

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from . import config
from .errors import SchemaDriftError
from .provisioner import check_schema, provision


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description="Create collections + indexes for tenant event extraction")
    ap.add_argument("--mongo-uri", default=config.MONGO_URI)
    ap.add_argument("--db-name", default=config.DB_NAME)
    ap.add_argument("--no-seed", action="store_true", default=not config.SEED_DEMO_TENANT,
                    help="Do not insert the demo tenant")
    ap.add_argument("--sample-tenants", action="store_true", default=config.SEED_SAMPLE_TENANTS,
                    help="Also insert tenant-001..003 (skipped when present)")
    ap.add_argument("--check", action="store_true",
                    help="Only compare existing indexes with the declared ones; exit 1 on drift")
    return ap.parse_args(argv)


def connect(mongo_uri, db_name):
    client = MongoClient(mongo_uri)
    try:
        client.admin.command("ping")
    except PyMongoError:
        client.close()
        raise
    return client, client[db_name]


def run(db, args) -> int:
    if args.check:
        try:
            check_schema(db)
        except SchemaDriftError as e:
            print(f"⚠️  {e}:")
            for problem in e.problems:
                print(f"   - {problem}")
            return 1
        print("✅ Schema matches the declared indexes.")
        return 0

    provision(db, seed_demo=not args.no_seed, seed_samples=args.sample_tenants)
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    client, db = connect(args.mongo_uri, args.db_name)
    print(f"✅ Connected to {args.db_name}")
    try:
        return run(db, args)
    finally:
        client.close()


if __name__ == "__main__":
    sys.exit(main())

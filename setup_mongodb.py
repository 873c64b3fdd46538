# setup_mongodb.py
# Run once after creating the database:
#   python setup_mongodb.py [--mongo-uri ...] [--db-name ...]
# Safe to re-run; see tenant_schema/provisioner.py for what it does.
import sys

from tenant_schema.cli import main

if __name__ == '__main__':
    sys.exit(main())

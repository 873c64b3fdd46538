# tenant_schema/__init__.py
# Schema provisioning for the tenant event-extraction database.
# Library entry point is provision(db); the command line lives in cli.py.
from .errors import SchemaDriftError, UniqueConstraintViolation
from .provisioner import ProvisionReport, SeedOutcome, check_schema, provision

__all__ = [
    "provision",
    "check_schema",
    "ProvisionReport",
    "SeedOutcome",
    "SchemaDriftError",
    "UniqueConstraintViolation",
]

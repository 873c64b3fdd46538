# tenant_schema/errors.py
from typing import Any, Dict, List, Optional, Tuple


class UniqueConstraintViolation(Exception):
    """A write was rejected because it would break a unique index."""

    def __init__(self, collection: str, document: Dict[str, Any], key: Optional[Tuple[str, ...]] = None):
        self.collection = collection
        self.document = document
        self.key = key
        on = ", ".join(key) if key else "unknown index"
        super().__init__(f"duplicate key in '{collection}' on ({on})")


class SchemaDriftError(Exception):
    """Indexes present in the database differ from the declared catalogue."""

    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__(f"{len(problems)} schema problem(s) found")

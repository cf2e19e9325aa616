from sqlalchemy.exc import IntegrityError

from ....application.ports.errors import MissingReference, StoreError, UniqueViolation

# PostgreSQL SQLSTATE codes
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


def _sqlstate(orig) -> str:
    # psycopg2 exposes pgcode, psycopg 3 exposes sqlstate
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None) or ""


def translate_integrity_error(exc: IntegrityError) -> StoreError:
    """Map a driver IntegrityError onto the repository error types."""
    code = _sqlstate(exc.orig)
    message = str(exc.orig)
    if code == UNIQUE_VIOLATION or "UNIQUE constraint failed" in message:
        return UniqueViolation(message)
    if code == FOREIGN_KEY_VIOLATION or "FOREIGN KEY constraint failed" in message:
        return MissingReference(message)
    return StoreError(message)

import enum
import logging

from sqlalchemy.exc import IntegrityError

logger = logging.getLogger(__name__)

class ErrorKind(str, enum.Enum):
    CONSTRAINT = "CONSTRAINT"     # unique / check / not-null violations
    STORE = "STORE"               # connectivity or any other database failure
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"

# Only the HTTP layer reads this table
STATUS_BY_KIND = {
    ErrorKind.CONSTRAINT: 409,
    ErrorKind.STORE: 500,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
}

class ServiceError(Exception):
    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND.get(self.kind, 500)

def from_db_error(exc: Exception, message: str) -> ServiceError:
    """
    Tags a database exception. The caller's message is what the client sees;
    the driver error only goes to the log.
    """
    kind = ErrorKind.CONSTRAINT if isinstance(exc, IntegrityError) else ErrorKind.STORE
    logger.error(f"{message}: {exc}")
    return ServiceError(kind, message)

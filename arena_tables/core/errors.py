from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorDefinition:
    code: str
    message: str


class ErrorCatalog:
    INVALID_PAGE_SIZE = ErrorDefinition("INVALID_PAGE_SIZE", "Page size must be a positive integer")
    EMPTY_COLUMN_KEY = ErrorDefinition("EMPTY_COLUMN_KEY", "Column key cannot be empty")
    DUPLICATE_COLUMN_KEY = ErrorDefinition("DUPLICATE_COLUMN_KEY", "Column key declared more than once")
    INVALID_QUERY_STATE = ErrorDefinition("INVALID_QUERY_STATE", "Query state snapshot is invalid")
    INTERNAL_ERROR = ErrorDefinition("INTERNAL_ERROR", "Internal error")


class AppError(Exception):
    def __init__(self, error: ErrorDefinition, details: object | None = None):
        self.error = error
        self.details = details
        super().__init__(error.message)


class TableConfigError(AppError):
    pass


def to_payload(error: Exception) -> dict:
    if isinstance(error, AppError):
        return {
            "code": error.error.code,
            "message": error.error.message,
            "details": error.details,
        }
    return {
        "code": ErrorCatalog.INTERNAL_ERROR.code,
        "message": str(error) or ErrorCatalog.INTERNAL_ERROR.message,
        "details": None,
    }

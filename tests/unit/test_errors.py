from arena_tables.core.errors import AppError, ErrorCatalog, TableConfigError, to_payload


def test_app_error_payload() -> None:
    error = TableConfigError(ErrorCatalog.INVALID_PAGE_SIZE, details={"page_size": 0})

    assert isinstance(error, AppError)
    assert str(error) == "Page size must be a positive integer"
    assert to_payload(error) == {
        "code": "INVALID_PAGE_SIZE",
        "message": "Page size must be a positive integer",
        "details": {"page_size": 0},
    }


def test_unknown_error_payload() -> None:
    payload = to_payload(RuntimeError("boom"))

    assert payload == {"code": "INTERNAL_ERROR", "message": "boom", "details": None}

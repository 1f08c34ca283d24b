from typing import Any, Literal

from pydantic import BaseModel, Field


class PaginationMeta(BaseModel):
    page: int
    page_size: int
    total: int
    total_pages: int
    count: int
    offset: int
    page_numbers: list[int]
    has_previous: bool
    has_next: bool
    sort_by: str | None = None
    sort_dir: Literal["asc", "desc"] = "asc"


class QueryStateSnapshot(BaseModel):
    search_term: str = ""
    filters: dict[str, Any] = Field(default_factory=dict)
    sort_by: str | None = None
    sort_dir: Literal["asc", "desc"] = "asc"
    page: int = Field(default=1, ge=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"search_term": "boac", "filters": {"status": "Active"}, "sort_by": "date", "sort_dir": "desc", "page": 2},
            ]
        }
    }

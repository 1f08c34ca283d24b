from dataclasses import dataclass

from arena_tables.ui.columns import ColumnDef, FilterOnlyColumn
from arena_tables.ui.listing_view import DataTable


@dataclass
class CageAvailability:
    cage_no: int
    arena: str
    status: str
    season: int
    rented_by: str | None = None


CAGES = [
    CageAvailability(1, "Buenavista Cockpit Arena", "active", 2023),
    CageAvailability(2, "Mogpog Cockpit Arena", "rented", 2024, rented_by="Pedro Santos"),
    CageAvailability(3, "Boac Cockpit Arena", "active", 2024),
    CageAvailability(4, "Boac Cockpit Arena", "rented", 2023, rented_by="Ana Reyes"),
    CageAvailability(5, "Mogpog Cockpit Arena", "active", 2022),
]

COLUMNS = [
    ColumnDef(key="cage_no", label="Cage #"),
    ColumnDef(
        key="arena",
        label="Arena",
        filterable=True,
        filter_options=("Buenavista Cockpit Arena", "Mogpog Cockpit Arena", "Boac Cockpit Arena"),
    ),
    ColumnDef(
        key="status",
        label="Status",
        filterable=True,
        filter_options=("Active", "Rented"),
        filter_value_map={"Active": "active", "Rented": "rented"},
        render=lambda value, row: value.title(),
    ),
]


def _cage_numbers(view) -> list[int]:
    return [cage.cage_no for cage in view.page_rows]


def test_numeric_year_matches_search_term() -> None:
    table = DataTable(CAGES, COLUMNS)

    view = table.set_search_term("2024")

    assert _cage_numbers(view) == [2, 3]


def test_search_reaches_unrendered_fields() -> None:
    table = DataTable(CAGES, COLUMNS)

    assert _cage_numbers(table.set_search_term("reyes")) == [4]


def test_search_can_be_scoped_to_selected_fields() -> None:
    table = DataTable(CAGES, COLUMNS, search_fields=["arena", "status"])

    assert _cage_numbers(table.set_search_term("reyes")) == []
    assert _cage_numbers(table.set_search_term("boac")) == [3, 4]


def test_status_and_arena_filters_combine() -> None:
    table = DataTable(CAGES, COLUMNS)

    table.set_filter("status", "Rented")
    view = table.set_filter("arena", "Boac Cockpit Arena")

    assert _cage_numbers(view) == [4]
    assert view.cells == (("4", "Boac Cockpit Arena", "Rented"),)


def test_filter_only_season_with_derived_options() -> None:
    table = DataTable(CAGES, COLUMNS, filter_only_columns=[FilterOnlyColumn(key="season", label="Season")])

    season = next(control for control in table.filter_controls() if control.key == "season")
    assert season.options == (2023, 2024, 2022)

    view = table.set_filter("season", 2023)
    assert _cage_numbers(view) == [1, 4]
    assert [header.key for header in view.headers] == ["cage_no", "arena", "status"]


def test_sorting_attribute_rows_puts_missing_values_last() -> None:
    columns = COLUMNS + [ColumnDef(key="rented_by", label="Rented By")]
    table = DataTable(CAGES, columns)

    ascending = table.toggle_sort("rented_by")
    assert _cage_numbers(ascending) == [4, 2, 1, 3, 5]

    descending = table.toggle_sort("rented_by")
    assert _cage_numbers(descending) == [2, 4, 1, 3, 5]
    assert descending.cells[2][3] == ""


def test_no_match_reports_empty_view() -> None:
    table = DataTable(CAGES, COLUMNS, empty_message="No cages found")

    view = table.set_search_term("visayas")

    assert view.is_empty
    assert view.total_pages == 1
    assert view.current_page == 1
    assert view.summary == "Showing 0 to 0 of 0 results"
    assert view.empty_message == "No cages found"
    assert view.show_pagination is False

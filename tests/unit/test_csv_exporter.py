from arena_tables.export.csv_exporter import export_current_view, sanitize_row
from arena_tables.ui.columns import ColumnDef
from arena_tables.ui.listing_view import DataTable


COLUMNS = [
    ColumnDef(key="username", label="Username"),
    ColumnDef(key="role", label="Role", filterable=True),
    ColumnDef(key="password_hash", label="Password"),
]


def test_csv_exporter_writes_current_page(tmp_path) -> None:
    out_dir = tmp_path / "exports"
    rows = [
        {"username": "cashier1", "role": "cashier", "password_hash": "x1"},
        {"username": "admin", "role": "admin", "password_hash": "x2"},
        {"username": "cashier2", "role": "cashier", "password_hash": "x3"},
    ]
    table = DataTable(rows, COLUMNS, page_size=10)
    table.set_filter("role", "cashier")
    table.toggle_sort("username")
    table.toggle_sort("username")

    path = export_current_view(table.view, table.columns, module="users", output_dir=out_dir)

    assert path.exists()
    assert path.parent == out_dir
    content = path.read_text(encoding="utf-8-sig")
    assert "# module: users" in content
    assert "# filters: {'role': 'cashier'}" in content
    assert "# sort: username desc" in content
    assert "Username,Role,Password" in content
    assert content.index("cashier2,cashier,***") < content.index("cashier1,cashier,***")
    assert "admin" not in content.split("Username,Role,Password", 1)[1]


def test_sanitize_row_masks_sensitive_columns() -> None:
    row = {"username": "admin", "role": None, "password_hash": "secret"}

    assert sanitize_row(row, COLUMNS) == {"Username": "admin", "Role": "", "Password": "***"}

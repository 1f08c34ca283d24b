from arena_tables.core.config import Settings


def test_config_defaults(monkeypatch) -> None:
    for key in [
        "ARENA_TABLES_DEFAULT_PAGE_SIZE",
        "ARENA_TABLES_EMPTY_MESSAGE",
        "ARENA_TABLES_DEFAULT_TITLE",
        "ARENA_TABLES_EXPORTS_PATH",
    ]:
        monkeypatch.delenv(key, raising=False)

    config = Settings(_env_file=None)

    assert config.DEFAULT_PAGE_SIZE == 10
    assert config.EMPTY_MESSAGE == "No data available"
    assert config.DEFAULT_TITLE == "Data Table"


def test_config_reads_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("ARENA_TABLES_DEFAULT_PAGE_SIZE", "25")
    monkeypatch.setenv("ARENA_TABLES_EMPTY_MESSAGE", "No events found")

    config = Settings(_env_file=None)

    assert config.DEFAULT_PAGE_SIZE == 25
    assert config.EMPTY_MESSAGE == "No events found"


def test_config_reads_env_file(tmp_path, monkeypatch) -> None:
    monkeypatch.delenv("ARENA_TABLES_DEFAULT_TITLE", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("ARENA_TABLES_DEFAULT_TITLE=Cage Rentals\nOTHER_KEY=ignored\n", encoding="utf-8")

    config = Settings(_env_file=str(env_file))

    assert config.DEFAULT_TITLE == "Cage Rentals"

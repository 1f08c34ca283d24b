from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="ARENA_TABLES_", extra="ignore")

    DEFAULT_PAGE_SIZE: int = 10
    DEFAULT_TITLE: str = "Data Table"
    EMPTY_MESSAGE: str = "No data available"
    EXPORTS_PATH: str = "./exports"
    LOG_LEVEL: str = "INFO"

settings = Settings()

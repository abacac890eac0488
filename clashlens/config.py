from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "ClashLens"
    debug: bool = False

    # Local path or http(s) URL of the CardList CSV
    catalog_source: str = "data/CardList.csv"

    # Seconds; None waits forever on a hung fetch
    catalog_fetch_timeout: float | None = 30.0

    # Display cap for search results (the search engine itself is unbounded)
    search_result_limit: int = 40

    # Arena selected when an explorer session starts
    default_arena: str = "Legendary Arena"

    cors_allow_origins: list[str] = ["*"]


settings = Settings()

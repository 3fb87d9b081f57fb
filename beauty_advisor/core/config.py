from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL: str = "gpt-4o"
    OPENAI_TEMPERATURE: float = 0.7
    OPENAI_MAX_TOKENS_CHAT: int = 1000
    OPENAI_MAX_TOKENS_ROUTINE: int = 1200

    BRAVE_API_KEY: str | None = None
    BRAVE_SEARCH_ENDPOINT: str = "https://api.search.brave.com/res/v1/web/search"
    BRAVE_RESULT_COUNT: int = 5
    SEARCH_TIMEOUT_SECONDS: float = 10.0

    CATALOG_PATH: str = "./data/products.json"
    STORAGE_PROVIDER: str = "json"  # "json" | "memory"
    STORAGE_PATH: str = "./data/storage.json"
    HISTORY_LIMIT: int = 10

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()

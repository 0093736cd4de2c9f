from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    HOST: str = "127.0.0.1"
    PORT: int = 3000

    SESSION_SECRET: str
    SESSION_MAX_AGE: int = 60 * 10

    HINT_API_KEY: str = Field(
        default="",
        validation_alias=AliasChoices("DEEPSEEK_API_KEY", "OPENAI_API_KEY", "HINT_API_KEY"),
    )
    HINT_PROMPT_TEMPLATE: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DEEPSEEK_HINT_PROMPT", "HINT_PROMPT_TEMPLATE"),
    )
    HINT_BASE_URL: str = "https://api.deepseek.com"
    HINT_MODEL: str = "deepseek-chat"
    HINT_TIMEOUT_SECONDS: float = 10.0

    DB_DIR: str = "db"
    DEFAULT_DB_NAME: str = "cards.db"
    DB_POOL_SIZE: int = 5

    LOG_LEVEL: str = "INFO"

settings = Settings()

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ORIGINS = ["http://localhost:5173"]

class Settings(BaseSettings):
    ENV: str = "local"
    PORT: int = 5174
    CORS_ORIGIN: str | None = None          # comma-separated list of allowed origins

    API_PREFIX: str = "/api"
    API_VERSION: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Full URL wins over the DB_* parts (tests point this at sqlite+aiosqlite)
    DATABASE_URL: str | None = None
    DB_HOST: str = "db"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "workout_log"

    # Optional session PATCH/DELETE endpoints; sessions are append-only when off
    ENABLE_SESSION_MUTATIONS: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+psycopg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

    @property
    def allowed_origins(self) -> list[str]:
        if not self.CORS_ORIGIN:
            return list(DEFAULT_ORIGINS)
        return [origin.strip() for origin in self.CORS_ORIGIN.split(",") if origin.strip()]

@lru_cache
def get_settings() -> Settings:
    return Settings()

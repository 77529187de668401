from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    ENV: str = "local"
    DB_HOST: str = "db"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "gymtracker"

    # Full SQLAlchemy URL; wins over the DB_* parts (e.g. sqlite for local runs/tests)
    DB_URL: str | None = None
    SQL_ECHO: bool = False

    # Open editors are dropped after this many idle seconds, oldest first past the cap
    EDITOR_IDLE_SECONDS: float = 1800
    EDITOR_MAX_OPEN: int = 256

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        if self.DB_URL:
            return self.DB_URL
        return (
            f"postgresql+psycopg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )

@lru_cache
def get_settings() -> Settings:
    return Settings()

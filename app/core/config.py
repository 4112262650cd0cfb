from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Rooms & Students API"
    VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"

    # Database
    DATABASE_URL: str = "sqlite:///./school.db"
    # Create tables on startup instead of running alembic (dev only)
    AUTO_CREATE_TABLES: bool = False

    # CORS
    BACKEND_CORS_ORIGINS: list[str] = []

    # Localization
    DEFAULT_LOCALE: str = "en"

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

settings = Settings()

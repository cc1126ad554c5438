from pydantic_settings import BaseSettings, SettingsConfigDict

DEV_SECRET_KEY = "dev-only-secret-key-change-me-in-production"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Home Fix Smart Services API"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    STORE_PROVIDER: str = "memory"  # "memory" | "json"
    DATA_DIR: str = "./data"

    AUTH_SECRET_KEY: str = DEV_SECRET_KEY
    AUTH_TOKEN_TTL_MINUTES: int = 60 * 24

    ADMIN_NAME: str = "admin"
    ADMIN_EMAIL: str = "admin@homefix.local"
    ADMIN_PASSWORD: str | None = "admin123"

    CORS_ORIGINS: list[str] = ["*"]
    CURRENCY: str = "INR"


settings = Settings()

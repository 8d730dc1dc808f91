from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    DATABASE_URL: str = "sqlite:///flashdeck.db"
    SECRET_KEY: str
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str | None = None
    LOG_JSON: bool | None = None
    JWT_ALG: str = "HS256"
    JWT_TOKEN_LOCATION: list[str] = ["headers", "cookies"]
    JWT_ACCESS_COOKIE_NAME: str = "access_token"
    JWT_COOKIE_DOMAIN: str | None = None
    JWT_COOKIE_SECURE: bool = False
    JWT_COOKIE_SAMESITE: str = "lax"
    JWT_COOKIE_CSRF_PROTECT: bool = True
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"
    REVALIDATE_URL: str | None = None
    REVALIDATE_TIMEOUT_SECONDS: float = 5.0


settings = Settings()

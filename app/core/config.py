# app/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
import os

load_dotenv()

class Settings(BaseSettings):
    # --- Application Settings ---
    app_name: str = "Vidstream"
    cors_origins: str = os.getenv("CORS_ORIGINS", "*") # Origins separated by commas

    # --- Database ---
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./vidstream.db")
    database_echo: bool = os.getenv("DATABASE_ECHO", "false").lower() == "true"

    # --- Security & Auth ---
    secret_key: str = os.getenv("SECRET_KEY", "default_secret_key_change_me")
    jwt_secret_key: str = os.getenv("JWT_SECRET_KEY", "default_jwt_secret_key_change_me")
    access_token_expire_minutes: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24))
    algorithm: str = os.getenv("ALGORITHM", "HS256")

    # --- Redis & Rate Limiting ---
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    toggle_rate_limit_count: int = int(os.getenv("TOGGLE_RATE_LIMIT_COUNT", 120))
    toggle_rate_limit_window_seconds: int = int(os.getenv("TOGGLE_RATE_LIMIT_WINDOW_SECONDS", 60))

    # --- Listings ---
    default_page_limit: int = int(os.getenv("DEFAULT_PAGE_LIMIT", 10))
    max_page_limit: int = int(os.getenv("MAX_PAGE_LIMIT", 100))

    # --- Engagement ---
    # Not confirmed by the product owner yet, so rejecting is the default
    allow_self_subscription: bool = os.getenv("ALLOW_SELF_SUBSCRIPTION", "false").lower() == "true"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(',') if origin.strip()]

settings = Settings()

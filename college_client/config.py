"""All settings, loaded from the environment or the .env file."""
from functools import lru_cache

from pydantic_settings import BaseSettings

APP_VERSION = "1.0.0"


class Settings(BaseSettings):
    # API
    api_base_url: str = "http://localhost:3000/api"
    request_timeout: float = 30

    # Session
    session_file: str = ".college_session.json"
    login_path: str = "/login"

    # Role-scoped user creation (backend hashes/overrides this downstream)
    default_user_password: str = "defaultPassword123!"

    # Logging
    log_level: str = "INFO"
    app_env: str = "development"

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() in ("prod", "production")

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()

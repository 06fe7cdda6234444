import sys

from pydantic import Field
from pydantic_settings import BaseSettings

_ENV_FILE = None if "pytest" in sys.modules else ".env"


class Settings(BaseSettings):
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    RANDOM_USER_API_URL: str = "https://randomuser.me/api/"
    RANDOM_USER_RESULTS_COUNT: int = Field(default=50, ge=1)
    RANDOM_USER_SEED: str = ""
    RANDOM_USER_TIMEOUT_SECONDS: float = 30.0

    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    model_config = {
        "env_file": _ENV_FILE,
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }


settings = Settings()

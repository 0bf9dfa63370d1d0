from pydantic_settings import BaseSettings
from typing import Optional


class AppSettings(BaseSettings):
    APP_NAME: str = "GitShelf"
    DEBUG: bool = True

    HOST: str = "0.0.0.0"
    PORT: int = 8000

    LOG_LEVEL: str = "INFO"

    # ===== GitHub =====
    GITHUB_TOKEN: Optional[str] = None
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_TIMEOUT: int = 15

    # ===== Archive =====
    # resolved against the working directory
    ARCHIVE_PATH: str = "public/repoData.json"
    ARCHIVE_SERIALIZE_WRITES: bool = False

    class Config:
        env_file = ".env"


settings = AppSettings()

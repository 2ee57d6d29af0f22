# backend/projecthub/config.py
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./projecthub.db"  # Default if not in .env

    # Storage Paths
    STORAGE_PATH: Path = Path("storage")
    UPLOADS_PATH: Path | None = None  # Will be set based on STORAGE_PATH

    # Uploads
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    RELOAD: bool = False
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def model_post_init(self, __context) -> None:
        """Post initialization hook to set derived paths"""
        if isinstance(self.STORAGE_PATH, str):
            self.STORAGE_PATH = Path(self.STORAGE_PATH)

        # The uploads directory itself is created lazily by the upload handler
        self.UPLOADS_PATH = Path(self.UPLOADS_PATH) if self.UPLOADS_PATH else self.STORAGE_PATH / "uploads"
        self.STORAGE_PATH.mkdir(parents=True, exist_ok=True)

settings = Settings()

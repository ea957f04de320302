from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file explicitly
ENV_FILE_NAME = ".env"
env_path = Path(__file__).parent.parent.parent / ENV_FILE_NAME
load_dotenv(env_path)


class Settings(BaseSettings):
    CATALOGUE_DIR: str = ""  # Optional directory of .ts files overriding packaged ones
    CATALOGUE_PREFIX: str = "mythbrowser"
    DEFAULT_LANG: str = "en"
    DEBUG: bool = False
    LOG_FILE: bool = False
    LOG_DIR: str = "logs"

    @field_validator("DEFAULT_LANG", mode="before")
    @classmethod
    def normalize_lang(cls, v):  # type: ignore
        if not v:
            return "en"
        return str(v).strip().replace("-", "_").split("_")[0].lower()

    @field_validator("CATALOGUE_DIR", mode="before")
    @classmethod
    def strip_dir(cls, v):  # type: ignore
        return (v or "").strip()

    model_config = SettingsConfigDict(
        env_file=ENV_FILE_NAME,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def catalogue_dir(self) -> Path | None:
        return Path(self.CATALOGUE_DIR).expanduser() if self.CATALOGUE_DIR else None


settings = Settings()

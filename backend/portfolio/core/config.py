from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


# Load backend/.env if it exists so local settings (e.g. ADMIN_API_KEY) are
# available without exporting them in the shell.
BASE_DIR = Path(__file__).resolve().parents[2]
env_path = BASE_DIR / ".env"
if env_path.exists():
    load_dotenv(env_path)


def _int_env(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, str(default)))
    except ValueError:
        return default


class Settings:
    PROJECT_NAME = "Portfolio API"
    API_PREFIX = os.getenv("API_PREFIX", "")

    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./portfolio.db")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    _cors_origins = os.getenv("CORS_ORIGINS", "*")

    # If wildcard is present, treat as allow-all for local development
    if "*" in _cors_origins:
        CORS_ORIGINS = ["*"]
    else:
        CORS_ORIGINS = [o.strip() for o in _cors_origins.split(",") if o.strip()]

    RATE_LIMIT_MAX_MESSAGES = _int_env("RATE_LIMIT_MAX_MESSAGES", 5)
    RATE_LIMIT_WINDOW_MINUTES = _int_env("RATE_LIMIT_WINDOW_MINUTES", 15)

    RESUME_PATH = os.getenv("RESUME_PATH", "./files/resume.docx")
    RESUME_DOWNLOAD_NAME = os.getenv("RESUME_DOWNLOAD_NAME", "resume.docx")
    RESUME_MEDIA_TYPE = os.getenv(
        "RESUME_MEDIA_TYPE",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    )

    ADMIN_API_KEY = os.getenv("ADMIN_API_KEY", "")


settings = Settings()

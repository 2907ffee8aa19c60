import os
from typing import List

DEFAULT_DATABASE_URL = "postgresql://postgres@localhost/sitetracker"
DEFAULT_MAX_UPLOAD_BYTES = 2 * 1024 * 1024


def get_database_url() -> str:
    url = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)
    # Hosting platforms hand out postgres:// which SQLAlchemy no longer accepts.
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    return url


def get_database_sslmode() -> str:
    return os.getenv("DATABASE_SSLMODE", "require")


def get_host() -> str:
    return os.getenv("HOST", "0.0.0.0")


def get_port() -> int:
    return int(os.getenv("PORT", "3000"))


def get_cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_max_upload_bytes() -> int:
    return int(os.getenv("MAX_UPLOAD_BYTES", str(DEFAULT_MAX_UPLOAD_BYTES)))

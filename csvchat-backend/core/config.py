import os
import sys
import logging
from dataclasses import dataclass, field
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_PREVIEW_ROWS = {"pairs": 10, "json": 50}


def _parse_origins(raw: str) -> List[str]:
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Settings:
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    host: str = "0.0.0.0"
    port: int = 5000
    cors_allowed_origins: List[str] = field(default_factory=lambda: ["*"])
    max_upload_bytes: int = 5 * 1024 * 1024
    upload_dir: str = "uploads"
    preview_style: str = "pairs"
    preview_rows: int = 10
    require_csv_extension: bool = True

    @property
    def allow_all_origins(self) -> bool:
        return "*" in self.cors_allowed_origins


def load_settings() -> Settings:
    """
    Builds the settings from environment variables, falling back to defaults.
    """
    preview_style = os.getenv("PREVIEW_STYLE", "pairs").strip().lower()
    if preview_style not in DEFAULT_PREVIEW_ROWS:
        logging.warning(f"Unknown PREVIEW_STYLE '{preview_style}', using 'pairs'.")
        preview_style = "pairs"

    return Settings(
        gemini_api_key=os.getenv("GEMINI_API_KEY", ""),
        gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
        cors_allowed_origins=_parse_origins(os.getenv("CORS_ALLOWED_ORIGINS", "*")),
        max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024))),
        upload_dir=os.getenv("UPLOAD_DIR", "uploads"),
        preview_style=preview_style,
        preview_rows=int(os.getenv("PREVIEW_ROWS", str(DEFAULT_PREVIEW_ROWS[preview_style]))),
        require_csv_extension=_parse_bool(os.getenv("REQUIRE_CSV_EXTENSION", "true")),
    )


settings = load_settings()


def require_api_key(current: Settings = None) -> str:
    """
    Exits the process when no provider key is configured; the server never
    starts in a degraded mode.
    """
    current = current or settings
    if not current.gemini_api_key:
        logging.error("GEMINI_API_KEY is not set! Add it to .env or environment variables.")
        sys.exit(1)
    return current.gemini_api_key

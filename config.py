"""
Configuration for the Address Book storage core
================================================

Environment-driven settings (with optional .env file) for the JSON
document converter and its file storage.
"""
import os
from pydantic import BaseModel, Field
from dotenv import load_dotenv

load_dotenv()


def _safe_int(env_var: str, default: int) -> int:
    """Parse int env var with fallback so a bad value never crashes at import time."""
    try:
        return int(os.getenv(env_var, str(default)))
    except (ValueError, TypeError):
        return default


class Settings(BaseModel):
    """Address book settings with local-file defaults"""

    # =========================================================================
    # Storage
    # =========================================================================
    address_book_file_path: str = Field(
        default_factory=lambda: os.getenv("ADDRESS_BOOK_FILE_PATH", "data/addressbook.json")
    )
    wrap_root: bool = Field(
        default_factory=lambda: os.getenv("WRAP_ROOT", "false").lower() == "true"
    )
    json_indent: int = Field(
        default_factory=lambda: _safe_int("JSON_INDENT", 2)
    )

    # =========================================================================
    # Validation strength
    # =========================================================================
    # When on, a person may only reference tags/event tags already listed
    # in the same document.
    require_known_tags: bool = Field(
        default_factory=lambda: os.getenv("REQUIRE_KNOWN_TAGS", "false").lower() == "true"
    )

    # =========================================================================
    # Logging
    # =========================================================================
    debug: bool = Field(
        default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true"
    )


settings = Settings()

# workflow_generator/core/config.py

"""
Runtime settings for the workflow generator.

Values come from the process environment (optionally seeded from a .env file).
get_settings() re-reads the environment on every call, so a rotated
GEMINI_API_KEY or a new WORKFLOW_OUTPUT_DIR is picked up by the next
invocation without a restart.

    GEMINI_API_KEY       credential for the Gemini API (required at call time)
    GEMINI_MODEL         model identifier, default gemini-1.5-flash
    GEMINI_BASE_URL      OpenAI-compatible Gemini endpoint
    GEMINI_TIMEOUT       optional request timeout in seconds
    WORKFLOW_OUTPUT_DIR  where generated workflows are written
    LOG_LEVEL            root log level, default INFO
"""

import os
import tempfile
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

DEFAULT_MODEL = "gemini-1.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"


def default_output_dir() -> str:
    return os.path.join(tempfile.gettempdir(), "generated-workflows")


class Settings(BaseModel):
    gemini_api_key: Optional[str] = Field(default=None, repr=False)
    gemini_model: str = DEFAULT_MODEL
    gemini_base_url: str = DEFAULT_BASE_URL
    gemini_timeout: Optional[float] = None
    output_dir: str = Field(default_factory=default_output_dir)
    log_level: str = "INFO"


def _optional_float(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"GEMINI_TIMEOUT must be a number of seconds, got {raw!r}") from None


def get_settings() -> Settings:
    """
    Build settings from the current environment. Blank values count as unset.
    """
    return Settings(
        gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
        gemini_model=os.getenv("GEMINI_MODEL") or DEFAULT_MODEL,
        gemini_base_url=os.getenv("GEMINI_BASE_URL") or DEFAULT_BASE_URL,
        gemini_timeout=_optional_float(os.getenv("GEMINI_TIMEOUT")),
        output_dir=os.getenv("WORKFLOW_OUTPUT_DIR") or default_output_dir(),
        log_level=os.getenv("LOG_LEVEL") or "INFO",
    )

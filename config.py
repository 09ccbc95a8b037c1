"""Configuration management and environment variable loading."""

import logging
import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file (don't override existing env vars)
load_dotenv(override=False)


SUMMARY_MODES = ("narrative", "bullet")


def _float_or_none(value: str) -> Optional[float]:
    try:
        return float(value)
    except ValueError:
        return None


class Config:
    """Application configuration."""

    # Summarization service (DeepSRT worker)
    DEEPSRT_API_BASE: str = os.getenv("DEEPSRT_API_BASE", "https://worker.deepsrt.com").rstrip("/")
    USER_AGENT: str = os.getenv("USER_AGENT", "DeepSRT-CLI/1.5.4")

    # YouTube InnerTube player endpoint and the Android client it expects
    INNERTUBE_PLAYER_URL: str = os.getenv(
        "INNERTUBE_PLAYER_URL", "https://www.youtube.com/youtubei/v1/player"
    )
    INNERTUBE_CLIENT_VERSION: str = os.getenv("INNERTUBE_CLIENT_VERSION", "19.09.37")

    # Seconds before any single upstream call is abandoned
    REQUEST_TIMEOUT_RAW: str = os.getenv("REQUEST_TIMEOUT", "30")
    # None when REQUEST_TIMEOUT is not a number; validate() reports it.
    REQUEST_TIMEOUT: Optional[float] = _float_or_none(REQUEST_TIMEOUT_RAW)

    DEFAULT_TRANSCRIPT_LANG: str = os.getenv("DEFAULT_TRANSCRIPT_LANG", "en")
    DEFAULT_SUMMARY_LANG: str = os.getenv("DEFAULT_SUMMARY_LANG", "zh-tw")
    DEFAULT_SUMMARY_MODE: str = os.getenv("DEFAULT_SUMMARY_MODE", "narrative")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @classmethod
    def validate(cls) -> None:
        """Validate the configured values."""
        if cls.REQUEST_TIMEOUT is None:
            raise ValueError(f"REQUEST_TIMEOUT must be a number, got {cls.REQUEST_TIMEOUT_RAW!r}")
        if not cls.REQUEST_TIMEOUT > 0:
            raise ValueError(f"REQUEST_TIMEOUT must be positive, got {cls.REQUEST_TIMEOUT}")
        if cls.DEFAULT_SUMMARY_MODE not in SUMMARY_MODES:
            raise ValueError(
                f"DEFAULT_SUMMARY_MODE must be one of {', '.join(SUMMARY_MODES)}, "
                f"got {cls.DEFAULT_SUMMARY_MODE!r}"
            )
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            raise ValueError(f"Unknown LOG_LEVEL {cls.LOG_LEVEL!r}")

from dataclasses import dataclass
import logging
import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    timezone: ZoneInfo | None = None
    log_level: str = "INFO"


def get_settings() -> Settings:
    tz_name = os.getenv("MOOD_TIMEZONE")
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    timezone = None
    if tz_name:
        try:
            timezone = ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"MOOD_TIMEZONE is not a valid timezone: {tz_name!r}")
    if log_level not in logging.getLevelNamesMapping():
        raise ValueError(f"LOG_LEVEL is not a valid logging level: {log_level!r}")
    return Settings(
        timezone=timezone,
        log_level=log_level,
    )


settings = get_settings()

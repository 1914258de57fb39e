from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from session_engine.core.holidays import DEFAULT_HOLIDAY_TABLE


@dataclass
class EngineSettings:
    holiday_calendar_path: Path
    log_level: str

    @classmethod
    def from_env(cls) -> "EngineSettings":
        raw_path = os.getenv("HOLIDAY_CALENDAR_PATH")
        return cls(
            holiday_calendar_path=Path(raw_path).expanduser() if raw_path else DEFAULT_HOLIDAY_TABLE,
            log_level=os.getenv("SESSION_ENGINE_LOG_LEVEL", "INFO").upper(),
        )

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, List, Optional

from weather_service.client import WeatherServiceError

DEFAULT_TEXT = "N/A"
DEFAULT_CONDITION = "Unknown"
DAY_COUNT = 3
NOON_SLOT = 4  # wttr.in j1 hourly entries are 3h apart; index 4 is 12:00

_INT_RE = re.compile(r"[+-]?\d+")


def _dig(obj: Any, *path: Any) -> Any:
    """Walk nested dicts/lists; any missing step yields None."""
    cur = obj
    for step in path:
        if isinstance(step, int):
            if not isinstance(cur, list) or step >= len(cur):
                return None
        elif not isinstance(cur, dict):
            return None
        else:
            if step not in cur:
                return None
        cur = cur[step]
    return cur


def _text(value: Any, default: str) -> str:
    return value if isinstance(value, str) else default


def _number(value: Any) -> int:
    """wttr.in sends numbers as strings; anything unparseable counts as 0."""
    if isinstance(value, str) and _INT_RE.fullmatch(value):
        return int(value)
    return 0


@dataclass
class Conditions:
    temp_f: int = 0
    temp_c: int = 0
    humidity: str = DEFAULT_TEXT
    description: str = DEFAULT_CONDITION
    weather_code: int = 0

    @staticmethod
    def from_block(block: Any) -> "Conditions":
        return Conditions(
            temp_f=_number(_dig(block, "temp_F")),
            temp_c=_number(_dig(block, "temp_C")),
            humidity=_text(_dig(block, "humidity"), DEFAULT_TEXT),
            description=_text(_dig(block, "weatherDesc", 0, "value"), DEFAULT_CONDITION),
            weather_code=_number(_dig(block, "weatherCode")),
        )

    @staticmethod
    def from_hourly(block: Any) -> "Conditions":
        # hourly slots spell temperatures tempF/tempC instead of temp_F/temp_C
        return Conditions(
            temp_f=_number(_dig(block, "tempF")),
            temp_c=_number(_dig(block, "tempC")),
            humidity=_text(_dig(block, "humidity"), DEFAULT_TEXT),
            description=_text(_dig(block, "weatherDesc", 0, "value"), DEFAULT_CONDITION),
            weather_code=_number(_dig(block, "weatherCode")),
        )


@dataclass
class DayForecast:
    high_f: int = 0
    low_f: int = 0
    noon: Conditions = field(default_factory=Conditions)

    @staticmethod
    def from_block(block: Any) -> "DayForecast":
        return DayForecast(
            high_f=_number(_dig(block, "maxtempF")),
            low_f=_number(_dig(block, "mintempF")),
            noon=Conditions.from_hourly(_dig(block, "hourly", NOON_SLOT)),
        )


@dataclass
class ForecastData:
    area_name: Optional[str] = None
    current: Conditions = field(default_factory=Conditions)
    days: List[DayForecast] = field(
        default_factory=lambda: [DayForecast() for _ in range(DAY_COUNT)]
    )

    @staticmethod
    def from_payload(payload: Any) -> "ForecastData":
        """Build from a wttr.in `format=j1` document. Defaults are applied here, once."""
        if not isinstance(payload, dict):
            raise WeatherServiceError(
                f"unexpected weather payload type: {type(payload).__name__}"
            )

        area = _dig(payload, "nearest_area", 0, "areaName", 0, "value")
        return ForecastData(
            area_name=area if isinstance(area, str) else None,
            current=Conditions.from_block(_dig(payload, "current_condition", 0)),
            days=[DayForecast.from_block(_dig(payload, "weather", i)) for i in range(DAY_COUNT)],
        )

    @property
    def today(self) -> DayForecast:
        return self.days[0]

    @property
    def tomorrow(self) -> DayForecast:
        return self.days[1]

    @property
    def day_after(self) -> DayForecast:
        return self.days[2]

from __future__ import annotations

from weather_service.forecast import Conditions, DayForecast, ForecastData

COLOR = "\x03"
RESET = "\x0f"
DEGREE = "°"

CONDITION_GLYPHS = {
    113: "☀️",  # sunny
    116: "⛅️",  # partly cloudy
    119: "☁️",
    122: "☁️",
    143: "🌫️",
    248: "🌫️",
    260: "🌫️",
    200: "🌩️🌧️",
    386: "🌩️🌧️",
    389: "🌩️🌧️",
    392: "🌩️🌨️",
}
for _code in (176, 179, 182, 185, 263, 266, 281, 284, 293, 296, 299, 302, 305,
              308, 311, 314, 317, 350, 353, 359, 362, 365, 374, 377):
    CONDITION_GLYPHS[_code] = "🌧️"
for _code in (227, 320, 323, 326, 368):
    CONDITION_GLYPHS[_code] = "🌨️"
for _code in (230, 329, 332, 335, 338, 371, 395):
    CONDITION_GLYPHS[_code] = "🌨️❄️"
UNKNOWN_GLYPH = "✨"


def temp_glyph(temp: int) -> str:
    if temp > 85:
        return "🥵 "
    elif temp >= 70:
        return "😎️ "
    elif temp < 32:
        return "🥶️ "
    return "🧥️ "


def temp_color(temp: int) -> str:
    """mIRC color number for a Fahrenheit temperature."""
    if temp > 85:
        return "04"  # red
    elif temp > 70:
        return "07"  # orange
    elif temp < 32:
        return "12"  # light blue
    return "03"  # green


def condition_glyph(code: int) -> str:
    return CONDITION_GLYPHS.get(code, UNKNOWN_GLYPH)


def _colored(temp: int, unit: str = "F") -> str:
    return f"{temp_glyph(temp)}{COLOR}{temp_color(temp)}{temp}{DEGREE}{unit}"


def _high_low(day: DayForecast) -> str:
    return f"High: {_colored(day.high_f)}{RESET}. Low: {_colored(day.low_f)}{RESET}"


def format_current(now: Conditions, today: DayForecast) -> str:
    color = temp_color(now.temp_f)
    return (
        f"Conditions: {condition_glyph(now.weather_code)} {COLOR}{color}{now.description}. "
        f"Humidity: {now.humidity}%. "
        f"Temp: {_colored(now.temp_f)} {now.temp_c}C{RESET}. "
        f"{_high_low(today)}"
    )


def format_day(day: DayForecast) -> str:
    noon = day.noon
    return (
        f"Conditions: {condition_glyph(noon.weather_code)}{noon.description}. "
        f"Humidity: {noon.humidity}%. "
        f"Noon: {_colored(noon.temp_f)} {noon.temp_c}C{RESET}. "
        f"{_high_low(day)}"
    )


def format_forecast(forecast: ForecastData, fallback_label: str) -> str:
    """Render today, tomorrow and the day after as one IRC line (before chunking)."""
    location = forecast.area_name if forecast.area_name is not None else fallback_label
    return (
        f"{location}: {format_current(forecast.current, forecast.today)}"
        f" | Tomorrow: {format_day(forecast.tomorrow)}"
        f" | Day After: {format_day(forecast.day_after)}"
    )

from __future__ import annotations

from dataclasses import dataclass

from dotenv import load_dotenv

from weather_service.client import DEFAULT_BASE_URL as DEFAULT_WEATHER_URL

DEFAULT_PORT = 6697
DEFAULT_NICKNAME = "RustWeatherBot"
DEFAULT_RECONNECT_DELAY = 5.0
DEFAULT_HTTP_TIMEOUT = 30.0
DEFAULT_CONNECT_TIMEOUT = 30.0

ENV_PREFIX = "WEATHER_BOT"


@dataclass
class BotSettings:
    # IRC
    server: str
    channel: str
    port: int = DEFAULT_PORT
    nickname: str = DEFAULT_NICKNAME
    use_tls: bool = True
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT

    # Supervisor
    reconnect_delay: float = DEFAULT_RECONNECT_DELAY

    # Weather
    weather_url: str = DEFAULT_WEATHER_URL
    http_timeout: float = DEFAULT_HTTP_TIMEOUT


def env_name(option: str) -> str:
    """`reconnect_delay` -> `WEATHER_BOT_RECONNECT_DELAY`."""
    return f"{ENV_PREFIX}_{option.upper()}"


def load_env() -> None:
    # values already in the environment win over .env
    load_dotenv(override=False)


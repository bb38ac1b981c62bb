import logging

from agent.state.agent_state import ReplyState
from weather_service.client import WeatherClient, WeatherServiceError

LOGGER = logging.getLogger(__name__)


async def get_weather_node(state: ReplyState, weather: WeatherClient) -> ReplyState:
    query = state["query"]
    try:
        state["weather_payload"] = await weather.fetch(query)
    except WeatherServiceError as exc:
        LOGGER.warning("Weather fetch for %r failed: %s", query, exc)
        state["error"] = str(exc)
    return state

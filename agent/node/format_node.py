import logging

from agent.state.agent_state import ReplyState
from weather_service.client import WeatherServiceError
from weather_service.forecast import ForecastData
from weather_service.formatter import format_forecast

LOGGER = logging.getLogger(__name__)


async def format_reply_node(state: ReplyState) -> ReplyState:
    query = state["query"]
    try:
        forecast = ForecastData.from_payload(state.get("weather_payload"))
    except WeatherServiceError as exc:
        LOGGER.warning("Could not read forecast for %r: %s", query, exc)
        state["error"] = str(exc)
        return state

    state["message_text"] = f"{state['requester']}'s weather: {format_forecast(forecast, query)}"
    return state

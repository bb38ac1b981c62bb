from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

LOGGER = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://wttr.in"
USER_AGENT = "IRC Weather Agent"


class WeatherServiceError(Exception):
    """Weather data could not be fetched or understood."""


class WeatherClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def url_for(self, query: str) -> str:
        # queries are already canonical ("New+York", "10001,+USA"); do not re-encode
        return f"{self.base_url}/{query}?format=j1"

    async def fetch(self, query: str) -> Dict[str, Any]:
        url = self.url_for(query)
        LOGGER.debug("Fetching %s", url)
        try:
            async with httpx.AsyncClient(
                headers={"User-Agent": USER_AGENT},
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                r = await client.get(url)
                r.raise_for_status()
                return r.json()
        except httpx.HTTPStatusError as e:
            raise WeatherServiceError(
                f"HTTP {e.response.status_code} {e.response.reason_phrase}"
            ) from e
        except httpx.HTTPError as e:
            raise WeatherServiceError(str(e) or type(e).__name__) from e
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError both land here
            raise WeatherServiceError(f"error decoding response body: {e}") from e

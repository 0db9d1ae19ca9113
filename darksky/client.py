# ABOUTME: HTTP glue for the Dark Sky forecast endpoint.
# ABOUTME: Builds the request URL, performs the GET with httpx and hands the body to the decoder.

import logging

import httpx

from darksky.config import API_URL, Settings
from darksky.decode import decode_forecast
from darksky.errors import MalformedResponse, TransportError
from darksky.models import Forecast
from darksky.options import ForecastOptions

logger = logging.getLogger(__name__)


def build_forecast_url(base_url: str, token: str, latitude: float, longitude: float) -> str:
    return f"{base_url}/forecast/{token}/{latitude},{longitude}"


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create an httpx client using the configured timeout."""
    return httpx.AsyncClient(timeout=settings.timeout)


def _redact(text: str, token: str) -> str:
    return text.replace(token, "***") if token else text


async def get_forecast(
    client: httpx.AsyncClient,
    token: str,
    latitude: float,
    longitude: float,
    options: ForecastOptions | None = None,
    base_url: str = API_URL,
) -> Forecast:
    """Fetch and decode the forecast for a location.

    Raises TransportError when the request fails or returns an error status,
    MalformedResponse when the body is not JSON, and DecodeError when the JSON
    does not match the forecast model.
    """
    url = build_forecast_url(base_url, token, latitude, longitude)
    params = (options or ForecastOptions()).to_params()
    logger.debug("Requesting forecast for %s,%s with %s", latitude, longitude, params)

    try:
        resp = await client.get(url, params=params)
        resp.raise_for_status()
    except httpx.HTTPError as e:
        message = _redact(str(e), token)
        logger.warning("Forecast request for %s,%s failed: %s", latitude, longitude, message)
        status_code = e.response.status_code if isinstance(e, httpx.HTTPStatusError) else None
        # the httpx error carries the token in its request URL, so it is not chained
        raise TransportError(f"Forecast request failed: {message}", status_code=status_code) from None

    try:
        data = resp.json()
    except ValueError as e:
        logger.warning("Forecast response for %s,%s is not JSON", latitude, longitude)
        raise MalformedResponse(f"Forecast response is not valid JSON: {e}") from e

    return decode_forecast(data)


async def fetch_forecast(
    client: httpx.AsyncClient,
    settings: Settings,
    latitude: float,
    longitude: float,
    options: ForecastOptions | None = None,
) -> Forecast:
    """get_forecast using the token and base URL from Settings."""
    return await get_forecast(client, settings.token, latitude, longitude, options, base_url=settings.base_url)

"""SMHI point forecast API client."""

import logging

import httpx

from smhi.errors import HTTPStatusError, TransportError
from smhi.models.forecast import Forecast, parse_forecast

logger = logging.getLogger(__name__)

SMHI_BASE_URL = "https://opendata-download-metfcst.smhi.se"
FORECAST_PATH = "/api/category/pmp3g/version/2/geotype/point/lon/{lon:f}/lat/{lat:f}/data.json"
DEFAULT_USER_AGENT = "smhi-forecast/0.1.0"
DEFAULT_TIMEOUT = 5.0  # same as httpx's own default


class SmhiClient:
    def __init__(
        self,
        base_url: str = SMHI_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    def forecast_url(self, lon: float, lat: float) -> str:
        return self.base_url + FORECAST_PATH.format(lon=lon, lat=lat)

    def get_forecast(self, lon: float, lat: float) -> Forecast:
        """Fetch the 10 day forecast for a longitude/latitude coordinate.

        One GET, no retries. The API is the authority on which coordinates
        are in range; an out-of-range point comes back as a non-200 status.

        Raises:
            TransportError: the request could not be sent or the connection failed.
            HTTPStatusError: the API answered with anything but 200.
            ParseError: the body is not a forecast document.
        """
        url = self.forecast_url(lon, lat)
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}

        try:
            resp = httpx.get(url, headers=headers, timeout=self.timeout)
        except httpx.RequestError as e:
            logger.error("SMHI request failed: %s -> %s", url, e)
            raise TransportError(f"request failed: {e}", url=url) from e

        if resp.status_code != httpx.codes.OK:
            logger.error("SMHI %s returned %d", url, resp.status_code)
            raise HTTPStatusError(resp.status_code, resp.text, url=url)

        forecast = parse_forecast(resp.content)
        logger.debug(
            "Fetched forecast approved %s with %d time series items",
            forecast.approved_time.isoformat(), len(forecast.time_series),
        )
        return forecast

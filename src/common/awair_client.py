from typing import Any

import requests  # type: ignore[import-untyped]
from aws_lambda_powertools import Logger
from pydantic import ValidationError

from .config import DEFAULT_API_HOST, Settings
from .errors import FetchError
from .models import AirDataResponse, Reading, TimePoint, TimeWindow
from .timeutil import format_rfc3339

logger = Logger()


class AwairClient:
    """Reads raw air data for a single device from the Awair developer API.

    Credentials and device identity are passed in at construction time. Response
    headers are logged for rate-limit diagnostics; the API key never is.
    """

    def __init__(
        self,
        device_type: str,
        device_id: str,
        api_key: str,
        api_host: str = DEFAULT_API_HOST,
        timeout_secs: float = 15.0,
    ) -> None:
        self.device_type = device_type
        self.device_id = device_id
        self.api_key = api_key
        self.api_host = api_host
        self.timeout_secs = timeout_secs

    @classmethod
    def from_settings(cls, settings: Settings) -> "AwairClient":
        return cls(
            device_type=settings.device_type,
            device_id=settings.device_id,
            api_key=settings.api_key,
            api_host=settings.api_host,
            timeout_secs=settings.timeout_secs,
        )

    @property
    def raw_data_path(self) -> str:
        return f"/v1/users/self/devices/{self.device_type}/{self.device_id}/air-data/raw"

    @property
    def raw_data_url(self) -> str:
        return f"https://{self.api_host}{self.raw_data_path}"

    @staticmethod
    def window_params(window: TimeWindow) -> dict[str, str]:
        # Whether Awair treats either bound as inclusive is undocumented; pass them through untouched
        return {
            "fahrenheit": "false",
            "from": format_rfc3339(window.start),
            "to": format_rfc3339(window.end),
        }

    def get_air_data_raw(self, window: TimeWindow) -> list[TimePoint]:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Accept": "application/json",
        }
        try:
            resp = requests.get(
                self.raw_data_url,
                params=self.window_params(window),
                headers=headers,
                timeout=self.timeout_secs,
            )
        except requests.RequestException as exc:
            raise FetchError(f"Awair request to {self.raw_data_path} failed: {exc}") from exc

        # Log response headers for rate limits and diagnostics
        logger.info("awair_air_data_headers", headers=dict(resp.headers))
        if not 200 <= resp.status_code < 300:
            raise FetchError(f"Awair air data fetch failed: {resp.status_code} for {self.raw_data_path}")

        try:
            payload: Any = resp.json()
        except ValueError as exc:
            raise FetchError(f"Awair response for {self.raw_data_path} is not JSON: {exc}") from exc
        try:
            body = AirDataResponse.model_validate(payload)
        except ValidationError as exc:
            raise FetchError(f"Unexpected Awair response shape: {exc}") from exc
        return body.data

    def fetch(self, window: TimeWindow) -> list[Reading]:
        """Readings for ``window`` in response order, one per sensor per time point."""
        readings: list[Reading] = []
        for point in self.get_air_data_raw(window):
            readings.extend(point.readings())
        return readings

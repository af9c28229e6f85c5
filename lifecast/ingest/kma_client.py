"""KMA village forecast API client with retry and rate limit handling."""

import logging
import time
from typing import Any

import httpx

from lifecast.config.schema import KMA_BASE_URL, KmaConfig
from lifecast.models.geo import GridCell

logger = logging.getLogger(__name__)

VILLAGE_FORECAST_PATH = "/getVilageFcst"
RESULT_OK = "00"


class KmaApiError(RuntimeError):
    """The API answered, but not with a usable forecast payload."""

    def __init__(self, message: str, result_code: str | None = None):
        super().__init__(message)
        self.result_code = result_code


class KmaClient:
    def __init__(
        self,
        service_key: str,
        base_url: str = KMA_BASE_URL,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_base_delay: float = 2.0,
        num_of_rows: int = 1000,
    ):
        self.service_key = service_key
        self.base_url = base_url
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay
        self.num_of_rows = num_of_rows

    @classmethod
    def from_config(cls, config: KmaConfig) -> "KmaClient":
        return cls(
            service_key=config.service_key,
            base_url=config.base_url,
            timeout=config.timeout,
            max_retries=config.max_retries,
            retry_base_delay=config.retry_base_delay,
            num_of_rows=config.num_of_rows,
        )

    def get_village_forecast(
        self, base_date: str, base_time: str, cell: GridCell
    ) -> list[dict[str, Any]]:
        """Fetch the raw forecast items issued at base_date/base_time for a cell.

        Retries on 503/429 and transport errors with exponential backoff.
        Raises KmaApiError when the body is not JSON (the gateway answers
        rate limits in plain text) or the result code is not "00".
        """
        url = f"{self.base_url}{VILLAGE_FORECAST_PATH}"
        params = {
            "serviceKey": self.service_key,
            "pageNo": "1",
            "numOfRows": str(self.num_of_rows),
            "dataType": "JSON",
            "base_date": base_date,
            "base_time": base_time,
            "nx": str(cell.x),
            "ny": str(cell.y),
        }
        logger.info(
            "KMA forecast request base=%s %s grid=%s", base_date, base_time, cell
        )
        resp = self._get(url, params)
        try:
            payload = resp.json()
        except ValueError:
            raise KmaApiError(
                f"KMA returned a non-JSON response: {resp.text[:100]}"
            ) from None
        return _extract_items(payload)

    def _get(self, url: str, params: dict[str, str]) -> httpx.Response:
        last_error: Exception | None = None
        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(url, params=params, timeout=self.timeout)
                if resp.status_code in (503, 429) and attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "KMA returned %d, retrying in %.1fs (attempt %d/%d)",
                        resp.status_code, delay, attempt + 1, self.max_retries,
                    )
                    time.sleep(delay)
                    continue
                resp.raise_for_status()
                return resp
            except httpx.RequestError as e:
                last_error = e
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "KMA request error, retrying in %.1fs: %s", delay, e
                    )
                    time.sleep(delay)
                    continue
                raise

        assert last_error is not None
        raise last_error


def _extract_items(payload: Any) -> list[dict[str, Any]]:
    """Unwrap response.header/body and return body.items.item."""
    try:
        response = payload["response"]
        header = response["header"]
    except (KeyError, TypeError):
        raise KmaApiError("KMA response is missing its header") from None

    code = str(header.get("resultCode", ""))
    if code != RESULT_OK:
        raise KmaApiError(
            f"KMA error {code}: {header.get('resultMsg', 'unknown error')}",
            result_code=code,
        )

    try:
        items = response["body"]["items"]["item"]
    except (KeyError, TypeError):
        raise KmaApiError("KMA response has no forecast items", result_code=code) from None
    if not isinstance(items, list):
        raise KmaApiError("KMA forecast items are not a list", result_code=code)
    return items

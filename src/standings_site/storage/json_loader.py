# src/standings_site/storage/json_loader.py
import json
from pathlib import Path
from typing import Any, List, Optional

import httpx
from loguru import logger
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    RetryError,
)

from standings_site.config.settings import settings

# Define common HTTP status codes that warrant a retry
RETRYABLE_STATUS_CODES = {408, 429, 500, 502, 503, 504}


class DataLoadError(Exception):
    """Raised when a static dataset cannot be read or is malformed."""

    pass


class RetryableFetchError(DataLoadError):
    """A remote fetch failed in a way worth trying again."""

    pass


def is_remote(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def _fetch_remote(
    source: str,
    client: httpx.Client,
    max_attempts: int,
    wait_min: float,
    wait_max: float,
) -> Any:
    @retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=1, min=wait_min, max=wait_max),
        retry=retry_if_exception_type((httpx.RequestError, RetryableFetchError)),
        reraise=False,
    )
    def _get() -> Any:
        logger.debug(f"Fetching dataset from {source}")
        try:
            response = client.get(source)
        except httpx.RequestError as e:
            logger.warning(f"Request error fetching {source}, retrying: {e}")
            raise

        if response.status_code in RETRYABLE_STATUS_CODES:
            logger.warning(
                f"Retrying fetch of {source} due to status {response.status_code}"
            )
            raise RetryableFetchError(f"HTTP {response.status_code} from {source}")
        if response.is_error:
            raise DataLoadError(f"HTTP {response.status_code} fetching {source}")
        try:
            return response.json()
        except ValueError as e:
            raise DataLoadError(f"Invalid JSON from {source}: {e}") from e

    try:
        return _get()
    except RetryError as e:
        cause = e.last_attempt.exception()
        logger.error(
            f"Max retries exceeded fetching {source}. Last exception: {cause}"
        )
        raise DataLoadError(
            f"Failed to fetch {source} after {max_attempts} attempt(s)"
        ) from cause


def _read_file(source: str) -> Any:
    path = Path(source)
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise DataLoadError(f"Cannot read {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Invalid JSON in {path}: {e}") from e


def load_json_list(
    source: str,
    client: Optional[httpx.Client] = None,
    max_attempts: Optional[int] = None,
    timeout: Optional[float] = None,
    wait_min: float = 1.0,
    wait_max: float = 10.0,
) -> List[Any]:
    """Loads a JSON array from a file path or an http(s) URL.

    Args:
        source: Path on disk or http(s) URL.
        client: Optional httpx client for remote sources (one is created and
                closed here otherwise).
        max_attempts: Total attempts for remote sources, defaults to settings.
        timeout: Seconds before a remote request times out, defaults to settings.
        wait_min: Lower bound in seconds for the exponential backoff.
        wait_max: Upper bound in seconds for the exponential backoff.

    Returns:
        The decoded top-level list.

    Raises:
        DataLoadError: If the source is unreachable, not JSON, or not a list.
    """
    attempts = max_attempts or settings.fetch_max_attempts
    if is_remote(source):
        if client is not None:
            payload = _fetch_remote(source, client, attempts, wait_min, wait_max)
        else:
            with httpx.Client(
                timeout=httpx.Timeout(
                    timeout if timeout is not None else settings.fetch_timeout_seconds
                ),
                follow_redirects=True,
            ) as own_client:
                payload = _fetch_remote(source, own_client, attempts, wait_min, wait_max)
    else:
        payload = _read_file(source)

    if not isinstance(payload, list):
        raise DataLoadError(
            f"Expected a JSON array in {source}, got {type(payload).__name__}"
        )
    logger.info(f"Loaded {len(payload)} entries from {source}")
    return payload

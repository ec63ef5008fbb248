"""
HTTP fetching with bounded linear retry.

Every failed attempt is logged. Attempt N (1-indexed) is followed by a
pause of N * retry_delay seconds, except the last one, whose failure is
raised as a FetchFailure.
"""

import asyncio
import logging

import httpx

from cardart.errors import FetchFailure, TransportFailure, UpstreamStatusFailure

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_RETRY_DELAY = 1.0


def _to_failure(url: str, error: httpx.HTTPError) -> FetchFailure:
    if isinstance(error, httpx.HTTPStatusError):
        return UpstreamStatusFailure(url, error.response.status_code)
    return TransportFailure(url, str(error) or type(error).__name__)


async def fetch_with_retry(
    client: httpx.AsyncClient,
    url: str,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_delay: float = DEFAULT_RETRY_DELAY,
    timeout: float | None = None,
) -> httpx.Response:
    """
    GET a URL, retrying on transport errors and non-2xx responses.

    Args:
        client: HTTP client for the request
        url: URL to fetch
        max_attempts: Total attempts before giving up
        retry_delay: Base delay in seconds between attempts
        timeout: Optional per-request timeout override

    Returns:
        The first successful response.

    Raises:
        ValueError: If max_attempts is less than 1
        TransportFailure: If the last attempt failed to connect or timed out
        UpstreamStatusFailure: If the last attempt got a non-success status
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    for attempt in range(1, max_attempts + 1):
        try:
            if timeout is None:
                response = await client.get(url)
            else:
                response = await client.get(url, timeout=timeout)
            response.raise_for_status()
            return response
        except httpx.HTTPError as e:
            failure = _to_failure(url, e)
            logger.warning("Attempt %d/%d failed for %s: %s", attempt, max_attempts, url, failure)
            if attempt == max_attempts:
                raise failure from e
            await asyncio.sleep(retry_delay * attempt)

    # unreachable: the loop either returns or raises
    raise AssertionError("fetch loop exited without result")

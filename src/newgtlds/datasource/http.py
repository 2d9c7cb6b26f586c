"""
Plain HTTP GET helper shared by the upstream data sources.

One request per call, no retries. Anything other than 200 OK is an error.
"""

from typing import Optional

import httpx
import structlog

from ..config import settings
from ..errors import FetchError


logger = structlog.get_logger(__name__)


def get_http_data(url: str, client: Optional[httpx.Client] = None) -> bytes:
    """
    Perform a GET request and return the response body.

    Args:
        url: URL to fetch
        client: Optional httpx client to send the request with. When omitted a
            short-lived client using the configured timeout is created.

    Returns:
        Raw response body bytes

    Raises:
        FetchError: On transport failures or a non-200 status code
    """
    if client is None:
        with httpx.Client(
            timeout=settings.http_timeout_seconds, follow_redirects=True
        ) as owned_client:
            return get_http_data(url, client=owned_client)

    try:
        response = client.get(url)
    except httpx.HTTPError as e:
        raise FetchError(f"fetching data from \"{url}\": {e}") from e

    if response.status_code != httpx.codes.OK:
        raise FetchError(
            f"unexpected status code fetching data from \"{url}\" : "
            f"expected status {httpx.codes.OK.value} got {response.status_code}"
        )

    logger.debug("http_data_fetched", url=url, size_bytes=len(response.content))
    return response.content

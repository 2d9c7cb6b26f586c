"""
IANA root zone TLD list (tlds-alpha-by-domain.txt).

The list holds every TLD in the root zone, one per line and in upper case,
preceded by a '#' version comment.
"""

from typing import List, Optional

import httpx
import structlog

from ..config import settings
from ..errors import NoEntriesError, ParseError
from .http import get_http_data


logger = structlog.get_logger(__name__)


def normalize_tld(tld: str) -> str:
    """Lower-case a TLD from the IANA list."""
    return tld.strip().lower()


def parse_tlds(text: str) -> List[str]:
    """
    Parse the IANA TLD list, skipping comment and blank lines.

    Raises:
        NoEntriesError: If no TLD lines are present
    """
    tlds = []
    for line in text.split("\n"):
        if line.startswith("#") or not line.strip():
            continue
        tlds.append(normalize_tld(line))

    # An empty list means the format changed or the download was truncated.
    if not tlds:
        raise NoEntriesError("found no TLD information")
    return tlds


def get_tlds(url: Optional[str] = None, client: Optional[httpx.Client] = None) -> List[str]:
    """
    Fetch and parse the IANA TLD list.

    Args:
        url: List URL (default: settings.tlds_txt_url)
        client: Optional httpx client

    Returns:
        Lower-cased TLDs in file order
    """
    url = url or settings.tlds_txt_url
    body = get_http_data(url, client=client)
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"decoding IANA TLD data: {e}") from e

    tlds = parse_tlds(text)
    logger.info("tld_data_fetched", url=url, tlds_count=len(tlds))
    return tlds

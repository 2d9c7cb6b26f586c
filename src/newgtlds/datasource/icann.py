"""
ICANN gTLD JSON registry (version 2).

See https://www.icann.org/resources/pages/registries/registries-en for the
registry itself. Entries are fetched, normalized and filtered down to the
gTLDs that belong in the new gTLD section of the public suffix list.
"""

from typing import Iterable, List, Optional

import httpx
import structlog
from pydantic import ValidationError

from ..config import settings
from ..errors import NoEntriesError, ParseError
from ..models.gtld_entry import GTLDEntry, GTLDRegistry
from .http import get_http_data


logger = structlog.get_logger(__name__)


# gTLDs that predate ICANN's new gTLD program. They appear in the registry but
# are maintained by hand elsewhere in the dat file, alongside their
# registry-reserved second level domains.
LEGACY_GTLDS = frozenset(
    {
        "aero",
        "asia",
        "biz",
        "cat",
        "com",
        "coop",
        "info",
        "jobs",
        "mobi",
        "museum",
        "name",
        "net",
        "org",
        "post",
        "pro",
        "tel",
        "xxx",
    }
)


def normalize_entry(entry: GTLDEntry) -> GTLDEntry:
    """Return the normalized form of a registry entry."""
    return entry.normalized()


def is_legacy_gtld(tld: str) -> bool:
    """
    Check whether a gTLD (no leading '.') predates the new gTLD program.

    Examples:
        >>> is_legacy_gtld("COM")
        True
        >>> is_legacy_gtld("pizza")
        False
    """
    return tld.lower() in LEGACY_GTLDS


def filter_gtlds(entries: Iterable[GTLDEntry]) -> List[GTLDEntry]:
    """
    Drop entries that must not be rendered, keeping the order of the rest.

    Filters applied:
    1. Entries without a gTLD name
    2. Legacy gTLDs
    3. Contract terminated before the gTLD was ever delegated
    4. Delegation already removed from the root zone

    Terminated gTLDs that are still delegated are kept; they render with a
    "(cancelled)" marker.

    Args:
        entries: Normalized registry entries

    Returns:
        Entries to render
    """
    filtered = []

    for entry in entries:
        if not entry.a_label.strip():
            continue

        if is_legacy_gtld(entry.a_label):
            continue

        if entry.contract_terminated and entry.date_of_delegation == "":
            continue

        if entry.removal_date != "":
            continue

        filtered.append(entry)

    return filtered


def parse_gtlds(data: bytes) -> List[GTLDEntry]:
    """
    Decode, normalize and filter the registry JSON.

    Args:
        data: Raw JSON registry bytes

    Returns:
        Normalized entries to render

    Raises:
        ParseError: If the payload is not a JSON object of the expected shape
        NoEntriesError: If there are no entries before or after filtering
    """
    try:
        registry = GTLDRegistry.model_validate_json(data)
    except ValidationError as e:
        raise ParseError(f"unmarshaling ICANN gTLD JSON data: {e}") from e

    # The registry always holds gTLDs. None at all means the format changed.
    if not registry.gtlds:
        raise NoEntriesError("found no gTLD information after unmarshaling")

    entries = [normalize_entry(entry) for entry in registry.gtlds]

    filtered = filter_gtlds(entries)
    if not filtered:
        raise NoEntriesError(
            "found no gTLD information after removing legacy and contract terminated gTLDs"
        )

    logger.debug(
        "gtld_entries_filtered",
        entries_count=len(entries),
        filtered_count=len(filtered),
    )
    return filtered


def get_gtlds(url: Optional[str] = None, client: Optional[httpx.Client] = None) -> List[GTLDEntry]:
    """
    Fetch the registry and return the entries for the new gTLD section.

    Args:
        url: Registry URL (default: settings.gtld_json_url)
        client: Optional httpx client

    Returns:
        Normalized, filtered entries in registry order
    """
    url = url or settings.gtld_json_url
    data = get_http_data(url, client=client)
    entries = parse_gtlds(data)
    logger.info("gtld_data_fetched", url=url, gtlds_count=len(entries))
    return entries

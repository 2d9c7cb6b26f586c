"""
Rendering of the new gTLD section.

The section is rendered in two independent pieces: a header carrying the
source URL and a timestamp, and a body holding the entries. Only the body is
compared against the dat file, so a new timestamp alone never causes an
update.
"""

from datetime import datetime, timezone
from typing import Iterable, Protocol

from .models.gtld_entry import GTLDEntry


HEADER_TEMPLATE = (
    "\n"
    "// List of new gTLDs imported from {url} on {date}\n"
    "// This list is auto-generated, don't edit it manually."
)

CANCELLED_MARKER = "(cancelled)"


class Clock(Protocol):
    """Source of the current time, swapped for a fixed one in tests."""

    def now(self) -> datetime: ...


class RealClock:
    """Clock backed by the system time."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


def format_rfc3339_utc(moment: datetime) -> str:
    """
    Format a datetime as RFC3339 in UTC with a 'Z' suffix.

    Naive datetimes are taken to be UTC already.

    Examples:
        >>> format_rfc3339_utc(datetime(2021, 2, 10, 0, 24, 14, tzinfo=timezone.utc))
        '2021-02-10T00:24:14Z'
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def render_gtld_header(url: str, moment: datetime) -> str:
    """
    Render the section header.

    Args:
        url: URL the gTLD data was fetched from
        moment: Time of the update

    Returns:
        Header text: a blank line then two comment lines, no trailing newline
    """
    return HEADER_TEMPLATE.format(url=url, date=format_rfc3339_utc(moment))


def entry_comment(entry: GTLDEntry) -> str:
    """
    Build the comment line preceding an entry.

    Forms:
        '// <a_label> : <date_of_contract_signature>'
        '// <a_label> : <date_of_contract_signature> <registry_operator>'

    either followed by ' (cancelled)' when the contract was terminated. The
    contract date may be empty, leaving a trailing space after the colon.
    """
    parts = ["//", entry.a_label, ":", entry.date_of_contract_signature]
    # No double space when there is no operator
    if entry.registry_operator:
        parts.append(entry.registry_operator)
    if entry.contract_terminated:
        parts.append(CANCELLED_MARKER)
    return " ".join(parts)


def render_gtld_data(entries: Iterable[GTLDEntry]) -> str:
    """
    Render the section body: comment line, Unicode label, blank line per entry.

    Args:
        entries: Normalized, filtered entries

    Returns:
        Body text, ending with a newline when non-empty
    """
    return "".join(f"{entry_comment(entry)}\n{entry.u_label}\n\n" for entry in entries)

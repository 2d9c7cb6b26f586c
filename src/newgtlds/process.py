"""
Update orchestration for the new gTLD section.

Ties together span extraction, fetching, rendering and splicing. The dat file
is only modified when the rendered entries differ from what is already there.
"""

from typing import Optional

import httpx
import structlog

from .datasource.icann import get_gtlds
from .datfile import DatFile
from .errors import SpanTooSmallError
from .rendering import Clock, RealClock, render_gtld_data, render_gtld_header


logger = structlog.get_logger(__name__)


def process_gtlds(
    dat_file: DatFile,
    data_url: str,
    clock: Optional[Clock] = None,
    client: Optional[httpx.Client] = None,
) -> str:
    """
    Bring the gTLD section of a dat file up to date.

    Steps:
    1. Extract the current section lines (old header plus old entries)
    2. Render a fresh header and skip that many lines of the old section
    3. Fetch, normalize and filter the registry entries
    4. Render the entries and compare them with the old entries
    5. Splice in header plus entries only when the entries changed

    Args:
        dat_file: Dat file with a located gTLD span, updated in place
        data_url: ICANN gTLD JSON registry URL
        clock: Time source for the header (default: RealClock)
        client: Optional httpx client for the registry request

    Returns:
        Full dat file content after the update

    Raises:
        SpanError: If the section is malformed or too small to hold a header
        NewGTLDsError: If the registry cannot be fetched or holds no entries
    """
    if clock is None:
        clock = RealClock()

    span_lines = dat_file.get_gtld_lines()

    new_header = render_gtld_header(data_url, clock.now())
    header_len = len(new_header.split("\n"))

    if len(span_lines) <= header_len:
        raise SpanTooSmallError()

    # Skip the old header by line count: its timestamp is expected to differ.
    existing_data = "\n".join(span_lines[header_len:])

    entries = get_gtlds(data_url, client=client)
    new_data = render_gtld_data(entries)

    if new_data == existing_data:
        logger.info("gtld_data_unchanged", gtlds_count=len(entries))
        return str(dat_file)

    dat_file.replace_gtld_content(new_header + "\n" + new_data)
    logger.info(
        "gtld_data_updated",
        gtlds_count=len(entries),
        start_index=dat_file.span.start_index,
        end_index=dat_file.span.end_index,
    )
    return str(dat_file)

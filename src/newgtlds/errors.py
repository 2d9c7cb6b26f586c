"""
Error types raised while updating the new gTLD section of the dat file.

Every failure is terminal for the current run: nothing here is retried and
nothing is written once one of these has been raised.
"""

from .constants import PSL_GTLDS_SECTION_FOOTER, PSL_GTLDS_SECTION_HEADER


class NewGTLDsError(Exception):
    """Base class for all gTLD update errors."""


class FetchError(NewGTLDsError):
    """Upstream data could not be fetched (network failure or non-200 status)."""


class ParseError(NewGTLDsError):
    """Upstream data was fetched but could not be decoded."""


class NoEntriesError(NewGTLDsError):
    """Upstream data decoded to nothing usable."""


class SpanError(NewGTLDsError):
    """The dat file's gTLD section is missing or malformed."""


class NoHeaderError(SpanError):
    def __init__(self):
        super().__init__(f'did not find expected header line "{PSL_GTLDS_SECTION_HEADER}"')


class NoFooterError(SpanError):
    def __init__(self):
        super().__init__(f'did not find expected footer line "{PSL_GTLDS_SECTION_FOOTER}"')


class MultipleHeadersError(SpanError):
    def __init__(self):
        super().__init__(f'found expected header line "{PSL_GTLDS_SECTION_HEADER}" more than once')


class InvertedSpanError(SpanError):
    """The footer line was found before the header line."""

    def __init__(self, start_index: int, end_index: int):
        self.start_index = start_index
        self.end_index = end_index
        super().__init__(
            f'found footer line "{PSL_GTLDS_SECTION_FOOTER}" before header line "{PSL_GTLDS_SECTION_HEADER}" '
            f"(index {end_index} vs {start_index})"
        )


class SpanOutOfBoundsError(SpanError):
    """The span ends at or past the last line of the file."""

    def __init__(self, start_index: int, end_index: int, num_lines: int):
        self.start_index = start_index
        self.end_index = end_index
        self.num_lines = num_lines
        super().__init__(
            f"span out of bounds: start index {start_index}, "
            f"end index {end_index}, number of lines {num_lines}"
        )


class SpanTooSmallError(SpanError):
    def __init__(self):
        super().__init__("gtld span data was too small, missing header?")

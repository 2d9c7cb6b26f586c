"""
Public suffix list dat file with a located new gTLD section.

The file is held as its lines (split on "\\n", nothing else touched) plus the
span of line indexes between the header and footer marker lines. The span is
the only part of the file that is ever rewritten.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

import structlog

from .constants import PSL_GTLDS_SECTION_FOOTER, PSL_GTLDS_SECTION_HEADER
from .errors import (
    InvertedSpanError,
    MultipleHeadersError,
    NoFooterError,
    NoHeaderError,
    SpanOutOfBoundsError,
)


logger = structlog.get_logger(__name__)


@dataclass
class DatSpan:
    """
    Half-open range [start_index, end_index) of the gTLD section lines.

    The header line sits at start_index - 1 and the footer line at end_index.
    Zero means "not set".
    """

    start_index: int = 0
    end_index: int = 0

    def validate(self) -> None:
        """
        Check the span is sensible on its own.

        Raises:
            NoHeaderError: start_index is not set
            NoFooterError: end_index is not set
            InvertedSpanError: end_index <= start_index
        """
        if self.start_index <= 0:
            raise NoHeaderError()
        if self.end_index <= 0:
            raise NoFooterError()
        if self.end_index <= self.start_index:
            raise InvertedSpanError(self.start_index, self.end_index)


@dataclass
class DatFile:
    """
    Lines of the dat file and the span holding the gTLD data.

    Supports reading the gTLD section and replacing it. Every operation
    validates first and leaves the file untouched when validation fails.
    """

    lines: List[str] = field(default_factory=list)
    span: DatSpan = field(default_factory=DatSpan)

    def validate(self) -> None:
        """
        Check the span against the file.

        Raises:
            SpanError: From DatSpan.validate, or SpanOutOfBoundsError when the
                span does not leave room for the footer line
        """
        self.span.validate()
        if self.span.end_index >= len(self.lines):
            raise SpanOutOfBoundsError(
                self.span.start_index, self.span.end_index, len(self.lines)
            )

    def get_gtld_lines(self) -> List[str]:
        """Return the lines between the header and footer lines."""
        self.validate()
        return self.lines[self.span.start_index:self.span.end_index]

    def replace_gtld_content(self, content: str) -> None:
        """
        Replace the gTLD section with new content.

        The header and footer lines are kept; the span end is moved to match
        the number of new lines.

        Args:
            content: New section text, split on "\\n"
        """
        self.validate()

        content_lines = content.split("\n")
        before = self.lines[:self.span.start_index]
        after = self.lines[self.span.end_index:]

        self.lines = before + content_lines + after
        self.span.end_index = len(before) + len(content_lines)

    def __str__(self) -> str:
        return "\n".join(self.lines)


def read_dat_file_content(content: str) -> DatFile:
    """
    Split dat file content into lines and locate the gTLD section.

    The first header line and the first footer line after it bound the
    section. Scanning stops once both are found.

    Args:
        content: Full dat file text

    Returns:
        DatFile with a validated span

    Raises:
        NoHeaderError: No header line (reported before a missing footer)
        NoFooterError: Header line but no footer line
        MultipleHeadersError: A second header line before any footer line
        InvertedSpanError: The footer line comes before the header line
    """
    lines = content.split("\n")

    header_index: Optional[int] = None
    footer_index: Optional[int] = None

    for index, line in enumerate(lines):
        if line == PSL_GTLDS_SECTION_HEADER:
            if header_index is not None:
                raise MultipleHeadersError()
            header_index = index
        elif line == PSL_GTLDS_SECTION_FOOTER and footer_index is None:
            footer_index = index

        if header_index is not None and footer_index is not None:
            break

    if header_index is None:
        raise NoHeaderError()
    if footer_index is None:
        raise NoFooterError()

    dat_file = DatFile(
        lines=lines,
        span=DatSpan(start_index=header_index + 1, end_index=footer_index),
    )
    dat_file.validate()

    logger.debug(
        "gtld_span_located",
        start_index=dat_file.span.start_index,
        end_index=dat_file.span.end_index,
        lines_count=len(lines),
    )
    return dat_file


def read_dat_file(path: Union[str, Path]) -> DatFile:
    """
    Read a dat file from disk and locate its gTLD section.

    The file is read without newline translation, and bytes that are not
    valid UTF-8 are kept as surrogate escapes, so that lines outside the
    section are written back unchanged.

    Raises:
        OSError: If the file cannot be read
        SpanError: If the gTLD section cannot be located
    """
    with open(path, "r", encoding="utf-8", errors="surrogateescape", newline="") as f:
        content = f.read()
    return read_dat_file_content(content)


def write_dat_file(path: Union[str, Path], content: str) -> None:
    """Write rendered dat file content back to disk, byte for byte."""
    with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
        f.write(content)
    logger.info("dat_file_written", path=str(path), size_chars=len(content))

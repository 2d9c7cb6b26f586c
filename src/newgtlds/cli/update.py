"""
Command-line interface for updating the new gTLD section.

Downloads the ICANN gTLD registry and splices the new gTLD section into the
public suffix list dat file.

Usage:
    # Print the updated file to stdout
    newgtlds -psl-dat-file public_suffix_list.dat

    # Update the file in place
    newgtlds -psl-dat-file public_suffix_list.dat -overwrite
"""

import argparse
import sys
from typing import List, Optional

import structlog

from newgtlds.config import settings
from newgtlds.datfile import read_dat_file, write_dat_file
from newgtlds.errors import NewGTLDsError
from newgtlds.logging_config import setup_logging
from newgtlds.process import process_gtlds
from newgtlds.rendering import RealClock


logger = structlog.get_logger(__name__)


TRUE_VALUES = {"1", "t", "true", "yes"}
FALSE_VALUES = {"0", "f", "false", "no"}


def parse_bool(value: str) -> bool:
    """Parse a boolean flag value such as 'true' or '0'."""
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise argparse.ArgumentTypeError(f"invalid boolean value: {value!r}")


def write_stdout(content: str) -> None:
    """Print dat file content, passing undecodable bytes through unchanged."""
    data = content.encode("utf-8", errors="surrogateescape") + b"\n"
    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="newgtlds",
        description="Update the new gTLD section of the public suffix list dat file",
    )

    parser.add_argument(
        "-psl-dat-file",
        "--psl-dat-file",
        dest="psl_dat_file",
        type=str,
        default=settings.psl_dat_file,
        help="file path to the public_suffix_list.dat data file to be updated with new gTLDs "
        "(default: %(default)s)",
    )

    parser.add_argument(
        "-overwrite",
        "--overwrite",
        dest="overwrite",
        type=parse_bool,
        nargs="?",
        const=True,
        default=False,
        help="overwrite -psl-dat-file with the new data instead of printing to stdout",
    )

    return parser


def run(psl_dat_file: str, overwrite: bool = False) -> Optional[str]:
    """
    Update a dat file, returning the new content when not overwriting.

    Raises:
        OSError: If the dat file cannot be read or written
        NewGTLDsError: On any span, fetch or parse failure
    """
    dat_file = read_dat_file(psl_dat_file)
    content = process_gtlds(dat_file, settings.gtld_json_url, clock=RealClock())

    if not overwrite:
        return content

    write_dat_file(psl_dat_file, content)
    return None


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    setup_logging()

    args = build_parser().parse_args(argv)

    try:
        content = run(args.psl_dat_file, overwrite=args.overwrite)
    except (NewGTLDsError, OSError) as e:
        logger.error("gtld_update_failed", path=args.psl_dat_file, error=str(e))
        print(f"error updating gTLD data: {e}", file=sys.stderr)
        return 1

    if content is not None:
        write_stdout(content)
    return 0


if __name__ == "__main__":
    sys.exit(main())

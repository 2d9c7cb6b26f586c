# Upstream data sources

from .http import get_http_data
from .iana import get_tlds, parse_tlds
from .icann import (
    LEGACY_GTLDS,
    filter_gtlds,
    get_gtlds,
    is_legacy_gtld,
    normalize_entry,
    parse_gtlds,
)

__all__ = [
    "get_http_data",
    "get_tlds",
    "parse_tlds",
    "LEGACY_GTLDS",
    "filter_gtlds",
    "get_gtlds",
    "is_legacy_gtld",
    "normalize_entry",
    "parse_gtlds",
]

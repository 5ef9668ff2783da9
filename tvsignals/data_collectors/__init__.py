"""Data collectors for tvsignals.

Provides the static scanner field table and the HTTP collector that
resolves those fields for one symbol.
"""

from .fields import ALL_FIELDS, FIELD_GROUPS, columns_for, field_name
from .protocols import FetchCollaborator
from .scanner_collector import ScannerCollector

__all__ = [
    "ALL_FIELDS",
    "FIELD_GROUPS",
    "FetchCollaborator",
    "ScannerCollector",
    "columns_for",
    "field_name",
]

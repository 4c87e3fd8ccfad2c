"""
Device data for the catalog.

The built-in tables are curated data only; callers with their own device
list pass it to DeviceCatalog directly, or through the loaders when it comes
as plain mappings.
"""

from gpu_device_info.data.cards import CARD_INFO
from gpu_device_info.data.details import DEVICE_DETAILS
from gpu_device_info.data.loaders import (
    load_details,
    load_record,
    load_records,
    to_enum,
)

__all__ = [
    "CARD_INFO",
    "DEVICE_DETAILS",
    "load_details",
    "load_record",
    "load_records",
    "to_enum",
]

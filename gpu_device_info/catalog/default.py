from typing import Optional

from gpu_device_info.catalog.catalog import DeviceCatalog
from gpu_device_info.catalog.translation import DeviceNameTranslator
from gpu_device_info.data import CARD_INFO, DEVICE_DETAILS


def create_default_catalog(
    name_translator: Optional[DeviceNameTranslator] = None,
) -> DeviceCatalog:
    """
    Create a new catalog from the built-in device tables.

    Every call returns an independent catalog; mutating one does not affect
    another.
    """
    return DeviceCatalog(CARD_INFO, DEVICE_DETAILS, name_translator=name_translator)

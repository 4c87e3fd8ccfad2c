"""
Data model of the device catalog.

Exports the enumerations used as index keys and the two record types the
catalog is built from.
"""

from gpu_device_info.types.enums import (
    REVISION_ID_ANY,
    FIRST_AMD_GENERATION,
    LAST_AMD_GENERATION,
    AsicType,
    HwGeneration,
    is_amd_generation,
)
from gpu_device_info.types.device import (
    PLACEHOLDER_DETAIL,
    DeviceDetail,
    DeviceRecord,
)

__all__ = [
    "REVISION_ID_ANY",
    "FIRST_AMD_GENERATION",
    "LAST_AMD_GENERATION",
    "AsicType",
    "HwGeneration",
    "is_amd_generation",
    "PLACEHOLDER_DETAIL",
    "DeviceDetail",
    "DeviceRecord",
]

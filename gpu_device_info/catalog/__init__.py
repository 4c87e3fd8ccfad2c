"""
GPU device catalog.

Resolves PCI device ids, revision ids and driver-reported device names to
card records, per-ASIC device details and hardware generations.

Usage:
    from gpu_device_info.catalog import create_default_catalog

    catalog = create_default_catalog()
    detail = catalog.device_info(0x744C, 0xC8)
    detail.number_cus()  # 96
"""

from gpu_device_info.catalog.catalog import DeviceCatalog
from gpu_device_info.catalog.default import create_default_catalog
from gpu_device_info.catalog.generation import (
    generation_display_name,
    gfx_ip_ver_to_hw_generation,
    hw_generation_to_gfx_ip_ver,
    lds_size_in_bytes,
)
from gpu_device_info.catalog.translation import (
    DEVICE_NAME_ALIASES,
    DeviceNameTranslator,
    translate_device_name,
)

__all__ = [
    "DeviceCatalog",
    "create_default_catalog",
    "generation_display_name",
    "gfx_ip_ver_to_hw_generation",
    "hw_generation_to_gfx_ip_ver",
    "lds_size_in_bytes",
    "DEVICE_NAME_ALIASES",
    "DeviceNameTranslator",
    "translate_device_name",
]

"""
Helpers over hardware generations that need no catalog data.
"""

from typing import Optional

from gpu_device_info.types import DeviceDetail, HwGeneration, is_amd_generation
from gpu_device_info.utils.print_utils import get_logger

logger = get_logger(__name__)


GENERATION_DISPLAY_NAMES = {
    HwGeneration.SOUTHERN_ISLAND: "Graphics IP v6",
    HwGeneration.SEA_ISLAND: "Graphics IP v7",
    HwGeneration.VOLCANIC_ISLAND: "Graphics IP v8",
    HwGeneration.GFX9: "Vega",
    HwGeneration.GFX10: "RDNA",
    HwGeneration.GFX103: "RDNA2",
    HwGeneration.GFX11: "RDNA3",
    HwGeneration.GFX115: "RDNA3.5",
    HwGeneration.GFX12: "RDNA4",
}

# GFX IP version = generation + offset, inside the AMD band
GFX_IP_VERSION_OFFSET = 3

LDS_BYTES_PER_CU = 65536
LDS_BYTES_PER_CU_GFX12 = 163840


def generation_display_name(generation: HwGeneration) -> str:
    """
    Get the display name of a hardware generation.

    Only AMD generations have a display name. Asking for any other value is
    a caller bug: it is logged as an error, then raises AssertionError, or
    returns an empty string when assertions are disabled (python -O).
    """
    display_name = GENERATION_DISPLAY_NAMES.get(generation)
    if display_name is None:
        logger.error("No display name for hardware generation %r", generation)
        assert False, f"{generation!r} is not an AMD hardware generation"
        return ""
    return display_name


def lds_size_in_bytes(generation: HwGeneration, detail: DeviceDetail) -> Optional[int]:
    """
    Get the total local data store size of a device.

    Args:
        generation: Hardware generation of the device
        detail: Device detail of the device's ASIC

    Returns:
        LDS bytes summed over all compute units, or None for generations
        older than GFX9 (and non-AMD generations)
    """
    if not is_amd_generation(generation) or generation < HwGeneration.GFX9:
        return None

    if generation >= HwGeneration.GFX12:
        per_cu = LDS_BYTES_PER_CU_GFX12
    else:
        per_cu = LDS_BYTES_PER_CU

    return detail.number_cus() * per_cu


def gfx_ip_ver_to_hw_generation(gfx_ip_ver: int) -> Optional[HwGeneration]:
    """
    Convert a GFX IP major version to a hardware generation.

    Examples:
        >>> gfx_ip_ver_to_hw_generation(6)
        <HwGeneration.SOUTHERN_ISLAND: 3>
        >>> gfx_ip_ver_to_hw_generation(2) is None
        True
    """
    value = gfx_ip_ver - GFX_IP_VERSION_OFFSET
    if not is_amd_generation(value):
        return None
    return HwGeneration(value)


def hw_generation_to_gfx_ip_ver(generation: HwGeneration) -> Optional[int]:
    """Convert a hardware generation to its GFX IP version, None outside the AMD band."""
    if not is_amd_generation(generation):
        return None
    return int(generation) + GFX_IP_VERSION_OFFSET

"""
Enumerations used as index keys by the device catalog.

HwGeneration is ordered: values grow with the age of the architecture and
the AMD families occupy one contiguous band, which is what the GFX IP
version conversion relies on.
"""

from enum import IntEnum


# Ignore the revision id when looking up a device id
REVISION_ID_ANY = 0xFFFFFFFF


class HwGeneration(IntEnum):
    """Architecture family of a device, grouped by vendor and IP version."""

    NONE = 0
    NVIDIA = 1
    INTEL = 2
    SOUTHERN_ISLAND = 3  # GFX IP 6
    SEA_ISLAND = 4  # GFX IP 7
    VOLCANIC_ISLAND = 5  # GFX IP 8
    GFX9 = 6
    GFX10 = 7
    GFX103 = 8
    GFX11 = 9
    GFX115 = 10
    GFX12 = 11


FIRST_AMD_GENERATION = HwGeneration.SOUTHERN_ISLAND
LAST_AMD_GENERATION = HwGeneration.GFX12


def is_amd_generation(generation: int) -> bool:
    """Check whether a generation value lies inside the AMD band."""
    return FIRST_AMD_GENERATION <= generation <= LAST_AMD_GENERATION


class AsicType(IntEnum):
    """
    One member per distinct silicon design.

    The ASIC type is the join key between card records and the per-ASIC
    device detail table. PLACEHOLDER members reserve slots for future parts
    and only ever carry invalid details.
    """

    NONE = -1
    TAHITI_PRO = 0
    TAHITI_XT = 1
    PITCAIRN_PRO = 2
    PITCAIRN_XT = 3
    CAPEVERDE_PRO = 4
    CAPEVERDE_XT = 5
    OLAND = 6  # mobile is MARS
    HAINAN = 7
    BONAIRE = 8  # mobile is SATURN
    HAWAII = 9
    KALINDI = 10
    SPECTRE = 11
    SPECTRE_SL = 12
    SPECTRE_LITE = 13
    SPOOKY = 14
    ICELAND = 15
    TONGA = 16
    CARRIZO = 17
    CARRIZO_EMB = 18
    FIJI = 19
    STONEY = 20
    ELLESMERE = 21
    BAFFIN = 22
    GFX8_0_4 = 23
    VEGAM1 = 24
    VEGAM2 = 25
    GFX9_0_0 = 26
    GFX9_0_2 = 27
    GFX9_0_6 = 28
    GFX9_0_8 = 29
    GFX9_0_9 = 30
    GFX9_0_C = 31
    GFX10_1_0 = 32
    GFX10_1_0_XL = 33
    GFX10_1_2 = 34
    GFX10_1_1 = 35
    GFX10_3_0 = 36
    GFX10_3_1 = 37
    GFX10_3_2 = 38
    GFX11_0_0 = 39
    GFX11_0_1 = 40
    GFX11_0_2 = 41
    GFX11_5_0 = 42
    GFX12_0_0 = 43
    GFX12_0_1 = 44
    PLACEHOLDER_1 = 45
    PLACEHOLDER_2 = 46

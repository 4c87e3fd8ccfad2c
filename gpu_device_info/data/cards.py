"""
Built-in card table.

A representative subset of AMD boards, a few per generation. Records are
listed oldest generation first; within a device id, the most common
revision comes first since it wins revision-agnostic lookups.
"""

from gpu_device_info.types import AsicType, DeviceRecord, HwGeneration

SI = HwGeneration.SOUTHERN_ISLAND
CI = HwGeneration.SEA_ISLAND
VI = HwGeneration.VOLCANIC_ISLAND


CARD_INFO = [
    # Southern Islands
    DeviceRecord(AsicType.TAHITI_XT, 0x6798, 0x00, SI, False, "Tahiti", "AMD Radeon HD 7900 Series"),
    DeviceRecord(AsicType.TAHITI_PRO, 0x679A, 0x00, SI, False, "Tahiti", "AMD Radeon HD 7900 Series"),
    DeviceRecord(AsicType.PITCAIRN_XT, 0x6818, 0x00, SI, False, "Pitcairn", "AMD Radeon HD 7800 Series"),
    DeviceRecord(AsicType.PITCAIRN_PRO, 0x6819, 0x00, SI, False, "Pitcairn", "AMD Radeon HD 7800 Series"),
    DeviceRecord(AsicType.CAPEVERDE_XT, 0x683D, 0x00, SI, False, "Capeverde", "AMD Radeon HD 7700 Series"),
    DeviceRecord(AsicType.CAPEVERDE_PRO, 0x683F, 0x00, SI, False, "Capeverde", "AMD Radeon HD 7700 Series"),
    DeviceRecord(AsicType.OLAND, 0x6611, 0x00, SI, False, "Oland", "AMD Radeon R7 240"),
    DeviceRecord(AsicType.HAINAN, 0x6664, 0x00, SI, False, "Hainan", "AMD Radeon R5 M200 Series"),
    # Sea Islands
    DeviceRecord(AsicType.BONAIRE, 0x665C, 0x00, CI, False, "Bonaire", "AMD Radeon HD 7790 Series"),
    DeviceRecord(AsicType.HAWAII, 0x67B0, 0x00, CI, False, "Hawaii", "AMD Radeon R9 290X"),
    DeviceRecord(AsicType.HAWAII, 0x67B1, 0x00, CI, False, "Hawaii", "AMD Radeon R9 290"),
    DeviceRecord(AsicType.KALINDI, 0x9830, 0x00, CI, True, "Kalindi", "AMD Radeon HD 8400 / R3 Series"),
    DeviceRecord(AsicType.SPECTRE, 0x130F, 0x00, CI, True, "Spectre", "AMD Radeon R7 Graphics"),
    DeviceRecord(AsicType.SPECTRE_SL, 0x1309, 0x00, CI, True, "Spectre", "AMD Radeon R7 Graphics"),
    DeviceRecord(AsicType.SPECTRE_LITE, 0x1313, 0x00, CI, True, "Spectre", "AMD Radeon R7 Graphics"),
    DeviceRecord(AsicType.SPOOKY, 0x131D, 0x00, CI, True, "Spooky", "AMD Radeon R6 Graphics"),
    # Volcanic Islands
    DeviceRecord(AsicType.ICELAND, 0x6900, 0x00, VI, False, "Iceland", "AMD Radeon R7 M260"),
    DeviceRecord(AsicType.TONGA, 0x6938, 0x00, VI, False, "Tonga", "AMD Radeon R9 380X Series"),
    DeviceRecord(AsicType.TONGA, 0x6939, 0x00, VI, False, "Tonga", "AMD Radeon R9 380 Series"),
    DeviceRecord(AsicType.CARRIZO, 0x9874, 0xC4, VI, True, "Carrizo", "AMD Radeon R7 Graphics"),
    DeviceRecord(AsicType.CARRIZO_EMB, 0x9874, 0x81, VI, True, "Carrizo", "AMD Radeon R7 Graphics"),
    DeviceRecord(AsicType.FIJI, 0x7300, 0xC8, VI, False, "Fiji", "AMD Radeon R9 Fury Series"),
    DeviceRecord(AsicType.FIJI, 0x7300, 0xCB, VI, False, "Fiji", "AMD Radeon R9 Fury X"),
    DeviceRecord(AsicType.STONEY, 0x98E4, 0x80, VI, True, "Stoney", "AMD Radeon R4 Graphics"),
    DeviceRecord(AsicType.ELLESMERE, 0x67DF, 0xC7, VI, False, "Ellesmere", "Radeon RX 480"),
    DeviceRecord(AsicType.ELLESMERE, 0x67DF, 0xE7, VI, False, "Ellesmere", "Radeon RX 580 Series"),
    DeviceRecord(AsicType.BAFFIN, 0x67EF, 0xCF, VI, False, "Baffin", "Radeon RX 460"),
    DeviceRecord(AsicType.GFX8_0_4, 0x699F, 0xC7, VI, False, "gfx804", "Radeon 550 Series"),
    DeviceRecord(AsicType.VEGAM1, 0x694C, 0xC0, VI, False, "VegaM", "Radeon RX Vega M GH Graphics"),
    DeviceRecord(AsicType.VEGAM2, 0x694E, 0xC0, VI, False, "VegaM", "Radeon RX Vega M GL Graphics"),
    # GFX9
    DeviceRecord(AsicType.GFX9_0_0, 0x687F, 0xC1, HwGeneration.GFX9, False, "gfx900", "Radeon RX Vega"),
    DeviceRecord(AsicType.GFX9_0_0, 0x687F, 0xC3, HwGeneration.GFX9, False, "gfx900", "Radeon RX Vega"),
    DeviceRecord(AsicType.GFX9_0_2, 0x15DD, 0xC0, HwGeneration.GFX9, True, "gfx902", "AMD Radeon Vega 8 Graphics"),
    DeviceRecord(AsicType.GFX9_0_6, 0x66AF, 0xC1, HwGeneration.GFX9, False, "gfx906", "AMD Radeon VII"),
    DeviceRecord(AsicType.GFX9_0_8, 0x738C, 0x01, HwGeneration.GFX9, False, "gfx908", "AMD Instinct MI100"),
    DeviceRecord(AsicType.GFX9_0_9, 0x15D8, 0xC1, HwGeneration.GFX9, True, "gfx909", "AMD Radeon Vega 3 Graphics"),
    DeviceRecord(AsicType.GFX9_0_C, 0x1636, 0xC6, HwGeneration.GFX9, True, "gfx90c", "AMD Radeon Graphics"),
    # GFX10
    DeviceRecord(AsicType.GFX10_1_0, 0x731F, 0xC1, HwGeneration.GFX10, False, "gfx1010", "AMD Radeon RX 5700 XT"),
    DeviceRecord(AsicType.GFX10_1_0_XL, 0x731F, 0xC4, HwGeneration.GFX10, False, "gfx1010", "AMD Radeon RX 5700"),
    DeviceRecord(AsicType.GFX10_1_2, 0x7340, 0xC1, HwGeneration.GFX10, False, "gfx1012", "AMD Radeon RX 5500 XT"),
    DeviceRecord(AsicType.GFX10_1_1, 0x7360, 0xC3, HwGeneration.GFX10, False, "gfx1011", "AMD Radeon Pro 5600M"),
    # GFX10.3
    DeviceRecord(AsicType.GFX10_3_0, 0x73BF, 0xC0, HwGeneration.GFX103, False, "gfx1030", "AMD Radeon RX 6900 XT"),
    DeviceRecord(AsicType.GFX10_3_0, 0x73BF, 0xC1, HwGeneration.GFX103, False, "gfx1030", "AMD Radeon RX 6800 XT"),
    DeviceRecord(AsicType.GFX10_3_0, 0x73BF, 0xC3, HwGeneration.GFX103, False, "gfx1030", "AMD Radeon RX 6800"),
    DeviceRecord(AsicType.GFX10_3_1, 0x73DF, 0xC1, HwGeneration.GFX103, False, "gfx1031", "AMD Radeon RX 6700 XT"),
    DeviceRecord(AsicType.GFX10_3_2, 0x73FF, 0xC1, HwGeneration.GFX103, False, "gfx1032", "AMD Radeon RX 6600 XT"),
    # GFX11
    DeviceRecord(AsicType.GFX11_0_0, 0x744C, 0xC8, HwGeneration.GFX11, False, "gfx1100", "AMD Radeon RX 7900 XTX"),
    DeviceRecord(AsicType.GFX11_0_0, 0x744C, 0xCC, HwGeneration.GFX11, False, "gfx1100", "AMD Radeon RX 7900 XT"),
    DeviceRecord(AsicType.GFX11_0_1, 0x747E, 0xC8, HwGeneration.GFX11, False, "gfx1101", "AMD Radeon RX 7800 XT"),
    DeviceRecord(AsicType.GFX11_0_2, 0x7480, 0xC0, HwGeneration.GFX11, False, "gfx1102", "AMD Radeon RX 7600"),
    # GFX11.5
    DeviceRecord(AsicType.GFX11_5_0, 0x150E, 0xC1, HwGeneration.GFX115, True, "gfx1150", "AMD Radeon 890M"),
    # GFX12
    DeviceRecord(AsicType.GFX12_0_0, 0x7590, 0xC0, HwGeneration.GFX12, False, "gfx1200", "AMD Radeon RX 9060 XT"),
    DeviceRecord(AsicType.GFX12_0_1, 0x7550, 0xC0, HwGeneration.GFX12, False, "gfx1201", "AMD Radeon RX 9070 XT"),
    DeviceRecord(AsicType.GFX12_0_1, 0x7550, 0xC3, HwGeneration.GFX12, False, "gfx1201", "AMD Radeon RX 9070"),
]

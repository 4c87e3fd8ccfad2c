"""
Built-in per-ASIC device details.

Field order of _detail():
    shader engines, wave slots per SIMD, SU clocks per primitive,
    max SQ counters, primitive pipes, wave size,
    shader arrays per SE, CUs per shader array, SIMDs per CU
"""

from gpu_device_info.types import PLACEHOLDER_DETAIL, AsicType, DeviceDetail


def _detail(se, waves, su_clocks, sq_counters, prim_pipes, wave_size, sh, cu, simd):
    return DeviceDetail(
        num_shader_engines=se,
        max_waves_per_simd=waves,
        su_clocks_prim=su_clocks,
        num_sq_max_counters=sq_counters,
        num_prim_pipes=prim_pipes,
        wave_size=wave_size,
        num_sh_per_se=sh,
        num_cu_per_sh=cu,
        num_simd_per_cu=simd,
    )


DEVICE_DETAILS = {
    # Southern Islands
    AsicType.TAHITI_PRO: _detail(2, 10, 1, 8, 2, 64, 1, 14, 4),
    AsicType.TAHITI_XT: _detail(2, 10, 1, 8, 2, 64, 1, 16, 4),
    AsicType.PITCAIRN_PRO: _detail(2, 10, 1, 8, 2, 64, 1, 8, 4),
    AsicType.PITCAIRN_XT: _detail(2, 10, 1, 8, 2, 64, 1, 10, 4),
    AsicType.CAPEVERDE_PRO: _detail(1, 10, 1, 8, 1, 64, 2, 4, 4),
    AsicType.CAPEVERDE_XT: _detail(1, 10, 1, 8, 1, 64, 2, 5, 4),
    AsicType.OLAND: _detail(1, 10, 1, 8, 1, 64, 1, 6, 4),
    AsicType.HAINAN: _detail(1, 10, 1, 8, 1, 64, 1, 5, 4),
    # Sea Islands
    AsicType.BONAIRE: _detail(2, 10, 1, 8, 2, 64, 1, 7, 4),
    AsicType.HAWAII: _detail(4, 10, 1, 8, 4, 64, 1, 11, 4),
    AsicType.KALINDI: _detail(1, 10, 2, 8, 1, 64, 1, 2, 4),
    AsicType.SPECTRE: _detail(1, 10, 2, 8, 1, 64, 1, 8, 4),
    AsicType.SPECTRE_SL: _detail(1, 10, 2, 8, 1, 64, 1, 6, 4),
    AsicType.SPECTRE_LITE: _detail(1, 10, 2, 8, 1, 64, 1, 4, 4),
    AsicType.SPOOKY: _detail(1, 10, 2, 8, 1, 64, 1, 3, 4),
    # Volcanic Islands
    AsicType.ICELAND: _detail(1, 10, 1, 8, 1, 64, 1, 6, 4),
    AsicType.TONGA: _detail(4, 10, 1, 8, 4, 64, 1, 8, 4),
    AsicType.CARRIZO: _detail(1, 10, 1, 8, 1, 64, 1, 8, 4),
    AsicType.CARRIZO_EMB: _detail(1, 10, 1, 8, 1, 64, 1, 8, 4),
    AsicType.FIJI: _detail(4, 10, 1, 8, 4, 64, 1, 16, 4),
    AsicType.STONEY: _detail(1, 10, 1, 8, 1, 64, 1, 3, 4),
    AsicType.ELLESMERE: _detail(4, 10, 1, 8, 4, 64, 1, 9, 4),
    AsicType.BAFFIN: _detail(2, 10, 1, 8, 2, 64, 1, 8, 4),
    AsicType.GFX8_0_4: _detail(2, 10, 1, 8, 2, 64, 1, 5, 4),
    AsicType.VEGAM1: _detail(4, 10, 1, 8, 4, 64, 1, 6, 4),
    AsicType.VEGAM2: _detail(4, 10, 1, 8, 4, 64, 1, 5, 4),
    # GFX9
    AsicType.GFX9_0_0: _detail(4, 10, 1, 16, 4, 64, 1, 16, 4),
    AsicType.GFX9_0_2: _detail(1, 10, 1, 16, 1, 64, 1, 11, 4),
    AsicType.GFX9_0_6: _detail(4, 10, 1, 16, 4, 64, 1, 16, 4),
    AsicType.GFX9_0_8: _detail(8, 10, 1, 16, 4, 64, 1, 15, 4),
    AsicType.GFX9_0_9: _detail(1, 10, 1, 16, 1, 64, 1, 3, 4),
    AsicType.GFX9_0_C: _detail(1, 10, 1, 16, 1, 64, 1, 8, 4),
    # GFX10
    AsicType.GFX10_1_0: _detail(2, 20, 1, 16, 2, 32, 2, 10, 2),
    AsicType.GFX10_1_0_XL: _detail(2, 20, 1, 16, 2, 32, 2, 9, 2),
    AsicType.GFX10_1_2: _detail(1, 20, 1, 16, 1, 32, 2, 12, 2),
    AsicType.GFX10_1_1: _detail(2, 20, 1, 16, 2, 32, 2, 10, 2),
    # GFX10.3
    AsicType.GFX10_3_0: _detail(4, 16, 1, 16, 4, 32, 2, 10, 2),
    AsicType.GFX10_3_1: _detail(2, 16, 1, 16, 2, 32, 2, 10, 2),
    AsicType.GFX10_3_2: _detail(2, 16, 1, 16, 2, 32, 2, 8, 2),
    # GFX11
    AsicType.GFX11_0_0: _detail(6, 16, 1, 16, 6, 32, 2, 8, 2),
    AsicType.GFX11_0_1: _detail(3, 16, 1, 16, 3, 32, 2, 10, 2),
    AsicType.GFX11_0_2: _detail(2, 16, 1, 16, 2, 32, 2, 8, 2),
    # GFX11.5
    AsicType.GFX11_5_0: _detail(2, 16, 1, 16, 2, 32, 2, 4, 2),
    # GFX12
    AsicType.GFX12_0_0: _detail(2, 16, 1, 16, 2, 32, 2, 8, 2),
    AsicType.GFX12_0_1: _detail(4, 16, 1, 16, 4, 32, 2, 8, 2),
    # Reserved
    AsicType.PLACEHOLDER_1: PLACEHOLDER_DETAIL,
    AsicType.PLACEHOLDER_2: PLACEHOLDER_DETAIL,
}

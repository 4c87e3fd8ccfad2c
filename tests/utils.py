from gpu_device_info.types import AsicType, DeviceDetail, DeviceRecord, HwGeneration
import pytest


def make_record(
    device_id,
    revision_id=0,
    asic_type=AsicType.GFX11_0_0,
    generation=HwGeneration.GFX11,
    is_apu=False,
    cal_name="gfx1100",
    marketing_name="Test Board",
):
    return DeviceRecord(
        asic_type=asic_type,
        device_id=device_id,
        revision_id=revision_id,
        generation=generation,
        is_apu=is_apu,
        cal_name=cal_name,
        marketing_name=marketing_name,
    )


def make_detail(shader_engines=2, sh_per_se=2, cu_per_sh=10, valid=True):
    return DeviceDetail(
        num_shader_engines=shader_engines,
        max_waves_per_simd=16,
        su_clocks_prim=1,
        num_sq_max_counters=16,
        num_prim_pipes=shader_engines,
        wave_size=32,
        num_sh_per_se=sh_per_se,
        num_cu_per_sh=cu_per_sh,
        num_simd_per_cu=2,
        valid=valid,
    )


def match_boards(records, boards):
    """
    Check that records hold exactly the given (device_id, revision_id) pairs,
    in order. Fails with both lists printed, in hex, on mismatch.
    """

    actual = [(r.device_id, r.revision_id) for r in records]
    expected = list(boards)
    if actual != expected:
        format_board = lambda b: f"- {b[0]:#06x}:{b[1]:#04x}"
        pytest.fail(
            f"""
Boards differ.

Expected:

{chr(10).join(map(format_board, expected))}

Actual:

{chr(10).join(map(format_board, actual))}
""",
            pytrace=False,
        )


BOARD_A = make_record(0x1000, 0, marketing_name="Board A")
BOARD_B = make_record(
    0x1000, 1, asic_type=AsicType.GFX11_0_1, cal_name="gfx1101", marketing_name="Board B"
)
BOARD_C = make_record(
    0x2000,
    0,
    asic_type=AsicType.GFX10_3_0,
    generation=HwGeneration.GFX103,
    cal_name="gfx1030",
    marketing_name="Board C",
)
# Detail is a placeholder
BOARD_D = make_record(
    0x3000,
    0,
    asic_type=AsicType.PLACEHOLDER_1,
    generation=HwGeneration.GFX12,
    cal_name="gfx1299",
    marketing_name="Board D",
)
# No detail registered for this ASIC
BOARD_E = make_record(
    0x4000,
    0,
    asic_type=AsicType.GFX12_0_1,
    generation=HwGeneration.GFX12,
    is_apu=True,
    cal_name="gfx1201",
    marketing_name="Board E",
)

TEST_BOARDS = [BOARD_A, BOARD_B, BOARD_C, BOARD_D, BOARD_E]

DETAIL_A = make_detail(shader_engines=6, sh_per_se=2, cu_per_sh=8)
DETAIL_B = make_detail(shader_engines=3, sh_per_se=2, cu_per_sh=10)
DETAIL_C = make_detail(shader_engines=4, sh_per_se=2, cu_per_sh=10)

TEST_DETAILS = {
    AsicType.GFX11_0_0: DETAIL_A,
    AsicType.GFX11_0_1: DETAIL_B,
    AsicType.GFX10_3_0: DETAIL_C,
    AsicType.PLACEHOLDER_1: make_detail(valid=False),
}

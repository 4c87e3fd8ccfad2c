from gpu_device_info.catalog import create_default_catalog, lds_size_in_bytes
from gpu_device_info.data import CARD_INFO, DEVICE_DETAILS
from gpu_device_info.types import AsicType, HwGeneration, is_amd_generation
from .utils import make_record
import pytest

# Sanity checks of the built-in device table through the public queries.


@pytest.fixture(scope="module")
def catalog():
    return create_default_catalog()


def test_every_board_resolves_to_valid_detail(catalog):
    for record in CARD_INFO:
        detail = catalog.device_info(record.device_id, record.revision_id)
        assert detail is not None, record
        assert detail.valid
        assert detail == DEVICE_DETAILS[record.asic_type]


def test_every_asic_has_detail():
    for asic_type in AsicType:
        if asic_type is AsicType.NONE:
            continue
        assert asic_type in DEVICE_DETAILS, asic_type
        assert DEVICE_DETAILS[asic_type].valid == (not asic_type.name.startswith("PLACEHOLDER"))


def test_every_amd_generation_has_cards(catalog):
    for generation in HwGeneration:
        cards = catalog.all_cards_in_generation(generation)
        assert bool(cards) == is_amd_generation(generation), generation


def test_known_boards(catalog):
    xtx = catalog.device_info(0x744C, 0xC8)
    assert xtx.number_cus() == 96
    assert lds_size_in_bytes(HwGeneration.GFX11, xtx) == 96 * 65536
    assert catalog.card_info(0x744C, 0xCC).marketing_name == "AMD Radeon RX 7900 XT"
    assert catalog.hardware_generation(0x7550) is HwGeneration.GFX12
    assert catalog.is_gfx12_family("gfx1201") is True
    assert catalog.generation_display_name(catalog.hardware_generation("gfx1150")) == "RDNA3.5"


def test_revision_selects_asic(catalog):
    assert catalog.card_info(0x9874, 0xC4).asic_type is AsicType.CARRIZO
    assert catalog.card_info(0x9874, 0x81).asic_type is AsicType.CARRIZO_EMB
    assert catalog.device_info(0x731F, 0xC4).number_cus() == 36
    assert catalog.device_info(0x731F).number_cus() == 40


def test_shared_cal_name_resolves_first_registered(catalog):
    assert catalog.device_info_by_name("gfx1010") == DEVICE_DETAILS[AsicType.GFX10_1_0]


def test_driver_aliases(catalog):
    assert catalog.is_apu("gfx903") is True
    assert catalog.hardware_generation("gfx901") is HwGeneration.GFX9
    assert catalog.device_info_by_name("gfx907") == DEVICE_DETAILS[AsicType.GFX9_0_6]
    # gfx904 is not part of the built-in table
    assert catalog.hardware_generation("gfx905") is None


def test_apus(catalog):
    apus = [r.cal_name for r in catalog.all_cards() if r.is_apu]
    assert "gfx902" in apus
    assert "gfx1150" in apus
    assert catalog.is_apu(0x67DF) is False


def test_default_catalogs_are_independent():
    first = create_default_catalog()
    second = create_default_catalog(name_translator=str.lower)

    first.add_record(make_record(0xABCD, 0))
    first.remove_record(CARD_INFO[0])

    assert len(second) == len(CARD_INFO)
    assert second.card_info(0xABCD) is None
    assert second.card_info(CARD_INFO[0].device_id) == CARD_INFO[0]
    assert second.hardware_generation("GFX1100") is HwGeneration.GFX11
    assert first.hardware_generation("GFX1100") is None

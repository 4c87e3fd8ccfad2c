from gpu_device_info.catalog import (
    DeviceCatalog,
    generation_display_name,
    gfx_ip_ver_to_hw_generation,
    hw_generation_to_gfx_ip_ver,
    lds_size_in_bytes,
)
from gpu_device_info.types import (
    FIRST_AMD_GENERATION,
    LAST_AMD_GENERATION,
    HwGeneration,
    is_amd_generation,
)
from gpu_device_info.utils.print_utils import (
    reset_to_default_handler,
    set_global_handler,
)
from .utils import make_detail
import pytest

AMD_GENERATIONS = [g for g in HwGeneration if is_amd_generation(g)]
OTHER_GENERATIONS = [HwGeneration.NONE, HwGeneration.NVIDIA, HwGeneration.INTEL]


@pytest.fixture
def logged():
    messages = []

    def collect(level, name, message, *args, **kwargs):
        messages.append((level, message))

    set_global_handler(collect)
    yield messages
    reset_to_default_handler()


def test_amd_band():
    assert AMD_GENERATIONS[0] is FIRST_AMD_GENERATION is HwGeneration.SOUTHERN_ISLAND
    assert AMD_GENERATIONS[-1] is LAST_AMD_GENERATION is HwGeneration.GFX12
    assert len(AMD_GENERATIONS) == 9


@pytest.mark.parametrize(
    "generation, display_name",
    [
        (HwGeneration.SOUTHERN_ISLAND, "Graphics IP v6"),
        (HwGeneration.SEA_ISLAND, "Graphics IP v7"),
        (HwGeneration.VOLCANIC_ISLAND, "Graphics IP v8"),
        (HwGeneration.GFX9, "Vega"),
        (HwGeneration.GFX10, "RDNA"),
        (HwGeneration.GFX103, "RDNA2"),
        (HwGeneration.GFX11, "RDNA3"),
        (HwGeneration.GFX115, "RDNA3.5"),
        (HwGeneration.GFX12, "RDNA4"),
    ],
)
def test_generation_display_name(generation, display_name, logged):
    assert generation_display_name(generation) == display_name
    assert logged == []


def test_display_names_are_distinct():
    names = [generation_display_name(g) for g in AMD_GENERATIONS]
    assert len(set(names)) == len(names)


@pytest.mark.parametrize("generation", OTHER_GENERATIONS)
def test_generation_display_name_unsupported(generation, logged):
    with pytest.raises(AssertionError, match="not an AMD hardware generation"):
        generation_display_name(generation)
    assert [level for level, _ in logged] == ["ERROR"]


def test_catalog_display_name_unsupported(logged):
    catalog = DeviceCatalog()
    with pytest.raises(AssertionError):
        catalog.generation_display_name(HwGeneration.NVIDIA)
    assert [level for level, _ in logged] == ["ERROR"]


def test_lds_size():
    detail = make_detail(shader_engines=2, sh_per_se=2, cu_per_sh=10)
    assert detail.number_cus() == 40

    for generation in [
        HwGeneration.GFX9,
        HwGeneration.GFX10,
        HwGeneration.GFX103,
        HwGeneration.GFX11,
        HwGeneration.GFX115,
    ]:
        assert lds_size_in_bytes(generation, detail) == 40 * 65536

    assert lds_size_in_bytes(HwGeneration.GFX12, detail) == 40 * 163840


@pytest.mark.parametrize(
    "generation",
    [
        HwGeneration.SOUTHERN_ISLAND,
        HwGeneration.SEA_ISLAND,
        HwGeneration.VOLCANIC_ISLAND,
        *OTHER_GENERATIONS,
    ],
)
def test_lds_size_undefined_before_gfx9(generation):
    assert lds_size_in_bytes(generation, make_detail()) is None


def test_gfx_ip_version_known_values():
    assert hw_generation_to_gfx_ip_ver(HwGeneration.SOUTHERN_ISLAND) == 6
    assert hw_generation_to_gfx_ip_ver(HwGeneration.SEA_ISLAND) == 7
    assert hw_generation_to_gfx_ip_ver(HwGeneration.VOLCANIC_ISLAND) == 8
    assert hw_generation_to_gfx_ip_ver(HwGeneration.GFX9) == 9
    assert hw_generation_to_gfx_ip_ver(HwGeneration.GFX10) == 10
    assert gfx_ip_ver_to_hw_generation(6) is HwGeneration.SOUTHERN_ISLAND
    assert gfx_ip_ver_to_hw_generation(10) is HwGeneration.GFX10


def test_gfx_ip_version_round_trip():
    for gfx_ip_ver in range(0, 32):
        generation = gfx_ip_ver_to_hw_generation(gfx_ip_ver)
        if generation is not None:
            assert hw_generation_to_gfx_ip_ver(generation) == gfx_ip_ver

    for generation in AMD_GENERATIONS:
        assert gfx_ip_ver_to_hw_generation(hw_generation_to_gfx_ip_ver(generation)) is generation


@pytest.mark.parametrize("gfx_ip_ver", [0, 3, 5, 15, 100])
def test_gfx_ip_version_outside_band(gfx_ip_ver):
    assert gfx_ip_ver_to_hw_generation(gfx_ip_ver) is None


@pytest.mark.parametrize("generation", OTHER_GENERATIONS)
def test_generation_outside_band(generation):
    assert hw_generation_to_gfx_ip_ver(generation) is None

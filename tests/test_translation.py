from gpu_device_info.catalog import DEVICE_NAME_ALIASES, translate_device_name
import pytest


@pytest.mark.parametrize(
    "reported, expected",
    [
        ("gfx901", "gfx900"),
        ("gfx903", "gfx902"),
        ("gfx905", "gfx904"),
        ("gfx907", "gfx906"),
    ],
)
def test_builtin_aliases(reported, expected):
    assert translate_device_name(reported) == expected


@pytest.mark.parametrize("name", ["gfx900", "gfx902", "gfx904", "gfx906", "gfx1100", "Tonga", ""])
def test_canonical_names_unchanged(name):
    assert translate_device_name(name) == name


def test_translation_is_idempotent():
    for reported in DEVICE_NAME_ALIASES:
        once = translate_device_name(reported)
        assert translate_device_name(once) == once


def test_aliases_are_case_sensitive():
    assert translate_device_name("GFX901") == "GFX901"


def test_translator_sees_aliased_name():
    assert translate_device_name("gfx903", lambda name: name + "-apu") == "gfx902-apu"


def test_translator_can_override_alias():
    assert translate_device_name("gfx905", lambda name: "gfx905") == "gfx905"

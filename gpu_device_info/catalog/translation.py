"""
Device name translation.

Some drivers report a sibling codename for the same silicon (one digit off
from the name used in the device table). Name-based lookups translate the
reported name first so those devices still resolve.
"""

from typing import Callable, Optional


DeviceNameTranslator = Callable[[str], str]

# Reported name -> name exposed by the device table
DEVICE_NAME_ALIASES = {
    "gfx901": "gfx900",  # some gfx900 boards are identified as gfx901
    "gfx903": "gfx902",  # some gfx902 APUs are identified as gfx903
    "gfx905": "gfx904",
    "gfx907": "gfx906",
}


def translate_device_name(
    device_name: str, translator: Optional[DeviceNameTranslator] = None
) -> str:
    """
    Translate a reported device name to the name used in the device table.

    The built-in aliases always apply first; a translator, if given, then
    rewrites the result.

    Args:
        device_name: Device name reported by the runtime
        translator: Optional extra rewrite applied after the built-in aliases

    Returns:
        The device name as exposed by the device table

    Examples:
        >>> translate_device_name("gfx901")
        'gfx900'
        >>> translate_device_name("gfx1100")
        'gfx1100'
    """
    translated = DEVICE_NAME_ALIASES.get(device_name, device_name)

    if translator is not None:
        translated = translator(translated)

    return translated

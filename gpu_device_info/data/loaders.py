"""
Loaders turning plain mappings into device records and details.

Data curators often keep the device table in a serialized form; once parsed,
these helpers build the typed records the catalog indexes. Enum fields may be
given as members, integer values or member names.
"""

from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Type, Union

from dataclass_wizard import fromdict

from gpu_device_info.types import AsicType, DeviceDetail, DeviceRecord, HwGeneration

_ENUM_FIELDS = {
    "asic_type": AsicType,
    "asicType": AsicType,
    "generation": HwGeneration,
}


def to_enum(enum_class: Type[Enum], value: Union[Enum, int, str]) -> Enum:
    """
    Convert a member, value or member name to an enum member.

    Raises:
        ValueError: If the value names no member of enum_class
    """
    if isinstance(value, str):
        try:
            return enum_class[value.strip().upper()]
        except KeyError:
            raise ValueError(
                f"Unknown {enum_class.__name__} '{value}'. "
                f"Supported: {[member.name for member in enum_class]}"
            ) from None
    return enum_class(value)


def load_record(obj: Mapping[str, Any]) -> DeviceRecord:
    """Build one DeviceRecord from its fields."""
    fields = dict(obj)
    for key, enum_class in _ENUM_FIELDS.items():
        if key in fields:
            fields[key] = to_enum(enum_class, fields[key])
    return fromdict(DeviceRecord, fields)


def load_records(objs: Iterable[Mapping[str, Any]]) -> List[DeviceRecord]:
    """
    Build DeviceRecords from mappings, preserving their order.

    Args:
        objs: One mapping of DeviceRecord fields per record

    Returns:
        List of DeviceRecords
    """
    return [load_record(obj) for obj in objs]


def load_details(
    objs: Mapping[Union[AsicType, int, str], Mapping[str, Any]],
) -> Dict[AsicType, DeviceDetail]:
    """
    Build the ASIC type -> DeviceDetail table from mappings.

    Args:
        objs: ASIC type (member, value or name) -> DeviceDetail fields

    Returns:
        Dictionary of DeviceDetails keyed by AsicType
    """
    return {
        to_enum(AsicType, asic_type): fromdict(DeviceDetail, dict(detail))
        for asic_type, detail in objs.items()
    }

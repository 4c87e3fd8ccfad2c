"""
Device catalog.

An in-memory registry of device records, indexed five ways (device id, ASIC
type, CAL name, marketing name, generation) plus a per-ASIC detail table.

Every index keeps its records in insertion order. Single-entity queries
return the first match in that order, so records registered first win when
several share a key. Lookups never mutate the catalog; add/remove calls
must be serialized by the caller against each other and against queries.
"""

from collections import defaultdict
from typing import (
    Any,
    Dict,
    Hashable,
    Iterable,
    List,
    Mapping,
    Optional,
    Tuple,
    Union,
)

from gpu_device_info.catalog import generation as gen_utils
from gpu_device_info.catalog.translation import (
    DeviceNameTranslator,
    translate_device_name,
)
from gpu_device_info.data.loaders import load_details, load_records
from gpu_device_info.types import (
    REVISION_ID_ANY,
    AsicType,
    DeviceDetail,
    DeviceRecord,
    HwGeneration,
)
from gpu_device_info.utils.print_utils import get_logger

logger = get_logger(__name__)

DeviceKey = Union[str, int]
DetailTable = Union[Mapping[AsicType, DeviceDetail], Iterable[Tuple[AsicType, DeviceDetail]]]


class DeviceCatalog:
    """
    Multi-indexed registry of GPU device records.

    Attributes:
        name_translator: Optional rewrite applied to device names after the
            built-in aliases, before any name-based lookup

    Examples:
        >>> catalog = DeviceCatalog(records, details)
        >>> catalog.hardware_generation("gfx1100")
        <HwGeneration.GFX11: 9>
        >>> catalog.is_apu(0x744C)
        False
    """

    def __init__(
        self,
        records: Iterable[DeviceRecord] = (),
        details: Optional[DetailTable] = None,
        name_translator: Optional[DeviceNameTranslator] = None,
    ):
        """
        Build the catalog.

        Args:
            records: Card records, indexed in the given order
            details: ASIC type -> device detail, as a mapping or (asic, detail)
                pairs. Later entries for the same ASIC overwrite earlier ones
            name_translator: Optional device name rewrite, see
                set_device_name_translator
        """
        self.name_translator = name_translator

        self._cards: List[DeviceRecord] = []
        self._device_id_map: Dict[int, List[DeviceRecord]] = defaultdict(list)
        self._asic_type_map: Dict[AsicType, List[DeviceRecord]] = defaultdict(list)
        self._cal_name_map: Dict[str, List[DeviceRecord]] = defaultdict(list)
        self._marketing_name_map: Dict[str, List[DeviceRecord]] = defaultdict(list)
        self._generation_map: Dict[HwGeneration, List[DeviceRecord]] = defaultdict(list)
        self._details: Dict[AsicType, DeviceDetail] = {}

        for record in records:
            self._index(record)

        if details is not None:
            items = details.items() if isinstance(details, Mapping) else details
            for asic_type, detail in items:
                self._details[asic_type] = detail

        logger.debug(
            "Built device catalog: %d records, %d details", len(self._cards), len(self._details)
        )

    @classmethod
    def from_dicts(
        cls,
        records: Iterable[Mapping[str, Any]],
        details: Optional[Mapping[Any, Mapping[str, Any]]] = None,
        name_translator: Optional[DeviceNameTranslator] = None,
    ) -> "DeviceCatalog":
        """
        Build a catalog from plain mappings.

        Args:
            records: DeviceRecord fields per record
            details: ASIC type (member, value or name) -> DeviceDetail fields
            name_translator: Optional device name rewrite
        """
        return cls(
            load_records(records),
            load_details(details or {}),
            name_translator=name_translator,
        )

    # Mutation

    def _index(self, record: DeviceRecord):
        self._cards.append(record)
        self._device_id_map[record.device_id].append(record)
        self._asic_type_map[record.asic_type].append(record)
        self._cal_name_map[record.cal_name].append(record)
        self._marketing_name_map[record.marketing_name].append(record)
        self._generation_map[record.generation].append(record)

    def add_record(self, record: DeviceRecord):
        """
        Add a card record to every index.

        No de-duplication: adding the same record twice stores it twice.
        """
        self._index(record)
        logger.debug("Added device record %s", record)

    def add_detail(self, asic_type: AsicType, detail: DeviceDetail):
        """Add or replace the device detail of an ASIC."""
        self._details[asic_type] = detail

    def remove_record(self, record: DeviceRecord):
        """
        Remove one card record from every index.

        The first added record with the same device id and revision id leaves
        every index. The generation index instead drops the first record of
        the same board stored under the given record's generation. When
        duplicates were added the others stay registered.
        """
        stored = next(
            (r for r in self._device_id_map.get(record.device_id, ()) if r.same_board(record)),
            None,
        )
        if stored is None:
            return

        _remove_instance(self._cards, stored)
        _remove_from_index(self._device_id_map, stored.device_id, stored)
        _remove_from_index(self._asic_type_map, stored.asic_type, stored)
        _remove_from_index(self._cal_name_map, stored.cal_name, stored)
        _remove_from_index(self._marketing_name_map, stored.marketing_name, stored)
        # Keyed by the given generation: another duplicate may go when it differs
        _remove_first_in_bucket(self._generation_map, record.generation, record)
        logger.debug("Removed device record %s", stored)

    def set_device_name_translator(self, translator: Optional[DeviceNameTranslator]):
        """
        Install the device name translator, replacing any previous one.

        Pass None to keep only the built-in aliases. Not safe against
        concurrent lookups on the same catalog.
        """
        self.name_translator = translator

    def translate_device_name(self, device_name: str) -> str:
        """Apply the built-in aliases, then this catalog's translator."""
        return translate_device_name(device_name, self.name_translator)

    # Single-entity queries

    def _first_by_key(self, device: DeviceKey) -> Optional[DeviceRecord]:
        if isinstance(device, str):
            matches = self._cal_name_map.get(self.translate_device_name(device))
        else:
            matches = self._device_id_map.get(device)
        return matches[0] if matches else None

    def _valid_detail(self, asic_type: AsicType) -> Optional[DeviceDetail]:
        detail = self._details.get(asic_type)
        if detail is None:
            logger.debug("No device detail registered for %r", asic_type)
            return None
        if not detail.valid:
            logger.debug("Device detail for %r is a placeholder", asic_type)
            return None
        return detail

    def device_info(
        self, device_id: int, revision_id: int = REVISION_ID_ANY
    ) -> Optional[DeviceDetail]:
        """
        Get the device detail of a board.

        Args:
            device_id: PCI device id
            revision_id: Revision id, or REVISION_ID_ANY to accept any revision

        Returns:
            The detail of the first matching record whose ASIC has a valid
            detail, None otherwise
        """
        for record in self._device_id_map.get(device_id, ()):
            if revision_id != REVISION_ID_ANY and record.revision_id != revision_id:
                continue
            detail = self._valid_detail(record.asic_type)
            if detail is not None:
                return detail
        return None

    def device_info_by_name(self, cal_name: str) -> Optional[DeviceDetail]:
        """
        Get the device detail for a CAL device name.

        When several ASICs share a CAL name, only the first registered one is
        considered, so the result may not describe every board with that name.
        """
        record = self._first_by_key(cal_name)
        if record is None:
            return None
        return self._valid_detail(record.asic_type)

    def card_info(
        self, device_id: int, revision_id: int = REVISION_ID_ANY
    ) -> Optional[DeviceRecord]:
        """Get the first card record matching a device id and revision id."""
        for record in self._device_id_map.get(device_id, ()):
            if revision_id == REVISION_ID_ANY or record.revision_id == revision_id:
                return record
        return None

    def is_apu(self, device: DeviceKey) -> Optional[bool]:
        """
        Check whether a device is an APU.

        Args:
            device: CAL device name or PCI device id

        Returns:
            The APU flag of the first matching record, None if unknown
        """
        record = self._first_by_key(device)
        return record.is_apu if record is not None else None

    def hardware_generation(self, device: DeviceKey) -> Optional[HwGeneration]:
        """Get the hardware generation of a CAL device name or PCI device id."""
        # All revisions of a device id share one generation
        record = self._first_by_key(device)
        return record.generation if record is not None else None

    def is_family(self, device: DeviceKey, generation: HwGeneration) -> Optional[bool]:
        """
        Check whether a device belongs to a hardware generation.

        Returns:
            None if the device is unknown, otherwise whether its generation
            equals the given one
        """
        device_generation = self.hardware_generation(device)
        if device_generation is None:
            return None
        return device_generation == generation

    def is_gfx12_family(self, device: DeviceKey) -> Optional[bool]:
        return self.is_family(device, HwGeneration.GFX12)

    def is_gfx115_family(self, device: DeviceKey) -> Optional[bool]:
        return self.is_family(device, HwGeneration.GFX115)

    def is_gfx11_family(self, device: DeviceKey) -> Optional[bool]:
        return self.is_family(device, HwGeneration.GFX11)

    def is_gfx10_family(self, device: DeviceKey) -> Optional[bool]:
        return self.is_family(device, HwGeneration.GFX10)

    def is_gfx9_family(self, device: DeviceKey) -> Optional[bool]:
        return self.is_family(device, HwGeneration.GFX9)

    def is_vi_family(self, device: DeviceKey) -> Optional[bool]:
        return self.is_family(device, HwGeneration.VOLCANIC_ISLAND)

    def is_ci_family(self, device: DeviceKey) -> Optional[bool]:
        return self.is_family(device, HwGeneration.SEA_ISLAND)

    def is_si_family(self, device: DeviceKey) -> Optional[bool]:
        return self.is_family(device, HwGeneration.SOUTHERN_ISLAND)

    # List queries

    def cards_with_name(self, device_name: str) -> List[DeviceRecord]:
        """
        Get all card records for a device name.

        The name is translated, then matched against the marketing name of
        each record, not the CAL name. Existing callers depend on this, use
        cards_with_marketing_name to skip the translation.
        """
        return list(self._marketing_name_map.get(self.translate_device_name(device_name), ()))

    def all_cards_with_name(self, device_name: str) -> List[DeviceRecord]:
        """Alias of cards_with_name."""
        return self.cards_with_name(device_name)

    def cards_with_marketing_name(self, marketing_name: str) -> List[DeviceRecord]:
        """Get all card records with exactly this marketing name."""
        return list(self._marketing_name_map.get(marketing_name, ()))

    def all_cards(self) -> List[DeviceRecord]:
        """Get every card record in insertion order."""
        return list(self._cards)

    def all_cards_in_generation(self, generation: HwGeneration) -> List[DeviceRecord]:
        return list(self._generation_map.get(generation, ()))

    def all_cards_with_device_id(self, device_id: int) -> List[DeviceRecord]:
        return list(self._device_id_map.get(device_id, ()))

    def all_cards_with_asic_type(self, asic_type: AsicType) -> List[DeviceRecord]:
        return list(self._asic_type_map.get(asic_type, ()))

    # Generation helpers

    def generation_display_name(self, generation: HwGeneration) -> str:
        return gen_utils.generation_display_name(generation)

    def lds_size_in_bytes(
        self, generation: HwGeneration, detail: DeviceDetail
    ) -> Optional[int]:
        return gen_utils.lds_size_in_bytes(generation, detail)

    def gfx_ip_ver_to_hw_generation(self, gfx_ip_ver: int) -> Optional[HwGeneration]:
        return gen_utils.gfx_ip_ver_to_hw_generation(gfx_ip_ver)

    def hw_generation_to_gfx_ip_ver(self, generation: HwGeneration) -> Optional[int]:
        return gen_utils.hw_generation_to_gfx_ip_ver(generation)

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"DeviceCatalog(records={len(self._cards)}, details={len(self._details)})"


def _remove_instance(records: List[DeviceRecord], record: DeviceRecord) -> bool:
    for i, stored in enumerate(records):
        if stored is record:
            del records[i]
            return True
    return False


def _drop_if_empty(index: Dict[Hashable, List[DeviceRecord]], key: Hashable):
    if key in index and not index[key]:
        del index[key]


def _remove_from_index(
    index: Dict[Hashable, List[DeviceRecord]], key: Hashable, record: DeviceRecord
):
    """Remove this exact record from the bucket of key, dropping the bucket once empty."""
    if _remove_instance(index.get(key, []), record):
        _drop_if_empty(index, key)


def _remove_first_in_bucket(
    index: Dict[Hashable, List[DeviceRecord]], key: Hashable, record: DeviceRecord
):
    """Remove the first record of the same board from the bucket of key."""
    bucket = index.get(key, [])
    for i, stored in enumerate(bucket):
        if stored.same_board(record):
            del bucket[i]
            _drop_if_empty(index, key)
            return

"""
Device record and device detail types.

Both are immutable: the catalog hands the same instances out of several
indexes, so callers must never be able to change one through another.
"""

from dataclasses import dataclass
from typing import Any, Dict

from dataclass_wizard import asdict, fromdict

from gpu_device_info.types.enums import AsicType, HwGeneration


@dataclass(frozen=True)
class DeviceRecord:
    """
    One board SKU as reported by the platform.

    Attributes:
        asic_type: Silicon design, also the key into the device detail table
        device_id: PCI device id (shared by several revisions/boards)
        revision_id: Stepping; together with device_id identifies one SKU
        generation: Architecture family
        is_apu: True when the graphics core is integrated into a CPU package
        cal_name: Canonical, driver-facing device name ("gfx1100", "Tonga")
        marketing_name: Public product name ("AMD Radeon RX 7900 XTX")
    """

    asic_type: AsicType
    device_id: int
    revision_id: int
    generation: HwGeneration
    is_apu: bool
    cal_name: str
    marketing_name: str

    def same_board(self, other: "DeviceRecord") -> bool:
        """True when both records describe the same (device id, revision id) pair."""
        return (
            self.device_id == other.device_id
            and self.revision_id == other.revision_id
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> "DeviceRecord":
        return fromdict(cls, obj)

    def __str__(self) -> str:
        return (
            f"{self.marketing_name} "
            f"[{self.device_id:#06x}:{self.revision_id:#04x}, {self.cal_name}]"
        )


@dataclass(frozen=True)
class DeviceDetail:
    """
    Shader hierarchy description of one ASIC.

    Totals are derived from the per-level counts and never stored.

    Attributes:
        num_shader_engines: Number of shader engines
        max_waves_per_simd: Number of wave slots per SIMD
        su_clocks_prim: Clocks it takes to process a primitive
        num_sq_max_counters: Max number of SQ counters
        num_prim_pipes: Number of primitive pipes
        wave_size: Wavefront width
        num_sh_per_se: Shader arrays per shader engine
        num_cu_per_sh: Compute units per shader array
        num_simd_per_cu: SIMDs per compute unit
        valid: False for placeholder entries that reserve a slot
    """

    num_shader_engines: int
    max_waves_per_simd: int
    su_clocks_prim: int
    num_sq_max_counters: int
    num_prim_pipes: int
    wave_size: int
    num_sh_per_se: int
    num_cu_per_sh: int
    num_simd_per_cu: int
    valid: bool = True

    def number_shs(self) -> int:
        """Total number of shader arrays."""
        return self.num_sh_per_se * self.num_shader_engines

    def number_cus(self) -> int:
        """Total number of compute units."""
        return self.number_shs() * self.num_cu_per_sh

    def number_simds(self) -> int:
        """Total number of SIMDs."""
        return self.num_simd_per_cu * self.number_cus()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> "DeviceDetail":
        return fromdict(cls, obj)


# Filler for reserved ASIC slots
PLACEHOLDER_DETAIL = DeviceDetail(0, 0, 0, 0, 0, 0, 0, 0, 0, valid=False)

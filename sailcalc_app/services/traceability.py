"""
Calculation traceability: inputs snapshot, outputs, timestamp.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict

from ..models import Boat
from .design_ratios import Ratios


@dataclass(slots=True)
class CalculationSnapshot:
    """Traceability snapshot for one ratio calculation."""
    timestamp: datetime
    boat_name: str
    inputs: Dict[str, Any] = field(default_factory=dict)
    outputs: Dict[str, Any] = field(default_factory=dict)
    dl_table: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "timestamp": self.timestamp.isoformat(),
            "boat_name": self.boat_name,
            "inputs": self.inputs,
            "outputs": self.outputs,
            "dl_table": self.dl_table,
        }


def create_snapshot(boat: Boat, ratios: Ratios) -> CalculationSnapshot:
    """Build a traceability snapshot from a boat and the ratios computed for it."""
    inputs = {
        "loa_m": boat.loa.to_meter(),
        "dwl_m": boat.dwl.to_meter(),
        "b_max_m": boat.b_max.to_meter(),
        "displacement_kg": boat.displacement.to_kilogram(),
        "sail_area_m2": boat.sail_area.to_meter2(),
    }
    outputs = {
        "length_beam": {"value": ratios.length_beam.value, "category": ratios.length_beam.label},
        "displacement_length": {
            "value": ratios.displacement_length.value,
            "category": ratios.displacement_length.label,
        },
        "sail_area_displacement": {
            "value": ratios.sail_area_displacement.value,
            "category": ratios.sail_area_displacement.label,
        },
    }
    return CalculationSnapshot(
        timestamp=datetime.now(timezone.utc),
        boat_name=boat.name,
        inputs=inputs,
        outputs=outputs,
        dl_table=ratios.displacement_length.table,
    )

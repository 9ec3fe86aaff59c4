"""
Dental chart models.

A chart maps FDI tooth codes to an append-only tuple of treatment events.
The current status of a tooth is the status of its most recent event.
Charts are immutable: appending returns a new chart that shares every
untouched tooth history with the original.
"""

from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ..enums import ToothStatus
from ...utils.date import ClinicClock
from ...utils.ids import new_id

# Quadrant digit 1-4 followed by position digit 1-8
FDI_TOOTH_CODES = frozenset(q * 10 + p for q in range(1, 5) for p in range(1, 9))

# Display order, patient's right to left
UPPER_ARCH = (18, 17, 16, 15, 14, 13, 12, 11, 21, 22, 23, 24, 25, 26, 27, 28)
LOWER_ARCH = (48, 47, 46, 45, 44, 43, 42, 41, 31, 32, 33, 34, 35, 36, 37, 38)


def is_valid_tooth(tooth_id: Any) -> bool:
    """Check whether a value is one of the 32 permanent-tooth FDI codes."""
    if isinstance(tooth_id, str) and tooth_id.strip().isdigit():
        tooth_id = int(tooth_id.strip())
    if not isinstance(tooth_id, int) or isinstance(tooth_id, bool):
        return False
    return tooth_id in FDI_TOOTH_CODES


class ToothEvent(BaseModel):
    """A single treatment entry in a tooth's history."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    status: ToothStatus
    note: str = ""
    date: str


class DentalChart(BaseModel):
    """Per-tooth treatment history for one patient."""

    model_config = ConfigDict(frozen=True)

    # Read-only view; every change goes through append()
    teeth: Dict[int, Tuple[ToothEvent, ...]] = Field(default_factory=dict, validate_default=True)

    @field_validator("teeth", mode="after")
    @classmethod
    def freeze_teeth(cls, teeth: Dict[int, Tuple[ToothEvent, ...]]) -> Mapping[int, Tuple[ToothEvent, ...]]:
        return MappingProxyType(dict(teeth))

    @field_serializer("teeth")
    def dump_teeth(self, teeth: Mapping[int, Tuple[ToothEvent, ...]]) -> Dict[int, Tuple[ToothEvent, ...]]:
        return dict(teeth)

    def __deepcopy__(self, memo: Optional[Dict[int, Any]] = None) -> "DentalChart":
        return self

    def history(self, tooth_id: int) -> Tuple[ToothEvent, ...]:
        """All events recorded for a tooth, oldest first."""
        return self.teeth.get(tooth_id, ())

    def current_status(self, tooth_id: int) -> ToothStatus:
        """Status of the latest event, or Healthy when nothing is recorded."""
        events = self.teeth.get(tooth_id)
        if not events:
            return ToothStatus.HEALTHY
        return events[-1].status

    def append(
        self,
        tooth_id: int,
        status: ToothStatus,
        note: str = "",
        *,
        on: Optional[str] = None,
    ) -> "DentalChart":
        """
        Return a new chart with one event appended to ``tooth_id``.

        Args:
            tooth_id: FDI tooth code (not validated here)
            status: Status recorded by this event
            note: Free-text clinical note
            on: Event date as YYYY-MM-DD; defaults to today in the clinic timezone

        Returns:
            New DentalChart; this chart is left untouched
        """
        event = ToothEvent(
            id=new_id(),
            status=ToothStatus(status),
            note=note or "",
            date=on or ClinicClock().today_key(),
        )
        teeth = dict(self.teeth)
        teeth[tooth_id] = self.teeth.get(tooth_id, ()) + (event,)
        return self.model_copy(update={"teeth": MappingProxyType(teeth)})

    def recorded_teeth(self) -> List[int]:
        """Tooth codes that have at least one event."""
        return sorted(tooth for tooth, events in self.teeth.items() if events)

    def status_summary(self) -> Dict[int, ToothStatus]:
        """Current status of every tooth on the chart."""
        return {tooth: self.current_status(tooth) for tooth in sorted(FDI_TOOTH_CODES)}

    def event_count(self) -> int:
        """Number of events recorded across all teeth."""
        return sum(len(events) for events in self.teeth.values())

    def to_storage(self) -> Dict[str, List[Dict[str, Any]]]:
        """Serialize as a JSON object keyed by tooth code."""
        return {
            str(tooth): [event.model_dump(mode="json") for event in events]
            for tooth, events in self.teeth.items()
        }

    @classmethod
    def from_storage(cls, data: Optional[Dict[str, Any]]) -> "DentalChart":
        """Rebuild a chart from :meth:`to_storage` output."""
        return cls(
            teeth={
                int(tooth): tuple(ToothEvent(**event) for event in events or [])
                for tooth, events in (data or {}).items()
            }
        )


def append_event(
    chart: DentalChart,
    tooth_id: int,
    status: ToothStatus,
    note: str = "",
    *,
    on: Optional[str] = None,
) -> DentalChart:
    """Append a treatment event to a tooth, returning the new chart."""
    return chart.append(tooth_id, status, note, on=on)


def current_status(chart: DentalChart, tooth_id: int) -> ToothStatus:
    """Current status of a tooth on the chart."""
    return chart.current_status(tooth_id)

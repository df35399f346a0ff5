"""Filter state domain model."""

from dataclasses import dataclass
from enum import Enum

from vibrovolt.domain.models.station import VehicleCategory


class StationCategory(str, Enum):
    """Category chips shown above the station list."""

    ALL = "all"
    FAST = "fast"
    AVAILABLE = "available"
    ON_DEMAND = "ondemand"

    @classmethod
    def parse(cls, value: str) -> "StationCategory":
        """Parse a category id, accepting the hyphenated aliases."""
        normalized = value.strip().lower()
        aliases = {"fast-dc": cls.FAST, "on-demand": cls.ON_DEMAND}
        if normalized in aliases:
            return aliases[normalized]
        try:
            return cls(normalized)
        except ValueError:
            valid = ", ".join(c.value for c in cls)
            raise ValueError(f"Unknown station category '{value}' (expected one of: {valid})") from None


def parse_vehicle(value: str | None) -> VehicleCategory | None:
    """Parse a vehicle category id; ``None`` and "all" mean no vehicle filter."""
    if value is None or value.strip().lower() in ("", "all"):
        return None
    for vehicle in VehicleCategory:
        if vehicle.value.lower() == value.strip().lower():
            return vehicle
    valid = ", ".join(v.value for v in VehicleCategory)
    raise ValueError(f"Unknown vehicle category '{value}' (expected All or one of: {valid})")


@dataclass(frozen=True)
class FilterState:
    """Current search/filter selection of the discovery screen."""

    query: str = ""
    category: StationCategory = StationCategory.ALL
    vehicle: VehicleCategory | None = None  # None means all vehicles

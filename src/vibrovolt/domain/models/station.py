"""Station domain model."""

from dataclasses import dataclass, field
from enum import Enum


class VehicleCategory(str, Enum):
    """Vehicle classes a charging station can serve."""

    TWO_WHEELER = "2W"
    THREE_WHEELER = "3W"
    CAR = "Car"
    SUV = "SUV"
    TRUCK = "Truck"
    BUS = "Bus"


@dataclass(frozen=True)
class Station:
    """Represents a charging station as returned by the station service."""

    id: str
    name: str
    address: str
    distance: str
    rating: float
    type: str  # connector type label, e.g. "DC Fast", "AC Standard"
    price: float  # price per kWh
    available: int
    total: int
    on_demand: bool
    supported_vehicles: frozenset[VehicleCategory] = field(default_factory=frozenset)
    latitude: float | None = None
    longitude: float | None = None
    city: str | None = None

    @property
    def is_available(self) -> bool:
        """Whether at least one connector is free."""
        return self.available > 0

    def supports(self, vehicle: VehicleCategory) -> bool:
        """Whether the station lists the given vehicle category."""
        return vehicle in self.supported_vehicles

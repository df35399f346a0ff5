"""Request and response schemas shared by the RPC backend and its clients."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from vibrovolt.domain.models.station import Station, VehicleCategory

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
MOCK_TOKEN = "mock-jwt-token"


class RpcModel(BaseModel):
    """Base model: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class NearbyStationsInput(RpcModel):
    lat: float | None = None
    lng: float | None = None
    radius: float = 10


class StationStatusInput(RpcModel):
    station_id: str


class AddFundsInput(RpcModel):
    amount: int = Field(ge=100, le=10000)
    payment_method: str


class RedeemCreditsInput(RpcModel):
    partner_id: str
    credits: int = Field(gt=0)


class SlotBookingInput(RpcModel):
    station_id: str
    date: str
    time_slot: str
    vehicle_type: str
    duration: float


class ChargingSessionInput(RpcModel):
    session_id: str


class StartChargingInput(RpcModel):
    station_id: str
    connector_id: str


class LoginInput(RpcModel):
    email: str = Field(pattern=EMAIL_PATTERN)
    password: str = Field(min_length=6)


class UpdateProfileInput(RpcModel):
    name: str = Field(min_length=2)
    email: str = Field(pattern=EMAIL_PATTERN)
    phone: str = Field(min_length=10)


class RegisterInput(UpdateProfileInput):
    password: str = Field(min_length=6)


class EmergencyLocation(RpcModel):
    lat: float
    lng: float
    address: str


class EmergencyRequestInput(RpcModel):
    type: Literal["sos", "mobile_charger", "towing"]
    location: EmergencyLocation
    description: str | None = None


class StationOut(RpcModel):
    """Wire representation of a station."""

    id: str
    name: str
    address: str
    distance: str
    rating: float
    type: str
    price: float
    available: int
    total: int
    on_demand: bool
    supported_vehicles: list[VehicleCategory] | None = None
    lat: float | None = None
    lng: float | None = None
    city: str | None = None

    @classmethod
    def from_domain(cls, station: Station) -> StationOut:
        order = list(VehicleCategory)
        return cls(
            id=station.id,
            name=station.name,
            address=station.address,
            distance=station.distance,
            rating=station.rating,
            type=station.type,
            price=station.price,
            available=station.available,
            total=station.total,
            on_demand=station.on_demand,
            supported_vehicles=sorted(station.supported_vehicles, key=order.index),
            lat=station.latitude,
            lng=station.longitude,
            city=station.city,
        )

    def to_domain(self) -> Station:
        return Station(
            id=self.id,
            name=self.name,
            address=self.address,
            distance=self.distance,
            rating=self.rating,
            type=self.type,
            price=self.price,
            available=self.available,
            total=self.total,
            on_demand=self.on_demand,
            supported_vehicles=frozenset(self.supported_vehicles or ()),
            latitude=self.lat,
            longitude=self.lng,
            city=self.city,
        )


class AddFundsOut(RpcModel):
    success: bool = True
    transaction_id: str
    amount: int
    payment_method: str
    new_balance: int

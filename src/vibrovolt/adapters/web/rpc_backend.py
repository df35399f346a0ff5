"""Mock RPC procedures grouped by router, e.g. ``stations.nearby`` or ``wallet.addFunds``."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import asdict, dataclass
from typing import Any, Literal

from pydantic import BaseModel

from vibrovolt.adapters.rpc_schemas import (
    MOCK_TOKEN,
    AddFundsInput,
    AddFundsOut,
    ChargingSessionInput,
    EmergencyRequestInput,
    LoginInput,
    NearbyStationsInput,
    RedeemCreditsInput,
    RegisterInput,
    SlotBookingInput,
    StartChargingInput,
    StationOut,
    StationStatusInput,
    UpdateProfileInput,
)
from vibrovolt.adapters.sample_data.telemetry import EMERGENCY_CONTACT_NUMBER, PlaceholderTelemetry
from vibrovolt.adapters.sample_data.wallet import LOYALTY_POINTS
from vibrovolt.application.context import AppContext
from vibrovolt.application.services.auth_session import check_credentials
from vibrovolt.application.services.wallet_ledger import serialize_transaction

logger = logging.getLogger(__name__)

BOOKING_PRICE_PER_HOUR = 15
DEMO_USER_ID = "1"


@dataclass(frozen=True)
class Procedure:
    """A callable RPC endpoint with its input schema."""

    name: str
    kind: Literal["query", "mutation"]
    handler: Callable[[Any], Awaitable[Any]]
    input_model: type[BaseModel] | None = None

    @property
    def http_method(self) -> str:
        return "GET" if self.kind == "query" else "POST"


class ProcedureNotFoundError(LookupError):
    """No procedure is registered under the requested name."""


class RpcBackend:
    """Dispatches procedure calls to the application context and placeholder telemetry."""

    def __init__(self, context: AppContext, telemetry: PlaceholderTelemetry) -> None:
        self.context = context
        self.telemetry = telemetry
        self.procedures: dict[str, Procedure] = {p.name: p for p in self._build_procedures()}

    def _build_procedures(self) -> list[Procedure]:
        return [
            Procedure("stations.nearby", "query", self.stations_nearby, NearbyStationsInput),
            Procedure("stations.status", "query", self.stations_status, StationStatusInput),
            Procedure("wallet.get", "query", self.wallet_get),
            Procedure("wallet.partners", "query", self.wallet_partners),
            Procedure("wallet.addFunds", "mutation", self.wallet_add_funds, AddFundsInput),
            Procedure("wallet.redeem", "mutation", self.wallet_redeem, RedeemCreditsInput),
            Procedure("booking.slot", "mutation", self.booking_slot, SlotBookingInput),
            Procedure("charging.session", "query", self.charging_session, ChargingSessionInput),
            Procedure("charging.start", "mutation", self.charging_start, StartChargingInput),
            Procedure("charging.stop", "mutation", self.charging_stop),
            Procedure("charging.overview", "query", self.charging_overview),
            Procedure("auth.login", "mutation", self.auth_login, LoginInput),
            Procedure("auth.register", "mutation", self.auth_register, RegisterInput),
            Procedure("profile.update", "mutation", self.profile_update, UpdateProfileInput),
            Procedure("emergency.request", "mutation", self.emergency_request, EmergencyRequestInput),
        ]

    def get(self, name: str) -> Procedure:
        try:
            return self.procedures[name]
        except KeyError:
            raise ProcedureNotFoundError(f"No procedure named '{name}'") from None

    async def call(self, name: str, raw_input: Any = None) -> Any:
        """Validate ``raw_input`` against the procedure schema and run it.

        Raises:
            ProcedureNotFoundError: If ``name`` is not registered.
            pydantic.ValidationError: If the input does not match the schema.
            VibrovoltError: If the procedure itself fails.
        """
        procedure = self.get(name)
        if procedure.input_model is None:
            return await procedure.handler(None)
        parsed = procedure.input_model.model_validate(raw_input or {})
        return await procedure.handler(parsed)

    # stations

    async def stations_nearby(self, params: NearbyStationsInput) -> list[dict[str, Any]]:
        # Position and radius are accepted but not applied by the mock.
        logger.debug(f"stations.nearby at ({params.lat}, {params.lng}) radius {params.radius}")
        stations = await self.context.station_repository.fetch()
        return [StationOut.from_domain(s).model_dump(by_alias=True, mode="json") for s in stations]

    async def stations_status(self, params: StationStatusInput) -> dict[str, Any]:
        return self.telemetry.station_status(params.station_id)

    # wallet

    async def wallet_get(self, _params: None) -> dict[str, Any]:
        return {**self.context.wallet.snapshot(), "loyaltyPoints": LOYALTY_POINTS}

    async def wallet_partners(self, _params: None) -> list[dict[str, Any]]:
        return [
            {"id": p.id, "name": p.name, "category": p.category.value, "minCredits": p.min_credits}
            for p in self.context.wallet.partners
        ]

    async def wallet_add_funds(self, params: AddFundsInput) -> dict[str, Any]:
        confirmation = await self.context.wallet.add_funds(params.amount, params.payment_method)
        return AddFundsOut(
            transaction_id=confirmation.transaction_id,
            amount=confirmation.amount,
            payment_method=confirmation.payment_method,
            new_balance=self.context.wallet.balance,
        ).model_dump(by_alias=True)

    async def wallet_redeem(self, params: RedeemCreditsInput) -> dict[str, Any]:
        result = self.context.wallet.redeem_credits(params.partner_id, params.credits)
        transaction = None
        if result.transaction is not None:
            transaction = serialize_transaction(result.transaction)
        return {
            "ok": result.ok,
            "error": result.error.value if result.error else None,
            "message": result.message,
            "transaction": transaction,
            "carbonCredits": self.context.wallet.carbon_credits,
        }

    # booking

    async def booking_slot(self, params: SlotBookingInput) -> dict[str, Any]:
        self.telemetry.check_slot_available(params.station_id, params.time_slot)
        return {
            "success": True,
            "bookingId": self.telemetry.new_id(),
            "stationId": params.station_id,
            "date": params.date,
            "timeSlot": params.time_slot,
            "vehicleType": params.vehicle_type,
            "duration": params.duration,
            "estimatedCost": params.duration * BOOKING_PRICE_PER_HOUR,
            "status": "confirmed",
        }

    # charging

    async def charging_session(self, params: ChargingSessionInput) -> dict[str, Any]:
        return self.telemetry.charging_session(params.session_id)

    async def charging_start(self, params: StartChargingInput) -> dict[str, Any]:
        stations = await self.context.station_repository.fetch()
        station_name = next((s.name for s in stations if s.id == params.station_id), params.station_id)
        session = self.context.charging.start_session(station_name)
        return {
            "success": True,
            "sessionId": session.id,
            "stationId": params.station_id,
            "connectorId": params.connector_id,
            "startTime": session.start_time.isoformat(),
            "status": "initializing",
        }

    async def charging_stop(self, _params: None) -> dict[str, Any]:
        self.context.charging.stop_session()
        return {"success": True}

    async def charging_overview(self, _params: None) -> dict[str, Any]:
        tracker = self.context.charging
        active = tracker.active_session
        active_out = None
        if active is not None:
            active_out = {
                "id": active.id,
                "station": active.station,
                "battery": active.battery,
                "power": active.power,
                "duration": active.duration,
                "startTime": active.start_time.isoformat(),
            }
        return {
            "activeSession": active_out,
            "upcomingBookings": [asdict(b) for b in tracker.upcoming_bookings],
            "history": [asdict(h) for h in tracker.history],
        }

    # auth and profile

    async def auth_login(self, params: LoginInput) -> dict[str, Any]:
        user = check_credentials(params.email, params.password)
        return {"success": True, "user": asdict(user), "token": MOCK_TOKEN}

    async def auth_register(self, params: RegisterInput) -> dict[str, Any]:
        return {
            "success": True,
            "user": {
                "id": self.telemetry.new_id(),
                "name": params.name,
                "email": params.email,
                "phone": params.phone,
            },
            "token": MOCK_TOKEN,
        }

    async def profile_update(self, params: UpdateProfileInput) -> dict[str, Any]:
        return {
            "success": True,
            "user": {
                "id": DEMO_USER_ID,
                "name": params.name,
                "email": params.email,
                "phone": params.phone,
                "updatedAt": self.telemetry.now_iso(),
            },
        }

    # emergency

    async def emergency_request(self, params: EmergencyRequestInput) -> dict[str, Any]:
        logger.info(f"Emergency request '{params.type}' at {params.location.address}")
        return {
            "success": True,
            "requestId": self.telemetry.new_id(),
            "type": params.type,
            "location": params.location.model_dump(),
            "description": params.description,
            "estimatedArrival": self.telemetry.emergency_eta_minutes(),
            "status": "dispatched",
            "contactNumber": EMERGENCY_CONTACT_NUMBER,
        }

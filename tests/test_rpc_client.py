"""Tests for the RPC client adapters."""

import asyncio
import json
from typing import Any

import aiohttp
import pytest

from vibrovolt.adapters.rpc_client import (
    RpcCallError,
    RpcHttpClient,
    RpcPaymentGateway,
    RpcStationRepository,
)
from vibrovolt.application.services import StationDiscoveryService
from vibrovolt.domain.errors import PaymentFailedError, StationFetchError
from vibrovolt.domain.models import FilterState

STATION = {
    "id": "1",
    "name": "Hitech City Super Charger",
    "address": "HITEC City, Madhapur",
    "distance": "2.3 km",
    "rating": 4.8,
    "type": "DC Fast",
    "price": 15,
    "available": 3,
    "total": 6,
    "onDemand": True,
    "supportedVehicles": ["2W", "Car"],
    "lat": 17.4485,
    "lng": 78.3908,
}


class MockResponse:
    """Mock aiohttp response usable as an async context manager."""

    def __init__(self, status: int, payload: Any) -> None:
        """Initialize with the status and the decoded JSON payload (or raw text)."""
        self.status = status
        self.payload = payload

    async def __aenter__(self) -> "MockResponse":
        return self

    async def __aexit__(self, *args: object) -> None:
        return None

    async def json(self, content_type: str | None = None) -> Any:  # noqa: ARG002
        if isinstance(self.payload, str):
            return json.loads(self.payload)
        return self.payload

    async def text(self) -> str:
        return self.payload if isinstance(self.payload, str) else json.dumps(self.payload)


class MockSession:
    """Mock aiohttp session recording calls and returning a fixed response."""

    def __init__(self, response: MockResponse | Exception) -> None:
        """Initialize with the response (or exception) for every call."""
        self.response = response
        self.calls: list[tuple[str, str, dict[str, Any]]] = []

    def _respond(self, method: str, url: str, **kwargs: Any) -> MockResponse:
        self.calls.append((method, url, kwargs))
        if isinstance(self.response, Exception):
            raise self.response
        return self.response

    def get(self, url: str, **kwargs: Any) -> MockResponse:
        return self._respond("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> MockResponse:
        return self._respond("POST", url, **kwargs)


def _client(response: MockResponse | Exception) -> tuple[RpcHttpClient, MockSession]:
    session = MockSession(response)
    return RpcHttpClient("http://backend.test/", session), session  # type: ignore[arg-type]


class TestRpcHttpClient:
    """Tests for the envelope handling of the HTTP client."""

    @pytest.mark.asyncio
    async def test_query_sends_input_as_json_parameter(self) -> None:
        """Given query params, when calling a query, then they are sent as a JSON input parameter."""
        client, session = _client(MockResponse(200, {"result": {"data": []}}))

        data = await client.query("stations.nearby", {"lat": 17.4})

        assert data == []
        method, url, kwargs = session.calls[0]
        assert method == "GET"
        assert url == "http://backend.test/rpc/stations.nearby"
        assert json.loads(kwargs["params"]["input"]) == {"lat": 17.4}

    @pytest.mark.asyncio
    async def test_mutation_posts_json_body(self) -> None:
        """Given a body, when calling a mutation, then it is posted as JSON."""
        client, session = _client(MockResponse(200, {"result": {"data": {"success": True}}}))

        data = await client.mutate("charging.stop")

        assert data == {"success": True}
        method, _url, kwargs = session.calls[0]
        assert method == "POST"
        assert kwargs["json"] == {}

    @pytest.mark.asyncio
    async def test_error_envelope_raises_with_code(self) -> None:
        """Given an error envelope, when calling, then RpcCallError carries code and status."""
        client, _ = _client(
            MockResponse(401, {"error": {"code": "UNAUTHORIZED", "message": "Invalid credentials"}})
        )

        with pytest.raises(RpcCallError, match="Invalid credentials") as exc_info:
            await client.mutate("auth.login", {"email": "x@y.z", "password": "wrong12"})

        assert exc_info.value.code == "UNAUTHORIZED"
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_non_json_response_raises(self) -> None:
        """Given an HTML error page, when calling, then RpcCallError is raised."""
        client, _ = _client(MockResponse(500, "<html>oops</html>"))

        with pytest.raises(RpcCallError, match="non-JSON"):
            await client.query("wallet.get")

    @pytest.mark.asyncio
    async def test_missing_result_data_raises(self) -> None:
        """Given a response without result data, when calling, then RpcCallError is raised."""
        client, _ = _client(MockResponse(200, {"result": {}}))

        with pytest.raises(RpcCallError, match="no result data"):
            await client.query("wallet.get")

    @pytest.mark.asyncio
    async def test_transport_error_is_wrapped(self) -> None:
        """Given a connection failure, when calling, then RpcCallError is raised."""
        client, _ = _client(aiohttp.ClientConnectionError("refused"))

        with pytest.raises(RpcCallError, match="request failed"):
            await client.query("wallet.get")

    @pytest.mark.asyncio
    async def test_timeout_is_wrapped(self) -> None:
        """Given a backend slower than the timeout, when calling, then RpcCallError is raised."""
        client, _ = _client(asyncio.TimeoutError())

        with pytest.raises(RpcCallError, match="timed out"):
            await client.mutate("charging.stop")


class TestRpcStationRepository:
    """Tests for the RPC-backed station repository."""

    @pytest.mark.asyncio
    async def test_fetch_converts_wire_stations(self) -> None:
        """Given a station list, when fetching, then domain stations are returned."""
        client, _ = _client(MockResponse(200, {"result": {"data": [STATION]}}))

        stations = await RpcStationRepository(client).fetch()

        assert len(stations) == 1
        assert stations[0].on_demand is True
        assert stations[0].latitude == 17.4485
        assert {v.value for v in stations[0].supported_vehicles} == {"2W", "Car"}

    @pytest.mark.asyncio
    async def test_fetch_sends_position_when_given(self) -> None:
        """Given a position, when fetching, then it is passed to the procedure."""
        client, session = _client(MockResponse(200, {"result": {"data": []}}))

        await RpcStationRepository(client, latitude=17.4, longitude=78.4).fetch()

        sent = json.loads(session.calls[0][2]["params"]["input"])
        assert sent == {"lat": 17.4, "lng": 78.4}

    @pytest.mark.asyncio
    async def test_fetch_skips_malformed_records(self) -> None:
        """Given one malformed record, when fetching, then the valid ones are kept."""
        client, _ = _client(MockResponse(200, {"result": {"data": [STATION, {"id": "broken"}]}}))

        stations = await RpcStationRepository(client).fetch()

        assert [s.id for s in stations] == ["1"]

    @pytest.mark.asyncio
    async def test_fetch_failure_raises_station_fetch_error(self) -> None:
        """Given a backend error, when fetching, then StationFetchError keeps the status."""
        client, _ = _client(MockResponse(502, {"error": {"code": "BAD_GATEWAY", "message": "down"}}))

        with pytest.raises(StationFetchError) as exc_info:
            await RpcStationRepository(client).fetch()

        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_non_list_data_raises(self) -> None:
        """Given data that is not a list, when fetching, then StationFetchError is raised."""
        client, _ = _client(MockResponse(200, {"result": {"data": {"stations": []}}}))

        with pytest.raises(StationFetchError, match="did not return a list"):
            await RpcStationRepository(client).fetch()

    @pytest.mark.asyncio
    async def test_timeout_raises_station_fetch_error(self) -> None:
        """Given a backend that times out, when fetching, then StationFetchError is raised."""
        client, _ = _client(asyncio.TimeoutError())

        with pytest.raises(StationFetchError, match="timed out"):
            await RpcStationRepository(client).fetch()

    @pytest.mark.asyncio
    async def test_timeout_during_discovery_shows_empty_state(self) -> None:
        """Given a backend that times out, when discovering, then an empty failed result is returned."""
        client, _ = _client(asyncio.TimeoutError())
        service = StationDiscoveryService(RpcStationRepository(client))

        result = await service.discover(FilterState())

        assert result.fetch_failed is True
        assert result.stations == []


class TestRpcPaymentGateway:
    """Tests for the RPC-backed payment gateway."""

    @pytest.mark.asyncio
    async def test_confirmed_top_up(self) -> None:
        """Given a confirmed top-up, when adding funds, then the confirmation is returned."""
        client, session = _client(
            MockResponse(
                200,
                {
                    "result": {
                        "data": {
                            "success": True,
                            "transactionId": "1734400000000",
                            "amount": 500,
                            "paymentMethod": "UPI",
                            "newBalance": 2950,
                        }
                    }
                },
            )
        )

        confirmation = await RpcPaymentGateway(client).add_funds(500, "UPI")

        assert confirmation.transaction_id == "1734400000000"
        assert confirmation.new_balance == 2950
        assert session.calls[0][2]["json"] == {"amount": 500, "paymentMethod": "UPI"}

    @pytest.mark.asyncio
    async def test_declined_top_up_raises_payment_failed(self) -> None:
        """Given a 402 response, when adding funds, then PaymentFailedError is raised."""
        client, _ = _client(
            MockResponse(402, {"error": {"code": "PAYMENT_REQUIRED", "message": "Payment failed."}})
        )

        with pytest.raises(PaymentFailedError, match="Payment failed"):
            await RpcPaymentGateway(client).add_funds(500, "UPI")

    @pytest.mark.asyncio
    async def test_unexpected_response_raises_payment_failed(self) -> None:
        """Given a response missing fields, when adding funds, then PaymentFailedError is raised."""
        client, _ = _client(MockResponse(200, {"result": {"data": {"success": True}}}))

        with pytest.raises(PaymentFailedError, match="Unexpected"):
            await RpcPaymentGateway(client).add_funds(500, "UPI")

    @pytest.mark.asyncio
    async def test_timeout_raises_payment_failed(self) -> None:
        """Given a backend that times out, when adding funds, then PaymentFailedError is raised."""
        client, _ = _client(asyncio.TimeoutError())

        with pytest.raises(PaymentFailedError, match="timed out"):
            await RpcPaymentGateway(client).add_funds(500, "UPI")

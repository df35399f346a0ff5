"""Tests for domain models."""

from dataclasses import FrozenInstanceError

import pytest
from pydantic import ValidationError

from vibrovolt.domain.models import (
    ErrorDetails,
    FilterState,
    RedemptionError,
    RedemptionResult,
    Station,
    StationCategory,
    Transaction,
    TransactionKind,
    VehicleCategory,
    parse_vehicle,
)


def _station(**overrides: object) -> Station:
    values: dict = {
        "id": "1",
        "name": "Test Station",
        "address": "Somewhere",
        "distance": "1 km",
        "rating": 4.0,
        "type": "DC Fast",
        "price": 15,
        "available": 1,
        "total": 2,
        "on_demand": False,
    }
    values.update(overrides)
    return Station(**values)


def test_station_is_frozen() -> None:
    """Given a station, when trying to modify it, then FrozenInstanceError is raised."""
    station = _station()

    with pytest.raises(FrozenInstanceError):
        station.available = 5  # type: ignore[misc]


def test_station_without_vehicle_list_supports_nothing() -> None:
    """Given a station without supported vehicles, when checking support, then it is False."""
    station = _station()

    assert station.supported_vehicles == frozenset()
    assert not station.supports(VehicleCategory.CAR)


def test_station_availability_follows_free_connectors() -> None:
    """Given free connector counts, when checking availability, then only positive counts are available."""
    assert _station(available=1).is_available
    assert not _station(available=0).is_available


class TestStationCategoryParse:
    """Tests for parsing category ids."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("all", StationCategory.ALL),
            ("fast", StationCategory.FAST),
            ("fast-dc", StationCategory.FAST),
            ("available", StationCategory.AVAILABLE),
            ("ondemand", StationCategory.ON_DEMAND),
            ("On-Demand", StationCategory.ON_DEMAND),
        ],
    )
    def test_when_known_id_then_returns_category(self, raw: str, expected: StationCategory) -> None:
        """Given a known category id or alias, when parsing, then the category is returned."""
        assert StationCategory.parse(raw) is expected

    def test_when_unknown_id_then_raises(self) -> None:
        """Given an unknown id, when parsing, then ValueError names the valid ids."""
        with pytest.raises(ValueError, match="Unknown station category"):
            StationCategory.parse("cheap")


class TestParseVehicle:
    """Tests for parsing vehicle ids."""

    @pytest.mark.parametrize("raw", [None, "", "all", "All"])
    def test_when_all_or_empty_then_no_filter(self, raw: str | None) -> None:
        """Given no vehicle selection, when parsing, then None is returned."""
        assert parse_vehicle(raw) is None

    def test_when_known_vehicle_then_case_insensitive_match(self) -> None:
        """Given a vehicle id in any case, when parsing, then the category is returned."""
        assert parse_vehicle("2w") is VehicleCategory.TWO_WHEELER
        assert parse_vehicle("suv") is VehicleCategory.SUV

    def test_when_unknown_vehicle_then_raises(self) -> None:
        """Given an unknown vehicle id, when parsing, then ValueError is raised."""
        with pytest.raises(ValueError, match="Unknown vehicle category"):
            parse_vehicle("Tractor")


def test_filter_state_defaults_to_no_filters() -> None:
    """Given no arguments, when creating a filter state, then nothing is filtered."""
    state = FilterState()

    assert state.query == ""
    assert state.category is StationCategory.ALL
    assert state.vehicle is None


def test_redemption_result_failure_has_no_transaction() -> None:
    """Given a rejected redemption, when building the result, then only error and message are set."""
    result = RedemptionResult.failure(RedemptionError.BELOW_MINIMUM, "Minimum 150 credits required")

    assert result.ok is False
    assert result.error is RedemptionError.BELOW_MINIMUM
    assert result.transaction is None


def test_redemption_result_success_carries_transaction() -> None:
    """Given a recorded transaction, when building a success, then it is attached without error."""
    tx = Transaction(id="t1", title="x", date="Dec 1, 2024", amount=100, kind=TransactionKind.DEBIT)

    result = RedemptionResult.success(tx)

    assert result.ok is True
    assert result.error is None
    assert result.transaction is tx


def test_error_details_is_immutable() -> None:
    """Given error details, when trying to modify, then pydantic rejects the change."""
    details = ErrorDetails(code="NOT_FOUND", message="missing", status_code=404)

    with pytest.raises(ValidationError):
        details.code = "OTHER"

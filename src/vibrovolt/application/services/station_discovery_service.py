"""Station discovery service: fetch the station list and apply the screen filters."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from vibrovolt.domain.errors import StationFetchError
from vibrovolt.domain.models.filter_state import FilterState, StationCategory
from vibrovolt.domain.models.station import Station, VehicleCategory
from vibrovolt.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)

# Fast-DC chip matches this connector label exactly, not "DC Ultra Fast".
FAST_DC_TYPE = "DC Fast"


def _matches_query(station: Station, query: str) -> bool:
    if not query:
        return True
    return query.lower() in station.name.lower()


def _matches_category(station: Station, category: StationCategory) -> bool:
    if category is StationCategory.FAST:
        return station.type == FAST_DC_TYPE
    if category is StationCategory.AVAILABLE:
        return station.available > 0
    if category is StationCategory.ON_DEMAND:
        return station.on_demand
    return True


def _matches_vehicle(station: Station, vehicle: VehicleCategory | None) -> bool:
    if vehicle is None:
        return True
    # A station without a supported-vehicles list never matches a specific vehicle.
    return station.supports(vehicle)


def filter_stations(stations: Iterable[Station], filter_state: FilterState) -> list[Station]:
    """Return the stations matching every active filter, in their original order.

    The text query is a case-insensitive substring match on the station name.
    Category and vehicle filters are combined with the query as a conjunction.
    An empty result is valid.
    """
    return [
        station
        for station in stations
        if _matches_query(station, filter_state.query)
        and _matches_category(station, filter_state.category)
        and _matches_vehicle(station, filter_state.vehicle)
    ]


@dataclass(frozen=True)
class DiscoveryResult:
    """Stations to display plus whether the last fetch failed."""

    stations: list[Station] = field(default_factory=list)
    fetch_failed: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.stations


class StationDiscoveryService:
    """Fetches stations from a repository and filters them for display."""

    def __init__(self, station_repository: StationRepository) -> None:
        """Initialize with a station repository."""
        self._station_repository = station_repository
        self._stations: list[Station] = []

    @property
    def stations(self) -> list[Station]:
        """Stations from the most recent successful fetch."""
        return list(self._stations)

    async def refresh(self) -> bool:
        """Fetch the station list, replacing the current one on success.

        Returns False when the fetch failed; the previous list is then cleared so the
        caller shows an empty state instead of stale data.
        """
        try:
            stations = await self._station_repository.fetch()
        except StationFetchError as e:
            logger.warning(f"Station fetch failed: {e}")
            self._stations = []
            return False
        self._stations = list(stations)
        logger.debug(f"Fetched {len(self._stations)} stations")
        return True

    async def discover(self, filter_state: FilterState) -> DiscoveryResult:
        """Fetch a fresh station list and return the filtered view of it."""
        fetched = await self.refresh()
        if not fetched:
            return DiscoveryResult(stations=[], fetch_failed=True)
        return DiscoveryResult(stations=filter_stations(self._stations, filter_state))

    def apply(self, filter_state: FilterState) -> list[Station]:
        """Filter the already fetched stations without fetching again."""
        return filter_stations(self._stations, filter_state)

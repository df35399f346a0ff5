"""Station repository backed by the fixed sample station list."""

from collections.abc import Iterable

from vibrovolt.adapters.sample_data.stations import HYDERABAD_STATIONS
from vibrovolt.domain.models.station import Station
from vibrovolt.domain.ports.station_repository import StationRepository


class SampleStationRepository(StationRepository):
    """Serves a fixed station list."""

    def __init__(self, stations: Iterable[Station] = HYDERABAD_STATIONS) -> None:
        self._stations = tuple(stations)

    async def fetch(self) -> list[Station]:
        """Return the full station list."""
        return list(self._stations)

"""Station repository port."""

from typing import Protocol

from vibrovolt.domain.models.station import Station


class StationRepository(Protocol):
    """Port for retrieving the station list."""

    async def fetch(self) -> list[Station]:
        """Fetch the full station list.

        Raises:
            StationFetchError: If the list could not be obtained.
        """
        ...

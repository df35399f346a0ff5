"""Station repository adapter backed by the ``stations.nearby`` procedure."""

import logging

from pydantic import ValidationError

from vibrovolt.adapters.rpc_client.http_client import RpcCallError, RpcHttpClient
from vibrovolt.adapters.rpc_schemas import StationOut
from vibrovolt.domain.errors import StationFetchError
from vibrovolt.domain.models.station import Station
from vibrovolt.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)


class RpcStationRepository(StationRepository):
    """Fetches stations from a running RPC backend."""

    def __init__(
        self,
        client: RpcHttpClient,
        latitude: float | None = None,
        longitude: float | None = None,
        radius_km: float | None = None,
    ) -> None:
        self._client = client
        self._params = {
            k: v
            for k, v in {"lat": latitude, "lng": longitude, "radius": radius_km}.items()
            if v is not None
        }

    async def fetch(self) -> list[Station]:
        try:
            data = await self._client.query("stations.nearby", self._params)
        except RpcCallError as e:
            raise StationFetchError(str(e), status_code=e.status_code) from e

        if not isinstance(data, list):
            raise StationFetchError("stations.nearby did not return a list")

        stations: list[Station] = []
        for item in data:
            try:
                stations.append(StationOut.model_validate(item).to_domain())
            except ValidationError as e:
                logger.warning(f"Skipping malformed station record: {e.error_count()} error(s)")
        return stations

"""Client adapters talking to a running RPC backend."""

from vibrovolt.adapters.rpc_client.http_client import RpcCallError, RpcHttpClient
from vibrovolt.adapters.rpc_client.rpc_payment_gateway import RpcPaymentGateway
from vibrovolt.adapters.rpc_client.rpc_station_repository import RpcStationRepository

__all__ = ["RpcCallError", "RpcHttpClient", "RpcPaymentGateway", "RpcStationRepository"]

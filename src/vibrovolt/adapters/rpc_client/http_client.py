"""aiohttp client for the RPC backend."""

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from vibrovolt.adapters.rpc_call_logger import log_rpc_call

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class RpcCallError(Exception):
    """An RPC call failed at transport level or returned an error envelope."""

    def __init__(self, message: str, *, code: str = "", status_code: int | None = None) -> None:
        self.code = code
        self.status_code = status_code
        super().__init__(message)


class RpcHttpClient:
    """Calls ``/rpc/<procedure>`` endpoints of the backend."""

    def __init__(self, base_url: str, session: "ClientSession", timeout_seconds: int = 10) -> None:
        """Initialize with the backend base URL and a shared aiohttp session."""
        self._base_url = base_url.rstrip("/")
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    def _url(self, procedure: str) -> str:
        return f"{self._base_url}/rpc/{procedure}"

    async def _handle_response(self, procedure: str, response: "ClientResponse") -> Any:
        try:
            payload = await response.json(content_type=None)
        except (aiohttp.ContentTypeError, json.JSONDecodeError) as e:
            text = await response.text()
            raise RpcCallError(
                f"{procedure} returned non-JSON response ({response.status}): {text[:200]}",
                status_code=response.status,
            ) from e

        log_rpc_call("<-", procedure, payload, status_code=response.status)
        if not isinstance(payload, dict):
            raise RpcCallError(f"{procedure} returned an unexpected payload", status_code=response.status)
        if "error" in payload:
            error = payload["error"] or {}
            raise RpcCallError(
                str(error.get("message", "Unknown error")),
                code=str(error.get("code", "")),
                status_code=response.status,
            )
        result = payload.get("result")
        if not isinstance(result, dict) or "data" not in result:
            raise RpcCallError(f"{procedure} response has no result data", status_code=response.status)
        return result["data"]

    async def query(self, procedure: str, params: dict[str, Any] | None = None) -> Any:
        """Call a query procedure."""
        query_params = {"input": json.dumps(params)} if params else None
        log_rpc_call("->", procedure, params)
        try:
            async with self._session.get(
                self._url(procedure), params=query_params, timeout=self._timeout
            ) as response:
                return await self._handle_response(procedure, response)
        except aiohttp.ClientError as e:
            raise RpcCallError(f"{procedure} request failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise RpcCallError(f"{procedure} timed out after {self._timeout.total}s") from e

    async def mutate(self, procedure: str, body: dict[str, Any] | None = None) -> Any:
        """Call a mutation procedure."""
        log_rpc_call("->", procedure, body)
        try:
            async with self._session.post(
                self._url(procedure), json=body or {}, timeout=self._timeout
            ) as response:
                return await self._handle_response(procedure, response)
        except aiohttp.ClientError as e:
            raise RpcCallError(f"{procedure} request failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise RpcCallError(f"{procedure} timed out after {self._timeout.total}s") from e

"""Starlette application exposing the mock RPC backend over HTTP.

Queries are called with ``GET /rpc/<router>.<procedure>`` and take their input from
the query string, either as a JSON ``input`` parameter or as flat parameters.
Mutations are called with ``POST`` and a JSON body. Successful calls answer
``{"result": {"data": ...}}``; failures answer ``{"error": {...}}``.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from vibrovolt.adapters.rpc_call_logger import log_rpc_call
from vibrovolt.adapters.web.rate_limit_middleware import RateLimitMiddleware
from vibrovolt.adapters.web.rpc_backend import Procedure, ProcedureNotFoundError, RpcBackend
from vibrovolt.domain.errors import (
    InvalidCredentialsError,
    PaymentFailedError,
    SlotUnavailableError,
    StationFetchError,
    VibrovoltError,
)
from vibrovolt.domain.models.error_details import ErrorDetails

if TYPE_CHECKING:
    from vibrovolt.adapters.config import AppConfig

logger = logging.getLogger(__name__)

# Domain error -> (HTTP status, RPC error code)
ERROR_STATUS: dict[type[VibrovoltError], tuple[int, str]] = {
    InvalidCredentialsError: (401, "UNAUTHORIZED"),
    PaymentFailedError: (402, "PAYMENT_REQUIRED"),
    SlotUnavailableError: (409, "CONFLICT"),
    StationFetchError: (502, "BAD_GATEWAY"),
}


def error_response(error: ErrorDetails) -> JSONResponse:
    """Build the JSON error envelope for ``error``."""
    return JSONResponse(
        {"error": error.model_dump(exclude_none=True)},
        status_code=error.status_code or 500,
    )


def details_for_exception(exc: VibrovoltError) -> ErrorDetails:
    """Map a domain error to its RPC error details."""
    for error_type, (status_code, code) in ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return ErrorDetails(code=code, message=str(exc), status_code=status_code)
    return ErrorDetails(code="INTERNAL_SERVER_ERROR", message=str(exc), status_code=500)


async def read_input(request: Request, procedure: Procedure) -> Any:
    """Extract the raw procedure input from the request.

    Raises:
        ValueError: If the payload is not valid JSON.
    """
    if procedure.kind == "query":
        if "input" in request.query_params:
            return json.loads(request.query_params["input"])
        return dict(request.query_params)
    body = await request.body()
    if not body:
        return {}
    return json.loads(body)


def create_app(backend: RpcBackend, rate_limit_per_minute: int = 100) -> Starlette:
    """Create the Starlette application serving ``backend``."""

    async def health(_request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok", "procedures": sorted(backend.procedures)})

    async def rpc_endpoint(request: Request) -> JSONResponse:
        name = request.path_params["procedure"]
        try:
            procedure = backend.get(name)
        except ProcedureNotFoundError as e:
            return error_response(ErrorDetails(code="NOT_FOUND", message=str(e), status_code=404))

        if request.method != procedure.http_method:
            return error_response(
                ErrorDetails(
                    code="METHOD_NOT_SUPPORTED",
                    message=f"'{name}' is a {procedure.kind}, call it with {procedure.http_method}",
                    status_code=405,
                )
            )

        try:
            raw_input = await read_input(request, procedure)
        except ValueError as e:
            return error_response(
                ErrorDetails(code="PARSE_ERROR", message=f"Invalid JSON input: {e}", status_code=400)
            )

        log_rpc_call("->", name, raw_input)
        try:
            data = await backend.call(name, raw_input)
        except ValidationError as e:
            details = json.loads(e.json(include_url=False))
            return error_response(
                ErrorDetails(
                    code="BAD_REQUEST",
                    message=f"Invalid input for '{name}'",
                    status_code=400,
                    details=details,
                )
            )
        except VibrovoltError as e:
            error = details_for_exception(e)
            logger.info(f"{name} failed with {error.code}: {error.message}")
            log_rpc_call("<-", name, {"error": error.message}, status_code=error.status_code)
            return error_response(error)

        log_rpc_call("<-", name, data, status_code=200)
        return JSONResponse({"result": {"data": data}})

    return Starlette(
        routes=[
            Route("/health", health, methods=["GET"]),
            Route("/rpc/{procedure}", rpc_endpoint, methods=["GET", "POST"]),
        ],
        middleware=[Middleware(RateLimitMiddleware, requests_per_minute=rate_limit_per_minute)],
    )


async def serve(app: Starlette, config: AppConfig) -> None:
    """Run ``app`` with uvicorn until the server is stopped."""
    import uvicorn

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )
    server = uvicorn.Server(uvicorn_config)
    logger.info(f"Serving RPC backend on http://{config.host}:{config.port}")
    await server.serve()

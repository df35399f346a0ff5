"""Web adapters serving the mock RPC backend."""

from vibrovolt.adapters.web.rpc_app import create_app, serve
from vibrovolt.adapters.web.rpc_backend import Procedure, ProcedureNotFoundError, RpcBackend

__all__ = ["Procedure", "ProcedureNotFoundError", "RpcBackend", "create_app", "serve"]

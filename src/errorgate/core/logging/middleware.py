# src/errorgate/core/logging/middleware.py
"""
Request ID middleware for FastAPI / Starlette.

Each request gets an id, taken from the incoming `X-Request-ID` header when it looks
like a UUID, otherwise freshly generated. The id is stored in a contextvar for
RequestIdFilter (so the error handlers' log records carry it) and echoed back in the
response header.

Register it before routers that may emit logs:
    app.add_middleware(RequestIDMiddleware)
"""

import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from .filters import set_request_id, reset_request_id

REQUEST_ID_HEADER = "X-Request-ID"


def _resolve_request_id(incoming: str | None) -> str:
    # Untrusted header: accept only UUIDs to keep newlines/garbage out of the logs.
    if incoming:
        try:
            return str(uuid.UUID(incoming))
        except ValueError:
            pass
    return str(uuid.uuid4())


class RequestIDMiddleware(BaseHTTPMiddleware):

    async def dispatch(self, request: Request, call_next):
        rid = _resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        token = set_request_id(rid)

        try:
            # exceptions propagate to the registered exception handlers
            response = await call_next(request)
            response.headers[REQUEST_ID_HEADER] = rid
            return response
        finally:
            reset_request_id(token)

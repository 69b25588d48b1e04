"""
Middleware stack for the Destinations API.

- RequestIDMiddleware: adds X-Request-ID to every response
- RequestLoggingMiddleware: appends one JSON line per request to logs/

The log path is a module-level variable so tests can redirect it via monkeypatch.
"""
import json
import os
import time
import uuid
from datetime import datetime, timezone

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from destinations_api.config import get_request_log

# Resolved at import time from REQUEST_LOG: override in tests via monkeypatch.setattr
_REQUESTS_LOG = get_request_log()


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Attach a unique X-Request-ID to every response for tracing.

    If the client sends an X-Request-ID header, the server echoes it back.
    Otherwise a new UUID4 is generated.
    """

    _MAX_ID_LENGTH = 128

    async def dispatch(self, request: Request, call_next) -> Response:
        raw_id = request.headers.get("x-request-id") or ""
        # ASCII-only, at most 128 chars
        sanitized = raw_id if raw_id.isascii() and len(raw_id) <= self._MAX_ID_LENGTH else ""
        request_id = sanitized or str(uuid.uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request as a JSON line: timestamp, method, path, status, time, id."""

    async def dispatch(self, request: Request, call_next) -> Response:
        t0 = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - t0) * 1000, 3)

        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "response_time_ms": elapsed_ms,
            "request_id": getattr(request.state, "request_id", None),
        }

        try:
            log_path = _REQUESTS_LOG
            os.makedirs(os.path.dirname(log_path) or ".", exist_ok=True)
            with open(log_path, "a", encoding="utf-8") as f:
                f.write(json.dumps(entry) + "\n")
        except OSError:
            pass  # log failures must never crash the request

        return response

"""Access logging driven by the route registry."""

import logging
import time
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from shorturl_app.logging_config import get_logger


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log a request line and a response line per call.

    Routes whose RouteConfig has logging=False (GET /health, polled by load
    balancers) are passed through silently. Must be added before
    RouteConfigMiddleware so that it runs inside it.
    """

    def __init__(self, app, logger: Optional[logging.Logger] = None):
        super().__init__(app)
        self.logger = logger or get_logger("web")

    async def dispatch(self, request: Request, call_next: Callable):
        route_config = getattr(request.state, "route_config", None)
        if route_config is not None and not route_config.logging:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        self.logger.info(f"-> {request.method} {request.url.path} from {client_ip}")

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        self.logger.info(
            f"<- {request.method} {request.url.path} {response.status_code} "
            f"in {elapsed_ms:.2f}ms"
        )

        return response

"""
Per-route middleware configuration.

Each (method, path) pair gets a RouteConfig telling the other middleware
what to do for it: whether to log, which Cache-Control header to send and
whether rate limiting applies. Paths may contain dynamic segments written
as "{name}" or ":name".

Note: auth, rate limiting and metrics are only described here. Nothing in
the service enforces them yet.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Callable, Dict, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request


@dataclass
class RouteConfig:
    """Middleware settings for one route"""
    skip_auth: bool = False
    rate_limit: bool = True
    logging: bool = True
    metrics: bool = True
    cache_control: str = "no-cache"


@dataclass
class RateLimitConfig:
    """Rate limiting window for one route"""
    window: timedelta = field(default_factory=lambda: timedelta(minutes=1))
    limit: int = 100


class RouteRegistry:
    """Registry of route configurations keyed by "METHOD:path"."""

    def __init__(self, rate_limit_per_minute: int = 100):
        self.routes: Dict[str, RouteConfig] = {}
        self.rate_limit_per_minute = rate_limit_per_minute

    def register_route(self, method: str, path: str, config: RouteConfig) -> None:
        self.routes[f"{method.upper()}:{path}"] = config

    def get_route_config(self, method: str, path: str) -> RouteConfig:
        """
        Find the configuration of a request.

        Exact match first, then registered patterns in registration order,
        otherwise a default config (logged, rate limited, no-cache).
        """
        method = method.upper()
        config = self.routes.get(f"{method}:{path}")
        if config is not None:
            return config

        for route_key, config in self.routes.items():
            route_method, _, route_path = route_key.partition(":")
            if route_method == method and self._path_matches(route_path, path):
                return config

        return RouteConfig()

    def get_rate_limit_config(self, method: str, path: str) -> Optional[RateLimitConfig]:
        """Rate limit of a route, or None when the route is not rate limited"""
        if not self.get_route_config(method, path).rate_limit:
            return None
        return RateLimitConfig(window=timedelta(minutes=1), limit=self.rate_limit_per_minute)

    @staticmethod
    def _path_matches(pattern: str, path: str) -> bool:
        pattern_segments = pattern.split("/")
        path_segments = path.split("/")

        if len(pattern_segments) != len(path_segments):
            return False

        for pattern_seg, path_seg in zip(pattern_segments, path_segments):
            if RouteRegistry._is_dynamic(pattern_seg):
                # A dynamic segment matches anything except an empty one
                if not path_seg:
                    return False
                continue
            if pattern_seg != path_seg:
                return False
        return True

    @staticmethod
    def _is_dynamic(segment: str) -> bool:
        return segment.startswith(":") or (segment.startswith("{") and segment.endswith("}"))


def default_route_registry(rate_limit_per_minute: int = 100) -> RouteRegistry:
    """Registry with the service's built-in routes"""
    registry = RouteRegistry(rate_limit_per_minute=rate_limit_per_minute)

    # Health and status routes (no auth, no rate limiting)
    registry.register_route("GET", "/", RouteConfig(
        skip_auth=True,
        rate_limit=False,
        cache_control="public, max-age=300",
    ))
    registry.register_route("GET", "/health", RouteConfig(
        skip_auth=True,
        rate_limit=False,
        logging=False,
    ))

    # API routes
    registry.register_route("POST", "/api/v1/short-urls", RouteConfig())
    registry.register_route("GET", "/api/v1/short-urls/{id}", RouteConfig(
        cache_control="public, max-age=3600",
    ))

    # Redirects are public
    registry.register_route("GET", "/{short_url}", RouteConfig(skip_auth=True))

    return registry


class RouteConfigMiddleware(BaseHTTPMiddleware):
    """Attach the route config to request.state and apply its Cache-Control.

    The configured header only goes on 2xx responses; anything else is no-cache.
    """

    def __init__(self, app, registry: RouteRegistry):
        super().__init__(app)
        self.registry = registry

    async def dispatch(self, request: Request, call_next: Callable):
        config = self.registry.get_route_config(request.method, request.url.path)
        request.state.route_config = config

        response = await call_next(request)

        if not 200 <= response.status_code < 300:
            # 404 also covers store outages, so errors must never be cached
            response.headers["Cache-Control"] = "no-cache"
        elif config.cache_control:
            response.headers["Cache-Control"] = config.cache_control
        return response

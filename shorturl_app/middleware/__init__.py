"""Middleware package."""

from .logging import LoggingMiddleware
from .route_config import (
    RateLimitConfig,
    RouteConfig,
    RouteConfigMiddleware,
    RouteRegistry,
    default_route_registry,
)

__all__ = [
    "LoggingMiddleware",
    "RateLimitConfig",
    "RouteConfig",
    "RouteConfigMiddleware",
    "RouteRegistry",
    "default_route_registry",
]

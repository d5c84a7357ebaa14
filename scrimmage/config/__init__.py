"""Engine configuration."""

from scrimmage.config.schema import (
    DEFAULT_CONFIG,
    ROUTE_ROUNDS,
    EngineConfig,
    RouteStep,
    RouteTemplate,
    TraitProfile,
    WeightTables,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ROUTE_ROUNDS",
    "EngineConfig",
    "RouteStep",
    "RouteTemplate",
    "TraitProfile",
    "WeightTables",
]

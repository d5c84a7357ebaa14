"""Pydantic schemas for engine configuration.

Every balance knob the resolvers read lives here so tuning never
touches resolver logic. Models are frozen; use ``with_overrides`` or
``from_dict`` to derive a tuned copy.
"""

import copy
import json
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from scrimmage.config import tables
from scrimmage.core.enums import FieldZone, QBTrait, RouteDepthClass

ROUTE_ROUNDS = 5


class RouteStep(BaseModel):
    """Where a receiver is during one round of a route."""

    model_config = ConfigDict(frozen=True)

    target_depth: float = Field(ge=0)
    crossing: bool = False


class RouteTemplate(BaseModel):
    """Five-round route with an optional break round (1-based)."""

    model_config = ConfigDict(frozen=True)

    name: str
    steps: tuple[RouteStep, ...]
    break_round: Optional[int] = Field(default=None, ge=1, le=ROUTE_ROUNDS)

    @field_validator("steps")
    @classmethod
    def _exactly_five_steps(cls, steps: tuple[RouteStep, ...]) -> tuple[RouteStep, ...]:
        if len(steps) != ROUTE_ROUNDS:
            raise ValueError(f"route needs exactly {ROUTE_ROUNDS} steps, got {len(steps)}")
        return steps

    @property
    def max_depth(self) -> float:
        return max(step.target_depth for step in self.steps)

    @property
    def depth_class(self) -> RouteDepthClass:
        return RouteDepthClass.from_max_depth(self.max_depth)

    def step(self, round_number: int) -> RouteStep:
        """Step for a 1-based round; rounds past the end hold the last step."""
        index = max(1, min(round_number, ROUTE_ROUNDS)) - 1
        return self.steps[index]

    def is_break(self, round_number: int) -> bool:
        return self.break_round is not None and round_number == self.break_round


class TraitProfile(BaseModel):
    """Decision parameters for one quarterback trait."""

    model_config = ConfigDict(frozen=True)

    open_threshold: float = Field(ge=0, le=100)
    pressure_multiplier: float = Field(ge=0)
    first_down_bias: float
    aggressiveness: float = Field(gt=0)
    scramble_bonus: Optional[float] = None

    @property
    def can_scramble(self) -> bool:
        return self.scramble_bonus is not None


def _weights(table: dict[str, float]):
    return Field(default_factory=lambda: dict(table))


class WeightTables(BaseModel):
    """Skill weights for every clash roll."""

    model_config = ConfigDict(frozen=True)

    ol_pass_block: dict[str, float] = _weights(tables.OL_PASS_BLOCK_WEIGHTS)
    dl_pass_rush: dict[str, float] = _weights(tables.DL_PASS_RUSH_WEIGHTS)
    receiver_separation: dict[str, float] = _weights(tables.RECEIVER_SEPARATION_WEIGHTS)
    man_coverage: dict[str, float] = _weights(tables.MAN_COVERAGE_WEIGHTS)
    zone_coverage: dict[str, float] = _weights(tables.ZONE_COVERAGE_WEIGHTS)
    qb_vision: dict[str, float] = _weights(tables.QB_VISION_WEIGHTS)
    tackle: dict[str, float] = _weights(tables.TACKLE_WEIGHTS)
    evasion: dict[str, float] = _weights(tables.EVASION_WEIGHTS)
    yac_burst: dict[str, float] = _weights(tables.YAC_BURST_WEIGHTS)

    @field_validator("*")
    @classmethod
    def _non_empty_non_negative(cls, table: dict[str, float]) -> dict[str, float]:
        if not table:
            raise ValueError("weight table must not be empty")
        negative = [name for name, weight in table.items() if weight < 0]
        if negative:
            raise ValueError(f"negative weights for: {', '.join(negative)}")
        return table


def _default_traits() -> dict[QBTrait, TraitProfile]:
    return {QBTrait(name): TraitProfile(**values) for name, values in tables.TRAIT_TABLE.items()}


def _default_routes() -> dict[FieldZone, tuple[RouteTemplate, ...]]:
    return {
        FieldZone(zone): tuple(RouteTemplate.model_validate(r) for r in routes)
        for zone, routes in tables.ROUTE_CATALOG.items()
    }


class EngineConfig(BaseModel):
    """Complete, validated engine configuration."""

    model_config = ConfigDict(frozen=True)

    max_rounds: int = Field(default=5, ge=1)
    max_drive_plays: int = Field(default=15, ge=1)
    variance_factor: float = Field(default=0.2, ge=0, lt=1)

    weights: WeightTables = Field(default_factory=WeightTables)
    traits: dict[QBTrait, TraitProfile] = Field(default_factory=_default_traits)
    route_catalog: dict[FieldZone, tuple[RouteTemplate, ...]] = Field(
        default_factory=_default_routes
    )

    @model_validator(mode="after")
    def _exhaustive_tables(self) -> "EngineConfig":
        missing = [trait.value for trait in QBTrait if trait not in self.traits]
        if missing:
            raise ValueError(f"trait table missing profiles for: {', '.join(missing)}")
        empty = [zone.value for zone in FieldZone if not self.route_catalog.get(zone)]
        if empty:
            raise ValueError(f"route catalog has no routes for: {', '.join(empty)}")
        return self

    def trait_profile(self, trait: QBTrait) -> TraitProfile:
        return self.traits[trait]

    def routes_for(self, zone: FieldZone) -> tuple[RouteTemplate, ...]:
        return self.route_catalog[zone]

    def with_overrides(self, **updates: Any) -> "EngineConfig":
        """Return a validated copy with top-level fields replaced."""
        data = self.model_dump()
        data.update(updates)
        return EngineConfig.model_validate(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EngineConfig":
        """
        Build a config from a partial override document.

        Trait profiles are merged key by key over the defaults; a weight
        table or route catalog zone given in the document replaces the
        default one whole.
        """
        merged = _merge(cls().model_dump(mode="json"), data)
        return cls.model_validate(merged)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "EngineConfig":
        """Load a JSON override document."""
        with open(path) as f:
            return cls.from_dict(json.load(f))


def _merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    result = copy.deepcopy(base)
    for key, value in overrides.items():
        current = result.get(key)
        if key in ("weights", "route_catalog") and isinstance(value, dict):
            # Whole weight tables and whole zones are replaced, not merged
            current.update(value)
        elif isinstance(value, dict) and isinstance(current, dict):
            result[key] = _merge(current, value)
        else:
            result[key] = value
    return result


DEFAULT_CONFIG = EngineConfig()

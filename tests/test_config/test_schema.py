"""Tests for engine configuration."""

import json

import pytest
from pydantic import ValidationError

from scrimmage.config import DEFAULT_CONFIG, EngineConfig, RouteTemplate
from scrimmage.core.enums import FieldZone, QBTrait, RouteDepthClass


class TestDefaults:
    """Tests for the shipped balance tables."""

    def test_loop_defaults(self):
        assert DEFAULT_CONFIG.max_rounds == 5
        assert DEFAULT_CONFIG.max_drive_plays == 15
        assert DEFAULT_CONFIG.variance_factor == pytest.approx(0.2)

    def test_weight_tables_sum_to_one(self):
        """A flat rating r should roll r on average for every clash."""
        for name, table in DEFAULT_CONFIG.weights.model_dump().items():
            assert sum(table.values()) == pytest.approx(1.0), name

    def test_every_trait_has_a_profile(self):
        for trait in QBTrait:
            DEFAULT_CONFIG.trait_profile(trait)

    def test_only_scrambler_can_scramble(self):
        scramblers = [t for t in QBTrait if DEFAULT_CONFIG.trait_profile(t).can_scramble]
        assert scramblers == [QBTrait.SCRAMBLER]

    def test_every_zone_has_routes_in_each_depth_class(self):
        for zone in FieldZone:
            classes = {route.depth_class for route in DEFAULT_CONFIG.routes_for(zone)}
            assert RouteDepthClass.SHORT in classes, zone
            assert RouteDepthClass.MEDIUM in classes, zone

    def test_route_step_clamps_to_last_round(self):
        route = DEFAULT_CONFIG.routes_for(FieldZone.STANDARD)[0]
        assert route.step(9) == route.steps[-1]
        assert route.step(1) == route.steps[0]


class TestValidation:
    """Invalid documents are rejected at load time."""

    def test_negative_weight_rejected(self):
        with pytest.raises(ValidationError, match="negative"):
            EngineConfig.from_dict({"weights": {"tackle": {"tackling": -0.5}}})

    def test_empty_weight_table_rejected(self):
        with pytest.raises(ValidationError):
            EngineConfig.from_dict({"weights": {"evasion": {}}})

    def test_route_needs_five_steps(self):
        with pytest.raises(ValidationError, match="exactly 5 steps"):
            RouteTemplate(
                name="short",
                steps=[{"target_depth": d} for d in (1, 2, 3, 4)],
            )

    def test_missing_trait_rejected(self):
        data = DEFAULT_CONFIG.model_dump(mode="json")
        del data["traits"]["scrambler"]
        with pytest.raises(ValidationError, match="scrambler"):
            EngineConfig.model_validate(data)

    def test_empty_zone_rejected(self):
        with pytest.raises(ValidationError, match="goalline"):
            EngineConfig.from_dict({"route_catalog": {"goalline": []}})

    def test_zero_rounds_rejected(self):
        with pytest.raises(ValidationError):
            EngineConfig(max_rounds=0)

    def test_config_is_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_CONFIG.max_rounds = 3


class TestOverrides:
    """Tests for deriving tuned configs."""

    def test_from_dict_merges_over_defaults(self):
        config = EngineConfig.from_dict({"max_rounds": 3, "traits": {"balanced": {"open_threshold": 70}}})
        balanced = config.trait_profile(QBTrait.BALANCED)
        assert config.max_rounds == 3
        assert balanced.open_threshold == 70
        assert balanced.aggressiveness == DEFAULT_CONFIG.trait_profile(QBTrait.BALANCED).aggressiveness
        assert config.weights == DEFAULT_CONFIG.weights

    def test_weight_table_replaced_whole(self):
        config = EngineConfig.from_dict({"weights": {"tackle": {"tackling": 1.0}}})
        assert config.weights.tackle == {"tackling": 1.0}
        assert config.weights.evasion == DEFAULT_CONFIG.weights.evasion

    def test_with_overrides_leaves_original(self):
        tuned = DEFAULT_CONFIG.with_overrides(max_drive_plays=4)
        assert tuned.max_drive_plays == 4
        assert DEFAULT_CONFIG.max_drive_plays == 15

    def test_from_file(self, tmp_path):
        path = tmp_path / "tuning.json"
        path.write_text(json.dumps({"variance_factor": 0.1}))
        assert EngineConfig.from_file(path).variance_factor == pytest.approx(0.1)

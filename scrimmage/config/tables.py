"""Default balance tables.

Plain data only; ``scrimmage.config.schema`` validates these into an
EngineConfig. Override any table through ``EngineConfig.from_dict``.
"""

# =============================================================================
# Clash weight tables (skill -> weight)
# =============================================================================

OL_PASS_BLOCK_WEIGHTS = {
    "pass_block": 0.35,
    "strength": 0.30,
    "balance": 0.20,
    "awareness": 0.15,
}

DL_PASS_RUSH_WEIGHTS = {
    "pass_rush": 0.35,
    "strength": 0.30,
    "acceleration": 0.20,
    "speed": 0.15,
}

RECEIVER_SEPARATION_WEIGHTS = {
    "speed": 0.25,
    "agility": 0.25,
    "route_running": 0.20,
    "acceleration": 0.15,
    "release": 0.15,
}

MAN_COVERAGE_WEIGHTS = {
    "man_coverage": 0.30,
    "speed": 0.25,
    "agility": 0.20,
    "awareness": 0.15,
    "acceleration": 0.10,
}

ZONE_COVERAGE_WEIGHTS = {
    "zone_coverage": 0.25,
    "speed": 0.20,
    "agility": 0.20,
    "awareness": 0.15,
    "pursuit": 0.20,
}

QB_VISION_WEIGHTS = {
    "awareness": 0.50,
    "throwing": 0.30,
    "focus": 0.20,
}

TACKLE_WEIGHTS = {
    "tackling": 0.40,
    "pursuit": 0.30,
    "hit_power": 0.30,
}

EVASION_WEIGHTS = {
    "agility": 0.35,
    "speed": 0.30,
    "balance": 0.35,
}

YAC_BURST_WEIGHTS = {
    "speed": 0.30,
    "acceleration": 0.20,
    "agility": 0.25,
    "balance": 0.25,
}

# =============================================================================
# Quarterback trait profiles
# =============================================================================

TRAIT_TABLE = {
    "gunslinger": {
        "open_threshold": 40,
        "pressure_multiplier": 0.8,
        "first_down_bias": 20,
        "aggressiveness": 1.2,
    },
    "game_manager": {
        "open_threshold": 65,
        "pressure_multiplier": 1.3,
        "first_down_bias": 5,
        "aggressiveness": 0.6,
    },
    "balanced": {
        "open_threshold": 55,
        "pressure_multiplier": 1.0,
        "first_down_bias": 10,
        "aggressiveness": 0.9,
    },
    "scrambler": {
        "open_threshold": 50,
        "pressure_multiplier": 0.9,
        "first_down_bias": 8,
        "aggressiveness": 0.9,
        "scramble_bonus": 15,
    },
}

# =============================================================================
# Route catalog
# =============================================================================
# Each route is five (target_depth, crossing) steps, one per round.


def _route(name, steps, break_round=None):
    return {
        "name": name,
        "steps": [{"target_depth": depth, "crossing": crossing} for depth, crossing in steps],
        "break_round": break_round,
    }


STANDARD_ROUTES = [
    # Short
    _route("flat", [(1, False), (3, True), (4, True), (4, False), (4, False)], 2),
    _route("slant", [(2, False), (4, True), (5, True), (5, True), (5, True)], 2),
    _route("hitch", [(3, False), (5, False), (5, False), (5, False), (5, False)], 2),
    _route("drag", [(1, True), (2, True), (3, True), (4, True), (5, True)]),
    # Medium
    _route("out", [(3, False), (6, False), (10, False), (10, False), (10, False)], 3),
    _route("curl", [(4, False), (8, False), (12, False), (11, False), (11, False)], 3),
    _route("dig", [(4, False), (8, False), (12, False), (12, True), (12, True)], 3),
    # Deep
    _route("post", [(5, False), (10, False), (15, False), (20, True), (25, False)], 3),
    _route("go", [(5, False), (10, False), (16, False), (22, False), (28, False)]),
    _route("corner", [(5, False), (10, False), (14, False), (18, False), (22, False)], 3),
]

REDZONE_ROUTES = [
    # Short
    _route("flat", [(1, False), (2, True), (3, True), (3, False), (3, False)], 2),
    _route("slant", [(2, False), (3, True), (4, True), (5, True), (5, True)], 2),
    # Medium
    _route("out", [(3, False), (6, False), (8, False), (8, False), (8, False)], 2),
    _route("curl", [(3, False), (7, False), (10, False), (9, False), (9, False)], 3),
    # Deep
    _route("fade", [(3, False), (8, False), (12, False), (16, False), (18, False)]),
    _route("corner", [(4, False), (8, False), (12, False), (16, False), (18, False)], 3),
    _route("post", [(4, False), (8, False), (13, True), (17, False), (20, False)], 3),
]

GOALLINE_ROUTES = [
    # Short
    _route("flat", [(1, False), (2, True), (3, True), (3, False), (3, False)], 2),
    _route("slant", [(1, False), (3, True), (4, True), (5, True), (5, True)], 2),
    _route("drag", [(1, True), (2, True), (3, True), (3, True), (4, True)]),
    # Medium
    _route("out", [(2, False), (4, False), (6, False), (6, False), (6, False)], 2),
    _route("fade", [(2, False), (4, False), (7, False), (9, False), (10, False)]),
    _route("corner", [(2, False), (4, False), (6, False), (8, False), (9, False)], 2),
    # Deep, to the back line of the end zone
    _route("back_fade", [(3, False), (6, False), (10, False), (14, False), (16, False)]),
]

ROUTE_CATALOG = {
    "goalline": GOALLINE_ROUTES,
    "redzone": REDZONE_ROUTES,
    "standard": STANDARD_ROUTES,
}

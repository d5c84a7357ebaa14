"""Line clash: pass protection against the pass rush, one round at a time."""

import logging
import random
from dataclasses import dataclass, replace
from typing import Optional
from uuid import UUID

from scrimmage.config import DEFAULT_CONFIG, EngineConfig
from scrimmage.core.models import Player
from scrimmage.simulation.matchups import Matchup
from scrimmage.simulation.resolvers.clash import ThresholdTable, chance, weighted_roll
from scrimmage.simulation.state import LinemanState, PlayPhase, PlayState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LineOutcome:
    """Pressure and side effects for one margin bucket."""

    pressure: float
    sack_chance: float = 0.0
    blocker_knockdown_chance: float = 0.0
    rusher_knockdown_chance: float = 0.0


# margin = rusher roll - blocker roll, checked high to low
LINE_CLASH_TABLE: ThresholdTable[LineOutcome] = ThresholdTable(
    [
        (20, LineOutcome(35, sack_chance=0.25, blocker_knockdown_chance=0.30)),
        (10, LineOutcome(25)),
        (5, LineOutcome(15)),
        (2, LineOutcome(10)),
        (-2, LineOutcome(5)),
        (-10, LineOutcome(0)),
    ],
    floor=LineOutcome(0, rusher_knockdown_chance=0.20),
)

UNBLOCKED = LineOutcome(40, sack_chance=0.35)

# Added to the rusher's roll per elapsed round
ROUND_RUSH_BONUS = 5

SACK_YARDS_MIN = 5
SACK_YARDS_MAX = 10


@dataclass(frozen=True)
class PairingResult:
    """One rusher's clash for one round."""

    rusher_id: UUID
    blocker_id: Optional[UUID]
    outcome: LineOutcome
    margin: Optional[float] = None
    sack: bool = False
    blocker_knocked_down: bool = False
    rusher_knocked_down: bool = False

    @property
    def pressure(self) -> float:
        return self.outcome.pressure

    @property
    def unblocked(self) -> bool:
        return self.blocker_id is None


@dataclass(frozen=True)
class LineClashResult:
    """All pairings for one round."""

    pairings: tuple[PairingResult, ...] = ()
    sacker_id: Optional[UUID] = None
    sack_yards: int = 0

    @property
    def pressure(self) -> float:
        return sum(p.pressure for p in self.pairings)

    @property
    def sacked(self) -> bool:
        return self.sacker_id is not None


def sack_loss(rng: random.Random) -> int:
    """Negative yardage for a sack, uniform in [-10, -5]."""
    return -rng.randint(SACK_YARDS_MIN, SACK_YARDS_MAX)


class LineClashResolver:
    """
    Resolves every rusher against its blocker for one round.

    A rusher with no blocker, or whose blocker has been knocked down,
    is unblocked: flat pressure and a high immediate sack chance.
    Otherwise the margin of the two weighted rolls (the rusher gaining
    ``ROUND_RUSH_BONUS`` per elapsed round) picks a row of
    ``LINE_CLASH_TABLE``.
    """

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def resolve_pairing(
        self,
        rusher: Player,
        blocker: Optional[Player],
        round_number: int,
        rng: random.Random,
    ) -> PairingResult:
        """
        Resolve one rusher against one blocker.

        Args:
            rusher: Defensive lineman
            blocker: Engaged offensive lineman, or None when unblocked
            round_number: 1-based round of the play
            rng: Shared random stream

        Returns:
            PairingResult with pressure and any sack or knockdown
        """
        if blocker is None:
            return PairingResult(
                rusher_id=rusher.id,
                blocker_id=None,
                outcome=UNBLOCKED,
                sack=chance(rng, UNBLOCKED.sack_chance),
            )

        variance = self.config.variance_factor
        weights = self.config.weights
        block_roll = weighted_roll(blocker.attributes, weights.ol_pass_block, rng, variance)
        rush_roll = weighted_roll(rusher.attributes, weights.dl_pass_rush, rng, variance)
        rush_roll += (round_number - 1) * ROUND_RUSH_BONUS

        margin = rush_roll - block_roll
        outcome = LINE_CLASH_TABLE.lookup(margin)

        sack = outcome.sack_chance > 0 and chance(rng, outcome.sack_chance)
        blocker_down = (
            outcome.blocker_knockdown_chance > 0
            and chance(rng, outcome.blocker_knockdown_chance)
        )
        rusher_down = (
            outcome.rusher_knockdown_chance > 0
            and chance(rng, outcome.rusher_knockdown_chance)
        )

        return PairingResult(
            rusher_id=rusher.id,
            blocker_id=blocker.id,
            outcome=outcome,
            margin=margin,
            sack=sack,
            blocker_knocked_down=blocker_down,
            rusher_knocked_down=rusher_down,
        )

    def resolve_round(
        self,
        state: PlayState,
        matchup: Matchup,
        rng: random.Random,
    ) -> tuple[PlayState, LineClashResult]:
        """Run every active rusher and return the next snapshot."""
        blockers = {b.player_id: b for b in state.blockers}
        rushers = []
        pairings = []

        for rusher_state in state.rushers:
            if rusher_state.knocked_down:
                rushers.append(rusher_state)
                continue

            blocker_state = blockers.get(rusher_state.engaged_with) if rusher_state.engaged else None
            blocker = None
            if blocker_state is not None and not blocker_state.knocked_down:
                blocker = matchup.player(blocker_state.player_id)

            pairing = self.resolve_pairing(
                matchup.player(rusher_state.player_id), blocker, state.round, rng
            )
            pairings.append(pairing)

            if pairing.blocker_knocked_down:
                blockers[pairing.blocker_id] = replace(blockers[pairing.blocker_id], knocked_down=True)
            rushers.append(
                replace(rusher_state, knocked_down=pairing.rusher_knocked_down)
                if pairing.rusher_knocked_down
                else rusher_state
            )

        sacker_id = next((p.rusher_id for p in pairings if p.sack), None)
        sack_yards = sack_loss(rng) if sacker_id is not None else 0
        result = LineClashResult(tuple(pairings), sacker_id=sacker_id, sack_yards=sack_yards)

        next_state = state.advance(
            blockers=tuple(blockers[b.player_id] for b in state.blockers),
            rushers=tuple(rushers),
            sacked=result.sacked,
            phase=PlayPhase.RESOLVED if result.sacked else PlayPhase.AWAITING_SEPARATION,
        ).add_pressure(result.pressure)

        logger.debug(
            f"Round {state.round} line: +{result.pressure:.0f} pressure "
            f"(total {next_state.total_pressure:.0f}), sacked={result.sacked}"
        )
        return next_state, result


def active_rushers(state: PlayState) -> list[LinemanState]:
    """Rushers still on their feet."""
    return [r for r in state.rushers if not r.knocked_down]

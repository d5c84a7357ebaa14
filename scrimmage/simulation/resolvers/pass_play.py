"""Round-by-round pass play resolution."""

import logging
import random
from dataclasses import dataclass, replace
from typing import Optional

from scrimmage.config import DEFAULT_CONFIG, EngineConfig, RouteTemplate
from scrimmage.core.enums import PlayOutcome
from scrimmage.core.errors import ExhaustedRoundsWithoutResolution
from scrimmage.core.models import DefensiveUnit, FieldPosition, OffensiveUnit, Player, PlayResult
from scrimmage.simulation.matchups import Matchup, build_matchup
from scrimmage.simulation.resolvers.base import PlayResolver
from scrimmage.simulation.resolvers.catch import CatchProbabilityCalculator
from scrimmage.simulation.resolvers.clash import chance
from scrimmage.simulation.resolvers.coverage import SeparationResolver
from scrimmage.simulation.resolvers.decision import QBDecision, QuarterbackDecisionEngine
from scrimmage.simulation.resolvers.line import LineClashResolver, active_rushers, sack_loss
from scrimmage.simulation.resolvers.routes import RouteSelector
from scrimmage.simulation.resolvers.throw import DESPERATION_DISCOUNT, ThrowResolver, ThrowResult
from scrimmage.simulation.resolvers.yac import YACResolver
from scrimmage.simulation.state import (
    LinemanState,
    PlayPhase,
    PlayState,
    QuarterbackState,
    ReceiverState,
)

logger = logging.getLogger(__name__)

TOUCHDOWN_POINTS = 7

# Desperation fallback
COVERAGE_SACK_PRESSURE = 60.0
COVERAGE_SACK_CHANCE = 0.40
SCRAMBLE_CHANCE = 0.30
SCRAMBLE_SPEED_RATE = 0.1
SCRAMBLE_AGILITY_RATE = 0.05
SCRAMBLE_EXTRA_MAX = 5.0
DESPERATION_MIN_THRESHOLD = 20.0


@dataclass(frozen=True)
class PlayTrace:
    """A resolved play and every snapshot it passed through."""

    result: PlayResult
    snapshots: tuple[PlayState, ...]
    decisions: tuple[QBDecision, ...] = ()

    @property
    def final_state(self) -> PlayState:
        return self.snapshots[-1]

    @property
    def rounds_played(self) -> int:
        return self.final_state.round


class PassPlayResolver(PlayResolver):
    """
    Drives the per-round state machine for one pass play.

    Each round runs the line clash, the separation clash, the catch
    calculation and the quarterback decision, producing a new PlayState
    after every phase. A sack or a throw ends the play; running out of
    rounds falls through to a desperation cascade.
    """

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self.route_selector = RouteSelector(config)
        self.line = LineClashResolver(config)
        self.separation = SeparationResolver(config)
        self.catch = CatchProbabilityCalculator()
        self.decision = QuarterbackDecisionEngine(config)
        self.thrower = ThrowResolver()
        self.yac = YACResolver(config)

    def resolve_play(
        self,
        offense: OffensiveUnit,
        defense: DefensiveUnit,
        field_position: FieldPosition,
        rng: random.Random,
    ) -> PlayResult:
        """Select routes and resolve one play."""
        offense.validate()
        matchup = build_matchup(offense, defense)
        routes = self.route_selector.select(offense.receivers, field_position, rng)
        return self.run(matchup, field_position, routes, rng).result

    def initial_state(
        self,
        matchup: Matchup,
        routes: list[tuple[Player, RouteTemplate]],
    ) -> PlayState:
        """Round 0 snapshot: routes assigned, nobody engaged yet."""
        blocked_by = {}
        for rusher_id, blocker_id in matchup.blocking.items():
            if blocker_id is not None:
                blocked_by.setdefault(blocker_id, rusher_id)

        return PlayState(
            quarterback=QuarterbackState(
                player_id=matchup.quarterback.id,
                trait=matchup.offense.trait,
            ),
            receivers=tuple(
                ReceiverState(
                    player_id=receiver.id,
                    route=route,
                    covered_by=matchup.defenders_for(receiver.id),
                )
                for receiver, route in routes
            ),
            blockers=tuple(
                LinemanState(player_id=b.id, engaged_with=blocked_by.get(b.id))
                for b in matchup.offense.linemen
            ),
            rushers=tuple(
                LinemanState(player_id=r.id, engaged_with=matchup.blocking.get(r.id))
                for r in matchup.defense.linemen
            ),
        )

    def run(
        self,
        matchup: Matchup,
        field_position: FieldPosition,
        routes: list[tuple[Player, RouteTemplate]],
        rng: random.Random,
    ) -> PlayTrace:
        """
        Resolve a play with routes already assigned.

        Args:
            matchup: Blocking and coverage for the drive
            field_position: Down and distance before the snap
            routes: Route per receiver, in read order
            rng: Shared random stream

        Returns:
            PlayTrace with the result and every intermediate snapshot

        Raises:
            ExhaustedRoundsWithoutResolution: No phase produced a result
        """
        qb = matchup.quarterback
        state = self.initial_state(matchup, routes)
        snapshots = [state]
        decisions = []
        result: Optional[PlayResult] = None

        for round_number in range(1, self.config.max_rounds + 1):
            state = state.advance(round=round_number, phase=PlayPhase.AWAITING_LINE_CLASH)

            state, line = self.line.resolve_round(state, matchup, rng)
            snapshots.append(state)
            if line.sacked:
                sacker = matchup.player(line.sacker_id)
                result = PlayResult(
                    outcome=PlayOutcome.SACK,
                    yards_gained=line.sack_yards,
                    rounds=state.round,
                    passer_id=qb.id,
                    sacker_id=sacker.id,
                    total_pressure=state.total_pressure,
                    description=f"{qb.display_name} sacked by {sacker.display_name} "
                    f"for a loss of {-line.sack_yards}",
                )
                break

            state = self.separation.resolve_round(state, matchup, rng)
            snapshots.append(state)
            state = self.catch.resolve_round(state, matchup)
            snapshots.append(state)

            decision = self.decision.decide(state, qb.attributes, field_position, rng)
            decisions.append(decision)
            if decision.throw:
                state = state.advance(
                    quarterback=replace(
                        state.quarterback, has_thrown=True, target_id=decision.target_id
                    ),
                )
                snapshots.append(state)
                if decision.is_throwaway:
                    result = self._throwaway(state, qb, state.round)
                else:
                    target = state.receiver(decision.target_id)
                    result = self._throw(state, target, matchup, field_position, rng)
                break

            state = state.advance(phase=PlayPhase.AWAITING_LINE_CLASH)
            snapshots.append(state)
        else:
            state = state.advance(phase=PlayPhase.DESPERATION)
            snapshots.append(state)
            result = self._desperation(state, matchup, field_position, rng)

        if result is None:
            raise ExhaustedRoundsWithoutResolution(state.round)

        final = state.advance(phase=PlayPhase.RESOLVED, sacked=result.is_sack)
        snapshots.append(final)
        logger.debug(f"Play resolved after {final.round} rounds: {result.display}")
        return PlayTrace(result=result, snapshots=tuple(snapshots), decisions=tuple(decisions))

    def _throw(
        self,
        state: PlayState,
        target: ReceiverState,
        matchup: Matchup,
        field_position: FieldPosition,
        rng: random.Random,
        desperation: bool = False,
    ) -> PlayResult:
        defender = (
            matchup.player(target.primary_defender_id)
            if target.primary_defender_id is not None
            else None
        )
        discount = DESPERATION_DISCOUNT if desperation else 1.0
        throw = self.thrower.resolve(target, defender, rng, discount=discount)
        rounds = self.config.max_rounds + 1 if desperation else state.round
        return self._pass_result(
            throw, state, target, matchup, field_position, rng, rounds, desperation
        )

    def _pass_result(
        self,
        throw: ThrowResult,
        state: PlayState,
        target: ReceiverState,
        matchup: Matchup,
        field_position: FieldPosition,
        rng: random.Random,
        rounds: int,
        desperation: bool,
    ) -> PlayResult:
        qb = matchup.quarterback
        receiver = matchup.player(target.player_id)
        common = dict(
            rounds=rounds,
            passer_id=qb.id,
            receiver_id=receiver.id,
            catch_threshold=throw.threshold,
            separation_margin=target.separation_margin,
            total_pressure=state.total_pressure,
            is_desperation=desperation,
        )

        if throw.completed:
            yac = self.yac.resolve(target, matchup, field_position.yards_from_goal, rng)
            if yac.touchdown:
                return PlayResult(
                    outcome=PlayOutcome.TOUCHDOWN,
                    yards_gained=yac.yards_gained,
                    air_yards=yac.air_yards,
                    yards_after_catch=yac.yards_after_catch,
                    points_scored=TOUCHDOWN_POINTS,
                    description=f"{qb.display_name} pass to {receiver.display_name}, "
                    f"{yac.yards_gained} yards, TOUCHDOWN",
                    **common,
                )
            return PlayResult(
                outcome=PlayOutcome.COMPLETE,
                yards_gained=yac.yards_gained,
                air_yards=yac.air_yards,
                yards_after_catch=yac.yards_after_catch,
                tackler_id=yac.tackler_id,
                description=f"{qb.display_name} pass complete to {receiver.display_name} "
                f"for {yac.yards_gained} yards",
                **common,
            )

        if throw.intercepted:
            interceptor = matchup.player(throw.interceptor_id)
            return PlayResult(
                outcome=PlayOutcome.INTERCEPTION,
                interceptor_id=interceptor.id,
                defender_id=throw.defender_id,
                description=f"{qb.display_name} pass intended for {receiver.display_name} "
                f"INTERCEPTED by {interceptor.display_name}",
                **common,
            )

        return PlayResult(
            outcome=PlayOutcome.INCOMPLETE,
            defender_id=throw.defender_id,
            description=f"{qb.display_name} pass incomplete to {receiver.display_name}",
            **common,
        )

    def _throwaway(self, state: PlayState, qb: Player, rounds: int, desperation: bool = False) -> PlayResult:
        return PlayResult(
            outcome=PlayOutcome.THROWAWAY,
            rounds=rounds,
            passer_id=qb.id,
            total_pressure=state.total_pressure,
            is_desperation=desperation,
            description=f"{qb.display_name} throws it away",
        )

    def _desperation(
        self,
        state: PlayState,
        matchup: Matchup,
        field_position: FieldPosition,
        rng: random.Random,
    ) -> Optional[PlayResult]:
        """
        Fallback once every round has passed without a throw.

        Heavy pressure may collapse into a coverage sack; a scrambling
        quarterback may take off; otherwise the ball is forced to the best
        receiver if anyone is catchable, or thrown away.
        """
        qb = matchup.quarterback
        profile = self.config.trait_profile(state.quarterback.trait)
        rounds = self.config.max_rounds + 1

        if state.total_pressure > COVERAGE_SACK_PRESSURE and chance(rng, COVERAGE_SACK_CHANCE):
            rushers = active_rushers(state)
            sacker_id = rushers[0].player_id if rushers else None
            loss = sack_loss(rng)
            return PlayResult(
                outcome=PlayOutcome.SACK,
                yards_gained=loss,
                rounds=rounds,
                passer_id=qb.id,
                sacker_id=sacker_id,
                total_pressure=state.total_pressure,
                is_desperation=True,
                description=f"{qb.display_name} holds it too long, coverage sack for a loss of {-loss}",
            )

        if profile.can_scramble and chance(rng, SCRAMBLE_CHANCE):
            gain = int(round(
                qb.get_attribute("speed") * SCRAMBLE_SPEED_RATE
                + qb.get_attribute("agility") * SCRAMBLE_AGILITY_RATE
                + rng.uniform(0, SCRAMBLE_EXTRA_MAX)
            ))
            touchdown = gain >= field_position.yards_from_goal
            yards = field_position.yards_from_goal if touchdown else gain
            return PlayResult(
                outcome=PlayOutcome.TOUCHDOWN if touchdown else PlayOutcome.SCRAMBLE,
                yards_gained=yards,
                rounds=rounds,
                rusher_id=qb.id,
                total_pressure=state.total_pressure,
                is_desperation=True,
                points_scored=TOUCHDOWN_POINTS if touchdown else 0,
                description=f"{qb.display_name} scrambles for {yards} yards"
                + (", TOUCHDOWN" if touchdown else ""),
            )

        best = state.best_receiver()
        if best is not None and best.catch_probability > DESPERATION_MIN_THRESHOLD:
            return self._throw(state, best, matchup, field_position, rng, desperation=True)

        return self._throwaway(state, qb, rounds, desperation=True)

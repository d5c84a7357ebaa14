"""Route selection for a pass play."""

import random
from typing import Optional

from scrimmage.config import DEFAULT_CONFIG, EngineConfig, RouteTemplate
from scrimmage.core.enums import FieldZone, RouteDepthClass
from scrimmage.core.models import FieldPosition, Player

# Nearest substitute when a zone has no route of the wanted depth
FALLBACK_ORDER = {
    RouteDepthClass.DEEP: (RouteDepthClass.DEEP, RouteDepthClass.MEDIUM, RouteDepthClass.SHORT),
    RouteDepthClass.MEDIUM: (RouteDepthClass.MEDIUM, RouteDepthClass.SHORT, RouteDepthClass.DEEP),
    RouteDepthClass.SHORT: (RouteDepthClass.SHORT, RouteDepthClass.MEDIUM, RouteDepthClass.DEEP),
}

# Route depth handed out to the first three receivers, fastest first
SPREAD_CLASSES = (RouteDepthClass.DEEP, RouteDepthClass.MEDIUM, RouteDepthClass.SHORT)


class RouteSelector:
    """
    Assigns a route template to every eligible receiver.

    With three or more receivers the first three (in read order) always
    cover a short, a medium and a deep route: the fastest runs deep, the
    next medium, the slowest short; speed ties keep read order. Anyone
    else draws from the whole zone catalog. With fewer than three, the
    first receiver runs a route deep enough to reach the line to gain.
    Specific templates are drawn from the shared random stream.
    """

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG) -> None:
        self.config = config

    def catalog(self, zone: FieldZone) -> dict[RouteDepthClass, list[RouteTemplate]]:
        """Zone catalog grouped by depth class, catalog order kept."""
        grouped: dict[RouteDepthClass, list[RouteTemplate]] = {c: [] for c in RouteDepthClass}
        for template in self.config.routes_for(zone):
            grouped[template.depth_class].append(template)
        return grouped

    def select(
        self,
        receivers: list[Player],
        field_position: FieldPosition,
        rng: random.Random,
    ) -> list[tuple[Player, RouteTemplate]]:
        """Pick routes, returned in the same order as ``receivers``."""
        zone = field_position.zone
        grouped = self.catalog(zone)
        wanted = self._wanted_classes(receivers, field_position)

        assignments = []
        for receiver, depth_class in zip(receivers, wanted):
            if depth_class is None:
                template = rng.choice(self.config.routes_for(zone))
            else:
                template = rng.choice(self._with_fallback(grouped, depth_class))
            assignments.append((receiver, template))
        return assignments

    def _wanted_classes(
        self,
        receivers: list[Player],
        field_position: FieldPosition,
    ) -> list[Optional[RouteDepthClass]]:
        wanted: list[Optional[RouteDepthClass]] = [None] * len(receivers)
        if len(receivers) >= 3:
            # sorted() is stable, so equal speed keeps read order
            ranked = sorted(range(3), key=lambda i: -receivers[i].get_attribute("speed"))
            for index, depth_class in zip(ranked, SPREAD_CLASSES):
                wanted[index] = depth_class
        elif receivers:
            wanted[0] = RouteDepthClass.from_max_depth(field_position.yards_to_go)
        return wanted

    @staticmethod
    def _with_fallback(
        grouped: dict[RouteDepthClass, list[RouteTemplate]],
        depth_class: RouteDepthClass,
    ) -> list[RouteTemplate]:
        for candidate in FALLBACK_ORDER[depth_class]:
            if grouped[candidate]:
                return grouped[candidate]
        # EngineConfig guarantees every zone has at least one route
        raise ValueError("route catalog zone is empty")

"""Play resolvers for simulation."""

from scrimmage.simulation.resolvers.base import DriveResolver, PlayResolver
from scrimmage.simulation.resolvers.pass_play import PassPlayResolver, PlayTrace

__all__ = [
    "DriveResolver",
    "PassPlayResolver",
    "PlayResolver",
    "PlayTrace",
]

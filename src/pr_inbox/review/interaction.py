"""
Interaction tracking

Folds timestamped comments and reviews into the most recent one.
"""

from dataclasses import dataclass
from datetime import datetime
from functools import reduce
from typing import Iterable

from ..models.pull_request import EARLIEST


@dataclass(frozen=True)
class Interaction:
    """A comment or review body and the time it was published."""
    body: str = ""
    at: datetime = EARLIEST

    def is_before(self, other: "Interaction") -> bool:
        return self.at < other.at

    def is_after(self, other: "Interaction") -> bool:
        return self.at > other.at


NO_INTERACTION = Interaction()


def _keep_latest(current: Interaction, candidate: Interaction) -> Interaction:
    # Only a strictly later candidate replaces the current one
    return candidate if candidate.is_after(current) else current


def latest_interaction(interactions: Iterable[Interaction], seed: Interaction = NO_INTERACTION) -> Interaction:
    """Return the most recent interaction, or ``seed`` when none is later."""
    return reduce(_keep_latest, interactions, seed)

"""Turn counter of the core simulation."""

from __future__ import annotations

import logging
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass
class Simulation:
    """The turn-based simulation state."""

    current_turn: int = 0

    def __post_init__(self) -> None:
        log.info("Initializing simulation")

    def process_turn(self) -> None:
        """Advance to the next turn."""
        self.current_turn += 1
        log.info("Processing turn %d", self.current_turn)
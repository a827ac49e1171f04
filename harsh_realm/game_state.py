"""Top-level game state: simulation plus solar system."""

from __future__ import annotations

import datetime as _dt
import os

from harsh_realm.simulation import Simulation
from harsh_realm.solar_system import SolarSystemManager

START_DATE = _dt.date(2070, 1, 1)
DAYS_PER_TURN = 30.0


class GameState:
    """The whole game: the simulation and the solar system it runs in."""

    def __init__(self) -> None:
        self.simulation = Simulation()
        self.solar_system = SolarSystemManager(START_DATE)

    def __repr__(self) -> str:
        return f"GameState(simulation={self.simulation!r}, solar_system={self.solar_system!r})"

    def load_solar_system_data(self, csv_path: str | os.PathLike[str]) -> None:
        """Load the solar system's bodies from a CSV file."""
        self.solar_system.load_from_csv(csv_path)

    def update_world(self) -> None:
        """Move every body along its orbit by one turn's worth of days."""
        self.solar_system.update_all_positions(DAYS_PER_TURN)

    def process_turn(self) -> None:
        """Update the world, then advance the simulation by one turn."""
        self.update_world()
        self.simulation.process_turn()

    def formatted_date(self) -> str:
        """The game date as 'YYYY Month DD'."""
        return self.solar_system.formatted_date()
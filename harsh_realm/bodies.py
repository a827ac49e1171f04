"""Celestial bodies of the solar system."""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, field
from typing import Optional

from harsh_realm.orbits import OrbitalState


class CelestialBodyType(enum.Enum):
    STAR = "Star"
    PLANET = "Planet"
    MOON = "Moon"
    ASTEROID = "Asteroid"
    COMET = "Comet"
    DWARF_PLANET = "DwarfPlanet"


@dataclass
class CelestialBody:
    """A named body; mass in kg, diameter in km."""

    name: str
    body_type: CelestialBodyType
    region: str
    mass: float
    diameter: float
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    orbital_state: Optional[OrbitalState] = None

    def with_orbital_state(self, orbital_state: OrbitalState) -> "CelestialBody":
        """Attach an orbital state and return the body."""
        self.orbital_state = orbital_state
        return self

    def update_orbital_position(self, days_elapsed: float) -> None:
        """Advance the orbit, if the body has one."""
        if self.orbital_state is not None:
            self.orbital_state.update_position(days_elapsed)

    def has_significant_position_change(
        self, previous_angle: float, threshold_degrees: float
    ) -> bool:
        """Whether the body's angle moved at least the threshold; False without an orbit."""
        if self.orbital_state is None:
            return False
        return self.orbital_state.is_significant_change(previous_angle, threshold_degrees)
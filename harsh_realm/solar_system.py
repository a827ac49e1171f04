"""The solar system: loading bodies from CSV and advancing their orbits."""

from __future__ import annotations

import csv
import datetime as _dt
import logging
import os
from typing import Optional

from harsh_realm.bodies import CelestialBody, CelestialBodyType
from harsh_realm.orbits import OrbitalParameters, OrbitalState, format_date

log = logging.getLogger(__name__)

_SIGNIFICANT_CHANGE_DEGREES = 1.0


def parse_optional_float(value: Optional[str]) -> Optional[float]:
    """Parse a mass-like field: missing, empty or '?' gives None."""
    if value is None or value == "" or value == "?":
        return None
    return float(value)


def _optional_number(value: Optional[str], column: str) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"invalid number in column {column!r}: {value!r}") from exc


def _optional_text(value: Optional[str]) -> Optional[str]:
    return value if value else None


def determine_body_type(name: str, body_type: Optional[str]) -> CelestialBodyType:
    """Classify a body from its type string, falling back to its name."""
    if body_type == "Star":
        return CelestialBodyType.STAR
    if body_type in ("Rocky Planet", "Gas Giant Planet"):
        return CelestialBodyType.PLANET
    if body_type is not None and "Asteroid" in body_type:
        return CelestialBodyType.ASTEROID
    if body_type == "Rocky Moon":
        return CelestialBodyType.MOON
    if body_type == "Dwarf Planet":
        return CelestialBodyType.DWARF_PLANET

    lower = name.lower()
    if "moon" in lower or "luna" in lower:
        return CelestialBodyType.MOON
    if any(word in lower for word in ("asteroid", "ceres", "pallas", "vesta")):
        return CelestialBodyType.ASTEROID
    if "comet" in lower:
        return CelestialBodyType.COMET
    if any(word in lower for word in ("pluto", "eris", "makemake", "haumea")):
        return CelestialBodyType.DWARF_PLANET
    return CelestialBodyType.PLANET


class SolarSystemManager:
    """Holds every celestial body, the game date and last logged angles."""

    def __init__(self, start_date: _dt.date) -> None:
        self.celestial_bodies: dict[str, CelestialBody] = {}
        self.game_date = start_date
        self.previous_positions: dict[str, float] = {}

    def __repr__(self) -> str:
        return (
            f"SolarSystemManager(bodies={len(self.celestial_bodies)}, "
            f"game_date={self.game_date!r})"
        )

    def load_from_csv(self, csv_path: str | os.PathLike[str]) -> None:
        """Load bodies from a CSV file; raise OSError or ValueError on bad input."""
        log.info("Loading solar system data from CSV: %s", csv_path)
        loaded = skipped = 0

        with open(csv_path, newline="", encoding="utf-8") as handle:
            reader = csv.DictReader(handle)
            if reader.fieldnames is None or "body" not in reader.fieldnames:
                raise ValueError("CSV data has no 'body' column")

            for row in reader:
                if None in row or any(v is None for v in row.values()):
                    raise ValueError(
                        f"line {reader.line_num}: wrong number of fields"
                    )

                name = row["body"]
                if name == "The Sun":
                    log.info("Skipping The Sun (center of coordinate system)")
                    continue

                semi_major_axis = _optional_number(row.get("semi_major_axis"), "semi_major_axis")
                eccentricity = _optional_number(row.get("eccentricity"), "eccentricity")
                orbital_period = _optional_number(row.get("orbital_period"), "orbital_period")
                mean_anomaly = _optional_number(row.get("mean_anomaly"), "mean_anomaly")
                try:
                    mass = parse_optional_float(row.get("mass"))
                except ValueError as exc:
                    raise ValueError(f"invalid number in column 'mass': {row.get('mass')!r}") from exc
                diameter = _optional_number(row.get("D"), "D")
                type_text = _optional_text(row.get("type"))
                region = row.get("region") or ""

                if semi_major_axis is None or eccentricity is None or orbital_period is None:
                    log.warning(
                        "Skipping %s - missing essential orbital data "
                        "(semi_major_axis: %s, eccentricity: %s, orbital_period: %s)",
                        name, semi_major_axis, eccentricity, orbital_period,
                    )
                    skipped += 1
                    continue

                params = OrbitalParameters(
                    semi_major_axis=semi_major_axis,
                    eccentricity=eccentricity,
                    orbital_period=orbital_period,
                    mean_anomaly=mean_anomaly if mean_anomaly is not None else 0.0,
                )
                body = CelestialBody(
                    name,
                    determine_body_type(name, type_text),
                    region,
                    mass if mass is not None else 0.0,
                    diameter if diameter is not None else 0.0,
                ).with_orbital_state(OrbitalState(params, self.game_date))

                self.previous_positions[name] = body.orbital_state.current_position.angle
                self.celestial_bodies[name] = body
                loaded += 1

        log.info(
            "Loaded %d celestial bodies from CSV (skipped %d due to missing data)",
            loaded, skipped,
        )

    def update_all_positions(self, days_elapsed: float) -> None:
        """Advance every orbit and the game date by the given number of days."""
        log.info("Updating positions of all celestial bodies for %s days", days_elapsed)
        changes = []

        for name, body in self.celestial_bodies.items():
            state = body.orbital_state
            if state is None:
                continue
            previous_angle = self.previous_positions.get(name, 0.0)
            state.update_position(days_elapsed)
            if state.is_significant_change(previous_angle, _SIGNIFICANT_CHANGE_DEGREES):
                changes.append(
                    (name, state.formatted_date(), state.angle_degrees(),
                     state.current_position.distance)
                )
                self.previous_positions[name] = state.current_position.angle

        if changes:
            log.info("Significant position changes detected:")
            for name, date_text, degrees, distance in changes:
                log.info(
                    "  %s: %s - Position: { degrees: %.2f, distance: %.0f km }",
                    name, date_text, degrees, distance,
                )

        self.game_date = self.game_date + _dt.timedelta(days=int(days_elapsed))

    def get_body(self, name: str) -> Optional[CelestialBody]:
        """The body with this name, or None."""
        return self.celestial_bodies.get(name)

    def formatted_date(self) -> str:
        """The game date as 'YYYY Month DD'."""
        return format_date(self.game_date)
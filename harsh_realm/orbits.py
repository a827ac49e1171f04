"""Two-dimensional elliptical orbits around the Sun."""

from __future__ import annotations

import datetime as _dt
import math
from dataclasses import dataclass, field

_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_date(date: _dt.date) -> str:
    """Format a date as 'YYYY Month DD' with English month names."""
    return f"{date.year:04d} {_MONTH_NAMES[date.month - 1]} {date.day:02d}"


@dataclass
class PolarPosition:
    """Position relative to the Sun: distance in km, angle in radians."""

    distance: float
    angle: float


@dataclass
class CartesianPosition:
    """Position relative to the Sun in km."""

    x: float
    y: float


@dataclass
class OrbitalParameters:
    """Elements of a 2D elliptical orbit."""

    semi_major_axis: float  # km
    eccentricity: float
    orbital_period: float  # days
    mean_anomaly: float  # degrees, at epoch


def mean_anomaly_to_true_anomaly(mean_anomaly: float, eccentricity: float) -> float:
    """Approximate the true anomaly for a mean anomaly (radians)."""
    if eccentricity < 0.1:
        return mean_anomaly + eccentricity * math.sin(mean_anomaly)

    eccentric_anomaly = mean_anomaly
    for _ in range(5):
        delta = (
            eccentric_anomaly - eccentricity * math.sin(eccentric_anomaly) - mean_anomaly
        ) / (1.0 - eccentricity * math.cos(eccentric_anomaly))
        eccentric_anomaly -= delta

    ratio = math.sqrt(1.0 + eccentricity) / math.sqrt(1.0 - eccentricity)
    return 2.0 * math.atan(ratio * math.tan(eccentric_anomaly / 2.0))


def distance_at_angle(semi_major_axis: float, eccentricity: float, true_anomaly: float) -> float:
    """Distance from the Sun at the given true anomaly."""
    return (
        semi_major_axis
        * (1.0 - eccentricity * eccentricity)
        / (1.0 + eccentricity * math.cos(true_anomaly))
    )


@dataclass(init=False)
class OrbitalState:
    """Current position and date of a body on its orbit."""

    parameters: OrbitalParameters
    current_position: PolarPosition
    current_date: _dt.date = field(compare=True)

    def __init__(self, parameters: OrbitalParameters, start_date: _dt.date) -> None:
        initial_angle = math.radians(parameters.mean_anomaly)
        initial_distance = distance_at_angle(
            parameters.semi_major_axis, parameters.eccentricity, initial_angle
        )
        self.parameters = parameters
        self.current_position = PolarPosition(initial_distance, initial_angle)
        self.current_date = start_date

    def update_position(self, days_elapsed: float) -> None:
        """Advance the body along its orbit by the given number of days."""
        params = self.parameters
        mean_motion = 2.0 * math.pi / params.orbital_period
        new_mean_anomaly = self.current_position.angle + mean_motion * days_elapsed

        true_anomaly = mean_anomaly_to_true_anomaly(new_mean_anomaly, params.eccentricity)
        new_distance = distance_at_angle(
            params.semi_major_axis, params.eccentricity, true_anomaly
        )
        new_angle = math.fmod(true_anomaly + 2.0 * math.pi, 2.0 * math.pi)

        self.current_position = PolarPosition(new_distance, new_angle)
        self.current_date = self.current_date + _dt.timedelta(days=int(days_elapsed))

    def to_cartesian(self) -> CartesianPosition:
        """Current position in Cartesian coordinates."""
        pos = self.current_position
        return CartesianPosition(
            pos.distance * math.cos(pos.angle), pos.distance * math.sin(pos.angle)
        )

    def is_significant_change(self, previous_angle: float, threshold_degrees: float) -> bool:
        """True when the angle moved by at least the threshold since previous_angle."""
        diff = abs(self.current_position.angle - previous_angle)
        return diff * 180.0 / math.pi >= threshold_degrees

    def formatted_date(self) -> str:
        """The current date as 'YYYY Month DD'."""
        return format_date(self.current_date)

    def angle_degrees(self) -> float:
        """The current angle in degrees."""
        return self.current_position.angle * 180.0 / math.pi
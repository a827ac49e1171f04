"""Screen layout of the solar-system views: scales, orbit paths, belt mesh and labels."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional

from harsh_realm.orbits import OrbitalState
from harsh_realm.solar_system import SolarSystemManager

Point = tuple[float, float]

AU_KM = 149_597_870.7
ORIGIN: Point = (0.0, 0.0)

INNER_SCALE = 200.0  # 1 AU = 200 pixels
BELT_SCALE = 120.0
OUTER_MARGIN = 40.0

ASTEROID_BELT_AU = 2.77
ASTEROID_BAND_WIDTH_AU = 0.4
ASTEROID_BELT_LABEL = "Asteroid Belt"

SUN_RADIUS = 15.0
SUN_LABEL_OFFSET = 20.0  # below the Sun's disc plus a small margin
LABEL_OFFSET: Point = (0.0, -12.0)  # labels sit bottom-centre of their body

INNER_PLANETS = ("Mercury", "Venus", "Earth", "Mars")
OUTER_PLANETS = ("Jupiter", "Saturn", "Uranus", "Neptune", "Pluto")


class ViewMode(enum.Enum):
    """Which part of the solar system is shown."""

    INNER = "Inner"
    BELT = "Belt"
    OUTER = "Outer"


@dataclass
class AnnulusMesh:
    """Triangle-list mesh of a flat ring in the z = 0 plane."""

    positions: list[tuple[float, float, float]] = field(default_factory=list)
    normals: list[tuple[float, float, float]] = field(default_factory=list)
    uvs: list[tuple[float, float]] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class Label:
    """A text label; view None means it is shown in every view."""

    text: str
    view: Optional[ViewMode]
    font_size: float
    fixed_position: Optional[Point] = None


def _check_segments(segments: int) -> None:
    if segments < 1:
        raise ValueError(f"segments must be at least 1, got {segments}")


def ellipse_points(
    semi_major_axis_km: float,
    eccentricity: float,
    scale: float,
    segments: int,
    center: Point = ORIGIN,
) -> list[Point]:
    """Closed polyline of an orbit with the Sun at a focus; segments + 1 points."""
    _check_segments(segments)
    a_au = semi_major_axis_km / AU_KM
    b_au = a_au * math.sqrt(1.0 - eccentricity * eccentricity)
    c_au = a_au * eccentricity
    cx, cy = center
    points = []
    for step in range(segments + 1):
        theta = step / segments * 2.0 * math.pi
        points.append(
            (
                cx + (a_au * math.cos(theta) - c_au) * scale,
                cy + (b_au * math.sin(theta)) * scale,
            )
        )
    return points


def body_screen_position(
    orbital_state: OrbitalState, scale: float, center: Point = ORIGIN
) -> Point:
    """Screen position of a body at the given pixels-per-AU scale."""
    cart = orbital_state.to_cartesian()
    cx, cy = center
    return (cx + cart.x / AU_KM * scale, cy + cart.y / AU_KM * scale)


def compute_outer_scale(
    solar_system: SolarSystemManager, width: float, height: float
) -> float:
    """Pixels per AU so the farthest outer-planet aphelion fits in the window."""
    max_aphelion = 0.0
    for name in OUTER_PLANETS:
        body = solar_system.get_body(name)
        if body is None or body.orbital_state is None:
            continue
        params = body.orbital_state.parameters
        aphelion = params.semi_major_axis / AU_KM * (1.0 + params.eccentricity)
        max_aphelion = max(max_aphelion, aphelion)
    if max_aphelion <= 0.0:
        raise ValueError("no outer planet with an orbit is loaded")
    half = 0.5 * min(width, height) - OUTER_MARGIN
    return half / max_aphelion


def scale_for_view(
    view_mode: ViewMode, solar_system: SolarSystemManager, width: float, height: float
) -> float:
    """Pixels per AU used by the given view."""
    if view_mode is ViewMode.INNER:
        return INNER_SCALE
    if view_mode is ViewMode.BELT:
        return BELT_SCALE
    return compute_outer_scale(solar_system, width, height)


def annulus_mesh(inner_radius: float, outer_radius: float, segments: int) -> AnnulusMesh:
    """Ring between two radii, outer and inner vertices alternating."""
    _check_segments(segments)
    mesh = AnnulusMesh()
    for step in range(segments + 1):
        theta = step / segments * math.tau
        sin_t, cos_t = math.sin(theta), math.cos(theta)
        mesh.positions.append((outer_radius * cos_t, outer_radius * sin_t, 0.0))
        mesh.uvs.append((1.0, 0.0))
        mesh.normals.append((0.0, 0.0, 1.0))
        mesh.positions.append((inner_radius * cos_t, inner_radius * sin_t, 0.0))
        mesh.uvs.append((0.0, 1.0))
        mesh.normals.append((0.0, 0.0, 1.0))
    for step in range(segments):
        start = step * 2
        mesh.indices.extend(
            (start, start + 1, start + 2, start + 2, start + 1, start + 3)
        )
    return mesh


def asteroid_belt_mesh(segments: int = 256) -> AnnulusMesh:
    """The translucent asteroid band of the inner view."""
    inner = (ASTEROID_BELT_AU - ASTEROID_BAND_WIDTH_AU * 0.5) * INNER_SCALE
    outer = (ASTEROID_BELT_AU + ASTEROID_BAND_WIDTH_AU * 0.5) * INNER_SCALE
    return annulus_mesh(inner, outer, segments)


def build_labels(solar_system: SolarSystemManager) -> list[Label]:
    """Every label of every view, in drawing order."""
    labels = [Label("Sun", None, 16.0, (0.0, -SUN_LABEL_OFFSET))]
    labels.extend(Label(name, ViewMode.INNER, 14.0) for name in INNER_PLANETS)
    labels.append(Label(ASTEROID_BELT_LABEL, ViewMode.INNER, 16.0))
    labels.append(Label(ASTEROID_BELT_LABEL, ViewMode.OUTER, 16.0))
    labels.extend(
        Label(name, ViewMode.BELT, 12.0)
        for name, body in solar_system.celestial_bodies.items()
        if "asteroid belt" in body.region.lower()
    )
    labels.append(Label("Jupiter", ViewMode.BELT, 14.0))
    labels.extend(Label(name, ViewMode.OUTER, 14.0) for name in OUTER_PLANETS)
    return labels


def label_position(
    label: Label, solar_system: SolarSystemManager, scale: float, center: Point = ORIGIN
) -> Optional[Point]:
    """Where a label goes at this scale, or None if its body has no position."""
    if label.fixed_position is not None:
        return label.fixed_position
    cx, cy = center
    if label.text == ASTEROID_BELT_LABEL:
        return (cx, cy - ASTEROID_BELT_AU * scale + LABEL_OFFSET[1])
    body = solar_system.get_body(label.text)
    if body is None or body.orbital_state is None:
        return None
    x, y = body_screen_position(body.orbital_state, scale, center)
    return (x + LABEL_OFFSET[0], y + LABEL_OFFSET[1])


def visible_labels(labels: Iterable[Label], view_mode: ViewMode) -> list[Label]:
    """The labels shown in the given view."""
    return [label for label in labels if label.view is None or label.view is view_mode]
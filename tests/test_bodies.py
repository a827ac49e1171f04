import datetime as dt
import math

from harsh_realm.bodies import CelestialBody, CelestialBodyType
from harsh_realm.orbits import OrbitalParameters, OrbitalState

START = dt.date(2070, 1, 1)


def make_state(mean_anomaly=0.0):
    params = OrbitalParameters(149598023.0, 0.0167086, 365.256363004, mean_anomaly)
    return OrbitalState(params, START)


def make_body():
    return CelestialBody("Earth", CelestialBodyType.PLANET, "Inner System", 5.97e24, 12742.0)


def test_new_body_has_no_orbit():
    body = make_body()
    assert body.orbital_state is None
    assert body.name == "Earth"
    assert body.body_type is CelestialBodyType.PLANET


def test_ids_are_unique():
    ids = {make_body().id for _ in range(5)}
    assert len(ids) == 5


def test_ids_differ_between_bodies():
    first, second = make_body(), make_body()
    assert first.id.int != second.id.int


def test_with_orbital_state_returns_same_body():
    body = make_body()
    state = make_state()
    result = body.with_orbital_state(state)
    assert result is body
    assert body.orbital_state is state


def test_update_orbital_position_moves_body():
    body = make_body().with_orbital_state(make_state())
    before = body.orbital_state.current_position.angle
    body.update_orbital_position(30.0)
    assert body.orbital_state.current_position.angle > before
    assert body.orbital_state.current_date == START + dt.timedelta(days=30)


def test_update_without_orbit_keeps_no_orbit():
    body = make_body()
    body.update_orbital_position(30.0)
    assert body.orbital_state is None


def test_significant_change_without_orbit_is_false():
    assert make_body().has_significant_position_change(0.0, 0.0) is False


def test_significant_change_with_orbit():
    body = make_body().with_orbital_state(make_state(0.0))
    previous = body.orbital_state.current_position.angle
    body.update_orbital_position(30.0)
    assert body.has_significant_position_change(previous, 1.0) is True
    current = body.orbital_state.current_position.angle
    assert body.has_significant_position_change(current, 1.0) is False


def test_significant_change_threshold_in_degrees():
    body = make_body().with_orbital_state(make_state(10.0))
    assert body.has_significant_position_change(math.radians(10.0), 0.5) is False
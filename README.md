# harsh_realm

The core of a turn-based strategy game set in the solar system. It models
2D elliptical orbits, loads celestial bodies from a CSV table, advances game
time turn by turn, and computes the screen-space layout for drawing the
inner system, the asteroid belt and the outer system.

It needs nothing beyond the Python standard library (Python 3.10 or later).

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Starting a game

```python
from harsh_realm.game_state import GameState

game = GameState()                       # starts on 2070-01-01
game.load_solar_system_data("solar_system_data.csv")

print(game.formatted_date())             # "2070 January 01"
game.process_turn()                      # each turn advances 30 days
print(game.simulation.current_turn)      # 1
print(game.formatted_date())             # "2070 January 31"
```

`GameState.update_world()` moves every body along its orbit by 30 days
without counting a turn; `process_turn()` does that and then advances the
simulation's turn counter (`harsh_realm.simulation.Simulation`).

## The solar system data

`SolarSystemManager.load_from_csv` reads a CSV file whose header row holds
these columns:

| column            | meaning                                   |
|-------------------|-------------------------------------------|
| `body`            | name of the body (required column)        |
| `type`            | e.g. `Rocky Planet`, `Gas Giant Planet`, `Dwarf Planet`, `Rocky Moon`, `Star`, or anything containing `Asteroid` |
| `semi_major_axis` | km                                        |
| `eccentricity`    |                                           |
| `orbital_period`  | days                                      |
| `mean_anomaly`    | degrees at the start date (defaults to 0) |
| `mass`            | kg; `?` or empty means unknown (0)        |
| `D`               | diameter in km (empty means 0)            |
| `region`          | e.g. `Inner Solar System`, `Asteroid Belt` |

The row for `The Sun` is skipped, as is every row missing the semi-major
axis, eccentricity or orbital period. When the type is missing or not
recognised, `determine_body_type` guesses it from the name. A missing file
raises `OSError`; a missing `body` column, a row with the wrong number of
fields or a value that is not a number raises `ValueError`.

```python
from datetime import date
from harsh_realm.solar_system import SolarSystemManager

solar = SolarSystemManager(date(2070, 1, 1))
solar.load_from_csv("solar_system_data.csv")
earth = solar.get_body("Earth")
print(earth.orbital_state.to_cartesian())
solar.update_all_positions(30.0)
print(solar.formatted_date())            # "2070 January 31"
```

`update_all_positions` logs (through `logging`) each body whose angle has
moved by at least one degree since it was last logged.

## Orbits

`harsh_realm.orbits` holds the orbital model: `OrbitalParameters`,
`PolarPosition`, `CartesianPosition` and `OrbitalState` (with
`update_position()`, `to_cartesian()`, `angle_degrees()`,
`is_significant_change()` and `formatted_date()`), plus the helpers
`mean_anomaly_to_true_anomaly`, `distance_at_angle` and `format_date`.

`harsh_realm.bodies` defines `CelestialBodyType` and `CelestialBody`.

## Views

`harsh_realm.view` computes what a renderer needs for the three views in
`ViewMode` (inner system, asteroid belt, outer system):

- `ellipse_points` – the closed polyline of an orbit, Sun at a focus;
- `body_screen_position` – a body's position at a pixels-per-AU scale;
- `scale_for_view` and `compute_outer_scale` – the scale of each view
  (the outer scale fits the farthest outer-planet aphelion into the window
  and raises `ValueError` when no outer planet is loaded);
- `annulus_mesh` and `asteroid_belt_mesh` – the asteroid-belt ring as an
  `AnnulusMesh` triangle list;
- `build_labels`, `label_position` and `visible_labels` – the `Label`s of
  each view and where they go.

## Game model

`harsh_realm.model` defines the game's data types: `ResourceType`,
`PersonType`, `BuildingType`, `UnitDomain`, `InstallationPurpose`,
`SpacecraftModuleType`, the locations (`SurfaceLocation` on a `HexCoord`,
`OrbitLocation`, `DeepSpaceLocation`, `DockedLocation`), `Tile`, `Unit`,
`Faction`, `Product` with `ProductInput` and `ProductOutput`, `Process`,
`Installation`, `Settlement` and `Spacecraft`. Counts held by settlements,
spacecraft and processes must be non-negative integers within range.

## What it does not do

The package has no window, renderer or user interface and no command to
run: `harsh_realm.view` only computes coordinates and meshes. It ships no
solar system data file; supply your own CSV in the format above. Turns
only move bodies and count; factions, production and the model types take
no part in turn processing yet.
"""Data model of the game world: resources, people, places, production and structures."""

from __future__ import annotations

import enum
import uuid
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional, Union

_NIL_UUID = uuid.UUID(int=0)
_U32_MAX = 2**32 - 1
_U64_MAX = 2**64 - 1


def _check_counts(counts: Mapping[object, int], what: str, limit: int) -> None:
    for key, count in counts.items():
        if not isinstance(count, int) or isinstance(count, bool):
            raise TypeError(f"{what} count for {key!r} must be an integer, got {count!r}")
        if not 0 <= count <= limit:
            raise ValueError(f"{what} count for {key!r} out of range: {count}")


class ResourceType(enum.Enum):
    """Kinds of material that can be extracted, refined or produced."""

    # Extracted
    ICE = "Ice"
    MINERALS = "Minerals"
    GASES = "Gases"
    HYDROCARBONS = "Hydrocarbons"
    ORGANICS = "Organics"  # trees, plants, animal life
    # Refined, grown or made
    WATER = "Water"
    AIR = "Air"
    METAL = "Metal"
    NON_METAL = "NonMetal"
    ENERGY = "Energy"
    FOOD = "Food"
    BIO_MATTER = "BioMatter"
    # Future intermediates
    WASTE = "Waste"


class PersonType(enum.Enum):
    """Roles of the people living in a settlement or aboard a craft."""

    COLONIST = "Colonist"
    WORKER = "Worker"
    SCIENTIST = "Scientist"
    SOLDIER = "Soldier"
    ADMINISTRATOR = "Administrator"
    CHILD = "Child"


class BuildingType(enum.Enum):
    """Buildings a settlement can hold."""

    MINE = "Mine"
    REFINERY = "Refinery"
    FACTORY = "Factory"
    LABORATORY = "Laboratory"


class UnitDomain(enum.Enum):
    """Where a unit operates."""

    SURFACE_GROUND = "SurfaceGround"
    SURFACE_AEROSPACE = "SurfaceAerospace"
    SURFACE_MARITIME_SURFACE = "SurfaceMaritimeSurface"
    SURFACE_MARITIME_SUBSURFACE = "SurfaceMaritimeSubsurface"
    SPACE = "Space"


class InstallationPurpose(enum.Enum):
    """What an installation is for."""

    MINE = "Mine"
    REFINERY = "Refinery"
    FACTORY = "Factory"
    MILITARY = "Military"
    RESEARCH = "Research"


class SpacecraftModuleType(enum.Enum):
    """Modules a spacecraft can carry."""

    MINE = "Mine"
    REFINERY = "Refinery"
    FACTORY = "Factory"
    LABORATORY = "Laboratory"
    MILITARY = "Military"
    ADMINISTRATIVE = "Administrative"


@dataclass(frozen=True)
class HexCoord:
    """Cube coordinate on a hexagonal map; z is implied by x + y + z == 0."""

    x: int
    y: int

    @property
    def z(self) -> int:
        return -self.x - self.y


@dataclass(frozen=True)
class SurfaceLocation:
    """A hex on the surface of a body."""

    body_id: uuid.UUID
    hex_coord: HexCoord


@dataclass(frozen=True)
class OrbitLocation:
    """An orbital slot around a body, used by stations and constellations."""

    body_id: uuid.UUID
    orbital_slot_id: uuid.UUID


@dataclass(frozen=True)
class DeepSpaceLocation:
    """A free point in space."""

    x: float
    y: float


@dataclass(frozen=True)
class DockedLocation:
    """Docked to another structure or spacecraft."""

    structure_id: uuid.UUID


Location = Union[SurfaceLocation, OrbitLocation, DeepSpaceLocation, DockedLocation]


@dataclass
class Tile:
    """A map tile; a fresh tile carries the nil id."""

    id: uuid.UUID = _NIL_UUID


@dataclass
class Unit:
    """A named unit."""

    name: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass
class Faction:
    """A named faction."""

    name: str
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass
class ProductInput:
    """An amount of a resource consumed to make a product."""

    resource_type: ResourceType
    amount: float


@dataclass
class ProductOutput:
    """An amount of a resource yielded by making a product."""

    resource_type: ResourceType
    amount: float


@dataclass
class Product:
    """Something that can be made from inputs into outputs."""

    name: str
    inputs: list[ProductInput] = field(default_factory=list)
    outputs: list[ProductOutput] = field(default_factory=list)


@dataclass
class Process:
    """Making a product over a number of time units."""

    name: str
    time: int
    product: Product

    def __post_init__(self) -> None:
        _check_counts({"time": self.time}, "process", _U32_MAX)


@dataclass
class Installation:
    """A single-purpose facility."""

    name: str
    purpose: InstallationPurpose
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass
class Settlement:
    """A populated place with buildings and a resource stockpile."""

    name: str
    population: dict[PersonType, int] = field(default_factory=dict)
    buildings: dict[BuildingType, int] = field(default_factory=dict)
    resources: dict[ResourceType, int] = field(default_factory=dict)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        _check_counts(self.population, "population", _U32_MAX)
        _check_counts(self.buildings, "building", _U32_MAX)
        _check_counts(self.resources, "resource", _U64_MAX)


@dataclass
class Spacecraft:
    """A craft at a location, optionally bound for another one."""

    location: Location
    destination: Optional[Location] = None
    modules: dict[SpacecraftModuleType, int] = field(default_factory=dict)
    cargo: dict[ResourceType, int] = field(default_factory=dict)
    population: Optional[dict[PersonType, int]] = None
    fleet_id: Optional[uuid.UUID] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def __post_init__(self) -> None:
        _check_counts(self.modules, "module", _U32_MAX)
        _check_counts(self.cargo, "cargo", _U32_MAX)
        if self.population is not None:
            _check_counts(self.population, "population", _U32_MAX)


Structure = Union[Settlement, Installation, Spacecraft]
import dataclasses
import uuid

import pytest

from harsh_realm.model import (
    BuildingType,
    DeepSpaceLocation,
    DockedLocation,
    Faction,
    HexCoord,
    Installation,
    InstallationPurpose,
    OrbitLocation,
    PersonType,
    Process,
    Product,
    ProductInput,
    ProductOutput,
    ResourceType,
    Settlement,
    Spacecraft,
    SpacecraftModuleType,
    SurfaceLocation,
    Tile,
    Unit,
    UnitDomain,
)


def test_resource_type_values_round_trip():
    for member in ResourceType:
        assert ResourceType(member.value) is member
    assert ResourceType("NonMetal") is ResourceType.NON_METAL
    assert len(ResourceType) == 13


def test_person_and_building_types_by_name():
    assert PersonType("Administrator") is PersonType.ADMINISTRATOR
    assert BuildingType("Laboratory") is BuildingType.LABORATORY
    assert [b.value for b in BuildingType] == ["Mine", "Refinery", "Factory", "Laboratory"]


def test_unit_domain_and_module_types():
    assert UnitDomain("SurfaceMaritimeSubsurface") is UnitDomain.SURFACE_MARITIME_SUBSURFACE
    assert SpacecraftModuleType("Administrative") is SpacecraftModuleType.ADMINISTRATIVE
    assert InstallationPurpose("Research") is InstallationPurpose.RESEARCH


def test_unknown_enum_value_raises():
    with pytest.raises(ValueError):
        ResourceType("Unobtainium")


def test_hex_coord_cube_invariant_and_equality():
    coord = HexCoord(3, -5)
    assert coord.x + coord.y + coord.z == 0
    assert coord == HexCoord(3, -5)
    assert {coord: "a"}[HexCoord(3, -5)] == "a"


def test_locations_compare_by_value():
    body = uuid.uuid4()
    slot = uuid.uuid4()
    assert SurfaceLocation(body, HexCoord(1, 2)) == SurfaceLocation(body, HexCoord(1, 2))
    assert SurfaceLocation(body, HexCoord(1, 2)) != SurfaceLocation(body, HexCoord(2, 1))
    assert OrbitLocation(body, slot) == OrbitLocation(body, slot)
    assert DeepSpaceLocation(1.5, -2.0) == DeepSpaceLocation(1.5, -2.0)
    assert DockedLocation(body) != OrbitLocation(body, body)


def test_locations_are_immutable():
    loc = DeepSpaceLocation(0.0, 0.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        loc.x = 1.0
    assert loc.x == 0.0
    assert loc == DeepSpaceLocation(0.0, 0.0)


def test_tile_default_id_is_nil():
    assert Tile().id == uuid.UUID(int=0)
    given = uuid.uuid4()
    assert Tile(given).id == given


def test_units_and_factions_get_distinct_ids():
    first, second = Unit("Alpha"), Unit("Alpha")
    assert first.id != second.id
    assert Faction("Mars Union").name == "Mars Union"
    assert Faction("A").id != Faction("A").id


def test_product_and_process_hold_their_parts():
    product = Product(
        "Steel",
        inputs=[ProductInput(ResourceType.MINERALS, 2.0), ProductInput(ResourceType.ENERGY, 1.0)],
        outputs=[ProductOutput(ResourceType.METAL, 1.0)],
    )
    process = Process("Smelting", 3, product)
    assert process.product.outputs[0].resource_type is ResourceType.METAL
    assert [i.resource_type for i in process.product.inputs] == [
        ResourceType.MINERALS,
        ResourceType.ENERGY,
    ]
    assert Product("Empty").inputs == []


def test_process_rejects_negative_time():
    with pytest.raises(ValueError):
        Process("Broken", -1, Product("Nothing"))


def test_installation_fields():
    inst = Installation("Deep Drill", InstallationPurpose.MINE)
    assert inst.purpose is InstallationPurpose.MINE
    assert inst.name == "Deep Drill"


def test_settlement_counts_are_kept_and_checked():
    town = Settlement(
        "Base One",
        population={PersonType.WORKER: 10},
        buildings={BuildingType.MINE: 2},
        resources={ResourceType.WATER: 500},
    )
    assert town.population[PersonType.WORKER] == 10
    assert town.resources[ResourceType.WATER] == 500
    with pytest.raises(ValueError):
        Settlement("Bad", population={PersonType.CHILD: -1})
    with pytest.raises(TypeError):
        Settlement("Bad", buildings={BuildingType.MINE: 1.5})


def test_settlement_limits_follow_unsigned_widths():
    with pytest.raises(ValueError):
        Settlement("Big", population={PersonType.WORKER: 2**32})
    town = Settlement("Rich", resources={ResourceType.FOOD: 2**32})
    assert town.resources[ResourceType.FOOD] == 2**32


def test_spacecraft_defaults_and_destination():
    here = DeepSpaceLocation(0.0, 0.0)
    there = DockedLocation(uuid.uuid4())
    craft = Spacecraft(here, destination=there, cargo={ResourceType.ICE: 40})
    assert craft.location == here
    assert craft.destination == there
    assert craft.population is None
    assert craft.fleet_id is None
    assert craft.cargo == {ResourceType.ICE: 40}


def test_spacecraft_rejects_bad_counts():
    with pytest.raises(ValueError):
        Spacecraft(DeepSpaceLocation(0.0, 0.0), modules={SpacecraftModuleType.FACTORY: -3})
    with pytest.raises(ValueError):
        Spacecraft(DeepSpaceLocation(0.0, 0.0), population={PersonType.SOLDIER: -1})
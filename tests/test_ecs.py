from saltengine.component import ComponentType, FieldType
from saltengine.ecs import World
from saltengine.entity import Entity
from saltengine.system import System


def _world():
    world = World()
    ct = ComponentType()
    ct.add_field(FieldType.FLOAT, "x")
    world.components.add_component_type(ct, "position")
    world.components.add_component_type(ct, "speed")
    return world


def test_update_with_no_entities_runs_nothing():
    world = _world()
    calls = []
    world.systems.add_system(System(calls.append), "record")
    world.update()
    assert calls == []


def test_update_runs_system_for_each_entity_in_order():
    world = _world()
    calls = []
    world.systems.add_system(System(calls.append), "record")
    e = Entity(world)
    e.add_system("record")
    ids = [world.entities.add_entity(e) for _ in range(3)]
    world.update()
    assert calls == ids


def test_update_skips_entities_without_system():
    world = _world()
    calls = []
    world.systems.add_system(System(calls.append), "record")
    with_system = Entity(world)
    with_system.add_system("record")
    included = world.entities.add_entity(with_system)
    world.entities.add_entity(Entity(world))
    world.update()
    assert calls == [included]


def test_systems_run_in_id_order_per_entity():
    world = _world()
    calls = []
    world.systems.add_system(System(lambda e: calls.append((e, "a"))), "a")
    world.systems.add_system(System(lambda e: calls.append((e, "b"))), "b")
    e = Entity(world)
    e.add_system("b")
    e.add_system("a")
    first = world.entities.add_entity(e)
    second = world.entities.add_entity(e)
    world.update()
    assert calls == [(first, "a"), (first, "b"), (second, "a"), (second, "b")]


def test_removed_system_and_entity_are_skipped():
    world = _world()
    calls = []
    world.systems.add_system(System(calls.append), "record")
    e = Entity(world)
    e.add_system("record")
    kept = world.entities.add_entity(e)
    gone = world.entities.add_entity(e)
    world.entities.remove_entity(gone)
    world.update()
    assert calls == [kept]
    world.systems.remove_system("record")
    world.update()
    assert calls == [kept]


def test_update_moves_positions():
    world = _world()

    def move(entity_id):
        entity = world.entities.entity(entity_id)
        pos = entity.component("position")
        speed = entity.component("speed")
        pos.set_field("x", pos.get_field("x") + speed.get_field("x"))

    world.systems.add_system(System(move), "move")
    e = Entity(world)
    e.add_component("position")
    e.add_component("speed")
    e.add_system("move")
    entity_id = world.entities.add_entity(e)
    world.entities.entity(entity_id).component("speed").set_field("x", 0.25)
    world.update()
    world.update()
    assert world.entities.entity(entity_id).component("position").get_field("x") == 0.5
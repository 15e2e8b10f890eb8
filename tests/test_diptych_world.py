import pytest

from inkgames.diptych_world import (
    DOOR_HI,
    DOOR_LO,
    GRID,
    MAX_ENTITIES,
    EntityType,
    SignSprite,
    Tile,
    World,
    XorShift32,
    direction_word,
    inside,
    is_walkable,
    seed_for,
    snap_door,
)


def test_xorshift_zero_state_reseeds():
    rng = XorShift32(0)
    assert rng.next() == 0
    assert rng.state == 0xDEADBEEF


def test_xorshift_known_first_value():
    assert XorShift32(1).next() == 270369


def test_xorshift_deterministic_and_in_range():
    a, b = XorShift32(12345), XorShift32(12345)
    values = [a.random() for _ in range(200)]
    assert values == [b.random() for _ in range(200)]
    assert all(0.0 <= v <= 1.0 for v in values)


def test_seed_for_deterministic_and_varies():
    assert seed_for(1, 2, 0x13371337) == seed_for(1, 2, 0x13371337)
    assert seed_for(1, 2, 0x13371337) != seed_for(2, 1, 0x13371337)
    assert seed_for(1, 2, 0x13371337) != seed_for(1, 2, 0xBEEFCAFE)
    assert 0 < seed_for(-4, 4, 0xBEEFCAFE) <= 0xFFFFFFFF


@pytest.mark.parametrize(
    "rx, ry, word",
    [
        (-1, -1, "northwest"),
        (1, -1, "northeast"),
        (-1, 1, "southwest"),
        (2, 3, "southeast"),
        (0, -3, "north"),
        (0, 2, "south"),
        (-3, 0, "west"),
        (1, 0, "east"),
        (0, 0, "near"),
    ],
)
def test_direction_word(rx, ry, word):
    assert direction_word(rx, ry) == word


def test_inside_bounds():
    assert inside(0, 0)
    assert inside(GRID - 1, GRID - 1)
    assert not inside(-1, 0)
    assert not inside(0, GRID)


def test_is_walkable_rules():
    assert is_walkable(Tile.EMPTY, False)
    assert is_walkable(Tile.SWITCH, False)
    assert is_walkable(Tile.MIRROR, False)
    assert not is_walkable(Tile.DOOR, False)
    assert is_walkable(Tile.DOOR, True)
    for tile in (Tile.WALL, Tile.TREE, Tile.WATER):
        assert not is_walkable(tile, True)


def test_snap_door():
    assert snap_door(0) == DOOR_LO
    assert snap_door(GRID - 1) == DOOR_HI
    assert snap_door(7) == 7


def test_add_entity_capacity():
    world = World()
    for i in range(MAX_ENTITIES):
        assert world.add_entity(EntityType.GHOUL, i, 0) is not None
    assert world.add_entity(EntityType.GHOUL, 0, 1) is None
    assert len(world.entities) == MAX_ENTITIES


def test_set_tiles_ignores_outside():
    world = World()
    world.set_tiles(Tile.WATER, [(1, 2), (-1, 3), (GRID, 0)])
    assert world.tiles[2][1] == Tile.WATER
    assert sum(row.count(Tile.WATER) for row in world.tiles) == 1


def test_add_perimeter_leaves_doorways():
    world = World()
    world.add_perimeter()
    assert world.tiles[0][0] == Tile.WALL
    assert world.tiles[GRID - 1][GRID - 1] == Tile.WALL
    for i in range(DOOR_LO, DOOR_HI + 1):
        assert world.tiles[0][i] == Tile.EMPTY
        assert world.tiles[i][0] == Tile.EMPTY
        assert world.tiles[GRID - 1][i] == Tile.EMPTY
        assert world.tiles[i][GRID - 1] == Tile.EMPTY
    assert world.tiles[0][DOOR_LO - 1] == Tile.WALL


def test_entity_lookup_and_removal():
    world = World()
    world.add_entity(EntityType.SIGN, 3, 7, 1, True, SignSprite.SIGN)
    world.add_entity(EntityType.HALF_LIGHT, 4, 4, 2)
    assert world.entity_at(3, 7) == 0
    assert world.entity_at(3, 7, EntityType.NPC) is None
    assert world.half_at(4, 4, EntityType.HALF_LIGHT) == 1
    assert world.half_at(4, 4, EntityType.HALF_SHADOW) is None
    world.remove_entity(0)
    assert world.entity_at(4, 4) == 0
    world.remove_entity(5)
    assert len(world.entities) == 1


def test_blocking_entities():
    world = World()
    world.add_entity(EntityType.NPC, 5, 7)
    world.add_entity(EntityType.SIGN, 6, 7, 0, False)
    world.add_entity(EntityType.SIGN, 8, 7, 0, True)
    assert world.has_blocking_entity(5, 7)
    assert not world.has_blocking_entity(6, 7)
    assert world.has_blocking_entity(8, 7)
    assert not world.has_blocking_entity(9, 9)


def test_ghoul_moves_toward_target():
    world = World()
    world.add_entity(EntityType.GHOUL, 3, 7)
    assert world.has_ghouls()
    world.move_ghouls(7, 7)
    assert world.ghoul_at(4, 7)
    assert not world.ghoul_at(3, 7)


def test_ghoul_blocked_by_wall_stays():
    world = World()
    world.tiles[7][4] = Tile.WALL
    world.add_entity(EntityType.GHOUL, 3, 7)
    world.move_ghouls(7, 7)
    assert (world.entities[0].x, world.entities[0].y) == (3, 7)


def test_ghoul_takes_secondary_axis_when_blocked():
    world = World()
    world.tiles[3][5] = Tile.TREE
    world.add_entity(EntityType.GHOUL, 4, 3)
    world.move_ghouls(8, 5)
    assert (world.entities[0].x, world.entities[0].y) == (4, 4)


def test_ghouls_do_not_stack():
    world = World()
    world.add_entity(EntityType.GHOUL, 5, 7)
    world.add_entity(EntityType.GHOUL, 4, 7)
    world.move_ghouls(5, 7)
    positions = {(e.x, e.y) for e in world.entities}
    assert len(positions) == 2
    assert (5, 7) in positions


def test_no_ghouls():
    world = World()
    world.add_entity(EntityType.NPC, 1, 1)
    assert not world.has_ghouls()
    assert not world.ghoul_at(1, 1)


def test_plate_pressed_by_player_or_half():
    world = World()
    world.tiles[7][7] = Tile.SWITCH
    assert world.is_plate_pressed(7, 7)
    assert not world.is_plate_pressed(6, 7)
    world.add_entity(EntityType.HALF_SHADOW, 7, 7)
    assert world.is_plate_pressed(1, 1)


def test_plate_not_pressed_by_other_entities():
    world = World()
    world.tiles[7][7] = Tile.SWITCH
    world.add_entity(EntityType.GHOUL, 7, 7)
    assert not world.is_plate_pressed(1, 1)


def test_copy_is_independent():
    world = World()
    world.add_entity(EntityType.GHOUL, 2, 2)
    clone = world.copy()
    clone.tiles[0][0] = Tile.WALL
    clone.entities[0].x = 9
    assert world.tiles[0][0] == Tile.EMPTY
    assert world.entities[0].x == 2
    assert clone == clone.copy()
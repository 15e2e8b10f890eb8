"""Room layouts, shard placement and shard progress for Diptych."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

from inkgames.diptych_world import (
    DOOR_HI,
    DOOR_LO,
    GRID,
    NPC_SAGE,
    NPC_WATCHER,
    WORLD_RADIUS,
    EntityType,
    SignId,
    SignSprite,
    Tile,
    World,
    XorShift32,
    inside,
    seed_for,
)

SHARDS_PER_CHAPTER = 5
TOTAL_CHAPTERS = 3

_LIGHT_SALT = 0x13371337
_SHADOW_SALT = 0xBEEFCAFE


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


_F_030 = _f32(0.3)
_F_006 = _f32(0.06)
_F_0015 = _f32(0.015)
_F_018 = _f32(0.18)


@dataclass(frozen=True)
class ShardDef:
    """Where a shard lives: its room and the light and shadow half positions."""

    rx: int
    ry: int
    lx: int
    ly: int
    sx: int
    sy: int


_SHARDS = {
    1: (
        ShardDef(0, -1, 11, 4, 4, 10),
        ShardDef(-1, 0, 11, 3, 3, 11),
        ShardDef(1, 1, 11, 11, 3, 3),
        ShardDef(2, -1, 12, 2, 3, 12),
        ShardDef(0, 2, 12, 3, 2, 11),
    ),
    2: (
        ShardDef(0, -3, 11, 2, 3, 12),
        ShardDef(-3, 0, 3, 3, 11, 11),
        ShardDef(3, 3, 7, 11, 7, 3),
        ShardDef(-2, -2, 11, 11, 3, 3),
        ShardDef(2, 3, 10, 3, 4, 11),
    ),
    3: (
        ShardDef(0, -2, 10, 3, 4, 11),
        ShardDef(-2, 0, 7, 5, 7, 9),
        ShardDef(2, 2, 5, 10, 9, 10),
        ShardDef(-2, 2, 7, 3, 7, 11),
        ShardDef(2, -2, 10, 3, 4, 11),
    ),
}

_PICKUP_LINES = {
    1: (
        "I. A star wakes beneath the ice.",
        "II. The dark learns a name it cannot say.",
        "III. Two roads remember one sky.",
        "IV. Something below begins to sing.",
        "V. Bring what is whole to the one who waits.",
    ),
    2: (
        "I. The deep answers in its own voice.",
        "II. Roots find water that does not reflect.",
        "III. The glass cracks but will not part.",
        "IV. Silence takes a shape. You recognize it.",
        "V. The last seam is near. So is something else.",
    ),
    3: (
        "I. A voice speaks your line before you.",
        "II. What you did, undoes. What you undid, does.",
        "III. Two paths. One step. No witness.",
        "IV. The mirror says the name you had forgotten.",
        "V. The reflection lowers its hand. You lower yours.",
    ),
}


def shards_for_chapter(chapter: int) -> tuple[ShardDef, ...]:
    """The shard definitions of a chapter (1 to 3)."""
    try:
        return _SHARDS[chapter]
    except KeyError:
        raise ValueError(f"no such chapter: {chapter}") from None


def shard_pickup_line(chapter: int, count_after_pickup: int) -> str:
    """The flavour line shown after picking up a shard; empty for an unknown chapter."""
    lines = _PICKUP_LINES.get(chapter)
    if lines is None:
        return ""
    index = max(0, min(SHARDS_PER_CHAPTER - 1, count_after_pickup - 1))
    return lines[index]


@dataclass
class ShardProgress:
    """Collected shards of each chapter, one bit per shard."""

    masks: dict[int, int] = field(default_factory=lambda: {c: 0 for c in range(1, TOTAL_CHAPTERS + 1)})

    def mask(self, chapter: int) -> int:
        return self.masks.get(chapter, 0)

    def is_collected(self, chapter: int, index: int) -> bool:
        return bool(self.mask(chapter) & (1 << index))

    def count(self, chapter: int) -> int:
        mask = self.mask(chapter)
        return sum(1 for i in range(SHARDS_PER_CHAPTER) if mask & (1 << i))

    def collect(self, chapter: int, index: int) -> None:
        if chapter in self.masks:
            self.masks[chapter] = (self.masks[chapter] | (1 << index)) & 0xFF

    def reset(self, chapter: int) -> None:
        if chapter in self.masks:
            self.masks[chapter] = 0


@dataclass
class Room:
    """Both panels of one room and whether its pressure plates are linked."""

    light: World = field(default_factory=World)
    shadow: World = field(default_factory=World)
    linked: bool = False


def _place_halves(room: Room, chapter: int, index: int, progress: ShardProgress) -> None:
    if progress.is_collected(chapter, index):
        return
    shard = _SHARDS[chapter][index]
    room.light.add_entity(EntityType.HALF_LIGHT, shard.lx, shard.ly, index)
    room.shadow.add_entity(EntityType.HALF_SHADOW, shard.sx, shard.sy, index)


_CAGE_LIGHT = [(9, 2), (10, 2), (11, 2), (9, 3), (11, 3), (9, 4), (10, 4), (11, 4)]
_CAGE_SHADOW = [(3, 10), (4, 10), (5, 10), (3, 11), (5, 11), (3, 12), (4, 12), (5, 12)]
_WATCHER_LIGHT_TREES = [(2, 2), (12, 2), (2, 12), (12, 12)]
_WATCHER_SHADOW_TREES = [(3, 3), (11, 3), (3, 11), (11, 11)]


def _build_tutorial(rx: int, ry: int, room: Room, progress: ShardProgress) -> bool:
    light, shadow = room.light, room.shadow
    key = (rx, ry)
    if key == (0, 0):
        light.set_tiles(Tile.TREE, _WATCHER_LIGHT_TREES)
        shadow.set_tiles(Tile.TREE, _WATCHER_SHADOW_TREES)
        light.add_entity(EntityType.NPC, 5, 7, NPC_WATCHER)
    elif key == (1, 0):
        light.set_tiles(Tile.WALL, ((9, y) for y in range(GRID)))
        light.add_entity(EntityType.SIGN, 3, 7, SignId.SPLIT_LIGHT, True, SignSprite.SIGN)
    elif key == (2, 0):
        shadow.set_tiles(Tile.WALL, ((9, y) for y in range(GRID)))
        light.add_entity(EntityType.SIGN, 3, 7, SignId.SPLIT_SHADOW, True, SignSprite.SIGN)
    elif key == (3, 0):
        light.set_tiles(Tile.WALL, ((10, y) for y in range(GRID)))
        shadow.set_tiles(Tile.WALL, ((5, y) for y in range(GRID)))
    elif key == (4, 0):
        light.set_tiles(Tile.TREE, [(2, 2), (6, 2), (10, 2)])
        shadow.set_tiles(Tile.TREE, [(3, 3), (7, 3), (11, 3)])
        light.add_entity(EntityType.NPC, 7, 6, NPC_SAGE)
    elif key == (1, -1):
        pillars = [(3, 3), (4, 3), (10, 3), (11, 3), (3, 11), (4, 11), (10, 11), (11, 11)]
        light.set_tiles(Tile.WALL, pillars)
        shadow.set_tiles(Tile.WALL, pillars)
        for gx, gy in ((1, 1), (13, 1), (1, 13), (13, 13)):
            light.add_entity(EntityType.GHOUL, gx, gy)
        shadow.add_entity(EntityType.GHOUL, 7, 1)
        shadow.add_entity(EntityType.GHOUL, 7, 13)
    elif key == (-1, -1):
        light.set_tiles(Tile.WALL, [(5, 4), (6, 4), (8, 4), (9, 4), (5, 10), (6, 10), (8, 10), (9, 10)])
        shadow.set_tiles(Tile.WALL, [(4, 5), (4, 6), (4, 8), (4, 9), (10, 5), (10, 6), (10, 8), (10, 9)])
        light.add_entity(EntityType.GHOUL, 3, 7)
        shadow.add_entity(EntityType.GHOUL, 11, 7)
    elif key == (1, 2):
        light.set_tiles(Tile.WALL, [(4, 4), (5, 4), (9, 4), (10, 4), (7, 7)])
        shadow.set_tiles(Tile.WALL, [(4, 10), (5, 10), (9, 10), (10, 10), (7, 7)])
        light.add_entity(EntityType.GHOUL, 2, 2)
        light.add_entity(EntityType.GHOUL, 12, 12)
        shadow.add_entity(EntityType.GHOUL, 7, 2)
    elif key == (0, -1):
        light.set_tiles(Tile.WALL, [(10, 4), (10, 5), (10, 6), (11, 8), (6, 7)])
        shadow.set_tiles(Tile.WALL, [(5, 10), (5, 9), (3, 10), (3, 9), (4, 6), (8, 7)])
        _place_halves(room, 1, 0, progress)
    elif key == (-1, 0):
        light.set_tiles(Tile.WALL, [(6, 3), (7, 8), (3, 12), (2, 11)])
        shadow.set_tiles(Tile.WALL, [(8, 11), (7, 6), (11, 2), (12, 3)])
        _place_halves(room, 1, 1, progress)
    elif key == (1, 1):
        light.set_tiles(Tile.WALL, [(11, 6), (6, 7), (3, 2), (2, 3)])
        shadow.set_tiles(Tile.WALL, [(3, 8), (8, 7), (11, 12), (12, 11)])
        _place_halves(room, 1, 2, progress)
    elif key == (2, -1):
        light.set_tiles(Tile.WALL, [(12, 4), (6, 3), (7, 6), (10, 2)])
        shadow.set_tiles(Tile.WALL, [(3, 8), (8, 9), (7, 4), (11, 1), (11, 2), (4, 12), (4, 11)])
        _place_halves(room, 1, 3, progress)
    elif key == (0, 2):
        light.set_tiles(Tile.WALL, [(9, 3), (10, 8), (6, 7), (12, 4), (3, 10), (3, 9)])
        shadow.set_tiles(Tile.WALL, [(5, 11), (4, 6), (8, 7), (2, 10), (11, 4), (11, 3)])
        _place_halves(room, 1, 4, progress)
    else:
        return False
    return True


def _build_chapter2(rx: int, ry: int, room: Room, progress: ShardProgress) -> bool:
    light, shadow = room.light, room.shadow
    key = (rx, ry)
    if key == (0, -3):
        light.set_tiles(Tile.WALL, [(11, 6), (6, 5), (7, 8), (10, 1)])
        shadow.set_tiles(Tile.WALL, [(3, 8), (8, 9), (7, 6), (4, 13)])
        _place_halves(room, 2, 0, progress)
    elif key == (-3, 0):
        light.set_tiles(Tile.WALL, [(3, 6), (8, 3), (7, 8), (4, 1)])
        shadow.set_tiles(Tile.WALL, [(11, 8), (6, 11), (7, 6), (10, 13)])
        _place_halves(room, 2, 1, progress)
    elif key == (3, 3):
        light.set_tiles(Tile.SWITCH, [(7, 7)])
        light.set_tiles(Tile.WALL, [(7, 6), (6, 7), (8, 3)])
        shadow.set_tiles(Tile.DOOR, [(6, 2), (7, 2), (8, 2), (6, 3), (8, 3), (6, 4), (7, 4), (8, 4)])
        shadow.set_tiles(Tile.WALL, [(8, 7), (7, 10)])
        _place_halves(room, 2, 2, progress)
    elif key == (-2, -2):
        light.set_tiles(Tile.WALL, [(11, 8), (8, 11), (6, 7), (10, 10)])
        shadow.set_tiles(Tile.WALL, [(3, 6), (6, 3), (8, 7), (4, 4)])
        _place_halves(room, 2, 3, progress)
    elif key == (2, 3):
        light.set_tiles(Tile.SWITCH, [(4, 7)])
        light.set_tiles(Tile.DOOR, _CAGE_LIGHT)
        light.set_tiles(Tile.WALL, [(6, 7), (7, 10)])
        shadow.set_tiles(Tile.SWITCH, [(10, 7)])
        shadow.set_tiles(Tile.DOOR, _CAGE_SHADOW)
        shadow.set_tiles(Tile.WALL, [(8, 7), (7, 4)])
        _place_halves(room, 2, 4, progress)
    else:
        return False
    return True


def _build_chapter3(rx: int, ry: int, room: Room, progress: ShardProgress) -> bool:
    light, shadow = room.light, room.shadow
    key = (rx, ry)
    if key == (0, -2):
        light.set_tiles(Tile.SWITCH, [(3, 7)])
        light.set_tiles(Tile.MIRROR, [(7, 7)])
        light.set_tiles(Tile.DOOR, _CAGE_LIGHT)
        light.set_tiles(Tile.WALL, [(11, 6), (11, 8)])
        shadow.set_tiles(Tile.SWITCH, [(11, 7)])
        shadow.set_tiles(Tile.MIRROR, [(7, 7)])
        shadow.set_tiles(Tile.DOOR, _CAGE_SHADOW)
        shadow.set_tiles(Tile.WALL, [(3, 6), (3, 8)])
        room.linked = True
        _place_halves(room, 3, 0, progress)
    elif key == (-2, 0):
        light.set_tiles(Tile.MIRROR, [(7, 7)])
        light.set_tiles(Tile.WALL, [(7, 3), (6, 7), (8, 7)])
        shadow.set_tiles(Tile.MIRROR, [(7, 7)])
        shadow.set_tiles(Tile.WALL, [(7, 11), (6, 7), (8, 7)])
        _place_halves(room, 3, 1, progress)
    elif key == (2, 2):
        light.set_tiles(Tile.MIRROR, [(7, 10)])
        light.set_tiles(Tile.WALL, [(3, 7), (7, 3), (6, 10), (8, 10)])
        shadow.set_tiles(Tile.MIRROR, [(7, 10)])
        shadow.set_tiles(Tile.WALL, [(11, 7), (7, 11), (6, 10), (8, 10)])
        _place_halves(room, 3, 2, progress)
    elif key == (-2, 2):
        light.set_tiles(Tile.MIRROR, [(7, 4), (7, 10)])
        light.set_tiles(Tile.WALL, [(3, 4), (11, 4), (7, 2), (5, 10), (9, 10)])
        shadow.set_tiles(Tile.MIRROR, [(7, 4), (7, 10)])
        shadow.set_tiles(Tile.WALL, [(3, 10), (11, 10), (7, 12), (5, 4), (9, 4)])
        _place_halves(room, 3, 3, progress)
    elif key == (2, -2):
        light.set_tiles(Tile.SWITCH, [(4, 7)])
        light.set_tiles(Tile.MIRROR, [(7, 7)])
        light.set_tiles(Tile.DOOR, [(9, 2), (10, 2), (11, 2), (11, 3), (11, 4), (9, 4), (10, 4)])
        light.set_tiles(Tile.WALL, [(10, 6), (10, 8), (9, 7)])
        shadow.set_tiles(Tile.SWITCH, [(10, 7)])
        shadow.set_tiles(Tile.MIRROR, [(7, 7)])
        shadow.set_tiles(Tile.DOOR, [(3, 10), (4, 10), (5, 10), (3, 11), (3, 12), (5, 12), (5, 11)])
        shadow.set_tiles(Tile.WALL, [(4, 6), (4, 8), (5, 7)])
        room.linked = True
        _place_halves(room, 3, 4, progress)
    else:
        return False
    return True


_SHRINE_WATER = [
    (3, 3), (4, 3), (5, 3), (3, 4), (3, 5),
    (9, 3), (10, 3), (11, 3), (11, 4), (11, 5),
    (3, 9), (3, 10), (3, 11), (4, 11), (5, 11),
    (9, 11), (10, 11), (11, 11), (11, 10), (11, 9),
]
_WELLS_WATER = [(x, y) for y in range(5, 10) for x in (3, 4)] + [(x, y) for y in range(5, 10) for x in (10, 11)]


def _build_easter_egg(rx: int, ry: int, room: Room) -> bool:
    light, shadow = room.light, room.shadow
    key = (rx, ry)
    sign = EntityType.SIGN
    if key == (4, -4):
        spots = [(3, 4), (7, 4), (11, 4), (3, 10), (7, 10), (11, 10)]
        light_ids = [SignId.GRAVE_L1, SignId.GRAVE_L2, SignId.GRAVE_L3,
                     SignId.GRAVE_L4, SignId.GRAVE_L5, SignId.GRAVE_L6]
        shadow_ids = [SignId.GRAVE_S1, SignId.GRAVE_S2, SignId.GRAVE_S3,
                      SignId.GRAVE_S4, SignId.GRAVE_S5, SignId.GRAVE_S6]
        for (x, y), sid in zip(spots, light_ids):
            light.add_entity(sign, x, y, sid, True, SignSprite.HEADSTONE)
        for (x, y), sid in zip(spots, shadow_ids):
            shadow.add_entity(sign, x, y, sid, True, SignSprite.HEADSTONE)
    elif key == (-4, 4):
        light.add_entity(sign, 6, 7, SignId.FD_L1, True, SignSprite.PLAYER_LIGHT)
        light.add_entity(sign, 8, 7, SignId.FD_L2, True, SignSprite.PLAYER_LIGHT)
        light.add_entity(sign, 7, 10, SignId.FD_PLAQUE, True, SignSprite.SIGN)
        shadow.add_entity(sign, 6, 7, SignId.FD_S1, True, SignSprite.PLAYER_SHADOW)
        shadow.add_entity(sign, 8, 7, SignId.FD_S2, True, SignSprite.PLAYER_SHADOW)
    elif key == (-4, 0):
        light.set_tiles(Tile.TREE, _WATCHER_LIGHT_TREES)
        shadow.set_tiles(Tile.TREE, _WATCHER_SHADOW_TREES)
        light.add_entity(sign, 5, 7, SignId.EMPTY_WATCHER, True, SignSprite.SIGN)
    elif key == (0, 4):
        light.add_entity(sign, 7, 7, SignId.BELL_L, True, SignSprite.BELL)
        shadow.add_entity(sign, 7, 7, SignId.BELL_S, True, SignSprite.BELL)
    elif key == (0, -4):
        light.set_tiles(Tile.WATER, _SHRINE_WATER)
        shadow.set_tiles(Tile.WATER, _SHRINE_WATER)
        light.add_entity(sign, 7, 7, SignId.SHRINE_L, True, SignSprite.HEADSTONE)
        shadow.add_entity(sign, 7, 7, SignId.SHRINE_S, True, SignSprite.HEADSTONE)
    elif key == (3, 4):
        light.set_tiles(Tile.WATER, _WELLS_WATER)
        shadow.set_tiles(Tile.WATER, _WELLS_WATER)
        light.add_entity(sign, 7, 7, SignId.WELLS_L, True, SignSprite.SIGN)
        shadow.add_entity(sign, 7, 7, SignId.WELLS_S, True, SignSprite.SIGN)
    elif key == (3, -3):
        light.add_entity(sign, 7, 7, SignId.POOL_L, True, SignSprite.MIRROR_EYE)
        shadow.add_entity(sign, 7, 7, SignId.POOL_S, True, SignSprite.MIRROR_EYE)
    elif key == (-3, -3):
        light.add_entity(sign, 7, 7, SignId.REFL_L, True, SignSprite.HEADSTONE)
        shadow.add_entity(sign, 7, 8, SignId.REFL_S, True, SignSprite.PLAYER_SHADOW)
    else:
        return False
    return True


def _in_doorway(x: int, y: int) -> bool:
    return (DOOR_LO <= x <= DOOR_HI and (y <= 2 or y >= GRID - 3)) or (
        DOOR_LO <= y <= DOOR_HI and (x <= 2 or x >= GRID - 3)
    )


def _water_patch(world: World, rng: XorShift32) -> None:
    cx = 4 + int(_f32(rng.random() * (GRID - 8)))
    cy = 4 + int(_f32(rng.random() * (GRID - 8)))
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if rng.random() < 0.5:
                wx, wy = cx + dx, cy + dy
                if inside(wx, wy) and world.tiles[wy][wx] == Tile.EMPTY:
                    world.tiles[wy][wx] = Tile.WATER


def _build_procedural(rx: int, ry: int, room: Room) -> None:
    light, shadow = room.light, room.shadow
    light_rng = XorShift32(seed_for(rx, ry, _LIGHT_SALT))
    shadow_rng = XorShift32(seed_for(rx, ry, _SHADOW_SALT))
    light.add_perimeter()
    shadow.add_perimeter()

    dist = abs(rx) + abs(ry)
    density = min(_F_018, _f32(_F_006 + _f32(_f32(float(dist)) * _F_0015)))
    for y in range(1, GRID - 1):
        for x in range(1, GRID - 1):
            if abs(x - 7) <= 2 and abs(y - 7) <= 2:
                continue
            if _in_doorway(x, y):
                continue
            for world, rng in ((light, light_rng), (shadow, shadow_rng)):
                if rng.random() < density:
                    world.tiles[y][x] = Tile.TREE if rng.random() < _F_030 else Tile.WALL

    if dist > 4:
        if light_rng.random() < 0.25:
            _water_patch(light, light_rng)
        if shadow_rng.random() < 0.25:
            _water_patch(shadow, shadow_rng)

    for i in range(1, GRID - 1):
        for world in (light, shadow):
            world.tiles[7][i] = Tile.EMPTY
            world.tiles[i][7] = Tile.EMPTY


def _seal_boundary(rx: int, ry: int, room: Room) -> None:
    for world in (room.light, room.shadow):
        if rx == -WORLD_RADIUS:
            world.set_tiles(Tile.WALL, ((0, y) for y in range(GRID)))
        if rx == WORLD_RADIUS:
            world.set_tiles(Tile.WALL, ((GRID - 1, y) for y in range(GRID)))
        if ry == -WORLD_RADIUS:
            world.set_tiles(Tile.WALL, ((x, 0) for x in range(GRID)))
        if ry == WORLD_RADIUS:
            world.set_tiles(Tile.WALL, ((x, GRID - 1) for x in range(GRID)))


def build_room(rx: int, ry: int, chapter: int, progress: ShardProgress) -> Room:
    """Build both panels of the room at (rx, ry) for the given chapter and progress."""
    room = Room()
    handled = _build_tutorial(rx, ry, room, progress)
    if not handled and chapter >= 2:
        handled = _build_chapter2(rx, ry, room, progress)
    if not handled and chapter >= 3:
        handled = _build_chapter3(rx, ry, room, progress)
    if not handled:
        handled = _build_easter_egg(rx, ry, room)
    if not handled:
        _build_procedural(rx, ry, room)
    _seal_boundary(rx, ry, room)
    return room


def any_shard_remaining_at(rx: int, ry: int, chapter: int, progress: ShardProgress) -> bool:
    """Whether an uncollected shard of any chapter reached so far lies in the room."""
    for ch in range(1, min(chapter, TOTAL_CHAPTERS) + 1):
        for index, shard in enumerate(_SHARDS[ch]):
            if shard.rx == rx and shard.ry == ry and not progress.is_collected(ch, index):
                return True
    return False
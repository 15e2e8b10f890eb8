"""Tiles, entities and the single-panel world model used by Diptych."""

from __future__ import annotations

import copy as _copy
import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable

GRID = 15
TILE = 24
DOOR_LO = 5
DOOR_HI = 9
WORLD_RADIUS = 4
WORLD_SIZE = 2 * WORLD_RADIUS + 1
MAX_ENTITIES = 8

NPC_WATCHER = 0
NPC_SAGE = 1

_MASK32 = 0xFFFFFFFF
_FNV_OFFSET = 2166136261
_FNV_PRIME = 16777619


class Tile(IntEnum):
    EMPTY = 0
    WALL = 1
    TREE = 2
    WATER = 3
    DOOR = 4
    SWITCH = 5
    MIRROR = 6


class EntityType(IntEnum):
    NONE = 0
    NPC = 1
    SIGN = 2
    HALF_LIGHT = 3
    HALF_SHADOW = 4
    GHOUL = 5


class SignSprite(IntEnum):
    SIGN = 0
    HEADSTONE = 1
    BELL = 2
    MIRROR_EYE = 3
    PLAYER_LIGHT = 4
    PLAYER_SHADOW = 5


class SignId(IntEnum):
    NONE = 0
    SPLIT_LIGHT = 1
    SPLIT_SHADOW = 2
    GRAVE_L1 = 10
    GRAVE_L2 = 11
    GRAVE_L3 = 12
    GRAVE_L4 = 13
    GRAVE_L5 = 14
    GRAVE_L6 = 15
    GRAVE_S1 = 20
    GRAVE_S2 = 21
    GRAVE_S3 = 22
    GRAVE_S4 = 23
    GRAVE_S5 = 24
    GRAVE_S6 = 25
    FD_L1 = 30
    FD_L2 = 31
    FD_PLAQUE = 32
    FD_S1 = 33
    FD_S2 = 34
    EMPTY_WATCHER = 40
    BELL_L = 50
    BELL_S = 51
    SHRINE_L = 60
    SHRINE_S = 61
    WELLS_L = 70
    WELLS_S = 71
    POOL_L = 80
    POOL_S = 81
    REFL_L = 90
    REFL_S = 91


def _float32(value: float) -> float:
    """Round a number to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


class XorShift32:
    """Small deterministic generator used for procedural rooms."""

    def __init__(self, state: int) -> None:
        self.state = state & _MASK32

    def next(self) -> int:
        x = self.state
        x ^= (x << 13) & _MASK32
        x ^= x >> 17
        x ^= (x << 5) & _MASK32
        self.state = x if x else 0xDEADBEEF
        return x

    def random(self) -> float:
        """A single-precision value in [0, 1]."""
        return _float32(self.next()) / 4294967296.0


def seed_for(rx: int, ry: int, salt: int) -> int:
    """FNV-style 32-bit seed for a room and a salt; never zero."""
    h = _FNV_OFFSET
    h ^= (rx + 1000) & _MASK32
    h = (h * _FNV_PRIME) & _MASK32
    h ^= (ry + 1000) & _MASK32
    h = (h * _FNV_PRIME) & _MASK32
    h ^= salt & _MASK32
    h = (h * _FNV_PRIME) & _MASK32
    return h or 1


def direction_word(rx: int, ry: int) -> str:
    """A compass word for a room offset from the centre."""
    north, south = ry < 0, ry > 0
    west, east = rx < 0, rx > 0
    if north and west:
        return "northwest"
    if north and east:
        return "northeast"
    if south and west:
        return "southwest"
    if south and east:
        return "southeast"
    if north:
        return "north"
    if south:
        return "south"
    if west:
        return "west"
    if east:
        return "east"
    return "near"


def inside(x: int, y: int) -> bool:
    return 0 <= x < GRID and 0 <= y < GRID


def is_walkable(tile: Tile, doors_open: bool) -> bool:
    return tile in (Tile.EMPTY, Tile.SWITCH, Tile.MIRROR) or (tile == Tile.DOOR and doors_open)


def snap_door(v: int) -> int:
    """Clamp a coordinate into the doorway span."""
    return max(DOOR_LO, min(DOOR_HI, v))


@dataclass
class Entity:
    type: EntityType = EntityType.NONE
    x: int = 0
    y: int = 0
    id: int = 0
    blocking: bool = False
    sign_sprite: SignSprite = SignSprite.SIGN


def _empty_tiles() -> list[list[Tile]]:
    return [[Tile.EMPTY] * GRID for _ in range(GRID)]


@dataclass
class World:
    """One panel of a room: a tile grid and up to MAX_ENTITIES entities."""

    tiles: list[list[Tile]] = field(default_factory=_empty_tiles)
    entities: list[Entity] = field(default_factory=list)

    def add_entity(
        self,
        type: EntityType,
        x: int,
        y: int,
        id: int = 0,
        blocking: bool = False,
        sprite: SignSprite = SignSprite.SIGN,
    ) -> Entity | None:
        """Add an entity; when the world is full nothing is added and None is returned."""
        if len(self.entities) >= MAX_ENTITIES:
            return None
        entity = Entity(type, x, y, id, blocking, sprite)
        self.entities.append(entity)
        return entity

    def set_tiles(self, tile: Tile, points: Iterable[tuple[int, int]]) -> None:
        """Set each (x, y) point that lies on the grid to the given tile."""
        for x, y in points:
            if inside(x, y):
                self.tiles[y][x] = tile

    def add_perimeter(self) -> None:
        """Wall in the border, leaving a doorway in the middle of each side."""
        for i in range(GRID):
            if DOOR_LO <= i <= DOOR_HI:
                continue
            self.tiles[0][i] = Tile.WALL
            self.tiles[GRID - 1][i] = Tile.WALL
            self.tiles[i][0] = Tile.WALL
            self.tiles[i][GRID - 1] = Tile.WALL

    def entity_at(self, x: int, y: int, type: EntityType = EntityType.NONE) -> int | None:
        """Index of the first entity at (x, y), of the given type unless NONE."""
        for index, e in enumerate(self.entities):
            if e.x == x and e.y == y and (type == EntityType.NONE or e.type == type):
                return index
        return None

    def half_at(self, x: int, y: int, half_type: EntityType) -> int | None:
        return self.entity_at(x, y, half_type) if half_type != EntityType.NONE else None

    def has_blocking_entity(self, x: int, y: int) -> bool:
        return any(
            e.x == x
            and e.y == y
            and (e.type == EntityType.NPC or (e.type == EntityType.SIGN and e.blocking))
            for e in self.entities
        )

    def remove_entity(self, index: int | None) -> None:
        """Remove the entity at index; an invalid index is ignored."""
        if index is None or not 0 <= index < len(self.entities):
            return
        del self.entities[index]

    def has_ghouls(self) -> bool:
        return any(e.type == EntityType.GHOUL for e in self.entities)

    def ghoul_at(self, x: int, y: int) -> bool:
        return any(e.type == EntityType.GHOUL and e.x == x and e.y == y for e in self.entities)

    def move_ghouls(self, target_x: int, target_y: int) -> None:
        """Step every ghoul one tile towards the target, main axis first."""
        for ghoul in self.entities:
            if ghoul.type != EntityType.GHOUL:
                continue
            dxs = target_x - ghoul.x
            dys = target_y - ghoul.y
            dx = (dxs > 0) - (dxs < 0)
            dy = (dys > 0) - (dys < 0)
            if abs(dxs) >= abs(dys):
                moves = ((dx, 0), (0, dy))
            else:
                moves = ((0, dy), (dx, 0))
            for mdx, mdy in moves:
                if mdx == 0 and mdy == 0:
                    continue
                nx, ny = ghoul.x + mdx, ghoul.y + mdy
                if not inside(nx, ny):
                    continue
                if self.tiles[ny][nx] in (Tile.WALL, Tile.TREE, Tile.WATER):
                    continue
                if any(
                    other is not ghoul and other.type == EntityType.GHOUL and other.x == nx and other.y == ny
                    for other in self.entities
                ):
                    continue
                ghoul.x, ghoul.y = nx, ny
                break

    def is_plate_pressed(self, player_x: int, player_y: int) -> bool:
        """Whether the player or a shard half rests on a switch tile."""
        if inside(player_x, player_y) and self.tiles[player_y][player_x] == Tile.SWITCH:
            return True
        return any(
            e.type in (EntityType.HALF_LIGHT, EntityType.HALF_SHADOW)
            and inside(e.x, e.y)
            and self.tiles[e.y][e.x] == Tile.SWITCH
            for e in self.entities
        )

    def copy(self) -> "World":
        return _copy.deepcopy(self)
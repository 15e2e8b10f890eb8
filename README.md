# inkgames

Game logic for a handful of small grid puzzle games, with no display or
input code. Each game is a plain Python object: you call its methods for
moves and read its attributes back, so it can be driven from a terminal
front end, a GUI or a test. Nothing outside the standard library is
needed; Python 3.10 or later.

## Modules

- `inkgames.minesweeper`: `Minesweeper`, a 14 × 10 board with 18 mines.
  Mines are laid on the first reveal, never on or next to the revealed
  cell.
- `inkgames.solitaire`: `Solitaire`, Klondike with seven tableau columns,
  a stock, a waste pile and four foundations. Single-card moves only; the
  stock is not recycled. Also `Card`, `is_red`, `rank_text` and
  `suit_symbol`.
- `inkgames.life`: `GameOfLife`, a 40 × 28 grid that does not wrap, with
  a cursor, manual stepping and a timed run mode (one step per 180 ms).
- `inkgames.snake`: `Snake`, a 20 × 24 walled board, ten points per food,
  one step per 170 ms.
- `inkgames.sudoku`: `Sudoku`, a randomly solved grid with 45 cells
  removed, plus the helpers `is_valid` and `solve`.
- `inkgames.diptych_world`: the two-panel world model of Diptych. A
  `World` is a 15 × 15 grid of `Tile` values with up to eight `Entity`
  objects (NPCs, signs, shard halves, ghouls). It handles entity lookup,
  blocking, pressure plates and ghoul movement. Also `XorShift32`,
  `seed_for`, `direction_word`, `inside`, `is_walkable` and `snap_door`.
- `inkgames.diptych_rooms`: the room layouts of Diptych. `build_room`
  returns a `Room` holding the light and shadow `World` of the room at a
  given offset (fixed rooms for the tutorial, the three chapters and
  hidden rooms; seeded procedural rooms everywhere else).
  `ShardProgress` tracks collected shards per chapter;
  `shards_for_chapter`, `shard_pickup_line` and `any_shard_remaining_at`
  go with it.

The games that take an `rng` argument accept a `random.Random`, so a
seeded generator gives a repeatable game.

## Examples

Minesweeper:

```python
from inkgames.minesweeper import Minesweeper

board = Minesweeper()
board.move_cursor(2, 3)
board.reveal()            # the first reveal lays the mines
board.move_cursor(0, 1)
board.toggle_flag()
print(board.lost, board.won)
```

Solitaire:

```python
from inkgames.solitaire import Solitaire

table = Solitaire()
table.draw()              # stock to waste
table.auto_move_all()     # send everything playable to the foundations
table.select_right()
table.play_selected()
print([card.label() for card in table.foundation])
```

Sudoku:

```python
import random
from inkgames.sudoku import Sudoku

puzzle = Sudoku(rng=random.Random(1))
puzzle.move_cursor(0, 1)
puzzle.cycle_cell()       # blank, 1, 2, ... 9, blank; given cells stay put
print(puzzle.completed)
```

Snake and Game of Life advance on a clock you supply in milliseconds,
so a front end calls `tick` from its own loop:

```python
from inkgames.snake import Snake
from inkgames.life import GameOfLife

snake = Snake(now_ms=0)
snake.steer(0, 1)
snake.tick(170)
print(snake.head, snake.score)

life = GameOfLife(now_ms=0)
life.toggle()
life.toggle_running()
life.tick(200)
print(life.generation, life.population)
```

Diptych rooms and shard progress:

```python
from inkgames.diptych_rooms import ShardProgress, build_room, any_shard_remaining_at

progress = ShardProgress()
room = build_room(0, -1, chapter=1, progress=progress)
print(len(room.light.entities), room.linked)

progress.collect(1, 0)
print(progress.count(1), any_shard_remaining_at(0, -1, 1, progress))
```

## What the package does not do

There is no screen, input handling or command to run: front ends are
left to you. For Diptych the package supplies the world model and the
room layouts only; it does not include the game that plays them (moving
both halves, split and mirror walks, dialogue and chapter progression).
There is no maze game.

## Tests

The tests use pytest, listed under the `test` extra.
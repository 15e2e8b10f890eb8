"""Snake on a walled board: eat food, grow, and avoid walls and yourself."""

from __future__ import annotations

import random
from collections import deque

COLS = 20
ROWS = 24
STEP_MS = 170
FOOD_SCORE = 10
_SPAWN_TRIES = 500


class Snake:
    """The snake, its heading, the food and the score."""

    def __init__(
        self,
        cols: int = COLS,
        rows: int = ROWS,
        rng: random.Random | None = None,
        now_ms: int = 0,
    ) -> None:
        if cols < 3 or rows < 1:
            raise ValueError("the board is too small for a snake")
        self.cols = cols
        self.rows = rows
        self.rng = rng or random.Random()
        self.last_step = now_ms
        self.reset()

    def reset(self) -> None:
        """Start a new game with a three-segment snake heading right."""
        cx, cy = self.cols // 2, self.rows // 2
        self.body: deque[tuple[int, int]] = deque([(cx, cy), (cx - 1, cy), (cx - 2, cy)])
        self.direction = (1, 0)
        self.next_direction = (1, 0)
        self.score = 0
        self.running = True
        self.game_over = False
        self.spawn_food()

    @property
    def head(self) -> tuple[int, int]:
        return self.body[0]

    def is_occupied(self, x: int, y: int) -> bool:
        return (x, y) in self.body

    def spawn_food(self) -> None:
        """Put food on a random free cell, or at the corner if none is found."""
        for _ in range(_SPAWN_TRIES):
            x = self.rng.randrange(self.cols)
            y = self.rng.randrange(self.rows)
            if not self.is_occupied(x, y):
                self.food = (x, y)
                return
        self.food = (0, 0)

    def steer(self, dx: int, dy: int) -> bool:
        """Queue a new heading; turning straight back is refused. True when accepted."""
        if (abs(dx), abs(dy)) not in ((1, 0), (0, 1)):
            raise ValueError(f"not a unit direction: ({dx}, {dy})")
        if (dx, dy) == (-self.direction[0], -self.direction[1]):
            return False
        self.next_direction = (dx, dy)
        return True

    def step(self) -> None:
        """Move the snake one cell, eating or crashing as it goes."""
        if not self.running or self.game_over:
            return
        self.direction = self.next_direction
        hx, hy = self.head
        nx, ny = hx + self.direction[0], hy + self.direction[1]
        if not (0 <= nx < self.cols and 0 <= ny < self.rows) or self.is_occupied(nx, ny):
            self.game_over = True
            self.running = False
            return
        self.body.appendleft((nx, ny))
        if (nx, ny) == self.food:
            self.score += FOOD_SCORE
            self.spawn_food()
        else:
            self.body.pop()

    def confirm(self) -> None:
        """Restart after a crash, otherwise pause or resume."""
        if self.game_over:
            self.reset()
        else:
            self.running = not self.running

    def tick(self, now_ms: int) -> bool:
        """Step once the interval has passed; True when the interval had passed."""
        if now_ms - self.last_step >= STEP_MS:
            self.last_step = now_ms
            self.step()
            return True
        return False
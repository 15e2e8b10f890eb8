"""Conway's Game of Life on a bounded grid with a cursor and timed stepping."""

from __future__ import annotations

WIDTH = 40
HEIGHT = 28
STEP_INTERVAL_MS = 180


class GameOfLife:
    """A grid of cells that do not wrap at the edges, edited with a cursor."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT, now_ms: int = 0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("the grid needs at least one row and one column")
        self.width = width
        self.height = height
        self.grid = [[False] * width for _ in range(height)]
        self.cursor_x = width // 2
        self.cursor_y = height // 2
        self.generation = 0
        self.running = False
        self.last_step = now_ms

    def _live_neighbours(self, x: int, y: int) -> int:
        count = 0
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if not (dx or dy):
                    continue
                nx, ny = x + dx, y + dy
                if 0 <= nx < self.width and 0 <= ny < self.height and self.grid[ny][nx]:
                    count += 1
        return count

    def step(self) -> None:
        """Advance the grid by one generation."""
        self.grid = [
            [
                self._live_neighbours(x, y) in ((2, 3) if alive else (3,))
                for x, alive in enumerate(row)
            ]
            for y, row in enumerate(self.grid)
        ]
        self.generation += 1

    def toggle(self) -> None:
        """Flip the cell under the cursor."""
        self.grid[self.cursor_y][self.cursor_x] = not self.grid[self.cursor_y][self.cursor_x]

    def move_cursor(self, dx: int, dy: int) -> None:
        """Move the cursor, clamped to the grid."""
        self.cursor_x = max(0, min(self.width - 1, self.cursor_x + dx))
        self.cursor_y = max(0, min(self.height - 1, self.cursor_y + dy))

    def clear(self) -> None:
        """Kill every cell and restart the generation count."""
        self.grid = [[False] * self.width for _ in range(self.height)]
        self.generation = 0

    def toggle_running(self) -> None:
        self.running = not self.running

    def tick(self, now_ms: int) -> bool:
        """Step once if running and the interval has passed; True when it stepped."""
        if self.running and now_ms - self.last_step > STEP_INTERVAL_MS:
            self.last_step = now_ms
            self.step()
            return True
        return False

    @property
    def population(self) -> int:
        return sum(sum(row) for row in self.grid)
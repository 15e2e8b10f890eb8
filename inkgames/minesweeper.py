"""Minesweeper on a small board with a cursor, flags and a safe first reveal."""

from __future__ import annotations

import random
from enum import IntEnum

ROWS = 14
COLS = 10
MINES = 18
MINE = 9


class CellState(IntEnum):
    HIDDEN = 0
    REVEALED = 1
    FLAGGED = 2


class Minesweeper:
    """Board, cursor and win/loss state of one game.

    ``grid`` holds the number of adjacent mines for each cell, or ``MINE``.
    Mines are laid on the first reveal, never next to the revealed cell.
    """

    def __init__(
        self,
        rows: int = ROWS,
        cols: int = COLS,
        mines: int = MINES,
        rng: random.Random | None = None,
    ) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("the board needs at least one row and one column")
        if not 0 <= mines <= rows * cols - 9:
            raise ValueError(f"cannot place {mines} mines on a {rows}x{cols} board")
        self.rows = rows
        self.cols = cols
        self.mines = mines
        self.rng = rng or random.Random()
        self.reset()

    def reset(self) -> None:
        """Clear the board and start a new game."""
        self.grid = [[0] * self.cols for _ in range(self.rows)]
        self.state = [[CellState.HIDDEN] * self.cols for _ in range(self.rows)]
        self.cursor_r = 0
        self.cursor_c = 0
        self.lost = False
        self.won = False
        self.mines_placed = False

    @property
    def over(self) -> bool:
        return self.lost or self.won

    def _in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def _neighbours(self, r: int, c: int):
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if (dr or dc) and self._in_bounds(r + dr, c + dc):
                    yield r + dr, c + dc

    def adjacent_mines(self, r: int, c: int) -> int:
        """Number of mines around (r, c)."""
        return sum(1 for nr, nc in self._neighbours(r, c) if self.grid[nr][nc] == MINE)

    def place_mines(self, safe_r: int, safe_c: int) -> None:
        """Lay the mines away from (safe_r, safe_c) and number every other cell."""
        placed = 0
        while placed < self.mines:
            r = self.rng.randrange(self.rows)
            c = self.rng.randrange(self.cols)
            if self.grid[r][c] == MINE:
                continue
            if abs(r - safe_r) <= 1 and abs(c - safe_c) <= 1:
                continue
            self.grid[r][c] = MINE
            placed += 1
        for r in range(self.rows):
            for c in range(self.cols):
                if self.grid[r][c] != MINE:
                    self.grid[r][c] = self.adjacent_mines(r, c)
        self.mines_placed = True

    def move_cursor(self, dr: int, dc: int) -> None:
        """Move the cursor, clamped to the board; ignored once the game is over."""
        if self.over:
            return
        self.cursor_r = max(0, min(self.rows - 1, self.cursor_r + dr))
        self.cursor_c = max(0, min(self.cols - 1, self.cursor_c + dc))

    def toggle_flag(self) -> None:
        """Flag or unflag the hidden cell under the cursor."""
        if self.over:
            return
        r, c = self.cursor_r, self.cursor_c
        if self.state[r][c] == CellState.HIDDEN:
            self.state[r][c] = CellState.FLAGGED
        elif self.state[r][c] == CellState.FLAGGED:
            self.state[r][c] = CellState.HIDDEN

    def _flood_reveal(self, r: int, c: int) -> None:
        stack = [(r, c)]
        while stack:
            cr, cc = stack.pop()
            if not self._in_bounds(cr, cc) or self.state[cr][cc] != CellState.HIDDEN:
                continue
            self.state[cr][cc] = CellState.REVEALED
            if self.grid[cr][cc] == 0:
                stack.extend(self._neighbours(cr, cc))

    def _check_win(self) -> None:
        if all(
            self.grid[r][c] == MINE or self.state[r][c] == CellState.REVEALED
            for r in range(self.rows)
            for c in range(self.cols)
        ):
            self.won = True

    def reveal(self) -> None:
        """Reveal the cell under the cursor; on a finished game, start a new one."""
        if self.over:
            self.reset()
            return
        r, c = self.cursor_r, self.cursor_c
        if not self.mines_placed:
            self.place_mines(r, c)
        if self.state[r][c] == CellState.FLAGGED:
            return
        if self.grid[r][c] == MINE:
            self.lost = True
            for mr in range(self.rows):
                for mc in range(self.cols):
                    if self.grid[mr][mc] == MINE:
                        self.state[mr][mc] = CellState.REVEALED
        else:
            self._flood_reveal(r, c)
            self._check_win()
"""Sudoku: a randomly solved grid with 45 cells taken away."""

from __future__ import annotations

import random

SIZE = 9
REMOVED_CELLS = 45

Board = list[list[int]]


def is_valid(board: Board, r: int, c: int, v: int) -> bool:
    """Whether v can go at (r, c) without repeating in its row, column or box."""
    if any(board[r][i] == v or board[i][c] == v for i in range(SIZE)):
        return False
    br, bc = (r // 3) * 3, (c // 3) * 3
    return all(board[br + y][bc + x] != v for y in range(3) for x in range(3))


def solve(board: Board, rng: random.Random | None = None) -> bool:
    """Fill the empty cells in place, trying digits in random order. True when solved."""
    rng = rng or random.Random()

    def fill(idx: int) -> bool:
        if idx == SIZE * SIZE:
            return True
        r, c = divmod(idx, SIZE)
        if board[r][c]:
            return fill(idx + 1)
        digits = list(range(1, SIZE + 1))
        rng.shuffle(digits)
        for v in digits:
            if is_valid(board, r, c, v):
                board[r][c] = v
                if fill(idx + 1):
                    return True
                board[r][c] = 0
        return False

    return fill(0)


class Sudoku:
    """Puzzle, solution, given cells and cursor of one game."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.make_puzzle()

    def make_puzzle(self) -> None:
        """Solve an empty grid, then clear cells to make the puzzle."""
        self.puzzle = [[0] * SIZE for _ in range(SIZE)]
        solve(self.puzzle, self.rng)
        self.solution = [row[:] for row in self.puzzle]
        remaining = REMOVED_CELLS
        while remaining > 0:
            r = self.rng.randrange(SIZE)
            c = self.rng.randrange(SIZE)
            if self.puzzle[r][c]:
                self.puzzle[r][c] = 0
                remaining -= 1
        self.fixed = [[v != 0 for v in row] for row in self.puzzle]
        self.cursor_r = 0
        self.cursor_c = 0
        self.completed = False

    def move_cursor(self, dr: int, dc: int) -> None:
        """Move the cursor, clamped to the grid; ignored once completed."""
        if self.completed:
            return
        self.cursor_r = max(0, min(SIZE - 1, self.cursor_r + dr))
        self.cursor_c = max(0, min(SIZE - 1, self.cursor_c + dc))

    def cycle_cell(self) -> None:
        """Step the digit under the cursor through blank and 1 to 9.

        Given cells do not change. On a completed puzzle this starts a new one.
        """
        if self.completed:
            self.make_puzzle()
            return
        r, c = self.cursor_r, self.cursor_c
        if self.fixed[r][c]:
            return
        self.puzzle[r][c] = (self.puzzle[r][c] + 1) % (SIZE + 1)
        self.completed = self.puzzle == self.solution
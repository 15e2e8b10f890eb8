"""Game logic for small grid puzzle games: Minesweeper, Solitaire, Life, Snake, Sudoku and Diptych worlds and rooms."""

__version__ = "0.1.0"
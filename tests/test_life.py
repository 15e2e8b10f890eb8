import pytest

from inkgames.life import HEIGHT, STEP_INTERVAL_MS, WIDTH, GameOfLife


def _place(game, cells):
    for x, y in cells:
        game.grid[y][x] = True


def _alive(game):
    return {(x, y) for y, row in enumerate(game.grid) for x, v in enumerate(row) if v}


def test_initial_state():
    game = GameOfLife()
    assert game.population == 0
    assert (game.cursor_x, game.cursor_y) == (WIDTH // 2, HEIGHT // 2)
    assert game.generation == 0
    assert game.running is False


def test_blinker_oscillates_with_period_two():
    game = GameOfLife()
    horizontal = {(4, 5), (5, 5), (6, 5)}
    _place(game, horizontal)
    game.step()
    assert _alive(game) == {(5, 4), (5, 5), (5, 6)}
    game.step()
    assert _alive(game) == horizontal
    assert game.generation == 2


def test_block_is_stable():
    game = GameOfLife()
    block = {(1, 1), (2, 1), (1, 2), (2, 2)}
    _place(game, block)
    for _ in range(3):
        game.step()
    assert _alive(game) == block


def test_edges_do_not_wrap():
    game = GameOfLife(width=5, height=5)
    _place(game, {(0, 0), (0, 4), (4, 0)})
    game.step()
    assert _alive(game) == set()


def test_lonely_cell_dies():
    game = GameOfLife()
    game.toggle()
    assert game.population == 1
    game.step()
    assert game.population == 0


def test_toggle_twice_restores():
    game = GameOfLife()
    game.toggle()
    game.toggle()
    assert game.population == 0


def test_cursor_clamped():
    game = GameOfLife()
    game.move_cursor(-1000, -1000)
    assert (game.cursor_x, game.cursor_y) == (0, 0)
    game.move_cursor(1000, 1000)
    assert (game.cursor_x, game.cursor_y) == (WIDTH - 1, HEIGHT - 1)


def test_clear_resets_generation():
    game = GameOfLife()
    _place(game, {(1, 1), (2, 1), (3, 1)})
    game.step()
    game.clear()
    assert game.population == 0
    assert game.generation == 0


def test_tick_only_when_running_and_after_interval():
    game = GameOfLife(now_ms=0)
    assert game.tick(10_000) is False
    game.toggle_running()
    assert game.tick(STEP_INTERVAL_MS) is False
    assert game.tick(STEP_INTERVAL_MS + 1) is True
    assert game.generation == 1
    assert game.tick(STEP_INTERVAL_MS + 2) is False
    game.toggle_running()
    assert game.running is False


def test_invalid_size():
    with pytest.raises(ValueError):
        GameOfLife(width=0)
import random

import pytest

from inkgames.snake import COLS, FOOD_SCORE, ROWS, STEP_MS, Snake


def _game(seed=0):
    game = Snake(rng=random.Random(seed))
    game.food = (0, 0)
    return game


def test_initial_snake():
    game = Snake(rng=random.Random(1))
    assert list(game.body) == [(COLS // 2, ROWS // 2), (COLS // 2 - 1, ROWS // 2), (COLS // 2 - 2, ROWS // 2)]
    assert not game.is_occupied(*game.food)
    assert game.running and not game.game_over


def test_step_moves_right_keeping_length():
    game = _game()
    hx, hy = game.head
    game.step()
    assert game.head == (hx + 1, hy)
    assert len(game.body) == 3


def test_reverse_is_refused():
    game = _game()
    assert game.steer(-1, 0) is False
    assert game.steer(0, -1) is True
    game.step()
    assert game.direction == (0, -1)
    assert game.steer(0, 1) is False


def test_steer_rejects_non_unit():
    with pytest.raises(ValueError):
        _game().steer(1, 1)


def test_eating_grows_and_scores():
    game = _game()
    hx, hy = game.head
    game.food = (hx + 1, hy)
    game.step()
    assert len(game.body) == 4
    assert game.score == FOOD_SCORE
    assert not game.is_occupied(*game.food)


def test_wall_ends_game():
    game = _game()
    for _ in range(COLS):
        if game.game_over:
            break
        game.step()
    assert game.game_over
    assert game.running is False
    assert game.head[0] == COLS - 1


def test_self_collision_ends_game():
    game = _game()
    game.body.extend([(COLS // 2 - 3, ROWS // 2), (COLS // 2 - 3, ROWS // 2 - 1)])
    game.body.appendleft((COLS // 2 - 2, ROWS // 2 - 1))
    game.body = type(game.body)([(5, 5), (6, 5), (6, 6), (5, 6), (4, 6)])
    game.direction = game.next_direction = (0, 1)
    game.step()
    assert game.game_over


def test_paused_does_not_move():
    game = _game()
    game.confirm()
    before = list(game.body)
    game.step()
    assert list(game.body) == before
    game.confirm()
    game.step()
    assert list(game.body) != before


def test_confirm_after_game_over_restarts():
    game = _game()
    while not game.game_over:
        game.step()
    game.confirm()
    assert not game.game_over
    assert game.score == 0
    assert len(game.body) == 3


def test_tick_respects_interval():
    game = Snake(rng=random.Random(2), now_ms=0)
    game.food = (0, 0)
    head = game.head
    assert game.tick(STEP_MS - 1) is False
    assert game.head == head
    assert game.tick(STEP_MS) is True
    assert game.head == (head[0] + 1, head[1])
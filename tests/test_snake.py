import random

import pytest

from dsakit.snake import SnakeGame


def _game(width=5, height=5):
    game = SnakeGame(width=width, height=height, rng=random.Random(1), delay=0)
    game.x, game.y = 2, 2
    game.fruit = (0, 0)
    return game


def test_invalid_board_rejected():
    with pytest.raises(ValueError):
        SnakeGame(width=0, height=5)


def test_initial_fruit_inside_board():
    for seed in range(20):
        game = SnakeGame(width=7, height=4, rng=random.Random(seed))
        fx, fy = game.fruit
        assert 0 <= fx < game.width
        assert 0 <= fy < game.height


def test_render_layout():
    game = _game()
    lines = game.render().splitlines()
    assert len(lines) == game.height + 3
    assert lines[0] == "#" * (game.width + 2)
    assert lines[-2] == lines[0]
    assert lines[-1] == "Score: 0"
    assert lines[1 + game.y][1 + game.x] == "O"
    assert lines[1][1] == "F"
    assert "".join(lines).count("O") == 1


def test_render_shows_tail():
    game = _game()
    game.tail = [(4, 4)]
    game.tail_length = 1
    lines = game.render().splitlines()
    assert lines[5][5] == "o"


def test_keys_move_head():
    game = _game()
    start_x, start_y = game.x, game.y
    game.apply_key("a")
    assert game.x == start_x - 1
    game.apply_key("s")
    assert game.y == start_y + 1
    game.apply_key("q")
    assert (game.x, game.y) == (start_x - 1, start_y + 1)
    assert not game.game_over


def test_x_ends_game():
    game = _game()
    game.apply_key("x")
    assert game.game_over


def test_wraps_around_edges():
    game = _game()
    game.x = game.width - 1
    game.apply_key("d")
    game.step()
    assert game.x == 0
    game.y = 0
    game.apply_key("w")
    game.step()
    assert game.y == game.height - 1


def test_eating_fruit_scores_and_grows():
    game = _game()
    game.fruit = (game.x + 1, game.y)
    game.apply_key("d")
    game.step()
    assert game.score == 10
    assert game.tail_length == 1
    assert not game.game_over
    fx, fy = game.fruit
    assert 0 <= fx < game.width and 0 <= fy < game.height


def test_run_until_quit(capsys):
    game = _game()
    keys = iter("ddx")
    score = game.run(lambda: next(keys))
    assert game.game_over
    assert score == game.score
    assert "Score: 0" in capsys.readouterr().out
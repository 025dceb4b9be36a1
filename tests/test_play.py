import pygame
import pytest

from config import CELL_SIZE, PANEL_WIDTH, FOOD, SNAKE_HEAD, UP, LEFT
from game import GameState, Speed
from play import SnakeApp, handle_key, parse_args
from renderer import Renderer


def test_arrow_and_wasd_keys(game):
    game.env.food = (0, 0)
    assert handle_key(game, pygame.K_w)
    assert game.state == GameState.RUNNING
    assert game.env.next_direction == UP

    assert handle_key(game, pygame.K_LEFT)
    assert game.env.next_direction == LEFT


def test_space_starts_then_toggles_pause(game):
    handle_key(game, pygame.K_SPACE)
    assert game.is_running
    handle_key(game, pygame.K_RETURN)
    assert game.is_paused
    handle_key(game, pygame.K_SPACE)
    assert game.is_running


def test_space_ignored_after_game_over(game):
    game.set_direction(LEFT)
    game.env.snake = [(0, 5)]
    game.tick()

    handle_key(game, pygame.K_SPACE)
    assert game.is_over

    handle_key(game, pygame.K_r)
    assert game.state == GameState.IDLE


def test_number_keys_select_speed(game):
    handle_key(game, pygame.K_4)
    assert game.speed == Speed.EXTREME
    handle_key(game, pygame.K_1)
    assert game.speed == Speed.SLOW


def test_escape_quits(game):
    assert not handle_key(game, pygame.K_ESCAPE)


def test_parse_args_defaults():
    args = parse_args([])
    assert args.speed == "medium"
    assert args.grid == 20
    assert not args.verbose


def test_parse_args_rejects_bad_values():
    with pytest.raises(SystemExit):
        parse_args(["--speed", "ludicrous"])
    with pytest.raises(SystemExit):
        parse_args(["--grid", "1"])


@pytest.fixture
def surface():
    pygame.font.init()
    board = 20 * CELL_SIZE
    yield pygame.Surface((board + PANEL_WIDTH, board))
    pygame.font.quit()


def test_renderer_draws_food_and_head(game, db, surface):
    game.start()
    game.env.snake = [(10, 10), (9, 10)]
    game.env.food = (3, 4)

    Renderer(surface, 20, stats=db.get_stats).draw(game)

    half = CELL_SIZE // 2
    food_px = surface.get_at((3 * CELL_SIZE + half, 4 * CELL_SIZE + half))
    head_px = surface.get_at((10 * CELL_SIZE + half, 10 * CELL_SIZE + half))
    assert tuple(food_px)[:3] == FOOD
    assert tuple(head_px)[:3] == SNAKE_HEAD


@pytest.mark.parametrize("state", ["idle", "paused", "over"])
def test_renderer_handles_every_state(game, surface, state):
    if state == "paused":
        game.start()
        game.pause()
    elif state == "over":
        game.set_direction(LEFT)
        game.env.snake = [(0, 5)]
        game.tick()

    Renderer(surface, 20).draw(game)


def test_app_handles_key_events(game, db):
    app = SnakeApp(game, db)
    try:
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
        assert app.handle_events()
        assert game.is_running

        pygame.event.post(pygame.event.Event(pygame.QUIT))
        assert not app.handle_events()
    finally:
        pygame.quit()

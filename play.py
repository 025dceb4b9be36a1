"""
Змейка в окне pygame.

Использование:
    python play.py                      # обычная игра
    python play.py --speed fast         # начальная скорость
    python play.py --grid 30 --seed 1   # поле 30x30, воспроизводимая еда
"""
import argparse
import logging

import pygame

from config import CELL_SIZE, GRID_CELLS, PANEL_WIDTH, FPS, DB_PATH, SPEEDS, DEFAULT_SPEED, UP, DOWN, LEFT, RIGHT
from database import SnakeDatabase
from game import SnakeGame, GameState, Speed
from renderer import Renderer

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}

KEY_SPEEDS = {
    pygame.K_1: Speed.SLOW,
    pygame.K_2: Speed.MEDIUM,
    pygame.K_3: Speed.FAST,
    pygame.K_4: Speed.EXTREME,
}


def handle_key(game, key):
    """Перевод клавиши в команду игры. False - пора выходить."""
    if key == pygame.K_ESCAPE:
        return False

    if key in KEY_DIRECTIONS:
        game.set_direction(KEY_DIRECTIONS[key])
    elif key in (pygame.K_SPACE, pygame.K_RETURN):
        if game.state == GameState.IDLE:
            game.start()
        else:
            game.toggle_pause()
    elif key == pygame.K_r:
        game.reset()
    elif key in KEY_SPEEDS:
        game.set_speed(KEY_SPEEDS[key])
    return True


class SnakeApp:
    def __init__(self, game, db=None, cell_size=CELL_SIZE):
        pygame.init()

        self.game = game
        self.db = db
        board = game.env.grid_size * cell_size

        self.screen = pygame.display.set_mode((board + PANEL_WIDTH, board))
        pygame.display.set_caption('Snake')
        self.clock = pygame.time.Clock()

        stats = db.get_stats if db is not None else None
        self.renderer = Renderer(self.screen, game.env.grid_size, cell_size, stats=stats)

    def handle_events(self):
        """Обработка событий"""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if not handle_key(self.game, event.key):
                    return False
        return True

    def run(self):
        running = True
        games = 0
        best = 0

        while running:
            running = self.handle_events()

            was_over = self.game.is_over
            dt = self.clock.tick(FPS)
            self.game.advance(dt)

            if self.game.is_over and not was_over:
                games += 1
                best = max(best, self.game.final_score)

            self.renderer.draw(self.game)
            pygame.display.flip()

        pygame.quit()

        if games > 0:
            print(f"\nGames this session: {games}")
            print(f"Best: {best}")
        print(f"High score: {self.game.high_score}")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Snake")
    parser.add_argument("--speed", choices=list(SPEEDS), default=DEFAULT_SPEED,
                        help="Initial speed")
    parser.add_argument("--db", type=str, default=DB_PATH,
                        help="Path to the high score database")
    parser.add_argument("--grid", type=int, default=GRID_CELLS,
                        help="Grid size in cells (square)")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE,
                        help="Cell size in pixels")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food placement")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Debug logging")
    args = parser.parse_args(argv)

    if args.grid < 2:
        parser.error("--grid must be at least 2")
    if args.cell_size < 4:
        parser.error("--cell-size must be at least 4")
    return args


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    db = SnakeDatabase(args.db)
    try:
        game = SnakeGame(store=db, speed=args.speed, grid_size=args.grid, seed=args.seed)
        logger.info("High score: %d", game.high_score)
        SnakeApp(game, db, cell_size=args.cell_size).run()
    finally:
        db.close()


if __name__ == "__main__":
    main()

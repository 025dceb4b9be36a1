"""
Игра: состояние, команды игрока и таймер шагов.

Idle -> Running -> Paused -> Running ... -> GameOver -> (reset) -> Idle

Неуместные команды (пауза до старта, поворот после проигрыша и т.п.)
просто игнорируются.
"""
import logging
from enum import Enum

from config import SPEEDS, DEFAULT_SPEED, GAME_OVER_PHRASES
from env import SnakeEnv
from ticker import IntervalTicker

logger = logging.getLogger(__name__)


class GameState(Enum):
    IDLE = 'idle'
    RUNNING = 'running'
    PAUSED = 'paused'
    GAME_OVER = 'game_over'


class Speed(Enum):
    SLOW = SPEEDS['slow']
    MEDIUM = SPEEDS['medium']
    FAST = SPEEDS['fast']
    EXTREME = SPEEDS['extreme']

    @property
    def interval(self):
        """Миллисекунд на один шаг"""
        return self.value

    @property
    def label(self):
        return self.name.lower()

    @classmethod
    def from_name(cls, name):
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown speed {name!r}, expected one of {list(SPEEDS)}") from None


class SnakeGame:
    def __init__(self, store=None, speed=DEFAULT_SPEED, grid_size=None, seed=None, rng=None):
        self.store = store
        self.env = SnakeEnv(grid_size, rng=rng, seed=seed)
        self.ticker = IntervalTicker(self.tick)
        self.speed = speed if isinstance(speed, Speed) else Speed.from_name(speed)

        self.state = GameState.IDLE
        self.final_score = None
        self.phrase = None

        self.high_score = store.load_high_score() if store is not None else 0

    # --- Свойства для отрисовки ---

    @property
    def score(self):
        return self.env.score

    @property
    def snake(self):
        return self.env.snake

    @property
    def food(self):
        return self.env.food

    @property
    def direction(self):
        return self.env.direction

    @property
    def is_running(self):
        return self.state == GameState.RUNNING

    @property
    def is_paused(self):
        return self.state == GameState.PAUSED

    @property
    def is_over(self):
        return self.state == GameState.GAME_OVER

    # --- Команды ---

    def start(self):
        if self.state != GameState.IDLE:
            logger.debug("Start ignored in state %s", self.state.name)
            return

        self.env.apply_default_direction()
        self.state = GameState.RUNNING
        self.ticker.start(self.speed.interval)
        logger.debug("Game started at %s (%d ms)", self.speed.label, self.speed.interval)

    def pause(self):
        if self.state != GameState.RUNNING:
            return
        self.ticker.stop()
        self.state = GameState.PAUSED
        logger.debug("Paused")

    def resume(self):
        if self.state != GameState.PAUSED:
            return
        self.state = GameState.RUNNING
        # Скорость могли поменять во время паузы - берём текущую
        self.ticker.start(self.speed.interval)
        logger.debug("Resumed at %d ms", self.speed.interval)

    def toggle_pause(self):
        if self.state == GameState.PAUSED:
            self.resume()
        else:
            self.pause()

    def reset(self):
        self.ticker.stop()
        self.env.reset()
        self.state = GameState.IDLE
        self.final_score = None
        self.phrase = None
        logger.debug("Reset")

    def set_direction(self, direction):
        """Поворот. В Idle заодно запускает игру."""
        if self.state == GameState.GAME_OVER:
            return False

        accepted = self.env.set_direction(direction)
        if not accepted:
            logger.debug("Direction %s rejected", direction)
            return False

        if self.state == GameState.IDLE:
            self.start()
        return True

    def set_speed(self, speed):
        if not isinstance(speed, Speed):
            speed = Speed.from_name(speed)
        if speed == self.speed:
            return
        self.speed = speed
        if self.state == GameState.RUNNING:
            # Новый интервал начнёт действовать со следующего тика
            self.ticker.start(speed.interval)
        logger.debug("Speed set to %s", speed.label)

    # --- Шаг ---

    def tick(self):
        """Вызывается таймером"""
        if self.state != GameState.RUNNING:
            return
        _, done = self.env.step()
        if done:
            self._game_over()

    def advance(self, ms):
        """Прошло ms миллисекунд реального времени"""
        return self.ticker.advance(ms)

    def _game_over(self):
        self.ticker.stop()
        self.state = GameState.GAME_OVER
        self.final_score = self.env.score

        if self.final_score > self.high_score:
            self.high_score = self.final_score

        if self.store is not None:
            self.store.save_high_score_if_higher(self.final_score)
            self.store.record_game(self.final_score, len(self.env.snake), self.speed.label)

        if not self.env.won:
            idx = self.env.rng.integers(len(GAME_OVER_PHRASES))
            self.phrase = GAME_OVER_PHRASES[int(idx)]

        logger.info("Game over: score %d, length %d%s", self.final_score,
                    len(self.env.snake), " (board cleared)" if self.env.won else "")

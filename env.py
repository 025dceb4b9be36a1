"""
Среда змейки: поле, еда, тело и один шаг симуляции.

Клетка - пара (x, y), 0 <= x, y < N.
Змейка - список клеток, голова в начале.
Никакого pygame здесь нет - только целочисленная логика.
"""
import logging

import numpy as np

from config import GRID_CELLS, SCORE_FOR_FOOD, NONE, RIGHT, DIRECTIONS

logger = logging.getLogger(__name__)


def place_food(occupied, grid_size, rng=None, max_attempts=None):
    """
    Случайная свободная клетка для еды.

    Сначала честный случайный выбор с отбраковкой занятых клеток.
    После max_attempts неудач (по умолчанию N*N) - перебор всех
    свободных клеток, чтобы не зависнуть на почти заполненном поле.
    Если свободных клеток нет - None.
    """
    if rng is None:
        rng = np.random.default_rng()
    if max_attempts is None:
        max_attempts = grid_size * grid_size

    occupied = set(occupied)

    for _ in range(max_attempts):
        x, y = rng.integers(0, grid_size, size=2)
        cell = (int(x), int(y))
        if cell not in occupied:
            return cell

    # Запасной вариант - перебор
    free = np.ones((grid_size, grid_size), dtype=bool)
    for x, y in occupied:
        if 0 <= x < grid_size and 0 <= y < grid_size:
            free[y, x] = False

    cells = np.argwhere(free)
    if len(cells) == 0:
        logger.info("No free cell left for food")
        return None

    y, x = cells[rng.integers(len(cells))]
    logger.debug("Food placed by scan after %d rejected samples", max_attempts)
    return (int(x), int(y))


class SnakeEnv:
    def __init__(self, grid_size=None, rng=None, seed=None):
        self.grid_size = grid_size or GRID_CELLS
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.reset()

    def reset(self):
        """Сброс: одна клетка в центре, направление не выбрано"""
        c = self.grid_size // 2
        self.snake = [(c, c)]
        self.direction = NONE        # вектор движения на последнем шаге
        self.next_direction = NONE   # что применится на следующем шаге
        self.food = place_food(self.snake, self.grid_size, self.rng)
        self.score = 0
        self.done = False
        self.won = False

    def apply_default_direction(self):
        """Если игрок ещё ничего не нажал - ползём вправо"""
        if self.next_direction == NONE:
            self.next_direction = RIGHT
        if self.direction == NONE:
            self.direction = self.next_direction

    def set_direction(self, new_dir):
        """
        Запомнить направление на следующий шаг.
        Разворот на 180 градусов относительно текущего движения запрещён.
        Возвращает True, если направление принято.
        """
        new_dir = tuple(new_dir)
        if new_dir not in DIRECTIONS:
            return False

        dx, dy = self.direction
        if new_dir == (-dx, -dy):
            return False

        self.next_direction = new_dir
        if self.direction == NONE:
            self.direction = new_dir
        return True

    def in_bounds(self, cell):
        x, y = cell
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size

    def step(self):
        """
        Один тик. Возвращает (ate, done).

        Столкновение проверяется со всем текущим телом, включая хвост,
        который на этом шаге ещё не убран.
        """
        if self.done:
            return False, True

        if self.next_direction == NONE:
            self.next_direction = RIGHT
        self.direction = self.next_direction

        head_x, head_y = self.snake[0]
        dx, dy = self.direction
        new_head = (head_x + dx, head_y + dy)

        # Стена или тело
        if not self.in_bounds(new_head) or new_head in self.snake:
            self.done = True
            return False, True

        self.snake.insert(0, new_head)

        if new_head == self.food:
            self.score += SCORE_FOR_FOOD
            self.food = place_food(self.snake, self.grid_size, self.rng)

            # Заполнили всё поле
            if self.food is None:
                self.done = True
                self.won = True
                return True, True
            return True, False

        # Убираем хвост
        self.snake.pop()
        return False, False

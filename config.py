# Настройки игры
# Холст 400x400, клетка 20 px -> поле 20x20
WIDTH = 400   # холст квадратный

# Сетка
CELL_SIZE = 20
GRID_CELLS = WIDTH // CELL_SIZE   # 20 клеток

# Боковая панель со статистикой
PANEL_WIDTH = 200

# Цвета
BACKGROUND = (44, 62, 80)
GRID = (66, 82, 97)
SNAKE = (39, 174, 96)
SNAKE_HEAD = (46, 204, 113)
FOOD = (231, 76, 60)
PANEL = (40, 40, 40)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
GRAY = (150, 150, 150)
OVERLAY = (0, 0, 0, 160)

# Направления
NONE = (0, 0)    # ещё не выбрано
UP = (0, -1)
DOWN = (0, 1)
RIGHT = (1, 0)
LEFT = (-1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# Скорость: мс на один шаг
SPEEDS = {
    'slow': 200,
    'medium': 150,
    'fast': 100,
    'extreme': 50,
}
DEFAULT_SPEED = 'medium'

# Частота кадров отрисовки (не путать со скоростью змейки)
FPS = 60

# Очки за еду
SCORE_FOR_FOOD = 10

# Хранилище рекорда
DB_PATH = "snake_game.db"
HIGH_SCORE_KEY = "snakeHighScore"

# Фразы для экрана поражения
GAME_OVER_PHRASES = [
    "Близок локоть, да не укусишь",
    "Поспешишь - людей насмешишь",
    "Не всё коту масленица",
    "Кто не рискует, тот не пьёт шампанского",
    "Тише едешь - дальше будешь",
    "Первый блин комом",
    "Не говори гоп, пока не перепрыгнешь",
]

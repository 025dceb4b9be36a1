"""
Отрисовка игры в pygame.

Только читает состояние SnakeGame, ничего в нём не меняет.
"""
import pygame

from config import (CELL_SIZE, PANEL_WIDTH, BACKGROUND, GRID, SNAKE, SNAKE_HEAD,
                    FOOD, PANEL, BLACK, WHITE, GRAY, OVERLAY, NONE, RIGHT)
from game import GameState, Speed


class Renderer:
    def __init__(self, surface, grid_size, cell_size=CELL_SIZE, stats=None):
        self.surface = surface
        self.grid_size = grid_size
        self.cell_size = cell_size
        self.board = grid_size * cell_size
        # Функция, возвращающая статистику партий (из базы)
        self.stats = stats

        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.SysFont('arial', 18)
        self.big_font = pygame.font.SysFont('arial', 28, bold=True)

    def cell_rect(self, cell):
        x, y = cell
        return pygame.Rect(x * self.cell_size, y * self.cell_size,
                           self.cell_size, self.cell_size)

    def draw(self, game):
        self.surface.fill(BACKGROUND, (0, 0, self.board, self.board))
        self.draw_grid()
        self.draw_food(game.food)
        self.draw_snake(game.snake, game.direction)
        self.draw_panel(game)

        if game.state == GameState.IDLE:
            self.draw_overlay("SNAKE", ["Arrows / WASD or SPACE to start"])
        elif game.state == GameState.PAUSED:
            self.draw_overlay("PAUSED", ["SPACE to resume"])
        elif game.state == GameState.GAME_OVER:
            title = "YOU WIN!" if game.env.won else "GAME OVER"
            lines = [f"Score: {game.final_score}"]
            if game.phrase:
                lines.append(game.phrase)
            lines.append("R to restart")
            self.draw_overlay(title, lines)

    def draw_grid(self):
        """Рисуем сетку"""
        for i in range(self.grid_size + 1):
            pos = i * self.cell_size
            pygame.draw.line(self.surface, GRID, (pos, 0), (pos, self.board))
            pygame.draw.line(self.surface, GRID, (0, pos), (self.board, pos))

    def draw_food(self, food):
        if food is None:
            return
        rect = self.cell_rect(food)
        pygame.draw.circle(self.surface, FOOD, rect.center, self.cell_size // 2 - 2)

    def draw_snake(self, snake, direction):
        """Рисуем змейку: тело кругами, голова ярче и с глазами"""
        radius = self.cell_size // 2 - 2
        for cell in reversed(snake[1:]):
            pygame.draw.circle(self.surface, SNAKE, self.cell_rect(cell).center, radius)

        head = self.cell_rect(snake[0])
        pygame.draw.rect(self.surface, SNAKE_HEAD, head.inflate(-2, -2),
                         border_radius=self.cell_size // 3)
        self.draw_eyes(head, direction)

    def draw_eyes(self, head, direction):
        dx, dy = direction if direction != NONE else RIGHT
        cx, cy = head.center
        forward = self.cell_size // 5
        side = self.cell_size // 4
        size = max(1, self.cell_size // 8)

        # Две точки сбоку от оси движения, чуть впереди центра
        for sign in (-1, 1):
            ex = cx + dx * forward + (-dy) * side * sign
            ey = cy + dy * forward + dx * side * sign
            pygame.draw.circle(self.surface, WHITE, (ex, ey), size + 1)
            pygame.draw.circle(self.surface, BLACK, (ex + dx, ey + dy), size // 2 + 1)

    def draw_panel(self, game):
        """Панель статистики"""
        panel = pygame.Rect(self.board, 0, PANEL_WIDTH, self.board)
        pygame.draw.rect(self.surface, PANEL, panel)

        stats = self.stats() if self.stats else None
        rows = [
            f"Score: {game.score}",
            f"High score: {game.high_score}",
            f"Length: {len(game.snake)}",
            f"Speed: {game.speed.label} ({game.speed.interval} ms)",
        ]
        if stats:
            rows += [
                "",
                f"Games: {stats['games']}",
                f"Avg: {stats['avg']:.1f}",
            ]
        rows += [
            "",
            "Controls:",
            "Arrows/WASD Move",
            "SPACE Start/Pause",
            "R Reset",
        ]
        rows += [f"{i} {speed.label}" for i, speed in enumerate(Speed, start=1)]
        rows.append("ESC Quit")

        for i, text in enumerate(rows):
            color = GRAY if text and i > 3 else WHITE
            surf = self.font.render(text, True, color)
            self.surface.blit(surf, (self.board + 10, 20 + i * 22))

    def draw_overlay(self, title, lines):
        shade = pygame.Surface((self.board, self.board), pygame.SRCALPHA)
        shade.fill(OVERLAY)
        self.surface.blit(shade, (0, 0))

        center = self.board // 2
        text = self.big_font.render(title, True, WHITE)
        y = center - 20 * len(lines)
        self.surface.blit(text, text.get_rect(center=(center, y)))

        for line in lines:
            y += 30
            surf = self.font.render(line, True, WHITE)
            self.surface.blit(surf, surf.get_rect(center=(center, y)))

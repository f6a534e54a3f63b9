from __future__ import annotations

from typing import Optional, Sequence, Tuple

import pygame

from gtr_trainer.game import PuyoColor, TsumoPair
from gtr_trainer.trainer import GhostPosition, GtrTrainerGame


def _color_for_value(v: int) -> Tuple[int, int, int]:
    palette = {
        0: (20, 20, 26),
        1: (230, 60, 60),    # RED
        2: (60, 110, 230),   # BLUE
        3: (70, 200, 90),    # GREEN
        4: (230, 210, 60),   # YELLOW
    }
    return palette.get(abs(v), (200, 200, 200))


class Renderer:
    """Draws the board with row 0 at the bottom, plus ghosts and a side panel."""

    def __init__(self, cell_size: int = 30, margin: int = 20, spawn_rows: int = 2) -> None:
        self.cell_size = cell_size
        self.margin = margin
        self.spawn_rows = spawn_rows
        self.font: Optional[pygame.font.Font] = None

    def window_size(self, game: GtrTrainerGame) -> Tuple[int, int]:
        cfg = game.config
        width = self.margin * 3 + (cfg.width + 4) * self.cell_size
        height = self.margin * 2 + (cfg.height + self.spawn_rows) * self.cell_size
        return width, height

    def _cell_rect(self, game: GtrTrainerGame, x: int, y: int) -> pygame.Rect:
        # y counts up from the floor; screen rows count down
        top_row = game.config.height + self.spawn_rows - 1 - y
        return pygame.Rect(
            self.margin + x * self.cell_size,
            self.margin + top_row * self.cell_size,
            self.cell_size - 1,
            self.cell_size - 1,
        )

    def _draw_puyo(self, screen: pygame.Surface, rect: pygame.Rect, color: PuyoColor, width: int = 0) -> None:
        pygame.draw.ellipse(screen, _color_for_value(int(color)), rect, width)

    def _draw_ghost(self, screen: pygame.Surface, game: GtrTrainerGame, ghost: Optional[GhostPosition],
                    outline: Tuple[int, int, int]) -> None:
        if ghost is None:
            return
        for x, y, color in ghost.cells():
            rect = self._cell_rect(game, x, y)
            self._draw_puyo(screen, rect, color, 2)
            pygame.draw.rect(screen, outline, rect, 1)

    def _draw_falling(self, screen: pygame.Surface, game: GtrTrainerGame) -> None:
        piece = game.round.falling
        axis_y = game.config.height
        dx, dy = piece.rotation.offset
        # Keep both cells inside the spawn rows above the board
        if dy < 0:
            axis_y += 1
        self._draw_puyo(screen, self._cell_rect(game, piece.x, axis_y), piece.pair.axis)
        self._draw_puyo(screen, self._cell_rect(game, piece.x + dx, axis_y + dy), piece.pair.child)

    def _draw_panel(self, screen: pygame.Surface, game: GtrTrainerGame, queue: Sequence[TsumoPair]) -> None:
        x0 = self.margin * 2 + game.config.width * self.cell_size
        y0 = self.margin
        for i, pair in enumerate(queue):
            top = y0 + i * self.cell_size * 3
            child_rect = pygame.Rect(x0, top, self.cell_size - 1, self.cell_size - 1)
            axis_rect = pygame.Rect(x0, top + self.cell_size, self.cell_size - 1, self.cell_size - 1)
            self._draw_puyo(screen, child_rect, pair.child)
            self._draw_puyo(screen, axis_rect, pair.axis)

        if self.font is None:
            self.font = pygame.font.SysFont(None, 24)
        lines = [
            f"Pair {game.round.index + 1}/{len(game.round.tsumos)}",
            f"Success: {game.success_count}",
            f"Fail: {game.fail_count}",
        ]
        y_text = y0 + self.cell_size * 3 * max(1, game.config.preview_count) + 10
        for i, txt in enumerate(lines):
            img = self.font.render(txt, True, (230, 230, 230))
            screen.blit(img, (x0, y_text + i * 20))

    def draw(self, screen: pygame.Surface, game: GtrTrainerGame, show_hint: bool = True) -> None:
        screen.fill((10, 10, 14))
        board = game.board
        for y in range(board.height):
            for x in range(board.width):
                rect = self._cell_rect(game, x, y)
                pygame.draw.rect(screen, _color_for_value(0), rect)
                color = board.get_cell(x, y)
                if color != PuyoColor.NONE:
                    self._draw_puyo(screen, rect, color)
        if show_hint:
            self._draw_ghost(screen, game, game.solution_ghost, (255, 255, 255))
        self._draw_ghost(screen, game, game.player_ghost, (120, 120, 130))
        self._draw_falling(screen, game)
        self._draw_panel(screen, game, game.next_tsumos)
        pygame.display.flip()

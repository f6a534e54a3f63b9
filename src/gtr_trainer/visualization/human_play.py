from __future__ import annotations

import argparse
from typing import Dict, Optional

import pygame

from gtr_trainer.game import LEFT_GTR, SHAPES
from gtr_trainer.trainer import Action, GameConfig, GtrTrainerGame, Outcome
from .renderer import Renderer


KEY_TO_ACTION: Dict[int, Action] = {
    pygame.K_LEFT: Action.LEFT,
    pygame.K_RIGHT: Action.RIGHT,
    pygame.K_UP: Action.ROTATE_CW,
    pygame.K_x: Action.ROTATE_CW,
    pygame.K_z: Action.ROTATE_CCW,
    pygame.K_DOWN: Action.DROP,
    pygame.K_SPACE: Action.DROP,
    pygame.K_n: Action.NEW_ROUND,
}


def run(seed: Optional[int] = None, shape_name: str = LEFT_GTR.name) -> None:
    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = GtrTrainerGame(GameConfig(random_seed=seed, shape=SHAPES[shape_name]))
        renderer = Renderer(cell_size=32)
        screen = pygame.display.set_mode(renderer.window_size(game))
        pygame.display.set_caption("GTR Trainer")

        show_hint = True
        flash_until = 0
        flash_color = (0, 0, 0)

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_h:
                        show_hint = not show_hint
                    else:
                        action = KEY_TO_ACTION.get(event.key)
                        if action is not None:
                            outcome = game.step(action)
                            if outcome in (Outcome.SUCCESS, Outcome.FAIL):
                                flash_until = pygame.time.get_ticks() + 400
                                flash_color = (60, 220, 120) if outcome == Outcome.SUCCESS else (230, 70, 70)

            renderer.draw(screen, game, show_hint=show_hint)

            # Brief border flash after a round ends
            if pygame.time.get_ticks() < flash_until:
                pygame.draw.rect(screen, flash_color, screen.get_rect(), 6)
                pygame.display.flip()

            clock.tick(60)
    finally:
        pygame.quit()


def main() -> None:
    p = argparse.ArgumentParser(description="Practice building a left GTR with solver hints.")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--shape", choices=sorted(SHAPES), default=LEFT_GTR.name)
    args = p.parse_args()
    run(args.seed, args.shape)


if __name__ == "__main__":  # pragma: no cover
    main()

"""Window, drawing and frame loop for the falling-box dodging game."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from functools import lru_cache

import pygame

from boxgames.dodge import KEY_LEFT, KEY_RIGHT, WINDOW_HEIGHT, WINDOW_WIDTH, DodgeGame
from boxgames.geometry import Rect
from boxgames.keys import KeyManager

TITLE = "Box Dodge"
FRAME_RATE = 60

BACKGROUND = (255, 255, 255)
FILL = (255, 255, 255)
OUTLINE = (0, 0, 0)
TEXT_COLOUR = (0, 0, 0)

SCORE_POSITION = (10, 10)
LEVEL_POSITION = (10, 30)


@lru_cache(maxsize=None)
def _font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, 20)


def _draw_rect(surface: pygame.Surface, rect: Rect) -> None:
    area = pygame.Rect(
        int(rect.left),
        int(rect.top),
        int(rect.right - rect.left),
        int(rect.bottom - rect.top),
    )
    pygame.draw.rect(surface, FILL, area)
    pygame.draw.rect(surface, OUTLINE, area, width=1)


def draw(surface: pygame.Surface, game: DodgeGame) -> None:
    """Paint the player, the falling boxes, the score and the level onto ``surface``."""
    surface.fill(BACKGROUND)
    _draw_rect(surface, game.player.rect)
    for box in game.boxes:
        _draw_rect(surface, box.rect)
    font = _font()
    surface.blit(font.render(str(game.score), True, TEXT_COLOUR), SCORE_POSITION)
    surface.blit(font.render(str(game.level), True, TEXT_COLOUR), LEVEL_POSITION)


def _pressed_codes(pressed: Sequence[bool]) -> set[int]:
    """Translate pygame's pressed-key table into the key codes the game reads."""
    codes = set()
    if pressed[pygame.K_LEFT]:
        codes.add(KEY_LEFT)
    if pressed[pygame.K_RIGHT]:
        codes.add(KEY_RIGHT)
    return codes


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run frames until the window is closed."""
    parser = argparse.ArgumentParser(
        prog="boxgames-dodge",
        description=(
            "Dodge the falling boxes with the arrow keys and catch them with the mouse."
        ),
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        keys = KeyManager()
        game = DodgeGame()
        mouse = (0, 0)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.MOUSEMOTION:
                    mouse = tuple(event.pos)
            keys.update(_pressed_codes(pygame.key.get_pressed()))
            game.update(keys, mouse)
            draw(screen, game)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        _font.cache_clear()
        pygame.quit()
"""Window, drawing and event loop for the box-pushing puzzle."""

from __future__ import annotations

import argparse
from functools import lru_cache

import pygame

from boxgames.sokoban import (
    BOX_SIZE,
    GOALS,
    KEY_DOWN,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_UP,
    PLAYER_SIZE,
    WALLS,
    Direction,
    SokobanGame,
)

WINDOW_WIDTH = 750
WINDOW_HEIGHT = 550
TITLE = "Sokoban"
TICK_MS = 50

BACKGROUND = (0, 0, 0)
OUTLINE = (0, 0, 0)
WALL_COLOUR = (194, 124, 122)
BOX_COLOUR = (0xFF, 0, 0)
PLAYER_COLOUR = (0x54, 0xF7, 0xFF)
GOAL_COLOUR = (0, 255, 0)
TEXT_COLOUR = (255, 255, 255)

_ARROWS = {
    Direction.UP: "↑",
    Direction.DOWN: "↓",
    Direction.LEFT: "←",
    Direction.RIGHT: "→",
}

_TICK_EVENT = pygame.USEREVENT


@lru_cache(maxsize=None)
def _font() -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, 20)


def status_lines(game: SokobanGame) -> list[str]:
    """The elapsed time and the number of boxes on their goals, as shown on screen."""
    return [
        f"Elapsed time: {game.elapsed():.2f}s",
        f"Solved cells: {game.solved_count}",
    ]


def _outlined_rect(surface: pygame.Surface, colour, rect: pygame.Rect) -> None:
    pygame.draw.rect(surface, colour, rect)
    pygame.draw.rect(surface, OUTLINE, rect, width=1)


def _text(surface: pygame.Surface, text: str, position, colour, background=None) -> None:
    surface.blit(_font().render(text, True, colour, background), position)


def draw(surface: pygame.Surface, game: SokobanGame) -> None:
    """Paint walls, goals, boxes, player and status onto ``surface``."""
    surface.fill(BACKGROUND)

    for x, y in WALLS:
        _outlined_rect(surface, WALL_COLOUR, pygame.Rect(x * BOX_SIZE, y * BOX_SIZE, BOX_SIZE, BOX_SIZE))

    for x, y in GOALS:
        position = (int((x + 0.5) * BOX_SIZE), int((y + 0.5) * BOX_SIZE))
        _text(surface, "*", position, GOAL_COLOUR, BACKGROUND)

    half = BOX_SIZE // 2
    for x, y in game.boxes:
        _outlined_rect(surface, BOX_COLOUR, pygame.Rect(x - half, y - half, BOX_SIZE, BOX_SIZE))

    size = int(PLAYER_SIZE)
    px, py = game.player_pos
    player = pygame.Rect(int(px - PLAYER_SIZE / 2), int(py - PLAYER_SIZE / 2), size, size)
    pygame.draw.ellipse(surface, PLAYER_COLOUR, player)
    pygame.draw.ellipse(surface, OUTLINE, player, width=1)

    _text(surface, _ARROWS[game.facing], (WINDOW_WIDTH - 25, WINDOW_HEIGHT - 25), TEXT_COLOUR)
    elapsed_line, count_line = status_lines(game)
    _text(surface, elapsed_line, (25, WINDOW_HEIGHT - 45), TEXT_COLOUR)
    _text(surface, count_line, (25, WINDOW_HEIGHT - 25), TEXT_COLOUR)


def _virtual_key(key: int) -> int:
    """Turn a pygame key into the key code the game's bindings use."""
    arrows = {
        pygame.K_UP: KEY_UP,
        pygame.K_DOWN: KEY_DOWN,
        pygame.K_LEFT: KEY_LEFT,
        pygame.K_RIGHT: KEY_RIGHT,
    }
    if key in arrows:
        return arrows[key]
    if pygame.K_a <= key <= pygame.K_z:
        return ord(chr(key).upper())
    return 0


def main(argv: list[str] | None = None) -> int:
    """Open the game window and play until every box is on a goal or the window closes."""
    parser = argparse.ArgumentParser(
        prog="boxgames-sokoban",
        description="Push every box onto a goal with WASD or the arrow keys.",
    )
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(TITLE)
        pygame.key.set_repeat(500, 33)
        pygame.time.set_timer(_TICK_EVENT, TICK_MS)
        game = SokobanGame()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN:
                game.press(_virtual_key(event.key))
            elif event.type == _TICK_EVENT:
                game.tick()
                if game.finished:
                    return 0
                draw(screen, game)
                pygame.display.flip()
    finally:
        _font.cache_clear()
        pygame.quit()
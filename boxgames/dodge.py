"""Falling-box dodging game: move along the floor, dodge boxes, catch them with the mouse."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from boxgames.geometry import Rect, rect_around
from boxgames.keys import KeyManager

WINDOW_WIDTH = 640
WINDOW_HEIGHT = 720

KEY_LEFT = 0x25
KEY_RIGHT = 0x27

PLAYER_SIZE = 50
PLAYER_SPEED = 20
PLAYER_START = (WINDOW_WIDTH // 2, WINDOW_HEIGHT - 30)

BOX_SIZE = 30
SPAWN_DELAY = 50

SCORE_LANDED = 5
SCORE_HIT = -20
SCORE_CAUGHT = 3


def _truncating_div(numerator: int, denominator: int) -> int:
    """Integer division rounding towards zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass
class FallingBox:
    """A box on its way down, with its own falling speed."""

    rect: Rect
    speed: int


class Player:
    """The square at the bottom of the screen, steered left and right."""

    def __init__(self) -> None:
        self.position = PLAYER_START
        self.speed = PLAYER_SPEED
        self.rect = rect_around(*self.position, PLAYER_SIZE)
        self.reset()

    def reset(self) -> None:
        """Put the player back at its starting place."""
        self.position = PLAYER_START
        self.speed = PLAYER_SPEED
        self.rect = rect_around(*self.position, PLAYER_SIZE)

    def update(self, keys: KeyManager) -> None:
        """Move one step for each arrow key pressed or held, staying on screen."""
        x, y = self.position
        if keys.is_down(KEY_LEFT) or keys.is_held(KEY_LEFT):
            if self.rect.left - self.speed >= 0:
                x -= self.speed
        if keys.is_down(KEY_RIGHT) or keys.is_held(KEY_RIGHT):
            if self.rect.right + self.speed <= WINDOW_WIDTH:
                x += self.speed
        self.position = (x, y)
        self.rect = rect_around(x, y, PLAYER_SIZE)


class BoxSpawner:
    """Creates boxes above the screen from time to time and lets them fall."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.boxes: list[FallingBox] = []
        self.delay = SPAWN_DELAY
        self.level = 1
        self.reset()

    def reset(self) -> None:
        """Drop every box and make the next update spawn one."""
        self.boxes = []
        self.delay = SPAWN_DELAY

    def update(self) -> None:
        """Spawn a box when the delay has run out, then move every box down."""
        if self.delay >= SPAWN_DELAY:
            left = self._rng.randrange(WINDOW_WIDTH)
            rect = Rect(left, -BOX_SIZE, left + BOX_SIZE, 0)
            speed = self._rng.randrange(10) + 5
            self.boxes.append(FallingBox(rect, speed))
            self.delay = self._rng.randrange(40)
        else:
            self.delay += self.level

        for box in self.boxes:
            box.rect = box.rect.moved(0, box.speed + self.level)


@dataclass
class DodgeGame:
    """Score keeping for the player and the falling boxes."""

    rng: random.Random | None = None
    score: int = field(init=False, default=0)
    level: int = field(init=False, default=0)
    player: Player = field(init=False)
    spawner: BoxSpawner = field(init=False)

    def __post_init__(self) -> None:
        self.player = Player()
        self.spawner = BoxSpawner(self.rng)
        self.reset()

    def reset(self) -> None:
        """Start a new game."""
        self.score = 0
        self.level = 0
        self.player.reset()
        self.spawner.reset()

    @property
    def boxes(self) -> list[FallingBox]:
        return self.spawner.boxes

    def update(self, keys: KeyManager, mouse: tuple[int, int] = (0, 0)) -> None:
        """Advance one frame given the keyboard state and the mouse position."""
        self.level = _truncating_div(self.score, 100) + 1

        self.player.update(keys)
        self.spawner.level = self.level
        self.spawner.update()

        mouse_x, mouse_y = mouse
        remaining = []
        for box in self.spawner.boxes:
            if box.rect.bottom > WINDOW_HEIGHT:
                self.score += SCORE_LANDED
            elif box.rect.intersects(self.player.rect):
                self.score += SCORE_HIT
            elif box.rect.contains(mouse_x, mouse_y):
                self.score += SCORE_CAUGHT
            else:
                remaining.append(box)
        self.spawner.boxes = remaining
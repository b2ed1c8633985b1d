"""Pixel-based box-pushing puzzle on a fixed level."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import replace
from enum import Enum

from boxgames.geometry import Rect, rect_around

BOX_SIZE = 50
PLAYER_SIZE = BOX_SIZE * 0.8
PLAYER_SPEED = 4

KEY_LEFT = 0x25
KEY_UP = 0x26
KEY_RIGHT = 0x27
KEY_DOWN = 0x28

WALLS = (
    (4, 0), (5, 0), (6, 0), (7, 0), (8, 0),
    (4, 1), (8, 1),
    (4, 2), (8, 2),
    (2, 3), (3, 3), (4, 3), (8, 3), (9, 3),
    (2, 4), (9, 4),
    (0, 5), (1, 5), (2, 5), (4, 5), (6, 5), (7, 5), (9, 5), (10, 5), (11, 5),
    (12, 5), (13, 5), (14, 5),
    (0, 6), (4, 6), (6, 6), (7, 6), (9, 6), (14, 6),
    (0, 7), (14, 7),
    (0, 8), (1, 8), (2, 8), (3, 8), (4, 8), (6, 8), (7, 8), (8, 8), (10, 8), (14, 8),
    (4, 9), (10, 9), (11, 9), (12, 9), (13, 9), (14, 9),
    (4, 10), (5, 10), (6, 10), (7, 10), (8, 10), (9, 10), (10, 10),
)

GOALS = ((11, 6), (12, 6), (13, 6), (12, 7), (13, 7), (13, 8))

BOX_STARTS = tuple(
    (int(cx * BOX_SIZE), int(cy * BOX_SIZE))
    for cx, cy in ((5.5, 2.5), (7.5, 3.5), (5.5, 4.5), (7.5, 4.5), (2.5, 7.5), (7.5, 7.5))
)

PLAYER_START = (int(5.5 * BOX_SIZE), int(8.5 * BOX_SIZE))


def _cell_rect(cell: tuple[int, int]) -> Rect:
    x, y = cell
    return Rect(x * BOX_SIZE, y * BOX_SIZE, (x + 1) * BOX_SIZE, (y + 1) * BOX_SIZE)


WALL_RECTS = tuple(_cell_rect(cell) for cell in WALLS)

_HALF_PLAYER = int(PLAYER_SIZE) // 2
_QUARTER = BOX_SIZE // 4
_HALF = BOX_SIZE // 2
_THREE_QUARTERS = BOX_SIZE * 3 // 4
_VICTORY_OFFSETS = (
    (_QUARTER, _QUARTER),
    (_QUARTER, _HALF),
    (_THREE_QUARTERS, _QUARTER),
    (_THREE_QUARTERS, _THREE_QUARTERS),
    (_THREE_QUARTERS, _HALF),
    (_THREE_QUARTERS, _THREE_QUARTERS),
)
_VICTORY_RECTS = tuple(
    Rect(gx * BOX_SIZE + ox, gy * BOX_SIZE + oy, gx * BOX_SIZE + ox + 1, gy * BOX_SIZE + oy + 1)
    for (gx, gy), (ox, oy) in zip(GOALS, _VICTORY_OFFSETS)
)


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


_STEPS = {
    Direction.UP: (0, -PLAYER_SPEED),
    Direction.DOWN: (0, PLAYER_SPEED),
    Direction.LEFT: (-PLAYER_SPEED, 0),
    Direction.RIGHT: (PLAYER_SPEED, 0),
}

_KEY_BINDINGS = {
    ord("W"): Direction.UP,
    KEY_UP: Direction.UP,
    ord("A"): Direction.LEFT,
    KEY_LEFT: Direction.LEFT,
    ord("S"): Direction.DOWN,
    KEY_DOWN: Direction.DOWN,
    ord("D"): Direction.RIGHT,
    KEY_RIGHT: Direction.RIGHT,
}


def direction_for_key(key: int | str) -> Direction:
    """Map a key code (or a single character) to a direction.

    Keys without a binding fall back to UP, like a defaulted table entry.
    """
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"expected a single character, got {key!r}")
        key = ord(key.upper())
    return _KEY_BINDINGS.get(key & 0xFF, Direction.UP)


def _reach(area: Rect, direction: Direction) -> Rect:
    """Stretch the player's area one step towards where it is heading."""
    if direction is Direction.UP:
        return replace(area, top=area.top - PLAYER_SPEED)
    if direction is Direction.LEFT:
        return replace(area, left=area.left - PLAYER_SPEED)
    if direction is Direction.DOWN:
        return replace(area, bottom=area.bottom + PLAYER_SPEED)
    return replace(area, right=area.right + PLAYER_SPEED)


def _box_probe(area: Rect, direction: Direction) -> Rect:
    """Stretch a box's area for the collision check before pushing it."""
    if direction is Direction.UP:
        return replace(area, top=area.top - PLAYER_SPEED)
    if direction is Direction.LEFT:
        return replace(area, right=area.right + PLAYER_SPEED)
    if direction is Direction.DOWN:
        return replace(area, bottom=area.bottom + PLAYER_SPEED)
    return replace(area, left=area.left - PLAYER_SPEED)


class SokobanGame:
    """State of one game: the player, the boxes and the progress towards the goals."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.player_pos = PLAYER_START
        self.facing = Direction.UP
        self.boxes = list(BOX_STARTS)
        self.box_areas = [rect_around(x, y, BOX_SIZE) for x, y in self.boxes]
        self.touching_box = False
        self.solved_count = 0
        self.finished = False
        self._area = Rect(0, 0, 0, 0)
        self.started = clock()
        self.last_tick = self.started

    def press(self, key: int | str) -> None:
        """Handle a key press."""
        self.move_player(direction_for_key(key))

    def move_player(self, direction: Direction) -> None:
        """Move the player one step, stopping flush against walls and blocked by boxes."""
        x, y = self.player_pos
        area = _reach(rect_around(x, y, int(PLAYER_SIZE)), direction)
        self._area = area
        wall = next((w for w in WALL_RECTS if w.intersects(area)), None)
        if wall is not None:
            if direction is Direction.UP:
                y = wall.bottom + _HALF_PLAYER
            elif direction is Direction.LEFT:
                x = wall.right + _HALF_PLAYER
            elif direction is Direction.DOWN:
                y = wall.top - _HALF_PLAYER
            else:
                x = wall.left - _HALF_PLAYER
        elif not self.touching_box:
            dx, dy = _STEPS[direction]
            x, y = x + dx, y + dy
        self.player_pos = (x, y)
        self.facing = direction

    def tick(self) -> None:
        """Advance one frame: push a touched box and count boxes on goals."""
        self.last_tick = self._clock()

        touched = next(
            (i for i, area in enumerate(self.box_areas) if self._area.intersects(area)),
            None,
        )
        if touched is not None:
            self.touching_box = False
            self._push_box(touched)
            x, y = self.boxes[touched]
            self.box_areas[touched] = rect_around(x, y, BOX_SIZE - 4)

        if any(self._area.intersects(area) for area in self.box_areas):
            self.touching_box = True

        self.solved_count = sum(
            1
            for spot in _VICTORY_RECTS
            if any(spot.intersects(area) for area in self.box_areas)
        )
        self.finished = self.solved_count == len(GOALS)

    def _push_box(self, index: int) -> None:
        probe = _box_probe(self.box_areas[index], self.facing)
        for other_index, other in enumerate(self.box_areas):
            if other_index == index:
                continue
            same_corner = probe.right == other.right and probe.top == other.top
            if other.intersects(probe) and not same_corner:
                return
        if any(wall.intersects(probe) for wall in WALL_RECTS):
            return
        dx, dy = _STEPS[self.facing]
        x, y = self.boxes[index]
        self.boxes[index] = (x + dx, y + dy)

    def elapsed(self) -> float:
        """Seconds from the start of the game to the latest tick."""
        return self.last_tick - self.started

    def player_rect(self) -> Rect:
        """The player's reach as of the last move, used for box contact."""
        return self._area
import random

import pytest

from boxgames.dodge import (
    BOX_SIZE,
    KEY_LEFT,
    KEY_RIGHT,
    PLAYER_SIZE,
    PLAYER_SPEED,
    PLAYER_START,
    SCORE_CAUGHT,
    SCORE_HIT,
    SCORE_LANDED,
    SPAWN_DELAY,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    BoxSpawner,
    DodgeGame,
    FallingBox,
    Player,
)
from boxgames.geometry import Rect, rect_around
from boxgames.keys import KeyManager


class ScriptedRng:
    def __init__(self, values):
        self._values = list(values)
        self.calls = []

    def randrange(self, stop):
        self.calls.append(stop)
        return self._values.pop(0)


def keys_with(*pressed):
    keys = KeyManager()
    keys.update(pressed)
    return keys


def quiet_game():
    game = DodgeGame(rng=random.Random(1))
    game.spawner.delay = 0
    return game


def test_player_starts_at_bottom_centre():
    player = Player()
    assert player.position == PLAYER_START
    assert player.rect == rect_around(*PLAYER_START, PLAYER_SIZE)


def test_player_moves_left_one_step():
    player = Player()
    player.update(keys_with(KEY_LEFT))
    assert player.position == (PLAYER_START[0] - PLAYER_SPEED, PLAYER_START[1])
    assert player.rect == rect_around(*player.position, PLAYER_SIZE)


def test_player_keeps_moving_while_key_held():
    player = Player()
    keys = keys_with(KEY_RIGHT)
    player.update(keys)
    keys.update({KEY_RIGHT})
    assert keys.is_held(KEY_RIGHT)
    player.update(keys)
    assert player.position[0] == PLAYER_START[0] + 2 * PLAYER_SPEED


def test_player_without_keys_stays_put():
    player = Player()
    player.update(KeyManager())
    assert player.position == PLAYER_START


@pytest.mark.parametrize("key", [KEY_LEFT, KEY_RIGHT])
def test_player_never_leaves_screen(key):
    player = Player()
    keys = KeyManager()
    for _ in range(60):
        keys.update({key})
        player.update(keys)
        assert 0 <= player.rect.left
        assert player.rect.right <= WINDOW_WIDTH
    if key == KEY_LEFT:
        assert player.rect.left - PLAYER_SPEED < 0
    else:
        assert player.rect.right + PLAYER_SPEED > WINDOW_WIDTH


def test_player_reset_restores_start():
    player = Player()
    player.update(keys_with(KEY_LEFT))
    player.reset()
    assert player.position == PLAYER_START


def test_spawner_spawns_first_box_above_screen():
    rng = ScriptedRng([100, 3, 7])
    spawner = BoxSpawner(rng)
    spawner.level = 2
    spawner.update()
    assert rng.calls == [WINDOW_WIDTH, 10, 40]
    assert len(spawner.boxes) == 1
    box = spawner.boxes[0]
    assert box.speed == 3 + 5
    assert box.rect == Rect(100, -BOX_SIZE, 100 + BOX_SIZE, 0).moved(0, box.speed + 2)
    assert spawner.delay == 7


def test_spawner_waits_and_boxes_keep_falling():
    rng = ScriptedRng([100, 3, 7])
    spawner = BoxSpawner(rng)
    spawner.level = 2
    spawner.update()
    before = spawner.boxes[0].rect
    spawner.update()
    assert len(spawner.boxes) == 1
    assert spawner.delay == 7 + 2
    assert spawner.boxes[0].rect == before.moved(0, spawner.boxes[0].speed + 2)


def test_spawner_random_boxes_are_in_range():
    spawner = BoxSpawner(random.Random(42))
    for _ in range(200):
        spawner.update()
        assert 0 <= spawner.delay < SPAWN_DELAY + spawner.level
    for box in spawner.boxes:
        assert 5 <= box.speed < 15
        assert box.rect.right - box.rect.left == BOX_SIZE
        assert box.rect.bottom - box.rect.top == BOX_SIZE
        assert 0 <= box.rect.left < WINDOW_WIDTH


def test_spawner_reset_clears_boxes():
    spawner = BoxSpawner(random.Random(3))
    spawner.update()
    spawner.reset()
    assert spawner.boxes == []
    assert spawner.delay == SPAWN_DELAY


def test_game_reset_state():
    game = DodgeGame(rng=random.Random(5))
    assert (game.score, game.level, game.boxes) == (0, 0, [])


def test_box_landing_scores():
    game = quiet_game()
    game.spawner.boxes = [FallingBox(Rect(100, WINDOW_HEIGHT - 20, 130, WINDOW_HEIGHT + 10), 5)]
    game.update(KeyManager())
    assert game.score == SCORE_LANDED
    assert game.boxes == []


def test_box_hitting_player_costs_points():
    game = quiet_game()
    px, py = PLAYER_START
    game.spawner.boxes = [FallingBox(Rect(px - 10, py - 40, px + 20, py - 10), 5)]
    game.update(KeyManager())
    assert game.score == SCORE_HIT
    assert game.boxes == []


def test_negative_score_keeps_level_one():
    game = quiet_game()
    px, py = PLAYER_START
    game.spawner.boxes = [FallingBox(Rect(px - 10, py - 40, px + 20, py - 10), 5)]
    game.update(KeyManager())
    game.spawner.delay = 0
    game.update(KeyManager())
    assert game.score == SCORE_HIT
    assert game.level == 1


def test_mouse_catches_box():
    game = quiet_game()
    game.spawner.boxes = [FallingBox(Rect(10, 100, 40, 130), 5)]
    game.update(KeyManager(), (20, 110))
    assert game.score == SCORE_CAUGHT
    assert game.boxes == []


def test_box_away_from_everything_survives():
    game = quiet_game()
    game.spawner.boxes = [FallingBox(Rect(10, 100, 40, 130), 5)]
    game.update(KeyManager(), (500, 500))
    assert game.score == 0
    assert len(game.boxes) == 1


def test_level_follows_score():
    game = quiet_game()
    game.score = 250
    game.update(KeyManager(), (0, 0))
    assert game.level == 3
    assert game.spawner.level == game.level
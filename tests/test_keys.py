import pytest

from boxgames.keys import KEY_COUNT, KeyManager, KeyState

LEFT = 0x25


def test_new_manager_has_all_keys_released():
    keys = KeyManager()
    assert all(keys.is_released(code) for code in range(KEY_COUNT))


def test_full_press_cycle():
    keys = KeyManager()
    keys.update({LEFT})
    assert keys.state(LEFT) is KeyState.DOWN
    assert keys.is_down(LEFT)
    keys.update({LEFT})
    assert keys.is_held(LEFT)
    keys.update({LEFT})
    assert keys.is_held(LEFT)
    keys.update(set())
    assert keys.is_up(LEFT)
    keys.update(set())
    assert keys.is_released(LEFT)


def test_press_right_after_release_goes_down_again():
    keys = KeyManager()
    keys.update([LEFT])
    keys.update([])
    assert keys.is_up(LEFT)
    keys.update([LEFT])
    assert keys.is_down(LEFT)


def test_other_keys_are_unaffected():
    keys = KeyManager()
    keys.update([LEFT])
    assert keys.is_released(LEFT + 1)


def test_reset_releases_everything():
    keys = KeyManager()
    keys.update([LEFT, 65])
    keys.update([LEFT, 65])
    keys.reset()
    assert keys.is_released(LEFT)
    assert keys.is_released(65)


@pytest.mark.parametrize("code", [-1, KEY_COUNT])
def test_out_of_range_key_raises(code):
    with pytest.raises(ValueError):
        KeyManager().state(code)
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from tomatoarena.window import Window  # noqa: E402


@pytest.fixture
def window():
    win = Window("Test", 320, 240)
    pygame.event.clear()
    yield win
    win.close()


def test_size_and_defaults(window):
    assert (window.width, window.height) == (320, 240)
    assert window.mouse_coordinate == (-1, -1)
    assert window.is_fullscreen is False


def test_poll_events_passes_events_to_callback(window):
    seen = []

    def callback(event):
        if event.type == pygame.USEREVENT:
            seen.append(event.value)
        return 0

    pygame.event.post(pygame.event.Event(pygame.USEREVENT, value=7))
    pygame.event.post(pygame.event.Event(pygame.USEREVENT, value=8))
    assert window.poll_events(callback) == 0
    assert seen == [7, 8]


def test_poll_events_stops_on_nonzero_result(window):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    pygame.event.post(pygame.event.Event(pygame.USEREVENT, value=1))

    def callback(event):
        return 1 if event.type == pygame.QUIT else 0

    assert window.poll_events(callback) == 1
    remaining = pygame.event.get(pygame.USEREVENT)
    assert [event.value for event in remaining] == [1]


def test_f11_toggles_fullscreen(window):
    keys = []

    def callback(event):
        if event.type == pygame.KEYDOWN:
            keys.append(event.key)
        return 0

    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_F11, mod=0, unicode=""))
    window.poll_events(callback)
    assert window.is_fullscreen is True
    assert keys == [pygame.K_F11]


def test_toggle_twice_restores_window_size(window):
    window.toggle_fullscreen()
    window.toggle_fullscreen()
    assert window.is_fullscreen is False
    assert (window.width, window.height) == (320, 240)
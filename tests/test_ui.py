import pygame
import pytest

from tomatoarena.ui import Button, Canvas, Element, GameOverScreen, HealthBar, Text

NORMAL = (100, 150, 255)
HOVER = (255, 100, 100)


@pytest.fixture(autouse=True)
def fonts():
    pygame.font.init()
    yield


@pytest.fixture
def font():
    return pygame.font.Font(None, 24)


def _transparent(size=(800, 600)):
    surface = pygame.Surface(size, pygame.SRCALPHA)
    surface.fill((0, 0, 0, 0))
    return surface


def _button(font, calls=None):
    target = pygame.Surface((800, 600))
    on_click = (lambda: calls.append("click")) if calls is not None else None
    return Button(target, "Play Game", font, NORMAL, HOVER, (290, 300, 200, 50), on_click), target


def test_element_draw_calls_with_component():
    seen = []
    component = object()
    element = Element((1, 2, 3, 4), seen.append, component)
    element.draw()
    assert seen == [component]
    assert element.rect == pygame.Rect(1, 2, 3, 4)


def test_canvas_renders_in_order():
    order = []
    canvas = Canvas()
    for name in ("a", "b", "c"):
        canvas.add(Element((0, 0, 1, 1), order.append, name))
    canvas.render()
    assert order == ["a", "b", "c"]


def test_canvas_capacity():
    canvas = Canvas()
    for _ in range(256):
        canvas.add(Element((0, 0, 1, 1), lambda c: None, None))
    with pytest.raises(OverflowError):
        canvas.add(Element((0, 0, 1, 1), lambda c: None, None))


def test_text_element_matches_rendered_size():
    text = Text(None, "IP Address: 127.0.0.1", None, 24)
    assert text.element.rect.size == text.texture.get_size()
    assert text.element.rect.w > 0


def test_text_change_keeps_position_and_resizes():
    text = Text(None, "Port: 3030", None, 24)
    text.move_to((300, 225))
    before = text.element.rect.w
    text.text = "Port: 3030303030"
    assert text.element.rect.topleft == (300, 225)
    assert text.element.rect.w > before


def test_text_size_change_grows_text():
    text = Text(None, "Port", None, 12)
    small = text.element.rect.h
    text.size = 48
    assert text.size == 48
    assert text.element.rect.h > small


def test_text_draw_stays_inside_element():
    target = _transparent()
    text = Text(target, "Hello", None, 24)
    text.color = (255, 255, 255, 255)
    text.move_to((300, 175))
    text.draw()
    drawn = target.get_bounding_rect()
    assert drawn.w > 0
    assert text.element.rect.contains(drawn)


def test_text_without_surface_draws_nothing():
    text = Text(None, "Hello", None, 24)
    text.draw()
    assert text.surface is None
    assert text.element.rect.w > 0


def test_button_hover_follows_mouse(font):
    button, _ = _button(font)
    button.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(300, 310)))
    assert button.hover is True
    button.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(10, 10)))
    assert button.hover is False


def test_button_click_when_hovered(font):
    calls = []
    button, _ = _button(font, calls)
    button.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(300, 310)))
    clicked = button.handle_event(
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=pygame.BUTTON_LEFT, pos=(300, 310))
    )
    assert clicked is True
    assert calls == ["click"]


def test_button_click_without_hover_is_ignored(font):
    calls = []
    button, _ = _button(font, calls)
    clicked = button.handle_event(
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=pygame.BUTTON_LEFT, pos=(300, 310))
    )
    assert clicked is False
    assert calls == []


def test_button_right_click_is_ignored(font):
    button, _ = _button(font)
    button.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(300, 310)))
    clicked = button.handle_event(
        pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=pygame.BUTTON_RIGHT, pos=(300, 310))
    )
    assert clicked is False


def test_button_draw_uses_hover_color(font):
    button, target = _button(font)
    button.element.draw()
    assert tuple(target.get_at((290, 300)))[:3] == NORMAL
    button.handle_event(pygame.event.Event(pygame.MOUSEMOTION, pos=(300, 310)))
    button.draw()
    assert tuple(target.get_at((290, 300)))[:3] == HOVER
    assert tuple(target.get_at((289, 300)))[:3] == (0, 0, 0)


def test_health_bar_starts_full():
    bar = HealthBar()
    assert bar.health == 100
    assert bar.rect == pygame.Rect(20, 20, 300, 30)


def test_health_bar_width_shrinks_with_health():
    bar = HealthBar()
    bar.update(50)
    assert bar.rect.w == 150
    bar.update(0)
    assert bar.rect.w == 0


def test_health_bar_draw_colours():
    bar = HealthBar()
    bar.update(50)
    target = pygame.Surface((400, 100))
    bar.draw(target)
    assert tuple(target.get_at((25, 25)))[:3] == (0, 255, 0)
    assert tuple(target.get_at((20 + 299, 25)))[:3] == (255, 0, 0)


def test_health_bar_negative_health_draws_only_background():
    bar = HealthBar()
    bar.update(-10)
    target = pygame.Surface((400, 100))
    bar.draw(target)
    assert bar.rect.w < 0
    assert tuple(target.get_at((20, 20)))[:3] == (255, 0, 0)


def test_game_over_screen_rect_and_draw():
    target = _transparent()
    screen = GameOverScreen(target, "Press Enter to respawn", None, 48)
    assert screen.rect.topleft == (200, 200)
    assert screen.rect.size == screen.texture.get_size()
    screen.draw()
    drawn = target.get_bounding_rect()
    assert drawn.w > 0
    assert screen.rect.contains(drawn)


def test_game_over_screen_missing_font():
    with pytest.raises((FileNotFoundError, OSError)):
        GameOverScreen(_transparent(), "x", "no/such/font.ttf", 48)
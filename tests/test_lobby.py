from __future__ import annotations

import pygame

from paddleduel.lobby import START_ACTION, SetupScreen


def _key(key: int, unicode: str = "") -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key, unicode=unicode, mod=0)


def test_typing_goes_to_focused_field() -> None:
    screen = SetupScreen(800, 500)
    screen.handle_event(_key(pygame.K_a, "A"))
    screen.handle_event(_key(pygame.K_l, "l"))
    screen.handle_event(_key(pygame.K_TAB, "\t"))
    screen.handle_event(_key(pygame.K_b, "B"))
    assert screen.names == ("Al", "B")


def test_backspace_and_length_limit() -> None:
    screen = SetupScreen(800, 500, name1="Bob")
    screen.handle_event(_key(pygame.K_BACKSPACE, "\b"))
    assert screen.names[0] == "Bo"
    for _ in range(30):
        screen.handle_event(_key(pygame.K_x, "x"))
    assert len(screen.names[0]) == 16


def test_enter_or_start_button_triggers_start() -> None:
    screen = SetupScreen(800, 500)
    assert screen.handle_event(_key(pygame.K_RETURN, "\r")) == START_ACTION
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=screen.start_button.center)
    assert screen.handle_event(click) == START_ACTION


def test_click_on_field_moves_focus() -> None:
    screen = SetupScreen(800, 500)
    click = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=screen.fields[1].rect.center)
    assert screen.handle_event(click) is None
    assert screen.focus == 1


def test_hidden_screen_ignores_input() -> None:
    screen = SetupScreen(800, 500)
    screen.hide()
    assert screen.handle_event(_key(pygame.K_RETURN, "\r")) is None


def test_show_announces_winner() -> None:
    screen = SetupScreen(800, 500)
    screen.hide()
    screen.show("Bob")
    assert screen.visible
    assert screen.winner_message == "Bob wins!"

"""Demo window with a default button and a close button."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from typing import Any

import pygame

from .button import Button, ButtonGeometry, ButtonType, StatusColors
from .ui import UI, MouseMessage, UISignal

WINDOW_SIZE = (800, 600)
BACKGROUND = (240, 240, 240)

_MOUSE_EVENTS = (
    pygame.MOUSEMOTION,
    pygame.MOUSEBUTTONDOWN,
    pygame.MOUSEBUTTONUP,
)


def build_close_button(font: Any = None) -> Button:
    """The borderless "×" button in the top-right corner."""
    return Button(
        text="×",
        button_type=ButtonType.BORDERLESS_FILL,
        geometry=ButtonGeometry(x=778, y=2, width=20, height=20),
        fill_colors=StatusColors((240, 240, 240), (232, 17, 35), (241, 112, 122)),
        text_colors=StatusColors((5, 7, 8), (255, 255, 255), (255, 255, 255)),
        font=font,
    )


def build_widgets(font: Any = None) -> list[Button]:
    """The demo's widgets: a default button followed by the close button."""
    return [Button(font=font), build_close_button(font)]


def _to_message(event: Any) -> MouseMessage | None:
    if event.type not in _MOUSE_EVENTS:
        return None
    x, y = event.pos
    left_down = event.type == pygame.MOUSEBUTTONDOWN and event.button == 1
    return MouseMessage(x, y, left_down)


def _draw_all(surface: Any, widgets: Sequence[UI]) -> None:
    surface.fill(BACKGROUND)
    for widget in widgets:
        widget.draw(surface)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the demo window and run until the close button is clicked."""
    parser = argparse.ArgumentParser(description="Show a window with two buttons.")
    parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE, pygame.NOFRAME)
        font = pygame.font.Font(None, 16)
        widgets = build_widgets(font)
        close_button = widgets[-1]
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    continue
                message = _to_message(event)
                if message is None:
                    continue
                for widget in widgets:
                    signal = widget.update(message)
                    if widget is close_button and signal is UISignal.CLICK:
                        running = False
            _draw_all(screen, widgets)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0
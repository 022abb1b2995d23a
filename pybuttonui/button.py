"""A clickable button widget with several visual styles."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import pygame

from .ui import UI, MouseMessage, UISignal

Color = tuple[int, int, int]


class ButtonType(enum.Enum):
    """Visual style of a button."""

    HAVE_BORDER_FILL = enum.auto()
    BORDERLESS_FILL = enum.auto()
    HAVE_BORDER_FILL_ROUNDED = enum.auto()
    BORDERLESS_FILL_ROUNDED = enum.auto()
    PICTURE = enum.auto()


class ButtonStatus(enum.Enum):
    """Interaction state of a button."""

    ORDINARY = 0
    SUSPENDED = 1
    PRESS = 2


@dataclass(frozen=True)
class StatusColors:
    """One colour for each interaction state."""

    ordinary: Color
    suspended: Color
    press: Color

    def for_status(self, status: ButtonStatus) -> Color:
        """Return the colour used in ``status``."""
        return {
            ButtonStatus.ORDINARY: self.ordinary,
            ButtonStatus.SUSPENDED: self.suspended,
            ButtonStatus.PRESS: self.press,
        }[status]


@dataclass(frozen=True)
class ButtonGeometry:
    """Position, size and corner ellipse of a button."""

    x: int = 0
    y: int = 0
    width: int = 200
    height: int = 50
    ellipse_width: int = 0
    ellipse_height: int = 0


DEFAULT_FILL = StatusColors((225, 225, 225), (229, 241, 251), (204, 228, 247))
DEFAULT_LINE = StatusColors((173, 173, 173), (0, 120, 215), (0, 84, 153))
DEFAULT_TEXT = StatusColors((0, 0, 0), (0, 0, 0), (0, 0, 0))

_IMAGE_COUNT = len(ButtonStatus)


def _default_font() -> Any:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, 16)


def _half_toward_zero(value: int) -> int:
    return int(value / 2)


class Button(UI):
    """A rectangular, rounded or picture button that reports clicks."""

    def __init__(
        self,
        text: str = "button",
        button_type: ButtonType = ButtonType.HAVE_BORDER_FILL,
        geometry: ButtonGeometry | None = None,
        fill_colors: StatusColors | None = None,
        line_colors: StatusColors | None = None,
        text_colors: StatusColors | None = None,
        font: Any = None,
    ) -> None:
        self.text = text
        self.button_type = button_type
        self.geometry = geometry if geometry is not None else ButtonGeometry()
        self.fill_colors = fill_colors if fill_colors is not None else DEFAULT_FILL
        self.line_colors = line_colors if line_colors is not None else DEFAULT_LINE
        self.text_colors = text_colors if text_colors is not None else DEFAULT_TEXT
        self._font = font
        self.status = ButtonStatus.ORDINARY
        self.images: list[Any] = []

    @property
    def font(self) -> Any:
        """The font used to measure and render the label."""
        if self._font is None:
            self._font = _default_font()
        return self._font

    @font.setter
    def font(self, value: Any) -> None:
        self._font = value

    def copy(self) -> Button:
        """Return a new button with the same label, style, geometry and colours."""
        return Button(
            text=self.text,
            button_type=self.button_type,
            geometry=self.geometry,
            fill_colors=self.fill_colors,
            line_colors=self.line_colors,
            text_colors=self.text_colors,
            font=self._font,
        )

    def move_to(self, x: int, y: int) -> None:
        """Place the button's top-left corner at ``(x, y)``."""
        self.geometry = dataclasses.replace(self.geometry, x=x, y=y)

    def text_position(self) -> tuple[int, int]:
        """Top-left coordinate at which the label is centred in the button."""
        text_width, text_height = self.font.size(self.text)
        g = self.geometry
        return (
            _half_toward_zero(g.width - text_width) + g.x,
            _half_toward_zero(g.height - text_height) + g.y,
        )

    def load_images(self, paths: Sequence[str]) -> None:
        """Load the three state images from files and size the button to the first."""
        if len(paths) != _IMAGE_COUNT:
            raise ValueError(f"expected {_IMAGE_COUNT} image paths, got {len(paths)}")
        self.set_images([pygame.image.load(path) for path in paths])

    def set_images(self, images: Sequence[Any]) -> None:
        """Use three surfaces as the state images and size the button to the first."""
        if len(images) != _IMAGE_COUNT:
            raise ValueError(f"expected {_IMAGE_COUNT} images, got {len(images)}")
        self.images = list(images)
        width, height = self.images[0].get_size()
        self.geometry = dataclasses.replace(self.geometry, width=width, height=height)

    def contains(self, x: int, y: int) -> bool:
        """Whether the point lies strictly inside the button."""
        g = self.geometry
        return g.x < x < g.x + g.width and g.y < y < g.y + g.height

    def update(self, message: MouseMessage) -> UISignal | None:
        """Update the interaction state; return ``UISignal.CLICK`` on a press inside."""
        inside = self.contains(message.x, message.y)
        if inside and message.left_down:
            self.status = ButtonStatus.PRESS
            return UISignal.CLICK
        self.status = ButtonStatus.SUSPENDED if inside else ButtonStatus.ORDINARY
        return None

    def _rect(self) -> pygame.Rect:
        g = self.geometry
        # Corner coordinates are inclusive, so the area is one pixel larger.
        return pygame.Rect(g.x, g.y, g.width + 1, g.height + 1)

    def _corner_radius(self) -> int:
        g = self.geometry
        return max(0, min(g.ellipse_width, g.ellipse_height) // 2)

    def draw(self, surface: Any) -> None:
        """Render the button in its current state onto ``surface``."""
        if self.button_type is ButtonType.PICTURE:
            if len(self.images) != _IMAGE_COUNT:
                raise RuntimeError("picture button has no images")
            image = self.images[self.status.value]
            surface.blit(image, (self.geometry.x, self.geometry.y))
            return

        fill = self.fill_colors.for_status(self.status)
        line = self.line_colors.for_status(self.status)
        rect = self._rect()
        rounded = self.button_type in (
            ButtonType.HAVE_BORDER_FILL_ROUNDED,
            ButtonType.BORDERLESS_FILL_ROUNDED,
        )
        radius = self._corner_radius() if rounded else 0
        bordered = self.button_type in (
            ButtonType.HAVE_BORDER_FILL,
            ButtonType.HAVE_BORDER_FILL_ROUNDED,
        )

        pygame.draw.rect(surface, fill, rect, border_radius=radius)
        if bordered:
            pygame.draw.rect(surface, line, rect, width=1, border_radius=radius)

        label = self.font.render(self.text, True, self.text_colors.for_status(self.status))
        surface.blit(label, self.text_position())
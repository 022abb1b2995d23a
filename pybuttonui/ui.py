"""Base interface shared by all widgets."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass
from typing import Any


class UISignal(enum.Enum):
    """Signals a widget can emit from :meth:`UI.update`."""

    CLICK = enum.auto()


@dataclass(frozen=True)
class MouseMessage:
    """A mouse event: the pointer position and whether the left button went down."""

    x: int
    y: int
    left_down: bool = False


class UI(abc.ABC):
    """A widget that can be drawn and that reacts to mouse messages."""

    @abc.abstractmethod
    def draw(self, surface: Any) -> None:
        """Render the widget onto ``surface``."""

    @abc.abstractmethod
    def update(self, message: MouseMessage) -> UISignal | None:
        """Feed a mouse message to the widget; return a signal if one fires."""
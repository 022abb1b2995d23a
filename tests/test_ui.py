import dataclasses

import pytest

from pybuttonui.ui import UI, MouseMessage, UISignal


class _Counter(UI):
    def __init__(self):
        self.drawn = []
        self.seen = []

    def draw(self, surface):
        self.drawn.append(surface)

    def update(self, message):
        self.seen.append(message)
        return UISignal.CLICK if message.left_down else None


def test_ui_is_abstract():
    with pytest.raises(TypeError):
        UI()


def test_partial_subclass_is_abstract_until_completed():
    class OnlyDraw(UI):
        def draw(self, surface):
            pass

    with pytest.raises(TypeError):
        OnlyDraw()

    class Completed(OnlyDraw):
        def update(self, message):
            return UISignal.CLICK if message.left_down else None

    widget = Completed()
    assert widget.update(MouseMessage(0, 0, left_down=True)) is UISignal.CLICK
    assert widget.update(MouseMessage(0, 0)) is None


def test_concrete_subclass_receives_messages():
    widget = _Counter()
    assert widget.update(MouseMessage(1, 2, left_down=True)) is UISignal.CLICK
    assert widget.update(MouseMessage(1, 2)) is None
    assert widget.seen == [MouseMessage(1, 2, True), MouseMessage(1, 2, False)]


def test_concrete_subclass_draw_called_with_surface():
    widget = _Counter()
    target = MouseMessage(7, 8)
    widget.draw(target)
    assert widget.drawn == [MouseMessage(7, 8, left_down=False)]


def test_mouse_message_is_immutable():
    message = MouseMessage(3, 4)
    with pytest.raises(dataclasses.FrozenInstanceError):
        message.x = 5
    assert (message.x, message.y, message.left_down) == (3, 4, False)
    moved = dataclasses.replace(message, x=5)
    assert (moved.x, moved.y, message.x) == (5, 4, 3)


def test_mouse_message_defaults_to_no_press():
    assert MouseMessage(3, 4) == MouseMessage(3, 4, left_down=False)
    assert MouseMessage(3, 4) != MouseMessage(3, 4, left_down=True)
# pybuttonui

A small widget kit on top of pygame. Its one widget is a `Button`. A button has one of three interaction states (`ButtonStatus.ORDINARY`, `SUSPENDED` for hovered, `PRESS`). It draws itself in one of five styles (`ButtonType`):

- `HAVE_BORDER_FILL`: filled, with a one-pixel border
- `BORDERLESS_FILL`: filled, without a border
- `HAVE_BORDER_FILL_ROUNDED`: rounded, filled, with a border
- `BORDERLESS_FILL_ROUNDED`: rounded, filled, without a border
- `PICTURE`: one image per state

## Installation

```
pip install .
```

## Usage

```python
import pygame
from pybuttonui.button import Button, ButtonType, ButtonGeometry, StatusColors
from pybuttonui.ui import MouseMessage, UISignal

pygame.init()
screen = pygame.display.set_mode((800, 600))
font = pygame.font.Font(None, 20)

button = Button(
    text="OK",
    button_type=ButtonType.BORDERLESS_FILL,
    geometry=ButtonGeometry(x=10, y=10, width=120, height=40),
    fill_colors=StatusColors((240, 240, 240), (232, 17, 35), (241, 112, 122)),
    font=font,
)

signal = button.update(MouseMessage(x=50, y=30, left_down=True))
if signal is UISignal.CLICK:
    print("clicked")

button.draw(screen)
```

A default `Button()` is labelled "button", is 200×50 at (0, 0), has a border, and uses grey and blue colours. If no font is given, pygame's default font at size 16 is used. The font module is initialised the first time the font is needed.

- `Button.update(message)` sets the state from a `MouseMessage`. A left press inside the button sets `PRESS` and returns `UISignal.CLICK`. Otherwise the state becomes `SUSPENDED` when the pointer is inside and `ORDINARY` when it is outside, and the call returns `None`.
- `Button.contains(x, y)` tells whether a point lies strictly inside the button. Points on its edges do not count.
- `Button.move_to(x, y)` moves the button's top-left corner.
- `Button.text_position()` gives the top-left point at which the label is centred.
- `Button.load_images(paths)` loads the three state images from files. `Button.set_images(images)` takes three surfaces. Both size the button to the first image, and both raise `ValueError` unless exactly three are given. A picture button that has no images raises `RuntimeError` when it is drawn.
- `Button.copy()` returns a new button with the same label, style, geometry, colours and font. The new button starts in the ordinary state and has no images.
- `StatusColors.for_status(status)` returns the colour for one state. `ButtonGeometry` holds the position, size and corner ellipse.

Every widget derives from `UI` and provides `draw(surface)` and `update(message)`.

## Demo

```
pybuttonui-demo
```

The demo opens a borderless 800×600 window. It shows a default button and a "×" close button in the top-right corner. Clicking the close button quits, and so does a window-close event.

## Limitations

The package has buttons only. There are no text fields, labels, layout managers or other widgets. It handles mouse input only, with no keyboard focus or keyboard activation.

## Tests

```
pip install .[test]
pytest
```
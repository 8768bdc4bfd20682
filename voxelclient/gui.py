"""Immediate-mode GUI and the drawing primitives it produces."""

from __future__ import annotations

from dataclasses import dataclass, field

Color = tuple[float, float, float, float]

NO_ITEM = 0
"""Active item id meaning "no item, but one may become active"."""
BLOCKED = 1
"""Active item id meaning "no item, and none may become active"."""
ID_OFFSET = 2

SHADOW_OFFSET = 3
PRESSED_OFFSET = 2
SHADOW_COLOR: Color = (0.0, 0.0, 0.0, 1.0)
HOT_COLOR: Color = (0.7, 0.7, 0.7, 1.0)
IDLE_COLOR: Color = (0.8, 0.8, 0.8, 1.0)
SHADOW_Z = 0.02
BUTTON_Z = 0.01
BUTTON_TEXT_Z = 0.005


@dataclass(frozen=True)
class RectanglePrimitive:
    """A filled axis-aligned rectangle."""

    x: float
    y: float
    width: float
    height: float
    color: Color
    z: float


@dataclass(frozen=True)
class TextPart:
    """A run of text sharing one font, size and color."""

    text: str
    font_size: float
    color: Color
    font: str | None = None


@dataclass(frozen=True)
class TextPrimitive:
    """A block of text placed on screen, optionally bounded and centered."""

    x: float
    y: float
    w: float | None
    h: float | None
    parts: tuple[TextPart, ...]
    z: float
    center_horizontally: bool = False
    center_vertically: bool = False


@dataclass(frozen=True)
class TrianglesPrimitive:
    """An indexed triangle mesh drawn in a single color."""

    vertices: tuple[tuple[float, float, float], ...]
    indices: tuple[int, ...]
    color: Color


@dataclass
class PrimitiveBuffer:
    """Primitives collected during a frame, grouped by kind."""

    rectangle: list[RectanglePrimitive] = field(default_factory=list)
    text: list[TextPrimitive] = field(default_factory=list)
    triangles: list[TrianglesPrimitive] = field(default_factory=list)

    def draw_rect(self, x: float, y: float, w: float, h: float, color, z: float) -> None:
        self.rectangle.append(RectanglePrimitive(x, y, w, h, tuple(color), z))

    def draw_text_simple(self, x: float, y: float, h: float, text: str, color, z: float) -> None:
        """Queue left-aligned text, centered vertically in a line of height ``h``."""
        part = TextPart(text=text, font_size=float(h), color=tuple(color))
        self.text.append(
            TextPrimitive(
                x=x,
                y=y,
                w=None,
                h=h,
                parts=(part,),
                z=z,
                center_horizontally=False,
                center_vertically=True,
            )
        )


class Gui:
    """Immediate-mode GUI tracking the mouse and the hot and active widgets."""

    def __init__(self) -> None:
        self.mouse_x = 0
        self.mouse_y = 0
        self.mouse_down = False
        self.hot_item = NO_ITEM
        self.active_item = NO_ITEM
        self.primitives = PrimitiveBuffer()

    def update_mouse_position(self, x: int, y: int) -> None:
        self.mouse_x = x
        self.mouse_y = y

    def update_mouse_button(self, is_down: bool) -> None:
        self.mouse_down = is_down

    def drain_primitives(self) -> PrimitiveBuffer:
        """Return the primitives drawn so far and start a fresh buffer."""
        drained, self.primitives = self.primitives, PrimitiveBuffer()
        return drained

    def prepare(self) -> None:
        """Start a frame."""
        self.hot_item = NO_ITEM

    def finish(self) -> None:
        """End a frame, updating which item may become active."""
        if not self.mouse_down:
            self.active_item = NO_ITEM
        elif self.active_item == NO_ITEM:
            # Dragging the pressed mouse onto a widget must not activate it.
            self.active_item = BLOCKED

    def is_mouse_inside(self, x: int, y: int, w: int, h: int) -> bool:
        return x <= self.mouse_x < x + w and y <= self.mouse_y < y + h

    def button(self, id: int, x: int, y: int, w: int, h: int) -> ButtonBuilder:
        """Start a button; call ``build`` on the result to draw it."""
        return ButtonBuilder(self, id + ID_OFFSET, x, y, w, h)

    def text(self, x: int, y: int, h: int, text: str, color, z: float) -> None:
        """Draw text aligned to the left and centered vertically."""
        self.primitives.draw_text_simple(x, y, h, text, color, z)


class ButtonBuilder:
    """Configures and draws one button."""

    def __init__(self, gui: Gui, id: int, x: int, y: int, w: int, h: int) -> None:
        self._gui = gui
        self.id = id
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self._label: tuple[str, Color] | None = None

    def text(self, text: str, color) -> ButtonBuilder:
        """Put a label on the button."""
        self._label = (text, tuple(color))
        return self

    def build(self) -> bool:
        """Draw the button; return whether it was clicked."""
        gui, id_, x, y, w, h = self._gui, self.id, self.x, self.y, self.w, self.h
        if gui.is_mouse_inside(x, y, w, h):
            gui.hot_item = id_
            if gui.active_item == NO_ITEM and gui.mouse_down:
                gui.active_item = id_

        gui.primitives.draw_rect(x + SHADOW_OFFSET, y + SHADOW_OFFSET, w, h, SHADOW_COLOR, SHADOW_Z)

        if gui.hot_item == id_:
            if gui.active_item == id_:
                draw_x, draw_y = x + PRESSED_OFFSET, y + PRESSED_OFFSET
            else:
                draw_x, draw_y = x, y
            color = HOT_COLOR
        else:
            draw_x, draw_y = x, y
            color = IDLE_COLOR
        gui.primitives.draw_rect(draw_x, draw_y, w, h, color, BUTTON_Z)

        if self._label is not None:
            label, label_color = self._label
            gui.text(draw_x, draw_y, h, label, label_color, BUTTON_TEXT_Z)

        return not gui.mouse_down and gui.active_item == id_ and gui.hot_item == id_
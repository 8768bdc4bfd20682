"""Keyboard and mouse state tracking for the player."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

MOUSE_SPEED = 0.2

MOVE_FORWARD = 17
MOVE_LEFT = 30
MOVE_BACKWARD = 31
MOVE_RIGHT = 32
MOVE_UP = 57
MOVE_DOWN = 42
TOGGLE_FLIGHT = 33
TOGGLE_CULLING = 46


@dataclass
class YawPitch:
    """Yaw and pitch of the player camera, in degrees."""

    yaw: float = -127.0
    pitch: float = -17.0

    def update_cursor(self, dx: float, dy: float) -> None:
        """Apply a mouse movement, wrapping the yaw and clamping the pitch."""
        self.yaw -= MOUSE_SPEED * dx
        self.pitch -= MOUSE_SPEED * dy

        if self.yaw < -180.0:
            self.yaw += 360.0
        if self.yaw > 180.0:
            self.yaw -= 360.0

        self.pitch = min(max(self.pitch, -90.0), 90.0)


class ElementState(enum.Enum):
    PRESSED = "pressed"
    RELEASED = "released"


class MouseButton(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    OTHER = "other"


@dataclass(frozen=True)
class PlayerInput:
    """Movement input for one physics step."""

    key_move_forward: bool
    key_move_left: bool
    key_move_backward: bool
    key_move_right: bool
    key_move_up: bool
    key_move_down: bool
    yaw: float
    pitch: float
    flying: bool


@dataclass
class InputState:
    """State of the keyboard keys and mouse buttons."""

    keys: dict[int, ElementState] = field(default_factory=dict)
    mouse_buttons: dict[MouseButton, ElementState] = field(default_factory=dict)
    modifiers: frozenset[str] = frozenset()
    flying: bool = True
    enable_culling: bool = True

    def process_keyboard_input(self, scancode: int, state: ElementState) -> bool:
        """Record a key event; return whether the key state changed."""
        previous = self.keys.get(scancode)
        self.keys[scancode] = state
        if previous is ElementState.PRESSED:
            if scancode == TOGGLE_FLIGHT:
                self.flying = not self.flying
            if scancode == TOGGLE_CULLING:
                self.enable_culling = not self.enable_culling
                logger.debug(
                    "Chunk culling is %senabled", "" if self.enable_culling else "not "
                )
        return previous is not state

    def process_mouse_input(self, state: ElementState, button: MouseButton) -> bool:
        """Record a mouse button event; return whether the button state changed."""
        previous = self.mouse_buttons.get(button)
        self.mouse_buttons[button] = state
        return previous is not state

    def get_key_state(self, scancode: int) -> ElementState:
        return self.keys.get(scancode, ElementState.RELEASED)

    def is_key_pressed(self, scancode: int) -> bool:
        return self.get_key_state(scancode) is ElementState.PRESSED

    def clear(self) -> None:
        """Forget all key, button and modifier state."""
        self.keys.clear()
        self.mouse_buttons.clear()
        self.modifiers = frozenset()

    def get_physics_input(self, yaw_pitch: YawPitch, allow_movement: bool) -> PlayerInput:
        """Build the physics input from the current keys and camera angles."""

        def moving(scancode: int) -> bool:
            return allow_movement and self.is_key_pressed(scancode)

        return PlayerInput(
            key_move_forward=moving(MOVE_FORWARD),
            key_move_left=moving(MOVE_LEFT),
            key_move_backward=moving(MOVE_BACKWARD),
            key_move_right=moving(MOVE_RIGHT),
            key_move_up=moving(MOVE_UP),
            key_move_down=moving(MOVE_DOWN),
            yaw=yaw_pitch.yaw,
            pitch=yaw_pitch.pitch,
            flying=self.flying,
        )
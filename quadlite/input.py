"""Mouse, keyboard and touch input state, updated from window events."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Protocol, Union

from quadlite.geometry import Vec2

__all__ = [
    "TouchPhase",
    "MouseButton",
    "Touch",
    "MouseMotion",
    "MouseWheel",
    "MouseButtonDown",
    "MouseButtonUp",
    "Char",
    "KeyDown",
    "KeyUp",
    "TouchEvent",
    "InputEvent",
    "InputHandler",
    "InputState",
]


class TouchPhase(enum.Enum):
    STARTED = "started"
    STATIONARY = "stationary"
    MOVED = "moved"
    ENDED = "ended"
    CANCELLED = "cancelled"


class MouseButton(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    UNKNOWN = "unknown"


@dataclass
class Touch:
    """An active touch point; position is in pixels."""

    id: int
    phase: TouchPhase
    position: Vec2


class InputHandler(Protocol):
    """Receiver of replayed input events."""

    def mouse_motion_event(self, x: float, y: float) -> Any: ...

    def mouse_wheel_event(self, x: float, y: float) -> Any: ...

    def mouse_button_down_event(self, button: MouseButton, x: float, y: float) -> Any: ...

    def mouse_button_up_event(self, button: MouseButton, x: float, y: float) -> Any: ...

    def char_event(self, character: str, modifiers: Any, repeat: bool) -> Any: ...

    def key_down_event(self, keycode: Hashable, modifiers: Any, repeat: bool) -> Any: ...

    def key_up_event(self, keycode: Hashable, modifiers: Any) -> Any: ...

    def touch_event(self, phase: TouchPhase, touch_id: int, x: float, y: float) -> Any: ...


@dataclass(frozen=True)
class MouseMotion:
    x: float
    y: float

    def replay(self, handler: InputHandler) -> None:
        handler.mouse_motion_event(self.x, self.y)


@dataclass(frozen=True)
class MouseWheel:
    x: float
    y: float

    def replay(self, handler: InputHandler) -> None:
        handler.mouse_wheel_event(self.x, self.y)


@dataclass(frozen=True)
class MouseButtonDown:
    x: float
    y: float
    button: MouseButton

    def replay(self, handler: InputHandler) -> None:
        handler.mouse_button_down_event(self.button, self.x, self.y)


@dataclass(frozen=True)
class MouseButtonUp:
    x: float
    y: float
    button: MouseButton

    def replay(self, handler: InputHandler) -> None:
        handler.mouse_button_up_event(self.button, self.x, self.y)


@dataclass(frozen=True)
class Char:
    character: str
    modifiers: Any
    repeat: bool

    def replay(self, handler: InputHandler) -> None:
        handler.char_event(self.character, self.modifiers, self.repeat)


@dataclass(frozen=True)
class KeyDown:
    keycode: Hashable
    modifiers: Any
    repeat: bool

    def replay(self, handler: InputHandler) -> None:
        handler.key_down_event(self.keycode, self.modifiers, self.repeat)


@dataclass(frozen=True)
class KeyUp:
    keycode: Hashable
    modifiers: Any

    def replay(self, handler: InputHandler) -> None:
        handler.key_up_event(self.keycode, self.modifiers)


@dataclass(frozen=True)
class TouchEvent:
    phase: TouchPhase
    id: int
    x: float
    y: float

    def replay(self, handler: InputHandler) -> None:
        handler.touch_event(self.phase, self.id, self.x, self.y)


InputEvent = Union[
    MouseMotion, MouseWheel, MouseButtonDown, MouseButtonUp, Char, KeyDown, KeyUp, TouchEvent
]


class InputState:
    """Input state of one window, fed by event callbacks and read by the game."""

    def __init__(
        self,
        screen_width: float = 800.0,
        screen_height: float = 600.0,
        dpi_scale: float = 1.0,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.dpi_scale = dpi_scale
        self.simulate_mouse_with_touch = True
        self.cursor_grabbed = False

        self._keys_down: set[Hashable] = set()
        self._keys_pressed: dict[Hashable, None] = {}
        self._keys_released: set[Hashable] = set()
        self._mouse_down: set[MouseButton] = set()
        self._mouse_pressed: set[MouseButton] = set()
        self._mouse_released: set[MouseButton] = set()
        self._touches: dict[int, Touch] = {}
        self._chars_pressed: list[str] = []
        self._mouse_position = Vec2(0.0, 0.0)
        self._mouse_wheel = Vec2(0.0, 0.0)
        self._prevent_quit = False
        self._quit_requested = False
        self._subscribers: list[list[InputEvent]] = []

    # event callbacks

    def _broadcast(self, event: InputEvent) -> None:
        for queue in self._subscribers:
            queue.append(event)

    def resize_event(self, width: float, height: float) -> None:
        self.screen_width = width
        self.screen_height = height

    def raw_mouse_motion(self, x: float, y: float) -> None:
        """Relative motion; only used while the cursor is grabbed."""
        if self.cursor_grabbed:
            self._mouse_position = self._mouse_position + Vec2(x, y)
            self._broadcast(MouseMotion(self._mouse_position.x, self._mouse_position.y))

    def mouse_motion_event(self, x: float, y: float) -> None:
        if not self.cursor_grabbed:
            self._mouse_position = Vec2(x, y)
            self._broadcast(MouseMotion(x, y))

    def mouse_wheel_event(self, x: float, y: float) -> None:
        self._mouse_wheel = Vec2(x, y)
        self._broadcast(MouseWheel(x, y))

    def mouse_button_down_event(self, button: MouseButton, x: float, y: float) -> None:
        self._mouse_down.add(button)
        self._mouse_pressed.add(button)
        if not self.cursor_grabbed:
            self._mouse_position = Vec2(x, y)
            self._broadcast(MouseButtonDown(x, y, button))

    def mouse_button_up_event(self, button: MouseButton, x: float, y: float) -> None:
        self._mouse_down.discard(button)
        self._mouse_released.add(button)
        if not self.cursor_grabbed:
            self._mouse_position = Vec2(x, y)
            self._broadcast(MouseButtonUp(x, y, button))

    def touch_event(self, phase: TouchPhase, touch_id: int, x: float, y: float) -> None:
        self._touches[touch_id] = Touch(touch_id, phase, Vec2(x, y))
        if self.simulate_mouse_with_touch:
            if phase is TouchPhase.STARTED:
                self.mouse_button_down_event(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.ENDED:
                self.mouse_button_up_event(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.MOVED:
                self.mouse_motion_event(x, y)
        self._broadcast(TouchEvent(phase, touch_id, x, y))

    def char_event(self, character: str, modifiers: Any, repeat: bool) -> None:
        self._chars_pressed.append(character)
        self._broadcast(Char(character, modifiers, repeat))

    def key_down_event(self, keycode: Hashable, modifiers: Any, repeat: bool) -> None:
        self._keys_down.add(keycode)
        if not repeat:
            self._keys_pressed.pop(keycode, None)
            self._keys_pressed[keycode] = None
        self._broadcast(KeyDown(keycode, modifiers, repeat))

    def key_up_event(self, keycode: Hashable, modifiers: Any) -> None:
        self._keys_down.discard(keycode)
        self._keys_released.add(keycode)
        self._broadcast(KeyUp(keycode, modifiers))

    def quit_requested_event(self) -> bool:
        """Handle a window close request; True when the quit is cancelled."""
        if self._prevent_quit:
            self._quit_requested = True
            return True
        return False

    def end_frame(self) -> None:
        """Clear per-frame state and age touches."""
        self._mouse_wheel = Vec2(0.0, 0.0)
        self._keys_pressed.clear()
        self._keys_released.clear()
        self._mouse_pressed.clear()
        self._mouse_released.clear()
        self._quit_requested = False
        self._touches = {
            touch_id: touch
            for touch_id, touch in self._touches.items()
            if touch.phase not in (TouchPhase.ENDED, TouchPhase.CANCELLED)
        }
        for touch in self._touches.values():
            if touch.phase in (TouchPhase.STARTED, TouchPhase.MOVED):
                touch.phase = TouchPhase.STATIONARY

    # queries

    def set_cursor_grab(self, grab: bool) -> None:
        """Constrain the mouse to the window."""
        self.cursor_grabbed = grab

    def _to_local(self, pixel_pos: Vec2) -> Vec2:
        scaled = Vec2(pixel_pos.x / self.screen_width, pixel_pos.y / self.screen_height)
        return scaled * 2.0 - Vec2(1.0, 1.0)

    def mouse_position(self) -> tuple[float, float]:
        """Mouse position in logical pixels."""
        return (
            self._mouse_position.x / self.dpi_scale,
            self._mouse_position.y / self.dpi_scale,
        )

    def mouse_position_local(self) -> Vec2:
        """Mouse position mapped to the range [-1, 1]."""
        x, y = self.mouse_position()
        return self._to_local(Vec2(x, y))

    def touches(self) -> list[Touch]:
        """Copies of the active touches, positions in pixels."""
        return [dataclasses.replace(touch) for touch in self._touches.values()]

    def touches_local(self) -> list[Touch]:
        """Copies of the active touches, positions in [-1, 1]."""
        return [
            dataclasses.replace(touch, position=self._to_local(touch.position))
            for touch in self._touches.values()
        ]

    def mouse_wheel(self) -> tuple[float, float]:
        return self._mouse_wheel.x, self._mouse_wheel.y

    def is_key_pressed(self, key_code: Hashable) -> bool:
        """Whether the key went down this frame."""
        return key_code in self._keys_pressed

    def is_key_down(self, key_code: Hashable) -> bool:
        """Whether the key is being held."""
        return key_code in self._keys_down

    def is_key_released(self, key_code: Hashable) -> bool:
        """Whether the key was released this frame."""
        return key_code in self._keys_released

    def get_char_pressed(self) -> str | None:
        """Take the most recent character from the input queue."""
        return self._chars_pressed.pop() if self._chars_pressed else None

    def get_last_key_pressed(self) -> Hashable | None:
        """The most recently pressed key this frame, if any."""
        return next(reversed(self._keys_pressed), None)

    def is_mouse_button_down(self, button: MouseButton) -> bool:
        return button in self._mouse_down

    def is_mouse_button_pressed(self, button: MouseButton) -> bool:
        return button in self._mouse_pressed

    def is_mouse_button_released(self, button: MouseButton) -> bool:
        return button in self._mouse_released

    def prevent_quit(self) -> None:
        """Cancel window close requests; they are reported instead."""
        self._prevent_quit = True

    def is_quit_requested(self) -> bool:
        return self._quit_requested

    def register_input_subscriber(self) -> int:
        """Start recording events for a new subscriber; returns its id."""
        self._subscribers.append([])
        return len(self._subscribers) - 1

    def repeat_all_input(self, handler: InputHandler, subscriber: int) -> None:
        """Replay the subscriber's recorded events to handler, then forget them."""
        queue = self._subscribers[subscriber]
        for event in queue:
            event.replay(handler)
        queue.clear()
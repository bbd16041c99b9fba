"""Input events, per-frame input collection and rectangular event listeners."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Iterable, Optional

Vec2 = tuple[float, float]


class MouseButton(enum.Enum):
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"
    OTHER = "other"


@dataclass(frozen=True)
class MouseMoved:
    """Mouse moved to ``normalized``, in [-1, 1] screen coordinates."""

    normalized: Vec2


@dataclass(frozen=True)
class MouseDown:
    button: MouseButton


@dataclass(frozen=True)
class MouseUp:
    button: MouseButton


@dataclass(frozen=True)
class KeyDown:
    scan_code: int


@dataclass(frozen=True)
class KeyUp:
    scan_code: int


@dataclass(frozen=True)
class ScrollStart:
    delta: Vec2


@dataclass(frozen=True)
class ScrollContinue:
    delta: Vec2


@dataclass(frozen=True)
class ScrollEnd:
    delta: Vec2


@dataclass
class ButtonEvent:
    """State of one button: ``first_down`` only on the frame it was pressed."""

    first_down: bool = False
    down: bool = False


@dataclass
class EventCollector:
    """Collects the input state of the current frame; ``delta_time`` is in seconds."""

    keycodes_down: set[int] = field(default_factory=set)
    mouse_delta_pos: Vec2 = (0.0, 0.0)
    delta_time: float = 0.0
    mouse_scroll_delta: float = 0.0
    last_mouse_pos: Vec2 = (0.0, 0.0)
    right_mouse_down: ButtonEvent = field(default_factory=ButtonEvent)
    middle_mouse_down: ButtonEvent = field(default_factory=ButtonEvent)
    left_mouse_down: ButtonEvent = field(default_factory=ButtonEvent)

    def _button(self, button: MouseButton) -> Optional[ButtonEvent]:
        return {
            MouseButton.LEFT: self.left_mouse_down,
            MouseButton.MIDDLE: self.middle_mouse_down,
            MouseButton.RIGHT: self.right_mouse_down,
        }.get(button)

    def process_events(self, delta_time: float, events: Iterable[object]) -> None:
        """Start a new frame and apply ``events`` in order."""
        self.delta_time = delta_time
        self.clear()
        for event in events:
            match event:
                case MouseMoved(normalized=(x, y)):
                    last_x, last_y = self.last_mouse_pos
                    self.mouse_delta_pos = (x - last_x, y - last_y)
                    self.last_mouse_pos = (x, y)
                case MouseDown(button=button):
                    state = self._button(button)
                    if state is not None:
                        state.down = True
                        state.first_down = True
                case MouseUp(button=button):
                    state = self._button(button)
                    if state is not None:
                        state.down = False
                case KeyDown(scan_code=code):
                    self.keycodes_down.add(code)
                case KeyUp(scan_code=code):
                    self.keycodes_down.discard(code)
                case ScrollStart(delta=(_, dy)) | ScrollContinue(delta=(_, dy)) | ScrollEnd(
                    delta=(_, dy)
                ):
                    self.mouse_scroll_delta += dy
                case _:
                    pass

    def clear(self) -> None:
        """Reset the state that only lasts one frame."""
        self.mouse_delta_pos = (0.0, 0.0)
        self.mouse_scroll_delta = 0.0
        self.left_mouse_down.first_down = False
        self.middle_mouse_down.first_down = False
        self.right_mouse_down.first_down = False


@dataclass
class EventListener:
    """Listens for mouse events inside a box; upper right is (1, 1), lower left (-1, -1).

    Each event field is None, or the mouse position when the event happened.
    """

    upper_right_corner: Vec2
    lower_left_corner: Vec2
    sublisteners: list[EventListener] = field(default_factory=list)
    mouse_hovered: Optional[Vec2] = None
    first_right_mouse_down: Optional[Vec2] = None
    right_mouse_down: Optional[Vec2] = None
    first_middle_mouse_down: Optional[Vec2] = None
    middle_mouse_down: Optional[Vec2] = None
    first_left_mouse_down: Optional[Vec2] = None
    left_mouse_down: Optional[Vec2] = None

    def receive_events(self, collector: EventCollector) -> None:
        """Take events from ``collector`` and pass them down to sublisteners."""
        self.reset()
        pos = collector.last_mouse_pos
        if self.contains_point(pos):
            if collector.right_mouse_down.first_down:
                self.first_right_mouse_down = pos
            if collector.right_mouse_down.down:
                self.right_mouse_down = pos
            if collector.middle_mouse_down.first_down:
                self.first_middle_mouse_down = pos
            if collector.middle_mouse_down.down:
                self.middle_mouse_down = pos
            if collector.left_mouse_down.first_down:
                self.first_left_mouse_down = pos
            if collector.left_mouse_down.down:
                self.left_mouse_down = pos
            self.mouse_hovered = pos
        for listener in self.sublisteners:
            listener.receive_events(collector)

    def add_sublisteners(self, sublisteners: Iterable[EventListener]) -> None:
        self.sublisteners.extend(sublisteners)

    def reset(self) -> None:
        """Clear all events."""
        self.mouse_hovered = None
        self.right_mouse_down = None
        self.first_right_mouse_down = None
        self.middle_mouse_down = None
        self.first_middle_mouse_down = None
        self.left_mouse_down = None
        self.first_left_mouse_down = None

    def contains_point(self, point: Vec2) -> bool:
        """True if ``point`` lies strictly inside the box."""
        x, y = point
        upper_x, upper_y = self.upper_right_corner
        lower_x, lower_y = self.lower_left_corner
        return lower_x < x < upper_x and lower_y < y < upper_y

    def any_mouse_down(self) -> bool:
        return (
            self.left_mouse_down is not None
            or self.middle_mouse_down is not None
            or self.right_mouse_down is not None
        )

    def mouse_pos(self) -> Optional[Vec2]:
        """Cursor position if any button is down: right, then middle, then left."""
        for position in (self.right_mouse_down, self.middle_mouse_down, self.left_mouse_down):
            if position is not None:
                return position
        return None


def send_events(listener: EventListener, collector: EventCollector) -> None:
    """Deliver the collected events of this frame to ``listener``."""
    listener.receive_events(collector)
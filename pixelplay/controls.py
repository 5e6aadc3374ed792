"""Input and drawing surfaces shared by the games.

A frame function reads buttons from :class:`Controls` and records what it
draws on a :class:`Canvas`, so game logic can run and be inspected without
any real display or input device.
"""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field, fields
from typing import Any


class ButtonState(enum.Enum):
    """State of a single button during one frame."""

    RELEASED = "released"
    JUST_PRESSED = "just_pressed"
    PRESSED = "pressed"
    JUST_RELEASED = "just_released"

    def pressed(self) -> bool:
        """True while the button is down, including the frame it went down."""
        return self in (ButtonState.PRESSED, ButtonState.JUST_PRESSED)

    def just_pressed(self) -> bool:
        """True only on the frame the button went down."""
        return self is ButtonState.JUST_PRESSED


@dataclass
class Gamepad:
    """The buttons of one controller."""

    up: ButtonState = ButtonState.RELEASED
    down: ButtonState = ButtonState.RELEASED
    left: ButtonState = ButtonState.RELEASED
    right: ButtonState = ButtonState.RELEASED
    a: ButtonState = ButtonState.RELEASED
    b: ButtonState = ButtonState.RELEASED
    x: ButtonState = ButtonState.RELEASED
    y: ButtonState = ButtonState.RELEASED
    start: ButtonState = ButtonState.RELEASED
    select: ButtonState = ButtonState.RELEASED

    @classmethod
    def _with(cls, state: ButtonState, names: tuple[str, ...]) -> "Gamepad":
        known = {f.name for f in fields(cls)}
        unknown = [name for name in names if name not in known]
        if unknown:
            raise ValueError(f"unknown button(s): {', '.join(unknown)}")
        return cls(**{name: state for name in names})

    @classmethod
    def holding(cls, *args: str) -> "Gamepad":
        """A gamepad whose named buttons are held down."""
        return cls._with(ButtonState.PRESSED, args)

    @classmethod
    def tapping(cls, *args: str) -> "Gamepad":
        """A gamepad whose named buttons went down this frame."""
        return cls._with(ButtonState.JUST_PRESSED, args)


@dataclass
class Controls:
    """All connected gamepads, indexed by player slot."""

    pads: dict[int, Gamepad] = field(default_factory=dict)

    def gamepad(self, index: int) -> Gamepad:
        """The gamepad in slot ``index``; an idle one if nothing is connected."""
        return self.pads.get(index, Gamepad())


@dataclass(frozen=True)
class DrawCommand:
    """One recorded drawing call."""

    kind: str
    params: dict[str, Any]


class Canvas:
    """Records drawing calls in order."""

    def __init__(self) -> None:
        self.commands: list[DrawCommand] = []
        self.camera: tuple[float, float] = (0, 0)

    def _record(self, kind: str, params: dict[str, Any]) -> None:
        self.commands.append(DrawCommand(kind, params))

    def clear(self, color: int) -> None:
        self._record("clear", {"color": color})

    def rect(self, **kwargs: Any) -> None:
        self._record("rect", dict(kwargs))

    def circ(self, **kwargs: Any) -> None:
        self._record("circ", dict(kwargs))

    def ellipse(self, **kwargs: Any) -> None:
        self._record("ellipse", dict(kwargs))

    def sprite(self, name: str, **kwargs: Any) -> None:
        self._record("sprite", {"name": name, **kwargs})

    def text(self, text: str, **kwargs: Any) -> None:
        self._record("text", {"text": text, **kwargs})

    def path(self, **kwargs: Any) -> None:
        self._record("path", dict(kwargs))

    def set_camera(self, x: float, y: float) -> None:
        self.camera = (x, y)
        self._record("camera", {"x": x, "y": y})

    def kinds(self) -> list[str]:
        """The kind of every recorded command, in order."""
        return [command.kind for command in self.commands]


def default_rand() -> int:
    """A random unsigned 32-bit integer."""
    return random.getrandbits(32)
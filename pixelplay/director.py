"""Runs a branching dialogue script one line at a time.

Script lines:
``<< name`` marks a knot, ``>> name`` jumps to one, ``#`` starts a comment,
``]> a ]> b`` offers choices whose targets follow on the next line as
``>> x >> y`` (``NULL`` keeps the choice open), ``! WAIT / n`` pauses for
``n`` seconds, ``-- end`` finishes, and ``SPEAKER: text`` is spoken.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .controls import Canvas, Gamepad
from .textbox import MAX_CHOICES, render_choice_textbox, render_textbox

NO_SPEAKER = 0
END_SCENE = 2
FRAMES_PER_SECOND = 60
_SPEAKERS = {"NOAH": 1, "MYLAN": 2}


class ScriptError(ValueError):
    """The dialogue script is malformed."""


@dataclass
class DirectorState:
    lines: list[str] = field(default_factory=list)
    scene: int = 0
    speaking_char: int = NO_SPEAKER
    current_line: int = 0
    wait_timer: int = 0
    tween_done_once: bool = False

    @classmethod
    def from_script(cls, text: str) -> "DirectorState":
        return cls(lines=text.split("\n"))


def _line(state: DirectorState, index: int) -> str:
    try:
        return state.lines[index]
    except IndexError:
        raise ScriptError(f"script has no line {index}") from None


def _split(line: str, separator: str) -> list[str]:
    return [part.strip() for part in line.split(separator) if part != ""]


def find_knot(lines: list[str], name: str) -> int:
    """Index of the ``<< name`` line."""
    marker = f"<< {name}"
    try:
        return lines.index(marker)
    except ValueError:
        raise ScriptError(f"no knot named {name!r}") from None


def assess_current_line(state: DirectorState, gamepad: Gamepad, canvas: Canvas) -> None:
    """Act on the current script line for one frame."""
    line = _line(state, state.current_line)
    if line.startswith(("<<", "#")) or line == "":
        state.current_line += 1
    elif line.startswith(">>"):
        state.current_line = find_knot(state.lines, line[2:].strip())
    elif line.startswith("]>"):
        evaluate_choice(state, gamepad, canvas)
    elif line.startswith("!"):
        evaluate_command(state)
    elif line.startswith("-- end"):
        state.speaking_char = NO_SPEAKER
        state.tween_done_once = False
        state.scene = END_SCENE
    else:
        print_current_line(state, gamepad, canvas)


def evaluate_choice(state: DirectorState, gamepad: Gamepad, canvas: Canvas) -> None:
    """Show the choices and follow the one picked with a direction button."""
    choices = _split(_line(state, state.current_line), "]>")
    state.speaking_char = NO_SPEAKER
    if len(choices) > MAX_CHOICES:
        raise ScriptError(f"number of choices exceeds allowed {MAX_CHOICES}")
    render_choice_textbox(canvas, choices)

    diverts = _split(_line(state, state.current_line + 1), ">>")
    buttons = (gamepad.left, gamepad.right, gamepad.up, gamepad.down)
    picked = next(
        (
            index
            for index, button in enumerate(buttons)
            if button.just_pressed() and index < len(choices)
        ),
        None,
    )
    if picked is None:
        return
    if picked >= len(diverts):
        raise ScriptError(f"choice {picked} has no divert")
    target = diverts[picked]
    if target == "NULL":
        return
    state.current_line = find_knot(state.lines, target)
    state.tween_done_once = False


def evaluate_command(state: DirectorState) -> None:
    """Run a ``! COMMAND / arg`` line; only ``! WAIT`` does anything."""
    state.speaking_char = NO_SPEAKER
    state.wait_timer += 1

    parts = _split(_line(state, state.current_line), "/")
    if len(parts) < 2:
        raise ScriptError("command needs an argument")
    command, arg = parts[0], parts[1]

    if command == "! WAIT":
        try:
            seconds = int(arg)
        except ValueError:
            raise ScriptError(f"bad wait time {arg!r}") from None
        if not 0 <= seconds <= 0xFFFF:
            raise ScriptError(f"bad wait time {arg!r}")
        if state.wait_timer == seconds * FRAMES_PER_SECOND:
            state.current_line += 1
            state.wait_timer = 0
            state.tween_done_once = False


def print_current_line(state: DirectorState, gamepad: Gamepad, canvas: Canvas) -> None:
    """Show a spoken line; start moves on to the next one."""
    statement = _split(_line(state, state.current_line), ":")
    if not statement:
        raise ScriptError("empty statement")
    speaker = _SPEAKERS.get(statement[0])
    if speaker is not None:
        state.speaking_char = speaker
    if len(statement) < 2:
        raise ScriptError("statement needs a speaker and a line")

    render_textbox(canvas, statement)

    if gamepad.start.just_pressed():
        state.current_line += 1
        state.tween_done_once = False
"""Dialogue and choice boxes drawn along the bottom of the screen."""

from __future__ import annotations

from typing import Sequence

from .controls import Canvas

TB_X = 0
TB_Y = 174
TB_PADDING = 8
SCREEN_W = 384
CHOICE_OPTIONS = ("<", ">", "^", "v")
STRIKE_COLOR = 0xFFFFFF99
MAX_CHOICES = len(CHOICE_OPTIONS)

_HALF = SCREEN_W // 2

# Per choice slot: text x, text y, strike-through start x, strike-through end x.
_CHOICE_SLOTS = (
    (TB_X + 4 + TB_PADDING, TB_Y + TB_PADDING, TB_X + TB_PADDING, _HALF - TB_PADDING),
    (TB_X + 4 + TB_PADDING, TB_Y + 16 + TB_PADDING, TB_X + TB_PADDING, _HALF - TB_PADDING),
    (_HALF + TB_PADDING, TB_Y + TB_PADDING, _HALF + TB_PADDING, SCREEN_W - TB_PADDING),
    (_HALF + TB_PADDING, TB_Y + 16 + TB_PADDING, _HALF + TB_PADDING, SCREEN_W - TB_PADDING),
)


def render_textbox(canvas: Canvas, dialogue: Sequence[str]) -> bool:
    """Draw the spoken part of a ``speaker: line`` statement."""
    if len(dialogue) < 2:
        raise ValueError("dialogue needs a speaker and a line")
    canvas.text(dialogue[1], x=TB_X + 2 * TB_PADDING, y=TB_Y + TB_PADDING)
    return True


def render_choice_textbox(canvas: Canvas, choices: Sequence[str]) -> bool:
    """Draw up to four choices; a leading ``~`` marks one as struck through."""
    if len(choices) > MAX_CHOICES:
        raise ValueError(f"number of choices exceeds allowed {MAX_CHOICES}")
    for choice, symbol, (text_x, text_y, start_x, end_x) in zip(
        choices, CHOICE_OPTIONS, _CHOICE_SLOTS
    ):
        struck = choice.startswith("~")
        label = choice[1:] if struck else choice
        canvas.text(f"{symbol} {label}", x=text_x, y=text_y)
        if struck:
            line_y = text_y + 3
            canvas.path(
                start=(start_x, line_y),
                end=(end_x, line_y),
                width=1,
                color=STRIKE_COLOR,
            )
    return True
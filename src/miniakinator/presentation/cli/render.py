"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
import textwrap
from typing import Sequence

from miniakinator.domain.session import GamePhase
from miniakinator.services.game_service import GameView

DEBUG_ENV_VAR = "MINIAKINATOR_DEBUG"
_WORD_LIST_WIDTH = 72


def debug_enabled() -> bool:
    """Return True only when MINIAKINATOR_DEBUG is explicitly set to '1'."""
    return os.getenv(DEBUG_ENV_VAR) == "1"


def wrap_text(text: str, width: int, *, indent_continuation: bool = True) -> list[str]:
    """
    Wrap text to fit within a fixed width, breaking on word boundaries.

    Args:
        text: The text to wrap
        width: Maximum width per line
        indent_continuation: If True, indent continuation lines with 2 spaces

    Returns:
        List of wrapped lines, each <= width characters
    """
    if not text or width <= 0:
        return [text] if text else [""]
    wrapped = textwrap.fill(
        text,
        width=width,
        subsequent_indent="  " if indent_continuation else "",
        break_long_words=False,
        break_on_hyphens=False,
    )
    return wrapped.split("\n")


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def render_supported_words(words: Sequence[str]) -> None:
    render_heading("Supported Words")
    if not words:
        print("(none)")
        return
    for line in wrap_text(", ".join(words), _WORD_LIST_WIDTH, indent_continuation=False):
        print(line)


def render_view(view: GameView) -> None:
    """Print the screen for the current phase of the game view."""
    phase = GamePhase(view.phase)
    if phase is GamePhase.INIT:
        render_heading("Mini-Akinator")
        print("Think of a word from the supported words.")
        print(f"Score: {view.score}")
    elif phase in (GamePhase.CATEGORY_QUESTION, GamePhase.SUBCATEGORY_QUESTION):
        kind = "Category" if phase is GamePhase.CATEGORY_QUESTION else "Subcategory"
        render_heading(f"{kind} Question {view.question_number} of {view.question_total}")
        label = view.question_label or ""
        if debug_enabled():
            label = f"{label} [priority {view.question_priority}]"
        print(label)
    elif phase is GamePhase.GUESSING:
        if view.no_words:
            render_heading("No Words Available")
            print("There are no words matching your description.")
            return
        render_heading("My Guess")
        print(f"Is it... {(view.current_guess or '').upper()}?")
        print(f"Guesses left: {view.guesses_remaining}")
    elif phase is GamePhase.HINT:
        if view.awaiting_give_up_word:
            render_heading("Give Up")
            print("What was the word you were thinking of?")
            return
        render_heading("Hint")
        if view.hint_rejected:
            print("No words match that letter. Try again.")
        print("What is the 3rd letter of your word?")
    elif phase is GamePhase.RESULT:
        _render_result(view)


def _render_result(view: GameView) -> None:
    if view.agent_won:
        render_heading("I Won!")
        print("I successfully guessed your word!")
    else:
        render_heading("You Win")
        if view.word_supported:
            print(f"The word was {(view.resolved_word or '').upper()}. Well done!")
        else:
            print("This word is not supported.")
    print(f"Score: {view.score}")

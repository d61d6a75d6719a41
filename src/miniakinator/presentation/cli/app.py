"""Console-driven UI loops for Mini-Akinator."""
from __future__ import annotations

from typing import Callable, List, Literal, Sequence, Tuple

from miniakinator.data.repositories import TaxonomyRepository
from miniakinator.data.stores import JsonFileStore
from miniakinator.domain.session import GamePhase
from miniakinator.presentation.cli import config
from miniakinator.presentation.cli.logging_setup import configure_logging
from miniakinator.presentation.cli.render import (
    render_menu,
    render_supported_words,
    render_view,
)
from miniakinator.services import GameService, GameView, TaxonomyUnavailableError

MenuAction = Literal["start", "words", "quit"]


def main() -> None:
    """Start the interactive CLI session."""
    settings = config.load_config()
    configure_logging(str(settings["log_level"]))
    service = _build_game_service()
    print("=== Mini-Akinator ===")
    if not service.load_taxonomy():
        print(f"Failed to load game data: {service.get_view().load_error}")
        return
    running = True
    while running:
        render_view(service.get_view())
        action = _main_menu_loop(bool(settings["show_supported_words"]))
        if action == "quit":
            running = False
        elif action == "words":
            render_supported_words(service.supported_words())
        else:
            running = _play_session(service)
    print("Goodbye!")


def _build_game_service() -> GameService:
    """Construct the GameService with the bundled taxonomy and per-user store."""
    return GameService(
        taxonomy_repo=TaxonomyRepository(),
        store=JsonFileStore(config.get_store_path()),
    )


def _main_menu_options(show_words: bool = True) -> List[Tuple[str, MenuAction]]:
    options: List[Tuple[str, MenuAction]] = [("I'm thinking of a word", "start")]
    if show_words:
        options.append(("Show Supported Words", "words"))
    options.append(("Quit", "quit"))
    return options


def _main_menu_loop(show_words: bool) -> MenuAction:
    options = _main_menu_options(show_words)
    render_menu("Main Menu", [label for label, _ in options])
    index = _prompt_choice(len(options))
    return options[index][1]


def _play_session(service: GameService) -> bool:
    """Play one session; return False when the player wants to quit."""
    try:
        service.start()
    except TaxonomyUnavailableError as exc:
        print(f"Failed to load game data: {exc}")
        return False
    _run_game_loop(service)
    keep_playing = _prompt_yes_no("Play again?")
    service.reset()
    return keep_playing


def _run_game_loop(service: GameService) -> GameView:
    """Drive the session until a result or dead-end screen is reached."""
    while True:
        view = service.get_view()
        render_view(view)
        phase = GamePhase(view.phase)
        if phase is GamePhase.CATEGORY_QUESTION:
            service.answer_category(_prompt_yes_no("Your answer?"))
        elif phase is GamePhase.SUBCATEGORY_QUESTION:
            service.answer_subcategory(_prompt_yes_no("Your answer?"))
        elif phase is GamePhase.GUESSING:
            if view.no_words:
                return view
            _run_menu(_guess_menu_entries(service, view))
        elif phase is GamePhase.HINT:
            if view.awaiting_give_up_word:
                service.give_up(input("Enter your 4-letter word: "))
            else:
                _run_menu(_hint_menu_entries(service))
        else:
            return view


def _guess_menu_entries(service: GameService, view: GameView) -> List[Tuple[str, Callable[[], object]]]:
    entries: List[Tuple[str, Callable[[], object]]] = [
        ("Correct!", service.mark_correct),
        ("Wrong", service.mark_wrong),
    ]
    if view.hint_available:
        entries.append(("Need a Hint", service.request_hint))
    return entries


def _hint_menu_entries(service: GameService) -> List[Tuple[str, Callable[[], object]]]:
    return [
        ("Enter the 3rd letter", lambda: service.submit_hint(input("Letter: "))),
        ("Give Up", service.give_up),
    ]


def _run_menu(entries: Sequence[Tuple[str, Callable[[], object]]]) -> None:
    render_menu("Options", [label for label, _ in entries])
    index = _prompt_choice(len(entries))
    entries[index][1]()


def _prompt_choice(choice_count: int) -> int:
    while True:
        raw = input("Select an option: ").strip()
        try:
            index = int(raw) - 1
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= index < choice_count:
            return index
        print(f"Please enter a value between 1 and {choice_count}.")


def _prompt_yes_no(prompt: str) -> bool:
    while True:
        raw = input(f"{prompt} (y/n): ").strip().lower()
        if raw in ("y", "yes"):
            return True
        if raw in ("n", "no"):
            return False
        print("Please answer y or n.")

"""Question-driven narrowing state machine."""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from miniakinator.core.rng import RNG
from miniakinator.core.types import HintRejection
from miniakinator.data.errors import DataError
from miniakinator.data.repositories import TaxonomyRepository
from miniakinator.data.stores import KeyValueStore, ProgressStore
from miniakinator.domain.candidate_pool import CandidatePool
from miniakinator.domain.session import GUESSES_PER_ROUND, GamePhase, GameSession
from miniakinator.domain.taxonomy import PriorityPath, Taxonomy
from miniakinator.services.errors import InvalidActionError, TaxonomyUnavailableError
from miniakinator.services.priority_ranker import PriorityRanker
from miniakinator.services.score_ledger import ScoreLedger

logger = logging.getLogger(__name__)

GIVE_UP_WORD_LENGTH = 4


@dataclass(slots=True)
class GameView:
    """Snapshot handed to the presentation layer after every transition."""

    phase: str
    score: int
    question_label: str | None = None
    question_number: int | None = None
    question_total: int | None = None
    question_priority: int | None = None
    current_guess: str | None = None
    guesses_remaining: int | None = None
    hint_available: bool = False
    no_words: bool = False
    awaiting_give_up_word: bool = False
    hint_rejected: bool = False
    agent_won: bool = False
    resolved_word: str | None = None
    word_supported: bool | None = None
    load_error: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class GameEvent:
    """Base class for game events."""


@dataclass(slots=True)
class CategoryConfirmedEvent(GameEvent):
    category_id: str
    priority: int


@dataclass(slots=True)
class SubcategoryConfirmedEvent(GameEvent):
    category_id: str
    subcategory_id: str
    priority: int


@dataclass(slots=True)
class GuessMadeEvent(GameEvent):
    word: str
    guesses_remaining: int


@dataclass(slots=True)
class NoWordsEvent(GameEvent):
    """The narrowing path left nothing to guess."""


@dataclass(slots=True)
class HintAcceptedEvent(GameEvent):
    letter: str
    candidates: int


@dataclass(slots=True)
class HintRejectedEvent(GameEvent):
    letter: str
    reason: HintRejection


@dataclass(slots=True)
class ScoreChangedEvent(GameEvent):
    delta: int
    total: int


@dataclass(slots=True)
class SessionResolvedEvent(GameEvent):
    agent_won: bool
    word: str | None
    word_supported: bool | None


@dataclass(slots=True)
class ActionResult:
    """Result returned after applying a player input."""

    events: List[GameEvent] = field(default_factory=list)
    view: GameView | None = None


class GameService:
    """Application service that drives one game session at a time."""

    def __init__(
        self,
        taxonomy_repo: TaxonomyRepository,
        store: KeyValueStore,
        *,
        rng: RNG | None = None,
        guesses_per_round: int = GUESSES_PER_ROUND,
    ) -> None:
        if guesses_per_round < 1:
            raise ValueError("guesses_per_round must be at least 1.")
        self._taxonomy_repo = taxonomy_repo
        self._progress = ProgressStore(store)
        self._score = ScoreLedger(self._progress)
        self._rng = rng or RNG()
        self._guesses_per_round = guesses_per_round
        self._taxonomy: Taxonomy | None = None
        self._ranker: PriorityRanker | None = None
        self._pool: CandidatePool | None = None
        self._load_error: str | None = None
        self._session = GameSession(guesses_remaining=guesses_per_round)

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def taxonomy(self) -> Taxonomy | None:
        return self._taxonomy

    @property
    def candidate_words(self) -> List[str]:
        return self._pool.words if self._pool is not None else []

    def load_taxonomy(self) -> bool:
        """Load the taxonomy once; return False if no data is available."""
        if self._taxonomy is not None:
            return True
        try:
            taxonomy = self._taxonomy_repo.load()
        except DataError as exc:
            self._load_error = str(exc)
            logger.error("Failed to load taxonomy: %s", exc)
            return False
        self._taxonomy = taxonomy
        self._ranker = PriorityRanker(taxonomy, self._progress)
        self._ranker.restore()
        self._pool = CandidatePool(taxonomy, self._rng)
        self._load_error = None
        logger.info("Loaded taxonomy with %d categories", len(taxonomy))
        return True

    def supported_words(self) -> List[str]:
        if not self.load_taxonomy():
            return []
        assert self._taxonomy is not None
        return self._taxonomy.all_words()

    def start(self) -> ActionResult:
        """Begin a fresh session and ask the highest-priority category."""
        self._require_phase("start", GamePhase.INIT)
        if not self.load_taxonomy():
            raise TaxonomyUnavailableError(self._load_error or "Game data is unavailable.")
        ranker, pool = self._collaborators()
        self._session = GameSession(
            phase=GamePhase.CATEGORY_QUESTION,
            category_questions=ranker.rank_categories(),
            guesses_remaining=self._guesses_per_round,
        )
        pool.populate([])
        events: List[GameEvent] = []
        if not self._session.category_questions:
            self._enter_guessing(events)
        return self._result(events)

    def answer_category(self, answer: bool) -> ActionResult:
        self._require_phase("answer_category", GamePhase.CATEGORY_QUESTION)
        ranker, _ = self._collaborators()
        session = self._session
        category = session.current_category
        assert category is not None
        events: List[GameEvent] = []
        if answer:
            session.selected_category_id = category.id
            priority = ranker.reward(PriorityPath(category.id))
            events.append(CategoryConfirmedEvent(category_id=category.id, priority=priority))
            session.subcategory_questions = ranker.rank_subcategories(category.id)
            session.subcategory_index = 0
            if session.subcategory_questions:
                session.phase = GamePhase.SUBCATEGORY_QUESTION
            else:
                self._enter_guessing(events)
        else:
            session.category_index += 1
            if session.current_category is None:
                self._enter_guessing(events)
        return self._result(events)

    def answer_subcategory(self, answer: bool) -> ActionResult:
        self._require_phase("answer_subcategory", GamePhase.SUBCATEGORY_QUESTION)
        ranker, _ = self._collaborators()
        session = self._session
        subcategory = session.current_subcategory
        assert subcategory is not None and session.selected_category_id is not None
        events: List[GameEvent] = []
        if answer:
            session.selected_subcategory_id = subcategory.id
            priority = ranker.reward(PriorityPath(session.selected_category_id, subcategory.id))
            events.append(
                SubcategoryConfirmedEvent(
                    category_id=session.selected_category_id,
                    subcategory_id=subcategory.id,
                    priority=priority,
                )
            )
            self._enter_guessing(events)
        else:
            session.subcategory_index += 1
            if session.current_subcategory is None:
                self._enter_guessing(events)
        return self._result(events)

    def mark_correct(self) -> ActionResult:
        self._require_guess("mark_correct")
        session = self._session
        total = self._score.add(-1)
        session.agent_won = True
        session.resolved_word = session.current_guess
        session.word_supported = True
        session.phase = GamePhase.RESULT
        events: List[GameEvent] = [
            ScoreChangedEvent(delta=-1, total=total),
            SessionResolvedEvent(agent_won=True, word=session.resolved_word, word_supported=True),
        ]
        return self._result(events)

    def mark_wrong(self) -> ActionResult:
        self._require_guess("mark_wrong")
        _, pool = self._collaborators()
        session = self._session
        session.guesses_remaining = max(0, session.guesses_remaining - 1)
        events: List[GameEvent] = []
        if session.guesses_remaining > 0:
            session.current_guess = pool.pick_guess()
            if session.current_guess is None:
                self._enter_hint()
            else:
                events.append(GuessMadeEvent(session.current_guess, session.guesses_remaining))
        else:
            self._enter_hint()
        return self._result(events)

    def request_hint(self) -> ActionResult:
        self._require_phase("request_hint", GamePhase.GUESSING)
        if self._session.guesses_remaining > 0:
            raise InvalidActionError("A hint is only offered once the guesses are used up.")
        self._enter_hint()
        return self._result([])

    def submit_hint(self, letter: str | None) -> ActionResult:
        """Narrow the pool by the third letter of the player's word."""
        self._require_phase("submit_hint", GamePhase.HINT)
        _, pool = self._collaborators()
        session = self._session
        session.hint_rejected = False
        session.awaiting_give_up_word = False
        normalized = (letter or "").strip().lower()
        if len(normalized) != 1:
            session.hint_rejected = True
            return self._result([HintRejectedEvent(letter=normalized, reason="invalid")])

        matches = pool.filter_by_hint_letter(normalized)
        if not matches:
            logger.info("No candidate has '%s' as third letter", normalized)
            session.hint_rejected = True
            return self._result([HintRejectedEvent(letter=normalized, reason="no_match")])

        session.hint_letter = normalized
        session.guesses_remaining = self._guesses_per_round
        session.current_guess = None
        session.phase = GamePhase.GUESSING
        events: List[GameEvent] = [HintAcceptedEvent(letter=normalized, candidates=len(matches))]
        self._present_guess(events)
        return self._result(events)

    def give_up(self, word: str | None = None) -> ActionResult:
        """Reveal the player's word; without a 4 letter word, ask for one."""
        self._require_phase("give_up", GamePhase.HINT)
        _, pool = self._collaborators()
        session = self._session
        session.hint_rejected = False
        normalized = (word or "").strip().lower()
        if len(normalized) != GIVE_UP_WORD_LENGTH:
            session.awaiting_give_up_word = True
            return self._result([])

        events: List[GameEvent] = []
        supported = pool.contains(normalized)
        if supported:
            events.append(ScoreChangedEvent(delta=1, total=self._score.add(1)))
        session.awaiting_give_up_word = False
        session.agent_won = False
        session.resolved_word = normalized
        session.word_supported = supported
        session.phase = GamePhase.RESULT
        events.append(SessionResolvedEvent(agent_won=False, word=normalized, word_supported=supported))
        return self._result(events)

    def reset(self) -> ActionResult:
        """Discard the current session and return to the start screen."""
        self._session = GameSession(guesses_remaining=self._guesses_per_round)
        if self._pool is not None:
            self._pool.populate([])
        return self._result([])

    def get_view(self) -> GameView:
        session = self._session
        view = GameView(
            phase=session.phase.value,
            score=self._score.get(),
            load_error=self._load_error,
        )
        if session.phase is GamePhase.CATEGORY_QUESTION:
            category = session.current_category
            if category is not None:
                view.question_label = category.label
                view.question_priority = category.priority
                view.question_number = session.category_index + 1
                view.question_total = len(session.category_questions)
        elif session.phase is GamePhase.SUBCATEGORY_QUESTION:
            subcategory = session.current_subcategory
            if subcategory is not None:
                view.question_label = subcategory.label
                view.question_priority = subcategory.priority
                view.question_number = session.subcategory_index + 1
                view.question_total = len(session.subcategory_questions)
        elif session.phase is GamePhase.GUESSING:
            view.current_guess = session.current_guess
            view.guesses_remaining = session.guesses_remaining
            view.hint_available = session.guesses_remaining <= 0
            view.no_words = session.current_guess is None
        elif session.phase is GamePhase.HINT:
            view.awaiting_give_up_word = session.awaiting_give_up_word
            view.hint_rejected = session.hint_rejected
        elif session.phase is GamePhase.RESULT:
            view.agent_won = session.agent_won
            view.resolved_word = session.resolved_word
            view.word_supported = session.word_supported
        return view

    def _enter_guessing(self, events: List[GameEvent]) -> None:
        _, pool = self._collaborators()
        taxonomy = self._taxonomy
        assert taxonomy is not None
        session = self._session
        if session.selected_category_id is None:
            pool.populate(taxonomy.all_words())
        else:
            pool.populate(taxonomy.words_for(session.selected_category_id, session.selected_subcategory_id))
        session.phase = GamePhase.GUESSING
        session.guesses_remaining = self._guesses_per_round
        session.current_guess = None
        session.hint_letter = None
        self._present_guess(events)

    def _present_guess(self, events: List[GameEvent]) -> None:
        _, pool = self._collaborators()
        session = self._session
        if session.current_guess is None:
            session.current_guess = pool.pick_guess()
        if session.current_guess is None:
            logger.info("No candidate words left for this session")
            events.append(NoWordsEvent())
        else:
            events.append(GuessMadeEvent(session.current_guess, session.guesses_remaining))

    def _enter_hint(self) -> None:
        session = self._session
        session.phase = GamePhase.HINT
        session.hint_rejected = False
        session.awaiting_give_up_word = False

    def _require_phase(self, action: str, *phases: GamePhase) -> None:
        if self._session.phase not in phases:
            raise InvalidActionError(f"'{action}' is not allowed during {self._session.phase.value}.")

    def _require_guess(self, action: str) -> None:
        self._require_phase(action, GamePhase.GUESSING)
        if self._session.current_guess is None:
            raise InvalidActionError(f"'{action}' needs a guess on the table.")

    def _collaborators(self) -> tuple[PriorityRanker, CandidatePool]:
        assert self._ranker is not None and self._pool is not None
        return self._ranker, self._pool

    def _result(self, events: List[GameEvent]) -> ActionResult:
        return ActionResult(events=events, view=self.get_view())

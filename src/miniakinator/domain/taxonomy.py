"""Category taxonomy the question flow is derived from."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping

logger = logging.getLogger(__name__)

_PATH_SEPARATOR = "."


class NotFoundError(LookupError):
    """Raised when a category or subcategory id is not part of the taxonomy."""


@dataclass(frozen=True, slots=True)
class PriorityPath:
    """Identifies either a category or a (category, subcategory) pair."""

    category_id: str
    subcategory_id: str | None = None

    @classmethod
    def parse(cls, raw: str) -> "PriorityPath":
        category_id, sep, subcategory_id = raw.partition(_PATH_SEPARATOR)
        return cls(category_id, subcategory_id if sep else None)

    def __str__(self) -> str:
        if self.subcategory_id is None:
            return self.category_id
        return f"{self.category_id}{_PATH_SEPARATOR}{self.subcategory_id}"


@dataclass(slots=True)
class Subcategory:
    """Question leaf holding the candidate words."""

    id: str
    label: str
    priority: int = 0
    words: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.words = [word.lower() for word in self.words]


@dataclass(slots=True)
class Category:
    """Top-level question with its ordered subcategories."""

    id: str
    label: str
    priority: int = 0
    subcategories: List[Subcategory] = field(default_factory=list)

    def get_subcategory(self, subcategory_id: str) -> Subcategory:
        for subcategory in self.subcategories:
            if subcategory.id == subcategory_id:
                return subcategory
        raise NotFoundError(f"Unknown subcategory '{self.id}{_PATH_SEPARATOR}{subcategory_id}'.")


class Taxonomy:
    """Ordered categories; only the priority fields change after load."""

    def __init__(self, categories: Iterable[Category]) -> None:
        self._categories: List[Category] = list(categories)
        self._by_id: Dict[str, Category] = {category.id: category for category in self._categories}
        self._word_set = set(self.all_words())

    @property
    def categories(self) -> List[Category]:
        return list(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def get_category(self, category_id: str) -> Category:
        try:
            return self._by_id[category_id]
        except KeyError as exc:
            raise NotFoundError(f"Unknown category '{category_id}'.") from exc

    def get_subcategory(self, category_id: str, subcategory_id: str) -> Subcategory:
        return self.get_category(category_id).get_subcategory(subcategory_id)

    def increment_priority(self, path: PriorityPath) -> int:
        """Add one to the priority at ``path`` and return the new value."""
        if path.subcategory_id is None:
            target: Category | Subcategory = self.get_category(path.category_id)
        else:
            target = self.get_subcategory(path.category_id, path.subcategory_id)
        target.priority += 1
        return target.priority

    def priority_snapshot(self) -> Dict[str, int]:
        """Return every priority keyed by its id-path string."""
        snapshot: Dict[str, int] = {}
        for category in self._categories:
            snapshot[str(PriorityPath(category.id))] = category.priority
            for subcategory in category.subcategories:
                snapshot[str(PriorityPath(category.id, subcategory.id))] = subcategory.priority
        return snapshot

    def apply_priorities(self, stored: Mapping[str, object]) -> None:
        """Overwrite priorities from a persisted id-path mapping."""
        for raw_path, value in stored.items():
            if not isinstance(value, int) or isinstance(value, bool):
                logger.debug("Ignoring non-integer priority for %r", raw_path)
                continue
            path = PriorityPath.parse(raw_path)
            try:
                if path.subcategory_id is None:
                    self.get_category(path.category_id).priority = value
                else:
                    self.get_subcategory(path.category_id, path.subcategory_id).priority = value
            except NotFoundError:
                logger.debug("Ignoring stored priority for unknown path %r", raw_path)

    def words_for(self, category_id: str, subcategory_id: str | None = None) -> List[str]:
        """Return the words of a subcategory, or the union over a category."""
        category = self.get_category(category_id)
        if subcategory_id is not None:
            return list(category.get_subcategory(subcategory_id).words)
        return _unique(word for subcategory in category.subcategories for word in subcategory.words)

    def all_words(self) -> List[str]:
        return _unique(
            word
            for category in self._categories
            for subcategory in category.subcategories
            for word in subcategory.words
        )

    def contains_word(self, word: str) -> bool:
        return word.lower() in self._word_set


def _unique(words: Iterable[str]) -> List[str]:
    seen: set[str] = set()
    ordered: List[str] = []
    for word in words:
        if word not in seen:
            seen.add(word)
            ordered.append(word)
    return ordered

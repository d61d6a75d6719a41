"""Repository for the category/subcategory/word taxonomy."""
from __future__ import annotations

from typing import List

from miniakinator.data.errors import DataValidationError
from miniakinator.data.repositories.base import RepositoryBase
from miniakinator.domain.taxonomy import Category, Subcategory, Taxonomy

MIN_WORD_LENGTH = 3


class TaxonomyRepository(RepositoryBase[Taxonomy]):
    """Loads taxonomy.json and validates its structure."""

    def __init__(self, base_path=None) -> None:
        super().__init__("taxonomy.json", base_path)

    def _build(self, raw: dict[str, object]) -> Taxonomy:
        categories: List[Category] = []
        for category_id, payload in raw.items():
            self._require_plain_id(category_id)
            context = f"category '{category_id}'"
            category_data = self._require_mapping(payload, context)
            label = self._require_str(category_data.get("label"), f"{context} label")
            priority = self._optional_priority(category_data.get("priority"), f"{context} priority")
            raw_subcategories = self._require_mapping(
                category_data.get("subcategories", {}), f"{context} subcategories"
            )
            subcategories = [
                self._parse_subcategory(category_id, subcategory_id, sub_payload)
                for subcategory_id, sub_payload in raw_subcategories.items()
            ]
            categories.append(
                Category(id=category_id, label=label, priority=priority, subcategories=subcategories)
            )
        return Taxonomy(categories)

    def _parse_subcategory(self, category_id: str, subcategory_id: str, payload: object) -> Subcategory:
        self._require_plain_id(subcategory_id)
        context = f"subcategory '{category_id}.{subcategory_id}'"
        sub_data = self._require_mapping(payload, context)
        label = self._require_str(sub_data.get("label"), f"{context} label")
        priority = self._optional_priority(sub_data.get("priority"), f"{context} priority")
        return Subcategory(
            id=subcategory_id,
            label=label,
            priority=priority,
            words=self._parse_words(sub_data.get("words", []), f"{context} words"),
        )

    def _parse_words(self, raw_words: object, context: str) -> List[str]:
        if not isinstance(raw_words, list):
            raise DataValidationError(f"{context} must be a list.")
        words: List[str] = []
        for index, entry in enumerate(raw_words):
            word = self._require_str(entry, f"{context}[{index}]").strip().lower()
            if len(word) < MIN_WORD_LENGTH:
                raise DataValidationError(
                    f"{context}[{index}] '{word}' is shorter than {MIN_WORD_LENGTH} characters."
                )
            words.append(word)
        return words

    @staticmethod
    def _require_plain_id(raw_id: str) -> None:
        if not raw_id or "." in raw_id:
            raise DataValidationError(f"Taxonomy id '{raw_id}' must be non-empty and contain no '.'.")

    def _optional_priority(self, value: object, context: str) -> int:
        if value is None:
            return 0
        return self._require_int(value, context)

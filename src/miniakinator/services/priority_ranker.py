"""Adaptive ordering of category and subcategory questions."""
from __future__ import annotations

import logging
from typing import List

from miniakinator.data.stores import ProgressStore
from miniakinator.domain.taxonomy import Category, PriorityPath, Subcategory, Taxonomy

logger = logging.getLogger(__name__)


class PriorityRanker:
    """Ranks questions by priority and reinforces confirmed answers."""

    def __init__(self, taxonomy: Taxonomy, progress: ProgressStore) -> None:
        self._taxonomy = taxonomy
        self._progress = progress

    def restore(self) -> None:
        """Apply persisted priorities on top of the dataset defaults."""
        stored = self._progress.read_priorities()
        if stored:
            self._taxonomy.apply_priorities(stored)
            logger.debug("Restored %d stored priorities", len(stored))

    def rank_categories(self) -> List[Category]:
        # sorted() is stable, so equal priorities keep dataset order.
        return sorted(self._taxonomy.categories, key=lambda category: -category.priority)

    def rank_subcategories(self, category_id: str) -> List[Subcategory]:
        category = self._taxonomy.get_category(category_id)
        return sorted(category.subcategories, key=lambda subcategory: -subcategory.priority)

    def reward(self, path: PriorityPath) -> int:
        """Increment the priority at ``path`` and persist every priority."""
        new_value = self._taxonomy.increment_priority(path)
        self._progress.write_priorities(self._taxonomy.priority_snapshot())
        logger.info("Priority for %s is now %d", path, new_value)
        return new_value

"""Repository exports."""

from .taxonomy_repo import TaxonomyRepository

__all__ = [
    "TaxonomyRepository",
]

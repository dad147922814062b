"""Store interfaces (repository pattern).

Catalogs must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from statements.domain import Category


class CategoryCatalog(ABC):
    """Interface for looking up plays by identifier."""

    @abstractmethod
    def get_category(self, category_id: str) -> Category | None:
        """Return a category by ID, or None if not found."""
        ...

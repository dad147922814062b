"""In-memory implementation of the CategoryCatalog."""

from collections.abc import Mapping
from typing import Any, Self

from statements.domain import Category
from statements.stores.interfaces import CategoryCatalog


class InMemoryCategoryCatalog(CategoryCatalog):
    """Catalog backed by a private copy of a mapping."""

    def __init__(self, categories: Mapping[str, Category]) -> None:
        self._categories = dict(categories)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Mapping[str, Any]]) -> Self:
        """Build a catalog from the ``plays.json`` shape.

        Example: ``{"hamlet": {"name": "Hamlet", "type": "tragedy"}}``
        """
        return cls(
            {
                category_id: Category(name=entry["name"], kind=entry["type"])
                for category_id, entry in raw.items()
            }
        )

    def get_category(self, category_id: str) -> Category | None:
        return self._categories.get(category_id)


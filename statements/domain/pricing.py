"""Pricing model: one calculator per play category.

``create_performance_calculator`` is the only place that looks at a
category's kind. Adding a category means adding a ``CategoryKind`` member,
a calculator subclass and an entry in ``_CALCULATORS``.
"""

from abc import ABC, abstractmethod

from statements.domain.errors import UnknownCategoryKindError
from statements.domain.models import Category, CategoryKind, Performance


class PerformanceCalculator(ABC):
    """Computes the charge and volume credits for a single performance."""

    def __init__(self, performance: Performance, category: Category) -> None:
        self.performance = performance
        self.category = category

    @property
    @abstractmethod
    def amount(self) -> int:
        """Charge in cents."""
        ...

    @property
    def volume_credits(self) -> int:
        return max(self.performance.audience - 30, 0)


class TragedyCalculator(PerformanceCalculator):
    """$400 base, plus $10 per seat over 30."""

    @property
    def amount(self) -> int:
        result = 40000
        if self.performance.audience > 30:
            result += 1000 * (self.performance.audience - 30)
        return result


class ComedyCalculator(PerformanceCalculator):
    """$300 base, $100 + $5 per seat over 20, plus $3 per seat.

    Earns an extra credit for every five attendees on top of the base credits.
    """

    @property
    def amount(self) -> int:
        result = 30000
        if self.performance.audience > 20:
            result += 10000 + 500 * (self.performance.audience - 20)
        result += 300 * self.performance.audience
        return result

    @property
    def volume_credits(self) -> int:
        return super().volume_credits + self.performance.audience // 5


_CALCULATORS: dict[CategoryKind, type[PerformanceCalculator]] = {
    CategoryKind.TRAGEDY: TragedyCalculator,
    CategoryKind.COMEDY: ComedyCalculator,
}


def create_performance_calculator(
    performance: Performance, category: Category
) -> PerformanceCalculator:
    """Return the calculator for the category's kind.

    Raises:
        UnknownCategoryKindError: If the kind has no calculator.
    """
    try:
        kind = CategoryKind(category.kind)
    except ValueError:
        raise UnknownCategoryKindError(category.kind) from None
    return _CALCULATORS[kind](performance, category)

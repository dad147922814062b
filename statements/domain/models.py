"""Domain models for statement calculation.

These are pure domain objects with no presentation concerns.
Amounts are integers in cents throughout.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Self


class CategoryKind(Enum):
    """Play categories the pricing model knows how to charge for."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"


@dataclass(frozen=True)
class Category:
    """A play in the catalog.

    ``kind`` is the raw tag from the catalog. It is checked when a
    calculator is resolved, not here.
    """

    name: str
    kind: str


@dataclass(frozen=True)
class Performance:
    """One performance on an invoice."""

    category_id: str
    audience: int

    def __post_init__(self) -> None:
        if isinstance(self.audience, bool) or not isinstance(self.audience, int):
            raise ValueError("Audience must be an integer")
        if self.audience < 0:
            raise ValueError("Audience cannot be negative")


@dataclass(frozen=True)
class Invoice:
    """A customer's invoice; performance order is kept in the statement."""

    customer_name: str
    performances: tuple[Performance, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "performances", tuple(self.performances))


@dataclass(frozen=True)
class EnrichedPerformance:
    """A performance with its resolved category and computed charges."""

    category_id: str
    audience: int
    category: Category
    amount: int
    volume_credits: int

    @classmethod
    def from_performance(
        cls,
        performance: Performance,
        category: Category,
        amount: int,
        volume_credits: int,
    ) -> Self:
        return cls(
            category_id=performance.category_id,
            audience=performance.audience,
            category=category,
            amount=amount,
            volume_credits=volume_credits,
        )


@dataclass(frozen=True)
class StatementData:
    """Fully computed statement handed to renderers."""

    customer_name: str
    performances: tuple[EnrichedPerformance, ...]
    total_amount: int
    total_volume_credits: int

    @classmethod
    def from_performances(
        cls, customer_name: str, performances: Iterable[EnrichedPerformance]
    ) -> Self:
        performances = tuple(performances)
        return cls(
            customer_name=customer_name,
            performances=performances,
            total_amount=sum(perf.amount for perf in performances),
            total_volume_credits=sum(perf.volume_credits for perf in performances),
        )

from statements.domain.errors import (
    CategoryNotFoundError,
    DomainError,
    ErrorCode,
    UnknownCategoryKindError,
)
from statements.domain.models import (
    Category,
    CategoryKind,
    EnrichedPerformance,
    Invoice,
    Performance,
    StatementData,
)
from statements.domain.pricing import (
    ComedyCalculator,
    PerformanceCalculator,
    TragedyCalculator,
    create_performance_calculator,
)

__all__ = [
    "Category",
    "CategoryKind",
    "Performance",
    "Invoice",
    "EnrichedPerformance",
    "StatementData",
    "PerformanceCalculator",
    "TragedyCalculator",
    "ComedyCalculator",
    "create_performance_calculator",
    "DomainError",
    "ErrorCode",
    "CategoryNotFoundError",
    "UnknownCategoryKindError",
]

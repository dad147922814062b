"""Statement service - the calculation phase.

Services:
- Depend only on interfaces (stores)
- Resolve each performance's category and price it
- Return domain models or raise domain errors

Nothing here formats output; renderers in ``statements.handlers`` consume
the ``StatementData`` returned.
"""

from collections.abc import Mapping

import structlog

from statements.domain import (
    Category,
    CategoryNotFoundError,
    EnrichedPerformance,
    Invoice,
    Performance,
    StatementData,
    UnknownCategoryKindError,
    create_performance_calculator,
)
from statements.stores import CategoryCatalog, InMemoryCategoryCatalog

logger = structlog.get_logger(__name__)


class StatementService:
    """Service for computing statement data from invoices."""

    def __init__(self, catalog: CategoryCatalog) -> None:
        self._catalog = catalog

    def create_statement_data(self, invoice: Invoice) -> StatementData:
        """Price every performance on the invoice and total the results.

        Raises:
            CategoryNotFoundError: If a performance's category is not in the catalog.
            UnknownCategoryKindError: If a category's kind has no calculator.
        """
        log = logger.bind(customer=invoice.customer_name)
        performances = [
            self._enrich_performance(performance, log)
            for performance in invoice.performances
        ]
        data = StatementData.from_performances(invoice.customer_name, performances)
        log.info(
            "statement_computed",
            performances=len(data.performances),
            total_amount=data.total_amount,
            total_volume_credits=data.total_volume_credits,
        )
        return data

    def _enrich_performance(
        self, performance: Performance, log: structlog.BoundLogger
    ) -> EnrichedPerformance:
        category = self._category_for(performance, log)
        try:
            calculator = create_performance_calculator(performance, category)
        except UnknownCategoryKindError as exc:
            log.warning(
                "unknown_category_kind",
                category_id=performance.category_id,
                kind=exc.kind,
            )
            raise
        return EnrichedPerformance.from_performance(
            performance,
            category,
            amount=calculator.amount,
            volume_credits=calculator.volume_credits,
        )

    def _category_for(
        self, performance: Performance, log: structlog.BoundLogger
    ) -> Category:
        category = self._catalog.get_category(performance.category_id)
        if category is None:
            log.warning("category_not_found", category_id=performance.category_id)
            raise CategoryNotFoundError(performance.category_id)
        return category


def compute_statement(
    invoice: Invoice, catalog: CategoryCatalog | Mapping[str, Category]
) -> StatementData:
    """Compute statement data for an invoice against a catalog or plain mapping."""
    if not isinstance(catalog, CategoryCatalog):
        catalog = InMemoryCategoryCatalog(catalog)
    return StatementService(catalog).create_statement_data(invoice)

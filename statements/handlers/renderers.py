"""Renderers - the formatting phase.

Renderers:
- Consume StatementData only
- Never compute amounts or credits
- Leave currency display to ``usd``
"""

from collections.abc import Mapping

from django.template.loader import render_to_string
from rest_framework.renderers import JSONRenderer

from statements.domain import Category, Invoice, StatementData
from statements.handlers.formatting import usd
from statements.handlers.serializers import StatementDataSerializer
from statements.services import compute_statement
from statements.stores import CategoryCatalog


def render_plain_text(data: StatementData) -> str:
    result = f"Statement for {data.customer_name}\n"
    for perf in data.performances:
        result += f" {perf.category.name}: {usd(perf.amount)} ({perf.audience} seats)\n"
    result += f"Amount owed is {usd(data.total_amount)}\n"
    result += f"You earned {data.total_volume_credits} credits\n"
    return result


def render_html(data: StatementData) -> str:
    return render_to_string("statements/statement.html", {"data": data})


def render_json(data: StatementData) -> str:
    return JSONRenderer().render(StatementDataSerializer(data).data).decode("utf-8")


RENDERERS = {
    "text": render_plain_text,
    "html": render_html,
    "json": render_json,
}


def statement(
    invoice: Invoice, catalog: CategoryCatalog | Mapping[str, Category]
) -> str:
    """Compute and render a plain-text statement."""
    return render_plain_text(compute_statement(invoice, catalog))


def html_statement(
    invoice: Invoice, catalog: CategoryCatalog | Mapping[str, Category]
) -> str:
    """Compute and render an HTML statement."""
    return render_html(compute_statement(invoice, catalog))

"""Pytest configuration and shared fixtures."""

import pytest

from statements.domain import Category, Invoice, Performance
from statements.stores import InMemoryCategoryCatalog

PLAYS = {
    "hamlet": {"name": "Hamlet", "type": "tragedy"},
    "as-like": {"name": "As You Like It", "type": "comedy"},
    "othello": {"name": "Othello", "type": "tragedy"},
}

INVOICE = {
    "customer": "BigCo",
    "performances": [
        {"playID": "hamlet", "audience": 55},
        {"playID": "as-like", "audience": 35},
        {"playID": "othello", "audience": 40},
    ],
}


@pytest.fixture
def plays() -> dict:
    return {key: dict(value) for key, value in PLAYS.items()}


@pytest.fixture
def raw_invoice() -> dict:
    return {
        "customer": INVOICE["customer"],
        "performances": [dict(perf) for perf in INVOICE["performances"]],
    }


@pytest.fixture
def catalog(plays) -> InMemoryCategoryCatalog:
    return InMemoryCategoryCatalog.from_dict(plays)


@pytest.fixture
def invoice() -> Invoice:
    return Invoice(
        customer_name="BigCo",
        performances=(
            Performance(category_id="hamlet", audience=55),
            Performance(category_id="as-like", audience=35),
            Performance(category_id="othello", audience=40),
        ),
    )


@pytest.fixture
def musical_catalog() -> InMemoryCategoryCatalog:
    return InMemoryCategoryCatalog(
        {
            "hamlet": Category(name="Hamlet", kind="tragedy"),
            "cats": Category(name="Cats", kind="musical"),
        }
    )

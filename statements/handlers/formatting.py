"""Currency display for amounts held in cents."""

from decimal import Decimal


def usd(amount: int) -> str:
    """Format cents as US dollars, e.g. ``173000`` -> ``"$1,730.00"``."""
    return f"${Decimal(amount).scaleb(-2):,.2f}"

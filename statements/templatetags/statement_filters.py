from django import template

from statements.handlers import formatting

register = template.Library()


@register.filter
def usd(value: int) -> str:
    """Render an amount in cents as dollars."""
    return formatting.usd(value)

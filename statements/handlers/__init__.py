from statements.handlers.formatting import usd
from statements.handlers.renderers import (
    RENDERERS,
    html_statement,
    render_html,
    render_json,
    render_plain_text,
    statement,
)

__all__ = [
    "usd",
    "RENDERERS",
    "render_plain_text",
    "render_html",
    "render_json",
    "statement",
    "html_statement",
]

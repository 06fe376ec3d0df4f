"""Escaping for text that ends up inside rendered markup."""
from __future__ import annotations

import html
from typing import Any


def escape_html(value: Any) -> str:
    """Escape a string for HTML; anything that is not a string renders empty."""
    if not isinstance(value, str):
        return ""
    return html.escape(value, quote=True)

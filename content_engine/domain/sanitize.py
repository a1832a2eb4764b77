import html
from typing import Any

DEFAULT_FORBIDDEN_PROTOCOLS: frozenset[str] = frozenset(["javascript:", "data:", "vbscript:"])


def to_text(value: Any) -> str:
    """Stringify a content value; None becomes empty, booleans use JSON spelling."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def escape_text(value: Any, enabled: bool = True) -> str:
    """
    Escape a value for use as element text.

    Quotes are left alone in text nodes; only '<', '>' and '&' matter there.
    """
    text = to_text(value)
    if not enabled:
        return text
    return html.escape(text, quote=False)


def escape_attr(value: Any, enabled: bool = True) -> str:
    """Escape a value for use inside a double-quoted attribute."""
    text = to_text(value)
    if not enabled:
        return text
    return html.escape(text, quote=True)


def is_safe_url(url: str, forbidden: frozenset[str] = DEFAULT_FORBIDDEN_PROTOCOLS) -> bool:
    """Reject URLs with script-capable protocols (case and whitespace insensitive)."""
    normalized = "".join(url.split()).lower()
    return not any(normalized.startswith(protocol) for protocol in forbidden)

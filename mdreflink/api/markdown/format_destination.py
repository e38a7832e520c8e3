"""Format a URL for use in a link or definition."""

import re

from marko.helpers import is_paired

# Hugo shortcodes: {{< ref "page" >}} and {{% ref "page" %}}
SHORTCODE_PATTERN = re.compile(r"\{\{[<%].*?[%>]\}\}")
_NEEDS_BRACKETS = re.compile(r"[\s<>]")


def format_destination(url: str) -> str:
    """Return ``url`` as it should appear between the parentheses of a link.

    Shortcodes are written verbatim. Empty URLs, URLs containing whitespace
    or angle brackets, and URLs with unbalanced parentheses are wrapped in
    ``<...>`` so they parse back to the same destination.
    """
    if SHORTCODE_PATTERN.search(url):
        return url
    if not url or _NEEDS_BRACKETS.search(url) or not is_paired(url):
        return "<" + url.replace("<", "\\<").replace(">", "\\>") + ">"
    return url

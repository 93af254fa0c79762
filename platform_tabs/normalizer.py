"""Strip incidental paragraph wrappers from leaf content."""

from __future__ import annotations

import re

WRAPPED_PARAGRAPH = re.compile(r"^<p>(.*)</p>$", re.DOTALL)
PARAGRAPH_MARKER = re.compile(r"<p[\s>]|</p>")
OPENING_PARAGRAPH = "<p>"
CLOSING_PARAGRAPH = "</p>"


def normalize_content(content: str | None) -> str:
    """Return ``content`` without a wrapping ``<p>`` so panes share one layout.

    Markdown renders a lone line inside a block as ``<p>line</p>`` while code
    fences render bare, which would otherwise change the padding depending on
    the active tab.

    Parameters
    ----------
    content : str or None
        Leaf text taken from a platform or language block.

    Returns
    -------
    str
        The trimmed inner text when the whole string is a single paragraph,
        the text after a dangling opening ``<p>`` when no ``</p>`` exists
        anywhere (the closing tag landed outside the block), or the trimmed
        input otherwise.

    Examples
    --------
    >>> normalize_content("<p>Hello</p>")
    'Hello'
    >>> normalize_content("<p>Hello")
    'Hello'
    >>> normalize_content("<p>One</p>\\n<p>Two</p>")
    '<p>One</p>\\n<p>Two</p>'
    """
    if not content:
        return ""
    trimmed = content.strip()

    match = WRAPPED_PARAGRAPH.match(trimmed)
    if match and not PARAGRAPH_MARKER.search(match.group(1)):
        return match.group(1).strip()

    if trimmed.startswith(OPENING_PARAGRAPH) and CLOSING_PARAGRAPH not in trimmed:
        return trimmed[len(OPENING_PARAGRAPH) :].strip()

    return trimmed


__all__ = ["normalize_content"]

r"""Extract named blocks delimited by HTML comment markers.

Authors mark alternatives with paired comments such as
``<!-- platform: iOS -->...<!-- /platform -->``. This module scans a text span
for those pairs and returns ordered :class:`Branch` records. A parser instance
only knows one tag, so the platform scan and the language scan stay separate
invocations over different spans: a ``/lang`` marker can never close a
``platform`` block.

Example
-------
>>> from platform_tabs.blocks import PLATFORM_BLOCKS
>>> branches = PLATFORM_BLOCKS.parse(
...     "<!-- platform: iOS -->Hi<!-- /platform -->"
...     "<!-- platform: Android -->Hey<!-- /platform -->"
... )
>>> [branch.name for branch in branches]
['iOS', 'Android']
>>> branches[1].content
'Hey'
"""

from __future__ import annotations

import dataclasses as dc
import re

from ._constants import LANGUAGE_TAG, PLATFORM_TAG


@dc.dataclass(frozen=True, slots=True)
class Branch:
    """One named alternative found between a start and an end marker.

    Attributes
    ----------
    name : str
        Trimmed marker argument (for example ``"Android"`` or ``"Kotlin"``).
        Case-sensitive and never empty.
    content : str
        Text between the markers with surrounding whitespace removed.
    """

    name: str
    content: str


class BlockParser:
    """Scan text for non-overlapping ``<!-- tag: NAME -->...<!-- /tag -->`` spans."""

    def __init__(self, tag: str) -> None:
        self.tag = tag
        escaped = re.escape(tag)
        self.pattern = re.compile(
            rf"<!--\s*{escaped}:\s*([^>\s][^>]*?)\s*-->(.*?)<!--\s*/{escaped}\s*-->",
            re.DOTALL,
        )

    def parse(self, text: str | None) -> list[Branch]:
        """Return the blocks in ``text`` in document order.

        Parameters
        ----------
        text : str or None
            Raw span to scan. ``None`` and empty strings yield no blocks.

        Returns
        -------
        list[Branch]
            One entry per matched marker pair. An empty list means no blocks
            were found, which callers treat as a normal outcome.
        """
        if not text:
            return []
        return [
            Branch(name=match.group(1).strip(), content=match.group(2).strip())
            for match in self.pattern.finditer(text)
        ]

    def __repr__(self) -> str:
        return f"BlockParser(tag={self.tag!r})"


PLATFORM_BLOCKS = BlockParser(PLATFORM_TAG)
LANGUAGE_BLOCKS = BlockParser(LANGUAGE_TAG)


def parse_blocks(text: str | None, tag: str) -> list[Branch]:
    """Parse ``text`` for blocks delimited by ``tag`` markers."""
    if tag == PLATFORM_TAG:
        return PLATFORM_BLOCKS.parse(text)
    if tag == LANGUAGE_TAG:
        return LANGUAGE_BLOCKS.parse(text)
    return BlockParser(tag).parse(text)


__all__ = [
    "LANGUAGE_BLOCKS",
    "PLATFORM_BLOCKS",
    "BlockParser",
    "Branch",
    "parse_blocks",
]

"""Replace container markers in rendered pages with tab markup.

:class:`PageContentRewriter` scans a page once, left to right, for
``platformtabs`` and ``codesample`` containers and substitutes each matched
span (markers included) with the output of :class:`TabTreeRenderer`. Every
container is rendered independently; the only shared state is the id
sequence on the :class:`BuildContext`, and only for containers that carry no
explicit ``id``.

Example
-------
>>> from platform_tabs.context import BuildContext
>>> from platform_tabs.rewriter import PageContentRewriter
>>> rewriter = PageContentRewriter(BuildContext())
>>> page = (
...     '<!-- platformtabs -->'
...     '<!-- platform: iOS -->Hi<!-- /platform -->'
...     '<!-- /platformtabs -->'
... )
>>> 'id="platform-tabs-1"' in rewriter.rewrite(page)
True
"""

from __future__ import annotations

import dataclasses as dc
import logging
import re
import typing as typ

from .models import ContainerKind
from .renderer import TabTreeRenderer

if typ.TYPE_CHECKING:
    from .context import BuildContext

logger = logging.getLogger(__name__)

CONTAINER_PATTERN = re.compile(
    r"<!--\s*(?P<kind>platformtabs|codesample)"
    r'(?:\s+id="(?P<id>[^"]*)")?\s*-->'
    r"(?P<body>.*?)"
    r"<!--\s*/(?P=kind)\s*-->",
    re.DOTALL,
)


@dc.dataclass(frozen=True, slots=True)
class ContainerSpan:
    """A container located in page text.

    Attributes
    ----------
    kind : ContainerKind
        Marker keyword that matched.
    container_id : str or None
        Author-supplied id, or ``None`` when the marker has none.
    body : str
        Text between the opening and closing markers.
    start : int
        Offset of the opening marker.
    end : int
        Offset just past the closing marker.
    """

    kind: ContainerKind
    container_id: str | None
    body: str
    start: int
    end: int


def find_containers(page_text: str) -> list[ContainerSpan]:
    """Return every container span in ``page_text`` in document order."""
    return [_span_from_match(match) for match in CONTAINER_PATTERN.finditer(page_text)]


def _span_from_match(match: re.Match[str]) -> ContainerSpan:
    return ContainerSpan(
        kind=ContainerKind(match.group("kind")),
        container_id=match.group("id") or None,
        body=match.group("body"),
        start=match.start(),
        end=match.end(),
    )


class PageContentRewriter:
    """Substitute container spans in a page with rendered tab trees."""

    def __init__(
        self, context: BuildContext, renderer: TabTreeRenderer | None = None
    ) -> None:
        """Bind the rewriter to a build context.

        Parameters
        ----------
        context : BuildContext
            Build-scoped config and id sequence.
        renderer : TabTreeRenderer, optional
            Renderer to use; defaults to one configured with the context's
            default platform.
        """
        self.context = context
        self.renderer = renderer or TabTreeRenderer(context.default_platform)

    def rewrite(self, page_text: str) -> str:
        """Return ``page_text`` with every container replaced by tab markup."""
        if not page_text:
            return page_text
        return CONTAINER_PATTERN.sub(self._replace, page_text)

    def _replace(self, match: re.Match[str]) -> str:
        span = _span_from_match(match)
        container_id = span.container_id
        if container_id is None:
            container_id = self.context.next_id(span.kind.id_prefix)
            logger.debug(
                "Generated id '%s' for %s container", container_id, span.kind.marker
            )
        return self.renderer.render(span.kind, container_id, span.body)


__all__ = [
    "CONTAINER_PATTERN",
    "ContainerSpan",
    "PageContentRewriter",
    "find_containers",
]

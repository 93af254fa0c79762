"""Python-Markdown integration for platform tab containers."""

from __future__ import annotations

import typing as typ

from markdown.extensions import Extension
from markdown.postprocessors import Postprocessor

from platform_tabs.rewriter import PageContentRewriter

if typ.TYPE_CHECKING:
    from markdown import Markdown

    from platform_tabs.context import BuildContext
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    BuildContext = typ.Any

# Raw HTML (including the container comments) is restored at priority 30.
POSTPROCESSOR_PRIORITY = 5


class PlatformTabsExtension(Extension):
    """Render ``platformtabs``/``codesample`` containers in converted Markdown.

    Add this extension to a ``markdown.Markdown`` instance to rewrite the
    comment-delimited containers left in the HTML output into tab markup.
    The extension shares the :class:`BuildContext` it was created with, so
    generated container ids stay unique across every page of a build.
    """

    def __init__(self, context: BuildContext, **kwargs: typ.Any) -> None:
        self.context = context
        self.rewriter = PageContentRewriter(context)
        super().__init__(**kwargs)

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the platform-tabs postprocessor on the Markdown instance."""
        processor = PlatformTabsPostprocessor(md, self.rewriter)
        md.postprocessors.register(
            processor, "platform_tabs", POSTPROCESSOR_PRIORITY
        )


class PlatformTabsPostprocessor(Postprocessor):
    """Substitute container spans in the serialized HTML."""

    def __init__(self, md: Markdown, rewriter: PageContentRewriter) -> None:
        super().__init__(md)
        self.rewriter = rewriter

    def run(self, text: str) -> str:
        """Return ``text`` with every container rendered as tabs."""
        return self.rewriter.rewrite(text)


__all__ = ["PlatformTabsExtension", "PlatformTabsPostprocessor"]

"""Render Markdown pages with syntax-highlighted code samples.

Highlighted blocks are tagged with their language as Pygments writes them:
codehilite hands each block's language to the formatter as ``lang_str``, and
:class:`LanguageTaggedFormatter` records it as ``data-language`` on the
``<div class="codehilite">`` wrapper. Backtick fences, tilde fences and
indented blocks are tagged alike.
"""

from __future__ import annotations

import typing as typ
from html import escape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

BASE_EXTENSIONS: tuple[str, ...] = ("fenced_code", "codehilite", "tables", "sane_lists")


class LanguageTaggedFormatter(HtmlFormatter):
    """HTML formatter that writes ``data-language`` on the block wrapper."""

    def __init__(self, lang_str: str = "", **options: typ.Any) -> None:
        super().__init__(**options)
        self.lang_str = lang_str

    def _wrap_div(self, inner: typ.Any) -> cabc.Iterator[tuple[int, str]]:
        wrapped = super()._wrap_div(inner)
        is_code, opening = next(wrapped)
        if self.lang_str:
            language = escape(self.lang_str, quote=True)
            opening = opening.replace(">", f' data-language="{language}">', 1)
        yield is_code, opening
        yield from wrapped


class MarkdownRenderer:
    """Convert Markdown into HTML with consistent code highlighting."""

    def __init__(
        self,
        pygments_style: str = "monokai",
        extensions: cabc.Sequence[Extension] = (),
    ) -> None:
        """Initialize a renderer with a pygments style and extra extensions.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        extensions : Sequence[Extension], optional
            Extension instances appended after the built-in ones, for example
            :class:`~platform_tabs.generator.PlatformTabsExtension`.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self._extensions = list(extensions)

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        if not text.strip():
            return ""
        md = Markdown(
            extensions=[*BASE_EXTENSIONS, *self._extensions],
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                    "pygments_formatter": LanguageTaggedFormatter,
                    "lang_prefix": "",
                }
            },
        )
        return md.convert(text)


__all__ = ["LanguageTaggedFormatter", "MarkdownRenderer"]

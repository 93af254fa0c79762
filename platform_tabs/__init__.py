"""Switchable platform and language tabs for static documentation pages.

Authors wrap alternatives in HTML comment markers; this package parses them
into platform (and optionally language) branches, picks the branch that starts
active, and emits tab markup that the bundled ``platform-tabs.js`` switches in
the browser.

Exports
-------
- ``BuildContext``: build-scoped config and generated-id counter.
- ``PageContentRewriter``: replaces containers found in a rendered page.
- ``TabTreeRenderer``: renders a single container body.
- ``app`` / ``main``: the ``platform-tabs`` command line.

Examples
--------
>>> from platform_tabs import BuildContext, PageContentRewriter
>>> rewriter = PageContentRewriter(BuildContext())
>>> html = rewriter.rewrite(
...     '<!-- codesample id="hello" -->'
...     '<!-- platform: Android --><!-- lang: Kotlin -->println("hi")<!-- /lang -->'
...     '<!-- /platform --><!-- /codesample -->'
... )
>>> 'data-platform-id="hello-android"' in html
True
"""

from __future__ import annotations

from .cli import app, main
from .context import BuildContext
from .renderer import TabTreeRenderer
from .rewriter import PageContentRewriter

__all__ = ["BuildContext", "PageContentRewriter", "TabTreeRenderer", "app", "main"]

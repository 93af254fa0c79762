"""Full documentation builds with platform tab containers.

This module is the host side of the plugin: it owns one
:class:`~platform_tabs.context.BuildContext` per build, resets its id sequence
exactly once, renders every Markdown page under ``source_dir`` through
:class:`MarkdownRenderer` with :class:`PlatformTabsExtension` attached, wraps
the result in ``page.jinja``, and copies the client stylesheet and script next
to the generated pages. :func:`rewrite_files` covers pipelines that already
produce HTML and only need the containers substituted.

Example
-------
>>> from pathlib import Path
>>> from platform_tabs.config import load_site_config
>>> from platform_tabs.generator import SiteBuilder
>>> site = load_site_config(Path("book.yaml"))  # doctest: +SKIP
>>> SiteBuilder(site).run()  # doctest: +SKIP
[PosixPath('public/index.html'), ...]
"""

from __future__ import annotations

import logging
import os
import shutil
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from platform_tabs._constants import ASSET_FILES
from platform_tabs.context import BuildContext
from platform_tabs.generator.markdown_ext import PlatformTabsExtension
from platform_tabs.generator.renderer import MarkdownRenderer
from platform_tabs.rewriter import PageContentRewriter

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from platform_tabs.config import SiteConfig

logger = logging.getLogger(__name__)

PACKAGE_ROOT = Path(__file__).resolve().parents[1]
ASSETS_DIR = PACKAGE_ROOT / "assets"
ASSET_SUBDIR = "assets"


def copy_assets(output_dir: Path) -> list[Path]:
    """Copy the client stylesheet and script into ``output_dir/assets``.

    Returns
    -------
    list[Path]
        Destination paths of the copied files.
    """
    target_dir = output_dir / ASSET_SUBDIR
    target_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for name in ASSET_FILES:
        destination = target_dir / name
        shutil.copyfile(ASSETS_DIR / name, destination)
        written.append(destination)
    return written


def rewrite_files(
    paths: cabc.Iterable[Path],
    context: BuildContext,
    *,
    output_dir: Path | None = None,
) -> list[Path]:
    """Rewrite containers in already rendered HTML files as one build.

    Parameters
    ----------
    paths : Iterable[Path]
        HTML files to process, in order. Generated ids follow this order.
    context : BuildContext
        Build context; its id sequence is reset before the first file.
    output_dir : Path, optional
        Directory receiving the rewritten files. Each file keeps its path
        relative to the deepest folder shared by all inputs, so files with
        the same name in different folders stay apart. When omitted, files
        are rewritten in place.

    Returns
    -------
    list[Path]
        Paths of the written files.
    """
    sources = list(paths)
    context.start_build()
    rewriter = PageContentRewriter(context)
    root = _common_parent(sources)
    written: list[Path] = []
    for path in sources:
        page_text = path.read_text(encoding="utf-8")
        rewritten = rewriter.rewrite(page_text)
        destination = path
        if output_dir is not None:
            destination = output_dir / path.resolve().relative_to(root)
            destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(rewritten, encoding="utf-8")
        written.append(destination)
    return written


def _common_parent(paths: cabc.Sequence[Path]) -> Path:
    """Return the deepest directory containing every path in ``paths``."""
    if not paths:
        return Path.cwd()
    parents = [str(path.resolve().parent) for path in paths]
    return Path(os.path.commonpath(parents))


class SiteBuilder:
    """Render a directory of Markdown pages into themed HTML."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        context: BuildContext | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder with configuration and template context.

        Parameters
        ----------
        site_config : SiteConfig
            Book configuration describing directories, style, and plugin
            options.
        context : BuildContext, optional
            Build context to reuse; defaults to one built from
            ``site_config.plugin``.
        templates_dir : Path, optional
            Directory containing ``page.jinja``; defaults to the package
            templates.
        """
        self.site = site_config
        self.context = context or BuildContext(site_config.plugin)
        self.templates_dir = templates_dir or PACKAGE_ROOT / "templates"
        self.renderer = MarkdownRenderer(
            site_config.pygments_style,
            extensions=[PlatformTabsExtension(self.context)],
        )
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("page.jinja")

    def discover_pages(self) -> list[Path]:
        """Return Markdown sources under ``source_dir`` in a stable order."""
        source_dir = self.site.source_dir
        if not source_dir.is_dir():
            msg = f"Source directory '{source_dir}' not found."
            raise FileNotFoundError(msg)
        return sorted(source_dir.rglob("*.md"))

    def run(self) -> list[Path]:
        """Render every page and copy client assets.

        Returns
        -------
        list[Path]
            Generated HTML pages followed by the copied asset files.

        Raises
        ------
        FileNotFoundError
            Raised when ``source_dir`` does not exist.
        """
        sources = self.discover_pages()
        self.context.start_build()
        out_dir = self.site.output_dir
        out_dir.mkdir(parents=True, exist_ok=True)

        written: list[Path] = []
        for source in sources:
            relative = source.relative_to(self.site.source_dir)
            output_path = (out_dir / relative).with_suffix(".html")
            output_path.parent.mkdir(parents=True, exist_ok=True)
            html = self.render_page(source.read_text(encoding="utf-8"), relative)
            output_path.write_text(html, encoding="utf-8")
            logger.debug("Rendered %s -> %s", source, output_path)
            written.append(output_path)
        if not written:
            logger.warning("No Markdown pages found under %s", self.site.source_dir)
        written.extend(copy_assets(out_dir))
        return written

    def render_page(self, markdown_text: str, relative: Path) -> str:
        """Return the full HTML document for one Markdown page."""
        body_html = self.renderer.markdown(markdown_text)
        depth = len(relative.parts) - 1
        asset_prefix = "/".join([*([".."] * depth), ASSET_SUBDIR])
        context = {
            "site_title": self.site.title,
            "page_title": self._page_title(markdown_text, relative),
            "body_html": body_html,
            "pygments_css": self.renderer.stylesheet,
            "asset_prefix": asset_prefix,
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    @staticmethod
    def _page_title(markdown_text: str, relative: Path) -> str:
        """Return the first ``#`` heading, or a title derived from the file name."""
        for line in markdown_text.splitlines():
            stripped = line.strip()
            if stripped.startswith("# "):
                return stripped[2:].strip()
        return relative.stem.replace("-", " ").replace("_", " ").title()


__all__ = ["ASSETS_DIR", "SiteBuilder", "copy_assets", "rewrite_files"]

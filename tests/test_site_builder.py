"""End-to-end tests for Markdown builds with platform tab containers.

These tests run Markdown through :class:`MarkdownRenderer` with
:class:`PlatformTabsExtension` attached, and drive :class:`SiteBuilder` and
:func:`rewrite_files` over temporary directories. They check that the
container comments survive Markdown conversion, that paragraph wrappers added
by Markdown are normalized away, that highlighted code keeps its
``data-language`` metadata inside language panes, and that generated ids are
unique across the pages of one build and restart with the next build.
"""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest
from bs4 import BeautifulSoup

from platform_tabs.config import PluginConfig, SiteConfig
from platform_tabs.context import BuildContext
from platform_tabs.generator import (
    MarkdownRenderer,
    PlatformTabsExtension,
    SiteBuilder,
    rewrite_files,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

INSTALL_MARKDOWN = dedent(
    """\
    # Getting Started

    Pick your platform.

    <!-- platformtabs id="install" -->

    <!-- platform: iOS -->

    Use CocoaPods.

    <!-- /platform -->

    <!-- platform: Android -->

    Use Gradle.

    <!-- /platform -->

    <!-- /platformtabs -->

    Done.
    """
)

SAMPLE_MARKDOWN = dedent(
    """\
    # Hello

    <!-- codesample id="hello" -->

    <!-- platform: Android -->

    <!-- lang: Kotlin -->

    ```kotlin
    println("hi")
    ```

    <!-- /lang -->

    <!-- lang: Java -->

    ```java
    System.out.println("hi");
    ```

    <!-- /lang -->

    <!-- /platform -->

    <!-- platform: iOS -->

    Swift sample pending.

    <!-- /platform -->

    <!-- /codesample -->
    """
)

AUTO_ID_MARKDOWN = dedent(
    """\
    # {title}

    <!-- platformtabs -->

    <!-- platform: iOS -->

    {title} on iOS.

    <!-- /platform -->

    <!-- /platformtabs -->
    """
)


def _render(markdown_text: str, context: BuildContext | None = None) -> BeautifulSoup:
    renderer = MarkdownRenderer(
        extensions=[PlatformTabsExtension(context or BuildContext())]
    )
    return BeautifulSoup(renderer.markdown(markdown_text), "html.parser")


def test_markdown_platform_tabs_are_rendered() -> None:
    """Containers written in Markdown become tab markup with clean leaves."""
    soup = _render(INSTALL_MARKDOWN)
    container = soup.select_one("#install")
    assert container is not None, "expected the install container to be rendered"
    panes = {
        pane["data-platform"]: pane for pane in container.select(".platform-content")
    }
    assert panes["iOS"].decode_contents() == "Use CocoaPods."
    assert panes["Android"].decode_contents() == "Use Gradle."
    assert "active" in panes["Android"]["class"]
    assert soup.find("h1").get_text() == "Getting Started"
    assert "Done." in soup.get_text()


def test_markdown_code_sample_keeps_highlighting() -> None:
    """Language panes hold highlighted code annotated with its language."""
    soup = _render(SAMPLE_MARKDOWN)
    android = soup.select_one('#hello .platform-content[data-platform="Android"]')
    assert android is not None
    assert android["id"] == "hello-android"
    kotlin = android.select_one('.language-content[data-lang="Kotlin"]')
    assert "active" in kotlin["class"]
    block = kotlin.select_one(".codehilite")
    assert block is not None and block["data-language"] == "kotlin"
    assert 'println("hi")' in block.get_text()
    java = android.select_one('.language-content[data-lang="Java"]')
    assert java.select_one(".codehilite")["data-language"] == "java"

    ios = soup.select_one('#hello .platform-content[data-platform="iOS"]')
    assert ios.decode_contents() == "Swift sample pending."


def test_every_fence_style_is_tagged_with_its_own_language() -> None:
    """Tilde, backtick and indented blocks each carry their own language."""
    text = dedent(
        """\
        ~~~python
        x = 1
        ~~~

        ```kotlin
        val y = 2
        ```

            plain block

        ~~~swift
        let z = 3
        ~~~
        """
    )
    soup = BeautifulSoup(MarkdownRenderer().markdown(text), "html.parser")
    languages = [block.get("data-language") for block in soup.select(".codehilite")]
    assert languages == ["python", "kotlin", "text", "swift"]


def test_shallow_indented_fences_are_left_as_written() -> None:
    """Fences indented by a few spaces are not turned into code blocks."""
    text = "Intro\n\n  ```kotlin\n  val x = 1\n  ```\n"
    html = MarkdownRenderer().markdown(text)
    assert "codehilite" not in html
    assert "val x = 1" in html


def test_extension_shares_the_build_counter() -> None:
    """Pages converted with one context never reuse a generated id."""
    context = BuildContext()
    context.start_build()
    first = _render(AUTO_ID_MARKDOWN.format(title="One"), context)
    second = _render(AUTO_ID_MARKDOWN.format(title="Two"), context)
    assert first.select_one(".platform-tabs-container")["id"] == "platform-tabs-1"
    assert second.select_one(".platform-tabs-container")["id"] == "platform-tabs-2"


@pytest.fixture
def site(tmp_path: Path) -> SiteConfig:
    """Create a small Markdown tree and return its configuration."""
    source_dir = tmp_path / "docs"
    (source_dir / "guide").mkdir(parents=True)
    (source_dir / "index.md").write_text(
        AUTO_ID_MARKDOWN.format(title="Home"), encoding="utf-8"
    )
    (source_dir / "guide" / "setup.md").write_text(
        AUTO_ID_MARKDOWN.format(title="Setup"), encoding="utf-8"
    )
    return SiteConfig(
        title="SDK Docs",
        source_dir=source_dir,
        output_dir=tmp_path / "public",
        plugin=PluginConfig(default_platform="iOS"),
    )


def test_site_builder_writes_pages_and_assets(site: SiteConfig) -> None:
    """A build mirrors the source tree and ships the client assets."""
    written = SiteBuilder(site).run()
    out = site.output_dir
    assert written == [
        out / "guide" / "setup.html",
        out / "index.html",
        out / "assets" / "platform-tabs.css",
        out / "assets" / "platform-tabs.js",
    ]
    script = (out / "assets" / "platform-tabs.js").read_text(encoding="utf-8")
    assert "addEventListener('click'" in script

    setup_html = (out / "guide" / "setup.html").read_text(encoding="utf-8")
    setup = BeautifulSoup(setup_html, "html.parser")
    assert setup.title.get_text() == "Setup | SDK Docs"
    assert setup.select_one("script")["src"] == "../assets/platform-tabs.js"
    assert setup.select_one("link")["href"] == "../assets/platform-tabs.css"
    index_html = (out / "index.html").read_text(encoding="utf-8")
    index = BeautifulSoup(index_html, "html.parser")
    assert index.select_one("script")["src"] == "assets/platform-tabs.js"


def test_site_builder_ids_unique_per_build_and_reset(site: SiteConfig) -> None:
    """Each build numbers containers from one, in page order."""
    builder = SiteBuilder(site)

    def _ids() -> list[str]:
        ids = []
        for name in ("guide/setup.html", "index.html"):
            html = (site.output_dir / name).read_text(encoding="utf-8")
            soup = BeautifulSoup(html, "html.parser")
            ids.extend(node["id"] for node in soup.select(".platform-tabs-container"))
        return ids

    builder.run()
    assert _ids() == ["platform-tabs-1", "platform-tabs-2"]
    builder.run()
    assert _ids() == ["platform-tabs-1", "platform-tabs-2"]
    assert builder.context.builds_started == 2


def test_site_builder_requires_source_dir(tmp_path: Path) -> None:
    """A missing source directory is reported before anything is written."""
    site = SiteConfig(source_dir=tmp_path / "nope", output_dir=tmp_path / "out")
    with pytest.raises(FileNotFoundError, match="Source directory"):
        SiteBuilder(site).run()
    assert not (tmp_path / "out").exists()


def test_rewrite_files_in_place_and_to_output_dir(tmp_path: Path) -> None:
    """Rendered HTML files are rewritten as one build."""
    page = (
        "<main><!-- platformtabs -->"
        "<!-- platform: iOS -->Hi<!-- /platform -->"
        "<!-- /platformtabs --></main>"
    )
    first = tmp_path / "a.html"
    second = tmp_path / "b.html"
    first.write_text(page, encoding="utf-8")
    second.write_text(page, encoding="utf-8")

    context = BuildContext()
    written = rewrite_files([first, second], context)
    assert written == [first, second]
    assert 'id="platform-tabs-1"' in first.read_text(encoding="utf-8")
    assert 'id="platform-tabs-2"' in second.read_text(encoding="utf-8")

    third = tmp_path / "c.html"
    third.write_text(page, encoding="utf-8")
    out_dir = tmp_path / "out"
    written = rewrite_files([third], context, output_dir=out_dir)
    assert written == [out_dir / "c.html"]
    assert 'id="platform-tabs-1"' in (out_dir / "c.html").read_text(encoding="utf-8")
    assert third.read_text(encoding="utf-8") == page


def test_rewrite_files_keeps_same_named_files_apart(tmp_path: Path) -> None:
    """Files sharing a name in different folders get separate outputs."""
    page = (
        "<!-- platformtabs -->"
        "<!-- platform: iOS -->Hi<!-- /platform -->"
        "<!-- /platformtabs -->"
    )
    guide = tmp_path / "site" / "guide" / "index.html"
    api = tmp_path / "site" / "api" / "index.html"
    for path in (guide, api):
        path.parent.mkdir(parents=True)
        path.write_text(page, encoding="utf-8")
    out_dir = tmp_path / "out"

    written = rewrite_files([guide, api], BuildContext(), output_dir=out_dir)

    assert written == [out_dir / "guide" / "index.html", out_dir / "api" / "index.html"]
    guide_html = written[0].read_text(encoding="utf-8")
    api_html = written[1].read_text(encoding="utf-8")
    assert 'id="platform-tabs-1"' in guide_html
    assert 'id="platform-tabs-2"' in api_html


def test_site_builder_uses_custom_page_template(tmp_path: Path) -> None:
    """A templates directory override replaces the page shell."""
    docs = tmp_path / "docs"
    docs.mkdir()
    page = AUTO_ID_MARKDOWN.format(title="Home")
    (docs / "index.md").write_text(page, encoding="utf-8")
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "page.jinja").write_text(
        '<article data-site="{{ site_title }}">{{ body_html | safe }}</article>\n',
        encoding="utf-8",
    )
    site = SiteConfig(title="Custom", source_dir=docs, output_dir=tmp_path / "out")

    SiteBuilder(site, templates_dir=templates).run()

    soup = BeautifulSoup(
        (tmp_path / "out" / "index.html").read_text(encoding="utf-8"), "html.parser"
    )
    article = soup.select_one("article")
    assert article is not None and article["data-site"] == "Custom"
    assert article.select_one(".platform-tabs-container")["id"] == "platform-tabs-1"

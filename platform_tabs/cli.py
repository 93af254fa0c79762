"""Cyclopts CLI entrypoint for rendering platform tab containers.

The ``platform-tabs`` console script defined here runs a full documentation
build from Markdown (``platform-tabs build``) or substitutes containers in
HTML that another pipeline already produced (``platform-tabs rewrite``).
Each invocation is one build: the generated-id counter starts from one.

Examples
--------
Build the book described by ``book.yaml``:

>>> from platform_tabs.cli import main
>>> main()  # doctest: +SKIP

Rewrite two rendered pages into ``dist`` with iOS as the default platform:

>>> from platform_tabs.cli import app
>>> app(
...     ["rewrite", "a.html", "b.html", "--output-dir", "dist",
...      "--default-platform", "iOS"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import os
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import PluginConfig, SiteConfig, load_site_config
from .context import BuildContext
from .generator import SiteBuilder, rewrite_files

DEFAULT_CONFIG = Path("book.yaml")
LOG_LEVEL_ENV = "PLATFORM_TABS_LOG_LEVEL"

app = App(name="platform-tabs", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_site_config(config: Path | None) -> SiteConfig:
    """Load ``config`` when given, else ``book.yaml`` if present, else defaults."""
    if config is not None:
        return load_site_config(config)
    if DEFAULT_CONFIG.exists():
        return load_site_config(DEFAULT_CONFIG)
    return SiteConfig()


@app.command(help="Render Markdown pages with platform tabs into static HTML.")
def build(
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to book config", env_var="INPUT_CONFIG")
    ] = None,
    source_dir: typ.Annotated[
        Path | None, Parameter(help="Override the Markdown source folder")
    ] = None,
    output_dir: typ.Annotated[
        Path | None, Parameter(help="Override the output folder")
    ] = None,
    default_platform: typ.Annotated[
        str | None, Parameter(help="Platform that starts active")
    ] = None,
) -> None:
    """Build the whole book.

    Parameters
    ----------
    config : Path or None, optional
        Path to ``book.yaml``/``book.json``. When omitted, ``book.yaml`` in
        the working directory is used if present; otherwise defaults apply.
    source_dir : Path or None, optional
        Markdown source directory overriding the config value.
    output_dir : Path or None, optional
        Output directory overriding the config value.
    default_platform : str or None, optional
        Default platform overriding ``pluginsConfig.platform-tabs``.

    Returns
    -------
    None
        Writes rendered pages and assets, printing each generated path.
    """
    site = _resolve_site_config(config)
    if source_dir is not None:
        site = dc.replace(site, source_dir=source_dir)
    if output_dir is not None:
        site = dc.replace(site, output_dir=output_dir)
    if default_platform:
        site = dc.replace(site, plugin=PluginConfig(default_platform=default_platform))

    for path in SiteBuilder(site).run():
        print(f"wrote {_format_path(path)}")


@app.command(help="Replace tab containers in already rendered HTML files.")
def rewrite(
    paths: typ.Annotated[list[Path], Parameter(help="HTML files to rewrite")],
    *,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to book config", env_var="INPUT_CONFIG")
    ] = None,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Write results here instead of rewriting in place"),
    ] = None,
    default_platform: typ.Annotated[
        str | None, Parameter(help="Platform that starts active")
    ] = None,
) -> None:
    """Rewrite containers in ``paths`` as a single build.

    Raises
    ------
    ValueError
        If no paths are given or a path is not a file.
    """
    if not paths:
        msg = "At least one HTML file is required."
        raise ValueError(msg)
    missing = [str(path) for path in paths if not path.is_file()]
    if missing:
        msg = f"Not a file: {', '.join(missing)}"
        raise ValueError(msg)

    plugin = _resolve_site_config(config).plugin
    if default_platform:
        plugin = PluginConfig(default_platform=default_platform)

    context = BuildContext(plugin)
    for path in rewrite_files(paths, context, output_dir=output_dir):
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers ``platform-tabs``.

    Log verbosity follows ``PLATFORM_TABS_LOG_LEVEL`` (default ``WARNING``).
    """
    logging.basicConfig(
        level=os.getenv(LOG_LEVEL_ENV, "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()

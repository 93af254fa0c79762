"""Typed dataclasses describing platform-tabs build configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import DEFAULT_PLATFORM


class PluginConfigError(ValueError):
    """Raised when the book configuration is invalid."""


@dc.dataclass(slots=True)
class PluginConfig:
    """Options read from ``pluginsConfig.platform-tabs``."""

    default_platform: str = DEFAULT_PLATFORM


@dc.dataclass(slots=True)
class SiteConfig:
    """Book-level settings for a full documentation build.

    Attributes
    ----------
    title : str
        Site title used in generated page titles.
    source_dir : Path
        Directory scanned recursively for Markdown pages.
    output_dir : Path
        Directory that receives rendered HTML and client assets.
    pygments_style : str
        Pygments style used for highlighted code blocks.
    plugin : PluginConfig
        Platform-tabs plugin options.
    """

    title: str = "Documentation"
    source_dir: Path = Path("docs")
    output_dir: Path = Path("public")
    pygments_style: str = "monokai"
    plugin: PluginConfig = dc.field(default_factory=PluginConfig)


__all__ = ["PluginConfig", "PluginConfigError", "SiteConfig"]

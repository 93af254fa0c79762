"""Host-side helpers for rendering Markdown pages that contain tab containers."""

from .markdown_ext import PlatformTabsExtension, PlatformTabsPostprocessor
from .renderer import MarkdownRenderer
from .site_builder import SiteBuilder, copy_assets, rewrite_files

__all__ = [
    "MarkdownRenderer",
    "PlatformTabsExtension",
    "PlatformTabsPostprocessor",
    "SiteBuilder",
    "copy_assets",
    "rewrite_files",
]

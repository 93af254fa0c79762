"""Load and validate book configuration for platform-tabs builds.

This subpackage parses the book's ``book.yaml`` (or a GitBook-style
``book.json``), reads the ``pluginsConfig.platform-tabs`` section, and produces
typed dataclasses (:class:`SiteConfig`, :class:`PluginConfig`) that the build
context, site builder, and CLI consume. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from platform_tabs.config import load_site_config
>>> site = load_site_config(Path("book.yaml"))  # doctest: +SKIP
>>> site.plugin.default_platform  # doctest: +SKIP
'iOS'
"""

from .helpers import lookup
from .loader import load_plugin_config, load_site_config
from .models import PluginConfig, PluginConfigError, SiteConfig

__all__ = [
    "PluginConfig",
    "PluginConfigError",
    "SiteConfig",
    "load_plugin_config",
    "load_site_config",
    "lookup",
]

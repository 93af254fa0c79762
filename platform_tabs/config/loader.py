"""Load book configuration YAML (or GitBook ``book.json``) into dataclasses."""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _build_plugin_config, _optional_str, lookup
from .models import PluginConfig, PluginConfigError, SiteConfig

PLUGIN_SECTION_KEY = "pluginsConfig.platform-tabs"


def _read_mapping(path: Path) -> dict[str, typ.Any]:
    """Parse ``path`` as JSON or YAML and return the top-level mapping."""
    with path.open("r", encoding="utf-8") as handle:
        if path.suffix.lower() == ".json":
            loaded = json.load(handle)
        else:
            loader = YAML(typ="safe")
            loader.version = (1, 2)
            loaded = loader.load(handle)
    loaded = loaded or {}
    if not isinstance(loaded, dict):
        msg = "Top-level configuration structure must be a mapping."
        raise TypeError(msg)
    return dict(loaded)


def load_plugin_config(path: Path) -> PluginConfig:
    """Return only the platform-tabs plugin options stored in ``path``."""
    return load_site_config(path).plugin


def load_site_config(path: Path) -> SiteConfig:
    """Load the book configuration describing a documentation build.

    Parameters
    ----------
    path : Path
        Filesystem path to ``book.yaml`` (or a GitBook-style ``book.json``).

    Returns
    -------
    SiteConfig
        Parsed configuration. Relative ``source_dir`` and ``output_dir``
        values are resolved against the configuration file's directory.
        ``pluginsConfig.platform-tabs.defaultPlatform`` defaults to
        ``"Android"`` when unset.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level structure is not a mapping.
    PluginConfigError
        If a value has the wrong type (for example a blank default platform).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from platform_tabs.config import load_site_config
    >>> config = load_site_config(Path("book.yaml"))  # doctest: +SKIP
    >>> config.plugin.default_platform  # doctest: +SKIP
    'Android'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    raw = _read_mapping(path)
    base = SiteConfig()
    root = path.parent

    plugin = _build_plugin_config(lookup(raw, PLUGIN_SECTION_KEY))
    title = _optional_str(raw.get("title")) or base.title
    pygments_style = _optional_str(raw.get("pygments_style")) or base.pygments_style
    source_dir = _resolve_dir(
        root, raw.get("source_dir"), base.source_dir, key="source_dir"
    )
    output_dir = _resolve_dir(
        root, raw.get("output_dir"), base.output_dir, key="output_dir"
    )

    return SiteConfig(
        title=title,
        source_dir=source_dir,
        output_dir=output_dir,
        pygments_style=pygments_style,
        plugin=plugin,
    )


def _resolve_dir(root: Path, value: object, default: Path, *, key: str) -> Path:
    """Return ``value`` as a directory path anchored at ``root``."""
    match value:
        case None:
            candidate = default
        case str() | Path():
            candidate = Path(value)
        case _:
            msg = f"'{key}' must be a path string, got {value!r}."
            raise PluginConfigError(msg)
    if candidate.is_absolute():
        return candidate
    return root / candidate


__all__ = ["PLUGIN_SECTION_KEY", "load_plugin_config", "load_site_config"]

"""Utility helpers shared by the platform-tabs configuration loader."""

from __future__ import annotations

import typing as typ

from .._constants import DEFAULT_PLATFORM
from .models import PluginConfig, PluginConfigError

_MISSING = object()


def lookup(
    mapping: typ.Mapping[str, typ.Any], path: str, default: typ.Any = None
) -> typ.Any:
    """Return the value at dotted ``path`` in nested mappings, or ``default``.

    Examples
    --------
    >>> lookup({"pluginsConfig": {"platform-tabs": {"defaultPlatform": "iOS"}}},
    ...        "pluginsConfig.platform-tabs.defaultPlatform", "Android")
    'iOS'
    >>> lookup({}, "pluginsConfig.platform-tabs.defaultPlatform", "Android")
    'Android'
    """
    current: typ.Any = mapping
    for segment in path.split("."):
        if not isinstance(current, dict):
            return default
        current = current.get(segment, _MISSING)
        if current is _MISSING:
            return default
    return current


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _build_plugin_config(payload: object | None) -> PluginConfig:
    """Build a PluginConfig from the ``platform-tabs`` plugin mapping."""
    if payload is None:
        return PluginConfig()
    if not isinstance(payload, dict):
        msg = "pluginsConfig.platform-tabs must be a mapping."
        raise PluginConfigError(msg)

    raw_default = payload.get("defaultPlatform", DEFAULT_PLATFORM)
    if raw_default is None:
        return PluginConfig()
    if not isinstance(raw_default, str) or not raw_default.strip():
        msg = (
            "pluginsConfig.platform-tabs.defaultPlatform must be a non-empty "
            f"string, got {raw_default!r}."
        )
        raise PluginConfigError(msg)
    return PluginConfig(default_platform=raw_default.strip())


__all__ = ["_build_plugin_config", "_optional_str", "lookup"]

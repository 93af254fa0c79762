"""Build-scoped state shared by every page rendered in one documentation build.

The only state that outlives a single page is the counter used for
auto-generated container ids. It lives on a :class:`BuildContext` that the
host creates once, resets with :meth:`BuildContext.start_build`, and passes to
the rewriter for every page. Generated ids are unique within one build; they
repeat across builds.

Examples
--------
>>> from platform_tabs.context import BuildContext
>>> context = BuildContext()
>>> context.next_id("platform-tabs")
'platform-tabs-1'
>>> context.next_id("code-sample")
'code-sample-2'
>>> context.start_build()
>>> context.next_id("platform-tabs")
'platform-tabs-1'
"""

from __future__ import annotations

import logging

from .config import PluginConfig

logger = logging.getLogger(__name__)


class IdSequence:
    """Monotonic counter for ``<prefix>-<n>`` ids."""

    def __init__(self) -> None:
        self._value = 0

    @property
    def value(self) -> int:
        """Number of ids issued since the last reset."""
        return self._value

    def next_id(self, prefix: str) -> str:
        """Increment the counter and return ``<prefix>-<counter>``."""
        self._value += 1
        return f"{prefix}-{self._value}"

    def reset(self) -> None:
        """Return the counter to its initial value."""
        self._value = 0


class BuildContext:
    """Configuration and id sequence for one documentation build."""

    def __init__(self, config: PluginConfig | None = None) -> None:
        self.config = config or PluginConfig()
        self.ids = IdSequence()
        self.builds_started = 0

    @property
    def default_platform(self) -> str:
        """Platform that starts active when a container lists it."""
        return self.config.default_platform

    def start_build(self) -> None:
        """Reset the id counter; call exactly once before the first page."""
        self.builds_started += 1
        self.ids.reset()
        logger.debug(
            "Starting build %d with default platform '%s'",
            self.builds_started,
            self.default_platform,
        )

    def next_id(self, prefix: str) -> str:
        """Return the next generated container id for ``prefix``."""
        return self.ids.next_id(prefix)


__all__ = ["BuildContext", "IdSequence"]

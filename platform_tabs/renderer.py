"""Build and serialize platform/language tab trees.

:class:`TabTreeRenderer` composes the block parser, the content normalizer,
and the default-branch selector into a typed :class:`TabContainer`, then
serializes it once through the ``tab_container.jinja`` template. Branch names
and ids are autoescaped; leaf content is already-rendered HTML and passes
through untouched.

Example
-------
>>> from platform_tabs.models import ContainerKind
>>> from platform_tabs.renderer import TabTreeRenderer
>>> renderer = TabTreeRenderer("Android")
>>> html = renderer.render(
...     ContainerKind.PLATFORM_TABS,
...     "t1",
...     "<!-- platform: iOS -->Hi<!-- /platform -->"
...     "<!-- platform: Android -->Hey<!-- /platform -->",
... )
>>> 'class="platform-content active" data-platform="Android"' in html
True
"""

from __future__ import annotations

import logging
import re
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ._constants import DEFAULT_ICON, DEFAULT_PLATFORM, ERROR_FRAGMENT, PLATFORM_ICONS
from .blocks import LANGUAGE_BLOCKS, PLATFORM_BLOCKS
from .models import (
    LANGUAGE_LEVEL,
    PLATFORM_LEVEL,
    ContainerKind,
    PlatformBranch,
    TabContainer,
    TabHeader,
    TabLevel,
    TabPane,
)
from .normalizer import normalize_content
from .selection import select_default_index, select_first_index

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .blocks import Branch

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
WHITESPACE_RUN = re.compile(r"\s+")


def platform_icon(name: str) -> str:
    """Return the Font Awesome class for ``name``, falling back to ``fa-code``."""
    return PLATFORM_ICONS.get(name, DEFAULT_ICON)


def platform_scope_id(container_id: str, platform_name: str) -> str:
    """Return the compound id that scopes language tabs to one platform pane.

    Examples
    --------
    >>> platform_scope_id("sample", "Harmony OS")
    'sample-harmony-os'
    """
    slug = WHITESPACE_RUN.sub("-", platform_name.lower())
    return f"{container_id}-{slug}"


class TabTreeRenderer:
    """Render container bodies into switchable tab markup."""

    def __init__(self, default_platform: str = DEFAULT_PLATFORM) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        default_platform : str, optional
            Platform that starts active when present in a container. Defaults
            to ``"Android"``.
        """
        self.default_platform = default_platform
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATES_DIR)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
        )
        self.template = self.env.get_template("tab_container.jinja")

    def parse(self, kind: ContainerKind, body: str) -> list[PlatformBranch]:
        """Return the platform branches of ``body`` with languages attached.

        Language blocks are only parsed for two-level containers; in a
        single-level container the platform content is kept verbatim.
        """
        platforms: list[PlatformBranch] = []
        for branch in PLATFORM_BLOCKS.parse(body):
            languages: tuple[Branch, ...] = ()
            if kind.nests_languages:
                languages = tuple(LANGUAGE_BLOCKS.parse(branch.content))
            platforms.append(
                PlatformBranch(
                    name=branch.name, content=branch.content, languages=languages
                )
            )
        return platforms

    def build(
        self, kind: ContainerKind, container_id: str, body: str
    ) -> TabContainer | None:
        """Return the typed tab tree for a container, or ``None`` when empty.

        Parameters
        ----------
        kind : ContainerKind
            Single-level platform tabs or two-level code sample.
        container_id : str
            Element id of the container root.
        body : str
            Text between the container markers.

        Returns
        -------
        TabContainer or None
            ``None`` when ``body`` holds no platform blocks.
        """
        platforms = self.parse(kind, body)
        if not platforms:
            return None
        root = self._platform_level(container_id, platforms)
        return TabContainer(id=container_id, kind=kind, root=root)

    def render(self, kind: ContainerKind, container_id: str, body: str) -> str:
        """Serialize a container body, or return the error fragment when empty."""
        container = self.build(kind, container_id, body)
        if container is None:
            logger.warning(
                "No platform blocks found in %s container '%s'",
                kind.marker,
                container_id,
            )
            return ERROR_FRAGMENT
        logger.debug(
            "Rendered %s container '%s' with %d platform(s), active %s",
            kind.marker,
            container_id,
            len(container.root.headers),
            container.root.active_name,
        )
        return self.serialize(container)

    def render_platform_tabs(self, container_id: str, body: str) -> str:
        """Render a single-level ``platformtabs`` container."""
        return self.render(ContainerKind.PLATFORM_TABS, container_id, body)

    def render_code_sample(self, container_id: str, body: str) -> str:
        """Render a two-level ``codesample`` container."""
        return self.render(ContainerKind.CODE_SAMPLE, container_id, body)

    def serialize(self, container: TabContainer) -> str:
        """Return the markup for an already built container."""
        return self.template.render(container=container)

    def _platform_level(
        self, container_id: str, platforms: cabc.Sequence[PlatformBranch]
    ) -> TabLevel:
        active_index = select_default_index(
            [platform.name for platform in platforms], self.default_platform
        )
        headers: list[TabHeader] = []
        panes: list[TabPane] = []
        for index, platform in enumerate(platforms):
            active = index == active_index
            headers.append(
                TabHeader(
                    name=platform.name,
                    active=active,
                    scope_id=container_id,
                    icon=platform_icon(platform.name),
                )
            )
            if platform.languages:
                scope_id = platform_scope_id(container_id, platform.name)
                panes.append(
                    TabPane(
                        name=platform.name,
                        active=active,
                        nested=self._language_level(scope_id, platform.languages),
                        anchor_id=scope_id,
                    )
                )
            else:
                panes.append(
                    TabPane(
                        name=platform.name,
                        active=active,
                        html=normalize_content(platform.content),
                    )
                )
        return TabLevel(spec=PLATFORM_LEVEL, headers=tuple(headers), panes=tuple(panes))

    @staticmethod
    def _language_level(scope_id: str, languages: cabc.Sequence[Branch]) -> TabLevel:
        active_index = select_first_index([language.name for language in languages])
        headers = tuple(
            TabHeader(
                name=language.name, active=index == active_index, scope_id=scope_id
            )
            for index, language in enumerate(languages)
        )
        panes = tuple(
            TabPane(
                name=language.name,
                active=index == active_index,
                html=normalize_content(language.content),
            )
            for index, language in enumerate(languages)
        )
        return TabLevel(spec=LANGUAGE_LEVEL, headers=headers, panes=panes)


__all__ = ["TabTreeRenderer", "platform_icon", "platform_scope_id"]

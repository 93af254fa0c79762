"""Typed tab-tree nodes consumed by the container template.

The renderer builds these records once per container and hands the finished
tree to Jinja. Every class name and data-attribute name lives in a
:class:`LevelSpec` or :class:`ContainerKind`, so the template never spells
the strings the client script depends on.
"""

from __future__ import annotations

import dataclasses as dc
import enum

from .blocks import Branch


@dc.dataclass(frozen=True, slots=True)
class PlatformBranch(Branch):
    """A platform block plus the language blocks parsed from its content.

    Attributes
    ----------
    languages : tuple[Branch, ...]
        Language alternatives in document order. Empty for single-level
        containers and for platforms whose content has no language blocks.
    """

    languages: tuple[Branch, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class LevelSpec:
    """Markup vocabulary for one level of tabs."""

    header_region_class: str
    content_region_class: str
    header_class: str
    pane_class: str
    name_attr: str
    scope_attr: str


PLATFORM_LEVEL = LevelSpec(
    header_region_class="platform-tabs-header",
    content_region_class="platform-tabs-content",
    header_class="platform-tab",
    pane_class="platform-content",
    name_attr="data-platform",
    scope_attr="data-tabs-id",
)

LANGUAGE_LEVEL = LevelSpec(
    header_region_class="language-tabs-header",
    content_region_class="language-tabs-content",
    header_class="language-tab",
    pane_class="language-content",
    name_attr="data-lang",
    scope_attr="data-platform-id",
)


class ContainerKind(enum.Enum):
    """Container flavours recognised in page content."""

    PLATFORM_TABS = "platformtabs"
    CODE_SAMPLE = "codesample"

    @property
    def marker(self) -> str:
        """Comment keyword that opens and closes the container."""
        return self.value

    @property
    def css_class(self) -> str:
        """Class applied to the container root element."""
        if self is ContainerKind.CODE_SAMPLE:
            return "code-sample-container"
        return "platform-tabs-container"

    @property
    def id_prefix(self) -> str:
        """Prefix used for generated container ids."""
        if self is ContainerKind.CODE_SAMPLE:
            return "code-sample"
        return "platform-tabs"

    @property
    def nests_languages(self) -> bool:
        """Return ``True`` when platform panes may hold language tabs."""
        return self is ContainerKind.CODE_SAMPLE


@dc.dataclass(frozen=True, slots=True)
class TabHeader:
    """A pressable tab control.

    Attributes
    ----------
    name : str
        Branch name shown as the label and stored in the name attribute.
    active : bool
        Whether the control starts selected.
    scope_id : str
        Container id (platform level) or compound platform id (language
        level) used by the client script to scope its queries.
    icon : str or None
        Font Awesome class rendered before the label; ``None`` for language
        tabs.
    """

    name: str
    active: bool
    scope_id: str
    icon: str | None = None


@dc.dataclass(frozen=True, slots=True)
class TabPane:
    """Content pane paired with a :class:`TabHeader`.

    Attributes
    ----------
    name : str
        Branch name stored in the name attribute.
    active : bool
        Whether the pane starts visible.
    html : str
        Normalized leaf markup; empty when ``nested`` is present.
    nested : TabLevel or None
        Language tabs rendered instead of ``html``.
    anchor_id : str or None
        Element id for panes that own nested tabs.
    """

    name: str
    active: bool
    html: str = ""
    nested: TabLevel | None = None
    anchor_id: str | None = None


@dc.dataclass(frozen=True, slots=True)
class TabLevel:
    """Header controls and panes for one level of one container."""

    spec: LevelSpec
    headers: tuple[TabHeader, ...]
    panes: tuple[TabPane, ...]

    @property
    def active_name(self) -> str | None:
        """Name of the active header, or ``None`` for an empty level."""
        return next((header.name for header in self.headers if header.active), None)


@dc.dataclass(frozen=True, slots=True)
class TabContainer:
    """A fully resolved container ready for serialization."""

    id: str
    kind: ContainerKind
    root: TabLevel


__all__ = [
    "LANGUAGE_LEVEL",
    "PLATFORM_LEVEL",
    "ContainerKind",
    "LevelSpec",
    "PlatformBranch",
    "TabContainer",
    "TabHeader",
    "TabLevel",
    "TabPane",
]

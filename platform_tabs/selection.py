"""Pick the branch that starts active at each tab level."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def select_default_index(
    names: cabc.Sequence[str], default_name: str | None
) -> int | None:
    """Return the index of the initially active platform branch.

    Parameters
    ----------
    names : Sequence[str]
        Branch names in document order.
    default_name : str or None
        Configured default platform. Compared case-sensitively.

    Returns
    -------
    int or None
        Index of the first name equal to ``default_name``; ``0`` when no name
        matches; ``None`` when ``names`` is empty. Later duplicates of the
        default never win.

    Examples
    --------
    >>> select_default_index(["iOS", "Android", "HarmonyOS"], "Android")
    1
    >>> select_default_index(["iOS", "HarmonyOS"], "Android")
    0
    """
    if not names:
        return None
    if default_name is not None:
        for index, name in enumerate(names):
            if name == default_name:
                return index
    return 0


def select_first_index(names: cabc.Sequence[str]) -> int | None:
    """Return ``0`` for any non-empty sequence; language tabs have no default."""
    return 0 if names else None


__all__ = ["select_default_index", "select_first_index"]

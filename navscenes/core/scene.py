"""
Scene model.

A scene wraps one child route plus the metadata the rendering layer needs to
decide whether to mount, keep, focus or retire its view.
"""

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class Scene:
    """
    Immutable scene record.

    Fields:
        key: Scene key (prefix + route key)
        index: Position of the route in the tree it was derived from
        is_active: True for the single focused, non-stale scene
        is_stale: True once the route is gone from the current tree
        navigation_state: The route itself, compared by identity
    """
    key: str
    index: int
    is_active: bool
    is_stale: bool
    navigation_state: Any

    def with_active(self, is_active: bool) -> "Scene":
        """Return a shallow copy carrying the given active flag."""
        return replace(self, is_active=is_active)

"""
Scene key derivation and ordering helpers.
"""

from typing import Any

from .scene import Scene

SCENE_KEY_PREFIX = "scene_"


def scene_key(navigation_state: Any) -> str:
    """Derive the scene key for a route."""
    return SCENE_KEY_PREFIX + navigation_state.key


def compare_key(one: str, two: str) -> int:
    """
    Compare scene keys such as "scene_9" and "scene_11".

    Shorter keys sort first, equal lengths compare lexicographically. This
    orders numeric suffixes naturally; for arbitrary alphanumeric keys it is
    only a deterministic total order, not a natural one.
    """
    delta = len(one) - len(two)
    if delta > 0:
        return 1
    if delta < 0:
        return -1
    return 1 if one > two else -1


def compare_scenes(one: Scene, two: Scene) -> int:
    """Order scenes by index, then by key."""
    if one.index > two.index:
        return 1
    if one.index < two.index:
        return -1
    return compare_key(one.key, two.key)


def scenes_shallow_equal(one: Scene, two: Scene) -> bool:
    """True when two scenes render identically; routes compare by identity."""
    return (
        one.key == two.key
        and one.index == two.index
        and one.is_stale == two.is_stale
        and one.is_active == two.is_active
        and one.navigation_state is two.navigation_state
        and one.navigation_state.key == two.navigation_state.key
    )

"""
Tests for scene key derivation and ordering helpers.
"""

from functools import cmp_to_key

from navscenes.core.keys import (
    SCENE_KEY_PREFIX,
    compare_key,
    compare_scenes,
    scene_key,
    scenes_shallow_equal,
)
from navscenes.core.scene import Scene
from navscenes.core.state import Route


def _scene(key, index, route=None, **flags):
    route = route or Route(key=key[len(SCENE_KEY_PREFIX):])
    return Scene(
        key=key,
        index=index,
        is_active=flags.get("is_active", False),
        is_stale=flags.get("is_stale", False),
        navigation_state=route,
    )


def test_scene_key_prefixes_route_key():
    assert scene_key(Route(key="home")) == "scene_home"


def test_compare_key_shorter_first():
    """Numeric suffixes of different widths sort numerically."""
    assert compare_key("scene_9", "scene_11") == -1
    assert compare_key("scene_11", "scene_9") == 1


def test_compare_key_lexicographic_on_equal_length():
    assert compare_key("scene_a", "scene_b") == -1
    assert compare_key("scene_b", "scene_a") == 1


def test_compare_key_is_length_first_for_any_string():
    """Known limitation: "zz" sorts before "aaa"."""
    assert compare_key("zz", "aaa") == -1


def test_compare_scenes_index_before_key():
    low = _scene("scene_11", 0)
    high = _scene("scene_9", 1)
    assert compare_scenes(low, high) == -1
    assert compare_scenes(high, low) == 1


def test_sorting_scenes_at_equal_index():
    scenes = [_scene("scene_11", 0), _scene("scene_b", 1), _scene("scene_9", 0)]
    ordered = sorted(scenes, key=cmp_to_key(compare_scenes))
    assert [s.key for s in ordered] == ["scene_9", "scene_11", "scene_b"]


def test_shallow_equal_requires_same_route_object():
    """Routes with identical content are still different routes."""
    one = _scene("scene_a", 0, route=Route(key="a"))
    two = _scene("scene_a", 0, route=Route(key="a"))
    assert not scenes_shallow_equal(one, two)

    same = _scene("scene_a", 0, route=one.navigation_state)
    assert scenes_shallow_equal(one, same)


def test_shallow_equal_compares_flags():
    route = Route(key="a")
    base = _scene("scene_a", 0, route=route)
    assert not scenes_shallow_equal(base, base.with_active(True))
    assert not scenes_shallow_equal(base, _scene("scene_a", 0, route=route, is_stale=True))
    assert not scenes_shallow_equal(base, _scene("scene_a", 1, route=route))

"""
Reducer: pure scene reconciliation.

reconcile() turns the previous scene list plus a tree transition into the
next scene list. It must be:
- Pure (no side effects, no I/O, inputs never mutated)
- Deterministic (same input -> same output, same order)
- Identity-preserving (unchanged scenes are returned as the same objects)
"""

from functools import cmp_to_key
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .errors import ActiveSceneCountError, DuplicateSceneKeyError
from .keys import compare_scenes, scene_key, scenes_shallow_equal
from .scene import Scene


def _index_previous(scenes: Sequence[Scene]) -> Tuple[Dict[str, Scene], Dict[str, Scene]]:
    prev_scenes: Dict[str, Scene] = {}
    stale_scenes: Dict[str, Scene] = {}
    for scene in scenes:
        if scene.is_stale:
            stale_scenes[scene.key] = scene
        prev_scenes[scene.key] = scene
    return prev_scenes, stale_scenes


def _fresh_scenes(next_state: Any) -> Dict[str, Scene]:
    fresh: Dict[str, Scene] = {}
    for index, navigation_state in enumerate(next_state.children):
        key = scene_key(navigation_state)
        if key in fresh:
            raise DuplicateSceneKeyError(index, key)
        fresh[key] = Scene(
            key=key,
            index=index,
            is_active=False,
            is_stale=False,
            navigation_state=navigation_state,
        )
    return fresh


def classify(
    stale: Dict[str, Scene],
    next_state: Any,
    prev_state: Optional[Any] = None,
) -> Tuple[Dict[str, Scene], Dict[str, Scene]]:
    """
    Split candidate scenes into stale and fresh sets.

    Args:
        stale: Scenes already stale in the previous list, keyed by scene key;
            updated in place and returned
        next_state: Tree being transitioned to
        prev_state: Tree that produced scenes (None on first call)

    Returns:
        (stale, fresh), both keyed by scene key

    Raises:
        DuplicateSceneKeyError: If two children of next_state share a key
    """
    fresh = _fresh_scenes(next_state)

    # A stale scene that is back in the tree is revived.
    for key in fresh:
        stale.pop(key, None)

    if prev_state is not None:
        for index, navigation_state in enumerate(prev_state.children):
            key = scene_key(navigation_state)
            if key in fresh:
                continue
            stale[key] = Scene(
                key=key,
                index=index,
                is_active=False,
                is_stale=True,
                navigation_state=navigation_state,
            )

    return stale, fresh


def merge(prev_scenes: Dict[str, Scene], candidates: Sequence[Scene]) -> List[Scene]:
    """Prefer the previous scene object wherever it is shallow-equal to the candidate."""
    merged = []
    for scene in candidates:
        prev = prev_scenes.get(scene.key)
        if prev is not None and scenes_shallow_equal(prev, scene):
            merged.append(prev)
        else:
            merged.append(scene)
    return merged


def flag_active(
    scenes: List[Scene],
    active_index: int,
    prev_scenes: Optional[Dict[str, Scene]] = None,
) -> int:
    """
    Recompute is_active in place and return the number of active scenes.

    Scenes whose flag does not change keep their identity. A scene whose flag
    does change is swapped for its previous object when that one already
    carries the new flag, so a focused scene that stays focused is reused.
    This goes past a plain shallow copy: the result is value-equal either
    way, only the identity of the returned object differs.
    """
    prev_scenes = prev_scenes or {}
    count = 0
    for pos, scene in enumerate(scenes):
        is_active = not scene.is_stale and scene.index == active_index
        if is_active != scene.is_active:
            flagged = scene.with_active(is_active)
            prev = prev_scenes.get(scene.key)
            if prev is not None and scenes_shallow_equal(prev, flagged):
                flagged = prev
            scenes[pos] = flagged
        if is_active:
            count += 1
    return count


def reconcile(
    scenes: Sequence[Scene],
    next_state: Any,
    prev_state: Optional[Any] = None,
) -> Sequence[Scene]:
    """
    Reconcile scenes against a tree transition.

    Args:
        scenes: Output of the previous call (empty on first call)
        next_state: Tree being transitioned to
        prev_state: Tree that produced scenes (None on first call)

    Returns:
        Scenes ordered by (index, key); the input object itself when nothing changed

    Raises:
        DuplicateSceneKeyError: If two children of next_state share a key
        ActiveSceneCountError: If a non-empty tree does not yield exactly one active scene
    """
    prev_scenes, stale = _index_previous(scenes)
    stale, fresh = classify(stale, next_state, prev_state)

    next_scenes = merge(prev_scenes, list(stale.values()) + list(fresh.values()))
    next_scenes.sort(key=cmp_to_key(compare_scenes))

    active_count = flag_active(next_scenes, next_state.index, prev_scenes)
    if next_state.children and active_count != 1:
        raise ActiveSceneCountError(active_count)

    if len(next_scenes) != len(scenes):
        return next_scenes
    for prev, scene in zip(scenes, next_scenes):
        if not scenes_shallow_equal(prev, scene):
            return next_scenes

    return scenes

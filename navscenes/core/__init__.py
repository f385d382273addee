"""
Core scene reconciliation primitives.

- Route / ParentState: Navigation tree values
- Scene: Reconciled rendering record
- reconcile: Pure tree-transition -> scene-list function
- SceneReconciler: Stateful driver carrying scenes between transitions
- Canonical: Deterministic serialization and digests
"""

from .state import Route, ParentState
from .scene import Scene
from .keys import SCENE_KEY_PREFIX, scene_key, compare_key, compare_scenes, scenes_shallow_equal
from .reducer import reconcile
from .reconciler import SceneReconciler
from .canonical import (
    params_fingerprint,
    scene_to_dict,
    scenes_to_dicts,
    scenes_json,
    scenes_digest,
)
from .errors import (
    ReconcileError,
    DuplicateSceneKeyError,
    ActiveSceneCountError,
    InvalidStateError,
    TraceError,
)

__all__ = [
    "Route",
    "ParentState",
    "Scene",
    "SCENE_KEY_PREFIX",
    "scene_key",
    "compare_key",
    "compare_scenes",
    "scenes_shallow_equal",
    "reconcile",
    "SceneReconciler",
    "params_fingerprint",
    "scene_to_dict",
    "scenes_to_dicts",
    "scenes_json",
    "scenes_digest",
    "ReconcileError",
    "DuplicateSceneKeyError",
    "ActiveSceneCountError",
    "InvalidStateError",
    "TraceError",
]

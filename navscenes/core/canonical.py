"""
Canonical serialization of scene lists.

Everything that prints, compares or hashes a scene list goes through these
functions so the same scenes always produce the same bytes: keys sorted at
every level, no whitespace, UTF-8 kept as is.
"""

import hashlib
import json
from typing import Any, Dict, List, Mapping, Sequence

from .scene import Scene


def _dump(obj: Any) -> str:
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def params_fingerprint(params: Mapping[str, Any]) -> str:
    """Stable text form of a route payload; equal payloads give equal text."""
    return _dump(dict(params))


def route_to_dict(navigation_state: Any) -> Dict[str, Any]:
    return {
        "key": navigation_state.key,
        "params": dict(getattr(navigation_state, "params", None) or {}),
    }


def scene_to_dict(scene: Scene) -> Dict[str, Any]:
    """JSON-ready view of a scene."""
    return {
        "key": scene.key,
        "index": scene.index,
        "is_active": scene.is_active,
        "is_stale": scene.is_stale,
        "route": route_to_dict(scene.navigation_state),
    }


def scenes_to_dicts(scenes: Sequence[Scene]) -> List[Dict[str, Any]]:
    return [scene_to_dict(s) for s in scenes]


def scenes_json(scenes: Sequence[Scene]) -> str:
    """Compact canonical JSON of a scene list, in list order."""
    return _dump(scenes_to_dicts(scenes))


def scenes_digest(scenes: Sequence[Scene]) -> str:
    """
    SHA-256 of the canonical scene list.

    Order matters: the digest covers the list as returned by reconcile().
    """
    return hashlib.sha256(scenes_json(scenes).encode("utf-8")).hexdigest()

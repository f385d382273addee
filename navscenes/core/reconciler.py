"""
Stateful driver around reconcile() for one navigation tree.
"""

from typing import Any, List, Optional, Sequence

from ..logging_config import get_logger
from .reducer import reconcile
from .scene import Scene


class SceneReconciler:
    """
    Carries scenes and the previous tree between reconciliations.

    Usage:
        reconciler = SceneReconciler()
        scenes = reconciler.step(ParentState.of(["a", "b"], index=1))
        scenes = reconciler.step(ParentState.of(["a"]))
        reconciler.retire("scene_b")  # exit transition finished
    """

    def __init__(self, initial_state: Optional[Any] = None, trace_id: Optional[str] = None) -> None:
        self.scenes: Sequence[Scene] = []
        self.state: Optional[Any] = None
        self.steps = 0
        self._log = get_logger(__name__, trace_id=trace_id)
        if initial_state is not None:
            self.step(initial_state)

    def step(self, next_state: Any) -> Sequence[Scene]:
        """
        Reconcile the carried scenes against next_state.

        Nothing is stored if reconcile() raises.

        Returns:
            The new scene list (the carried list itself when unchanged)
        """
        scenes = reconcile(self.scenes, next_state, self.state)
        changed = scenes is not self.scenes
        self.scenes = scenes
        self.state = next_state
        self.steps += 1
        self._log.debug(
            "step %d: %d scenes (%d stale), changed=%s",
            self.steps,
            len(scenes),
            sum(1 for s in scenes if s.is_stale),
            changed,
        )
        return scenes

    def retire(self, key: str) -> bool:
        """
        Drop a stale scene whose exit transition has completed.

        Returns:
            True if a stale scene was removed, False otherwise
        """
        for scene in self.scenes:
            if scene.key == key and scene.is_stale:
                self.scenes = [s for s in self.scenes if s is not scene]
                self._log.debug("retired %s", key)
                return True
        return False

    @property
    def active_scene(self) -> Optional[Scene]:
        for scene in self.scenes:
            if scene.is_active:
                return scene
        return None

    def stale_scenes(self) -> List[Scene]:
        return [s for s in self.scenes if s.is_stale]

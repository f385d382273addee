"""
Replay runner: drive a reconciler through a trace.

Replay is deterministic: the same steps always yield the same scene lists
and digests.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..core.canonical import scenes_digest
from ..core.reconciler import SceneReconciler
from ..core.scene import Scene
from ..logging_config import get_logger
from ..trace.models import RouteInterner, TraceStep


@dataclass(frozen=True)
class StepRecord:
    """
    Outcome of one replayed step.

    Fields:
        step: Zero-based step number
        scenes: Scene list after the step
        changed: False when the reconciler returned the previous list object
        retired: Keys actually retired before the step
        digest: scenes_digest() of scenes
    """
    step: int
    scenes: Sequence[Scene]
    changed: bool
    retired: List[str]
    digest: str

    @property
    def stale_count(self) -> int:
        return sum(1 for s in self.scenes if s.is_stale)

    @property
    def active_key(self) -> Optional[str]:
        for scene in self.scenes:
            if scene.is_active:
                return scene.key
        return None


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        scenes: Final scene list
        applied: Number of steps applied
        history: One StepRecord per applied step
    """
    scenes: Sequence[Scene]
    applied: int
    history: List[StepRecord] = field(default_factory=list)

    @property
    def digest(self) -> str:
        return scenes_digest(self.scenes)


def replay(
    steps: Sequence[TraceStep],
    to_step: Optional[int] = None,
    trace_id: Optional[str] = None,
) -> ReplayResult:
    """
    Replay trace steps through a fresh SceneReconciler.

    Args:
        steps: Parsed trace steps
        to_step: Stop after this step (inclusive, None = all)
        trace_id: Correlation id for log records

    Returns:
        ReplayResult with final scenes, count and per-step history

    Raises:
        InvalidStateError: If a step holds an out-of-range index
        ReconcileError: If a step violates a reconciliation contract
    """
    log = get_logger(__name__, trace_id=trace_id)
    reconciler = SceneReconciler(trace_id=trace_id)
    interner = RouteInterner()
    history: List[StepRecord] = []

    for n, step in enumerate(steps):
        if to_step is not None and n > to_step:
            break
        retired = [key for key in step.retire if reconciler.retire(key)]
        before = reconciler.scenes
        scenes = reconciler.step(step.to_parent_state(interner))
        history.append(
            StepRecord(
                step=n,
                scenes=scenes,
                changed=scenes is not before,
                retired=retired,
                digest=scenes_digest(scenes),
            )
        )

    log.info("replayed %d steps, %d distinct routes", len(history), len(interner))
    return ReplayResult(scenes=reconciler.scenes, applied=len(history), history=history)

"""
Replay of navigation traces for deterministic scene reconstruction.
"""

from .runner import ReplayResult, StepRecord, replay

__all__ = [
    "ReplayResult",
    "StepRecord",
    "replay",
]

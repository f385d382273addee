"""
Navigation trace files: JSONL sequences of parent states.
"""

from .models import RouteInterner, TraceRoute, TraceStep
from .loader import iter_trace, load_state, load_trace

__all__ = [
    "RouteInterner",
    "TraceRoute",
    "TraceStep",
    "iter_trace",
    "load_state",
    "load_trace",
]

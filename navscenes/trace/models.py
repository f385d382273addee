"""
Trace record models.

A trace line is one parent state plus the stale scenes whose exit
transition finished before it is applied:

    {"index": 1, "children": [{"key": "a"}, {"key": "b", "title": "B"}], "retire": []}

Any route field besides "key" is kept as the route's opaque params.
"""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..core.canonical import params_fingerprint
from ..core.state import ParentState, Route


class TraceRoute(BaseModel):
    model_config = ConfigDict(extra="allow")

    key: str

    @property
    def params(self) -> dict:
        return dict(self.model_extra or {})


class TraceStep(BaseModel):
    model_config = ConfigDict(extra="forbid")

    index: int = 0
    children: List[TraceRoute] = Field(default_factory=list)
    retire: List[str] = Field(default_factory=list)

    def to_parent_state(self, interner: Optional["RouteInterner"] = None) -> ParentState:
        """
        Build the immutable tree for this step.

        Raises:
            InvalidStateError: If index is out of range
        """
        if interner is None:
            interner = RouteInterner()
        return ParentState(
            index=self.index,
            children=tuple(interner.route(child) for child in self.children),
        )


class RouteInterner:
    """
    Hands out one Route object per (key, params) pair.

    Routes decoded from different lines are distinct objects even when their
    content matches; interning gives unchanged children the same identity
    across steps so their scenes can be reused.
    """

    def __init__(self) -> None:
        self._routes: Dict[Tuple[str, str], Route] = {}

    def route(self, child: TraceRoute) -> Route:
        params = child.params
        ident = (child.key, params_fingerprint(params))
        route = self._routes.get(ident)
        if route is None:
            route = Route(key=child.key, params=params)
            self._routes[ident] = route
        return route

    def __len__(self) -> int:
        return len(self._routes)

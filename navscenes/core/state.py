"""
Navigation tree model.

A parent state holds an ordered tuple of child routes and the index of the
focused child. Both are immutable values: the reconciler compares routes by
identity, never by content.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Sequence, Tuple

from .errors import InvalidStateError


@dataclass(frozen=True)
class Route:
    """
    Child navigation state.

    Fields:
        key: Route key, unique among siblings
        params: Opaque payload owned by the caller
    """
    key: str
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ParentState:
    """
    Immutable navigation tree node.

    Fields:
        index: Position of the focused child
        children: Ordered child routes

    Raises:
        InvalidStateError: If index is out of range for a non-empty tree
    """
    index: int = 0
    children: Tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))
        for pos, child in enumerate(self.children):
            if not isinstance(getattr(child, "key", None), str):
                raise InvalidStateError(f"children[{pos}] has no string key")
        if self.children and not 0 <= self.index < len(self.children):
            raise InvalidStateError(
                f"index {self.index} out of range for {len(self.children)} children"
            )

    @staticmethod
    def empty() -> "ParentState":
        return ParentState()

    @staticmethod
    def of(keys: Sequence[str], index: int = 0) -> "ParentState":
        """Build a tree of parameterless routes, one per key."""
        return ParentState(index=index, children=tuple(Route(key=k) for k in keys))

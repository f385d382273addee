"""
Exception types for scene reconciliation.
"""


class ReconcileError(Exception):
    """Raised when a reconciliation contract is violated."""
    pass


class DuplicateSceneKeyError(ReconcileError):
    """Raised when two children of the next tree derive the same scene key."""

    def __init__(self, index: int, key: str) -> None:
        super().__init__(
            f'navigation_state.children[{index}].key "{key}" conflicts with another child'
        )
        self.index = index
        self.key = key


class ActiveSceneCountError(ReconcileError):
    """Raised when the flagged scene list does not hold exactly one active scene."""

    def __init__(self, count: int) -> None:
        super().__init__(f"there should always be only one scene active, not {count}")
        self.count = count


class InvalidStateError(Exception):
    """Raised when a parent state is malformed."""
    pass


class TraceError(Exception):
    """Raised when a trace file cannot be read or parsed."""
    pass

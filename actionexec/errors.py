from __future__ import annotations


class ExecError(Exception):
    """Base class for interpreter errors."""


class MissingUserError(ExecError, LookupError):
    """Raised when an action needs the current user before any read ran."""

    def __init__(self, message: str = "User not found in context") -> None:
        super().__init__(message)


class UnknownActionType(ExecError, ValueError):
    def __init__(self, action_type: object) -> None:
        self.action_type = action_type
        super().__init__(f"Unknown action type: {action_type}")


class ActionTreeTooDeep(ExecError, ValueError):
    def __init__(self, *, depth: int, max_depth: int) -> None:
        self.depth = depth
        self.max_depth = max_depth
        super().__init__(f"Match nesting depth {depth} exceeds max_depth={max_depth}")

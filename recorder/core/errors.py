"""
Exception types for the action recorder.
"""


class RecorderError(Exception):
    """Base class for recorder errors."""
    pass


class MalformedActionError(RecorderError, ValueError):
    """Raised when a canonical action mapping lacks required fields."""
    pass


class UnregisteredActionTypeError(RecorderError, KeyError):
    """Raised when a typed action has no decoder in the type registry."""
    pass


class ActionLogError(RecorderError):
    """Raised when the action log cannot be written."""
    pass


class ReplayError(RecorderError, ValueError):
    """Raised when a rewind target cannot be reached with the given actions."""
    pass


class DispatchError(RecorderError):
    """Raised when a reducer dispatches while the store is reducing."""
    pass

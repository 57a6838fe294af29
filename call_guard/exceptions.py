class CallGuardError(Exception):
    """Base exception for call-guard errors."""


class UnknownModeError(CallGuardError, ValueError):
    """Raised when an analysis mode name cannot be parsed."""


class ReferenceListError(CallGuardError):
    """Raised when a reference number list cannot be loaded."""


class UnknownCategoryError(CallGuardError, LookupError):
    """Raised when a test scenario category does not exist."""

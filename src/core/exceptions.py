"""
Domain Exceptions Module.

Defines the error kinds raised by the entity store, the versioned ledger,
the input history and the command parser.

Command-level errors are caught where commands execute and converted into
a failed CommandResult. Ledger and history boundary errors are expected
during normal navigation and are handled silently by their callers.
"""


class AgendaError(Exception):
    """Base class for all domain errors."""


class InvalidArgumentError(AgendaError):
    """Raised when command arguments are malformed or missing."""


class DuplicateEntityError(AgendaError):
    """Raised when an entity equal to an existing one is inserted."""


class IllegalReferenceError(AgendaError):
    """Raised when an entity references an identifier that does not exist."""


class EntityNotFoundError(AgendaError):
    """Raised when an identifier does not match any stored entity."""


class NoPreviousStateError(AgendaError):
    """Raised when undoing past the oldest ledger snapshot."""


class NoNextStateError(AgendaError):
    """Raised when redoing past the newest ledger snapshot."""


class HistoryBoundaryError(AgendaError):
    """Raised when the history pointer is moved past either end."""

"""Error taxonomy for the trip quiz."""


class QuizError(Exception):
    """Base class for all quiz errors."""


class CatalogLoadError(QuizError):
    """Raised when the customer or venue catalog cannot be loaded."""


class EmptyCatalogError(QuizError):
    """Raised when a session is started with no customers available."""


class InvalidSelectionError(QuizError):
    """Raised when a venue is not selectable for the current step."""


class AtStartError(QuizError):
    """Raised when going back from the first step."""


class CorruptSessionError(QuizError):
    """Raised when a persisted session snapshot fails validation."""


class PersistenceWriteError(QuizError):
    """Raised when the session snapshot could not be written."""


class SessionNotStartedError(QuizError):
    """Raised when an action needs a session and none is active."""


class InterviewCompleteError(QuizError):
    """Raised when asking for the current step after the last one."""


class InterviewIncompleteError(QuizError):
    """Raised when scoring or planning before every step is answered."""

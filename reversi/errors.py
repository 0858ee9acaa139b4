class ReversiError(Exception):
    """Base class for engine errors."""

class InvalidChoice(ReversiError, ValueError):
    """A move choice that does not name an offered option; the caller re-prompts."""

class EmptyHistory(ReversiError, IndexError):
    """undo_last_move() called with nothing to undo."""

class NoLegalMove(ReversiError, LookupError):
    """AI asked to pick from an empty set of moves."""

class StrategoError(Exception):
    pass


class EarlyExit(StrategoError):
    """The player quit before the game finished. Not a failure."""

    def __str__(self) -> str:
        return "game was exited before completion"


class SetupError(StrategoError, ValueError):
    """A supplied army layout is malformed; the caller may fix it and retry."""


class SetupInvariantError(StrategoError, RuntimeError):
    """Army and home region sizes disagree. Programming error, never recoverable."""

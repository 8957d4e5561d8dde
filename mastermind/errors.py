class MastermindError(Exception):
    """Base class for errors raised by this package."""


class RemoteServiceError(MastermindError):
    """The remote game service could not create a game or score a guess."""


class SessionOver(MastermindError):
    """A turn was submitted after the session already ended."""

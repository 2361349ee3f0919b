"""Exceptions raised at the engine's public boundary."""


class RepoLensError(Exception):
    """Base class for engine errors."""


class InvalidInputError(RepoLensError, TypeError):
    """Raised when an argument has the wrong shape to be analyzed at all.

    Missing or malformed evidence never raises; only structurally invalid
    arguments (a bare string where a path list is expected, a fetch
    capability that is not callable, a non-positive budget) do.
    """

    def __init__(self, argument: str, message: str):
        self.argument = argument
        self.message = message
        super().__init__(f"{argument}: {message}")

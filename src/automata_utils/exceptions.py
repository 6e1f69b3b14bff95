"""Exceptions raised by automata_utils."""


class AutomatonError(Exception):
    """Base exception for all automata_utils errors."""

    pass


class LoaderError(AutomatonError, ValueError):
    """Raised when an automaton description is malformed."""

    def __init__(self, message: str, path: str = "") -> None:
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        if self.path:
            return f"{super().__str__()} at {self.path}"
        return super().__str__()

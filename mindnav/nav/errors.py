"""Errors raised when callers break the navigation contracts."""


class InvalidGeometryError(ValueError):
    """A rectangle with non-positive width or height reached the selector."""


class InvalidWeightError(ValueError):
    """The offset weight is negative or not a number."""


class ModeTransitionError(RuntimeError):
    """A mode transition was requested from a mode it is not defined for."""

    def __init__(self, transition: str, mode):
        self.transition = transition
        self.mode = mode
        super().__init__(f"Cannot apply '{transition}' while in mode {mode.name}")

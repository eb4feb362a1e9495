class ReversiError(Exception):
    """Base exception for the engine."""


class InvalidMoveError(ReversiError, ValueError):
    """Move not in the legal-move set of the current position."""


class MalformedLayoutError(ReversiError, ValueError):
    """Text layout has too many rows or columns, or an unknown character."""


class MovesMismatchError(ReversiError, ValueError):
    """Move markers in a layout disagree with the recomputed legal moves."""

    def __init__(self, expected, recorded):
        self.expected = list(expected)
        self.recorded = list(recorded)
        super().__init__(
            f"Possible moves do not match: computed {self.expected}, recorded {self.recorded}"
        )

"""Project-wide custom exception types."""


class LikertError(ValueError):
    """Base class for invalid survey input."""


class EmptyInputError(LikertError):
    """Raised when there are no records (or no tables) to work with."""


class InvalidColumnError(LikertError):
    """Raised when a requested column is not part of the dataset."""

    def __init__(self, column: str, available=None) -> None:
        self.column = column
        msg = f"Column {column!r} not found"
        if available is not None:
            msg += f". Found: {list(available)}"
        super().__init__(msg)


class OutOfRangeValueError(LikertError):
    """Raised when a rating lies outside the configured scale."""

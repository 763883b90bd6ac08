"""Selector error types."""


class SelectorSyntaxError(Exception):
    """Raised when a selector does not conform to the override grammar."""

    def __init__(
        self, message: str, selector: str = "", column: int | None = None
    ):
        self.selector = selector
        self.column = column
        super().__init__(message)

"""Domain exceptions."""


class DomainError(Exception):
    """Raised when a stock calculated value operation cannot be completed.

    Covers SQL resource resolution, parameter binding and store execution
    failures alike. The underlying cause, when there is one, is chained.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

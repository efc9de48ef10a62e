"""
Input validation errors raised before any request is sent.
"""


class SolscanInputError(ValueError):
    """Base class for invalid arguments passed to SolscanClient."""

    def __init__(self, param: str, message: str):
        super().__init__(message)
        self.param = param


class MissingIdentifierError(SolscanInputError):
    """A required identifier (account, token address, signature...) is None or empty."""

    def __init__(self, param: str, message: str | None = None):
        super().__init__(param, message or f"{param} must not be None or empty.")


class InvalidBoundError(SolscanInputError):
    """A numeric bound such as limit or block id is not a positive integer."""

    def __init__(self, param: str, value: int, message: str | None = None):
        super().__init__(param, message or f"{param} must be a positive integer (got {value}).")
        self.value = value

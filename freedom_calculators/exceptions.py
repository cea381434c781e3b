"""Calculator exceptions."""


class CalculatorError(Exception):
    """Base exception for calculator errors"""

    pass


class InvalidInputError(CalculatorError):
    """A user supplied value is missing, non-numeric or out of range"""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


class UnsolvableError(CalculatorError):
    """A solver could not produce a finite answer for the given values"""

    pass

"""Errors raised by the BMI calculator."""


class InvalidInput(ValueError):
    """Weight or height outside the accepted range."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

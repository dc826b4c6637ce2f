"""
Transformation Errors

Typed errors raised by the exercise functions.
"""


class InvalidArgumentError(ValueError):
    """Raised when an exercise receives input outside its contract"""

"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Numeric input is NaN, infinite, or outside its allowed range"""

    pass

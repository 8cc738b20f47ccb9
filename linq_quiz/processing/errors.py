"""Errors raised by the processing functions"""


class LinqQuizError(Exception):
    """Base class for all errors raised by linq_quiz"""


class InvalidArgumentError(LinqQuizError, ValueError):
    """An upper limit is outside of the accepted range"""


class SquareOverflowError(LinqQuizError, OverflowError):
    """A square would not fit into a signed 32-bit integer"""


class NullInputError(LinqQuizError, TypeError):
    """A required input is None"""

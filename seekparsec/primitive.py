"""
Primitive input-agnostic parsers.
"""

from typing import Any, TypeVar

from .core import primitive
from .core.state import State
from .parser import FnParser, Parser, attempt, try_

__all__ = ("Pack", "pack", "fail", "attempt", "try_")

S_contra = TypeVar("S_contra", bound=State[Any, Any], contravariant=True)
A_co = TypeVar("A_co", covariant=True)


class Pack(primitive.Pack[S_contra, A_co], Parser[S_contra, A_co]):
    """
    Parser that always succeeds, consumes no input, and returns constant value.

    The same object is returned on every invocation.

    >>> from seekparsec.primitive import Pack

    >>> Pack(0).parse("").unwrap()
    0

    :param x: Value to return
    """


pack = Pack


def fail(msg: str) -> Parser[State[Any, Any], None]:
    """
    Parser that always fails at the current position and consumes no input.

    >>> from seekparsec.primitive import fail

    >>> fail("no").parse("ab").unwrap()
    Traceback (most recent call last):
      ...
    seekparsec.types.ParseError: at 0: no

    :param msg: Error message
    """

    return FnParser(primitive.fail(msg))

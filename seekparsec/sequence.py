"""
Parsers for tokens held by :class:`~seekparsec.core.state.VecState`.
"""

from typing import Callable, Optional, TypeVar

from .core import sequence
from .core.state import VecState
from .parser import FnParser, Parser

__all__ = ("one", "eof", "satisfy", "sym")

A = TypeVar("A")


def one() -> Parser[VecState[A], A]:
    """
    Consumes and returns any single token.

    >>> from seekparsec.sequence import one

    >>> one().parse("a").unwrap()
    'a'
    >>> one().parse("").unwrap()
    Traceback (most recent call last):
      ...
    seekparsec.types.ParseError: at 0: unexpected end of input
    """

    return FnParser(sequence.one())


def eof() -> Parser[VecState[object], None]:
    """
    Succeeds at the end of the input.

    >>> from seekparsec.sequence import eof

    >>> eof().parse("").unwrap()
    >>> eof().parse("a").unwrap()
    Traceback (most recent call last):
      ...
    seekparsec.types.ParseError: at 0: expected end of input
    """

    return FnParser(sequence.eof())


def satisfy(
        test: Callable[[A], bool],
        label: Optional[str] = None) -> Parser[VecState[A], A]:
    """
    Succeeds for a token for which ``test`` returns ``True`` and returns that
    token.

    >>> from seekparsec.sequence import satisfy

    >>> parser = satisfy(lambda c: c.isalpha())

    >>> parser.parse("a").unwrap()
    'a'
    >>> parser.parse("0").unwrap()
    Traceback (most recent call last):
      ...
    seekparsec.types.ParseError: at 0: unexpected '0'

    :param test: Predicate for tokens
    :param label: Description of the expected token
    """

    return FnParser(sequence.satisfy(test, label))


def sym(s: A, label: Optional[str] = None) -> Parser[VecState[A], A]:
    """
    Parses ``s`` and returns the parsed token.

    >>> from seekparsec.sequence import sym

    >>> sym("a").parse("a").unwrap()
    'a'
    >>> sym("a").parse("0").unwrap()
    Traceback (most recent call last):
      ...
    seekparsec.types.ParseError: at 0: expected 'a'

    :param s: Token to parse
    :param label: Label to use instead of ``repr(s)``
    """

    return FnParser(sequence.sym(s, label))

"""
Parse results and errors.
"""

from typing import Callable, Generic, Optional, TypeVar

from .core.result import Error, Ok, Result

A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")


class ParseError(Exception):
    """
    Exception that is raised if a parser was unable to parse the input.

    :param pos: Cursor position at which the failing parser gave up
    :param msg: Reason of the failure
    """

    def __init__(self, pos: object, msg: str):
        super().__init__(pos, msg)
        self.pos = pos
        self.msg = msg

    def __str__(self) -> str:
        return "at {!r}: {}".format(self.pos, self.msg)


class ParseResult(Generic[A_co]):
    """
    Result of the parsing.

    :param result: Outcome returned by the parser
    :param pos: Cursor position after the parser returned
    """

    def __init__(self, result: Result[A_co], pos: object):
        self._result = result
        self._pos = pos

    def __repr__(self) -> str:
        return "ParseResult({!r}, pos={!r})".format(self._result, self._pos)

    @property
    def ok(self) -> bool:
        """
        ``True`` if the parser succeeded.
        """

        return type(self._result) is Ok

    @property
    def pos(self) -> object:
        """
        Cursor position after the parser returned.
        """

        return self._pos

    @property
    def error(self) -> Optional[ParseError]:
        """
        :exc:`ParseError` describing the failure, or ``None`` on success.
        """

        if type(self._result) is Error:
            return ParseError(self._result.pos, self._result.msg)
        return None

    @property
    def value(self) -> A_co:
        """
        Alias for :meth:`ParseResult.unwrap`.
        """

        return self.unwrap()

    def fmap(self, fn: Callable[[A_co], B]) -> "ParseResult[B]":
        """
        Transforms :class:`ParseResult`\\[``A_co``] into
        :class:`ParseResult`\\[``B``] by applying `fn` to value.

        :param fn: Function to apply to value
        """

        return ParseResult(self._result.fmap(fn), self._pos)

    def unwrap(self) -> A_co:
        """
        Returns parsed value if there is one. Otherwise throws
        :exc:`ParseError`.

        :raise: :exc:`ParseError`
        """

        if type(self._result) is Ok:
            return self._result.value
        raise ParseError(self._result.pos, self._result.msg)

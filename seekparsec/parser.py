"""
Parser combinators.
"""

from typing import Any, Callable, Sequence, TypeVar, Union

from .core import combinators, primitive
from .core.parser import ParseFn, ParseObj
from .core.result import Result
from .core.state import State, VecState
from .types import ParseResult

S = TypeVar("S", bound=State[Any, Any])
S_contra = TypeVar("S_contra", bound=State[Any, Any], contravariant=True)
A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")
B_co = TypeVar("B_co", covariant=True)


class Parser(ParseObj[S_contra, A_co]):
    def parse(
            self, stream: Union[S_contra, Sequence[Any]]
    ) -> ParseResult[A_co]:
        """
        Parses input.

        A :class:`State` is used as is, and is left at the position where the
        parser stopped. Any other sequence is wrapped in a fresh
        :class:`VecState`.

        :param stream: Cursor or sequence of tokens to parse
        """

        if isinstance(stream, State):
            state = stream
        else:
            state = VecState(stream)
        result = self.parse_fn(state)  # type: ignore[arg-type]
        return ParseResult(result, state.pos())

    def fmap(self, fn: Callable[[A_co], B]) -> "Parser[S_contra, B]":
        """
        Transforms the result of the parser by applying ``fn`` to it.

        >>> from seekparsec.sequence import satisfy

        >>> satisfy(str.isdigit).fmap(lambda x: int(x) + 1).parse("0").unwrap()
        1

        :param fn: Function to produce new value from the result of the parser
        """

        return fmap(self, fn)

    def bind(
            self, binder: Callable[[A_co], ParseObj[S_contra, B]]
    ) -> "Bind[S_contra, B]":
        """
        Calls ``binder`` with the result of the parser and then applies the
        returned parser at the current position.

        >>> from seekparsec.sequence import one, sym

        >>> parser = one().bind(lambda x: sym(x))

        >>> parser.parse("aa").unwrap()
        'a'
        >>> parser.parse("bb").unwrap()
        'b'
        >>> parser.parse("ab").unwrap()
        Traceback (most recent call last):
        ...
        seekparsec.types.ParseError: at 1: expected 'a'

        :param binder: Function that returns a new parser using the result of
            this parser
        """

        return Bind(self, binder)

    def then(self, other: ParseObj[S_contra, B]) -> "Then[S_contra, B]":
        """
        Applies two parsers sequentially and returns the result of the second
        parser.

        >>> from seekparsec.sequence import sym

        >>> sym("a").then(sym("b")).parse("ab").unwrap()
        'b'

        :param other: Second parser
        """

        return Then(self, other)

    def over(self, other: ParseObj[S_contra, B]) -> "Over[S_contra, A_co]":
        """
        Applies two parsers sequentially and returns the result of the first
        parser.

        >>> from seekparsec.sequence import sym

        >>> sym("a").over(sym("b")).parse("ab").unwrap()
        'a'

        :param other: Second parser
        """

        return Over(self, other)

    def attempt(self) -> "Parser[S_contra, A_co]":
        """
        Applies the parser, and moves the cursor back to where it started if
        the parser fails.

        >>> from seekparsec.sequence import sym

        >>> parser = sym("a").then(sym("b"))

        >>> (parser | sym("a")).parse("ac").unwrap()
        Traceback (most recent call last):
          ...
        seekparsec.types.ParseError: at 1: expected 'b'
        >>> (parser.attempt() | sym("a")).parse("ac").unwrap()
        'a'
        """

        return attempt(self)

    def __rshift__(
            self, other: ParseObj[S_contra, B]) -> "Then[S_contra, B]":
        """
        Alias for :meth:`Parser.then`

        :param other: Second parser
        """

        return Then(self, other)

    def __lshift__(
            self, other: ParseObj[S_contra, B]) -> "Over[S_contra, A_co]":
        """
        Alias for :meth:`Parser.over`

        :param other: Second parser
        """

        return Over(self, other)

    def __or__(
            self, other: ParseObj[S_contra, B]
    ) -> "Either[S_contra, A_co, B]":
        """
        Applies the first parser and returns its' result unless it fails
        without moving the cursor. In this case the second parser is applied
        and its' result is returned.

        >>> from seekparsec.sequence import sym

        >>> parser = sym("a") | sym("b")

        >>> parser.parse("a").unwrap()
        'a'
        >>> parser.parse("b").unwrap()
        'b'
        >>> parser.parse("c").unwrap()
        Traceback (most recent call last):
        ...
        seekparsec.types.ParseError: at 0: expected 'b'

        :param other: Second parser
        """

        return Either(self, other)


class FnParser(Parser[S_contra, A_co]):
    """
    Wraps a plain parse function into a :class:`Parser`.

    >>> from seekparsec.core.result import Ok

    >>> FnParser(lambda state: Ok(state.next())).parse("x").unwrap()
    'x'

    :param fn: Function from a cursor to a parse result
    """

    def __init__(self, fn: ParseFn[S_contra, A_co]):
        self._fn = fn

    def to_fn(self) -> ParseFn[S_contra, A_co]:
        return self._fn

    def parse_fn(self, state: S_contra) -> Result[A_co]:
        return self._fn(state)


class Either(
        combinators.Either[S_contra, A_co, B_co],
        Parser[S_contra, Union[A_co, B_co]]):
    """
    Alternation of ``x`` and ``y``.

    ``y`` is applied only if ``x`` failed without moving the cursor. If ``x``
    failed after moving the cursor, its' failure is returned and ``y`` is not
    tried; wrap ``x`` with :func:`attempt` to allow that.

    :param x: First alternative
    :param y: Second alternative
    """

    def or_(
            self, other: ParseObj[S_contra, B]
    ) -> "Either[S_contra, Union[A_co, B_co], B]":
        """
        Extends the alternation with one more alternative.

        >>> from seekparsec.sequence import sym

        >>> either(sym("a"), sym("b")).or_(sym("c")).parse("c").unwrap()
        'c'

        :param other: Next alternative
        """

        return Either(self, other)


class Bind(combinators.Bind[S_contra, B_co], Parser[S_contra, B_co]):
    """
    Applies ``parser``, then passes its' result to ``binder`` and applies the
    parser returned by ``binder``.

    :param parser: First parser
    :param binder: Function that builds the continuation parser
    """


class Then(combinators.Then[S_contra, B_co], Parser[S_contra, B_co]):
    """
    Applies ``prefix`` then ``postfix`` and returns the result of ``postfix``.

    :param prefix: First parser
    :param postfix: Second parser
    """


class Over(combinators.Over[S_contra, A_co], Parser[S_contra, A_co]):
    """
    Applies ``prefix`` then ``postfix`` and returns the result of ``prefix``.

    :param prefix: First parser
    :param postfix: Second parser
    """


class Delay(combinators.Delay[S_contra, A_co], Parser[S_contra, A_co]):
    """
    A subclass of :class:`Parser` to use as a forward declaration.

    >>> from seekparsec.primitive import pack
    >>> from seekparsec.sequence import sym

    >>> parser = Delay()
    >>> parser.define(sym("a").then(parser).fmap(lambda v: v + 1) | pack(0))

    >>> parser.parse("aaa").unwrap()
    3
    """

    def define(self, parser: ParseObj[S_contra, A_co]) -> None:
        """
        Defines the parser.

        :param parser: Parser definition
        """

        self.define_fn(parser.to_fn())


def either(
        x: ParseObj[S, A], y: ParseObj[S, B]) -> Either[S, A, B]:
    """
    :class:`Either` as a function.

    :param x: First alternative
    :param y: Second alternative
    """

    return Either(x, y)


def bind(
        parser: ParseObj[S, A],
        binder: Callable[[A], ParseObj[S, B]]) -> Bind[S, B]:
    """
    :meth:`Parser.bind` as a function.

    :param parser: First parser
    :param binder: Function that builds the continuation parser
    """

    return Bind(parser, binder)


def then(prefix: ParseObj[S, A], postfix: ParseObj[S, B]) -> Then[S, B]:
    """
    :meth:`Parser.then` as a function.

    :param prefix: First parser
    :param postfix: Second parser
    """

    return Then(prefix, postfix)


def over(prefix: ParseObj[S, A], postfix: ParseObj[S, B]) -> Over[S, A]:
    """
    :meth:`Parser.over` as a function.

    :param prefix: First parser
    :param postfix: Second parser
    """

    return Over(prefix, postfix)


def fmap(parser: ParseObj[S, A], fn: Callable[[A], B]) -> Parser[S, B]:
    """
    :meth:`Parser.fmap` as a function.

    :param parser: Parser
    :param fn: Function to apply to the result of the parser
    """

    return FnParser(combinators.fmap(parser.to_fn(), fn))


def attempt(parser: ParseObj[S, A]) -> Parser[S, A]:
    """
    :meth:`Parser.attempt` as a function.

    :param parser: Parser
    """

    return FnParser(primitive.attempt(parser.to_fn()))


try_ = attempt

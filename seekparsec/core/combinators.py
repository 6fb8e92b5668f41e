import logging
from typing import Any, Callable, TypeVar, Union

from .parser import ParseFn, ParseObj
from .result import Error, Result
from .state import State

S = TypeVar("S", bound=State[Any, Any])
S_contra = TypeVar(
    "S_contra", bound=State[Any, Any], contravariant=True
)
A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")
B_co = TypeVar("B_co", covariant=True)

log = logging.getLogger("seekparsec")


class Either(ParseObj[S_contra, Union[A_co, B_co]]):
    def __init__(
            self, x: ParseObj[S_contra, A_co], y: ParseObj[S_contra, B_co]):
        self.x = x
        self.y = y
        self._x_fn = x.to_fn()
        self._y_fn = y.to_fn()

    def parse_fn(self, state: S_contra) -> Result[Union[A_co, B_co]]:
        pos = state.pos()
        r = self._x_fn(state)
        if type(r) is not Error:
            return r
        if state.pos() == pos:
            return self._y_fn(state)
        log.debug("either: committed at %r", r.pos)
        return r


class Bind(ParseObj[S_contra, B_co]):
    def __init__(
            self, parser: ParseObj[S_contra, A],
            binder: Callable[[A], ParseObj[S_contra, B_co]]):
        self.parser = parser
        self.binder = binder
        self._fn = parser.to_fn()

    def parse_fn(self, state: S_contra) -> Result[B_co]:
        r = self._fn(state)
        if type(r) is Error:
            return r
        return self.binder(r.value).parse_fn(state)


class Then(ParseObj[S_contra, B_co]):
    def __init__(
            self, prefix: ParseObj[S_contra, A],
            postfix: ParseObj[S_contra, B_co]):
        self.prefix = prefix
        self.postfix = postfix
        self._prefix_fn = prefix.to_fn()
        self._postfix_fn = postfix.to_fn()

    def parse_fn(self, state: S_contra) -> Result[B_co]:
        r = self._prefix_fn(state)
        if type(r) is Error:
            return r
        return self._postfix_fn(state)


class Over(ParseObj[S_contra, A_co]):
    def __init__(
            self, prefix: ParseObj[S_contra, A_co],
            postfix: ParseObj[S_contra, B]):
        self.prefix = prefix
        self.postfix = postfix
        self._prefix_fn = prefix.to_fn()
        self._postfix_fn = postfix.to_fn()

    def parse_fn(self, state: S_contra) -> Result[A_co]:
        ra = self._prefix_fn(state)
        if type(ra) is Error:
            return ra
        rb = self._postfix_fn(state)
        if type(rb) is Error:
            return rb
        return ra


def fmap(parse_fn: ParseFn[S, A], fn: Callable[[A], B]) -> ParseFn[S, B]:
    def fmap(state: S) -> Result[B]:
        return parse_fn(state).fmap(fn)

    return fmap


class Delay(ParseObj[S_contra, A_co]):
    def __init__(self) -> None:
        def _fn(state: S_contra) -> Result[A_co]:
            raise RuntimeError("Delayed parser was not defined")

        self._defined = False
        self._fn: ParseFn[S_contra, A_co] = _fn

    def define_fn(self, parse_fn: ParseFn[S_contra, A_co]) -> None:
        if self._defined:
            raise RuntimeError("Delayed parser was already defined")
        self._defined = True
        self._fn = parse_fn

    def parse_fn(self, state: S_contra) -> Result[A_co]:
        return self._fn(state)

    def to_fn(self) -> ParseFn[S_contra, A_co]:
        if self._defined:
            return self._fn
        return super().to_fn()

from typing import Callable, Optional, TypeVar

from .parser import ParseFn
from .result import Error, Ok, Result
from .state import VecState

T = TypeVar("T")


def one() -> ParseFn[VecState[T], T]:
    def one(state: VecState[T]) -> Result[T]:
        if state.at_end():
            return Error(state.pos(), "unexpected end of input")
        return Ok(state.next())

    return one


def satisfy(
        test: Callable[[T], bool],
        label: Optional[str] = None) -> ParseFn[VecState[T], T]:
    def satisfy(state: VecState[T]) -> Result[T]:
        if state.at_end():
            if label is None:
                return Error(state.pos(), "unexpected end of input")
            return Error(state.pos(), "expected " + label)
        t = state.peek()
        if test(t):
            return Ok(state.next())
        if label is None:
            return Error(state.pos(), "unexpected {!r}".format(t))
        return Error(state.pos(), "expected " + label)

    return satisfy


def sym(s: T, label: Optional[str] = None) -> ParseFn[VecState[T], T]:
    msg = "expected " + (repr(s) if label is None else label)

    def sym(state: VecState[T]) -> Result[T]:
        if not state.at_end() and state.peek() == s:
            return Ok(state.next())
        return Error(state.pos(), msg)

    return sym


def eof() -> ParseFn[VecState[object], None]:
    def eof(state: VecState[object]) -> Result[None]:
        if state.at_end():
            return Ok(None)
        return Error(state.pos(), "expected end of input")

    return eof

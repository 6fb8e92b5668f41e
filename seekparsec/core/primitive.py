import logging
from typing import Any, TypeVar

from .parser import ParseFn, ParseObj
from .result import Error, Ok, Result
from .state import State

S = TypeVar("S", bound=State[Any, Any])
S_contra = TypeVar("S_contra", contravariant=True)
A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)

log = logging.getLogger("seekparsec")


class Pack(ParseObj[S_contra, A_co]):
    def __init__(self, x: A_co):
        self._x = x

    def parse_fn(self, state: S_contra) -> Result[A_co]:
        return Ok(self._x)


def fail(msg: str) -> ParseFn[State[Any, Any], None]:
    def fail(state: State[Any, Any]) -> Result[None]:
        return Error(state.pos(), msg)

    return fail


def attempt(parse_fn: ParseFn[S, A]) -> ParseFn[S, A]:
    def attempt(state: S) -> Result[A]:
        pos = state.pos()
        r = parse_fn(state)
        if type(r) is Error:
            log.debug("attempt: rewound from %r to %r", state.pos(), pos)
            state.seek_to(pos)
        return r

    return attempt

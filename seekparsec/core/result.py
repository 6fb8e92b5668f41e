from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from typing_extensions import final

A = TypeVar("A")
A_co = TypeVar("A_co", covariant=True)
B = TypeVar("B")


@final
class Ok(Generic[A_co]):
    __slots__ = "value",

    def __init__(self, value: A_co):
        self.value = value

    def __repr__(self) -> str:
        return "Ok(value={!r})".format(self.value)

    def fmap(self, fn: Callable[[A_co], B]) -> "Ok[B]":
        return Ok(fn(self.value))


@final
@dataclass(frozen=True, repr=False)
class Error:
    __slots__ = "pos", "msg"

    pos: object
    msg: str

    def __repr__(self) -> str:
        return "Error(pos={!r}, msg={!r})".format(self.pos, self.msg)

    def fmap(self, fn: object) -> "Error":
        return self


Result = Union[Ok[A], Error]

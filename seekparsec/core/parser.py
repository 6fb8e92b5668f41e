from abc import abstractmethod
from typing import Callable, Generic, TypeVar

from .result import Result

S_contra = TypeVar("S_contra", contravariant=True)
A_co = TypeVar("A_co", covariant=True)


ParseFn = Callable[[S_contra], Result[A_co]]


class ParseObj(Generic[S_contra, A_co]):
    @abstractmethod
    def parse_fn(self, state: S_contra) -> Result[A_co]:
        ...

    def to_fn(self) -> ParseFn[S_contra, A_co]:
        return self.parse_fn

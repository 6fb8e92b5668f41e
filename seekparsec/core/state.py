from abc import abstractmethod
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")
P = TypeVar("P")


class State(Generic[T, P]):
    __slots__ = ()

    @abstractmethod
    def pos(self) -> P:
        ...

    @abstractmethod
    def seek_to(self, pos: P) -> None:
        ...


class VecState(State[T, int]):
    __slots__ = "_stream", "_pos"

    def __init__(self, stream: Sequence[T], pos: int = 0):
        self._stream = stream
        self._pos = 0
        self.seek_to(pos)

    def __repr__(self) -> str:
        return "VecState(stream={!r}, pos={!r})".format(
            self._stream, self._pos
        )

    def __len__(self) -> int:
        return len(self._stream)

    @property
    def stream(self) -> Sequence[T]:
        return self._stream

    def pos(self) -> int:
        return self._pos

    def seek_to(self, pos: int) -> None:
        if not 0 <= pos <= len(self._stream):
            raise ValueError(
                "Position {!r} is out of range 0..{}".format(
                    pos, len(self._stream)
                )
            )
        self._pos = pos

    def at_end(self) -> bool:
        return self._pos >= len(self._stream)

    def peek(self) -> T:
        if self._pos >= len(self._stream):
            raise EOFError("No more tokens at {!r}".format(self._pos))
        return self._stream[self._pos]

    def next(self) -> T:
        t = self.peek()
        self._pos += 1
        return t

import pytest

from seekparsec import Delay, VecState
from seekparsec.sequence import sym


def test_delay_undefined() -> None:
    with pytest.raises(RuntimeError):
        Delay[VecState[str], str]().parse("a")


def test_delay_defined_twice() -> None:
    parser = Delay[VecState[str], str]()
    parser.define(sym("a"))
    with pytest.raises(RuntimeError):
        parser.define(sym("b"))


def test_seek_out_of_range() -> None:
    state = VecState("ab")
    with pytest.raises(ValueError):
        state.seek_to(3)
    with pytest.raises(ValueError):
        state.seek_to(-1)
    with pytest.raises(ValueError):
        VecState("ab", 5)


def test_read_past_end() -> None:
    state = VecState("a")
    assert state.next() == "a"
    assert state.at_end()
    with pytest.raises(EOFError):
        state.peek()
    with pytest.raises(EOFError):
        state.next()


def test_binder_error_propagates() -> None:
    def binder(v: str) -> Delay[VecState[str], str]:
        raise KeyError(v)

    with pytest.raises(KeyError):
        sym("a").bind(binder).parse("a")

from typing import List, Tuple

import pytest

from seekparsec import ParseError, Parser, attempt, either
from seekparsec.primitive import fail, pack
from seekparsec.sequence import eof, one, satisfy, sym

a = sym("a")
b = sym("b")
c = sym("c")

letter = satisfy(str.isalpha, "letter")
digit = satisfy(str.isdigit, "digit")

ab = a.then(b)
empty_fst = pack("x") | b
empty_snd = a | pack("y")
committed = ab | a
backtracked = ab.attempt() | a

bind_letter = letter.bind(lambda l: digit if l == "d" else letter) | pack("!")
keyword = one().bind(
    lambda k: sym("(") if k == "IF" else sym("{") if k == "WHILE"
    else fail("unknown keyword {}".format(k))
)

DATA_POSITIVE: List[Tuple[Parser[object, object], object, object]] = [
    (pack("a"), "", "a"),
    (a.over(b), "ab", "a"),
    (a.then(b), "ab", "b"),
    (a << b, "ab", "a"),
    (a >> b, "ab", "b"),
    (a.over(b).over(c), "abc", "a"),
    (a.then(b).then(c), "abc", "c"),
    (a.then(b).over(c), "abc", "b"),
    (a.over(b).then(c), "abc", "c"),
    (empty_fst, "a", "x"),
    (empty_fst, "b", "x"),
    (empty_snd, "a", "a"),
    (empty_snd, "b", "y"),
    (committed, "ab", "b"),
    (backtracked, "ab", "b"),
    (backtracked, "ac", "a"),
    (either(a, b).or_(c), "a", "a"),
    (either(a, b).or_(c), "b", "b"),
    (either(a, b).or_(c), "c", "c"),
    (bind_letter, "ab", "b"),
    (bind_letter, "d0", "0"),
    (bind_letter, "00", "!"),
    (keyword, ["IF", "("], "("),
    (keyword, ["WHILE", "{"], "{"),
    (a.fmap(str.upper), "a", "A"),
    (a.over(eof()), "a", "a"),
    (attempt(fail("x")) | pack(42), ["a", "b"], 42),
]


@pytest.mark.parametrize("parser, data, value", DATA_POSITIVE)
def test_positive(
        parser: Parser[object, object], data: object, value: object) -> None:
    assert parser.parse(data).unwrap() == value


DATA_NEGATIVE = [
    (a, "", "at 0: expected 'a'"),
    (a, "b", "at 0: expected 'a'"),
    (ab, "ac", "at 1: expected 'b'"),
    (committed, "ac", "at 1: expected 'b'"),
    (committed, "c", "at 0: expected 'a'"),
    (backtracked, "c", "at 0: expected 'a'"),
    (either(a, b).or_(c), "d", "at 0: expected 'c'"),
    (a.over(b), "a", "at 1: expected 'b'"),
    (bind_letter, "d", "at 1: expected digit"),
    (bind_letter, "dd", "at 1: expected digit"),
    (keyword, ["IF", "{"], "at 1: expected '('"),
    (keyword, ["FOR"], "at 1: unknown keyword FOR"),
    (a.over(eof()), "ab", "at 1: expected end of input"),
    (one(), "", "at 0: unexpected end of input"),
    (satisfy(str.isdigit), "a", "at 0: unexpected 'a'"),
]


@pytest.mark.parametrize("parser, data, expected", DATA_NEGATIVE)
def test_negative(
        parser: Parser[object, object], data: object, expected: str) -> None:
    with pytest.raises(ParseError) as err:
        parser.parse(data).unwrap()
    assert str(err.value) == expected

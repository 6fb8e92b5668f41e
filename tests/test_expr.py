from typing import List, Tuple

import pytest

from seekparsec import ParseError

from .parsers import expr

DATA_POSITIVE: List[Tuple[str, int]] = [
    ("1", 1),
    ("12", 12),
    ("1 + 2", 3),
    ("2 * 3", 6),
    ("1 + 2 * 3", 7),
    ("2 * 3 + 4", 10),
    ("( 1 + 2 ) * 3", 9),
    ("( ( 1 ) + ( 2 ) )", 3),
]


@pytest.mark.parametrize("data, expected", DATA_POSITIVE)
def test_positive(data: str, expected: int) -> None:
    assert expr.eval(data) == expected


DATA_NEGATIVE = [
    ("", "at 0: expected '('"),
    ("1 1", "at 1: expected end of input"),
    ("1 +", "at 2: expected '('"),
    ("1 )", "at 1: expected end of input"),
    ("( 1", "at 2: expected ')'"),
    ("1 + 2 * * 3", "at 4: expected '('"),
]


@pytest.mark.parametrize("data, expected", DATA_NEGATIVE)
def test_negative(data: str, expected: str) -> None:
    with pytest.raises(ParseError) as err:
        expr.eval(data)
    assert str(err.value) == expected

"""
Public API.
"""

from . import primitive, sequence
from .core.state import State, VecState
from .parser import (
    Bind, Delay, Either, FnParser, Over, Parser, Then, attempt, bind, either,
    fmap, over, then, try_
)
from .primitive import Pack, fail, pack
from .types import ParseError, ParseResult

__all__ = (
    "primitive", "sequence",
    "State", "VecState",
    "ParseError", "ParseResult",
    "Pack", "fail", "pack",

    "Bind", "Delay", "Either", "FnParser", "Over", "Parser", "Then",
    "attempt", "bind", "either", "fmap", "over", "then", "try_"
)

__version__ = "0.1.0"

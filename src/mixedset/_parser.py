__all__ = ["parse_set"]

import json

from parsita import ParseError, ParserContext, lit, reg, repsep
from returns import result

from ._render import parse_int
from ._set import Set


class SetParsers(ParserContext, whitespace=r"[ \t\r\n]*"):
    # Only the escapes json.dumps produces, so json.loads cannot fail
    string = reg(r'"([^"\\\x00-\x1f]|\\(["\\/bfnrt]|u[0-9a-fA-F]{4}))*"') > json.loads

    floating_point = reg(r"-?\d+((\.\d+([Ee][+-]?\d+)?)|((\.\d+)?[Ee][+-]?\d+))") > float
    special_float = lit("inf", "-inf", "nan") > float
    integer = reg(r"-?[0-9]+") > parse_int
    number = floating_point | special_float | integer

    element = string | number

    set_literal = lit("Set") >> lit("{") >> repsep(element, ",") << lit("}") > Set.from_iterable


def parse_set(string: str, /) -> result.Result[Set, ParseError]:
    """Read a set back from its `str` form, e.g. `Set{"alpha", 42, 2.5}`.

    Only string, integer, and float elements can be read.
    """
    return SetParsers.set_literal.parse(string)

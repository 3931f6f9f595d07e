__all__ = ["render", "quote", "parse_int"]

import json
from functools import singledispatch


@singledispatch
def render(item: object) -> str:
    """Canonical text form of an element, used for sorting and display.

    Strings are their own canonical form. Everything else falls back to
    `str`. Register an implementation for a type to give it a different
    canonical form.
    """
    return str(item)


@render.register(str)
def render_str(item: str) -> str:
    return item


@render.register(bool)
def render_bool(item: bool) -> str:
    return str(item)


# Well below the interpreter's 4300 digit limit on int/str conversion
DECIMAL_CHUNK_DIGITS = 1000
DECIMAL_CHUNK_BITS = 3300


@render.register(int)
def render_int(item: int) -> str:
    """Decimal text of an integer of any size.

    Integers too long for a single `str` call are converted one chunk of
    digits at a time.
    """
    if item.bit_length() <= DECIMAL_CHUNK_BITS:
        return str(item)

    if item < 0:
        return "-" + render_int(-item)

    chunks = []
    while item > 0:
        item, chunk = divmod(item, 10**DECIMAL_CHUNK_DIGITS)
        chunks.append(chunk)
    head, *rest = reversed(chunks)
    return str(head) + "".join(f"{chunk:0{DECIMAL_CHUNK_DIGITS}d}" for chunk in rest)


def parse_int(text: str) -> int:
    """Inverse of `render_int`, with no limit on the number of digits."""
    if text.startswith("-"):
        return -parse_int(text[1:])

    value = 0
    for start in range(0, len(text), DECIMAL_CHUNK_DIGITS):
        chunk = text[start : start + DECIMAL_CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


@singledispatch
def quote(item: object) -> str:
    """Text form of an element as it appears inside `str(Set)`.

    Same as `render` except that strings are wrapped in double quotes so that
    `"42"` and `42` remain distinguishable.
    """
    return render(item)


@quote.register(str)
def quote_str(item: str) -> str:
    return json.dumps(item, ensure_ascii=False)

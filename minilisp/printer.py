"""Canonical text rendering of minilisp values.

The output of `render` reads back (via minilisp.reader.parser) to a
structurally equal value for every data value. Functions have no literal
syntax and render as opaque `#<...>` forms.
"""

from io import StringIO

from minilisp import LispValue
from minilisp.types.function import BuiltIn, Lambda
from minilisp.types.nil import NilType
from minilisp.types.pair import Pair
from minilisp.types.symbol import Symbol

ESCAPES = {"\\": "\\\\", '"': '\\"', "\n": "\\n"}


def render_string(s: str) -> str:
    return '"' + "".join(ESCAPES.get(c, c) for c in s) + '"'


def _write(value: LispValue, buffer: StringIO) -> None:
    if isinstance(value, NilType):
        buffer.write("()")
    elif isinstance(value, bool):
        buffer.write("true" if value else "false")
    elif isinstance(value, Symbol):
        buffer.write(value.name)
    elif isinstance(value, str):
        buffer.write(render_string(value))
    elif isinstance(value, int):
        buffer.write(str(value))
    elif isinstance(value, Pair):
        buffer.write("(")
        _write(value.first, buffer)
        tail = value.rest
        while isinstance(tail, Pair):
            buffer.write(" ")
            _write(tail.first, buffer)
            tail = tail.rest
        if not isinstance(tail, NilType):
            buffer.write(" . ")
            _write(tail, buffer)
        buffer.write(")")
    elif isinstance(value, BuiltIn):
        buffer.write(f"#<builtin {value.value}>")
    elif isinstance(value, Lambda):
        buffer.write("#<lambda (")
        buffer.write(" ".join(value.params))
        buffer.write(")>")
    else:
        buffer.write(f"#<python {value!r}>")


def render(value: LispValue) -> str:
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()

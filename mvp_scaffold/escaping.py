"""Escaping of free text embedded into generated source files.

Every user-controlled string (titles, pains, taglines, prompts) is passed
through one of these helpers right before it is spliced into a template:

* ``escape_for_literal`` -- JS/TS template literals, single- or
  double-quoted strings and JSX string expressions.
* ``escape_for_json`` -- the body of a JSON string literal
  (``package.json``).
* ``js_literal`` -- renders a Python value as a JavaScript literal whose
  strings all go through ``escape_for_literal``.
"""

from __future__ import annotations

import json
import re
from typing import Any

# Order matters: the backslash goes first so later replacements are not
# escaped a second time.
_LITERAL_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("\\", "\\\\"),
    ("`", "\\`"),
    ("$", "\\$"),
    ("'", "\\'"),
    ('"', '\\"'),
    # Line breaks would end a quoted (non-template) string.
    ("\r", "\\r"),
    ("\n", "\\n"),
    ("\u2028", "\\u2028"),
    ("\u2029", "\\u2029"),
)

_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def escape_for_literal(text: str) -> str:
    """Neutralise *text* for embedding inside a generated JS/TS literal.

    Escapes backslash, backtick, ``$``, single quote and double quote, in
    that order, then line breaks.  The result cannot close a template
    literal or quoted string early and cannot open a ``${...}``
    interpolation.

    Examples::

        escape_for_literal("My `Tool` ${x}") -> "My \\`Tool\\` \\${x}"
        escape_for_literal("it's") -> "it\\'s"
    """
    result = text
    for needle, replacement in _LITERAL_REPLACEMENTS:
        result = result.replace(needle, replacement)
    return result


def escape_for_json(text: str) -> str:
    """Return *text* escaped for use between the quotes of a JSON string."""
    return json.dumps(text, ensure_ascii=False)[1:-1]


def js_string(text: str) -> str:
    """Return *text* as a single-quoted JS string literal."""
    return f"'{escape_for_literal(text)}'"


def js_literal(value: Any, indent: int = 2, _level: int = 0) -> str:
    """Render a Python value as JavaScript source.

    Supports ``None`` (``null``), booleans, numbers, strings, lists/tuples
    and dicts.  Dict keys that are valid identifiers are emitted bare,
    anything else is quoted.  Floats that are whole numbers are emitted
    without a fractional part so ``10.0`` becomes ``10``.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, str):
        return js_string(value)

    pad = " " * (indent * (_level + 1))
    closing_pad = " " * (indent * _level)

    if isinstance(value, (list, tuple)):
        if not value:
            return "[]"
        items = [js_literal(v, indent, _level + 1) for v in value]
        return "[\n" + ",\n".join(pad + item for item in items) + f",\n{closing_pad}]"

    if isinstance(value, dict):
        if not value:
            return "{}"
        entries = []
        for key, item in value.items():
            key_str = str(key)
            key_src = key_str if _JS_IDENTIFIER.match(key_str) else js_string(key_str)
            entries.append(f"{pad}{key_src}: {js_literal(item, indent, _level + 1)}")
        return "{\n" + ",\n".join(entries) + f",\n{closing_pad}}}"

    raise TypeError(f"Cannot render {type(value).__name__} as a JavaScript literal")

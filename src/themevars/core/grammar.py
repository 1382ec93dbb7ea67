"""
Line grammar of the theme variables file.

The file is a small annotated subset of SCSS, read line by line::

    /* Common */
    .helium {
      --primary-color: #2A8463;
      --primary-color-rgb: 42, 132, 99;
      --primary-hover-color: #5440AC;      // (--primary-color) (d10%)
      --focus-color: var(--primary-color);

      &.dark {
        --primary-color: #6374AC;
      }
    }

Three line shapes are recognized:

- module marker: ``/* Common */``
- preset marker: ``&.dark {``
- variable declaration: ``  --name: value;`` with an optional trailing
  ``// (--parent) (d10%)`` annotation. Both parenthesised parts of the
  annotation are optional; the modifier letter is ``d`` (darken) or
  ``l`` (lighten) in any case.

Values are further classified with :func:`find_var_reference`,
:func:`is_rgb_triplet` and :func:`is_hex_color`.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

# The whole line is a single comment: ``/* <label> */``.
_MODULE_MARKER = re.compile(r"\s*/\*\s(?P<label>(?:(?!\*/).)+?)\s\*/\s*")

# ``&.<preset> {`` anywhere on the line.
_PRESET_MARKER = re.compile(r"&\.(?P<preset>\w+)[ \t]*\{")

_VARIABLE_DECLARATION = re.compile(
    r"""
    ^[ \t]+
    (?P<name>--\w+(?:-\w+)*)
    :[ \t]+
    (?P<value>[^;!]*[^;!\s])[ \t]*;
    (?:
        [ \t]+//[ \t]+
        (?:\((?![dDlL]\d+%\))(?P<parent>[^()\s]+)\))?
        [ \t]*
        (?:\((?P<modifier>[dDlL])(?P<amount>\d+)%\))?
    )?
    """,
    re.VERBOSE,
)

# ``var(--name)``, optionally with a fallback: ``var(--name, #fff)``.
_VAR_REFERENCE = re.compile(r"var\(\s*(?P<name>--[\w-]+)\s*(?:,[^)]*)?\)")

_RGB_TRIPLET = re.compile(r"\d{1,3}\s*,\s*\d{1,3}\s*,\s*\d{1,3}")

# Short form needs the "#" so numbers such as 600 or 100 are not colors.
_HEX_COLOR = re.compile(r"#[0-9A-Fa-f]{3}|#?[0-9A-Fa-f]{6}")


@dataclass(frozen=True)
class VariableDeclaration:
    """A matched ``--name: value;`` line."""

    name: str
    value: str
    parent_ref: str | None = None
    modifier: str | None = None
    modifier_value: int | None = None


def match_module_marker(line: str) -> str | None:
    """Return the module label if the line is a ``/* <label> */`` marker."""
    m = _MODULE_MARKER.fullmatch(line.rstrip("\r\n"))
    if m is None:
        return None
    return m.group("label")


def match_preset_marker(line: str) -> str | None:
    """Return the preset name if the line opens an ``&.<preset> {`` block."""
    m = _PRESET_MARKER.search(line)
    if m is None:
        return None
    return m.group("preset")


def match_variable_declaration(line: str) -> VariableDeclaration | None:
    """Parse a variable declaration line, or return None."""
    m = _VARIABLE_DECLARATION.match(line)
    if m is None:
        return None

    amount = m.group("amount")
    return VariableDeclaration(
        name=m.group("name"),
        value=m.group("value"),
        parent_ref=m.group("parent"),
        modifier=m.group("modifier"),
        modifier_value=int(amount) if amount is not None else None,
    )


def find_var_reference(value: str) -> str | None:
    """Return the variable name referenced by ``var(...)`` in a value."""
    m = _VAR_REFERENCE.search(value)
    if m is None:
        return None
    return m.group("name")


def is_rgb_triplet(value: str) -> bool:
    """True for ``r, g, b`` values such as ``99, 116, 151``."""
    return _RGB_TRIPLET.fullmatch(value.strip()) is not None


def is_hex_color(value: str) -> bool:
    """True for ``#RRGGBB`` (``#`` optional) and ``#RGB`` values."""
    return _HEX_COLOR.fullmatch(value.strip()) is not None


def strip_rgb_suffix(name: str, suffixes: Iterable[str]) -> str | None:
    """
    Return the base variable name of an RGB companion.

    ``--primary-color-rgb`` -> ``--primary-color``. Returns None if the
    name carries none of the suffixes.
    """
    for suffix in suffixes:
        if name.endswith(suffix) and len(name) > len(suffix):
            return name[: -len(suffix)]
    return None

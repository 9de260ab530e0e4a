"""Component name helpers.

A component name is used two ways: as a symbol (class, function, JSX tag),
where it is capitalized, and as a file-path segment, where it is left as the
caller typed it unless an ``upper_case`` flag asks otherwise.
"""

from __future__ import annotations

import re

_JS_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def capitalize_first_letter(value: str) -> str:
    """Upper-case the first character and leave the rest untouched.

    Examples::

        capitalize_first_letter("myComponent") -> "MyComponent"
        capitalize_first_letter("") -> ""
    """
    return value[:1].upper() + value[1:]


def is_identifier(value: str) -> bool:
    """Return ``True`` if *value* is an ASCII JavaScript identifier.

    Only ASCII letters, digits, ``_`` and ``$`` are accepted, so Unicode
    names that JavaScript itself would allow (``Ünïcode``) are rejected.
    """
    return bool(_JS_IDENTIFIER_RE.match(value))


def path_segment(value: str, upper_case: bool) -> str:
    """Return the import path segment for a component name."""
    return capitalize_first_letter(value) if upper_case else value

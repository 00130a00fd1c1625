"""
Literal text of scalar leaves: booleans, numbers, strings, addresses and opaque values.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import ctypes
import inspect
import json

from enum import Enum
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .kinds import Kind, TypeInfo
from .utils import class_name, safe_repr, safe_str


# Methods --------------------------------------------------------------------------------------------------------------

def quote_string(text: str | bytes | bytearray) -> str:
    """
    Quote a string as a double-quoted literal.

    Control characters, double quotes and backslashes are escaped, non-ASCII characters
    are kept. Binary strings are rendered as bytes literals.

    Examples:
        >>> print(quote_string('say "hi"'))
        "say \\"hi\\""
        >>> quote_string(b"abc")
        "b'abc'"
    """
    if isinstance(text, (bytes, bytearray)):
        return safe_repr(bytes(text))
    return json.dumps(text, ensure_ascii=False)


def string_literal(value: str | bytes | bytearray, quote: bool, humanize: bool = False) -> str:
    """
    Text of a string value.

    The string is quoted when quoting is requested, or in humanized output when it is
    non-empty but whitespace-only, so an apparently blank value stays visible.
    Unquoted binary strings are decoded as UTF-8 with escapes for invalid bytes.
    """
    if isinstance(value, (bytes, bytearray)):
        text = bytes(value).decode("utf-8", errors="backslashreplace")
    else:
        text = value
    if quote or (humanize and text and not text.strip()):
        return quote_string(value)
    return text


def scalar_literal(value: Any, info: TypeInfo) -> str:
    """
    Canonical literal of a scalar leaf.

    Booleans and numbers use their repr, ctypes values the repr of their Python value,
    enum members their name, addresses a hexadecimal number and other opaque
    values their str() form.

    Examples:
        >>> from prettydump.kinds import describe
        >>> scalar_literal(3.5, describe(float))
        '3.5'
        >>> scalar_literal(True, describe(bool))
        'True'
    """
    kind = info.kind
    if kind is Kind.ADDRESS:
        return address_literal(value)
    if isinstance(value, ctypes._SimpleCData):
        return safe_repr(value.value)
    if kind in (Kind.BOOL, Kind.INTEGER, Kind.UNSIGNED, Kind.FLOAT, Kind.COMPLEX):
        return safe_repr(value)
    if isinstance(value, Enum):
        name = value.name
        return name if name is not None else safe_repr(value)
    return safe_str(value)


def typed_literal(name: str, literal: str) -> str:
    """
    Prefix a literal with its type name, e.g. 'int(42)'.

    The parentheses of a complex literal are not doubled: 'complex(1+2j)'.
    """
    if literal.startswith("(") and literal.endswith(")"):
        return f"{name}{literal}"
    return f"{name}({literal})"


def address_literal(value: Any) -> str:
    """Hexadecimal address held by a ctypes pointer or c_void_p, 0x0 for null."""
    try:
        address = ctypes.cast(value, ctypes.c_void_p).value
    except (TypeError, ctypes.ArgumentError):
        address = getattr(value, "value", None)
    return hex(address or 0)


def handle_literal(value: Any) -> str:
    """Hexadecimal identity of an opaque handle such as an iterator or stream."""
    return hex(id(value))


def function_literal(value: Any, fully_qualified: bool = False) -> str:
    """
    Opaque text of a callable: 'func name(signature) {...}' or 'class Name {...}'.
    """
    if isinstance(value, type):
        return f"class {class_name(value, fully_qualified=fully_qualified)} {{...}}"
    name = getattr(value, "__qualname__", None) or getattr(value, "__name__", None) or class_name(value)
    try:
        signature = str(inspect.signature(value))
    except (TypeError, ValueError):
        signature = "(...)"
    return f"func {name}{signature} {{...}}"

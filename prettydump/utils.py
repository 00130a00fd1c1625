"""
Prettydump utilities shared across the package.

Contains helpers used by multiple modules to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------


def class_name(
    obj: Any,
    fully_qualified: bool = False,
    fully_qualified_builtins: bool = False,
) -> str:
    """
    Get the class name of an object or a class.

    Returns the class name whether given an instance or the class itself, so both
    `class_name(10)` and `class_name(int)` return 'int'. Classes defined inside
    functions are reported by their qualified name ('outer.<locals>.Inner' becomes 'Inner').

    Parameters:
        obj (Any): An object or a class.
        fully_qualified (bool): If true, returns 'module.Name' for user objects or classes.
        fully_qualified_builtins (bool): If true, returns 'builtins.Name' for builtin objects or classes.

    Returns:
        str: The class name.

    Examples:
        >>> class_name(10)
        'int'
        >>> class_name(10, fully_qualified_builtins=True)
        'builtins.int'
        >>> from collections import OrderedDict
        >>> class_name(OrderedDict, fully_qualified=True)
        'collections.OrderedDict'
    """
    cls = obj if isinstance(obj, type) else type(obj)

    name = getattr(cls, "__name__", None) or repr(cls)
    module = getattr(cls, "__module__", None)

    if module == "builtins":
        return f"{module}.{name}" if fully_qualified_builtins else name
    if fully_qualified and module:
        return f"{module}.{name}"
    return name


def safe_repr(obj: Any) -> str:
    """
    repr() that never raises; a broken __repr__ yields a placeholder
    """
    try:
        return repr(obj)
    except Exception as e:
        return f"<{class_name(obj)} object (repr failed: {type(e).__name__})>"


def safe_str(obj: Any) -> str:
    """
    str() that never raises; a broken __str__ yields a placeholder
    """
    try:
        return str(obj)
    except Exception as e:
        return f"<{class_name(obj)} object (str failed: {type(e).__name__})>"

"""
Type checking decorator for cdo.

Provides runtime argument checks that are only active while pytest is loaded.
"""

import functools
import inspect
import os
import sys
from pathlib import Path
from typing import get_type_hints, get_origin, get_args, Union


# True whenever the test runner imported us
TYPECHECK_ENABLED = "pytest" in sys.modules


def _type_name(expected_type) -> str:
    return getattr(expected_type, "__name__", str(expected_type))


def _check_type(value, expected_type, param_name: str):
    """Check if value matches expected type, raise TypeError if not."""
    origin = get_origin(expected_type)

    if value is None:
        if expected_type is type(None):
            return
        if origin is Union and type(None) in get_args(expected_type):
            return
        raise TypeError(f"Parameter '{param_name}' expected {_type_name(expected_type)}, got None")

    if origin is None:
        if not isinstance(expected_type, type):
            return  # TypeVar, Any and friends
        if expected_type is Path:
            # Paths may arrive as plain strings from the command line
            if not isinstance(value, (Path, str, os.PathLike)):
                raise TypeError(f"Parameter '{param_name}' expected Path, got {type(value).__name__}")
        elif not isinstance(value, expected_type):
            raise TypeError(
                f"Parameter '{param_name}' expected {expected_type.__name__}, got {type(value).__name__}"
            )

    elif origin is list:
        if not isinstance(value, list):
            raise TypeError(f"Parameter '{param_name}' expected list, got {type(value).__name__}")
        args = get_args(expected_type)
        if args:
            for i, elem in enumerate(value):
                _check_type(elem, args[0], f"{param_name}[{i}]")

    elif origin is Union:
        args = [arg for arg in get_args(expected_type) if arg is not type(None)]
        for arg in args:
            try:
                _check_type(value, arg, param_name)
                return
            except TypeError:
                continue
        raise TypeError(
            f"Parameter '{param_name}' expected one of {[_type_name(a) for a in args]}, "
            f"got {type(value).__name__}"
        )


def typecheck(func):
    """Decorator that checks function argument types against type hints.

    Only active under pytest. Otherwise returns the function unchanged.
    """
    if not TYPECHECK_ENABLED:
        return func

    sig = inspect.signature(func)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            hints = get_type_hints(func)
        except Exception:
            # Unresolvable forward references, nothing to check against
            return func(*args, **kwargs)

        bound = sig.bind_partial(*args, **kwargs)
        for param_name, value in bound.arguments.items():
            if param_name in hints:
                _check_type(value, hints[param_name], param_name)

        return func(*args, **kwargs)

    return wrapper


def typecheck_methods(cls):
    """Class decorator that applies typecheck to __init__ and the public methods defined on cls."""
    if not TYPECHECK_ENABLED:
        return cls

    for name, member in list(vars(cls).items()):
        # staticmethod/classmethod/property objects are not plain functions and are left alone
        if not inspect.isfunction(member):
            continue
        if name.startswith('_') and name != '__init__':
            continue
        setattr(cls, name, typecheck(member))

    return cls

# -*- coding: utf-8 -*-

"""Argument shape checks shared by the anagram table operations."""

from collections.abc import Mapping, Sequence
from typing import Any

__author__ = 'Aaron Hosford'
__all__ = [
    'is_string',
    'is_string_sequence',
    'is_boolean',
    'is_positive_integer',
    'is_mapping',
]


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_string_sequence(value: Any) -> bool:
    """Whether the value is a finite sequence of strings. A string is not accepted as a sequence
    of its own characters."""
    if isinstance(value, (str, bytes, bytearray)) or not isinstance(value, Sequence):
        return False
    return all(isinstance(item, str) for item in value)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_positive_integer(value: Any) -> bool:
    # bool is an int subclass, but True is not a size.
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)

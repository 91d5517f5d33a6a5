# -*- coding: utf-8 -*-

"""
Alphagram construction.

The alphagram of a string is the string's characters sorted in ascending order. Two strings are
anagrams of each other exactly when their alphagrams are equal, which makes the alphagram a
natural hash key for grouping anagrams. See http://en.wikipedia.org/wiki/Alphagram.
"""

from anagram_hash.exceptions import InvalidArgument
from anagram_hash.validation import is_string

__author__ = 'Aaron Hosford'
__all__ = [
    'get_key',
]


def get_key(text: str) -> str:
    """Return the alphagram of the text, usable as an anagram hash key."""
    if not is_string(text):
        raise InvalidArgument("Must provide a string.", 'get_key', text)
    if len(text) <= 1:
        return text
    # Characters compare by code point; no case folding or normalization is applied.
    return ''.join(sorted(text))

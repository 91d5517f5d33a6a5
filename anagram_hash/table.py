# -*- coding: utf-8 -*-

"""The anagram hash table."""

import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union, Mapping, Any

from sortedcontainers import SortedDict

from anagram_hash import alphagrams
from anagram_hash.config import KeyOptions
from anagram_hash.exceptions import InvalidArgument
from anagram_hash.validation import is_string, is_string_sequence, is_boolean

__author__ = 'Aaron Hosford'
__all__ = [
    'AnagramHashTable',
]


LOGGER = logging.getLogger(__name__)


class AnagramHashTable:
    """
    A hash table of anagram sets, keyed by alphagram.

    Each key maps to the list of distinct strings sharing that alphagram, in the order they were
    first added. Lists are never empty. Nothing returned by a query aliases the table's internal
    lists, so callers are free to modify what they get back.
    """

    @classmethod
    def from_word_list(cls, file_path: str, encoding: str = 'utf-8') -> 'AnagramHashTable':
        """Load a word list file and return a table built from it."""
        from anagram_hash.word_sets import WordListUtils
        return cls(WordListUtils.load_word_list(file_path, encoding))

    def __init__(self, words: Sequence[str] = None):
        if words is not None and not is_string_sequence(words):
            raise InvalidArgument("Must provide a sequence of strings.", 'AnagramHashTable', words)
        self._hash = SortedDict()
        if words:
            self._update(words)

    def __len__(self) -> int:
        return len(self._hash)

    def __contains__(self, word) -> bool:
        if not is_string(word):
            return False
        group = self._hash.get(alphagrams.get_key(word))
        return group is not None and word in group

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._hash))

    def __eq__(self, other):
        if not isinstance(other, AnagramHashTable):
            return NotImplemented
        return self is other or self._hash == other._hash

    def __ne__(self, other):
        if not isinstance(other, AnagramHashTable):
            return NotImplemented
        return not self == other

    __hash__ = None

    def __repr__(self) -> str:
        return '<%s: %s keys, %s words>' % (type(self).__name__, len(self._hash), self.word_count)

    @property
    def word_count(self) -> int:
        """The total number of distinct strings in the table."""
        return sum(len(group) for group in self._hash.values())

    @staticmethod
    def get_key(text: str) -> str:
        """Return the hash key (alphagram) for the given text."""
        return alphagrams.get_key(text)

    def _update(self, words: Iterable[str]) -> None:
        # Words must already be validated.
        hash_table = self._hash
        for word in words:
            key = alphagrams.get_key(word)
            group = hash_table.get(key)
            if group is None:
                hash_table[key] = [word]
            elif word not in group:
                group.append(word)

    def push(self, *words: str) -> 'AnagramHashTable':
        """Add the strings to the table, ignoring any that are already present. Returns the table
        itself, so calls can be chained."""
        for word in words:
            if not is_string(word):
                raise InvalidArgument("Must provide strings.", 'push', word)
        self._update(words)
        return self

    def get(self, word: str = None, as_key: bool = False) -> Optional[Union[List[str], List[List[str]]]]:
        """
        Return anagrams stored in the table.

        With no arguments, return every anagram set having at least two members. Given a word,
        return the other stored anagrams of that word. Given a word and as_key=True, treat the
        word as a hash key and return the full anagram set filed under it. In every case, None
        is returned if there is nothing to report.
        """
        if not is_boolean(as_key):
            raise InvalidArgument("Key flag must be a boolean.", 'get', as_key)
        if word is None:
            if as_key:
                raise InvalidArgument("A key must be provided when the key flag is set.", 'get', word)
            sets = [list(group) for group in self._hash.values() if len(group) > 1]
            return sets or None
        if not is_string(word):
            raise InvalidArgument("Must provide a string.", 'get', word)
        if as_key:
            group = self._hash.get(word)
            return None if group is None else list(group)
        group = self._hash.get(alphagrams.get_key(word))
        if group is None:
            return None
        others = [member for member in group if member != word]
        return others or None

    def keys(self, options: Union[KeyOptions, Mapping[str, Any]] = None) -> List[str]:
        """
        Return the table's hash keys in ascending order.

        The options, either a KeyOptions instance or a mapping with optional 'min' and 'max'
        entries, restrict the result to keys whose anagram sets have between min and max members,
        inclusive.
        """
        if options is None:
            return list(self._hash)
        options = KeyOptions.coerce(options)
        return [key for key, group in self._hash.items() if options.accepts(len(group))]

    def iter_groups(self, min_size: int = 1) -> Iterator[Tuple[str, List[str]]]:
        """Iterate over (key, anagram set) pairs for sets having at least min_size members. The
        sets are copies."""
        for key, group in list(self._hash.items()):
            if len(group) >= min_size:
                yield key, list(group)

    def merge(self, *tables: 'AnagramHashTable') -> 'AnagramHashTable':
        """Merge the other tables into this one, in order. Returns the table itself."""
        for table in tables:
            if not isinstance(table, AnagramHashTable):
                raise InvalidArgument("Must provide AnagramHashTable instances.", 'merge', table)
        hash_table = self._hash
        for table in tables:
            if table is self:
                continue
            LOGGER.debug("Merging %r into %r.", table, self)
            for key, incoming in table._hash.items():
                group = hash_table.get(key)
                if group is None:
                    hash_table[key] = list(incoming)
                    continue
                for word in incoming:
                    if word not in group:
                        group.append(word)
        return self

    def copy(self, keys: Sequence[str] = None) -> 'AnagramHashTable':
        """Return an independent copy of the table. If keys are given, only the anagram sets
        filed under those keys are copied; keys missing from the table are skipped."""
        if keys is None:
            keys = list(self._hash)
        elif not is_string_sequence(keys):
            raise InvalidArgument("Keys must be a sequence of strings.", 'copy', keys)
        result = type(self)()
        hash_table = self._hash
        for key in keys:
            group = hash_table.get(key)
            if group is not None:
                result._hash[key] = list(group)
        LOGGER.debug("Copied %s of %s keys from %r.", len(result._hash), len(hash_table), self)
        return result

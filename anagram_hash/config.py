# -*- coding: utf-8 -*-

"""
Anagram table configuration
"""

import configparser
import math
import os
from typing import Optional, Mapping, Any, Tuple, Union

from anagram_hash.exceptions import InvalidArgument
from anagram_hash.validation import is_positive_integer, is_mapping

__author__ = 'Aaron Hosford'
__all__ = [
    'KeyOptions',
    'AnagramConfig',
]


class KeyOptions:
    """Bounds on the number of anagrams a key must have to be listed. The maximum defaults to
    unbounded."""

    def __init__(self, min_size: int = 1, max_size: Optional[int] = None):
        if not is_positive_integer(min_size):
            raise InvalidArgument("`min` option must be a positive integer.", 'keys', min_size)
        if max_size is not None and not is_positive_integer(max_size):
            raise InvalidArgument("`max` option must be a positive integer.", 'keys', max_size)
        self._min_size = min_size
        self._max_size = max_size

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> 'KeyOptions':
        """Build key options from a mapping with optional 'min' and 'max' entries. Any other
        entries are ignored."""
        if not is_mapping(options):
            raise InvalidArgument("Options must be a mapping.", 'keys', options)
        # An explicit None is a value like any other, and is rejected as such.
        max_size = options['max'] if 'max' in options else None
        if 'max' in options and max_size is None:
            raise InvalidArgument("`max` option must be a positive integer.", 'keys', max_size)
        return cls(options.get('min', 1), max_size)

    @classmethod
    def coerce(cls, options: Union['KeyOptions', Mapping[str, Any]]) -> 'KeyOptions':
        if isinstance(options, KeyOptions):
            return options
        return cls.from_mapping(options)

    @property
    def min_size(self) -> int:
        """The fewest anagrams a key may have."""
        return self._min_size

    @property
    def max_size(self) -> Union[int, float]:
        """The most anagrams a key may have; infinite if unbounded."""
        return math.inf if self._max_size is None else self._max_size

    def accepts(self, size: int) -> bool:
        """Whether an anagram set of the given size falls within the bounds."""
        return self.min_size <= size <= self.max_size

    def __eq__(self, other):
        if not isinstance(other, KeyOptions):
            return NotImplemented
        return self._min_size == other._min_size and self._max_size == other._max_size

    def __hash__(self):
        return hash((self._min_size, self._max_size))

    def __repr__(self):
        return type(self).__name__ + repr((self._min_size, self._max_size))


class AnagramConfig:
    """Word list and listing configuration, read from an ini file"""

    def __init__(self, config_file_path: str, defaults: Mapping[str, Any] = None):
        config_file_path = os.path.abspath(os.path.expanduser(config_file_path))

        if not os.path.isfile(config_file_path):
            raise FileNotFoundError(config_file_path)

        self._config_file_path = config_file_path

        data_folder = os.path.dirname(config_file_path)

        if defaults is None:
            defaults = {}
        else:
            defaults = dict(defaults)
        for option, value in (('Files', ''),
                              ('Encoding', 'utf-8'),
                              ('Min Size', '2'),
                              ('Max Size', '')):
            if option not in defaults:
                defaults[option] = value

        config_parser = configparser.ConfigParser(defaults)
        config_parser.read(self._config_file_path, encoding='utf-8')

        # Word lists
        self._word_list_files = tuple(
            os.path.join(data_folder, path.strip())
            for path in config_parser.get('Word Lists', 'Files', fallback=defaults['Files']).split(';')
            if path.strip()
        )
        self._encoding = config_parser.get('Word Lists', 'Encoding',
                                           fallback=defaults['Encoding']).strip()

        # Listing
        min_size = config_parser.get('Listing', 'Min Size', fallback=defaults['Min Size']).strip()
        max_size = config_parser.get('Listing', 'Max Size', fallback=defaults['Max Size']).strip()
        try:
            self._key_options = KeyOptions(int(min_size), int(max_size) if max_size else None)
        except ValueError as error:
            raise ValueError("Bad listing size in %s: %s" % (config_file_path, error)) from error

    @property
    def config_file_path(self) -> str:
        """The expanded, absolute path to the configuration file"""
        return self._config_file_path

    @property
    def word_list_files(self) -> Tuple[str, ...]:
        """Word list file paths, in load order"""
        return self._word_list_files

    @property
    def encoding(self) -> str:
        """The text encoding of the word list files"""
        return self._encoding

    @property
    def key_options(self) -> KeyOptions:
        """The size bounds used when listing keys"""
        return self._key_options

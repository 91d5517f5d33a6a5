# -*- coding: utf-8 -*-

"""Word list loading & saving."""

import json
import logging
import os
from typing import Iterable, List, Union

from sortedcontainers import SortedSet

from anagram_hash.exceptions import InvalidArgument
from anagram_hash.table import AnagramHashTable
from anagram_hash.validation import is_string_sequence

__author__ = 'Aaron Hosford'
__all__ = [
    'WordListUtils',
]


LOGGER = logging.getLogger(__name__)


class WordListUtils:

    @staticmethod
    def is_json_path(file_path: str) -> bool:
        return os.path.splitext(file_path)[1].lower() == '.json'

    @staticmethod
    def load_word_list(file_path: str, encoding: str = 'utf-8') -> List[str]:
        """Load a word list, either a JSON array of strings or a text file with one word per line.
        Order and duplicates are preserved; blank lines are skipped."""
        with open(file_path, encoding=encoding) as file:
            if WordListUtils.is_json_path(file_path):
                words = json.load(file)
                if not is_string_sequence(words):
                    raise InvalidArgument("Word list must be a JSON array of strings.",
                                          'load_word_list', file_path)
                words = list(words)
            else:
                words = [line.strip() for line in file if line.strip()]
        LOGGER.info("Loaded %s words from %s.", len(words), file_path)
        return words

    @staticmethod
    def save_word_list(file_path: str, words: Iterable[str], encoding: str = 'utf-8') -> None:
        """Save the distinct words, sorted, to a word list file."""
        words = SortedSet(words)
        with open(file_path, 'w', encoding=encoding) as file:
            if WordListUtils.is_json_path(file_path):
                json.dump(list(words), file, ensure_ascii=False, indent=2)
                file.write('\n')
            else:
                for word in words:
                    file.write(word)
                    file.write('\n')
        LOGGER.info("Saved %s words to %s.", len(words), file_path)

    @staticmethod
    def save_table(file_path: str, table: AnagramHashTable, encoding: str = 'utf-8') -> None:
        """Save every word stored in the table to a word list file."""
        WordListUtils.save_word_list(
            file_path,
            (word for _, group in table.iter_groups() for word in group),
            encoding
        )

    @staticmethod
    def load_table(file_paths: Union[str, Iterable[str]], encoding: str = 'utf-8') -> AnagramHashTable:
        """Load one or more word lists and merge them, in order, into a single table."""
        if isinstance(file_paths, str):
            file_paths = [file_paths]
        table = AnagramHashTable()
        for file_path in file_paths:
            table.merge(AnagramHashTable(WordListUtils.load_word_list(file_path, encoding)))
        return table

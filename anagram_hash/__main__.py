# -*- coding: utf-8 -*-

"""Starts the anagram shell, optionally preloading word lists."""

import argparse
import logging

from anagram_hash.config import AnagramConfig
from anagram_hash.repl import repl
from anagram_hash.word_sets import WordListUtils


def parse_args(args=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='anagram_hash', description=__doc__)
    parser.add_argument('word_lists', nargs='*', metavar='WORD_LIST',
                        help="word list files (.json arrays or one word per line)")
    parser.add_argument('-c', '--config', help="ini file naming word lists and listing bounds")
    parser.add_argument('-e', '--encoding', default='utf-8', help="word list encoding")
    parser.add_argument('-v', '--verbose', action='store_true', help="log progress")
    return parser.parse_args(args)


def main(args=None) -> None:
    options = parse_args(args)
    logging.basicConfig(level=logging.DEBUG if options.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    config = AnagramConfig(options.config) if options.config else None
    table = WordListUtils.load_table(options.word_lists, options.encoding)
    repl(table, config)


if __name__ == '__main__':
    main()

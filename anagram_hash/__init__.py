# -*- coding: utf-8 -*-

"""
Anagram Hash
============
Anagram hash tables for building and querying anagram dictionaries from word lists.

Copyright (c) Aaron Hosford 2015-2021
MIT License (http://opensource.org/licenses/MIT)

Every string added to a table is filed under its alphagram, the string's characters sorted in
ascending order. Strings sharing an alphagram are anagrams of one another, so each entry in the
table holds one anagram set, kept in the order its members were first seen and free of
duplicates. Tables can be queried for all anagram sets, for the anagrams of a single word, or
for the keys whose sets fall within a size range, and they can be merged with one another or
copied, in whole or in part.
"""


__author__ = 'Aaron Hosford'
__copyright__ = "Copyright (c) 2015-2021, Aaron Hosford"
__credits__ = ['Aaron Hosford']
__license__ = 'MIT'
__version__ = '1.0'
__maintainer__ = 'Aaron Hosford'
__email__ = 'hosford42@gmail.com'
__status__ = 'Production'

__all__ = [
    '__author__',
    '__copyright__',
    '__credits__',
    '__license__',
    '__version__',
    '__maintainer__',
    '__email__',
    '__status__',
]

#!/usr/bin/env python
# -*- coding: utf-8 -*-


"""Setup script for Anagram Hash."""

from codecs import open as codecs_open
from os import path

from setuptools import setup

from anagram_hash import __author__, __version__


HERE = path.abspath(path.dirname(__file__))


# Default long description
LONG_DESCRIPTION = """

Anagram Hash
============

*Anagram hash tables for word lists*

""".strip()


# Get the long description from the relevant file. First try README.rst,
# then fall back on the default string defined here in this file.
if path.isfile(path.join(HERE, 'README.rst')):
    with codecs_open(path.join(HERE, 'README.rst'), encoding='utf-8', mode='r') as description_file:
        LONG_DESCRIPTION = description_file.read()


# See https://setuptools.pypa.io/en/latest/references/keywords.html for a full list
# of parameters and their meanings.
setup(
    name='anagram-hash',
    version=__version__,
    author=__author__,
    author_email='hosford42@gmail.com',
    url='https://github.com/hosford42/anagram-hash',
    license='MIT',
    platforms=['any'],
    description='Anagram Hash: anagram hash tables for building and querying anagram dictionaries',
    long_description=LONG_DESCRIPTION,

    # See https://pypi.org/classifiers/
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Text Processing :: Linguistic',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
    ],

    keywords='anagram alphagram hash table word list',
    packages=['anagram_hash'],
    python_requires='>=3.6',
    install_requires=['sortedcontainers'],
    extras_require={'test': ['pytest']},
    entry_points={
        'console_scripts': [
            'anagram-hash=anagram_hash.__main__:main',
        ],
    },
)

"""Tests for key options and the ini configuration file."""

import math
import os

import pytest

from anagram_hash.config import AnagramConfig, KeyOptions
from anagram_hash.exceptions import InvalidArgument


class TestKeyOptions:

    def test_defaults(self):
        options = KeyOptions()
        assert options.min_size == 1
        assert options.max_size == math.inf
        assert options.accepts(1)
        assert options.accepts(10 ** 9)

    def test_bounds_are_inclusive(self):
        options = KeyOptions(2, 3)
        assert not options.accepts(1)
        assert options.accepts(2)
        assert options.accepts(3)
        assert not options.accepts(4)

    def test_from_mapping(self):
        assert KeyOptions.from_mapping({'min': 2}) == KeyOptions(2)
        assert KeyOptions.from_mapping({'max': 4}) == KeyOptions(1, 4)
        assert KeyOptions.from_mapping({}) == KeyOptions()

    def test_coerce(self):
        options = KeyOptions(3)
        assert KeyOptions.coerce(options) is options
        assert KeyOptions.coerce({'min': 3}) == options

    @pytest.mark.parametrize('bound', [0, -3, 2.5, '1', True, False])
    def test_rejects_bad_bounds(self, bound):
        with pytest.raises(InvalidArgument):
            KeyOptions(bound)
        with pytest.raises(InvalidArgument):
            KeyOptions(1, bound)

    def test_rejects_non_mapping(self):
        with pytest.raises(InvalidArgument):
            KeyOptions.from_mapping([('min', 1)])

    def test_repr(self):
        assert repr(KeyOptions(2)) == 'KeyOptions(2, None)'


def write_config(folder, text):
    path = os.path.join(str(folder), 'anagrams.ini')
    with open(path, 'w', encoding='utf-8') as file:
        file.write(text)
    return path


def test_config(tmp_path):
    path = write_config(tmp_path, "[Word Lists]\n"
                                  "Files = words.txt; more/words.json\n"
                                  "Encoding = latin-1\n"
                                  "\n"
                                  "[Listing]\n"
                                  "Min Size = 3\n"
                                  "Max Size = 5\n")
    config = AnagramConfig(path)
    assert config.config_file_path == os.path.abspath(path)
    assert config.word_list_files == (os.path.join(str(tmp_path), 'words.txt'),
                                      os.path.join(str(tmp_path), 'more/words.json'))
    assert config.encoding == 'latin-1'
    assert config.key_options == KeyOptions(3, 5)


def test_config_defaults(tmp_path):
    config = AnagramConfig(write_config(tmp_path, "[Word Lists]\nFiles = words.txt\n"))
    assert config.encoding == 'utf-8'
    assert config.key_options == KeyOptions(2)

    config = AnagramConfig(write_config(tmp_path, ""))
    assert config.word_list_files == ()
    assert config.key_options.max_size == math.inf


def test_config_caller_defaults(tmp_path):
    config = AnagramConfig(write_config(tmp_path, "[Listing]\nMax Size = 9\n"), {'Min Size': '4'})
    assert config.key_options == KeyOptions(4, 9)


def test_config_bad_size(tmp_path):
    with pytest.raises(ValueError):
        AnagramConfig(write_config(tmp_path, "[Listing]\nMin Size = many\n"))
    with pytest.raises(InvalidArgument):
        AnagramConfig(write_config(tmp_path, "[Listing]\nMin Size = 0\n"))


def test_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        AnagramConfig(os.path.join(str(tmp_path), 'missing.ini'))

"""Tests for the interactive anagram shell."""

import io
import os

from anagram_hash.config import AnagramConfig, KeyOptions
from anagram_hash.repl import AnagramCmd
from anagram_hash.table import AnagramHashTable


def run(anagram_cmd, *lines):
    anagram_cmd.stdout.seek(0)
    anagram_cmd.stdout.truncate()
    for line in lines:
        anagram_cmd.onecmd(line)
    return anagram_cmd.stdout.getvalue()


def make_cmd(words=()):
    return AnagramCmd(AnagramHashTable(list(words)), stdout=io.StringIO())


def test_push_and_get():
    anagram_cmd = make_cmd()
    output = run(anagram_cmd, 'push dog god cat', 'get dog')
    assert output == 'god\n'
    assert run(anagram_cmd, 'cat') == "No anagrams of 'cat'.\n"


def test_key_and_alphagram():
    anagram_cmd = make_cmd(['bat', 'tab'])
    assert run(anagram_cmd, 'key abt') == 'bat, tab\n'
    assert run(anagram_cmd, 'key bat') == "No anagram set under 'bat'.\n"
    assert run(anagram_cmd, 'alphagram tab') == 'abt\n'


def test_keys_and_sets_use_size_bounds():
    anagram_cmd = make_cmd(['bat', 'tab', 'dog', 'cat', 'act'])
    assert anagram_cmd.key_options == KeyOptions(2)
    assert run(anagram_cmd, 'keys') == '  abt\n  act\n2 keys listed.\n'
    assert run(anagram_cmd, 'sets') == '  abt: bat, tab\n  act: cat, act\n'
    assert run(anagram_cmd, 'get') == run(anagram_cmd, 'sets')


def test_count_and_clear():
    anagram_cmd = make_cmd(['bat', 'tab', 'dog'])
    assert run(anagram_cmd, 'count') == '2 keys, 3 words.\n'
    run(anagram_cmd, 'clear')
    assert run(anagram_cmd, 'count') == '0 keys, 0 words.\n'
    assert run(anagram_cmd, 'sets') == 'No anagram sets.\n'


def test_quit():
    anagram_cmd = make_cmd()
    assert anagram_cmd.onecmd('quit')
    assert anagram_cmd.onecmd('exit')
    assert not anagram_cmd.onecmd('quit now')


def test_errors_do_not_stop_the_loop(tmp_path):
    anagram_cmd = make_cmd()
    output = run(anagram_cmd, 'load ' + os.path.join(str(tmp_path), 'missing.txt'))
    assert 'FileNotFoundError' in output


def test_load_save_and_config(tmp_path):
    folder = str(tmp_path)
    with open(os.path.join(folder, 'words.txt'), 'w', encoding='utf-8') as file:
        file.write('rome\nmore\nomer\nstone\nnotes\n')
    config_path = os.path.join(folder, 'anagrams.ini')
    with open(config_path, 'w', encoding='utf-8') as file:
        file.write('[Word Lists]\nFiles = words.txt\n\n[Listing]\nMin Size = 3\n')

    anagram_cmd = AnagramCmd(config=AnagramConfig(config_path), stdout=io.StringIO())
    assert anagram_cmd.table.word_count == 5
    assert run(anagram_cmd, 'keys') == '  emor\n1 keys listed.\n'

    saved_path = os.path.join(folder, 'saved.txt')
    run(anagram_cmd, 'save ' + saved_path)
    other = make_cmd()
    output = run(other, 'load ' + saved_path)
    assert output == 'Added 5 words from ' + saved_path + '.\n'
    assert other.table == AnagramHashTable(['more', 'notes', 'omer', 'rome', 'stone'])

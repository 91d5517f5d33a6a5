import cmd
import traceback
from typing import Optional

from anagram_hash.config import AnagramConfig, KeyOptions
from anagram_hash.table import AnagramHashTable
from anagram_hash.word_sets import WordListUtils

__author__ = 'Aaron Hosford'
__all__ = [
    'AnagramCmd',
    'repl',
]


class AnagramCmd(cmd.Cmd):

    def __init__(self, table: AnagramHashTable = None, config: AnagramConfig = None, stdin=None,
                 stdout=None):
        cmd.Cmd.__init__(self, stdin=stdin, stdout=stdout)
        if stdin is not None:
            self.use_rawinput = False
        self._table = AnagramHashTable() if table is None else table
        self._key_options = KeyOptions(2)
        self._encoding = 'utf-8'
        self.prompt = '% '
        if config is not None:
            self._apply_config(config)

    @property
    def table(self) -> AnagramHashTable:
        return self._table

    @property
    def key_options(self) -> KeyOptions:
        return self._key_options

    def _print(self, *values) -> None:
        self.stdout.write(' '.join(str(value) for value in values) + '\n')

    def _apply_config(self, config: AnagramConfig) -> None:
        self._key_options = config.key_options
        self._encoding = config.encoding
        for file_path in config.word_list_files:
            self._load(file_path)

    def _load(self, file_path: str) -> None:
        before = self._table.word_count
        self._table.merge(AnagramHashTable.from_word_list(file_path, self._encoding))
        self._print("Added", self._table.word_count - before, "words from", file_path + ".")

    def onecmd(self, line):
        # noinspection PyBroadException
        try:
            return cmd.Cmd.onecmd(self, line)
        except Exception:
            traceback.print_exc(file=self.stdout)

    def emptyline(self):
        # Called when the user just hits enter with no input. Do nothing.
        return None

    def default(self, line):
        # Called when the command is unrecognized. By default, we assume
        # it's a word to look up.
        return self.do_get(line)

    def do_quit(self, line):
        """Exits the command line interpreter."""
        if line:
            self._print("'quit' command does not accept arguments.")
            return
        return True

    def do_exit(self, line):
        """Exits the command line interpreter."""
        if line:
            self._print("'exit' command does not accept arguments.")
            return
        return True

    def do_load(self, line):
        """Load a word list file and merge its words into the table."""
        if not line:
            self._print("No file path provided.")
            return
        self._load(line.strip())

    def do_config(self, line):
        """Load a configuration file, applying its listing bounds and loading its word lists."""
        if not line:
            self._print("No file path provided.")
            return
        self._apply_config(AnagramConfig(line.strip()))

    def do_save(self, line):
        """Save every word in the table to a word list file."""
        if not line:
            self._print("No file path provided.")
            return
        WordListUtils.save_table(line.strip(), self._table, self._encoding)
        self._print("Saved", self._table.word_count, "words to", line.strip() + ".")

    def do_push(self, line):
        """Add one or more space-separated words to the table."""
        words = line.split()
        if not words:
            self._print("No words provided.")
            return
        self._table.push(*words)

    def do_get(self, line):
        """Show the stored anagrams of a word, or every anagram set if no word is given."""
        word = line.strip()
        if not word:
            return self.do_sets('')
        anagrams = self._table.get(word)
        if anagrams is None:
            self._print("No anagrams of", repr(word) + ".")
        else:
            self._print(', '.join(anagrams))

    def do_key(self, line):
        """Show the anagram set filed under a key."""
        key = line.strip()
        if not key:
            self._print("No key provided.")
            return
        group = self._table.get(key, True)
        if group is None:
            self._print("No anagram set under", repr(key) + ".")
        else:
            self._print(', '.join(group))

    def do_alphagram(self, line):
        """Show the hash key (alphagram) of a word."""
        word = line.strip()
        if not word:
            self._print("No word provided.")
            return
        self._print(self._table.get_key(word))

    def do_keys(self, line):
        """List the keys whose anagram sets fall within the configured size bounds."""
        if line:
            self._print("'keys' command does not accept arguments.")
            return
        keys = self._table.keys(self._key_options)
        for key in keys:
            self._print("  " + key)
        self._print(len(keys), "keys listed.")

    def do_sets(self, line):
        """List every anagram set within the configured size bounds."""
        if line:
            self._print("'sets' command does not accept arguments.")
            return
        count = 0
        for key, group in self._table.iter_groups(self._key_options.min_size):
            if self._key_options.accepts(len(group)):
                self._print("  " + key + ": " + ', '.join(group))
                count += 1
        if not count:
            self._print("No anagram sets.")

    def do_count(self, line):
        """Show the number of keys and words in the table."""
        if line:
            self._print("'count' command does not accept arguments.")
            return
        self._print(len(self._table), "keys,", self._table.word_count, "words.")

    def do_clear(self, line):
        """Discard every word in the table."""
        if line:
            self._print("'clear' command does not accept arguments.")
            return
        self._table = AnagramHashTable()


def repl(table: Optional[AnagramHashTable] = None, config: Optional[AnagramConfig] = None):
    anagram_cmd = AnagramCmd(table, config)
    print('')
    anagram_cmd.cmdloop()

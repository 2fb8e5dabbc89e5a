import logging
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, TextIO, Union

from ..exceptions import IOFailure, InvalidWordListSize, MalformedEntry, MissingWordForIndex
from ..util.misc import parse_uint32

log = logging.getLogger(__name__)

DICE_SIDES = 6


class WordList:
    """
    Immutable mapping from dice keys to words.

    A list of 6^k words is indexed by k-digit decimal keys whose digits are the rolls 1-6,
    e.g. 23456 for a five dice list. ``dice_count`` is that k.
    """

    def __init__(self, entries: Mapping[int, str], dice_count: int):
        self._entries = MappingProxyType(dict(entries))
        self.dice_count = dice_count

    @classmethod
    def from_entries(cls, entries: Mapping[int, str]) -> "WordList":
        return cls(entries, dice_count_for_size(len(entries)))

    @property
    def size(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> Mapping[int, str]:
        return self._entries

    def lookup(self, key: int) -> str:
        try:
            return self._entries[key]
        except KeyError:
            raise MissingWordForIndex(key) from None

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key):
        return key in self._entries

    def __repr__(self):
        return f"WordList(size={self.size}, dice_count={self.dice_count})"


def dice_count_for_size(size: int) -> int:
    if size < DICE_SIDES:
        raise InvalidWordListSize(f"word list has {size} entries, expected a power of {DICE_SIDES}")
    dice_count = 0
    remaining = size
    while remaining % DICE_SIDES == 0:
        remaining //= DICE_SIDES
        dice_count += 1
    if remaining != 1:
        raise InvalidWordListSize(f"word list has {size} entries, expected a power of {DICE_SIDES}")
    return dice_count


def parse_wordlist(lines: Iterable[str]) -> Dict[int, str]:
    """
    Parse ``<key>\\t<word>`` lines into a dict.

    Fails on the first malformed line, no partial result is returned.
    A key that occurs more than once maps to its last word.
    """
    entries = {}
    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")
        key, tab, rest = line.partition("\t")
        if not tab:
            raise MalformedEntry(line_number, line, "missing tab separator")
        # extra tab separated fields after the word are ignored
        word = rest.split("\t", 1)[0]
        try:
            entries[parse_uint32(key)] = word
        except ValueError as e:
            raise MalformedEntry(line_number, line, str(e)) from e
    return entries


def read_wordlist(stream: TextIO) -> WordList:
    try:
        entries = parse_wordlist(stream)
    except (OSError, UnicodeDecodeError) as e:
        raise IOFailure(f"could not read word list: {e}") from e
    word_list = WordList.from_entries(entries)
    log.debug(f"loaded {word_list.size} words for {word_list.dice_count} dice")
    return word_list


def load_wordlist(path: Union[str, Path]) -> WordList:
    path = Path(path)
    log.debug(f"loading word list from {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return read_wordlist(f)
    except OSError as e:
        raise IOFailure(f"could not open word list {path}: {e}") from e

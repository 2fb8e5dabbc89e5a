import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

import gconf

from ..exceptions import MissingWordForIndex
from ..util.misc import format_error
from .remap import remap
from .sampler import sample
from .wordlist import WordList, load_wordlist

log = logging.getLogger(__name__)

SEPARATOR = " "
DEFAULT_WORDLIST = Path(__file__).parent.parent / "data" / "eff_large_wordlist.txt"


def pick_words(word_list: WordList, count: int, sampler: Callable[[int], int] = sample) -> List[str]:
    if count < 0:
        raise ValueError(f"word count must not be negative, got {count}")

    words = []
    for _ in range(count):
        key = remap(sampler(word_list.size), word_list.dice_count)
        try:
            words.append(word_list.lookup(key))
        except MissingWordForIndex as e:
            log.warning(f"skipping word: {format_error(e)}")
    return words


def assemble(word_list: WordList, count: int, sampler: Callable[[int], int] = sample) -> str:
    return SEPARATOR.join(pick_words(word_list, count, sampler))


def wordlist_path() -> Path:
    configured = gconf.get("wordlist.path", default=None)
    if not configured:
        return DEFAULT_WORDLIST
    path = Path(configured)
    if not path.is_absolute():
        path = Path.cwd() / path
    return path


def generate_passphrase(count: Optional[int] = None, path: Union[str, Path, None] = None) -> str:
    if count is None:
        count = int(gconf.get("passphrase.default_length", default=6))
    word_list = load_wordlist(path or wordlist_path())
    return assemble(word_list, count)

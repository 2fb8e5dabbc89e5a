import argparse
import logging
import sys
from typing import List, Optional

import gconf

from .app_factory import configure_logging, load_config
from .exceptions import ArgumentError, EntropySourceFailure, WordListError
from .service.passphrase import assemble, wordlist_path
from .service.wordlist import load_wordlist
from .util.misc import format_error, parse_uint32

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_WORDLIST_ERROR = 1
EXIT_ARGUMENT_ERROR = 2
EXIT_ENTROPY_ERROR = 3


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dicephrase",
        description="Generate a diceware passphrase from cryptographically secure random numbers",
    )
    parser.add_argument("count", nargs="?", help="number of words (default: from config, usually 6)")
    parser.add_argument("-w", "--wordlist", help="path to a tab separated dice word list")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    return parser


def parse_word_count(value: Optional[str]) -> int:
    if value is None:
        return int(gconf.get("passphrase.default_length", default=6))
    try:
        return parse_uint32(value)
    except ValueError as e:
        raise ArgumentError(f"invalid word count: {e}") from e


def main(argv: Optional[List[str]] = None) -> int:
    args = make_parser().parse_args(argv)
    load_config()
    configure_logging(args.verbose)

    try:
        count = parse_word_count(args.count)
    except ArgumentError as e:
        print(f"Error parsing argument: {format_error(e)}", file=sys.stderr)
        return EXIT_ARGUMENT_ERROR

    try:
        word_list = load_wordlist(args.wordlist or wordlist_path())
    except WordListError as e:
        print(f"Error loading wordlist: {format_error(e)}", file=sys.stderr)
        return EXIT_WORDLIST_ERROR

    try:
        passphrase = assemble(word_list, count)
    except EntropySourceFailure as e:
        log.critical(f"aborting, no passphrase generated: {format_error(e)}")
        return EXIT_ENTROPY_ERROR

    print(passphrase)
    return EXIT_OK

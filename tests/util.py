import itertools
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Dict


def make_entries(dice_count: int) -> Dict[int, str]:
	return {
		int(''.join(rolls)): 'w' + ''.join(rolls)
		for rolls in itertools.product('123456', repeat=dice_count)
	}


def write_wordlist(path: Path, entries: Dict[int, str]) -> Path:
	path.write_text(''.join(f'{key}\t{word}\n' for key, word in entries.items()), encoding='utf-8')
	return path


@contextmanager
def plain_root_logging():
	# pytest attaches its capture handlers to the root logger, which keeps basicConfig from
	# installing the stderr handler. Remove them for the duration and restore levels afterwards.
	root_logger = logging.getLogger()
	package_logger = logging.getLogger('dicephrase')
	handlers = root_logger.handlers[:]
	levels = root_logger.level, package_logger.level
	root_logger.handlers.clear()
	try:
		yield
	finally:
		for handler in root_logger.handlers[:]:
			root_logger.removeHandler(handler)
		root_logger.handlers[:] = handlers
		root_logger.setLevel(levels[0])
		package_logger.setLevel(levels[1])

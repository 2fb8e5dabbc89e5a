import logging
from logging import LogRecord
from pathlib import Path
from typing import List

import gconf
import pytest

from dicephrase.app_factory import load_config
from tests.util import make_entries, write_wordlist


@pytest.fixture(autouse=True, scope='session')
def setup_all():
	load_config()


@pytest.fixture(autouse=True)
def config_override(request):
	# Detects the variable named *config_override* of a test module
	module_override = getattr(request.module, 'config_override', {})

	# Detects the annotation named @pytest.mark.config_override of a test function
	function_override_mark = request.node.get_closest_marker('config_override')
	function_override = function_override_mark.args[0] if function_override_mark else {}

	with gconf.override_conf(module_override), gconf.override_conf(function_override):
		yield


@pytest.fixture
def wordlist_file(tmp_path) -> Path:
	path = write_wordlist(tmp_path / 'wordlist.txt', make_entries(2))
	with gconf.override_conf({'wordlist': {'path': str(path)}}):
		yield path


class MemoryLogHandler(logging.Handler):
	def __init__(self):
		super().__init__()
		self.records: List[LogRecord] = []

	def emit(self, record):
		self.records.append(record)


@pytest.fixture
def memory_logger():
	memory_handler = MemoryLogHandler()
	root_logger = logging.getLogger()
	root_logger.addHandler(memory_handler)
	yield memory_handler
	root_logger.removeHandler(memory_handler)


def pytest_configure(config):
	config.addinivalue_line('markers', 'config_override(dict): override gconf values for one test')

import logging
import os
import sys
from pathlib import Path

import gconf

log = logging.getLogger(__name__)

DEFAULT_CONFIG = Path(__file__).parent / "config.yml"


def load_config():
    gconf.set_env_prefix("DICEPHRASE")
    # Only load config if not already loaded (e.g., by test fixtures)
    try:
        gconf.get("log.levels")
        log.debug("Config already loaded, skipping config file load")
        return
    except KeyError:
        pass

    gconf.load(str(DEFAULT_CONFIG))
    if "CONFIG" in os.environ:
        for c in os.environ["CONFIG"].split(","):
            gconf.load(c)


def configure_logging(verbose: bool = False):
    # stdout is reserved for the passphrase
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    for module, level in gconf.get("log.levels").items():  # type: str, str
        logger = logging.getLogger() if module == "root" else logging.getLogger(module)
        logger.setLevel(getattr(logging, level.upper()))
        log.debug(f"set logger for {module} to {level.upper()}")
    if verbose:
        logging.getLogger("dicephrase").setLevel(logging.DEBUG)

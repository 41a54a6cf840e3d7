# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20261018v1
# ---------------------------------------------------------------------------
"""
Service logging.

Handlers, levels and formats are declared in etc/logging.conf.  That file
names its log file as ``%(log_file)s``; the real path is substituted here
before the text reaches fileConfig.  The log directory defaults to log/
under the project root and can be moved with LOG_DIR.

Usage:
    from core.logger import logger
"""

import configparser
import logging
import logging.config
from pathlib import Path

from core.config import settings

_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_CONF_PATH = _PROJECT_ROOT / "etc" / "logging.conf"


def _log_file() -> Path:
    log_dir = Path(settings.log_dir) if settings.log_dir else _PROJECT_ROOT / "log"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "app.log"


def _load(conf_path: Path, log_file: Path) -> None:
    text = conf_path.read_text(encoding="utf-8").replace("%(log_file)s", log_file.as_posix())

    # Raw: the format strings hold %(asctime)s and friends
    parser = configparser.RawConfigParser()
    parser.read_string(text)
    logging.config.fileConfig(parser, disable_existing_loggers=False)


_load(_CONF_PATH, _log_file())

logger = logging.getLogger("farm4u")
